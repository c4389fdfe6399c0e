"""Fit/result protocol shared by the wine toolbox analyzers."""

from abc import ABC, abstractmethod
from typing import Any


class BaseAnalyser(ABC):
    """Two-step analyzer: ``fit()`` computes, ``result()`` hands back a frozen dataclass.

    Contract for subclasses:

    - the constructor takes a :class:`~wine_tlbx.data.views.DatasetView` (plus the
      category labels where the analysis is per category) and validates its inputs;
    - ``fit()`` never mutates ``view.df`` and returns ``self`` so calls chain;
    - ``result()`` raises ``ValueError("Must call fit() before result()")`` until fitted.

    The arithmetic lives in module-level functions (``categorize``,
    ``summarize_feature``, ``rank_features``) that also work on bare Series;
    analyzers only bind them to a view. To add one, write the pure function and
    result dataclass first, wrap them in a subclass, then expose a lazily imported
    ``make_<name>()`` factory on :class:`~wine_tlbx.data.base_dataset.BaseDataset`
    that builds its view through ``analyzer_view()``.
    """

    @abstractmethod
    def fit(self) -> "BaseAnalyser":
        """Run the analysis and return ``self``."""
        ...

    @abstractmethod
    def result(self) -> Any:
        """Frozen result of the last ``fit()``.

        Raises:
            ValueError: If called before ``fit()``.
        """
        ...
