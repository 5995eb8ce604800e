"""
Application state for an interactive analysis.

AnalysisSession holds the current Sample and the chart controls and is
passed explicitly to whatever drives it (a UI, a notebook, a script).
There is no module-level instance. KeyStore persists the optional AI
text-generation credential in a small JSON file.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable

from pystatlab.core.defaults import (
    API_KEY_NAME,
    DEFAULT_BINS,
    DEFAULT_FAMILY,
    DEFAULT_PIE_CATEGORIES,
    DEFAULT_SMOOTHING,
)
from pystatlab.core.exceptions import (
    EmptySampleError,
    PyStatLabError,
    ValidationError,
)
from pystatlab.core.sample import Sample
from pystatlab.core.validation import check_count, check_positive
from pystatlab.descriptive import describe, DescriptiveSolution
from pystatlab.estimation import estimate, get_family, EstimationSolution
from pystatlab.charts import (
    histogram,
    boxplot,
    density,
    pie_categories,
    ChartSolution,
)


class AnalysisSession:
    """
    Current sample plus the controls that shape the derived results.

    Every derived result is recomputed from the current sample on each
    call; nothing is cached between calls.

    Attributes:
        sample: Current Sample, or None.
        family: Distribution family used by estimates().
        bins: Histogram bin count.
        smoothing: Kernel density bandwidth multiplier.
        categories: Pie chart category count.
        error: Message of the last failed load, or None.
    """

    def __init__(
        self,
        *,
        family: str = DEFAULT_FAMILY,
        bins: int = DEFAULT_BINS,
        smoothing: float = DEFAULT_SMOOTHING,
        categories: int = DEFAULT_PIE_CATEGORIES,
    ):
        self.sample: Sample | None = None
        self.error: str | None = None
        self.family = get_family(family).name
        self.bins = check_count(bins, 'bins')
        self.smoothing = check_positive(smoothing, 'smoothing')
        self.categories = check_count(categories, 'categories')

    def load(self, factory: Callable[..., Sample], *args: Any, **kwargs: Any) -> bool:
        """
        Replace the current sample with ``factory(*args, **kwargs)``.

        On a PyStatLabError the previous sample is discarded, the message
        is kept in ``error`` and False is returned. Any other exception
        propagates.

        Example:
            session.load(Sample.from_file, 'scores.csv')
            session.load(generate, 'normal', 200, seed=1)
        """
        self.sample = None
        try:
            sample = factory(*args, **kwargs)
        except PyStatLabError as e:
            self.error = str(e)
            return False
        if not isinstance(sample, Sample):
            self.error = f"loader returned {type(sample).__name__}, expected Sample"
            return False
        self.sample = sample
        self.error = None
        return True

    def clear(self) -> None:
        self.sample = None
        self.error = None

    def configure(self, **settings: Any) -> None:
        """
        Update control values. Accepted keys: family, bins, smoothing, categories.

        All settings are validated before any is applied.
        """
        validators = {
            'family': lambda v: get_family(v).name,
            'bins': lambda v: check_count(v, 'bins'),
            'smoothing': lambda v: check_positive(v, 'smoothing'),
            'categories': lambda v: check_count(v, 'categories'),
        }
        unknown = sorted(set(settings) - set(validators))
        if unknown:
            raise ValidationError(
                f"unknown setting(s) {unknown}. Expected {list(validators)}."
            )
        validated = {key: validators[key](value) for key, value in settings.items()}
        for key, value in validated.items():
            setattr(self, key, value)

    def _require_sample(self) -> Sample:
        if self.sample is None:
            raise EmptySampleError("no sample loaded")
        return self.sample

    def statistics(self) -> DescriptiveSolution:
        return describe(self._require_sample())

    def estimates(self) -> EstimationSolution:
        return estimate(self._require_sample(), self.family)

    def histogram(self) -> ChartSolution:
        return histogram(self._require_sample(), self.bins)

    def boxplot(self) -> ChartSolution:
        return boxplot(self._require_sample())

    def density(self) -> ChartSolution:
        return density(self._require_sample(), self.smoothing)

    def pie(self) -> ChartSolution:
        return pie_categories(self._require_sample(), self.categories)

    def __repr__(self) -> str:
        n = self.sample.n if self.sample is not None else 0
        return (
            f"AnalysisSession(n={n}, family={self.family!r}, bins={self.bins}, "
            f"smoothing={self.smoothing}, categories={self.categories})"
        )


class KeyStore:
    """
    JSON-file key-value store.

    The file is read on every access and rewritten on every change.
    A missing file reads as an empty store.
    """

    def __init__(self, path: str | Path | None = None):
        if path is None:
            path = Path.home() / '.pystatlab' / 'store.json'
        self.path = Path(path)

    def _read(self) -> dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding='utf-8') or '{}')
        except json.JSONDecodeError as e:
            raise ValidationError(f"{self.path}: not a valid JSON store: {e}") from e
        if not isinstance(data, dict):
            raise ValidationError(f"{self.path}: expected a JSON object")
        return data

    def _write(self, data: dict[str, Any]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data, indent=2), encoding='utf-8')

    def get(self, key: str = API_KEY_NAME, default: Any = None) -> Any:
        return self._read().get(key, default)

    def set(self, value: str | None, key: str = API_KEY_NAME) -> None:
        """Store ``value`` under ``key``; an empty or None value removes the key."""
        data = self._read()
        value = value.strip() if isinstance(value, str) else value
        if value:
            data[key] = value
        else:
            data.pop(key, None)
        self._write(data)
