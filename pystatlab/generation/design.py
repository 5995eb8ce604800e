"""
Design class for synthetic sample generation.

GeneratorDesign holds the family, size and parameters of one draw.
Immutable, validated at construction.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Mapping

from pystatlab.core.defaults import (
    DEFAULT_GENERATOR_SIZE,
    GENERATOR_MIN_SIZE,
    GENERATOR_MAX_SIZE,
)
from pystatlab.core.exceptions import ParameterConstraintError, ValidationError
from pystatlab.core.validation import check_positive, check_probability


# Family -> parameter defaults, in the order they are reported.
GENERATOR_DEFAULTS: dict[str, dict[str, float]] = {
    'normal': {'mean': 0.0, 'std': 1.0},
    'uniform': {'min': 0.0, 'max': 1.0},
    'exponential': {'lam': 1.0},
    'poisson': {'rate': 1.0},
    'binomial': {'trials': 10, 'probability': 0.5},
    'gamma': {'shape': 2.0, 'scale': 1.0},
    'beta': {'alpha': 2.0, 'beta': 2.0},
}


def _check_integer(value: Any, name: str) -> int:
    try:
        integral = not isinstance(value, bool) and float(value).is_integer()
    except (TypeError, ValueError):
        integral = False
    if not integral:
        raise ParameterConstraintError(
            f"{name} must be an integer, got {value!r}", parameter=name, value=value,
        )
    return int(value)


def _check_size(size: Any) -> int:
    size = _check_integer(size, 'size')
    if not GENERATOR_MIN_SIZE <= size <= GENERATOR_MAX_SIZE:
        raise ParameterConstraintError(
            f"size must be between {GENERATOR_MIN_SIZE} and {GENERATOR_MAX_SIZE}, got {size}",
            parameter='size', value=size,
        )
    return size


def _check_params(family: str, params: dict[str, Any]) -> None:
    if family == 'normal':
        check_positive(params['std'], 'std')
    elif family == 'uniform':
        if not float(params['max']) > float(params['min']):
            raise ParameterConstraintError(
                f"max must be greater than min, got min={params['min']}, max={params['max']}",
                parameter='max', value=params['max'],
            )
    elif family == 'exponential':
        check_positive(params['lam'], 'lam')
    elif family == 'poisson':
        check_positive(params['rate'], 'rate')
    elif family == 'binomial':
        trials = _check_integer(params['trials'], 'trials')
        if trials <= 0:
            raise ParameterConstraintError(
                f"trials must be greater than 0, got {trials}",
                parameter='trials', value=trials,
            )
        params['trials'] = trials
        check_probability(params['probability'], 'probability')
    elif family == 'gamma':
        check_positive(params['shape'], 'shape')
        check_positive(params['scale'], 'scale')
    elif family == 'beta':
        check_positive(params['alpha'], 'alpha')
        check_positive(params['beta'], 'beta')


@dataclass(frozen=True)
class GeneratorDesign:
    """
    Frozen design for one synthetic draw.

    Attributes:
        family: Distribution family name (lower case).
        size: Number of observations, in [10, 1000].
        params: Family parameters with defaults filled in (read-only).
    """
    family: str
    size: int
    params: Mapping[str, float]

    @classmethod
    def for_family(
        cls,
        family: str,
        size: int = DEFAULT_GENERATOR_SIZE,
        **params: Any,
    ) -> GeneratorDesign:
        """
        Create a generator design with validation.

        Args:
            family: 'normal', 'uniform', 'exponential', 'poisson',
                'binomial', 'gamma' or 'beta'.
            size: Number of observations.
            **params: Family parameters; missing ones take their defaults.

        Returns:
            Validated GeneratorDesign.

        Raises:
            ValidationError: Unknown family or parameter name.
            ParameterConstraintError: Parameter or size out of range.
        """
        if not isinstance(family, str) or family.lower() not in GENERATOR_DEFAULTS:
            raise ValidationError(
                f"Unknown family: {family!r}. Must be one of {tuple(GENERATOR_DEFAULTS)}."
            )
        family = family.lower()
        defaults = GENERATOR_DEFAULTS[family]

        unknown = sorted(set(params) - set(defaults))
        if unknown:
            raise ValidationError(
                f"{family}: unknown parameter(s) {unknown}. Expected {list(defaults)}."
            )

        merged = {**defaults, **params}
        _check_params(family, merged)

        return cls(
            family=family,
            size=_check_size(size),
            params=MappingProxyType(merged),
        )
