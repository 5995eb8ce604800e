"""
Core protocols for PyStatLab.

Structural interface that every domain backend (descriptive, estimation,
charts) satisfies. We use Protocol (structural typing) rather than ABC so
backends stay plain classes.
"""

from typing import Protocol, Any, runtime_checkable


@runtime_checkable
class Backend(Protocol):
    """
    Protocol for computational backends.

    A backend takes a Sample plus keyword options and produces a
    Result envelope around a domain-specific parameter payload.

    Backends are stateless: all configuration is passed to solve(),
    so the same input always yields the same Result.
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Convention: '{device}_{domain}'
        Examples: 'cpu_descriptive', 'cpu_estimation', 'cpu_charts'
        """
        ...

    def solve(self, sample: Any, **options: Any) -> Any:
        """
        Execute the computation.

        Raises:
            ValidationError: If options are invalid for this backend
            NumericalError: If the sample is too degenerate to produce a result
        """
        ...
