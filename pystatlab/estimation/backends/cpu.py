"""
CPU backend for distribution parameter estimation.
"""

from __future__ import annotations

import numpy as np

from pystatlab.core.result import Result
from pystatlab.core.sample import Sample
from pystatlab.core.compute.timing import Timer
from pystatlab.estimation.families import DistributionFamily
from pystatlab.estimation._common import ParameterEstimate, EstimationParams


class CPUEstimationBackend:
    """Runs a family's MLE and MoM estimators and compares them per parameter."""

    @property
    def name(self) -> str:
        return 'cpu_estimation'

    def solve(self, sample: Sample, *, family: DistributionFamily) -> Result[EstimationParams]:
        timer = Timer()
        timer.start()

        x = sample.values
        warnings_list: list[str] = []

        with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
            with timer.section('mle'):
                mle = family.estimate_mle(x)
            with timer.section('mom'):
                mom = family.estimate_mom(x)

        with timer.section('compare'):
            estimates = tuple(
                ParameterEstimate.compare(param, mle[param], mom[param])
                for param in family.parameters
            )

        if family.mle_is_moment_matching:
            warnings_list.append(
                f"{family.name}: reported MLE is moment matching, not likelihood "
                f"maximisation; use fit_mle() for a likelihood fit"
            )
        support = family.support_warning(x)
        if support is not None:
            warnings_list.append(support)
        non_finite = [e.name for e in estimates if not (np.isfinite(e.mle) and np.isfinite(e.mom))]
        if non_finite:
            warnings_list.append(
                f"non-finite estimates for {', '.join(non_finite)}"
            )

        timer.stop()

        params = EstimationParams(
            family=family.name,
            label=family.label,
            estimates=estimates,
            mle_is_moment_matching=family.mle_is_moment_matching,
        )

        return Result(
            params=params,
            info={'family': family.name, 'n': sample.n, 'source': sample.source},
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )
