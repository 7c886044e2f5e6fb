"""
Estimate

Runs the full recomputation for one input snapshot:
scaling validation -> sizing matrix -> cost rollup.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from kafka_sizing_core.domain.constants import ENVIRONMENTS
from kafka_sizing_core.domain.entities import CostRollup, EnvironmentSizingSummary
from kafka_sizing_core.domain.value_objects import DEFAULT_PRICE_LIST, ClampNotice, PriceList
from kafka_sizing_core.scenario import SizingInputs
from kafka_sizing_core.sizing_config import SizingConfig
from kafka_sizing_core.use_cases.cost_rollup import build_cost_rollup
from kafka_sizing_core.use_cases.sizing_matrix import SizingMatrix, build_sizing_matrix, summarize_sizing
from kafka_sizing_core.validation import coerce_scaling

logger = logging.getLogger(__name__)


@dataclass
class Estimate:
    """Derived outputs of one input snapshot"""
    inputs: SizingInputs
    matrix: SizingMatrix
    summary: dict[str, EnvironmentSizingSummary]
    rollup: CostRollup
    notices: list[ClampNotice] = field(default_factory=list)


def estimate(
    inputs: SizingInputs,
    config: SizingConfig | None = None,
    prices: PriceList = DEFAULT_PRICE_LIST,
) -> Estimate:
    """
    Compute sizing and cost for an input snapshot

    Args:
        inputs: Input snapshot
        config: Engine configuration (validation policy); defaults apply when None
        prices: Hourly rate per capacity unit per tier

    Returns:
        Estimate

    Raises:
        ValidationError: Out-of-domain scaling factor under the reject policy
        NotFoundError: A registry domain has no profile
    """
    config = config or SizingConfig()
    policy = config.validation.policy

    notices = list(inputs.notices)
    scaling = {}
    for env in ENVIRONMENTS:
        if env not in inputs.scaling:
            continue
        value, notice = coerce_scaling(env, inputs.scaling[env], policy)
        scaling[env] = value
        if notice is not None:
            notices.append(notice)

    matrix = build_sizing_matrix(inputs.profiles, scaling)
    rollup = build_cost_rollup(
        matrix,
        inputs.topology,
        prices=prices,
        profiles=inputs.profiles,
        connectors=inputs.connectors,
    )
    if notices:
        logger.info("Estimate computed with %d clamped value(s)", len(notices))

    return Estimate(
        inputs=inputs,
        matrix=matrix,
        summary=summarize_sizing(matrix),
        rollup=rollup,
        notices=notices,
    )
