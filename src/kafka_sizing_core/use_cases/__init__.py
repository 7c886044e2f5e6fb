"""
Use Cases Layer

Aggregates business logic and provides use cases called from the runner
and the viewer.
"""

from kafka_sizing_core.use_cases.sizing_matrix import (
    SizingMatrix,
    build_sizing_matrix,
    summarize_sizing,
    sizing_dataframe,
)
from kafka_sizing_core.use_cases.cost_rollup import (
    build_cost_rollup,
    build_environment_cost,
    connector_total,
    cost_dataframe,
    monthly_cost,
)
from kafka_sizing_core.use_cases.estimate import (
    Estimate,
    estimate,
)

__all__ = [
    # sizing_matrix
    "SizingMatrix",
    "build_sizing_matrix",
    "summarize_sizing",
    "sizing_dataframe",
    # cost_rollup
    "build_cost_rollup",
    "build_environment_cost",
    "connector_total",
    "cost_dataframe",
    "monthly_cost",
    # estimate
    "Estimate",
    "estimate",
]
