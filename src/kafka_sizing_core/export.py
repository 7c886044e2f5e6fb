"""
CSV Export

Serializes a cost rollup into a flat CSV document.
"""

from __future__ import annotations

from pathlib import Path

import pandas as pd

from kafka_sizing_core.domain.constants import CURRENCY_SYMBOL, EXPORT_FILENAME, EXPORT_MIME_TYPE
from kafka_sizing_core.domain.entities import CostRollup
from kafka_sizing_core.domain.value_objects import PricingTier

CSV_HEADER = [
    "Environment",
    "Domain/Cluster",
    "CapacityUnits",
    "MonthlyCostBasic",
    "MonthlyCostStandard",
    "MonthlyCostDedicated",
]

__all__ = [
    "CSV_HEADER",
    "EXPORT_FILENAME",
    "EXPORT_MIME_TYPE",
    "format_money",
    "to_csv",
    "write_csv",
]


def format_money(value: float, currency_symbol: str = CURRENCY_SYMBOL) -> str:
    """Format a monetary value with a currency symbol and two decimals (e.g., "£259.20")"""
    return f"{currency_symbol}{value:.2f}"


def export_dataframe(rollup: CostRollup, currency_symbol: str = CURRENCY_SYMBOL) -> pd.DataFrame:
    """
    Build the export table

    One row per (environment, cluster) in rollup order, environment uppercased.
    """
    rows = []
    for env, env_cost in rollup.environments.items():
        for cluster in env_cost.clusters:
            rows.append([
                env.upper(),
                cluster.cluster_name,
                cluster.capacity_units,
                format_money(cluster.monthly_cost[PricingTier.BASIC], currency_symbol),
                format_money(cluster.monthly_cost[PricingTier.STANDARD], currency_symbol),
                format_money(cluster.monthly_cost[PricingTier.DEDICATED], currency_symbol),
            ])
    return pd.DataFrame(rows, columns=CSV_HEADER)


def to_csv(rollup: CostRollup, currency_symbol: str = CURRENCY_SYMBOL) -> str:
    """
    Serialize a cost rollup to CSV text

    Fields containing separators, quotes or newlines (e.g., free-text
    cluster names) are quoted by the CSV writer.

    Args:
        rollup: Cost rollup
        currency_symbol: Symbol prefixed to monetary values

    Returns:
        CSV text (header row + one row per cluster)
    """
    return export_dataframe(rollup, currency_symbol).to_csv(index=False, lineterminator="\n")


def write_csv(
    rollup: CostRollup,
    output_dir: str | Path,
    filename: str = EXPORT_FILENAME,
    currency_symbol: str = CURRENCY_SYMBOL,
) -> Path:
    """
    Write the CSV export to a file

    Returns:
        Path of the written file
    """
    path = Path(output_dir) / filename
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(to_csv(rollup, currency_symbol), encoding="utf-8")
    return path
