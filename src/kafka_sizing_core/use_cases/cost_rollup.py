"""
Cost Rollup

Groups sized domains into billable clusters according to the cluster
topology and prices them for every tier. Adds connector line items to the
grand totals.
"""

from __future__ import annotations

import logging
from typing import Iterable, Mapping

import pandas as pd

from kafka_sizing_core.domain.constants import ENVIRONMENTS, HOURS_PER_MONTH, UNIFIED_CLUSTER_NAME
from kafka_sizing_core.domain.entities import (
    ClusterCost,
    ConnectorLineItem,
    CostRollup,
    DomainProfile,
    EnvironmentCost,
)
from kafka_sizing_core.domain.value_objects import (
    DEFAULT_PRICE_LIST,
    ClusterTopology,
    PriceList,
    PricingTier,
    SizingResult,
)
from kafka_sizing_core.domain_registry import domain_keys, get_domain

logger = logging.getLogger(__name__)


def monthly_cost(capacity_units: int, hourly_rate: float) -> float:
    """
    Monthly cost of a number of capacity units

    Monthly cost = units * hourly rate * 24 * 30
    """
    return capacity_units * hourly_rate * HOURS_PER_MONTH


def price_cluster(
    cluster_name: str,
    capacity_units: int,
    prices: PriceList,
    domain_key: str | None = None,
) -> ClusterCost:
    """Build a ClusterCost priced for every tier"""
    return ClusterCost(
        cluster_name=cluster_name,
        capacity_units=capacity_units,
        monthly_cost={tier: monthly_cost(capacity_units, prices.rate(tier)) for tier in PricingTier},
        domain_key=domain_key,
    )


def cluster_name_for(domain_key: str) -> str:
    """Cluster name used for a domain under the per-domain topology"""
    return f"{get_domain(domain_key).display_name} Cluster"


def connector_total(connectors: Iterable[ConnectorLineItem]) -> float:
    """Sum of monthly costs of enabled connectors"""
    return sum(c.monthly_cost for c in connectors if c.enabled)


def _present_domains(
    results: Mapping[str, SizingResult],
    profiles: Mapping[str, DomainProfile] | None,
) -> list[str]:
    """Domains present in one environment, in registry order"""
    present = []
    for key in domain_keys():
        if key not in results:
            continue
        if profiles is not None and key in profiles and not profiles[key].enabled:
            continue
        present.append(key)
    return present


def build_environment_cost(
    env: str,
    results: Mapping[str, SizingResult],
    topology: ClusterTopology,
    prices: PriceList = DEFAULT_PRICE_LIST,
    profiles: Mapping[str, DomainProfile] | None = None,
) -> EnvironmentCost:
    """
    Clusters and per-tier totals of one environment

    An environment with no enabled domains yields no clusters and zero totals.
    """
    present = _present_domains(results, profiles)
    clusters: list[ClusterCost] = []

    if topology is ClusterTopology.UNIFIED:
        if present:
            total_units = sum(results[key].capacity_units for key in present)
            clusters.append(price_cluster(UNIFIED_CLUSTER_NAME, total_units, prices))
    else:
        for key in present:
            clusters.append(
                price_cluster(cluster_name_for(key), results[key].capacity_units, prices, domain_key=key)
            )

    totals = {tier: sum(c.monthly_cost[tier] for c in clusters) for tier in PricingTier}
    return EnvironmentCost(environment=env, clusters=clusters, totals=totals)


def build_cost_rollup(
    matrix: Mapping[str, Mapping[str, SizingResult]],
    topology: ClusterTopology | str,
    prices: PriceList = DEFAULT_PRICE_LIST,
    profiles: Mapping[str, DomainProfile] | None = None,
    connectors: Iterable[ConnectorLineItem] = (),
) -> CostRollup:
    """
    Price the sizing matrix for every environment and tier

    Args:
        matrix: {environment: {domain key: SizingResult}}
        topology: Cluster topology (unified or per-domain)
        prices: Hourly rate per capacity unit per tier
        profiles: Domain profiles; disabled domains are skipped when given
        connectors: Connector line items; enabled ones are added to every tier

    Returns:
        CostRollup
    """
    topology = ClusterTopology.parse(topology)
    connectors = list(connectors)

    environments = {
        env: build_environment_cost(env, matrix.get(env, {}), topology, prices, profiles)
        for env in ENVIRONMENTS
    }
    enabled_connectors = [c for c in connectors if c.enabled]
    connectors_cost = connector_total(connectors)

    grand_totals = {
        tier: sum(env_cost.totals[tier] for env_cost in environments.values()) + connectors_cost
        for tier in PricingTier
    }
    logger.debug(
        "Cost rollup (%s): %s",
        topology.value,
        ", ".join(f"{tier.value}={total:.2f}" for tier, total in grand_totals.items()),
    )

    return CostRollup(
        topology=topology,
        environments=environments,
        connectors=enabled_connectors,
        connector_total=connectors_cost,
        grand_totals=grand_totals,
    )


def cost_dataframe(rollup: CostRollup) -> pd.DataFrame:
    """
    Flatten the cost rollup into a DataFrame

    One row per (environment, cluster) in rollup order. Columns: environment,
    cluster, domain_key, capacity_units, and one monthly cost column per tier
    (cost_basic, cost_standard, cost_dedicated).
    """
    cost_columns = [f"cost_{tier.value}" for tier in PricingTier]
    rows = []
    for env, env_cost in rollup.environments.items():
        for cluster in env_cost.clusters:
            row = {
                "environment": env,
                "cluster": cluster.cluster_name,
                "domain_key": cluster.domain_key,
                "capacity_units": cluster.capacity_units,
            }
            for tier in PricingTier:
                row[f"cost_{tier.value}"] = cluster.monthly_cost[tier]
            rows.append(row)
    columns = ["environment", "cluster", "domain_key", "capacity_units"] + cost_columns
    return pd.DataFrame(rows, columns=columns)
