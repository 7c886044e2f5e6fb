"""
Sizing Matrix

Applies the capacity model to every (environment, domain) pair.
"""

from __future__ import annotations

import logging
from typing import Mapping

import pandas as pd

from kafka_sizing_core.capacity_model import compute_capacity
from kafka_sizing_core.domain.constants import ENVIRONMENTS
from kafka_sizing_core.domain.entities import DomainProfile, EnvironmentSizingSummary
from kafka_sizing_core.domain.errors import NotFoundError, ValidationError
from kafka_sizing_core.domain.value_objects import SizingResult
from kafka_sizing_core.domain_registry import domain_keys, get_domain

logger = logging.getLogger(__name__)

SizingMatrix = dict[str, dict[str, SizingResult]]


def build_sizing_matrix(
    profiles: Mapping[str, DomainProfile],
    scaling: Mapping[str, float],
) -> SizingMatrix:
    """
    Build the full sizing matrix

    Environments are visited in fixed order and domains in registry order.
    Disabled domains are absent from every environment (not zeroed).
    The matrix is rebuilt from scratch on every call.

    Args:
        profiles: {domain key: DomainProfile} (one per registry domain)
        scaling: {environment: scaling factor} (one per fixed environment)

    Returns:
        {environment: {domain key: SizingResult}}

    Raises:
        NotFoundError: If a registry domain has no profile
        ValidationError: If a fixed environment has no scaling factor
    """
    # Snapshot the inputs before computing
    profiles = dict(profiles)
    scaling = dict(scaling)

    for key in domain_keys():
        if key not in profiles:
            raise NotFoundError("profile", key, list(profiles))

    matrix: SizingMatrix = {}
    for env in ENVIRONMENTS:
        if env not in scaling:
            raise ValidationError(f"scaling.{env}", None, "missing scaling factor")
        factor = scaling[env]
        matrix[env] = {}
        for key in domain_keys():
            profile = profiles[key]
            if not profile.enabled:
                continue
            matrix[env][key] = compute_capacity(profile, factor)
        logger.debug(
            "Sized %s (scaling %s): %d domain(s), %d unit(s)",
            env, factor, len(matrix[env]),
            sum(r.capacity_units for r in matrix[env].values()),
        )
    return matrix


def summarize_sizing(matrix: SizingMatrix) -> dict[str, EnvironmentSizingSummary]:
    """
    Totals of units, throughput and storage per environment

    Args:
        matrix: Sizing matrix from build_sizing_matrix

    Returns:
        {environment: EnvironmentSizingSummary}
    """
    summaries = {}
    for env, results in matrix.items():
        summaries[env] = EnvironmentSizingSummary(
            environment=env,
            total_capacity_units=sum(r.capacity_units for r in results.values()),
            total_throughput_mbps=sum(r.throughput_mbps for r in results.values()),
            total_storage_gb=sum(r.storage_gb for r in results.values()),
            domain_count=len(results),
        )
    return summaries


def sizing_dataframe(matrix: SizingMatrix) -> pd.DataFrame:
    """
    Flatten the sizing matrix into a DataFrame

    Columns: environment, domain_key, domain, capacity_units,
    throughput_mbps, storage_gb (one row per present domain).
    """
    rows = []
    for env, results in matrix.items():
        for key, result in results.items():
            rows.append({
                "environment": env,
                "domain_key": key,
                "domain": get_domain(key).display_name,
                "capacity_units": result.capacity_units,
                "throughput_mbps": result.throughput_mbps,
                "storage_gb": result.storage_gb,
            })
    columns = ["environment", "domain_key", "domain", "capacity_units", "throughput_mbps", "storage_gb"]
    return pd.DataFrame(rows, columns=columns)
