"""
Capacity Model

Converts one domain's traffic profile and one environment's scaling factor
into throughput, storage and the capacity units (ECKU) needed to carry them.
The bottleneck dimension determines the unit count.
"""

from functools import lru_cache
from math import ceil, isfinite

from kafka_sizing_core.domain.constants import (
    PARTITIONS_PER_UNIT,
    SECONDS_PER_DAY,
    STORAGE_GB_PER_UNIT,
    THROUGHPUT_MBPS_PER_UNIT,
)
from kafka_sizing_core.domain.entities import DomainProfile
from kafka_sizing_core.domain.errors import ValidationError
from kafka_sizing_core.domain.value_objects import SizingResult


def effective_messages_per_sec(profile: DomainProfile, scaling_factor: float) -> float:
    """Peak message rate after environment scaling"""
    return profile.messages_per_sec * scaling_factor * profile.peak_multiplier


def effective_message_size_kb(profile: DomainProfile) -> float:
    """Message size after compression"""
    return profile.message_size_kb * profile.compression_ratio


def throughput_mbps(profile: DomainProfile, scaling_factor: float) -> float:
    """
    Calculate throughput

    Throughput (MB/s) = effective messages/s * effective size (KB) / 1024
    """
    return (
        effective_messages_per_sec(profile, scaling_factor)
        * effective_message_size_kb(profile)
    ) / 1024


def storage_gb(profile: DomainProfile, scaling_factor: float) -> float:
    """
    Calculate retained storage including replication

    Storage (GB) = effective messages/s * effective size (KB)
                   * retention days * 86400 * replication factor / 1024^2
    """
    return (
        effective_messages_per_sec(profile, scaling_factor)
        * effective_message_size_kb(profile)
        * profile.retention_days
        * SECONDS_PER_DAY
        * profile.replication_factor
    ) / (1024 * 1024)


def capacity_units(throughput: float, storage: float, partitions: int) -> int:
    """
    Capacity units required by the bottleneck dimension

    1 unit handles 10 MB/s throughput, 100 GB storage and 1000 partitions.
    A floor of 1 unit always applies.

    Args:
        throughput: Throughput (MB/s)
        storage: Storage (GB)
        partitions: Partition count

    Returns:
        Capacity units (>= 1)
    """
    throughput_units = ceil(throughput / THROUGHPUT_MBPS_PER_UNIT)
    storage_units = ceil(storage / STORAGE_GB_PER_UNIT)
    partition_units = ceil(partitions / PARTITIONS_PER_UNIT)
    return max(throughput_units, storage_units, partition_units, 1)


def compute_capacity(profile: DomainProfile, scaling_factor: float) -> SizingResult:
    """
    Size one domain in one environment

    Args:
        profile: Domain traffic profile
        scaling_factor: Environment scaling factor (> 0)

    Returns:
        SizingResult (capacity units, throughput, storage)

    Raises:
        ValidationError: If the scaling factor is not a positive number
    """
    if (
        isinstance(scaling_factor, bool)
        or not isinstance(scaling_factor, (int, float))
        or not isfinite(scaling_factor)
        or scaling_factor <= 0
    ):
        raise ValidationError("scaling_factor", scaling_factor, "must be > 0")
    return _compute_capacity(profile, float(scaling_factor))


@lru_cache(maxsize=1024)
def _compute_capacity(profile: DomainProfile, scaling_factor: float) -> SizingResult:
    throughput = throughput_mbps(profile, scaling_factor)
    storage = storage_gb(profile, scaling_factor)
    return SizingResult(
        capacity_units=capacity_units(throughput, storage, profile.partitions),
        throughput_mbps=throughput,
        storage_gb=storage,
    )
