"""
Domain Entities

Defines the primary data structures used in sizing and cost estimation.
"""

from dataclasses import dataclass, field

from kafka_sizing_core.domain.constants import (
    ALLOWED_REPLICATION_FACTORS,
    DEFAULT_PROFILE,
    SCALING_RANGE,
)
from kafka_sizing_core.domain.errors import ValidationError
from kafka_sizing_core.domain.value_objects import ClusterTopology, FieldRule, PricingTier


# Declared domain of every numeric DomainProfile field.
# Fallbacks are used by the clamp policy for unparseable values.
PROFILE_FIELD_RULES = {
    "messages_per_sec": FieldRule("messages_per_sec", minimum=0, minimum_inclusive=False, fallback=1),
    "message_size_kb": FieldRule("message_size_kb", minimum=0, minimum_inclusive=False, fallback=0.1),
    "retention_days": FieldRule("retention_days", integer=True, minimum=1, fallback=1),
    "replication_factor": FieldRule(
        "replication_factor",
        integer=True,
        allowed=ALLOWED_REPLICATION_FACTORS,
        fallback=DEFAULT_PROFILE["replication_factor"],
    ),
    "partitions": FieldRule("partitions", integer=True, minimum=1, fallback=1),
    "peak_multiplier": FieldRule("peak_multiplier", minimum=1, fallback=1),
    "compression_ratio": FieldRule(
        "compression_ratio", minimum=0, minimum_inclusive=False, maximum=1, fallback=0.7
    ),
}

SCALING_RULE = FieldRule(
    "scaling_factor", minimum=SCALING_RANGE[0], maximum=SCALING_RANGE[1], fallback=SCALING_RANGE[0]
)

CONNECTOR_COST_RULE = FieldRule("monthly_cost", minimum=0, fallback=0.0)


@dataclass(frozen=True)
class DomainDefinition:
    """Business domain catalog entry"""
    key: str
    display_name: str
    subdomains: tuple[str, ...]


@dataclass(frozen=True)
class DomainProfile:
    """Traffic profile of one domain"""
    messages_per_sec: float = DEFAULT_PROFILE["messages_per_sec"]
    message_size_kb: float = DEFAULT_PROFILE["message_size_kb"]
    retention_days: int = DEFAULT_PROFILE["retention_days"]
    replication_factor: int = DEFAULT_PROFILE["replication_factor"]
    partitions: int = DEFAULT_PROFILE["partitions"]
    peak_multiplier: float = DEFAULT_PROFILE["peak_multiplier"]
    compression_ratio: float = DEFAULT_PROFILE["compression_ratio"]
    enabled: bool = DEFAULT_PROFILE["enabled"]

    def __post_init__(self):
        for name, rule in PROFILE_FIELD_RULES.items():
            rule.check(getattr(self, name))
        if not isinstance(self.enabled, bool):
            raise ValidationError("enabled", self.enabled, "must be a bool")


@dataclass(frozen=True)
class ConnectorLineItem:
    """Flat monthly cost line item (independent of domains and environments)"""
    id: int
    name: str
    enabled: bool = False
    monthly_cost: float = 0.0

    def __post_init__(self):
        CONNECTOR_COST_RULE.check(self.monthly_cost)


@dataclass(frozen=True)
class EnvironmentSizingSummary:
    """Sizing totals of one environment over its enabled domains"""
    environment: str
    total_capacity_units: int
    total_throughput_mbps: float
    total_storage_gb: float
    domain_count: int


@dataclass
class ClusterCost:
    """Billable cluster and its monthly cost per tier"""
    cluster_name: str
    capacity_units: int
    monthly_cost: dict[PricingTier, float]
    domain_key: str | None = None


@dataclass
class EnvironmentCost:
    """Clusters and per-tier totals of one environment"""
    environment: str
    clusters: list[ClusterCost] = field(default_factory=list)
    totals: dict[PricingTier, float] = field(
        default_factory=lambda: {tier: 0.0 for tier in PricingTier}
    )

    @property
    def capacity_units(self) -> int:
        return sum(c.capacity_units for c in self.clusters)


@dataclass
class CostRollup:
    """Cost of every environment plus connector and grand totals"""
    topology: ClusterTopology
    environments: dict[str, EnvironmentCost]
    connectors: list = field(default_factory=list)  # enabled ConnectorLineItem, input order
    connector_total: float = 0.0
    grand_totals: dict[PricingTier, float] = field(
        default_factory=lambda: {tier: 0.0 for tier in PricingTier}
    )
