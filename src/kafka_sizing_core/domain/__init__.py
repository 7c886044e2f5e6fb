"""
Domain Layer

Defines constants, entities, value objects and errors that form the core of
the sizing logic. Has no dependencies on external libraries.
"""

from kafka_sizing_core.domain.constants import (
    DEFAULT_ENV_SCALING,
    DOMAIN_CATALOG,
    ECKU_PRICING,
    ENVIRONMENTS,
    HOURS_PER_MONTH,
)
from kafka_sizing_core.domain.entities import (
    ClusterCost,
    ConnectorLineItem,
    CostRollup,
    DomainDefinition,
    DomainProfile,
    EnvironmentCost,
    EnvironmentSizingSummary,
)
from kafka_sizing_core.domain.errors import (
    NotFoundError,
    SizingError,
    ValidationError,
)
from kafka_sizing_core.domain.value_objects import (
    DEFAULT_PRICE_LIST,
    ClampNotice,
    ClusterTopology,
    PriceList,
    PricingTier,
    SizingResult,
)

__all__ = [
    # constants
    "DEFAULT_ENV_SCALING",
    "DOMAIN_CATALOG",
    "ECKU_PRICING",
    "ENVIRONMENTS",
    "HOURS_PER_MONTH",
    # entities
    "ClusterCost",
    "ConnectorLineItem",
    "CostRollup",
    "DomainDefinition",
    "DomainProfile",
    "EnvironmentCost",
    "EnvironmentSizingSummary",
    # errors
    "NotFoundError",
    "SizingError",
    "ValidationError",
    # value objects
    "DEFAULT_PRICE_LIST",
    "ClampNotice",
    "ClusterTopology",
    "PriceList",
    "PricingTier",
    "SizingResult",
]
