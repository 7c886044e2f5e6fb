"""
Domain Value Objects

Defines immutable data structures representing values such as sizing results,
pricing tiers, price lists and field validation rules.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

from kafka_sizing_core.domain.constants import ECKU_PRICING
from kafka_sizing_core.domain.errors import ValidationError


class ClusterTopology(str, Enum):
    """How capacity units are grouped into billable clusters"""
    UNIFIED = "unified"
    PER_DOMAIN = "per-domain"

    @property
    def label(self) -> str:
        return "Single Cluster" if self is ClusterTopology.UNIFIED else "Cluster per Domain"

    @classmethod
    def parse(cls, value: "str | ClusterTopology") -> "ClusterTopology":
        """Accept an enum member or its value ("single" is accepted as an alias of unified)"""
        if isinstance(value, cls):
            return value
        normalized = str(value).strip().lower().replace("_", "-")
        if normalized == "single":
            return cls.UNIFIED
        try:
            return cls(normalized)
        except ValueError:
            raise ValidationError(
                "topology", value, f"must be one of {[t.value for t in cls]}"
            ) from None


class PricingTier(str, Enum):
    """Pricing plan (ordered from cheapest to most expensive)"""
    BASIC = "basic"
    STANDARD = "standard"
    DEDICATED = "dedicated"

    @property
    def label(self) -> str:
        return self.value.capitalize()


@dataclass(frozen=True)
class SizingResult:
    """Capacity required by one domain in one environment"""
    capacity_units: int
    throughput_mbps: float
    storage_gb: float


@dataclass(frozen=True)
class PriceList:
    """Hourly rate per capacity unit for each tier"""
    basic: float
    standard: float
    dedicated: float

    def __post_init__(self):
        for tier in PricingTier:
            rate = getattr(self, tier.value)
            if rate < 0:
                raise ValidationError(f"price.{tier.value}", rate, "must be non-negative")
        if not (self.basic <= self.standard <= self.dedicated):
            raise ValidationError(
                "price", (self.basic, self.standard, self.dedicated),
                "rates must be non-decreasing from basic to dedicated",
            )

    def rate(self, tier: PricingTier) -> float:
        return getattr(self, PricingTier(tier).value)

    def as_dict(self) -> dict[PricingTier, float]:
        return {tier: self.rate(tier) for tier in PricingTier}


DEFAULT_PRICE_LIST = PriceList(**ECKU_PRICING)


@dataclass(frozen=True)
class ClampNotice:
    """Record of a value replaced under the clamp validation policy"""
    field: str
    original: object
    clamped: float | int


@dataclass(frozen=True)
class FieldRule:
    """
    Declared domain of a numeric input field

    Used both to reject out-of-domain values and to clamp them to the
    nearest valid value.
    """
    name: str
    integer: bool = False
    minimum: float | None = None
    minimum_inclusive: bool = True
    maximum: float | None = None
    allowed: tuple | None = None
    fallback: float | int = 0

    def violation(self, value: object) -> str | None:
        """
        Describe why a value is outside the field's domain

        Returns:
            A reason string, or None if the value is valid
        """
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return "must be a number"
        if math.isnan(value) or math.isinf(value):
            return "must be a finite number"
        if self.integer and value != int(value):
            return "must be an integer"
        if self.allowed is not None and value not in self.allowed:
            return f"must be one of {list(self.allowed)}"
        if self.minimum is not None:
            if self.minimum_inclusive and value < self.minimum:
                return f"must be >= {self.minimum}"
            if not self.minimum_inclusive and value <= self.minimum:
                return f"must be > {self.minimum}"
        if self.maximum is not None and value > self.maximum:
            return f"must be <= {self.maximum}"
        return None

    def check(self, value: object) -> None:
        """Raise ValidationError if the value is outside the field's domain"""
        reason = self.violation(value)
        if reason is not None:
            raise ValidationError(self.name, value, reason)

    def clamp(self, value: object) -> float | int:
        """
        Return the nearest valid value

        Non-numeric, NaN and infinite values fall back to the field's fallback.
        A value at or below an exclusive lower bound also uses the fallback,
        since the bound itself is not valid.
        """
        if isinstance(value, str):
            try:
                value = float(value)
            except ValueError:
                return self.fallback
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return self.fallback
        if math.isnan(value) or math.isinf(value):
            return self.fallback

        if self.allowed is not None:
            # Nearest allowed value, ties resolved towards the larger one
            return min(self.allowed, key=lambda a: (abs(a - value), -a))

        clamped = value
        if self.integer:
            clamped = math.ceil(clamped)
        if self.minimum is not None:
            if self.minimum_inclusive and clamped < self.minimum:
                clamped = self.minimum
            elif not self.minimum_inclusive and clamped <= self.minimum:
                clamped = self.fallback
        if self.maximum is not None and clamped > self.maximum:
            clamped = self.maximum
        return int(clamped) if self.integer else clamped
