"""Tests for domain constants"""

from kafka_sizing_core.domain.constants import (
    DEFAULT_ENV_SCALING,
    DEFAULT_PROFILE,
    DOMAIN_CATALOG,
    ECKU_PRICING,
    ENVIRONMENTS,
    HOURS_PER_MONTH,
)


def test_environments_fixed_order():
    """The four environments are fixed and ordered"""
    assert ENVIRONMENTS == ["dev", "tst", "pre", "prd"]


def test_every_environment_has_default_scaling():
    for env in ENVIRONMENTS:
        assert env in DEFAULT_ENV_SCALING
        assert 0.1 <= DEFAULT_ENV_SCALING[env] <= 2.0


def test_domain_catalog_keys():
    assert list(DOMAIN_CATALOG) == ["cust", "comm", "corp", "aops", "hols"]


def test_domain_catalog_entries_have_subdomains():
    for key, entry in DOMAIN_CATALOG.items():
        assert entry["name"], f"{key} missing name"
        assert len(entry["subdomains"]) > 0, f"{key} has no subdomains"


def test_pricing_is_monotonic():
    """Basic <= Standard <= Dedicated"""
    assert ECKU_PRICING["basic"] <= ECKU_PRICING["standard"] <= ECKU_PRICING["dedicated"]


def test_hours_per_month_convention():
    assert HOURS_PER_MONTH == 720


def test_default_profile_values():
    assert DEFAULT_PROFILE == {
        "messages_per_sec": 100,
        "message_size_kb": 1,
        "retention_days": 7,
        "replication_factor": 3,
        "partitions": 6,
        "peak_multiplier": 2,
        "compression_ratio": 0.7,
        "enabled": True,
    }
