"""Tests for the estimate use case"""

import pytest

from kafka_sizing_core.domain.errors import ValidationError
from kafka_sizing_core.domain.value_objects import ClusterTopology, PricingTier
from kafka_sizing_core.scenario import SizingInputs, default_inputs, with_connector, with_domain_field
from kafka_sizing_core.sizing_config import SizingConfig, ValidationConfig
from kafka_sizing_core.use_cases.estimate import estimate


class TestEstimate:
    def test_default_inputs(self):
        result = estimate(default_inputs())
        assert result.summary["prd"].total_capacity_units == 15
        assert result.rollup.topology is ClusterTopology.UNIFIED
        assert result.rollup.grand_totals[PricingTier.BASIC] == pytest.approx(3024.0)
        assert result.notices == []

    def test_per_domain_matches_unified_totals(self):
        unified = estimate(default_inputs("unified"))
        per_domain = estimate(default_inputs("per-domain"))
        for tier in PricingTier:
            assert per_domain.rollup.grand_totals[tier] == pytest.approx(unified.rollup.grand_totals[tier])

    def test_disabled_domain_absent_from_all_outputs(self):
        inputs = with_domain_field(default_inputs("per-domain"), "hols", "enabled", False)
        result = estimate(inputs)
        for env in result.matrix:
            assert "hols" not in result.matrix[env]
            assert "hols" not in [c.domain_key for c in result.rollup.environments[env].clusters]

    def test_connectors_flow_into_grand_totals(self):
        inputs = with_connector(default_inputs(), 0, enabled=True, monthly_cost=400)
        result = estimate(inputs)
        assert result.rollup.connector_total == 400
        assert result.rollup.grand_totals[PricingTier.STANDARD] == pytest.approx(4536.0 + 400)

    def test_reject_invalid_scaling_in_snapshot(self):
        inputs = SizingInputs(
            profiles=default_inputs().profiles,
            scaling={"dev": 0.0, "tst": 0.3, "pre": 0.7, "prd": 1.0},
        )
        with pytest.raises(ValidationError):
            estimate(inputs)

    def test_clamp_invalid_scaling_in_snapshot(self):
        inputs = SizingInputs(
            profiles=default_inputs().profiles,
            scaling={"dev": 0.0, "tst": 0.3, "pre": 0.7, "prd": 9.0},
        )
        config = SizingConfig(validation=ValidationConfig(policy="clamp"))
        result = estimate(inputs, config)
        assert {n.field for n in result.notices} == {"scaling.dev", "scaling.prd"}
        assert result.matrix["prd"]["cust"].capacity_units == 5

    def test_snapshot_notices_carried(self):
        inputs = with_domain_field(default_inputs(), "cust", "partitions", 0, policy="clamp")
        result = estimate(inputs)
        assert [n.field for n in result.notices] == ["cust.partitions"]

    def test_notice_dropped_once_field_is_valid(self):
        inputs = with_domain_field(default_inputs(), "cust", "partitions", 0, policy="clamp")
        inputs = with_domain_field(inputs, "cust", "partitions", 6, policy="clamp")
        assert estimate(inputs).notices == []
