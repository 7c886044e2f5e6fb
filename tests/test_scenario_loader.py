"""
Unit tests for scenario_loader.py
"""

import json
from pathlib import Path

import pytest

from kafka_sizing_core.domain.errors import NotFoundError, ValidationError
from kafka_sizing_core.domain.value_objects import ClusterTopology
from kafka_sizing_core.scenario import default_inputs
from kafka_sizing_core.scenario_loader import (
    load_scenario,
    parse_scenario,
    save_scenario,
    scenario_to_dict,
)

DEFAULT_SCENARIO = Path(__file__).resolve().parents[1] / "scenarios" / "scenario_default.json"


class TestParseScenario:
    def test_empty_uses_defaults(self):
        inputs = parse_scenario({})
        assert inputs == default_inputs()

    def test_partial_profile(self):
        inputs = parse_scenario({"profiles": {"hols": {"enabled": False}}})
        assert inputs.profiles["hols"].enabled is False
        assert inputs.profiles["hols"].messages_per_sec == 100
        assert inputs.profiles["cust"].enabled is True

    def test_default_topology_argument(self):
        assert parse_scenario({}, default_topology="per-domain").topology is ClusterTopology.PER_DOMAIN
        assert parse_scenario({"topology": "unified"}, default_topology="per-domain").topology is ClusterTopology.UNIFIED

    def test_unknown_domain(self):
        with pytest.raises(NotFoundError):
            parse_scenario({"profiles": {"ops": {}}})

    def test_unknown_environment(self):
        with pytest.raises(NotFoundError):
            parse_scenario({"scaling": {"uat": 0.5}})

    def test_reject_invalid_value(self):
        with pytest.raises(ValidationError):
            parse_scenario({"profiles": {"cust": {"compression_ratio": 2}}})

    def test_clamp_collects_notices(self):
        inputs = parse_scenario(
            {
                "profiles": {"cust": {"compression_ratio": 2}},
                "scaling": {"dev": 0},
                "connectors": [{"name": "x", "monthly_cost": -5}],
            },
            policy="clamp",
        )
        assert inputs.profiles["cust"].compression_ratio == 1
        assert inputs.scaling["dev"] == 0.1
        assert inputs.connectors[0].monthly_cost == 0
        assert len(inputs.notices) == 3

    def test_connectors_get_index_ids(self):
        inputs = parse_scenario({"connectors": [{"name": "a"}, {"name": "b", "enabled": True}]})
        assert [c.id for c in inputs.connectors] == [0, 1]
        assert inputs.connectors[1].enabled is True

    def test_duplicate_connector_ids_rejected(self):
        data = {"connectors": [{"id": 3, "name": "a"}, {"id": 3, "name": "b"}]}
        with pytest.raises(ValidationError, match="duplicate"):
            parse_scenario(data)

    def test_explicit_connector_ids_kept(self):
        inputs = parse_scenario({"connectors": [{"id": 5, "name": "a"}, {"id": 2, "name": "b"}]})
        assert [c.id for c in inputs.connectors] == [5, 2]


class TestLoadSave:
    def test_load_default_scenario_file(self):
        inputs = load_scenario(DEFAULT_SCENARIO)
        assert inputs.topology is ClusterTopology.UNIFIED
        assert len(inputs.connectors) == 8
        assert [c.name for c in inputs.connectors if c.enabled] == ["Salesforce Source", "Snowflake Sink"]

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_scenario(tmp_path / "missing.json")

    def test_save_then_load(self, tmp_path):
        original = parse_scenario({
            "topology": "per-domain",
            "scaling": {"prd": 1.5},
            "profiles": {"comm": {"partitions": 3000, "enabled": False}},
        })
        path = tmp_path / "nested" / "scenario.json"
        save_scenario(original, path)
        assert load_scenario(path) == original

    def test_scenario_to_dict_shape(self):
        data = scenario_to_dict(default_inputs())
        assert list(data) == ["topology", "scaling", "profiles", "connectors"]
        assert data["topology"] == "unified"
        assert list(data["profiles"]) == ["cust", "comm", "corp", "aops", "hols"]
        json.dumps(data)
