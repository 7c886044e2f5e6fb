"""
Unit tests for viewer.py input widgets
"""

import pytest

pytest.importorskip("streamlit")
pytest.importorskip("plotly")

from kafka_sizing_core.domain.entities import CONNECTOR_COST_RULE, PROFILE_FIELD_RULES, SCALING_RULE
from kafka_sizing_core.viewer import _rule_input


class RecordingContainer:
    """Stands in for a Streamlit column and returns the widget's initial value"""

    def __init__(self):
        self.calls = []

    def number_input(self, label, **kwargs):
        self.calls.append(("number_input", label, kwargs))
        return kwargs["value"]

    def selectbox(self, label, options, index, **kwargs):
        self.calls.append(("selectbox", label, {"options": options, "index": index, **kwargs}))
        return options[index]


def _widget(rule, value):
    container = RecordingContainer()
    returned = _rule_input(container, "label", rule, value, key="k")
    kind, _, kwargs = container.calls[0]
    return returned, kind, kwargs


class TestRuleInput:
    def test_fractional_rate_not_truncated(self):
        returned, kind, kwargs = _widget(PROFILE_FIELD_RULES["messages_per_sec"], 100.7)
        assert kind == "number_input"
        assert returned == 100.7

    def test_small_rate_within_bounds(self):
        returned, _, kwargs = _widget(PROFILE_FIELD_RULES["messages_per_sec"], 0.5)
        assert returned == 0.5
        assert 0 < kwargs["min_value"] <= 0.5

    def test_low_compression_ratio_within_bounds(self):
        returned, _, kwargs = _widget(PROFILE_FIELD_RULES["compression_ratio"], 0.05)
        assert returned == 0.05
        assert kwargs["min_value"] <= 0.05
        assert kwargs["max_value"] == 1.0

    def test_tiny_value_below_step_within_bounds(self):
        returned, _, kwargs = _widget(PROFILE_FIELD_RULES["message_size_kb"], 1e-9)
        assert kwargs["min_value"] <= returned

    def test_integer_field(self):
        returned, _, kwargs = _widget(PROFILE_FIELD_RULES["partitions"], 3000)
        assert returned == 3000
        assert kwargs["min_value"] == 1
        assert kwargs["step"] == 1

    def test_allowed_values_use_select(self):
        returned, kind, kwargs = _widget(PROFILE_FIELD_RULES["replication_factor"], 5)
        assert kind == "selectbox"
        assert kwargs["options"] == [1, 3, 5]
        assert returned == 5

    def test_scaling_bounds(self):
        _, _, kwargs = _widget(SCALING_RULE, 0.7)
        assert kwargs["min_value"] == 0.1
        assert kwargs["max_value"] == 2.0

    def test_connector_cost_allows_zero(self):
        returned, _, kwargs = _widget(CONNECTOR_COST_RULE, 0)
        assert kwargs["min_value"] == 0.0
        assert returned == 0.0
