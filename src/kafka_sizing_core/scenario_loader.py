"""
Scenario Loader

Loads and saves sizing scenarios (SizingInputs) as JSON files.

Format:
    {
        "topology": "unified" | "per-domain",
        "scaling": {"dev": 0.1, "tst": 0.3, "pre": 0.7, "prd": 1.0},
        "profiles": {"cust": {"messages_per_sec": 100, ...}, ...},
        "connectors": [{"id": 0, "name": "...", "enabled": true, "monthly_cost": 100}]
    }

Every key is optional; missing entries take the defaults.
"""

from __future__ import annotations

import json
from dataclasses import asdict
from pathlib import Path

from kafka_sizing_core.domain.constants import DEFAULT_ENV_SCALING, ENVIRONMENTS
from kafka_sizing_core.domain.errors import NotFoundError, ValidationError
from kafka_sizing_core.domain.value_objects import ClusterTopology
from kafka_sizing_core.domain_registry import domain_keys, get_domain
from kafka_sizing_core.scenario import SizingInputs, default_connectors, default_profiles
from kafka_sizing_core.validation import coerce_connector, coerce_profile, coerce_scaling


def parse_scenario(
    data: dict,
    policy: str = "reject",
    default_topology: str = "unified",
) -> SizingInputs:
    """
    Create SizingInputs from scenario dictionary data

    Args:
        data: Scenario dictionary
        policy: Validation policy ("reject" or "clamp")
        default_topology: Topology used when the scenario does not set one

    Returns:
        SizingInputs

    Raises:
        NotFoundError: Unknown domain key or environment
        ValidationError: Out-of-domain value under the reject policy
            or duplicate connector id
    """
    notices = []

    profiles = default_profiles()
    for domain_key, raw_profile in data.get("profiles", {}).items():
        get_domain(domain_key)
        profile, profile_notices = coerce_profile(raw_profile, policy, domain_key=domain_key)
        profiles[domain_key] = profile
        notices.extend(profile_notices)

    scaling = dict(DEFAULT_ENV_SCALING)
    for env, factor in data.get("scaling", {}).items():
        if env not in ENVIRONMENTS:
            raise NotFoundError("environment", env, ENVIRONMENTS)
        value, notice = coerce_scaling(env, factor, policy)
        scaling[env] = value
        if notice is not None:
            notices.append(notice)

    if "connectors" in data:
        connectors = []
        for index, raw_connector in enumerate(data["connectors"]):
            raw_connector = {"id": index, **raw_connector}
            connector, connector_notices = coerce_connector(raw_connector, policy)
            if any(c.id == connector.id for c in connectors):
                raise ValidationError("connector.id", connector.id, "duplicate")
            connectors.append(connector)
            notices.extend(connector_notices)
    else:
        connectors = list(default_connectors())

    return SizingInputs(
        profiles=profiles,
        scaling=scaling,
        topology=ClusterTopology.parse(data.get("topology", default_topology)),
        connectors=tuple(connectors),
        notices=tuple(notices),
    )


def load_scenario(
    file_path: str | Path,
    policy: str = "reject",
    default_topology: str = "unified",
) -> SizingInputs:
    """
    Load a scenario JSON file

    Args:
        file_path: Path to the scenario JSON file
        policy: Validation policy ("reject" or "clamp")
        default_topology: Topology used when the scenario does not set one

    Returns:
        SizingInputs

    Raises:
        FileNotFoundError: If the file does not exist
        json.JSONDecodeError: If the file is not valid JSON
    """
    with open(file_path, "r", encoding="utf-8") as f:
        data = json.load(f)
    return parse_scenario(data, policy=policy, default_topology=default_topology)


def scenario_to_dict(inputs: SizingInputs) -> dict:
    """Convert SizingInputs to the scenario dictionary format"""
    return {
        "topology": inputs.topology.value,
        "scaling": {env: inputs.scaling[env] for env in ENVIRONMENTS if env in inputs.scaling},
        "profiles": {
            key: asdict(inputs.profiles[key]) for key in domain_keys() if key in inputs.profiles
        },
        "connectors": [asdict(c) for c in inputs.connectors],
    }


def save_scenario(inputs: SizingInputs, file_path: str | Path) -> None:
    """Save SizingInputs as a scenario JSON file"""
    path = Path(file_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(scenario_to_dict(inputs), f, indent=2, ensure_ascii=False)
