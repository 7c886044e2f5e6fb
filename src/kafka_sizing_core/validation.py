"""
Input validation policy

Applies the configured policy to raw input values before they reach the
sizing engine:

- reject: the first out-of-domain value raises ValidationError
- clamp:  out-of-domain values are replaced by the nearest valid value,
          and every replacement is reported as a ClampNotice and logged
"""

from __future__ import annotations

import logging

from kafka_sizing_core.domain.entities import (
    CONNECTOR_COST_RULE,
    PROFILE_FIELD_RULES,
    SCALING_RULE,
    ConnectorLineItem,
    DomainProfile,
)
from kafka_sizing_core.domain.errors import NotFoundError, ValidationError
from kafka_sizing_core.domain.value_objects import ClampNotice, FieldRule
from kafka_sizing_core.sizing_config import VALIDATION_POLICIES

logger = logging.getLogger(__name__)


def _check_policy(policy: str) -> None:
    if policy not in VALIDATION_POLICIES:
        raise ValueError(f"Unknown validation policy: {policy} (available: {list(VALIDATION_POLICIES)})")


def apply_rule(
    rule: FieldRule,
    value: object,
    policy: str = "reject",
    *,
    label: str | None = None,
) -> tuple[float | int, ClampNotice | None]:
    """
    Validate a single value against its rule under the given policy

    Args:
        rule: Field rule describing the declared domain
        value: Raw value
        policy: "reject" or "clamp"
        label: Field label used in errors and notices (default: rule name)

    Returns:
        (accepted value, ClampNotice or None)

    Raises:
        ValidationError: Under the reject policy when the value is out of domain
    """
    _check_policy(policy)
    name = label or rule.name
    reason = rule.violation(value)
    if reason is None:
        return value, None
    if policy == "reject":
        raise ValidationError(name, value, reason)

    clamped = rule.clamp(value)
    logger.warning("Clamped '%s' from %r to %r (%s)", name, value, clamped, reason)
    return clamped, ClampNotice(field=name, original=value, clamped=clamped)


def coerce_profile(
    data: dict,
    policy: str = "reject",
    *,
    domain_key: str | None = None,
) -> tuple[DomainProfile, list[ClampNotice]]:
    """
    Build a DomainProfile from raw field values

    Missing fields take their defaults.

    Args:
        data: Raw field values (keys are DomainProfile field names)
        policy: "reject" or "clamp"
        domain_key: Domain key used to label errors and notices

    Returns:
        (DomainProfile, list of ClampNotice)

    Raises:
        NotFoundError: If data contains an unknown field
        ValidationError: Under the reject policy when a value is out of domain
    """
    known = set(PROFILE_FIELD_RULES) | {"enabled"}
    for name in data:
        if name not in known:
            raise NotFoundError("profile field", name, sorted(known))

    prefix = f"{domain_key}." if domain_key else ""
    values: dict = {}
    notices: list[ClampNotice] = []
    for name, rule in PROFILE_FIELD_RULES.items():
        if name not in data:
            continue
        value, notice = apply_rule(rule, data[name], policy, label=prefix + name)
        values[name] = value
        if notice is not None:
            notices.append(notice)

    if "enabled" in data:
        enabled = data["enabled"]
        if not isinstance(enabled, bool):
            raise ValidationError(prefix + "enabled", enabled, "must be a bool")
        values["enabled"] = enabled

    return DomainProfile(**values), notices


def coerce_scaling(
    env: str,
    value: object,
    policy: str = "reject",
) -> tuple[float, ClampNotice | None]:
    """
    Validate one environment scaling factor

    The declared domain is the recommended range [0.1, 2.0].
    """
    return apply_rule(SCALING_RULE, value, policy, label=f"scaling.{env}")


def coerce_connector(
    data: dict,
    policy: str = "reject",
) -> tuple[ConnectorLineItem, list[ClampNotice]]:
    """
    Build a ConnectorLineItem from raw values

    Args:
        data: {"id": int, "name": str, "enabled": bool, "monthly_cost": float}
        policy: "reject" or "clamp"

    Returns:
        (ConnectorLineItem, list of ClampNotice)
    """
    if "id" not in data:
        raise ValidationError("connector.id", None, "missing")
    connector_id = data["id"]
    if isinstance(connector_id, bool) or not isinstance(connector_id, int):
        raise ValidationError("connector.id", connector_id, "must be an integer")

    notices: list[ClampNotice] = []
    monthly_cost = data.get("monthly_cost", 0.0)
    monthly_cost, notice = apply_rule(
        CONNECTOR_COST_RULE, monthly_cost, policy, label=f"connector[{connector_id}].monthly_cost"
    )
    if notice is not None:
        notices.append(notice)

    enabled = data.get("enabled", False)
    if not isinstance(enabled, bool):
        raise ValidationError(f"connector[{connector_id}].enabled", enabled, "must be a bool")

    connector = ConnectorLineItem(
        id=connector_id,
        name=str(data.get("name", f"Connector {connector_id + 1}")),
        enabled=enabled,
        monthly_cost=monthly_cost,
    )
    return connector, notices
