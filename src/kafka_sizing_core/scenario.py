"""
Sizing Inputs

Immutable snapshot of everything the engine reads: domain profiles,
environment scaling, cluster topology and connector line items.

Every mutation returns a new snapshot. The engine never holds a reference
into caller-owned mutable state.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field, replace

from kafka_sizing_core.domain.constants import (
    DEFAULT_CONNECTOR_MONTHLY_COST,
    DEFAULT_CONNECTOR_SLOTS,
    DEFAULT_ENV_SCALING,
    ENVIRONMENTS,
)
from kafka_sizing_core.domain.entities import ConnectorLineItem, DomainProfile
from kafka_sizing_core.domain.errors import NotFoundError
from kafka_sizing_core.domain.value_objects import ClampNotice, ClusterTopology
from kafka_sizing_core.domain_registry import domain_keys, get_domain
from kafka_sizing_core.validation import coerce_connector, coerce_profile, coerce_scaling


@dataclass(frozen=True)
class SizingInputs:
    """Snapshot of all engine inputs"""
    profiles: dict[str, DomainProfile]
    scaling: dict[str, float]
    topology: ClusterTopology = ClusterTopology.UNIFIED
    connectors: tuple[ConnectorLineItem, ...] = ()
    # Clamps applied while building this snapshot (clamp policy only)
    notices: tuple[ClampNotice, ...] = field(default=(), compare=False)

    def __post_init__(self):
        # Copy on construction so later changes to the caller's dicts are not observed
        object.__setattr__(self, "profiles", dict(self.profiles))
        object.__setattr__(self, "scaling", dict(self.scaling))
        object.__setattr__(self, "topology", ClusterTopology.parse(self.topology))
        object.__setattr__(self, "connectors", tuple(self.connectors))
        object.__setattr__(self, "notices", tuple(self.notices))

    def profile(self, domain_key: str) -> DomainProfile:
        get_domain(domain_key)
        try:
            return self.profiles[domain_key]
        except KeyError:
            raise NotFoundError("profile", domain_key, list(self.profiles)) from None

    def connector(self, connector_id: int) -> ConnectorLineItem:
        for c in self.connectors:
            if c.id == connector_id:
                return c
        raise NotFoundError("connector", connector_id, [c.id for c in self.connectors])


def _merge_notices(
    existing: tuple[ClampNotice, ...],
    overwritten: set[str],
    new: list[ClampNotice] | tuple[ClampNotice, ...],
) -> tuple[ClampNotice, ...]:
    """Drop notices for overwritten fields, then append the new ones"""
    kept = tuple(n for n in existing if n.field not in overwritten)
    return kept + tuple(new)


def default_profiles() -> dict[str, DomainProfile]:
    """One default profile per registry domain"""
    return {key: DomainProfile() for key in domain_keys()}


def default_connectors(slots: int = DEFAULT_CONNECTOR_SLOTS) -> tuple[ConnectorLineItem, ...]:
    """Disabled connector slots named "Connector 1".."Connector N" """
    return tuple(
        ConnectorLineItem(
            id=i,
            name=f"Connector {i + 1}",
            enabled=False,
            monthly_cost=DEFAULT_CONNECTOR_MONTHLY_COST,
        )
        for i in range(slots)
    )


def default_inputs(topology: ClusterTopology | str = ClusterTopology.UNIFIED) -> SizingInputs:
    """Snapshot with the default profiles, scaling and connector slots"""
    return SizingInputs(
        profiles=default_profiles(),
        scaling=dict(DEFAULT_ENV_SCALING),
        topology=ClusterTopology.parse(topology),
        connectors=default_connectors(),
    )


def with_domain_field(
    inputs: SizingInputs,
    domain_key: str,
    field_name: str,
    value: object,
    policy: str = "reject",
) -> SizingInputs:
    """
    Set one field of one domain profile

    Args:
        inputs: Current snapshot
        domain_key: Domain key (e.g., "cust")
        field_name: DomainProfile field name (e.g., "messages_per_sec")
        value: New value
        policy: Validation policy ("reject" or "clamp")

    Returns:
        New SizingInputs

    Raises:
        NotFoundError: Unknown domain key or field name
        ValidationError: Out-of-domain value under the reject policy
    """
    current = inputs.profile(domain_key)
    data = asdict(current)
    if field_name not in data:
        raise NotFoundError("profile field", field_name, list(data))
    data[field_name] = value
    profile, notices = coerce_profile(data, policy, domain_key=domain_key)

    profiles = dict(inputs.profiles)
    profiles[domain_key] = profile
    notices = _merge_notices(inputs.notices, {f"{domain_key}.{field_name}"}, notices)
    return replace(inputs, profiles=profiles, notices=notices)


def with_scaling(
    inputs: SizingInputs,
    env: str,
    factor: object,
    policy: str = "reject",
) -> SizingInputs:
    """Set the scaling factor of one environment"""
    if env not in ENVIRONMENTS:
        raise NotFoundError("environment", env, ENVIRONMENTS)
    value, notice = coerce_scaling(env, factor, policy)

    scaling = dict(inputs.scaling)
    scaling[env] = value
    notices = _merge_notices(inputs.notices, {f"scaling.{env}"}, [notice] if notice else [])
    return replace(inputs, scaling=scaling, notices=notices)


def with_topology(inputs: SizingInputs, topology: ClusterTopology | str) -> SizingInputs:
    """Select the cluster topology"""
    return replace(inputs, topology=ClusterTopology.parse(topology))


def with_connector(
    inputs: SizingInputs,
    connector_id: int,
    policy: str = "reject",
    **changes,
) -> SizingInputs:
    """
    Update a connector line item

    Args:
        inputs: Current snapshot
        connector_id: Connector id
        policy: Validation policy ("reject" or "clamp")
        **changes: Any of name, enabled, monthly_cost

    Returns:
        New SizingInputs
    """
    current = inputs.connector(connector_id)
    data = asdict(current)
    for key in changes:
        if key not in data or key == "id":
            raise NotFoundError("connector field", key, ["name", "enabled", "monthly_cost"])
    data.update(changes)
    updated, notices = coerce_connector(data, policy)

    connectors = tuple(updated if c.id == connector_id else c for c in inputs.connectors)
    overwritten = {f"connector[{connector_id}].{key}" for key in changes}
    notices = _merge_notices(inputs.notices, overwritten, notices)
    return replace(inputs, connectors=connectors, notices=notices)


def add_connector(
    inputs: SizingInputs,
    name: str | None = None,
    monthly_cost: object = DEFAULT_CONNECTOR_MONTHLY_COST,
    enabled: bool = False,
    policy: str = "reject",
) -> SizingInputs:
    """Append a connector line item with the next free id"""
    next_id = max((c.id for c in inputs.connectors), default=-1) + 1
    connector, notices = coerce_connector(
        {
            "id": next_id,
            "name": name if name is not None else f"Connector {next_id + 1}",
            "enabled": enabled,
            "monthly_cost": monthly_cost,
        },
        policy,
    )
    return replace(
        inputs,
        connectors=inputs.connectors + (connector,),
        notices=inputs.notices + tuple(notices),
    )
