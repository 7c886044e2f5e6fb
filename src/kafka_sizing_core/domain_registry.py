"""
Domain Registry

Read-only lookup over the static business domain catalog.
Catalog order is the canonical iteration order used everywhere.
"""

from kafka_sizing_core.domain.constants import DOMAIN_CATALOG
from kafka_sizing_core.domain.entities import DomainDefinition
from kafka_sizing_core.domain.errors import NotFoundError

_REGISTRY: dict[str, DomainDefinition] = {
    key: DomainDefinition(
        key=key,
        display_name=entry["name"],
        subdomains=tuple(entry["subdomains"]),
    )
    for key, entry in DOMAIN_CATALOG.items()
}


def list_domains() -> list[DomainDefinition]:
    """Return all domain definitions in catalog order"""
    return list(_REGISTRY.values())


def domain_keys() -> list[str]:
    """Return all domain keys in catalog order"""
    return list(_REGISTRY.keys())


def get_domain(key: str) -> DomainDefinition:
    """
    Look up a domain definition by key

    Args:
        key: Domain key (e.g., "cust")

    Returns:
        DomainDefinition

    Raises:
        NotFoundError: If the key is not in the catalog
    """
    try:
        return _REGISTRY[key]
    except KeyError:
        raise NotFoundError("domain", key, domain_keys()) from None
