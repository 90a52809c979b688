"""Public API for capability generation.

Donation forms and payments share one capability template. Each entity type
expands into the same ordered list of capability names with its own type
token substituted in, e.g. ``edit_give_form`` and ``edit_give_payment``.

Both the grant and the revoke paths read capability names from here, so the
names removed on revoke are always the names that were granted.
"""

from give_roles.api.data import EntityType
from give_roles.constants.capabilities import CORE_CAPABILITY_TEMPLATES

__all__ = [
    "get_capabilities_for_entity",
    "get_core_caps",
    "get_all_core_caps",
]


def get_capabilities_for_entity(entity_type: EntityType | str) -> list[str]:
    """Get the generated capabilities for a single entity type.

    Args:
        entity_type: An EntityType member or its capability type token (e.g., 'give_form').

    Returns:
        list[str]: The capability names, in template order.

    Raises:
        ValueError: If entity_type is not a known entity type.
    """
    capability_type = EntityType(entity_type).capability_type
    return [template.format(type=capability_type) for template in CORE_CAPABILITY_TEMPLATES]


def get_core_caps() -> dict[str, list[str]]:
    """Get the generated capabilities for every entity type.

    Returns:
        dict[str, list[str]]: Capability names keyed by capability type token.

    Examples:
        >>> get_core_caps()["give_payment"][:3]
        ['edit_give_payment', 'read_give_payment', 'delete_give_payment']
    """
    return {
        entity_type.capability_type: get_capabilities_for_entity(entity_type)
        for entity_type in EntityType
    }


def get_all_core_caps() -> list[str]:
    """Get every generated capability as a flat list, grouped by entity type."""
    return [cap for cap_group in get_core_caps().values() for cap in cap_group]
