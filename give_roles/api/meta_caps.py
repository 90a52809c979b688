"""Public API for resolving meta capabilities.

A meta capability is resolved per request into the primitive capabilities a
user must hold, depending on the target entity. The host starts from its own
list of required capabilities (by default the capability itself) and passes
it through `map_meta_cap`, which may replace it.

Overrides are kept in a table keyed by `MetaCapability`. Each entry loads the
target entity and decides whether the user is granted access outright, in
which case the required list is cleared.
"""

from enum import Enum
from typing import Any, Callable

from attrs import define

from give_roles.api.forms import get_form, get_form_author_id
from give_roles.constants.capabilities import VIEW_GIVE_FORM_STATS, VIEW_GIVE_REPORTS
from give_roles.engine.store import RoleStore

__all__ = [
    "MetaCapability",
    "MetaCapabilityRule",
    "META_CAPABILITY_RULES",
    "map_meta_cap",
]


class MetaCapability(Enum):
    """Meta capabilities with an override rule."""

    VIEW_GIVE_FORM_STATS = VIEW_GIVE_FORM_STATS


@define(frozen=True)
class MetaCapabilityRule:
    """Override rule for a meta capability.

    Attributes:
        load_entity: Loads the target entity from its id, returning None if it does not exist.
        grants_access: Called as ``grants_access(store, user_id, entity)``. When it returns
            True the user needs no further capability.
    """

    load_entity: Callable[[Any], Any]
    grants_access: Callable[[RoleStore, Any, Any], bool]


def can_view_form_stats(store: RoleStore, user_id, form) -> bool:
    """Report viewers see the stats of every form, authors see those of their own forms."""
    if store is not None and store.user_can(user_id, VIEW_GIVE_REPORTS):
        return True
    author_id = get_form_author_id(form)
    return author_id is not None and author_id == str(user_id)


META_CAPABILITY_RULES = {
    MetaCapability.VIEW_GIVE_FORM_STATS: MetaCapabilityRule(
        load_entity=get_form,
        grants_access=can_view_form_stats,
    ),
}


def map_meta_cap(caps: list[str], cap: str, user_id, args=(), store: RoleStore | None = None) -> list[str]:
    """Map a meta capability to the primitive capabilities required for it.

    Args:
        caps: The primitive capabilities the host currently requires.
        cap: The capability being checked.
        user_id: The primary key of the user being checked.
        args: Extra arguments of the check; the first one is the target entity id.
        store: The role store used for capability checks. When None, only
            ownership can grant access.

    Returns:
        list[str]: The capabilities required. An empty list means access is granted.

    Examples:
        >>> map_meta_cap(["edit_give_forms"], "edit_give_forms", 1, (7,))
        ['edit_give_forms']
        >>> map_meta_cap(["view_give_form_stats"], "view_give_form_stats", author.pk, (form.pk,))
        []
    """
    try:
        rule = META_CAPABILITY_RULES[MetaCapability(cap)]
    except (ValueError, KeyError):
        return caps

    if not args or not args[0]:
        return caps

    entity = rule.load_entity(args[0])
    if entity is None:
        return caps

    if rule.grants_access(store, user_id, entity):
        return []

    return caps
