"""User-related API methods for role assignments and capability checks.

Users are identified by their primary key in the host's user model. These
methods namespace user identifiers internally (e.g., 'user^42') to stay
consistent with the role store.
"""

import logging

from give_roles.api.meta_caps import map_meta_cap
from give_roles.engine.enforcer import get_role_store
from give_roles.engine.store import RoleStore

__all__ = [
    "assign_role_to_user",
    "unassign_role_from_user",
    "unassign_all_roles_from_user",
    "get_user_roles",
    "user_can",
]

logger = logging.getLogger(__name__)


def _get_store(store: RoleStore | None) -> RoleStore | None:
    return store if store is not None else get_role_store()


def assign_role_to_user(user_id, role_external_key: str, store: RoleStore | None = None) -> bool:
    """Assign a role to a user.

    Args:
        user_id: Primary key of the user.
        role_external_key (str): Name of the role to assign (e.g., 'give_accountant').
        store: The role store to act on. Defaults to the configured store.

    Returns:
        bool: True if the role was assigned, False if it was already assigned
        or no store is available.
    """
    store = _get_store(store)
    if store is None:
        return False
    return store.assign_role(user_id, role_external_key)


def unassign_role_from_user(user_id, role_external_key: str, store: RoleStore | None = None) -> bool:
    """Unassign a role from a user.

    Args:
        user_id: Primary key of the user.
        role_external_key (str): Name of the role to unassign.
        store: The role store to act on. Defaults to the configured store.

    Returns:
        bool: True if the role was unassigned, False otherwise.
    """
    store = _get_store(store)
    if store is None:
        return False
    return store.unassign_role(user_id, role_external_key)


def unassign_all_roles_from_user(user_id, store: RoleStore | None = None) -> bool:
    """Unassign every role from a user.

    Args:
        user_id: Primary key of the user.
        store: The role store to act on. Defaults to the configured store.

    Returns:
        bool: True if any role was unassigned, False otherwise.
    """
    store = _get_store(store)
    if store is None:
        return False
    return store.unassign_all_roles(user_id)


def get_user_roles(user_id, store: RoleStore | None = None) -> list[str]:
    """Get the roles assigned to a user.

    Args:
        user_id: Primary key of the user.
        store: The role store to read from. Defaults to the configured store.

    Returns:
        list[str]: Role external keys (e.g., ['give_worker']).
    """
    store = _get_store(store)
    if store is None:
        return []
    return store.get_user_roles(user_id)


def user_can(user_id, cap: str, *args, store: RoleStore | None = None) -> bool:
    """Check whether a user holds a capability, resolving meta capabilities.

    The capability is first mapped to the primitive capabilities it requires
    (see `map_meta_cap`), then the user must hold every one of them. A meta
    capability mapped to no primitive capability is allowed outright.

    Args:
        user_id: Primary key of the user.
        cap (str): The capability to check (e.g., 'view_give_form_stats').
        *args: Extra arguments of the check, such as the id of the target entity.
        store: The role store to check against. Defaults to the configured store.

    Returns:
        bool: True if the user holds the capability, False otherwise.
    """
    store = _get_store(store)
    if store is None:
        logger.warning(f"No role store available; denying '{cap}' for user {user_id}.")
        return False

    required_caps = map_meta_cap([cap], cap, user_id, args, store=store)
    return all(store.user_can(user_id, required_cap) for required_cap in required_caps)
