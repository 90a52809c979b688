"""Public API for registering the plugin's roles and capabilities.

The plugin creates three roles (manager, accountant and worker) with base
host capabilities, then layers its own capabilities onto them and onto the
host's administrator role. Revoking removes only the layered capabilities:
the roles and their base capabilities stay with the host.

Every function takes the role store to act on. When it is omitted the default
store from ``give_roles.engine.enforcer`` is used, and if that store is not
available the call does nothing.
"""

import logging

from give_roles.api.capabilities import get_all_core_caps
from give_roles.constants import roles as default_roles
from give_roles.engine.enforcer import get_role_store
from give_roles.engine.store import RoleStore

__all__ = [
    "add_roles",
    "add_caps",
    "remove_caps",
    "grant_all",
    "revoke_all",
    "get_plugin_capabilities",
]

logger = logging.getLogger(__name__)


def _resolve_store(store: RoleStore | None) -> RoleStore | None:
    """Return the given store, or the default store when none is given."""
    if store is not None:
        return store
    store = get_role_store()
    if store is None:
        logger.warning("No role store available; skipping role and capability changes.")
    return store


def get_plugin_capabilities() -> dict[str, list[str]]:
    """Get the plugin capabilities layered onto each role, keyed by role external_key.

    This is the single source for both granting and revoking, so both
    operations always touch the same capabilities.

    Returns:
        dict[str, list[str]]: Capability names to add to (or remove from) each role.
    """
    plugin_capabilities = {
        role.external_key: []
        for role in default_roles.SITE_MANAGEMENT_ROLES + default_roles.CORE_CAPABILITY_ROLES
    }

    for role in default_roles.SITE_MANAGEMENT_ROLES:
        plugin_capabilities[role.external_key].extend(default_roles.SITE_MANAGEMENT_CAPABILITIES)

    core_caps = get_all_core_caps()
    for role in default_roles.CORE_CAPABILITY_ROLES:
        plugin_capabilities[role.external_key].extend(core_caps)

    plugin_capabilities[default_roles.GIVE_ACCOUNTANT.external_key] = list(default_roles.ACCOUNTANT_CAPABILITIES)

    return plugin_capabilities


def add_roles(store: RoleStore | None = None) -> None:
    """Create the plugin roles with their base capabilities.

    Roles that already exist are left untouched.

    Args:
        store: The role store to act on. Defaults to the configured store.
    """
    store = _resolve_store(store)
    if store is None:
        return

    for role in default_roles.PLUGIN_ROLES:
        store.add_role(role)


def add_caps(store: RoleStore | None = None) -> None:
    """Add the plugin capabilities to the plugin roles and the administrator role.

    A role missing from the store is created by its first capability, so the
    administrator rows are written even when the host defines no such role.

    Args:
        store: The role store to act on. Defaults to the configured store.
    """
    store = _resolve_store(store)
    if store is None:
        return

    for role_key, capabilities in get_plugin_capabilities().items():
        for cap in capabilities:
            store.add_cap(role_key, cap)
        logger.info(f"Granted {len(capabilities)} plugin capabilities to role '{role_key}'.")


def remove_caps(store: RoleStore | None = None) -> None:
    """Remove the plugin capabilities added by `add_caps`.

    The roles themselves and their base capabilities are not removed.

    Args:
        store: The role store to act on. Defaults to the configured store.
    """
    store = _resolve_store(store)
    if store is None:
        return

    for role_key, capabilities in get_plugin_capabilities().items():
        for cap in capabilities:
            store.remove_cap(role_key, cap)
        logger.info(f"Removed {len(capabilities)} plugin capabilities from role '{role_key}'.")


def grant_all(store: RoleStore | None = None) -> None:
    """Create the plugin roles and grant all plugin capabilities.

    Safe to call repeatedly.

    Args:
        store: The role store to act on. Defaults to the configured store.
    """
    store = _resolve_store(store)
    if store is None:
        return

    add_roles(store)
    add_caps(store)


def revoke_all(store: RoleStore | None = None) -> None:
    """Remove all plugin capabilities, leaving roles and base capabilities in place.

    Args:
        store: The role store to act on. Defaults to the configured store.
    """
    remove_caps(store)
