"""Test utilities for building role stores and namespaced keys."""

from importlib.resources import files

import casbin

from give_roles.api.data import CapabilityData, RoleData, UserData
from give_roles.engine.store import CasbinRoleStore

MODEL_PATH = str(files("give_roles.engine").joinpath("config/model.conf"))


def make_store() -> CasbinRoleStore:
    """Create a role store on an empty in-memory Casbin enforcer."""
    return CasbinRoleStore(casbin.Enforcer(MODEL_PATH))


def make_user_key(key) -> str:
    """Create a namespaced user key (e.g., 'user^42')."""
    return f"{UserData.NAMESPACE}{UserData.SEPARATOR}{key}"


def make_role_key(key: str) -> str:
    """Create a namespaced role key (e.g., 'role^give_manager')."""
    return f"{RoleData.NAMESPACE}{RoleData.SEPARATOR}{key}"


def make_cap_key(key: str) -> str:
    """Create a namespaced capability key (e.g., 'cap^edit_give_forms')."""
    return f"{CapabilityData.NAMESPACE}{CapabilityData.SEPARATOR}{key}"


def snapshot(store: CasbinRoleStore) -> set[tuple[str, ...]]:
    """Get every policy in the store as a set of tuples, for order-free comparison."""
    return {tuple(policy) for policy in store.enforcer.get_policy()}
