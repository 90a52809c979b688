"""
Role store interface and its Casbin implementation.

The role store owns roles, their capability grants and the role membership of
users. Everything in this package issues grant/revoke calls against a store
passed in explicitly, or against the default store built by
``give_roles.engine.enforcer``.

Policy layout in Casbin:

    p, role^give_manager, cap^view_give_reports, allow
    p, role^give_accountant, cap^edit_posts, deny
    g, user^42, role^give_manager

A ``deny`` row records a capability the role explicitly does not hold. It
never overrides a grant from another role of the same user.
"""

import logging
from abc import ABC, abstractmethod
from typing import Callable

from casbin import Enforcer

from give_roles.api.data import CapabilityData, GroupingPolicyIndex, PolicyIndex, RoleData, UserData

logger = logging.getLogger(__name__)

ALLOW = "allow"
DENY = "deny"


class RoleStore(ABC):
    """Interface of the store holding roles, capabilities and role assignments.

    Role keys are role external keys (e.g., 'give_manager'), capabilities are
    capability names (e.g., 'edit_give_forms') and users are primary keys.
    """

    @abstractmethod
    def add_role(self, role: RoleData) -> bool:
        """Create a role with its capabilities. An existing role is left untouched.

        Returns:
            bool: True if the role was created, False if it already existed.
        """

    @abstractmethod
    def role_exists(self, role_key: str) -> bool:
        """Check whether a role is known to the store."""

    @abstractmethod
    def get_role_capabilities(self, role_key: str) -> dict[str, bool]:
        """Get the capability grants recorded for a role."""

    @abstractmethod
    def add_cap(self, role_key: str, cap: str, grant: bool = True) -> None:
        """Record a capability grant (or explicit refusal) for a role, replacing any previous one."""

    @abstractmethod
    def remove_cap(self, role_key: str, cap: str) -> None:
        """Remove a capability from a role. Removing a missing capability is a no-op."""

    @abstractmethod
    def assign_role(self, user_id, role_key: str) -> bool:
        """Give a role to a user."""

    @abstractmethod
    def unassign_role(self, user_id, role_key: str) -> bool:
        """Take a role away from a user."""

    @abstractmethod
    def unassign_all_roles(self, user_id) -> bool:
        """Take every role away from a user."""

    @abstractmethod
    def get_user_roles(self, user_id) -> list[str]:
        """Get the role keys assigned to a user."""

    @abstractmethod
    def user_can(self, user_id, cap: str) -> bool:
        """Check whether any of the user's roles grants a primitive capability."""


class CasbinRoleStore(RoleStore):
    """Role store backed by a Casbin enforcer.

    Works with any enforcer loaded with ``give_roles/engine/config/model.conf``:
    the database-backed SyncedEnforcer from ``RoleStoreEnforcer`` in production,
    or an in-memory ``casbin.Enforcer`` in tests.

    Examples:
        >>> store = CasbinRoleStore(casbin.Enforcer(model_path))
        >>> store.add_role(RoleData(external_key='give_worker', capabilities={'read': True}))
        True
        >>> store.assign_role(42, 'give_worker')
        True
        >>> store.user_can(42, 'read')
        True
    """

    def __init__(self, enforcer: Enforcer, on_change: Callable[[], None] | None = None):
        """
        Args:
            enforcer: The Casbin enforcer holding the policies.
            on_change: Called after every write that changed a policy.
        """
        self.enforcer = enforcer
        self.on_change = on_change

    @staticmethod
    def _role_key(role_key: str) -> str:
        return RoleData(external_key=role_key).namespaced_key

    @staticmethod
    def _cap_key(cap: str) -> str:
        return CapabilityData(external_key=cap).namespaced_key

    @staticmethod
    def _user_key(user_id) -> str:
        return UserData.from_user_id(user_id).namespaced_key

    def _changed(self, changed: bool = True) -> bool:
        if changed and self.on_change is not None:
            self.on_change()
        return changed

    def add_role(self, role: RoleData) -> bool:
        if self.role_exists(role.external_key):
            logger.info(f"Role {role.namespaced_key} already exists, skipping.")
            return False

        for cap, grant in role.capabilities.items():
            self.enforcer.add_policy(role.namespaced_key, self._cap_key(cap), ALLOW if grant else DENY)

        logger.info(f"Added role {role.namespaced_key} with {len(role.capabilities)} capabilities.")
        return self._changed()

    def role_exists(self, role_key: str) -> bool:
        return bool(self.enforcer.get_filtered_policy(PolicyIndex.ROLE.value, self._role_key(role_key)))

    def get_role_capabilities(self, role_key: str) -> dict[str, bool]:
        policies = self.enforcer.get_filtered_policy(PolicyIndex.ROLE.value, self._role_key(role_key))
        return {
            CapabilityData(namespaced_key=policy[PolicyIndex.CAP.value]).external_key: (
                policy[PolicyIndex.EFFECT.value] == ALLOW
            )
            for policy in policies
        }

    def add_cap(self, role_key: str, cap: str, grant: bool = True) -> None:
        role_key, cap_key = self._role_key(role_key), self._cap_key(cap)
        effect = ALLOW if grant else DENY

        if self.enforcer.has_policy(role_key, cap_key, effect):
            return

        # A role holds at most one grant per capability
        self.enforcer.remove_filtered_policy(PolicyIndex.ROLE.value, role_key, cap_key)
        self._changed(self.enforcer.add_policy(role_key, cap_key, effect))

    def remove_cap(self, role_key: str, cap: str) -> None:
        self._changed(
            self.enforcer.remove_filtered_policy(PolicyIndex.ROLE.value, self._role_key(role_key), self._cap_key(cap))
        )

    def assign_role(self, user_id, role_key: str) -> bool:
        return self._changed(self.enforcer.add_grouping_policy(self._user_key(user_id), self._role_key(role_key)))

    def unassign_role(self, user_id, role_key: str) -> bool:
        return self._changed(self.enforcer.remove_grouping_policy(self._user_key(user_id), self._role_key(role_key)))

    def unassign_all_roles(self, user_id) -> bool:
        return self._changed(
            self.enforcer.remove_filtered_grouping_policy(GroupingPolicyIndex.SUBJECT.value, self._user_key(user_id))
        )

    def get_user_roles(self, user_id) -> list[str]:
        policies = self.enforcer.get_filtered_grouping_policy(
            GroupingPolicyIndex.SUBJECT.value, self._user_key(user_id)
        )
        return [RoleData(namespaced_key=policy[GroupingPolicyIndex.ROLE.value]).external_key for policy in policies]

    def user_can(self, user_id, cap: str) -> bool:
        return self.enforcer.enforce(self._user_key(user_id), self._cap_key(cap))
