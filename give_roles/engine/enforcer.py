"""
Default role store for the Give roles plugin.

Provides a Casbin SyncedEnforcer instance persisted through the Django ORM
Casbin adapter, and the CasbinRoleStore built on top of it.

Usage:
    from give_roles.engine.enforcer import get_role_store
    store = get_role_store()
    allowed = store.user_can(user.pk, "view_give_reports")

Requires the `GIVE_ROLES_CASBIN_MODEL` setting.
"""

import logging
import time

from casbin import SyncedEnforcer
from casbin_adapter.adapter import Adapter
from django.conf import settings
from django.core.cache import cache

from give_roles.engine.store import CasbinRoleStore

logger = logging.getLogger(__name__)


class RoleStoreEnforcer:
    """Singleton class to manage the Casbin SyncedEnforcer instance.

    The enforcer is created lazily on first use so that importing this module
    never touches the database (e.g., while running migrations or pulling
    translations).

    Policies are reloaded from the database only when another write has
    happened since the last load. Writes record their time in the Django
    cache under `CACHE_KEY`, so every process sharing the cache picks them up.

    Usage::

        from give_roles.engine.enforcer import RoleStoreEnforcer
        enforcer = RoleStoreEnforcer.get_enforcer()
        allowed = enforcer.enforce("user^42", "cap^view_give_reports")

    Attributes:
        _enforcer (SyncedEnforcer): The singleton enforcer instance.
        _last_policy_load_timestamp (float): When policies were last loaded in this process.
    """

    CACHE_KEY = "give_roles_policy_last_modified_timestamp"

    _enforcer = None
    _last_policy_load_timestamp = None

    def __new__(cls):
        """Singleton pattern to ensure a single enforcer instance."""
        return cls.get_enforcer()

    @classmethod
    def get_enforcer(cls) -> SyncedEnforcer:
        """Get the enforcer instance, creating it if needed.

        Returns:
            SyncedEnforcer: The singleton enforcer instance.
        """
        if cls._enforcer is None:
            cls._enforcer = cls._initialize_enforcer()
        return cls._enforcer

    @classmethod
    def reset(cls):
        """Drop the singleton instance so the next call builds a fresh one.

        Returns:
            None
        """
        cls._enforcer = None
        cls._last_policy_load_timestamp = None

    @classmethod
    def load_policy_if_needed(cls):
        """Load policy if it changed since the last load in this process.

        Compares the last load timestamp with the last modified timestamp in
        the cache and reloads the policy when the latter is newer.

        Returns:
            None
        """
        enforcer = cls.get_enforcer()
        last_modified_timestamp = cache.get(cls.CACHE_KEY)

        if last_modified_timestamp is None:
            # No timestamp in cache; initialize it
            last_modified_timestamp = time.time()
            cache.set(cls.CACHE_KEY, last_modified_timestamp, None)
            logger.info(f"Initialized policy last modified timestamp in cache: {last_modified_timestamp}")

        if cls._last_policy_load_timestamp is None or last_modified_timestamp > cls._last_policy_load_timestamp:
            current_timestamp = time.time()
            enforcer.load_policy()
            cls._last_policy_load_timestamp = current_timestamp
            logger.info(f"Reloaded policy at {current_timestamp}")

    @classmethod
    def invalidate_policy_cache(cls):
        """Record a policy change so every process reloads on its next check.

        Returns:
            None
        """
        current_timestamp = time.time()
        cache.set(cls.CACHE_KEY, current_timestamp, None)
        logger.debug(f"Invalidated policy cache at {current_timestamp}")

    @classmethod
    def _initialize_enforcer(cls) -> SyncedEnforcer:
        """
        Create and configure the Casbin SyncedEnforcer instance.

        The adapter persists policies in the `CasbinRule` table of the database
        named by `CASBIN_DB_ALIAS`, and policy changes are saved as they are made.

        Returns:
            SyncedEnforcer: Configured Casbin enforcer with the database adapter.
        """
        db_alias = getattr(settings, "CASBIN_DB_ALIAS", "default")

        try:
            adapter = Adapter(db_alias=db_alias)
            enforcer = SyncedEnforcer(settings.GIVE_ROLES_CASBIN_MODEL, adapter)
        except Exception as e:
            logger.error(f"Failed to initialize Casbin enforcer with DB alias '{db_alias}': {e}")
            raise

        enforcer.enable_auto_save(True)
        return enforcer


def get_role_store() -> CasbinRoleStore | None:
    """Get the default role store.

    Returns:
        CasbinRoleStore: A store on the singleton enforcer, or None if the
        enforcer could not be initialized (e.g., the database is not ready).
    """
    try:
        RoleStoreEnforcer.load_policy_if_needed()
    except Exception as e:  # pylint: disable=broad-exception-caught
        logger.error(f"Role store is unavailable: {e}")
        return None

    return CasbinRoleStore(RoleStoreEnforcer.get_enforcer(), on_change=RoleStoreEnforcer.invalidate_policy_cache)
