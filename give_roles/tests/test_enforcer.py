"""Test cases for the default, database-backed role store.

These tests exercise the real Casbin SyncedEnforcer with the Django ORM
adapter, so policy changes are checked both in memory and in the CasbinRule
table.
"""

from unittest.mock import patch

from casbin import SyncedEnforcer
from casbin_adapter.models import CasbinRule
from django.core.cache import cache
from django.test import TestCase, override_settings

from give_roles.api.roles import grant_all, revoke_all
from give_roles.api.users import assign_role_to_user, user_can
from give_roles.engine.enforcer import RoleStoreEnforcer, get_role_store
from give_roles.engine.store import CasbinRoleStore
from give_roles.tests.test_utils import make_cap_key, make_role_key


class EnforcerTestCase(TestCase):
    """Reset the enforcer singleton around each test."""

    def setUp(self):
        super().setUp()
        RoleStoreEnforcer.reset()
        self.addCleanup(RoleStoreEnforcer.reset)
        cache.delete(RoleStoreEnforcer.CACHE_KEY)


class TestRoleStoreEnforcer(EnforcerTestCase):
    """Test the enforcer singleton."""

    def test_singleton(self):
        enforcer = RoleStoreEnforcer.get_enforcer()

        self.assertIsInstance(enforcer, SyncedEnforcer)
        self.assertIs(RoleStoreEnforcer.get_enforcer(), enforcer)
        self.assertIs(RoleStoreEnforcer(), enforcer)

    def test_reset(self):
        enforcer = RoleStoreEnforcer.get_enforcer()

        RoleStoreEnforcer.reset()

        self.assertIsNot(RoleStoreEnforcer.get_enforcer(), enforcer)
        self.assertIsNone(RoleStoreEnforcer._last_policy_load_timestamp)  # pylint: disable=protected-access

    @override_settings(GIVE_ROLES_CASBIN_MODEL="/nonexistent/model.conf")
    def test_initialization_failure_raises(self):
        with self.assertLogs("give_roles.engine.enforcer", level="ERROR"):
            with self.assertRaises(Exception):
                RoleStoreEnforcer.get_enforcer()


class TestGetRoleStore(EnforcerTestCase):
    """Test the default role store."""

    def test_store_wraps_singleton_enforcer(self):
        store = get_role_store()

        self.assertIsInstance(store, CasbinRoleStore)
        self.assertIs(store.enforcer, RoleStoreEnforcer.get_enforcer())

    @patch("give_roles.engine.enforcer.SyncedEnforcer", side_effect=RuntimeError("database is not ready"))
    def test_unavailable_store(self, mock_enforcer):  # pylint: disable=unused-argument
        with self.assertLogs("give_roles.engine.enforcer", level="ERROR") as logs:
            self.assertIsNone(get_role_store())

        self.assertIn("Role store is unavailable", logs.output[-1])


class TestPolicyReload(EnforcerTestCase):
    """Test that policies are reloaded from the database only after a change."""

    def setUp(self):
        super().setUp()
        grant_all()
        assign_role_to_user(5, "give_worker")
        # Settle the reload triggered by the writes above
        get_role_store()
        enforcer = RoleStoreEnforcer.get_enforcer()
        patcher = patch.object(enforcer, "load_policy", wraps=enforcer.load_policy)
        self.mock_load_policy = patcher.start()
        self.addCleanup(patcher.stop)

    def test_repeated_checks_do_not_reload(self):
        for _ in range(10):
            self.assertTrue(user_can(5, "edit_give_forms"))

        self.mock_load_policy.assert_not_called()

    def test_write_reloads_once_on_next_check(self):
        assign_role_to_user(6, "give_accountant")

        self.assertTrue(user_can(6, "export_give_reports"))
        self.assertTrue(user_can(6, "view_give_payments"))

        self.mock_load_policy.assert_called_once_with()

    def test_write_records_modification_time(self):
        before = cache.get(RoleStoreEnforcer.CACHE_KEY)

        assign_role_to_user(6, "give_accountant")

        self.assertGreater(cache.get(RoleStoreEnforcer.CACHE_KEY), before)

    def test_unchanged_write_keeps_modification_time(self):
        before = cache.get(RoleStoreEnforcer.CACHE_KEY)

        # Already assigned in setUp
        assign_role_to_user(5, "give_worker")

        self.assertEqual(cache.get(RoleStoreEnforcer.CACHE_KEY), before)

    def test_change_from_another_process_is_picked_up(self):
        RoleStoreEnforcer.invalidate_policy_cache()

        get_role_store()
        get_role_store()

        self.mock_load_policy.assert_called_once_with()


class TestPersistence(EnforcerTestCase):
    """Test that grants made through the default store reach the database."""

    def test_grant_all_persists_policies(self):
        grant_all()

        self.assertTrue(
            CasbinRule.objects.filter(
                ptype="p", v0=make_role_key("give_manager"), v1=make_cap_key("manage_give_settings"), v2="allow"
            ).exists()
        )
        self.assertEqual(CasbinRule.objects.filter(ptype="p", v0=make_role_key("give_accountant")).count(), 8)

    def test_grant_all_twice_does_not_duplicate_rows(self):
        grant_all()
        count = CasbinRule.objects.count()

        grant_all()

        self.assertEqual(CasbinRule.objects.count(), count)

    def test_revoke_all_removes_plugin_rows(self):
        grant_all()

        revoke_all()

        self.assertFalse(CasbinRule.objects.filter(v0=make_role_key("administrator")).exists())
        self.assertFalse(CasbinRule.objects.filter(v1=make_cap_key("view_give_reports")).exists())
        self.assertEqual(CasbinRule.objects.filter(ptype="p", v0=make_role_key("give_accountant")).count(), 3)

    def test_policies_survive_a_new_enforcer(self):
        grant_all()
        assign_role_to_user(9, "give_accountant")

        RoleStoreEnforcer.reset()

        self.assertTrue(user_can(9, "export_give_reports"))
        self.assertFalse(user_can(9, "manage_give_settings"))
