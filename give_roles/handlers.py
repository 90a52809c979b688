"""
Signal handlers for the Give roles plugin.

These handlers grant the plugin roles when the app is installed and keep role
assignments consistent when users are deleted.
"""

import logging

from django.conf import settings
from django.contrib.auth import get_user_model
from django.db.models.signals import post_delete
from django.dispatch import receiver

from give_roles.api.roles import grant_all
from give_roles.api.users import unassign_all_roles_from_user

logger = logging.getLogger(__name__)

# App owning the CasbinRule table the roles are written to
POLICY_APP_LABEL = "casbin_adapter"


def grant_roles_on_migrate(sender, **kwargs):
    """
    Create the plugin roles and grant their capabilities after migrations run.

    Connected to ``post_migrate`` for every app, and acts only when the signal
    comes from the app holding the policy table, once that table exists.
    Granting is idempotent, so running it after every migration is safe. Set
    ``GIVE_ROLES_GRANT_ON_MIGRATE = False`` to manage grants by calling
    ``give_roles.api.roles.grant_all`` instead.

    Args:
        sender: The AppConfig of the migrated app.
        **kwargs: Additional keyword arguments from the signal.
    """
    app_config = kwargs.get("app_config", sender)
    if getattr(app_config, "label", None) != POLICY_APP_LABEL:
        return

    if not getattr(settings, "GIVE_ROLES_GRANT_ON_MIGRATE", True):
        return

    try:
        grant_all()
    except Exception as exc:  # pylint: disable=broad-exception-caught
        # Log but don't raise - a failed grant must not break migrations.
        logger.exception("Error granting Give roles after migrations", exc_info=exc)


@receiver(post_delete, sender=get_user_model())
def unassign_roles_on_user_deletion(sender, instance, **kwargs):  # pylint: disable=unused-argument
    """
    Unassign roles from a user when the user is deleted.

    Args:
        sender: The user model class.
        instance: The user instance being deleted.
        **kwargs: Additional keyword arguments from the signal.
    """
    try:
        unassign_all_roles_from_user(instance.pk)
    except Exception as exc:  # pylint: disable=broad-exception-caught
        logger.exception(
            "Error unassigning Give roles from user %s during deletion",
            instance.pk,
            exc_info=exc,
        )
