"""
give_roles Django application initialization.
"""

from django.apps import AppConfig
from django.db.models.signals import post_migrate


class GiveRolesConfig(AppConfig):
    """
    Configuration for the give_roles Django application.
    """

    name = "give_roles"
    verbose_name = "Give Roles"
    default_auto_field = "django.db.models.BigAutoField"
    plugin_app = {
        "settings_config": {
            "lms.djangoapp": {
                "test": {"relative_path": "settings.test"},
                "common": {"relative_path": "settings.common"},
                "production": {"relative_path": "settings.production"},
            },
            "cms.djangoapp": {
                "test": {"relative_path": "settings.test"},
                "common": {"relative_path": "settings.common"},
                "production": {"relative_path": "settings.production"},
            },
        },
    }

    def ready(self):
        """Connect the signal handlers."""
        from give_roles import handlers  # pylint: disable=import-outside-toplevel

        # No sender: post_migrate is only sent for apps with models, and this app has none
        post_migrate.connect(handlers.grant_roles_on_migrate)
