"""Initialization for the casbin_adapter Django application.

The upstream casbin_adapter app builds its own enforcer from `CASBIN_MODEL`
as soon as the app is loaded. The Give roles plugin keeps its own enforcer
(see give_roles/engine/enforcer.py), built lazily when the role store is
first used, so the upstream initialization is skipped here while the app's
`CasbinRule` model and migrations stay installed.
"""

from django.apps import AppConfig


class CasbinAdapterConfig(AppConfig):
    name = "casbin_adapter"
    default_auto_field = "django.db.models.AutoField"

    def ready(self):
        """Skip the upstream enforcer initialization."""
