"""
Test settings for give_roles plugin.
"""

import os

from give_roles import ROOT_DIRECTORY


def plugin_settings(settings):  # pylint: disable=unused-argument
    """
    Configure plugin settings for the host.
    This function is called by the host's plugin system to configure
    the Django settings for this plugin.

    Args:
        settings: The Django settings object
    """


DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": "default.db",
        "USER": "",
        "PASSWORD": "",
        "HOST": "",
        "PORT": "",
    }
}

INSTALLED_APPS = (
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "give_roles.engine.apps.CasbinAdapterConfig",
    "give_roles.apps.GiveRolesConfig",
    "give_roles.tests.stubs.apps.StubsConfig",
)

AUTHENTICATION_BACKENDS = [
    "django.contrib.auth.backends.ModelBackend",
    "give_roles.backends.GiveRolesBackend",
]

SECRET_KEY = "test-secret-key"

USE_TZ = True

# Casbin configuration
GIVE_ROLES_CASBIN_MODEL = os.path.join(ROOT_DIRECTORY, "engine", "config", "model.conf")

GIVE_ROLES_FORM_MODEL = "stubs.DonationForm"
GIVE_ROLES_FORM_AUTHOR_FIELD = "author"
GIVE_ROLES_GRANT_ON_MIGRATE = False
