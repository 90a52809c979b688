"""
Common settings for give_roles plugin.
"""

import os

from give_roles import ROOT_DIRECTORY


def plugin_settings(settings):
    """
    Configure plugin settings for the host.
    This function is called by the host's plugin system to configure
    the Django settings for this plugin.

    Args:
        settings: The Django settings object
    """
    # Add external third-party apps to INSTALLED_APPS
    casbin_adapter_app = "give_roles.engine.apps.CasbinAdapterConfig"
    if casbin_adapter_app not in settings.INSTALLED_APPS:
        settings.INSTALLED_APPS.append(casbin_adapter_app)

    # Set default GIVE_ROLES_CASBIN_MODEL if not already set, this points to the model.conf file
    # which defines how roles, capabilities and role assignments are evaluated.
    if not hasattr(settings, "GIVE_ROLES_CASBIN_MODEL"):
        settings.GIVE_ROLES_CASBIN_MODEL = os.path.join(ROOT_DIRECTORY, "engine", "config", "model.conf")

    # Set default donation form model for the form stats capability. Hosts whose form
    # model lives elsewhere must override it; form lookups log an error and find nothing otherwise.
    if not hasattr(settings, "GIVE_ROLES_FORM_MODEL"):
        settings.GIVE_ROLES_FORM_MODEL = "give.DonationForm"

    # Name of the field holding the form's author on the donation form model.
    if not hasattr(settings, "GIVE_ROLES_FORM_AUTHOR_FIELD"):
        settings.GIVE_ROLES_FORM_AUTHOR_FIELD = "author"

    # Whether roles and capabilities are granted after this app's migrations run.
    if not hasattr(settings, "GIVE_ROLES_GRANT_ON_MIGRATE"):
        settings.GIVE_ROLES_GRANT_ON_MIGRATE = True
