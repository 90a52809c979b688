"""
Production settings for give_roles plugin.
"""

# Settings that deployments may override through ENV_TOKENS
OVERRIDABLE_SETTINGS = (
    "CASBIN_DB_ALIAS",
    "GIVE_ROLES_FORM_MODEL",
    "GIVE_ROLES_FORM_AUTHOR_FIELD",
    "GIVE_ROLES_GRANT_ON_MIGRATE",
)


def plugin_settings(settings):
    """
    Configure plugin settings for the host.
    This function is called by the host's plugin system to configure
    the Django settings for this plugin.

    Args:
        settings: The Django settings object
    """
    env_tokens = getattr(settings, "ENV_TOKENS", {})
    for name in OVERRIDABLE_SETTINGS:
        if name in env_tokens:
            setattr(settings, name, env_tokens[name])
