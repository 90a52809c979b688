"""
Fixed capability names and the template used to generate per-entity capabilities.
"""

# Plugin-wide capabilities

VIEW_GIVE_REPORTS = "view_give_reports"
VIEW_GIVE_SENSITIVE_DATA = "view_give_sensitive_data"
EXPORT_GIVE_REPORTS = "export_give_reports"
MANAGE_GIVE_SETTINGS = "manage_give_settings"

# Capabilities granted to accountants on top of their base role

EDIT_GIVE_FORMS = "edit_give_forms"
READ_PRIVATE_GIVE_FORMS = "read_private_give_forms"
EDIT_GIVE_PAYMENTS = "edit_give_payments"

# Meta capabilities, resolved per request against a target entity

VIEW_GIVE_FORM_STATS = "view_give_form_stats"

# Template for the capabilities generated for each entity type.
# "{type}" is replaced with the entity's capability type (e.g., 'give_form').

CORE_CAPABILITY_TEMPLATES = (
    # Post type
    "edit_{type}",
    "read_{type}",
    "delete_{type}",
    "edit_{type}s",
    "edit_others_{type}s",
    "publish_{type}s",
    "read_private_{type}s",
    "delete_{type}s",
    "delete_private_{type}s",
    "delete_published_{type}s",
    "delete_others_{type}s",
    "edit_private_{type}s",
    "edit_published_{type}s",
    # Terms
    "manage_{type}_terms",
    "edit_{type}_terms",
    "delete_{type}_terms",
    "assign_{type}_terms",
    # Custom
    "view_{type}_stats",
)
