"""
Default roles, their base host capabilities, and the plugin capabilities layered on top.
"""

from give_roles.api.data import RoleData
from give_roles.constants import capabilities

# Base capabilities each plugin role is created with

GIVE_MANAGER_BASE_CAPABILITIES = {
    "read": True,
    "edit_posts": True,
    "delete_posts": True,
    "unfiltered_html": True,
    "upload_files": True,
    "export": True,
    "import": True,
    "delete_others_pages": True,
    "delete_others_posts": True,
    "delete_pages": True,
    "delete_private_pages": True,
    "delete_private_posts": True,
    "delete_published_pages": True,
    "delete_published_posts": True,
    "edit_others_pages": True,
    "edit_others_posts": True,
    "edit_pages": True,
    "edit_private_pages": True,
    "edit_private_posts": True,
    "edit_published_pages": True,
    "edit_published_posts": True,
    "manage_categories": True,
    "manage_links": True,
    "moderate_comments": True,
    "publish_pages": True,
    "publish_posts": True,
    "read_private_pages": True,
    "read_private_posts": True,
}

GIVE_ACCOUNTANT_BASE_CAPABILITIES = {
    "read": True,
    "edit_posts": False,
    "delete_posts": False,
}

GIVE_WORKER_BASE_CAPABILITIES = {
    "read": True,
    "edit_posts": False,
    "upload_files": True,
    "delete_posts": False,
}

GIVE_MANAGER = RoleData(
    external_key="give_manager",
    display_name="Give Manager",
    capabilities=GIVE_MANAGER_BASE_CAPABILITIES,
)
GIVE_ACCOUNTANT = RoleData(
    external_key="give_accountant",
    display_name="Give Accountant",
    capabilities=GIVE_ACCOUNTANT_BASE_CAPABILITIES,
)
GIVE_WORKER = RoleData(
    external_key="give_worker",
    display_name="Give Worker",
    capabilities=GIVE_WORKER_BASE_CAPABILITIES,
)

# Owned by the host; only plugin capabilities are ever added to or removed from it.
ADMINISTRATOR = RoleData(external_key="administrator")

PLUGIN_ROLES = [GIVE_MANAGER, GIVE_ACCOUNTANT, GIVE_WORKER]

# Plugin capabilities layered on top of the base roles

SITE_MANAGEMENT_CAPABILITIES = [
    capabilities.VIEW_GIVE_REPORTS,
    capabilities.VIEW_GIVE_SENSITIVE_DATA,
    capabilities.EXPORT_GIVE_REPORTS,
    capabilities.MANAGE_GIVE_SETTINGS,
]

ACCOUNTANT_CAPABILITIES = [
    capabilities.EDIT_GIVE_FORMS,
    capabilities.READ_PRIVATE_GIVE_FORMS,
    capabilities.VIEW_GIVE_REPORTS,
    capabilities.EXPORT_GIVE_REPORTS,
    capabilities.EDIT_GIVE_PAYMENTS,
]

SITE_MANAGEMENT_ROLES = [GIVE_MANAGER, ADMINISTRATOR]

# Roles that receive every generated entity capability
CORE_CAPABILITY_ROLES = [ADMINISTRATOR, GIVE_MANAGER, GIVE_WORKER]
