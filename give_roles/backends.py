"""
Authorization backend that exposes the plugin capabilities through Django's permission checks.

Add it to `AUTHENTICATION_BACKENDS` next to the host's own backends:

    AUTHENTICATION_BACKENDS = [
        "django.contrib.auth.backends.ModelBackend",
        "give_roles.backends.GiveRolesBackend",
    ]

Then capabilities are checked the usual way, with the target entity as `obj`:

    request.user.has_perm("view_give_form_stats", form)
"""

from django.db.models import Model

from give_roles.api.users import user_can


class GiveRolesBackend:
    """
    Answer `has_perm` for capability names held through the plugin roles.

    Django model permissions ("app_label.codename") are left to the other
    backends. This backend never authenticates anyone.
    """

    def authenticate(self, request, **credentials):  # pylint: disable=unused-argument
        return None

    def get_user(self, user_id):  # pylint: disable=unused-argument
        return None

    def has_perm(self, user_obj, perm, obj=None):
        if not user_obj.is_active or user_obj.is_anonymous:
            return False

        if "." in perm:
            return False

        if obj is None:
            return user_can(user_obj.pk, perm)

        target_id = obj.pk if isinstance(obj, Model) else obj
        return user_can(user_obj.pk, perm, target_id)
