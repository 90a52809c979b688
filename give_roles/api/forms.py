"""Lookup of the host's donation forms.

The donation form model belongs to the host application and is configured
with the `GIVE_ROLES_FORM_MODEL` setting (an "app_label.ModelName" string).
Only the form's author is read here, from the field named by
`GIVE_ROLES_FORM_AUTHOR_FIELD`.
"""

import logging

from django.apps import apps
from django.conf import settings
from django.core.exceptions import ValidationError

__all__ = [
    "get_form_model",
    "get_form",
    "get_form_author_id",
]

logger = logging.getLogger(__name__)


def get_form_model():
    """Get the configured donation form model class."""
    return apps.get_model(settings.GIVE_ROLES_FORM_MODEL)


def get_form(form_id):
    """Load a donation form by primary key.

    Args:
        form_id: The primary key of the form.

    Returns:
        The form instance, or None if no form matches (including malformed ids).
    """
    try:
        form_model = get_form_model()
    except LookupError as e:
        logger.error(
            f"Donation form model {settings.GIVE_ROLES_FORM_MODEL!r} is not installed, "
            f"set GIVE_ROLES_FORM_MODEL to the host's form model: {e}"
        )
        return None

    try:
        return form_model.objects.get(pk=form_id)
    except (form_model.DoesNotExist, ValueError, TypeError, ValidationError):
        logger.debug(f"Donation form {form_id!r} not found.")
        return None


def get_form_author_id(form) -> str | None:
    """Get the primary key of the form's author as a string.

    Args:
        form: A donation form instance.

    Returns:
        str: The author's primary key, or None if the form has no author.
    """
    author_id = form.serializable_value(settings.GIVE_ROLES_FORM_AUTHOR_FIELD)
    if author_id is None:
        return None
    return str(author_id)
