"""Test cases for capability generation."""

from unittest import TestCase

from ddt import data as ddt_data
from ddt import ddt, unpack

from give_roles.api.capabilities import get_all_core_caps, get_capabilities_for_entity, get_core_caps
from give_roles.api.data import EntityType


@ddt
class TestGetCapabilitiesForEntity(TestCase):
    """Test the capabilities generated for a single entity type."""

    @ddt_data(EntityType.FORM, EntityType.PAYMENT)
    def test_generates_eighteen_unique_capabilities(self, entity_type):
        """Each entity type expands into 18 distinct capability names."""
        capabilities = get_capabilities_for_entity(entity_type)

        self.assertEqual(len(capabilities), 18)
        self.assertEqual(len(set(capabilities)), 18)

    @ddt_data(
        ("give_form", EntityType.FORM),
        ("give_payment", EntityType.PAYMENT),
    )
    @unpack
    def test_accepts_capability_type_token(self, token, entity_type):
        """Entity types can be passed by their capability type token."""
        self.assertEqual(get_capabilities_for_entity(token), get_capabilities_for_entity(entity_type))

    def test_unknown_entity_type_raises(self):
        """Only forms and payments have generated capabilities."""
        with self.assertRaises(ValueError):
            get_capabilities_for_entity("give_donor")

    def test_form_capabilities_in_template_order(self):
        """Capabilities come out in a fixed order: post type, terms, then custom."""
        self.assertEqual(
            get_capabilities_for_entity(EntityType.FORM),
            [
                "edit_give_form",
                "read_give_form",
                "delete_give_form",
                "edit_give_forms",
                "edit_others_give_forms",
                "publish_give_forms",
                "read_private_give_forms",
                "delete_give_forms",
                "delete_private_give_forms",
                "delete_published_give_forms",
                "delete_others_give_forms",
                "edit_private_give_forms",
                "edit_published_give_forms",
                "manage_give_form_terms",
                "edit_give_form_terms",
                "delete_give_form_terms",
                "assign_give_form_terms",
                "view_give_form_stats",
            ],
        )


class TestGetCoreCaps(TestCase):
    """Test the capabilities generated for all entity types."""

    def test_keyed_by_capability_type(self):
        self.assertEqual(list(get_core_caps()), ["give_form", "give_payment"])

    def test_payment_differs_from_form_only_by_entity_token(self):
        """Swapping the entity token in every form capability yields the payment capabilities."""
        core_caps = get_core_caps()

        self.assertEqual(
            [cap.replace("give_form", "give_payment") for cap in core_caps["give_form"]],
            core_caps["give_payment"],
        )

    def test_deterministic(self):
        self.assertEqual(get_core_caps(), get_core_caps())

    def test_all_core_caps_flattens_in_order(self):
        core_caps = get_core_caps()

        all_caps = get_all_core_caps()

        self.assertEqual(len(all_caps), 36)
        self.assertEqual(all_caps, core_caps["give_form"] + core_caps["give_payment"])
