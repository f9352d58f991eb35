#!/usr/bin/env python3
"""
Tests for the entity registry, entity models and the standard entity catalog.
"""

import unittest

from pydantic import ValidationError

from bc_mcp_lib.definitions import STANDARD_ENTITIES
from bc_mcp_lib.models import EntityDefinition, FieldDefinition
from bc_mcp_lib.registry import EntityRegistry


def make_entity(name="widget", plural="widgets", **kwargs):
    fields = kwargs.pop("fields", [
        FieldDefinition(name="id", type="guid"),
        FieldDefinition(name="code", type="string", required=True),
        FieldDefinition(name="ownerId", type="guid"),
        FieldDefinition(name="total", type="decimal", read_only=True),
    ])
    return EntityDefinition(name=name, plural_name=plural, api_path=plural, fields=fields, **kwargs)


class TestFieldDefinition(unittest.TestCase):
    """Test field model invariants."""

    def test_id_is_always_read_only(self):
        field = FieldDefinition(name="id", type="guid", read_only=False)
        self.assertTrue(field.read_only)

    def test_enum_requires_values_when_declared(self):
        with self.assertRaises(ValidationError):
            FieldDefinition(name="status", type="enum", enum_values=[])

    def test_unknown_type_rejected(self):
        with self.assertRaises(ValidationError):
            FieldDefinition(name="x", type="blob")


class TestEntityRegistry(unittest.TestCase):
    """Test registry lookups and field queries."""

    def setUp(self):
        self.registry = EntityRegistry([make_entity()])

    def test_lookup_by_name_and_plural(self):
        self.assertEqual(self.registry.get("widget").plural_name, "widgets")
        self.assertEqual(self.registry.get_by_plural_name("widgets").name, "widget")
        self.assertIsNone(self.registry.get("gadget"))
        self.assertIsNone(self.registry.get_by_plural_name("gadgets"))
        self.assertIn("widget", self.registry)
        self.assertEqual(len(self.registry), 1)

    def test_register_replaces_same_name(self):
        self.registry.register(make_entity(description="Replaced"))
        self.assertEqual(len(self.registry), 1)
        self.assertEqual(self.registry.get("widget").description, "Replaced")

    def test_list_all_keeps_registration_order(self):
        self.registry.register(make_entity("gadget", "gadgets"))
        self.assertEqual([e.name for e in self.registry.list_all()], ["widget", "gadget"])

    def test_field_queries(self):
        self.assertEqual([f.name for f in self.registry.get_writable_fields("widget")], ["code", "ownerId"])
        self.assertEqual([f.name for f in self.registry.get_required_fields("widget")], ["code"])
        self.assertEqual([f.name for f in self.registry.get_filterable_fields("widget")], ["id", "code", "total"])

    def test_field_queries_on_unknown_entity(self):
        self.assertEqual(self.registry.get_writable_fields("nope"), [])
        self.assertEqual(self.registry.get_required_fields("nope"), [])
        self.assertEqual(self.registry.get_filterable_fields("nope"), [])


class TestStandardEntities(unittest.TestCase):
    """Test the shipped entity catalog."""

    def test_names_are_unique(self):
        names = [e.name for e in STANDARD_ENTITIES]
        plurals = [e.plural_name for e in STANDARD_ENTITIES]
        self.assertEqual(len(names), len(set(names)))
        self.assertEqual(len(plurals), len(set(plurals)))

    def test_every_entity_has_read_only_id(self):
        for entity in STANDARD_ENTITIES:
            with self.subTest(entity=entity.name):
                id_field = entity.get_field("id")
                if id_field is not None:
                    self.assertTrue(id_field.read_only)

    def test_parents_precede_children(self):
        names = {e.name for e in STANDARD_ENTITIES}
        seen = set()
        for entity in STANDARD_ENTITIES:
            if entity.parent_entity in names:
                self.assertIn(entity.parent_entity, seen, entity.name)
            seen.add(entity.name)

    def test_document_lines_are_nested(self):
        registry = EntityRegistry(STANDARD_ENTITIES)
        expected = {
            "salesInvoiceLine": "salesInvoice",
            "salesOrderLine": "salesOrder",
            "salesQuoteLine": "salesQuote",
            "purchaseInvoiceLine": "purchaseInvoice",
        }
        for name, parent in expected.items():
            with self.subTest(entity=name):
                self.assertEqual(registry.get(name).parent_entity, parent)

    def test_bound_actions(self):
        registry = EntityRegistry(STANDARD_ENTITIES)
        invoice_actions = {a.name for a in registry.get("salesInvoice").bound_actions}
        self.assertTrue({"post", "postAndSend", "send", "cancel"} <= invoice_actions)
        self.assertEqual([a.nav_path for a in registry.get("journal").bound_actions], ["Microsoft.NAV.post"])

    def test_read_only_entities(self):
        registry = EntityRegistry(STANDARD_ENTITIES)
        for name in ("account", "generalLedgerEntry", "dimension", "dimensionValue"):
            with self.subTest(entity=name):
                self.assertTrue(registry.get(name).is_read_only)
        self.assertFalse(registry.get("customer").is_read_only)

    def test_core_entities_present(self):
        registry = EntityRegistry(STANDARD_ENTITIES)
        for name in ("customer", "vendor", "item", "contact", "salesInvoice", "salesInvoiceLine",
                     "journal", "journalLine", "currency", "paymentTerm", "employee"):
            with self.subTest(entity=name):
                self.assertIn(name, registry)


if __name__ == "__main__":
    unittest.main()
