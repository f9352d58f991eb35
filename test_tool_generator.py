#!/usr/bin/env python3
"""
Tests for tool generation and input validation.
"""

import unittest

from pydantic import ValidationError

from bc_mcp_lib.definitions import STANDARD_ENTITIES
from bc_mcp_lib.models import (
    BoundAction, EntityDefinition, FieldDefinition, HandlerType, ParameterKind,
)
from bc_mcp_lib.tool_generator import (
    build_input_model, field_to_parameter, generate_tools_for_entity, validate_arguments,
)

INVOICE = EntityDefinition(
    name="invoice",
    plural_name="invoices",
    api_path="invoices",
    description="Represents an invoice.",
    fields=[
        FieldDefinition(name="id", type="guid"),
        FieldDefinition(name="number", type="string", read_only=True),
        FieldDefinition(name="customerName", type="string", required=True, description="Customer name."),
        FieldDefinition(name="amount", type="decimal"),
        FieldDefinition(name="paid", type="boolean"),
        FieldDefinition(name="status", type="enum", enum_values=["Draft", "Open", "Paid"]),
        FieldDefinition(name="category", type="enum"),
    ],
    bound_actions=[BoundAction(name="post", description="Post the invoice.", nav_path="Microsoft.NAV.post")],
)

GL_ENTRY = EntityDefinition(
    name="glEntry",
    plural_name="generalLedgerEntries",
    api_path="generalLedgerEntries",
    description="Ledger entry",
    is_read_only=True,
    fields=[FieldDefinition(name="id", type="guid")],
    bound_actions=[BoundAction(name="reverse", nav_path="Microsoft.NAV.reverse")],
)


def tools_by_name(entity):
    return {t.name: t for t in generate_tools_for_entity(entity)}


class TestToolNames(unittest.TestCase):
    """Test naming and per-entity tool sets."""

    def test_full_tool_set(self):
        tools = tools_by_name(INVOICE)
        self.assertEqual(set(tools), {
            "bc_list_invoices", "bc_get_invoice", "bc_count_invoices",
            "bc_create_invoice", "bc_update_invoice", "bc_delete_invoice", "bc_post_invoice",
        })
        self.assertEqual(tools["bc_post_invoice"].handler, HandlerType.ACTION)
        self.assertEqual(tools["bc_post_invoice"].action_nav_path, "Microsoft.NAV.post")
        self.assertTrue(all(t.entity_name == "invoice" for t in tools.values()))

    def test_read_only_entity(self):
        self.assertEqual(set(tools_by_name(GL_ENTRY)), {
            "bc_list_generalLedgerEntries", "bc_get_glEntry", "bc_count_generalLedgerEntries",
        })

    def test_descriptions(self):
        tools = tools_by_name(INVOICE)
        self.assertEqual(tools["bc_get_invoice"].description,
                         "Get a single invoice by ID from Business Central. Represents an invoice.")
        self.assertEqual(tools["bc_post_invoice"].description, "Post the invoice for a invoice in Business Central.")
        self.assertTrue(tools["bc_list_invoices"].description.startswith("List invoices from Business Central."))

    def test_names_unique_across_standard_catalog(self):
        names = [t.name for e in STANDARD_ENTITIES for t in generate_tools_for_entity(e)]
        self.assertEqual(len(names), len(set(names)))


class TestToolSchemas(unittest.TestCase):
    """Test input schemas per handler."""

    def setUp(self):
        self.tools = tools_by_name(INVOICE)

    def test_list_schema(self):
        schema = self.tools["bc_list_invoices"].input_schema
        self.assertEqual(list(schema), ["filter", "select", "expand", "top", "skip", "orderBy"])
        self.assertEqual(schema["top"].kind, ParameterKind.INTEGER)
        self.assertFalse(any(p.required for p in schema.values()))

    def test_create_schema_excludes_read_only(self):
        schema = self.tools["bc_create_invoice"].input_schema
        self.assertEqual(list(schema), ["customerName", "amount", "paid", "status", "category"])
        self.assertTrue(schema["customerName"].required)
        self.assertEqual(schema["amount"].kind, ParameterKind.NUMERIC)
        self.assertEqual(schema["paid"].kind, ParameterKind.BOOLEAN)
        self.assertEqual(schema["status"].kind, ParameterKind.ENUM)
        self.assertEqual(schema["status"].enum_values, ["Draft", "Open", "Paid"])
        self.assertEqual(schema["category"].kind, ParameterKind.TEXT)

    def test_update_schema_all_optional_except_id(self):
        schema = self.tools["bc_update_invoice"].input_schema
        self.assertEqual(list(schema)[0], "id")
        self.assertTrue(schema["id"].required)
        self.assertFalse(schema["customerName"].required)
        self.assertNotIn("number", schema)

    def test_get_delete_action_count(self):
        self.assertEqual(list(self.tools["bc_get_invoice"].input_schema), ["id", "expand"])
        self.assertEqual(list(self.tools["bc_delete_invoice"].input_schema), ["id"])
        self.assertEqual(list(self.tools["bc_post_invoice"].input_schema), ["id"])
        self.assertEqual(list(self.tools["bc_count_invoices"].input_schema), ["filter"])

    def test_parent_entity_requires_parent_id(self):
        line = EntityDefinition(name="invoiceLine", plural_name="invoiceLines", api_path="invoiceLines",
                                parent_entity="invoice",
                                fields=[FieldDefinition(name="id", type="guid"),
                                        FieldDefinition(name="quantity", type="number")])
        for tool in generate_tools_for_entity(line):
            with self.subTest(tool=tool.name):
                self.assertEqual(list(tool.input_schema)[0], "parentId")
                self.assertTrue(tool.input_schema["parentId"].required)

    def test_field_to_parameter_override(self):
        param = field_to_parameter(FieldDefinition(name="x", type="number", required=True), required=False)
        self.assertEqual(param.kind, ParameterKind.NUMERIC)
        self.assertFalse(param.required)


class TestValidateArguments(unittest.TestCase):
    """Test argument validation through the generated input models."""

    def setUp(self):
        self.tools = tools_by_name(INVOICE)

    def test_valid_arguments_drop_unset(self):
        args = validate_arguments(self.tools["bc_create_invoice"],
                                  {"customerName": "Adatum", "amount": 12, "status": "Open"})
        self.assertEqual(args, {"customerName": "Adatum", "amount": 12, "status": "Open"})
        self.assertIsInstance(args["amount"], int)

    def test_missing_required(self):
        with self.assertRaises(ValidationError):
            validate_arguments(self.tools["bc_create_invoice"], {"amount": 1.5})

    def test_enum_value_outside_set(self):
        with self.assertRaises(ValidationError):
            validate_arguments(self.tools["bc_create_invoice"], {"customerName": "A", "status": "Void"})

    def test_unknown_argument(self):
        with self.assertRaises(ValidationError):
            validate_arguments(self.tools["bc_get_invoice"], {"id": "x", "bogus": 1})

    def test_wrong_type(self):
        with self.assertRaises(ValidationError):
            validate_arguments(self.tools["bc_list_invoices"], {"top": "lots"})

    def test_input_model_is_reusable(self):
        tool = self.tools["bc_delete_invoice"]
        model = build_input_model(tool)
        self.assertEqual(validate_arguments(tool, {"id": "abc"}, model), {"id": "abc"})


if __name__ == "__main__":
    unittest.main()
