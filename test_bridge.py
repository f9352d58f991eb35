#!/usr/bin/env python3
"""
Tests for the MCP bridge: tool registration, dispatch and response texts.
"""

import asyncio
import unittest
from unittest.mock import AsyncMock, MagicMock

import requests
from fastmcp import Client
from fastmcp.exceptions import ToolError

from bc_mcp_lib.bridge import BcMCPBridge
from bc_mcp_lib.client import BcListResponse
from bc_mcp_lib.config import BcConfig
from bc_mcp_lib.definitions import STANDARD_ENTITIES
from bc_mcp_lib.errors import ConfigurationError, ToolNameCollisionError, parse_bc_error
from bc_mcp_lib.models import BoundAction, EntityDefinition, FieldDefinition, HandlerType

WIDGET = EntityDefinition(
    name="widget",
    plural_name="widgets",
    api_path="widgets",
    description="A widget.",
    fields=[
        FieldDefinition(name="id", type="guid"),
        FieldDefinition(name="displayName", type="string", required=True),
        FieldDefinition(name="price", type="decimal"),
        FieldDefinition(name="color", type="enum", enum_values=["red", "blue"]),
        FieldDefinition(name="total", type="decimal", read_only=True),
    ],
    bound_actions=[BoundAction(name="ship", description="Ship it", nav_path="Microsoft.NAV.ship")],
)

WIDGET_PART = EntityDefinition(
    name="widgetPart",
    plural_name="widgetParts",
    api_path="widgetParts",
    parent_entity="widget",
    fields=[FieldDefinition(name="id", type="guid"), FieldDefinition(name="quantity", type="number")],
)

METADATA_XML = b"""<?xml version="1.0"?>
<edmx:Edmx xmlns:edmx="http://docs.oasis-open.org/odata/ns/edmx">
  <edmx:DataServices>
    <Schema Namespace="Microsoft.NAV" xmlns="http://docs.oasis-open.org/odata/ns/edm">
      <EntityType Name="widget"><Key><PropertyRef Name="id" /></Key><Property Name="id" Type="Edm.Guid" /></EntityType>
      <EntityType Name="gizmo"><Key><PropertyRef Name="id" /></Key>
        <Property Name="id" Type="Edm.Guid" /><Property Name="label" Type="Edm.String" />
      </EntityType>
      <EntityType Name="company"><Key><PropertyRef Name="id" /></Key><Property Name="id" Type="Edm.Guid" /></EntityType>
      <EntityContainer Name="NAV">
        <EntitySet Name="gizmos" EntityType="Microsoft.NAV.gizmo" />
        <EntitySet Name="companies" EntityType="Microsoft.NAV.company" />
      </EntityContainer>
    </Schema>
  </edmx:DataServices>
</edmx:Edmx>"""


def make_client():
    client = MagicMock()
    client.company_id = "c1"
    client.get_company_path.return_value = "companies(c1)"
    for name in ("list", "get", "create", "update", "delete", "count", "action", "list_companies", "get_metadata"):
        setattr(client, name, AsyncMock())
    return client


class BridgeTestCase(unittest.TestCase):

    def setUp(self):
        self.config = BcConfig(tenant_id="t", environment="e", client_id="c", max_page_size=10)
        self.client = make_client()
        self.bridge = BcMCPBridge(self.config, client=self.client, oauth=MagicMock(),
                                  entities=[WIDGET, WIDGET_PART])

    def invoke(self, name, arguments):
        return asyncio.run(self.bridge.invoke_tool(name, arguments))


class TestRegistration(BridgeTestCase):
    """Test which tools the bridge exposes."""

    def test_builtin_and_entity_tools_registered(self):
        tools = asyncio.run(self.bridge.mcp.get_tools())
        for name in ("bc_list_companies", "bc_select_company", "bc_discover_custom_apis",
                     "bc_list_widgets", "bc_get_widget", "bc_create_widget", "bc_update_widget",
                     "bc_delete_widget", "bc_count_widgets", "bc_ship_widget", "bc_list_widgetParts"):
            self.assertIn(name, tools)

    def test_generated_tool_parameters(self):
        tools = asyncio.run(self.bridge.mcp.get_tools())
        params = tools["bc_create_widget"].parameters
        self.assertEqual(set(params["properties"]), {"displayName", "price", "color"})
        self.assertEqual(params.get("required"), ["displayName"])

    def test_read_only_mode(self):
        bridge = BcMCPBridge(self.config, client=make_client(), oauth=MagicMock(), entities=[WIDGET],
                             read_only=True)
        self.assertEqual(set(bridge.tools), {"bc_list_widgets", "bc_get_widget", "bc_count_widgets"})

    def test_standard_catalog_registers_by_default(self):
        bridge = BcMCPBridge(self.config, client=make_client(), oauth=MagicMock())
        self.assertEqual(len(bridge.registry), len(STANDARD_ENTITIES))
        self.assertIn("bc_post_salesInvoice", bridge.tools)
        self.assertIn("bc_post_journal", bridge.tools)
        self.assertNotIn("bc_create_generalLedgerEntry", bridge.tools)

    def test_reregistering_entity_replaces_its_tools(self):
        trimmed = WIDGET.model_copy(update={"bound_actions": []})
        self.bridge.register_entity(trimmed)
        self.assertNotIn("bc_ship_widget", self.bridge.tools)
        self.assertIn("bc_create_widget", self.bridge.tools)
        tools = asyncio.run(self.bridge.mcp.get_tools())
        self.assertNotIn("bc_ship_widget", tools)

    def test_collision_between_entities_rejected(self):
        clash = EntityDefinition(name="gadget", plural_name="widgets", api_path="gadgets")
        with self.assertRaises(ToolNameCollisionError):
            self.bridge.register_entity(clash)
        self.assertNotIn("gadget", self.bridge.registry)
        self.assertEqual(self.bridge.tools["bc_list_widgets"].entity_name, "widget")

    def test_collision_with_builtin_rejected(self):
        company = EntityDefinition(name="company", plural_name="companies", api_path="companies")
        with self.assertRaises(ToolNameCollisionError):
            self.bridge.register_entity(company)


class TestHandlers(BridgeTestCase):
    """Test dispatch and response texts per handler."""

    def test_list_builds_query_and_formats(self):
        self.client.list.return_value = BcListResponse(value=[{"id": "1", "displayName": "A"}], count=1)
        response = self.invoke("bc_list_widgets", {
            "filter": "price gt 5", "select": "id, displayName", "top": 5, "orderBy": "displayName",
        })
        self.assertFalse(response.is_error)
        path, query = self.client.list.await_args.args
        self.assertEqual(path, "companies(c1)/widgets")
        self.assertEqual(query.build(),
                         "?$filter=price gt 5&$select=id,displayName&$top=5&$orderby=displayName&$count=true")
        self.assertEqual(response.text, "id | displayName\n--- | ---\n1 | A")

    def test_list_large_result_is_paginated(self):
        self.client.list.return_value = BcListResponse(
            value=[{"id": str(i)} for i in range(100)], count=300)
        response = self.invoke("bc_list_widgets", {"skip": 40})
        self.assertTrue(response.text.startswith("Showing 10 of 300 records."))
        self.assertIn("Use $skip=50 to get the next page.", response.text)

    def test_list_keeps_explicit_zero_top_and_skip(self):
        self.client.list.return_value = BcListResponse(value=[], count=12)
        self.invoke("bc_list_widgets", {"top": 0, "skip": 0})
        path, query = self.client.list.await_args.args
        self.assertEqual(query.build(), "?$top=0&$skip=0&$count=true")

    def test_list_without_count_uses_row_count(self):
        self.client.list.return_value = BcListResponse(value=[])
        self.assertEqual(self.invoke("bc_list_widgets", {}).text, "No records found.")

    def test_get(self):
        self.client.get.return_value = {"id": "w1", "displayName": "A"}
        response = self.invoke("bc_get_widget", {"id": "w1", "expand": "parts"})
        path, query = self.client.get.await_args.args
        self.assertEqual(path, "companies(c1)/widgets(w1)")
        self.assertEqual(query.build(), "?$expand=parts")
        self.assertEqual(response.text, "--- widget ---\nid: w1\ndisplayName: A")

    def test_create_sends_only_writable_fields(self):
        self.client.create.return_value = {"id": "new", "displayName": "A"}
        response = self.invoke("bc_create_widget", {"displayName": "A", "color": "red"})
        path, body = self.client.create.await_args.args
        self.assertEqual(path, "companies(c1)/widgets")
        self.assertEqual(body, {"displayName": "A", "color": "red"})
        self.assertEqual(response.text, "Created widget:\n--- widget ---\nid: new\ndisplayName: A")

    def test_update_excludes_id_from_body(self):
        self.client.update.return_value = {"id": "w1", "price": 2.5}
        response = self.invoke("bc_update_widget", {"id": "w1", "price": 2.5})
        self.assertEqual(self.client.update.await_args.args, ("companies(c1)/widgets(w1)", {"price": 2.5}))
        self.assertEqual(self.client.update.await_args.kwargs, {"etag": "*"})
        self.assertTrue(response.text.startswith("Updated widget:\n"))

    def test_delete(self):
        response = self.invoke("bc_delete_widget", {"id": "w1"})
        self.client.delete.assert_awaited_once_with("companies(c1)/widgets(w1)", etag="*")
        self.assertEqual(response.text, "Deleted widget with ID w1.")

    def test_count(self):
        self.client.count.return_value = 7
        self.assertEqual(self.invoke("bc_count_widgets", {}).text, "Count: 7 widgets")
        self.assertEqual(self.invoke("bc_count_widgets", {"filter": "price gt 1"}).text,
                         "Count: 7 widgets matching filter: price gt 1")
        self.client.count.assert_awaited_with("companies(c1)/widgets", "price gt 1")

    def test_action(self):
        response = self.invoke("bc_ship_widget", {"id": "w1"})
        self.client.action.assert_awaited_once_with("companies(c1)/widgets(w1)/Microsoft.NAV.ship")
        self.assertEqual(response.text, "Action 'Microsoft.NAV.ship' executed successfully on widget w1.")

    def test_nested_entity_path(self):
        self.client.create.return_value = {"id": "p1"}
        self.invoke("bc_create_widgetPart", {"parentId": "w9", "quantity": 3})
        path, body = self.client.create.await_args.args
        self.assertEqual(path, "companies(c1)/widgets(w9)/widgetParts")
        self.assertEqual(body, {"quantity": 3})

    def test_nested_entity_path_without_registered_parent(self):
        bridge = BcMCPBridge(self.config, client=self.client, oauth=MagicMock())
        self.client.list.return_value = BcListResponse(value=[])
        asyncio.run(bridge.invoke_tool("bc_list_salesOrderLines", {"parentId": "so1"}))
        path, _ = self.client.list.await_args.args
        self.assertEqual(path, "companies(c1)/salesOrders(so1)/salesOrderLines")

    def test_every_handler_type_is_dispatched(self):
        handlers = {tool.handler for tool in self.bridge.tools.values()}
        self.assertEqual(handlers, set(HandlerType))


class TestErrors(BridgeTestCase):
    """Test that failures become error-flagged responses."""

    def test_unknown_tool(self):
        response = self.invoke("bc_list_nothing", {})
        self.assertTrue(response.is_error)
        self.assertIn("Unknown tool", response.text)

    def test_validation_error(self):
        response = self.invoke("bc_create_widget", {"color": "green"})
        self.assertTrue(response.is_error)
        self.assertTrue(response.text.startswith("Error: Invalid input for bc_create_widget:"))
        self.client.create.assert_not_awaited()

    def test_bc_error_uses_user_message(self):
        self.client.get.side_effect = parse_bc_error(404, {"error": {"code": "NotFound", "message": "gone"}})
        response = self.invoke("bc_get_widget", {"id": "x"})
        self.assertTrue(response.is_error)
        self.assertEqual(response.text,
                         "Error: Resource not found: gone. Verify the ID exists and you have access.")

    def test_no_company_selected(self):
        self.client.get_company_path.side_effect = ConfigurationError(
            "No company selected. Please select a company first using bc_select_company.")
        response = self.invoke("bc_count_widgets", {})
        self.assertEqual(response.text,
                         "Error: No company selected. Please select a company first using bc_select_company.")

    def test_network_error(self):
        self.client.list.side_effect = requests.exceptions.ConnectionError("offline")
        response = self.invoke("bc_list_widgets", {})
        self.assertTrue(response.is_error)
        self.assertIn("offline", response.text)


class TestBuiltinTools(BridgeTestCase):
    """Test company selection and metadata discovery."""

    def test_list_companies(self):
        self.client.list_companies.return_value = [{"id": "c1", "name": "CRONUS"}]
        response = asyncio.run(self.bridge.list_companies())
        self.assertEqual(response.text, "id | name\n--- | ---\nc1 | CRONUS")

    def test_select_company(self):
        response = self.bridge.select_company("c2")
        self.client.set_company.assert_called_once_with("c2")
        self.assertEqual(response.text, "Company selected: c2")

    def test_discover_registers_only_new_entities(self):
        self.client.get_metadata.return_value = METADATA_XML
        response = asyncio.run(self.bridge.discover_custom_apis())

        self.assertFalse(response.is_error)
        self.assertTrue(response.text.startswith("Discovered 3 entities. Registered 1 new custom entities."))
        self.assertIn("Skipped (tool name conflicts): company", response.text)
        self.assertIn("bc_list_gizmos", self.bridge.tools)
        self.assertIn("bc_update_gizmo", self.bridge.tools)
        self.assertEqual(len(self.bridge.registry.get("widget").fields), 5)

    def test_discover_failure(self):
        self.client.get_metadata.return_value = b"<broken"
        response = asyncio.run(self.bridge.discover_custom_apis())
        self.assertTrue(response.is_error)
        self.assertTrue(response.text.startswith("Error: Metadata discovery failed:"))


class TestMcpRoundTrip(BridgeTestCase):
    """Test calling generated tools through an in-memory MCP client."""

    def test_call_generated_tool(self):
        self.client.count.return_value = 3

        async def scenario():
            async with Client(self.bridge.mcp) as mcp_client:
                return await mcp_client.call_tool("bc_count_widgets", {"filter": "price gt 1"})

        result = asyncio.run(scenario())
        self.assertEqual(result.content[0].text, "Count: 3 widgets matching filter: price gt 1")

    def test_call_reports_errors(self):
        self.client.get.side_effect = parse_bc_error(403, {})

        async def scenario():
            async with Client(self.bridge.mcp) as mcp_client:
                await mcp_client.call_tool("bc_get_widget", {"id": "w1"})

        with self.assertRaises(ToolError) as ctx:
            asyncio.run(scenario())
        self.assertIn("Access denied", str(ctx.exception))

    def test_select_company_through_mcp(self):
        async def scenario():
            async with Client(self.bridge.mcp) as mcp_client:
                return await mcp_client.call_tool("bc_select_company", {"companyId": "c7"})

        result = asyncio.run(scenario())
        self.assertEqual(result.content[0].text, "Company selected: c7")
        self.client.set_company.assert_called_once_with("c7")


if __name__ == "__main__":
    unittest.main()
