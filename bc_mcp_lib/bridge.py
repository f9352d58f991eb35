"""
Business Central to MCP bridge that exposes entity operations as MCP tools.
"""

import keyword
import os
import re
import sys
import traceback
from datetime import datetime
from typing import Any, Dict, Iterable, List, Literal, Optional, Type, Union

import requests
from pydantic import BaseModel, ValidationError

try:
    from fastmcp import FastMCP
    from fastmcp.exceptions import ToolError
    from mcp.types import ToolAnnotations
except ImportError:
    print("ERROR: Could not import FastMCP. Make sure it's installed and accessible.", file=sys.stderr)
    sys.exit(1)

from .auth import FileTokenStorage, OAuthClient, TokenStore
from .client import BcClient
from .config import BcConfig
from .constants import TOKEN_FILE_NAME, TYPE_HINTS
from .definitions import STANDARD_ENTITIES
from .errors import BcError, BcMcpError, ToolNameCollisionError
from .formatting import format_entity, format_list
from .metadata_parser import parse_metadata, select_new_entities
from .models import EntityDefinition, GeneratedTool, HandlerType, ParameterKind, ParameterSchema, ToolResponse
from .query import ODataQueryBuilder
from .registry import EntityRegistry
from .tool_generator import build_input_model, generate_tools_for_entity, validate_arguments
from .truncation import FULL, smart_truncate

READ_HANDLERS = {HandlerType.LIST, HandlerType.GET, HandlerType.COUNT}
BUILTIN_OWNER = "<builtin>"


def _split_list(value: str) -> List[str]:
    return [part.strip() for part in value.split(",") if part.strip()]


class BcMCPBridge:
    """Bridge between Business Central and MCP, creating tools from entity definitions."""

    def __init__(self, config: BcConfig, client: Optional[BcClient] = None,
                 oauth: Optional[OAuthClient] = None, registry: Optional[EntityRegistry] = None,
                 entities: Optional[Iterable[EntityDefinition]] = None,
                 mcp_name: str = "business-central-agent", verbose: bool = False, read_only: bool = False):
        self.config = config
        self.verbose = verbose
        self.read_only = read_only
        self.mcp = FastMCP(name=mcp_name)

        if oauth is None:
            storage = FileTokenStorage(os.path.join(config.token_dir, TOKEN_FILE_NAME))
            oauth = OAuthClient(config, TokenStore(storage), verbose=verbose)
        self.oauth = oauth
        self.client = client or BcClient(config, oauth, verbose=verbose)
        self.registry = registry or EntityRegistry()

        self.tools: Dict[str, GeneratedTool] = {}
        self._tool_owners: Dict[str, str] = {}
        self._input_models: Dict[str, Type[BaseModel]] = {}
        self._implementation_registry: Dict[str, Any] = {}

        self._handlers = {
            HandlerType.LIST: self._impl_list,
            HandlerType.GET: self._impl_get,
            HandlerType.CREATE: self._impl_create,
            HandlerType.UPDATE: self._impl_update,
            HandlerType.DELETE: self._impl_delete,
            HandlerType.COUNT: self._impl_count,
            HandlerType.ACTION: self._impl_action,
        }
        missing = set(HandlerType) - set(self._handlers)
        if missing:
            raise RuntimeError(f"No handler implemented for: {sorted(h.value for h in missing)}")

        self._register_builtin_tools()
        for entity in (STANDARD_ENTITIES if entities is None else entities):
            self.register_entity(entity)
        self._log_verbose(f"Registered {len(self.tools)} entity tools for {len(self.registry)} entities")

    def _log_verbose(self, message: str):
        """Prints message to stderr only if verbose mode is enabled."""
        if self.verbose:
            timestamp = datetime.now().strftime('%Y-%m-%d %H:%M:%S.%f')[:-3]
            print(f"[{timestamp} Bridge VERBOSE] {message}", file=sys.stderr)

    # --- Registration ---

    def register_entity(self, entity: EntityDefinition) -> List[GeneratedTool]:
        """Register an entity and its generated tools, replacing tools it registered before.

        Raises ToolNameCollisionError if a tool name is already owned by another entity.
        """
        tools = generate_tools_for_entity(entity)
        if self.read_only:
            tools = [t for t in tools if t.handler in READ_HANDLERS]

        for tool in tools:
            owner = self._tool_owners.get(tool.name)
            if owner is not None and owner != entity.name:
                raise ToolNameCollisionError(
                    f"Tool '{tool.name}' for entity '{entity.name}' collides with a tool of '{owner}'")

        for name in [n for n, owner in self._tool_owners.items() if owner == entity.name]:
            self._unregister_tool(name)

        self.registry.register(entity)
        for tool in tools:
            self._register_generated_tool(tool)
        return tools

    def _unregister_tool(self, tool_name: str):
        self.mcp.remove_tool(tool_name)
        self.tools.pop(tool_name, None)
        self._tool_owners.pop(tool_name, None)
        self._input_models.pop(tool_name, None)
        self._implementation_registry.pop(tool_name, None)

    def _type_hint(self, param: ParameterSchema) -> str:
        if param.kind == ParameterKind.ENUM:
            return f"Literal[{', '.join(repr(v) for v in param.enum_values)}]"
        return TYPE_HINTS[param.kind.value]

    def _format_docstring(self, tool: GeneratedTool) -> str:
        doc = f"{tool.description}\n\nParameters:\n"
        if tool.input_schema:
            for name, param in tool.input_schema.items():
                req_str = "**required**" if param.required else "optional"
                desc_str = f" - {param.description}" if param.description else ""
                doc += f"    - `{name}` ({self._type_hint(param)}, {req_str}){desc_str}\n"
        else:
            doc += "    None\n"
        return doc

    def _register_generated_tool(self, tool: GeneratedTool):
        """Create a keyword-only async function matching the tool's inputs via exec() and register it."""
        param_strings = []
        arg_names = {}
        for name, param in tool.input_schema.items():
            safe_name = re.sub(r'\W|^(?=\d)', '_', name)
            if keyword.iskeyword(safe_name):
                safe_name += "_"
            if safe_name != name:
                self._log_verbose(f"Parameter name '{name}' mapped to '{safe_name}' for tool '{tool.name}'")
            arg_names[safe_name] = name

            type_hint = self._type_hint(param)
            if param.required:
                param_strings.append(f"{safe_name}: {type_hint}")
            else:
                param_strings.append(f"{safe_name}: Optional[{type_hint}] = None")

        signature_params = ", ".join(["*"] + param_strings) if param_strings else ""
        impl_args = ", ".join(f"{name}={name}" for name in arg_names)
        func_def_str = "\n".join([
            f"async def {tool.name}({signature_params}) -> str:",
            f"    impl_func = _implementation_registry['{tool.name}']",
            f"    return await impl_func({impl_args})",
        ])

        def make_logic(instance, tool_name, names):
            async def logic(**kwargs):
                arguments = {names[k]: v for k, v in kwargs.items() if v is not None}
                response = await instance.invoke_tool(tool_name, arguments)
                if response.is_error:
                    raise ToolError(response.text)
                return response.text
            return logic

        self._implementation_registry[tool.name] = make_logic(self, tool.name, arg_names)
        exec_scope = {
            "_implementation_registry": self._implementation_registry,
            "Optional": Optional,
            "Literal": Literal,
            "Union": Union,
        }
        exec(func_def_str, exec_scope, exec_scope)
        tool_func = exec_scope[tool.name]
        tool_func.__doc__ = self._format_docstring(tool)

        annotations = ToolAnnotations(
            readOnlyHint=tool.handler in READ_HANDLERS,
            destructiveHint=tool.handler == HandlerType.DELETE,
        )
        self.mcp.tool(tool_func, name=tool.name, description=tool_func.__doc__, annotations=annotations)
        self.tools[tool.name] = tool
        self._tool_owners[tool.name] = tool.entity_name
        self._input_models[tool.name] = build_input_model(tool)
        self._log_verbose(f"Registered tool: {tool.name}")

    def _register_builtin_tools(self):
        bridge = self

        async def bc_list_companies() -> str:
            """List all available companies in Business Central. You must select a company before accessing any other data."""
            response = await bridge.list_companies()
            if response.is_error:
                raise ToolError(response.text)
            return response.text

        async def bc_select_company(companyId: str) -> str:
            """Select the active company to work with. Required before using any entity tools. Use bc_list_companies first to see available companies.

            Parameters:
                - `companyId` (str, **required**) - The GUID of the company to select.
            """
            return bridge.select_company(companyId).text

        async def bc_discover_custom_apis() -> str:
            """Discover custom API pages in Business Central by reading the OData $metadata. Registers any new entities found as additional tools."""
            response = await bridge.discover_custom_apis()
            if response.is_error:
                raise ToolError(response.text)
            return response.text

        for func in (bc_list_companies, bc_select_company, bc_discover_custom_apis):
            self.mcp.tool(func, name=func.__name__)
            self._tool_owners[func.__name__] = BUILTIN_OWNER
            self._log_verbose(f"Registered tool: {func.__name__}")

    # --- Invocation ---

    def _error_response(self, tool_name: str, error: Exception, prefix: str = "") -> ToolResponse:
        if isinstance(error, ValidationError):
            details = "; ".join(
                f"{'.'.join(str(part) for part in err['loc']) or 'input'}: {err['msg']}" for err in error.errors())
            message = f"Invalid input for {tool_name}: {details}"
        elif isinstance(error, BcError):
            message = error.user_message
        elif isinstance(error, BcMcpError):
            message = str(error)
        elif isinstance(error, requests.exceptions.RequestException):
            message = f"Network error communicating with Business Central: {error}"
        else:
            message = f"Unexpected error in {tool_name}: {error}"
        print(f"ERROR: Tool {tool_name} failed: {message}", file=sys.stderr)
        return ToolResponse(text=f"Error: {prefix}{message}", is_error=True)

    async def invoke_tool(self, tool_name: str, arguments: Dict[str, Any]) -> ToolResponse:
        """Validate arguments, dispatch on the tool's handler and render a text result.

        Never raises: every failure becomes an error-flagged response.
        """
        tool = self.tools.get(tool_name)
        if tool is None:
            return ToolResponse(text=f"Error: Unknown tool '{tool_name}'", is_error=True)
        try:
            args = validate_arguments(tool, arguments, self._input_models.get(tool_name))
            entity = self.registry.get(tool.entity_name)
            if entity is None:
                return ToolResponse(text=f"Error: Entity '{tool.entity_name}' not found in registry.", is_error=True)
            text = await self._handlers[tool.handler](entity, tool, args)
            return ToolResponse(text=text)
        except Exception as e:
            if self.verbose:
                traceback.print_exc(file=sys.stderr)
            return self._error_response(tool_name, e)

    async def list_companies(self) -> ToolResponse:
        try:
            companies = await self.client.list_companies()
            return ToolResponse(text=format_list(companies))
        except Exception as e:
            return self._error_response("bc_list_companies", e)

    def select_company(self, company_id: str) -> ToolResponse:
        self.client.set_company(company_id)
        return ToolResponse(text=f"Company selected: {company_id}")

    async def discover_custom_apis(self) -> ToolResponse:
        """Fetch $metadata and register tools for entities not already known."""
        try:
            xml = await self.client.get_metadata()
            discovered = parse_metadata(xml, verbose=self.verbose)
        except Exception as e:
            return self._error_response("bc_discover_custom_apis", e, prefix="Metadata discovery failed: ")

        registered, skipped = [], []
        for entity in select_new_entities(self.registry, discovered):
            try:
                self.register_entity(entity)
                registered.append(entity.name)
            except ToolNameCollisionError as e:
                self._log_verbose(f"Skipping discovered entity '{entity.name}': {e}")
                skipped.append(entity.name)

        text = f"Discovered {len(discovered)} entities. Registered {len(registered)} new custom entities."
        if registered:
            text += f"\nNew entities: {', '.join(registered)}"
        if skipped:
            text += f"\nSkipped (tool name conflicts): {', '.join(skipped)}"
        return ToolResponse(text=text)

    # --- Handlers ---

    def _entity_path(self, entity: EntityDefinition, args: Dict[str, Any]) -> str:
        company_path = self.client.get_company_path()
        if entity.parent_entity:
            parent = self.registry.get(entity.parent_entity)
            parent_path = parent.api_path if parent else f"{entity.parent_entity}s"
            return f"{company_path}/{parent_path}({args['parentId']})/{entity.api_path}"
        return f"{company_path}/{entity.api_path}"

    def _writable_body(self, entity: EntityDefinition, args: Dict[str, Any]) -> Dict[str, Any]:
        return {f.name: args[f.name] for f in entity.fields
                if not f.read_only and f.name != "id" and f.name in args}

    async def _impl_list(self, entity: EntityDefinition, tool: GeneratedTool, args: Dict[str, Any]) -> str:
        query = ODataQueryBuilder()
        if args.get("filter"):
            query.filter(args["filter"])
        if args.get("select"):
            query.select(_split_list(args["select"]))
        if args.get("expand"):
            query.expand(_split_list(args["expand"]))
        if args.get("top") is not None:
            query.top(args["top"])
        if args.get("skip") is not None:
            query.skip(args["skip"])
        if args.get("orderBy"):
            query.order_by(args["orderBy"])
        query.count()

        result = await self.client.list(self._entity_path(entity, args), query)
        total_count = result.count if result.count is not None else len(result.value)
        shaped = smart_truncate(result.value, total_count, self.config.max_page_size,
                                skip=args.get("skip") or 0)
        return format_list(shaped.rows, None if shaped.mode == FULL else shaped)

    async def _impl_get(self, entity: EntityDefinition, tool: GeneratedTool, args: Dict[str, Any]) -> str:
        query = ODataQueryBuilder()
        if args.get("expand"):
            query.expand(_split_list(args["expand"]))
        item = await self.client.get(f"{self._entity_path(entity, args)}({args['id']})", query)
        return format_entity(item, entity.name)

    async def _impl_create(self, entity: EntityDefinition, tool: GeneratedTool, args: Dict[str, Any]) -> str:
        created = await self.client.create(self._entity_path(entity, args), self._writable_body(entity, args))
        return f"Created {entity.name}:\n{format_entity(created, entity.name)}"

    async def _impl_update(self, entity: EntityDefinition, tool: GeneratedTool, args: Dict[str, Any]) -> str:
        path = f"{self._entity_path(entity, args)}({args['id']})"
        updated = await self.client.update(path, self._writable_body(entity, args), etag="*")
        return f"Updated {entity.name}:\n{format_entity(updated, entity.name)}"

    async def _impl_delete(self, entity: EntityDefinition, tool: GeneratedTool, args: Dict[str, Any]) -> str:
        await self.client.delete(f"{self._entity_path(entity, args)}({args['id']})", etag="*")
        return f"Deleted {entity.name} with ID {args['id']}."

    async def _impl_count(self, entity: EntityDefinition, tool: GeneratedTool, args: Dict[str, Any]) -> str:
        count = await self.client.count(self._entity_path(entity, args), args.get("filter"))
        suffix = f" matching filter: {args['filter']}" if args.get("filter") else ""
        return f"Count: {count} {entity.plural_name}{suffix}"

    async def _impl_action(self, entity: EntityDefinition, tool: GeneratedTool, args: Dict[str, Any]) -> str:
        path = f"{self._entity_path(entity, args)}({args['id']})/{tool.action_nav_path}"
        await self.client.action(path)
        return f"Action '{tool.action_nav_path}' executed successfully on {entity.name} {args['id']}."

    def run(self):
        """Run the MCP server over stdio."""
        self._log_verbose(f"Starting Business Central MCP bridge for {self.config.base_url}")
        self._log_verbose(f"MCP Server Name: {self.mcp.name}")
        self.mcp.run()
