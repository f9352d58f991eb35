#!/usr/bin/env python3
"""
Business Central MCP Agent.

Exposes the Business Central OData API as MCP tools over stdio, generating
list/get/create/update/delete/count/action tools for each known entity.
"""

import argparse
import asyncio
import signal
import sys
import traceback
from collections import defaultdict

from dotenv import load_dotenv

from bc_mcp_lib import BcMCPBridge, ConfigurationError, load_config


def print_trace_info(bridge: BcMCPBridge):
    """Print the bridge configuration and every generated tool, for debugging."""
    print("=" * 80)
    print("Business Central MCP Bridge Trace Information")
    print("=" * 80)

    print(f"\nAPI Base URL: {bridge.config.base_url}")
    print(f"MCP Name: {bridge.mcp.name}")
    print(f"Read-only: {bridge.read_only}")
    print(f"Company: {bridge.client.company_id or 'Not selected'}")
    print(f"Max Page Size: {bridge.config.max_page_size}")
    print(f"Max Retries: {bridge.config.max_retries}")

    by_entity = defaultdict(list)
    for tool in bridge.tools.values():
        by_entity[tool.entity_name].append(tool)

    print(f"\nBuilt-in Tools:")
    for name in ("bc_list_companies", "bc_select_company", "bc_discover_custom_apis"):
        print(f"   - {name}")

    print(f"\nEntity Tools ({len(bridge.tools)} total across {len(by_entity)} entities):")
    for entity_name in sorted(by_entity):
        tools = sorted(by_entity[entity_name], key=lambda t: t.name)
        print(f"\n   {entity_name}: {len(tools)} tools")
        for tool in tools:
            print(f"      {tool.handler.value:<7} {tool.name}")
            for param_name, param in tool.input_schema.items():
                req_str = "required" if param.required else "optional"
                kind = param.kind.value
                if param.enum_values:
                    kind += f" [{', '.join(param.enum_values)}]"
                print(f"              - {param_name}: {kind} ({req_str})")

    print("\n" + "=" * 80)
    print("Trace complete - MCP bridge initialized successfully but not started")
    print("=" * 80)


def main():
    """Main entry point."""
    load_dotenv()

    parser = argparse.ArgumentParser(
        description="Business Central to MCP Agent",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument("--tenant", dest="tenant_id", help="Azure AD tenant ID (overrides BC_TENANT_ID)")
    parser.add_argument("--environment", help="Business Central environment name (overrides BC_ENVIRONMENT)")
    parser.add_argument("--client-id", dest="client_id", help="App registration client ID (overrides BC_CLIENT_ID)")
    parser.add_argument("--redirect-port", dest="redirect_port", type=int,
                        help="Loopback port for the OAuth callback (overrides BC_REDIRECT_PORT)")
    parser.add_argument("--api-version", dest="api_version", help="API version, e.g. v2.0 (overrides BC_API_VERSION)")
    parser.add_argument("--max-page-size", dest="max_page_size", type=int,
                        help="Rows returned per page for large lists (overrides BC_MAX_PAGE_SIZE)")
    parser.add_argument("--max-retries", dest="max_retries", type=int,
                        help="Retries for throttled or failed requests (overrides BC_MAX_RETRIES)")
    parser.add_argument("--timeout-ms", dest="request_timeout_ms", type=int,
                        help="Per-request timeout in milliseconds (overrides BC_REQUEST_TIMEOUT_MS)")
    parser.add_argument("--company", dest="company_id", help="Company ID to select at start-up (overrides BC_COMPANY_ID)")
    parser.add_argument("-v", "--verbose", "--debug", dest="verbose", action="store_true",
                        help="Enable verbose output to stderr")
    parser.add_argument("--read-only", action="store_true", help="Only expose list, get and count tools")
    parser.add_argument("--trace", action="store_true",
                        help="Initialize the bridge, print all tools and parameters, then exit")
    parser.add_argument("--logout", action="store_true", help="Clear cached tokens and exit")

    args = parser.parse_args()

    overrides = {
        key: getattr(args, key)
        for key in ("tenant_id", "environment", "client_id", "redirect_port", "api_version",
                    "max_page_size", "max_retries", "request_timeout_ms", "company_id")
    }
    overrides["verbose"] = args.verbose or None

    try:
        config = load_config(overrides)
    except ConfigurationError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        print("Set it in the environment, a .env file, or via the matching command-line flag.", file=sys.stderr)
        sys.exit(1)

    def signal_handler(sig, frame):
        print(f"\n{signal.Signals(sig).name} received, shutting down server...", file=sys.stderr)
        sys.exit(0)
    signal.signal(signal.SIGINT, signal_handler)
    signal.signal(signal.SIGTERM, signal_handler)

    try:
        bridge = BcMCPBridge(config, verbose=config.verbose, read_only=args.read_only)

        if args.logout:
            asyncio.run(bridge.oauth.logout())
            print("Cached tokens cleared.", file=sys.stderr)
            sys.exit(0)

        if args.trace:
            print_trace_info(bridge)
            sys.exit(0)

        bridge.run()
    except Exception as e:
        print(f"\n--- FATAL ERROR ---", file=sys.stderr)
        print(f"An unexpected error occurred during startup or runtime: {e}", file=sys.stderr)
        traceback.print_exc(file=sys.stderr)
        print("-------------------", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
