"""
Business Central MCP Library - exposes the Business Central OData API as MCP tools.
"""

from .models import (
    FieldDefinition,
    NavigationProperty,
    BoundAction,
    EntityDefinition,
    HandlerType,
    ParameterKind,
    ParameterSchema,
    GeneratedTool,
    TokenData,
    ToolResponse,
)
from .errors import (
    BcMcpError,
    BcError,
    ConfigurationError,
    AuthenticationError,
    ToolNameCollisionError,
    parse_bc_error,
)
from .config import BcConfig, load_config
from .query import ODataQueryBuilder
from .rate_limiter import RateLimiter
from .batch import BatchOperation, BatchResult, build_batch_request, parse_batch_response
from .client import BcClient, BcListResponse
from .registry import EntityRegistry
from .metadata_parser import MetadataParser, parse_metadata, select_new_entities
from .tool_generator import generate_tools_for_entity
from .truncation import smart_truncate
from .formatting import format_entity, format_list
from .bridge import BcMCPBridge

__version__ = "0.1.0"

__all__ = [
    'FieldDefinition',
    'NavigationProperty',
    'BoundAction',
    'EntityDefinition',
    'HandlerType',
    'ParameterKind',
    'ParameterSchema',
    'GeneratedTool',
    'TokenData',
    'ToolResponse',
    'BcMcpError',
    'BcError',
    'ConfigurationError',
    'AuthenticationError',
    'ToolNameCollisionError',
    'parse_bc_error',
    'BcConfig',
    'load_config',
    'ODataQueryBuilder',
    'RateLimiter',
    'BatchOperation',
    'BatchResult',
    'build_batch_request',
    'parse_batch_response',
    'BcClient',
    'BcListResponse',
    'EntityRegistry',
    'MetadataParser',
    'parse_metadata',
    'select_new_entities',
    'generate_tools_for_entity',
    'smart_truncate',
    'format_entity',
    'format_list',
    'BcMCPBridge',
]
