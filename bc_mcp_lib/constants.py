"""
Constants used throughout the Business Central MCP library.
"""

# OData (CSDL v4) primitive type mappings to semantic field types.
# Binary, stream and time-of-day values are exposed as plain strings.
EDM_TYPE_MAP = {
    "Edm.String": "string",
    "Edm.Int16": "number",
    "Edm.Int32": "number",
    "Edm.Int64": "number",
    "Edm.Decimal": "decimal",
    "Edm.Double": "decimal",
    "Edm.Single": "decimal",
    "Edm.Boolean": "boolean",
    "Edm.Guid": "guid",
    "Edm.Date": "date",
    "Edm.DateTimeOffset": "datetime",
    "Edm.TimeOfDay": "string",
    "Edm.Binary": "string",
    "Edm.Stream": "string",
}

# Map parameter kinds to their type hint string for exec()
TYPE_HINTS = {
    "text": "str",
    "numeric": "Union[int, float]",
    "integer": "int",
    "boolean": "bool",
}

# HTTP statuses that are retried transparently by the client
RETRYABLE_STATUS_CODES = frozenset({408, 429, 500, 502, 503, 504})

# Business Central / Entra ID endpoints
BC_API_HOST = "https://api.businesscentral.dynamics.com"
LOGIN_HOST = "https://login.microsoftonline.com"
DEFAULT_SCOPES = [
    "https://api.businesscentral.dynamics.com/.default",
    "offline_access",
]

# Defaults for the client and the OAuth flow
DEFAULT_REDIRECT_PORT = 3847
DEFAULT_API_VERSION = "v2.0"
DEFAULT_MAX_PAGE_SIZE = 50
DEFAULT_MAX_RETRIES = 5
DEFAULT_REQUEST_TIMEOUT_MS = 480000
DEFAULT_TOKEN_DIR = "~/.bc-agent"
TOKEN_FILE_NAME = "tokens.json"
CALLBACK_PATH = "/callback"
CALLBACK_TIMEOUT_SECONDS = 300
REFRESH_BUFFER_MS = 5 * 60 * 1000

# Rate limits published for Business Central online
DEFAULT_MAX_CONCURRENT = 5
DEFAULT_MAX_PER_WINDOW = 6000
DEFAULT_WINDOW_MS = 300000
BACKOFF_BASE_MS = 1000
BACKOFF_MAX_MS = 30000

# Result shaping
FULL_THRESHOLD = 50
LARGE_THRESHOLD = 500
SUMMARY_PREVIEW_ROWS = 20
MAX_STRING_LENGTH = 200
MAX_DISTINCT_VALUES = 20

MAX_BATCH_OPERATIONS = 100

USER_AGENT = "BC-MCP-Agent/0.1"
