"""
Configuration for the Business Central connection, OAuth flow and client limits.
"""

import os
from typing import List, Mapping, Optional

from pydantic import BaseModel, Field

from .constants import (
    BC_API_HOST, LOGIN_HOST, DEFAULT_SCOPES, DEFAULT_REDIRECT_PORT, DEFAULT_API_VERSION,
    DEFAULT_MAX_PAGE_SIZE, DEFAULT_MAX_RETRIES, DEFAULT_REQUEST_TIMEOUT_MS,
    DEFAULT_TOKEN_DIR, CALLBACK_PATH,
)
from .errors import ConfigurationError


class BcConfig(BaseModel):
    tenant_id: str
    environment: str
    client_id: str
    redirect_port: int = DEFAULT_REDIRECT_PORT
    api_version: str = DEFAULT_API_VERSION
    max_page_size: int = DEFAULT_MAX_PAGE_SIZE
    max_retries: int = DEFAULT_MAX_RETRIES
    request_timeout_ms: int = DEFAULT_REQUEST_TIMEOUT_MS
    scopes: List[str] = Field(default_factory=lambda: list(DEFAULT_SCOPES))
    token_dir: str = DEFAULT_TOKEN_DIR
    company_id: Optional[str] = None
    verbose: bool = False

    @property
    def base_url(self) -> str:
        return f"{BC_API_HOST}/v2.0/{self.tenant_id}/{self.environment}/api/{self.api_version}"

    @property
    def auth_url(self) -> str:
        return f"{LOGIN_HOST}/{self.tenant_id}/oauth2/v2.0/authorize"

    @property
    def token_url(self) -> str:
        return f"{LOGIN_HOST}/{self.tenant_id}/oauth2/v2.0/token"

    @property
    def redirect_uri(self) -> str:
        return f"http://localhost:{self.redirect_port}{CALLBACK_PATH}"

    @property
    def request_timeout_seconds(self) -> float:
        return self.request_timeout_ms / 1000.0


# Environment variable -> (config field, required)
ENV_VARS = {
    "BC_TENANT_ID": ("tenant_id", True),
    "BC_ENVIRONMENT": ("environment", True),
    "BC_CLIENT_ID": ("client_id", True),
    "BC_REDIRECT_PORT": ("redirect_port", False),
    "BC_API_VERSION": ("api_version", False),
    "BC_MAX_PAGE_SIZE": ("max_page_size", False),
    "BC_MAX_RETRIES": ("max_retries", False),
    "BC_REQUEST_TIMEOUT_MS": ("request_timeout_ms", False),
    "BC_TOKEN_DIR": ("token_dir", False),
    "BC_COMPANY_ID": ("company_id", False),
}

INT_FIELDS = {"redirect_port", "max_page_size", "max_retries", "request_timeout_ms"}


def load_config(overrides: Optional[Mapping[str, object]] = None,
                env: Optional[Mapping[str, str]] = None) -> BcConfig:
    """Build a BcConfig from environment variables, with explicit overrides taking priority.

    Overrides whose value is None are ignored so argparse namespaces can be passed straight through.
    """
    env = os.environ if env is None else env
    values = {}

    for var, (field_name, _) in ENV_VARS.items():
        raw = env.get(var)
        if raw is None or raw == "":
            continue
        if field_name in INT_FIELDS:
            try:
                values[field_name] = int(raw)
            except ValueError:
                raise ConfigurationError(f"{var} must be an integer, got '{raw}'")
        else:
            values[field_name] = raw

    for key, value in (overrides or {}).items():
        if value is not None:
            values[key] = value

    for var, (field_name, required) in ENV_VARS.items():
        if required and not values.get(field_name):
            raise ConfigurationError(f"Missing required configuration: {var}")

    return BcConfig(**values)
