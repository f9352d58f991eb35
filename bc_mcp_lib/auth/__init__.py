"""
OAuth authentication for Business Central.
"""

from .callback_server import AuthCallbackResult, CallbackServer, CallbackState
from .oauth import OAuthClient
from .pkce import generate_code_challenge, generate_code_verifier, generate_state
from .token_store import FileTokenStorage, MemoryTokenStorage, TokenStorage, TokenStore

__all__ = [
    "AuthCallbackResult",
    "CallbackServer",
    "CallbackState",
    "OAuthClient",
    "generate_code_challenge",
    "generate_code_verifier",
    "generate_state",
    "FileTokenStorage",
    "MemoryTokenStorage",
    "TokenStorage",
    "TokenStore",
]
