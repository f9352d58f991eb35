"""
PKCE (RFC 7636) verifier/challenge pairs and OAuth state values.
"""

import base64
import hashlib
import secrets


def _base64url(data: bytes) -> str:
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def generate_code_verifier() -> str:
    """43-character base64url string from 32 random bytes."""
    return _base64url(secrets.token_bytes(32))


def generate_code_challenge(verifier: str) -> str:
    """S256 challenge: base64url(SHA-256(verifier))."""
    return _base64url(hashlib.sha256(verifier.encode("ascii")).digest())


def generate_state() -> str:
    return secrets.token_hex(16)
