"""
OAuth 2.0 authorization-code flow with PKCE against Microsoft Entra ID.
"""

import asyncio
import sys
import webbrowser
from datetime import datetime
from typing import Any, Callable, Dict, Optional
from urllib.parse import urlencode

import requests

from ..config import BcConfig
from ..constants import REFRESH_BUFFER_MS, USER_AGENT
from ..errors import AuthenticationError
from ..models import TokenData
from .callback_server import CallbackServer
from .pkce import generate_code_challenge, generate_code_verifier, generate_state
from .token_store import TokenStore, now_ms


class OAuthClient:
    """Provides valid access tokens, refreshing or re-authenticating as needed.

    Public client flow: no client secret is ever sent. Tokens are persisted
    through the TokenStore after every successful exchange or refresh.
    """

    def __init__(self, config: BcConfig, token_store: Optional[TokenStore] = None,
                 verbose: bool = False, open_browser: Callable[[str], bool] = webbrowser.open,
                 refresh_buffer_ms: int = REFRESH_BUFFER_MS):
        self.config = config
        self.token_store = token_store or TokenStore()
        self.verbose = verbose
        self.refresh_buffer_ms = refresh_buffer_ms
        self._open_browser = open_browser
        self._login_lock = asyncio.Lock()
        self.session = requests.Session()
        self.session.headers.update({
            'Accept': 'application/json',
            'User-Agent': USER_AGENT,
        })

    def _log_verbose(self, message: str):
        """Prints message to stderr only if verbose mode is enabled."""
        if self.verbose:
            timestamp = datetime.now().strftime('%Y-%m-%d %H:%M:%S.%f')[:-3]
            print(f"[{timestamp} OAuth VERBOSE] {message}", file=sys.stderr)

    async def get_access_token(self) -> str:
        tokens = await self.token_store.load()

        if tokens and not TokenStore.is_expired(tokens):
            if not TokenStore.is_expiring_soon(tokens, self.refresh_buffer_ms):
                return tokens.access_token
            # Near expiry: try to refresh, fall back to the still-valid token
            try:
                refreshed = await self.refresh_access_token(tokens.refresh_token)
                return refreshed.access_token
            except (AuthenticationError, requests.exceptions.RequestException, OSError) as e:
                self._log_verbose(f"Token refresh failed, using current token: {e}")
                return tokens.access_token

        if tokens and tokens.refresh_token:
            try:
                refreshed = await self.refresh_access_token(tokens.refresh_token)
                return refreshed.access_token
            except (AuthenticationError, requests.exceptions.RequestException, OSError) as e:
                self._log_verbose(f"Token refresh failed, starting interactive login: {e}")

        # One browser login at a time; later callers reuse its tokens
        async with self._login_lock:
            current = await self.token_store.load()
            if current and not TokenStore.is_expired(current):
                return current.access_token
            new_tokens = await self.authenticate()
            return new_tokens.access_token

    def build_authorization_url(self, state: str, code_challenge: str) -> str:
        params = {
            'client_id': self.config.client_id,
            'response_type': 'code',
            'redirect_uri': self.config.redirect_uri,
            'scope': ' '.join(self.config.scopes),
            'state': state,
            'code_challenge': code_challenge,
            'code_challenge_method': 'S256',
        }
        return f"{self.config.auth_url}?{urlencode(params)}"

    async def authenticate(self) -> TokenData:
        """Run the interactive browser login and persist the resulting tokens."""
        state = generate_state()
        verifier = generate_code_verifier()
        challenge = generate_code_challenge(verifier)
        auth_url = self.build_authorization_url(state, challenge)

        server = CallbackServer(self.config.redirect_port, state, verbose=self.verbose)
        await server.start()

        try:
            print(f"\nOpening browser for Business Central authentication...\n"
                  f"If the browser does not open, visit:\n{auth_url}\n", file=sys.stderr)
            try:
                opened = self._open_browser(auth_url)
            except webbrowser.Error as e:
                self._log_verbose(f"Could not launch browser: {e}")
                opened = False
            if not opened:
                print("Could not open a browser automatically. Please open the URL above manually.",
                      file=sys.stderr)

            result = await server.wait_for_code()
        finally:
            await server.stop()
        self._log_verbose(f"Received authorization code: {result.code[:20]}...")

        tokens = await self._request_tokens({
            'client_id': self.config.client_id,
            'grant_type': 'authorization_code',
            'code': result.code,
            'redirect_uri': self.config.redirect_uri,
            'code_verifier': verifier,
        }, purpose="Token exchange")
        await self.token_store.save(tokens)
        print("Authentication successful.", file=sys.stderr)
        return tokens

    async def refresh_access_token(self, refresh_token: str) -> TokenData:
        if not refresh_token:
            raise AuthenticationError("No refresh token available")
        self._log_verbose("Refreshing access token")
        tokens = await self._request_tokens({
            'client_id': self.config.client_id,
            'grant_type': 'refresh_token',
            'refresh_token': refresh_token,
            'scope': ' '.join(self.config.scopes),
        }, purpose="Token refresh", fallback_refresh_token=refresh_token)
        await self.token_store.save(tokens)
        return tokens

    async def logout(self) -> None:
        await self.token_store.clear()

    async def _request_tokens(self, form: Dict[str, str], purpose: str,
                              fallback_refresh_token: str = "") -> TokenData:
        response = await asyncio.to_thread(
            self.session.post,
            self.config.token_url,
            data=form,
            headers={'Content-Type': 'application/x-www-form-urlencoded'},
            timeout=self.config.request_timeout_seconds,
        )
        if not response.ok:
            raise AuthenticationError(f"{purpose} failed: {response.status_code} {response.text}")

        try:
            payload: Dict[str, Any] = response.json()
            access_token = payload['access_token']
            expires_in = int(payload.get('expires_in', 3600))
        except (ValueError, KeyError, TypeError) as e:
            raise AuthenticationError(f"{purpose} returned an invalid token response: {e}")

        return TokenData(
            access_token=access_token,
            refresh_token=payload.get('refresh_token') or fallback_refresh_token,
            expires_at=now_ms() + expires_in * 1000,
        )
