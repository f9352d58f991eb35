"""
Loopback HTTP listener that receives the OAuth authorization redirect.
"""

import asyncio
import html
import sys
from datetime import datetime
from enum import Enum
from typing import Optional

from aiohttp import web

from ..constants import CALLBACK_PATH, CALLBACK_TIMEOUT_SECONDS
from ..errors import AuthenticationError


class CallbackState(Enum):
    LISTENING = "listening"
    SUCCEEDED = "succeeded"
    FAILED = "failed"
    TIMED_OUT = "timed_out"


class AuthCallbackResult:
    def __init__(self, code: str, state: str):
        self.code = code
        self.state = state


SUCCESS_PAGE = """<html><body style="font-family: sans-serif; text-align: center; padding-top: 50px;">
<h1>Authentication Successful</h1>
<p>You can close this window and return to your terminal.</p>
</body></html>"""

FAILURE_PAGE = """<html><body style="font-family: sans-serif; text-align: center; padding-top: 50px;">
<h1>Authentication Failed</h1>
<p>{message}</p>
</body></html>"""


class CallbackServer:
    """Waits for exactly one terminal outcome on the callback path.

    The listener moves from LISTENING to SUCCEEDED, FAILED or TIMED_OUT once;
    requests lacking code or state are answered with 400 and ignored.
    """

    def __init__(self, port: int, expected_state: str, host: str = "127.0.0.1",
                 timeout_seconds: float = CALLBACK_TIMEOUT_SECONDS, verbose: bool = False):
        self.host = host
        self.requested_port = port
        self.expected_state = expected_state
        self.timeout_seconds = timeout_seconds
        self.verbose = verbose
        self.state = CallbackState.LISTENING
        self._runner: Optional[web.AppRunner] = None
        self._outcome: Optional[asyncio.Future] = None
        self._timeout_handle: Optional[asyncio.TimerHandle] = None

    def _log_verbose(self, message: str):
        if self.verbose:
            timestamp = datetime.now().strftime('%Y-%m-%d %H:%M:%S.%f')[:-3]
            print(f"[{timestamp} Callback VERBOSE] {message}", file=sys.stderr)

    @property
    def port(self) -> int:
        """Actually bound port (differs from the requested one when 0 was requested)."""
        if self._runner and self._runner.addresses:
            return self._runner.addresses[0][1]
        return self.requested_port

    async def start(self) -> None:
        loop = asyncio.get_running_loop()
        self._outcome = loop.create_future()

        app = web.Application()
        app.router.add_get(CALLBACK_PATH, self._handle_callback)

        self._runner = web.AppRunner(app)
        await self._runner.setup()
        site = web.TCPSite(self._runner, self.host, self.requested_port)
        await site.start()

        self._timeout_handle = loop.call_later(self.timeout_seconds, self._on_timeout)
        self._log_verbose(f"Listening for OAuth callback on http://{self.host}:{self.port}{CALLBACK_PATH}")

    async def stop(self) -> None:
        if self._timeout_handle:
            self._timeout_handle.cancel()
            self._timeout_handle = None
        if self._runner:
            await self._runner.cleanup()
            self._runner = None

    async def wait_for_code(self) -> AuthCallbackResult:
        """Await the terminal outcome, then shut the listener down."""
        if self._outcome is None:
            raise RuntimeError("Callback server not started")
        try:
            return await self._outcome
        finally:
            await self.stop()

    def _settle(self, state: CallbackState, result: Optional[AuthCallbackResult] = None,
                error: Optional[Exception] = None) -> bool:
        if self.state is not CallbackState.LISTENING or self._outcome.done():
            return False
        self.state = state
        if self._timeout_handle:
            self._timeout_handle.cancel()
            self._timeout_handle = None
        if error is not None:
            self._outcome.set_exception(error)
        else:
            self._outcome.set_result(result)
        self._log_verbose(f"Callback settled: {state.value}")
        return True

    def _on_timeout(self):
        minutes = self.timeout_seconds / 60
        self._settle(CallbackState.TIMED_OUT,
                     error=AuthenticationError(f"OAuth callback timed out after {minutes:g} minutes"))

    def _failure_response(self, message: str) -> web.Response:
        return web.Response(status=400, text=FAILURE_PAGE.format(message=html.escape(message)),
                            content_type="text/html")

    async def _handle_callback(self, request: web.Request) -> web.Response:
        if self.state is not CallbackState.LISTENING:
            return self._failure_response("This authentication request has already completed.")

        params = request.query
        error = params.get("error")
        if error:
            description = params.get("error_description") or "Unknown error"
            self._settle(CallbackState.FAILED,
                         error=AuthenticationError(f"OAuth error: {error} - {description}"))
            return self._failure_response(f"{error}: {description}")

        code = params.get("code")
        state = params.get("state")
        if not code or not state:
            self._log_verbose("Ignoring callback request without code or state")
            return self._failure_response("Missing code or state parameter.")

        if state != self.expected_state:
            self._settle(CallbackState.FAILED,
                         error=AuthenticationError("OAuth state mismatch - possible CSRF attack"))
            return self._failure_response("State mismatch. Please try again.")

        self._settle(CallbackState.SUCCEEDED, result=AuthCallbackResult(code=code, state=state))
        return web.Response(status=200, text=SUCCESS_PAGE, content_type="text/html")
