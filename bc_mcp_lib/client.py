"""
Business Central API client with company scoping, rate limiting and retries.
"""

import asyncio
import sys
from datetime import datetime, timezone
from email.utils import parsedate_to_datetime
from typing import Any, Dict, List, Optional

import requests
from pydantic import BaseModel

from .batch import BatchOperation, BatchResult, build_batch_request, parse_batch_response
from .config import BcConfig
from .constants import (
    BACKOFF_MAX_MS, DEFAULT_MAX_CONCURRENT, DEFAULT_MAX_PER_WINDOW, DEFAULT_WINDOW_MS, USER_AGENT,
)
from .errors import BcError, ConfigurationError, parse_bc_error
from .query import ODataQueryBuilder
from .rate_limiter import RateLimiter


class BcListResponse(BaseModel):
    value: List[Dict[str, Any]]
    next_link: Optional[str] = None
    count: Optional[int] = None


def parse_retry_after(value: Optional[str]) -> Optional[int]:
    """Parse a Retry-After header (delta-seconds or HTTP-date) into milliseconds."""
    if not value:
        return None
    value = value.strip()
    if value.isdigit():
        return int(value) * 1000
    try:
        when = parsedate_to_datetime(value)
    except (TypeError, ValueError):
        return None
    if when.tzinfo is None:
        when = when.replace(tzinfo=timezone.utc)
    delta = (when - datetime.now(timezone.utc)).total_seconds()
    return max(int(delta * 1000), 0)


class BcClient:
    """Client for the Business Central REST API.

    Every request passes through the rate limiter, carries a fresh bearer
    token and is retried on transient failures with exponential backoff.
    """

    def __init__(self, config: BcConfig, auth, rate_limiter: Optional[RateLimiter] = None,
                 verbose: bool = False):
        self.config = config
        self.auth = auth
        self.verbose = verbose
        self.rate_limiter = rate_limiter or RateLimiter(
            max_concurrent=DEFAULT_MAX_CONCURRENT,
            max_per_window=DEFAULT_MAX_PER_WINDOW,
            window_ms=DEFAULT_WINDOW_MS,
        )
        self.base_url = config.base_url
        self.company_id: Optional[str] = config.company_id
        self.session = requests.Session()
        self.session.headers.update({
            'Accept': 'application/json',
            'User-Agent': USER_AGENT,
        })

    def _log_verbose(self, message: str):
        """Prints message to stderr only if verbose mode is enabled."""
        if self.verbose:
            timestamp = datetime.now().strftime('%Y-%m-%d %H:%M:%S.%f')[:-3]
            print(f"[{timestamp} Client VERBOSE] {message}", file=sys.stderr)

    # --- Company scoping ---

    def set_company(self, company_id: str):
        self.company_id = company_id
        self._log_verbose(f"Active company set to {company_id}")

    def get_company_path(self) -> str:
        if not self.company_id:
            raise ConfigurationError("No company selected. Please select a company first using bc_select_company.")
        return f"companies({self.company_id})"

    def build_url(self, path: str, query: Optional[ODataQueryBuilder] = None) -> str:
        url = f"{self.base_url}/{path}"
        if query:
            url += query.build()
        return url

    # --- Request pipeline ---

    async def _delay(self, delay_ms: float):
        await asyncio.sleep(delay_ms / 1000.0)

    def _retry_delay_ms(self, error: BcError, attempt: int) -> float:
        if error.retry_after_ms is not None:
            return min(error.retry_after_ms, BACKOFF_MAX_MS)
        return RateLimiter.calculate_backoff(attempt)

    async def _send(self, method: str, url: str, body: Any = None,
                    headers: Optional[Dict[str, str]] = None) -> requests.Response:
        token = await self.auth.get_access_token()
        request_headers = {'Authorization': f'Bearer {token}'}
        if body is not None:
            request_headers['Content-Type'] = 'application/json'
        if headers:
            request_headers.update(headers)

        kwargs: Dict[str, Any] = {
            'headers': request_headers,
            'timeout': self.config.request_timeout_seconds,
        }
        if body is not None:
            kwargs['json'] = body

        self._log_verbose(f"Requesting: {method} {url}")
        return await asyncio.to_thread(self.session.request, method, url, **kwargs)

    def _classify(self, response: requests.Response) -> BcError:
        try:
            body = response.json()
        except ValueError:
            body = {'error': {'message': response.reason or response.text}}
        retry_after_ms = None
        if response.status_code in (429, 503):
            retry_after_ms = parse_retry_after(response.headers.get('Retry-After'))
        return parse_bc_error(response.status_code, body, retry_after_ms)

    async def _request(self, method: str, url: str, body: Any = None,
                       headers: Optional[Dict[str, str]] = None) -> requests.Response:
        """Issue a request, retrying retryable failures up to max_retries times."""
        max_retries = self.config.max_retries
        last_error: Optional[BcError] = None

        for attempt in range(max_retries + 1):
            if last_error is not None:
                delay_ms = self._retry_delay_ms(last_error, attempt - 1)
                self._log_verbose(f"Retry {attempt}/{max_retries} after {delay_ms:.0f}ms ({last_error.code})")
                await self._delay(delay_ms)

            response = await self.rate_limiter.execute(lambda: self._send(method, url, body, headers))
            if 200 <= response.status_code < 300:
                return response

            error = self._classify(response)
            if not error.is_retryable or attempt == max_retries:
                print(f"ERROR: Business Central request failed: {method} {url} -> "
                      f"{error.status_code} {error.code}: {error.message}", file=sys.stderr)
                raise error
            last_error = error

        raise last_error

    @staticmethod
    def _json_or_empty(response: requests.Response) -> Dict[str, Any]:
        if response.status_code == 204 or not response.content:
            return {}
        return response.json()

    # --- Operations ---

    async def list(self, path: str, query: Optional[ODataQueryBuilder] = None) -> BcListResponse:
        response = await self._request('GET', self.build_url(path, query))
        return self._to_list_response(response.json())

    async def list_next_page(self, next_link: str) -> BcListResponse:
        response = await self._request('GET', next_link)
        return self._to_list_response(response.json())

    @staticmethod
    def _to_list_response(payload: Dict[str, Any]) -> BcListResponse:
        return BcListResponse(
            value=payload.get('value', []),
            next_link=payload.get('@odata.nextLink'),
            count=payload.get('@odata.count'),
        )

    async def get(self, path: str, query: Optional[ODataQueryBuilder] = None) -> Dict[str, Any]:
        response = await self._request('GET', self.build_url(path, query))
        return response.json()

    async def create(self, path: str, body: Dict[str, Any]) -> Dict[str, Any]:
        response = await self._request('POST', self.build_url(path), body=body)
        return self._json_or_empty(response)

    async def update(self, path: str, body: Dict[str, Any], etag: Optional[str] = None) -> Dict[str, Any]:
        headers = {'If-Match': etag} if etag else None
        response = await self._request('PATCH', self.build_url(path), body=body, headers=headers)
        return self._json_or_empty(response)

    async def delete(self, path: str, etag: Optional[str] = None) -> None:
        headers = {'If-Match': etag} if etag else None
        await self._request('DELETE', self.build_url(path), headers=headers)

    async def action(self, path: str, body: Optional[Dict[str, Any]] = None) -> Optional[Dict[str, Any]]:
        response = await self._request('POST', self.build_url(path), body=body)
        return self._json_or_empty(response) or None

    async def count(self, path: str, filter: Optional[str] = None) -> int:
        query = ODataQueryBuilder().top(0).count()
        if filter:
            query.filter(filter)
        response = await self._request('GET', self.build_url(path, query))
        return int(response.json().get('@odata.count', 0))

    async def list_companies(self) -> List[Dict[str, Any]]:
        result = await self.list('companies')
        return result.value

    async def get_metadata(self) -> bytes:
        response = await self._request('GET', self.build_url('$metadata'),
                                       headers={'Accept': 'application/xml'})
        return response.content

    async def batch(self, operations: List[BatchOperation]) -> List[BatchResult]:
        payload = build_batch_request(operations)
        response = await self._request('POST', self.build_url('$batch'), body=payload)
        return parse_batch_response(response.json())
