"""Request executor and deferred GitHub API calls."""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Generic, TypeVar
from urllib.parse import quote

import httpx
from pydantic import TypeAdapter, ValidationError

from .errors import DecodeError, Err, Ok, Result, TransportError

logger = logging.getLogger(__name__)

GITHUB_API_URL = "https://api.github.com"

T = TypeVar("T")

Decoder = Callable[[str], Result[T]]


def path_segment(value: str, keep_slashes: bool = False) -> str:
    """
    Percent-encode a value interpolated into a URL path.

    Raises:
        ValueError: value holds a "." or ".." segment, which would be
            resolved against the rest of the URL
    """
    parts = value.split("/") if keep_slashes else [value]
    if any(part in (".", "..") for part in parts):
        raise ValueError(f"Relative path segment in {value!r}")
    return quote(value, safe="/" if keep_slashes else "")


def json_decoder(type_: Any) -> Decoder[Any]:
    """
    Build a decoder validating raw JSON text against a type.

    Args:
        type_: pydantic model or any type understood by TypeAdapter

    Returns:
        Function mapping JSON text to Ok(value) or Err(DecodeError)
    """
    adapter = TypeAdapter(type_)

    def decode(text: str) -> Result[Any]:
        try:
            return Ok(adapter.validate_json(text))
        except ValidationError as e:
            return Err(DecodeError.from_validation_error(e))

    return decode


def discard_body(text: str) -> Result[None]:
    """Decoder for calls whose response body carries nothing we use."""
    return Ok(None)


@dataclass(frozen=True)
class ApiCall(Generic[T]):
    """
    Description of a single GitHub API request.

    Building one performs no I/O; the request is sent only when the call is
    run through an executor.
    """

    method: str
    path: str
    token: str
    decoder: Decoder[T] = field(repr=False)
    body: Any = None
    params: dict[str, str] | None = None

    def run(self, executor: "RequestExecutor | None" = None) -> Result[T]:
        """Send the request and decode the response."""
        return (executor or RequestExecutor()).execute(self)

    async def arun(self, executor: "AsyncRequestExecutor | None" = None) -> Result[T]:
        """Send the request on an async client and decode the response."""
        return await (executor or AsyncRequestExecutor()).execute(self)


class _BaseExecutor:
    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: Any = None,
    ):
        """
        Initialize executor.

        Args:
            base_url: Custom base URL (defaults to GitHub API)
            timeout: Request timeout in seconds (None waits indefinitely)
            transport: httpx transport override, e.g. httpx.MockTransport
        """
        self.base_url = (base_url or GITHUB_API_URL).rstrip("/")
        self.timeout = timeout
        self.transport = transport

    def _request_kwargs(self, call: ApiCall) -> dict[str, Any]:
        url = f"{self.base_url}{call.path}"
        logger.debug("Request: %s %s", call.method, url)
        kwargs: dict[str, Any] = {
            "method": call.method,
            "url": url,
            "headers": {"Authorization": f"token {call.token}"},
        }
        if call.params:
            kwargs["params"] = call.params
        if call.body is not None:
            kwargs["json"] = call.body
        return kwargs

    def _handle_response(self, call: ApiCall[T], response: httpx.Response) -> Result[T]:
        logger.debug(
            "Response: %s %s (status=%d)",
            call.method,
            call.path,
            response.status_code,
        )
        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.warning("GitHub returned %d for %s %s", response.status_code, call.method, call.path)
            return Err(TransportError(str(e), status_code=response.status_code, body=response.text))

        result = call.decoder(response.text)
        if not result.is_ok():
            logger.warning("Could not decode response of %s %s: %s", call.method, call.path, result.error)
        return result

    def _transport_failure(self, call: ApiCall, error: Exception) -> Err:
        logger.warning("Request failed: %s %s: %s", call.method, call.path, error)
        return Err(TransportError(str(error) or type(error).__name__))


class RequestExecutor(_BaseExecutor):
    """Runs API calls on a blocking httpx client."""

    def execute(self, call: ApiCall[T]) -> Result[T]:
        """Perform exactly one HTTP request for the call."""
        try:
            with httpx.Client(timeout=self.timeout, transport=self.transport) as client:
                response = client.request(**self._request_kwargs(call))
        except (httpx.HTTPError, UnicodeEncodeError) as e:
            return self._transport_failure(call, e)
        return self._handle_response(call, response)


class AsyncRequestExecutor(_BaseExecutor):
    """Runs API calls on an asyncio httpx client."""

    async def execute(self, call: ApiCall[T]) -> Result[T]:
        """Perform exactly one HTTP request for the call."""
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.request(**self._request_kwargs(call))
        except (httpx.HTTPError, UnicodeEncodeError) as e:
            return self._transport_failure(call, e)
        return self._handle_response(call, response)
