"""Single-call HTTP transport for the PayRex API."""
import logging
from typing import Any, List, Optional, Tuple, Type, TypeVar
from urllib.parse import urlencode

import httpx
from pydantic import BaseModel, TypeAdapter, ValidationError

from payrex.core.config import Settings
from payrex.core.errors import (
    ConnectionFailedError,
    DecodeError,
    ErrorKind,
    HttpError,
    RequestTimeoutError,
    api_error,
)
from payrex.core.logging import log_context, resource_name

log = logging.getLogger(__name__)

T = TypeVar("T")

REQUEST_ID_HEADER = "X-Request-Id"
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


def _scalar(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _flatten(pairs: List[Tuple[str, str]], key: str, value: Any) -> None:
    if value is None:
        return
    if isinstance(value, dict):
        for sub_key, sub_value in value.items():
            _flatten(pairs, f"{key}[{sub_key}]", sub_value)
    elif isinstance(value, (list, tuple)):
        for index, item in enumerate(value):
            if isinstance(item, (dict, list, tuple)):
                _flatten(pairs, f"{key}[{index}]", item)
            elif item is not None:
                pairs.append((f"{key}[]", _scalar(item)))
    else:
        pairs.append((key, _scalar(value)))


def form_pairs(data: Any) -> List[Tuple[str, str]]:
    """
    Flatten a model or mapping into bracketed form pairs.

    Nested mappings become ``metadata[key]=v``, scalar lists ``items[]=v``
    and lists of mappings ``line_items[0][name]=v``. None values are skipped.
    """
    if data is None:
        return []
    if isinstance(data, BaseModel):
        data = data.model_dump(mode="json", by_alias=True)
    pairs: List[Tuple[str, str]] = []
    for key, value in data.items():
        _flatten(pairs, key, value)
    return pairs


def encode_form(data: Any) -> str:
    """Encode a request body as ``application/x-www-form-urlencoded``."""
    return urlencode(form_pairs(data), safe="[]")


def _retry_after(response: httpx.Response) -> Optional[int]:
    value = response.headers.get("Retry-After", "").strip()
    return int(value) if value.isdigit() else None


def _error_details(response: httpx.Response) -> Tuple[Optional[str], str]:
    """Extract (error code, message) from an error response body."""
    try:
        body = response.json()
    except ValueError:
        return None, response.text or response.reason_phrase

    if isinstance(body, dict):
        errors = body.get("errors")
        if isinstance(errors, list) and errors and isinstance(errors[0], dict):
            first = errors[0]
            return first.get("code"), first.get("detail") or first.get("message") or response.reason_phrase
        error = body.get("error")
        if isinstance(error, dict):
            return error.get("type") or error.get("code"), error.get("message") or response.reason_phrase
        if "message" in body:
            return body.get("code"), str(body["message"])
    return None, response.reason_phrase


def raise_for_error(response: httpx.Response, path: str = "") -> None:
    """Raise the matching ApiError subclass for a non-2xx response."""
    if response.is_success:
        return
    code, message = _error_details(response)
    kind = ErrorKind.parse(code)
    if kind is ErrorKind.UNKNOWN:
        kind = ErrorKind.from_status(response.status_code)
    request_id = response.headers.get(REQUEST_ID_HEADER)
    log.warning(
        "PayRex API error %s (%s): %s",
        response.status_code, kind.value, message,
        extra=log_context(resource_name(path), request_id),
    )
    raise api_error(
        kind,
        message,
        response.status_code,
        request_id=request_id,
        retry_after=_retry_after(response) if kind is ErrorKind.RATE_LIMIT else None,
    )


class HttpClient:
    """
    Issues one request per call and decodes the response.

    A fresh ``httpx.AsyncClient`` is opened for every call; pass a
    ``transport`` to route requests elsewhere (tests use ``httpx.MockTransport``).
    """

    def __init__(self, settings: Settings, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.settings = settings
        self.transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.settings.api_base_url,
            timeout=self.settings.timeout,
            auth=(self.settings.api_key or "", ""),
            headers={"Accept": "application/json"},
            transport=self.transport,
        )

    async def request(
        self,
        method: str,
        path: str,
        response_type: Optional[Type[T]] = None,
        *,
        body: Any = None,
        params: Any = None,
    ) -> Optional[T]:
        content = None
        headers = {}
        if body is not None:
            content = encode_form(body)
            headers["Content-Type"] = FORM_CONTENT_TYPE
        query = form_pairs(params) or None

        log.debug("%s %s", method, path, extra=log_context(resource_name(path)))
        try:
            async with self._client() as client:
                response = await client.request(method, path, content=content, params=query, headers=headers)
        except httpx.TimeoutException as e:
            raise RequestTimeoutError(f"{method} {path} timed out after {self.settings.timeout}s") from e
        except httpx.ConnectError as e:
            raise ConnectionFailedError(f"{method} {path} could not connect: {e}") from e
        except httpx.HTTPError as e:
            raise HttpError(f"{method} {path} failed: {e}") from e

        raise_for_error(response, path)

        if response_type is None:
            return None
        try:
            return TypeAdapter(response_type).validate_python(response.json())
        except (ValueError, ValidationError) as e:
            raise DecodeError(f"Could not decode response of {method} {path}: {e}") from e

    async def get(self, path: str, response_type: Type[T]) -> T:
        return await self.request("GET", path, response_type)

    async def get_with_params(self, path: str, params: Any, response_type: Type[T]) -> T:
        return await self.request("GET", path, response_type, params=params)

    async def post(self, path: str, body: Any, response_type: Type[T]) -> T:
        return await self.request("POST", path, response_type, body=body)

    async def put(self, path: str, body: Any, response_type: Type[T]) -> T:
        return await self.request("PUT", path, response_type, body=body)

    async def patch(self, path: str, body: Any, response_type: Type[T]) -> T:
        return await self.request("PATCH", path, response_type, body=body)

    async def delete(self, path: str, response_type: Optional[Type[T]] = None) -> Optional[T]:
        return await self.request("DELETE", path, response_type)
