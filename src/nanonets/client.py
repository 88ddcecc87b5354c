"""Nanonets API client for workflow, document and moderation calls."""

from __future__ import annotations

import json
import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Any, BinaryIO, Mapping

import httpx
from pydantic import BaseModel, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from nanonets.endpoints import Endpoint
from nanonets.errors import APIError, DecodeError, TransportError, ValidationError
from nanonets.resources import Documents, Moderation, Workflows
from nanonets.utils import expand_path, form_value, guess_content_type

logger = logging.getLogger(__name__)

BASE_URL = "https://app.nanonets.com/api/v4"
DEFAULT_TIMEOUT = 60.0
JSON_CONTENT_TYPE = "application/json"


@lru_cache(maxsize=None)
def _adapter(response_type: Any) -> TypeAdapter:
    return TypeAdapter(response_type)


class Nanonets:
    """
    Nanonets API client.

    Every call authenticates with HTTP basic auth, using the API key as the
    username and an empty password. Calls are grouped the way the API is:

    - `client.workflows`: create and configure extraction workflows
    - `client.documents`: upload documents and read their extracted data
    - `client.moderation`: review actions on extracted fields and tables

    Args:
        api_key: Your Nanonets API key. If not provided, reads from
                 NANONETS_API_KEY environment variable.
        base_url: API root. Falls back to NANONETS_BASE_URL, then to the
                  public v4 endpoint.
        timeout: Request timeout in seconds (default: 60), applied by the
                 HTTP transport.
        transport: Optional httpx transport, e.g. `httpx.MockTransport` in
                   tests or a proxying transport.

    Errors:
        Every failure surfaces as one of three kinds, never conflated:
        `TransportError` (no response), `APIError` (non-2xx status) and
        `DecodeError` (2xx with a body that doesn't match the expected type).
        Nothing is retried.

    Example:
        ```python
        from nanonets import CreateWorkflowRequest, Nanonets, UploadDocumentRequest

        with Nanonets() as client:
            workflow = client.workflows.create(
                CreateWorkflowRequest(description="Invoices", workflow_type="invoice")
            )
            document = client.documents.upload(
                workflow.id,
                UploadDocumentRequest(file="invoice.pdf", metadata={"customer": "acme"}),
            )
            print(document.document_id, document.status)
        ```
    """

    def __init__(
        self,
        api_key: str | None = None,
        *,
        base_url: str | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.BaseTransport | None = None,
    ):
        self.api_key = api_key or os.environ.get("NANONETS_API_KEY")
        if not self.api_key:
            raise ValidationError(
                "API key is required. Pass it directly or set NANONETS_API_KEY environment variable."
            )

        self.base_url = (
            base_url or os.environ.get("NANONETS_BASE_URL") or BASE_URL
        ).rstrip("/")
        self.timeout = timeout

        self._client = httpx.Client(
            timeout=timeout,
            auth=httpx.BasicAuth(self.api_key, ""),
            transport=transport,
        )

        self.workflows = Workflows(self)
        self.documents = Documents(self)
        self.moderation = Moderation(self)

    def execute(
        self,
        method: str,
        url: str,
        *,
        content: bytes | None = None,
        content_type: str | None = None,
    ) -> bytes:
        """
        Send one authenticated request and return the raw response body.

        Args:
            method: HTTP method token.
            url: Absolute URL, query string included.
            content: Pre-serialized request body, if any.
            content_type: Content type of `content`. Ignored without a body.

        Returns:
            The exact response bytes for any 2xx status.

        Raises:
            TransportError: If no response was received (DNS, connection
                refused, timeout).
            APIError: If the status is outside [200, 300). Carries the
                status code and the full response body, both as
                text and as the raw bytes.
        """
        headers = {}
        if content is not None and content_type:
            headers["Content-Type"] = content_type

        logger.debug("%s %s", method, url)
        try:
            response = self._client.request(method, url, content=content, headers=headers)
        except httpx.TransportError as exc:
            logger.debug("%s %s failed: %r", method, url, exc)
            raise TransportError(f"Request to {url} failed: {exc}") from exc

        logger.debug("%s %s -> %d", method, url, response.status_code)
        if not 200 <= response.status_code < 300:
            raise APIError(
                message=f"API request failed with status {response.status_code}",
                status_code=response.status_code,
                body=response.text,
                content=response.content,
            )

        return response.content

    def request(
        self,
        endpoint: Endpoint,
        *,
        body: BaseModel | Mapping[str, Any] | None = None,
        params: Mapping[str, Any] | None = None,
        **path_params: Any,
    ) -> Any:
        """
        Call a JSON endpoint and decode its response.

        Args:
            endpoint: Descriptor from `nanonets.endpoints`.
            body: Request payload. Pydantic models are dumped by alias.
            params: Query parameters; None values are left out.
            **path_params: Values for the endpoint's path template.

        Returns:
            The body decoded into `endpoint.response_type` (None when the
            endpoint has no response type, raw bytes for binary downloads).
        """
        if endpoint.expects_multipart:
            raise ValidationError(
                f"{endpoint.method} {endpoint.path} is a file upload. Use upload() instead."
            )
        if endpoint.expects_body and body is None:
            raise ValidationError(f"{endpoint.method} {endpoint.path} requires a request body.")
        if not endpoint.expects_body and body is not None:
            raise ValidationError(f"{endpoint.method} {endpoint.path} does not take a request body.")

        url = self._build_url(endpoint, path_params, params)

        content = None
        content_type = None
        if body is not None:
            content = self._serialize(body)
            content_type = JSON_CONTENT_TYPE

        raw = self.execute(endpoint.method, url, content=content, content_type=content_type)
        return self._decode(raw, endpoint.response_type)

    def upload(
        self,
        endpoint: Endpoint,
        file: str | Path | BinaryIO,
        *,
        fields: Mapping[str, Any] | None = None,
        **path_params: Any,
    ) -> Any:
        """
        Call a multipart endpoint with one `file` part plus string fields.

        Args:
            endpoint: Descriptor with `expects_multipart` set.
            file: Path to a local file, or an open binary file object. Files
                  opened here are closed before returning, on every path.
                  File objects passed in stay open and belong to the caller.
            fields: Extra form fields, each rendered as a string.
            **path_params: Values for the endpoint's path template.
        """
        if not endpoint.expects_multipart:
            raise ValidationError(f"{endpoint.method} {endpoint.path} is not a file upload.")

        url = self._build_url(endpoint, path_params, None)
        filename, file_bytes = self._read_file(file)
        content, content_type = self._encode_multipart(filename, file_bytes, fields or {})

        raw = self.execute(endpoint.method, url, content=content, content_type=content_type)
        return self._decode(raw, endpoint.response_type)

    def _build_url(
        self,
        endpoint: Endpoint,
        path_params: Mapping[str, Any],
        params: Mapping[str, Any] | None,
    ) -> str:
        try:
            path = expand_path(endpoint.path, path_params)
        except ValueError as exc:
            raise ValidationError(str(exc)) from exc

        url = httpx.URL(self.base_url + path)
        if params:
            query = {key: str(value) for key, value in params.items() if value is not None}
            if query:
                url = url.copy_merge_params(query)
        return str(url)

    def _serialize(self, body: BaseModel | Mapping[str, Any]) -> bytes:
        if isinstance(body, BaseModel):
            return body.model_dump_json(by_alias=True).encode()
        return json.dumps(body).encode()

    def _decode(self, raw: bytes, response_type: Any) -> Any:
        """Decode a 2xx body. Malformed or mismatched JSON is a DecodeError."""
        if response_type is None:
            return None
        if response_type is bytes:
            return raw

        try:
            return _adapter(response_type).validate_json(raw)
        except PydanticValidationError as exc:
            raise DecodeError(
                f"Could not decode response as {response_type!r}: {exc.errors()[0]['msg']}",
                body=raw,
            ) from exc

    def _read_file(self, file: str | Path | BinaryIO) -> tuple[str, bytes]:
        """
        Read an upload into memory.

        Returns:
            Tuple of (base filename, file_bytes)
        """
        if isinstance(file, (str, Path)):
            path = Path(file)
            if not path.is_file():
                raise ValidationError(f"File not found: {path}")
            with path.open("rb") as handle:
                return path.name, handle.read()

        filename = Path(getattr(file, "name", None) or "document").name
        return filename, file.read()

    def _encode_multipart(
        self,
        filename: str,
        file_bytes: bytes,
        fields: Mapping[str, Any],
    ) -> tuple[bytes, str]:
        """
        Build a multipart/form-data body.

        Returns:
            Tuple of (body, content_type). The content type carries the
            boundary.
        """
        encoded = httpx.Request(
            "POST",
            self.base_url,
            data={key: form_value(value) for key, value in fields.items()},
            files={"file": (filename, file_bytes, guess_content_type(filename))},
        )
        return encoded.read(), encoded.headers["Content-Type"]

    def close(self) -> None:
        """Close the HTTP client connections."""
        self._client.close()

    def __enter__(self) -> "Nanonets":
        return self

    def __exit__(self, *args: object) -> None:
        self.close()
