"""
Endpoint catalog for the Nanonets v4 API.

Each operation is described once as data; `Nanonets.request` and
`Nanonets.upload` turn a descriptor into an HTTP call.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from nanonets.types import Document, Field, Page, Table, Workflow, WorkflowType


@dataclass(frozen=True)
class Endpoint:
    """
    A fixed call-site of the API.

    Attributes:
        method: HTTP method token.
        path: Path template relative to the base URL, with `{name}` holes.
        response_type: Type the response body decodes into. None discards
            the body, bytes returns it untouched.
        expects_body: Whether the call sends a JSON body.
        expects_multipart: Whether the call sends a multipart file upload.
    """

    method: str
    path: str
    response_type: Any = None
    expects_body: bool = False
    expects_multipart: bool = False


_WORKFLOW = "/workflows/{workflow_id}"
_DOCUMENT = _WORKFLOW + "/documents/{document_id}"
_PAGE = _DOCUMENT + "/pages/{page_id}"

# Workflows
CREATE_WORKFLOW = Endpoint("POST", "/workflows", Workflow, expects_body=True)
GET_WORKFLOW = Endpoint("GET", _WORKFLOW, Workflow)
LIST_WORKFLOWS = Endpoint("GET", "/workflows", list[Workflow])
SET_WORKFLOW_FIELDS = Endpoint("PUT", _WORKFLOW + "/fields", expects_body=True)
UPDATE_WORKFLOW_FIELD = Endpoint(
    "PATCH", _WORKFLOW + "/fields/{field_id}", expects_body=True
)
DELETE_WORKFLOW_FIELD = Endpoint("DELETE", _WORKFLOW + "/fields/{field_id}")
UPDATE_WORKFLOW_METADATA = Endpoint("PATCH", _WORKFLOW, expects_body=True)
UPDATE_WORKFLOW_SETTINGS = Endpoint("PATCH", _WORKFLOW + "/settings", expects_body=True)
GET_WORKFLOW_TYPES = Endpoint("GET", "/workflows/types", list[WorkflowType])

# Documents
UPLOAD_DOCUMENT = Endpoint(
    "POST", _WORKFLOW + "/documents", Document, expects_multipart=True
)
UPLOAD_DOCUMENT_FROM_URL = Endpoint(
    "POST", _WORKFLOW + "/documents", Document, expects_body=True
)
GET_DOCUMENT = Endpoint("GET", _DOCUMENT, Document)
LIST_DOCUMENTS = Endpoint("GET", _WORKFLOW + "/documents", list[Document])
DELETE_DOCUMENT = Endpoint("DELETE", _DOCUMENT)
GET_DOCUMENT_FIELDS = Endpoint("GET", _DOCUMENT + "/fields", list[Field])
GET_DOCUMENT_TABLES = Endpoint("GET", _DOCUMENT + "/tables", list[Table])
GET_ORIGINAL_DOCUMENT = Endpoint("GET", _DOCUMENT + "/original", bytes)
GET_DOCUMENT_PAGE = Endpoint("GET", _PAGE, Page)

# Moderation
UPDATE_FIELD_VALUE = Endpoint(
    "PATCH", _PAGE + "/fields/{field_data_id}", expects_body=True
)
ADD_FIELD = Endpoint("POST", _PAGE + "/fields", expects_body=True)
DELETE_FIELD = Endpoint("DELETE", _PAGE + "/fields/{field_data_id}")
ADD_TABLE = Endpoint("POST", _PAGE + "/tables", expects_body=True)
DELETE_TABLE = Endpoint("DELETE", _PAGE + "/tables/{table_id}")
UPDATE_TABLE_CELL = Endpoint(
    "PATCH", _PAGE + "/tables/{table_id}/cells/{cell_id}", expects_body=True
)
ADD_TABLE_CELL = Endpoint("POST", _PAGE + "/tables/{table_id}/cells", expects_body=True)
DELETE_TABLE_CELL = Endpoint("DELETE", _PAGE + "/tables/{table_id}/cells/{cell_id}")
VERIFY_FIELD = Endpoint(
    "POST", _PAGE + "/fields/{field_data_id}/verify", expects_body=True
)
VERIFY_TABLE_CELL = Endpoint(
    "POST", _PAGE + "/tables/{table_id}/cells/{cell_id}/verify", expects_body=True
)
VERIFY_TABLE = Endpoint("POST", _PAGE + "/tables/{table_id}/verify", expects_body=True)
VERIFY_DOCUMENT = Endpoint("POST", _DOCUMENT + "/verify", expects_body=True)
