"""
Nanonets - typed Python client for the Nanonets document extraction API.

Workflows define what to extract, documents are the files processed under a
workflow, and moderation actions let a reviewer correct or verify what was
extracted.

Example:
    ```python
    from nanonets import Nanonets, UploadDocumentRequest, APIError

    client = Nanonets()  # reads NANONETS_API_KEY

    try:
        document = client.documents.upload(
            "my-workflow-id",
            UploadDocumentRequest(file="invoice.pdf", async_=False),
        )
    except APIError as exc:
        print(exc.status_code, exc.body)
    else:
        for page in document.pages:
            for name, values in page.data.fields.items():
                print(name, [v.value for v in values])
    ```

Errors:
    TransportError, APIError and DecodeError are kept apart so callers can
    tell "no response" from "the server rejected this" from "the server
    accepted this but sent something unreadable". Nothing is retried.
"""

from nanonets.client import Nanonets
from nanonets.endpoints import Endpoint
from nanonets.errors import (
    APIError,
    DecodeError,
    NanonetsError,
    TransportError,
    ValidationError,
)
from nanonets.types import (
    AddFieldRequest,
    AddTableCellRequest,
    AddTableRequest,
    Cell,
    CreateWorkflowRequest,
    Document,
    Field,
    FieldData,
    Page,
    PageData,
    SetFieldsRequest,
    Table,
    TableCell,
    TableHeader,
    UpdateFieldRequest,
    UpdateFieldValueRequest,
    UpdateMetadataRequest,
    UpdateSettingsRequest,
    UpdateTableCellRequest,
    UploadDocumentFromURLRequest,
    UploadDocumentRequest,
    VerificationRequest,
    Workflow,
    WorkflowSettings,
    WorkflowType,
)

__version__ = "0.1.0"

__all__ = [
    "Nanonets",
    "Endpoint",
    "NanonetsError",
    "APIError",
    "DecodeError",
    "TransportError",
    "ValidationError",
    "Workflow",
    "WorkflowSettings",
    "WorkflowType",
    "Field",
    "TableHeader",
    "Document",
    "Page",
    "PageData",
    "FieldData",
    "Table",
    "TableCell",
    "Cell",
    "CreateWorkflowRequest",
    "SetFieldsRequest",
    "UpdateFieldRequest",
    "UpdateMetadataRequest",
    "UpdateSettingsRequest",
    "UploadDocumentRequest",
    "UploadDocumentFromURLRequest",
    "UpdateFieldValueRequest",
    "AddFieldRequest",
    "AddTableRequest",
    "AddTableCellRequest",
    "UpdateTableCellRequest",
    "VerificationRequest",
]
