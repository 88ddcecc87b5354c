"""API groups exposed on the client as `workflows`, `documents` and `moderation`."""

from __future__ import annotations

from typing import TYPE_CHECKING

from nanonets import endpoints
from nanonets.types import (
    AddFieldRequest,
    AddTableCellRequest,
    AddTableRequest,
    CreateWorkflowRequest,
    Document,
    Field,
    Page,
    SetFieldsRequest,
    Table,
    UpdateFieldRequest,
    UpdateFieldValueRequest,
    UpdateMetadataRequest,
    UpdateSettingsRequest,
    UpdateTableCellRequest,
    UploadDocumentFromURLRequest,
    UploadDocumentRequest,
    VerificationRequest,
    Workflow,
    WorkflowType,
)
from nanonets.utils import form_value

if TYPE_CHECKING:
    from nanonets.client import Nanonets


class Resource:
    def __init__(self, client: Nanonets):
        self._client = client


class Workflows(Resource):
    """Create, inspect and configure extraction workflows."""

    def create(self, req: CreateWorkflowRequest) -> Workflow:
        return self._client.request(endpoints.CREATE_WORKFLOW, body=req)

    def get(self, workflow_id: str) -> Workflow:
        return self._client.request(endpoints.GET_WORKFLOW, workflow_id=workflow_id)

    def list(self) -> list[Workflow]:
        return self._client.request(endpoints.LIST_WORKFLOWS)

    def set_fields(self, workflow_id: str, req: SetFieldsRequest) -> None:
        """Replace the workflow's fields and table headers."""
        self._client.request(endpoints.SET_WORKFLOW_FIELDS, body=req, workflow_id=workflow_id)

    def update_field(self, workflow_id: str, field_id: str, req: UpdateFieldRequest) -> None:
        self._client.request(
            endpoints.UPDATE_WORKFLOW_FIELD,
            body=req,
            workflow_id=workflow_id,
            field_id=field_id,
        )

    def delete_field(self, workflow_id: str, field_id: str) -> None:
        self._client.request(
            endpoints.DELETE_WORKFLOW_FIELD, workflow_id=workflow_id, field_id=field_id
        )

    def update_metadata(self, workflow_id: str, req: UpdateMetadataRequest) -> None:
        self._client.request(
            endpoints.UPDATE_WORKFLOW_METADATA, body=req, workflow_id=workflow_id
        )

    def update_settings(self, workflow_id: str, req: UpdateSettingsRequest) -> None:
        self._client.request(
            endpoints.UPDATE_WORKFLOW_SETTINGS, body=req, workflow_id=workflow_id
        )

    def get_types(self) -> list[WorkflowType]:
        """List the workflow templates available to the account."""
        return self._client.request(endpoints.GET_WORKFLOW_TYPES)


class Documents(Resource):
    """Upload documents to a workflow and read what was extracted from them."""

    def upload(self, workflow_id: str, req: UploadDocumentRequest) -> Document:
        """
        Upload a local file as multipart form data.

        The form carries the file under `file`, an `async` flag and one field
        per metadata entry. A metadata key named `async` is overridden by the
        flag.
        """
        fields = dict(req.metadata)
        fields["async"] = form_value(req.async_)
        return self._client.upload(
            endpoints.UPLOAD_DOCUMENT, req.file, fields=fields, workflow_id=workflow_id
        )

    def upload_from_url(self, workflow_id: str, req: UploadDocumentFromURLRequest) -> Document:
        """Ask the service to fetch and process a document from a URL."""
        return self._client.request(
            endpoints.UPLOAD_DOCUMENT_FROM_URL, body=req, workflow_id=workflow_id
        )

    def get(self, workflow_id: str, document_id: str) -> Document:
        return self._client.request(
            endpoints.GET_DOCUMENT, workflow_id=workflow_id, document_id=document_id
        )

    def list(
        self,
        workflow_id: str,
        page: int | None = None,
        limit: int | None = None,
    ) -> list[Document]:
        """
        List documents of a workflow.

        `page` and `limit` are passed through as query parameters when given;
        no further pages are fetched.
        """
        return self._client.request(
            endpoints.LIST_DOCUMENTS,
            params={"page": page, "limit": limit},
            workflow_id=workflow_id,
        )

    def delete(self, workflow_id: str, document_id: str) -> None:
        self._client.request(
            endpoints.DELETE_DOCUMENT, workflow_id=workflow_id, document_id=document_id
        )

    def get_fields(self, workflow_id: str, document_id: str) -> list[Field]:
        return self._client.request(
            endpoints.GET_DOCUMENT_FIELDS, workflow_id=workflow_id, document_id=document_id
        )

    def get_tables(self, workflow_id: str, document_id: str) -> list[Table]:
        return self._client.request(
            endpoints.GET_DOCUMENT_TABLES, workflow_id=workflow_id, document_id=document_id
        )

    def get_original(self, workflow_id: str, document_id: str) -> bytes:
        """Download the originally uploaded file."""
        return self._client.request(
            endpoints.GET_ORIGINAL_DOCUMENT, workflow_id=workflow_id, document_id=document_id
        )

    def get_page(self, workflow_id: str, document_id: str, page_id: str) -> Page:
        return self._client.request(
            endpoints.GET_DOCUMENT_PAGE,
            workflow_id=workflow_id,
            document_id=document_id,
            page_id=page_id,
        )


class Moderation(Resource):
    """
    Human-review actions on extracted values.

    All calls except `verify_document` address a single page of a document.
    None of them return data; a failed call raises.
    """

    def update_field(
        self,
        workflow_id: str,
        document_id: str,
        page_id: str,
        field_data_id: str,
        req: UpdateFieldValueRequest,
    ) -> None:
        self._client.request(
            endpoints.UPDATE_FIELD_VALUE,
            body=req,
            workflow_id=workflow_id,
            document_id=document_id,
            page_id=page_id,
            field_data_id=field_data_id,
        )

    def add_field(
        self,
        workflow_id: str,
        document_id: str,
        page_id: str,
        req: AddFieldRequest,
    ) -> None:
        self._client.request(
            endpoints.ADD_FIELD,
            body=req,
            workflow_id=workflow_id,
            document_id=document_id,
            page_id=page_id,
        )

    def delete_field(
        self,
        workflow_id: str,
        document_id: str,
        page_id: str,
        field_data_id: str,
    ) -> None:
        self._client.request(
            endpoints.DELETE_FIELD,
            workflow_id=workflow_id,
            document_id=document_id,
            page_id=page_id,
            field_data_id=field_data_id,
        )

    def add_table(
        self,
        workflow_id: str,
        document_id: str,
        page_id: str,
        req: AddTableRequest,
    ) -> None:
        self._client.request(
            endpoints.ADD_TABLE,
            body=req,
            workflow_id=workflow_id,
            document_id=document_id,
            page_id=page_id,
        )

    def delete_table(
        self,
        workflow_id: str,
        document_id: str,
        page_id: str,
        table_id: str,
    ) -> None:
        self._client.request(
            endpoints.DELETE_TABLE,
            workflow_id=workflow_id,
            document_id=document_id,
            page_id=page_id,
            table_id=table_id,
        )

    def update_table_cell(
        self,
        workflow_id: str,
        document_id: str,
        page_id: str,
        table_id: str,
        cell_id: str,
        req: UpdateTableCellRequest,
    ) -> None:
        self._client.request(
            endpoints.UPDATE_TABLE_CELL,
            body=req,
            workflow_id=workflow_id,
            document_id=document_id,
            page_id=page_id,
            table_id=table_id,
            cell_id=cell_id,
        )

    def add_table_cell(
        self,
        workflow_id: str,
        document_id: str,
        page_id: str,
        table_id: str,
        req: AddTableCellRequest,
    ) -> None:
        self._client.request(
            endpoints.ADD_TABLE_CELL,
            body=req,
            workflow_id=workflow_id,
            document_id=document_id,
            page_id=page_id,
            table_id=table_id,
        )

    def delete_table_cell(
        self,
        workflow_id: str,
        document_id: str,
        page_id: str,
        table_id: str,
        cell_id: str,
    ) -> None:
        self._client.request(
            endpoints.DELETE_TABLE_CELL,
            workflow_id=workflow_id,
            document_id=document_id,
            page_id=page_id,
            table_id=table_id,
            cell_id=cell_id,
        )

    def verify_field(
        self,
        workflow_id: str,
        document_id: str,
        page_id: str,
        field_data_id: str,
        req: VerificationRequest,
    ) -> None:
        self._client.request(
            endpoints.VERIFY_FIELD,
            body=req,
            workflow_id=workflow_id,
            document_id=document_id,
            page_id=page_id,
            field_data_id=field_data_id,
        )

    def verify_table_cell(
        self,
        workflow_id: str,
        document_id: str,
        page_id: str,
        table_id: str,
        cell_id: str,
        req: VerificationRequest,
    ) -> None:
        self._client.request(
            endpoints.VERIFY_TABLE_CELL,
            body=req,
            workflow_id=workflow_id,
            document_id=document_id,
            page_id=page_id,
            table_id=table_id,
            cell_id=cell_id,
        )

    def verify_table(
        self,
        workflow_id: str,
        document_id: str,
        page_id: str,
        table_id: str,
        req: VerificationRequest,
    ) -> None:
        self._client.request(
            endpoints.VERIFY_TABLE,
            body=req,
            workflow_id=workflow_id,
            document_id=document_id,
            page_id=page_id,
            table_id=table_id,
        )

    def verify_document(
        self,
        workflow_id: str,
        document_id: str,
        req: VerificationRequest,
    ) -> None:
        """Mark a whole document as reviewed."""
        self._client.request(
            endpoints.VERIFY_DOCUMENT,
            body=req,
            workflow_id=workflow_id,
            document_id=document_id,
        )
