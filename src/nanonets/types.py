"""Type definitions for the Nanonets SDK."""

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field as PydanticField, model_validator


class NanonetsModel(BaseModel):
    """
    Base for response models.

    The remote schema is only partially documented, so every field has a
    default and unknown keys are kept on the instance instead of rejected.
    A JSON null on a known field falls back to that field's default.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    @model_validator(mode="before")
    @classmethod
    def drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {
                key: value
                for key, value in data.items()
                if value is not None or key not in cls.model_fields
            }
        return data


class RequestModel(BaseModel):
    """Base for request bodies sent as JSON."""

    model_config = ConfigDict(populate_by_name=True)


# Workflows


class Field(NanonetsModel):
    """A named extraction field on a workflow."""

    name: str = ""


class TableHeader(NanonetsModel):
    """A named table column on a workflow."""

    name: str = ""


class WorkflowSettings(NanonetsModel):
    table_capture: bool = False


class Workflow(NanonetsModel):
    """A configured extraction pipeline."""

    id: str = PydanticField(default="", description="Workflow ID")
    description: str = ""
    workflow_type: str = ""
    fields: list[Field] = PydanticField(default_factory=list)
    table_headers: list[TableHeader] = PydanticField(default_factory=list)
    settings: WorkflowSettings = PydanticField(default_factory=WorkflowSettings)
    created_at: str | None = None
    updated_at: str | None = None


class WorkflowType(NanonetsModel):
    """A workflow template offered by the service (e.g. 'invoice')."""

    id: str = ""
    name: str = ""
    description: str = ""


# Documents


class FieldData(NanonetsModel):
    """A single extracted value for a field on a page."""

    field_data_id: str = ""
    value: str = ""
    confidence: float = 0.0
    bbox: list[float] = PydanticField(
        default_factory=list,
        description="Bounding box as [x1, y1, x2, y2]",
    )
    verification_status: str = ""
    verification_message: str = ""
    is_moderated: bool = False


class TableCell(NanonetsModel):
    cell_id: str = ""
    row: int = 0
    col: int = 0
    header: str = ""
    text: str = ""
    bbox: list[float] = PydanticField(default_factory=list)
    verification_status: str = ""
    verification_message: str = ""
    is_moderated: bool = False


class Table(NanonetsModel):
    table_id: str = ""
    bbox: list[float] = PydanticField(default_factory=list)
    cells: list[TableCell] = PydanticField(default_factory=list)


class PageData(NanonetsModel):
    """Extracted content of one page, with field values keyed by field name."""

    fields: dict[str, list[FieldData]] = PydanticField(default_factory=dict)
    tables: list[Table] = PydanticField(default_factory=list)


class Page(NanonetsModel):
    page_id: str = ""
    page_number: int = 0
    image_url: str = ""
    data: PageData = PydanticField(default_factory=PageData)


class Document(NanonetsModel):
    """
    A file processed under a workflow.

    `metadata` is whatever the caller attached at upload time: an open
    mapping for file uploads, or the string sent with a URL upload.
    """

    document_id: str = ""
    status: str = ""
    uploaded_at: str | None = None
    metadata: dict[str, Any] | str | None = None
    original_document_name: str = ""
    raw_document_url: str = ""
    verification_status: str = ""
    verification_stage: str = ""
    verification_message: str = ""
    assigned_reviewers: list[str] = PydanticField(default_factory=list)
    pages: list[Page] = PydanticField(default_factory=list)


# Requests


class CreateWorkflowRequest(RequestModel):
    description: str
    workflow_type: str


class SetFieldsRequest(RequestModel):
    """Replaces the full set of fields and table headers of a workflow."""

    fields: list[Field] = PydanticField(default_factory=list)
    table_headers: list[TableHeader] = PydanticField(default_factory=list)


class UpdateFieldRequest(RequestModel):
    name: str


class UpdateMetadataRequest(RequestModel):
    description: str


class UpdateSettingsRequest(RequestModel):
    table_capture: bool


class UploadDocumentRequest(BaseModel):
    """
    Multipart upload of a local file.

    Never serialized as JSON: `file` becomes the `file` part, `async_`
    becomes the `async` form field and each `metadata` entry becomes a form
    field of its own.
    """

    file: str | Path | Any = PydanticField(
        description="Path to a local file, or an open binary file object"
    )
    async_: bool = False
    metadata: dict[str, str] = PydanticField(default_factory=dict)


class UploadDocumentFromURLRequest(RequestModel):
    document_url: str
    async_: bool = PydanticField(default=False, alias="async")
    metadata: str = ""


class UpdateFieldValueRequest(RequestModel):
    value: str


class AddFieldRequest(RequestModel):
    field_name: str
    value: str
    bbox: list[float] = PydanticField(default_factory=list)
    confidence: float = 0.0
    verification_status: str = ""
    verification_message: str = ""


class Cell(RequestModel):
    """A table cell submitted as part of a new table."""

    row: int
    col: int
    header: str = ""
    text: str = ""
    bbox: list[float] = PydanticField(default_factory=list)
    verification_status: str = ""
    verification_message: str = ""


class AddTableRequest(RequestModel):
    bbox: list[float] = PydanticField(default_factory=list)
    headers: list[str] = PydanticField(default_factory=list)
    verification_status: str = ""
    verification_message: str = ""
    cells: list[Cell] = PydanticField(default_factory=list)


class AddTableCellRequest(RequestModel):
    row: int
    col: int
    header: str = ""
    text: str = ""
    bbox: list[float] = PydanticField(default_factory=list)
    verification_status: str = ""
    verification_message: str = ""


class UpdateTableCellRequest(RequestModel):
    value: str


class VerificationRequest(RequestModel):
    """Body for every verify action (field, table cell, table, document)."""

    verification_status: str
    verification_message: str = ""
