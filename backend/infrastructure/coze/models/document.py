from enum import IntEnum

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Upload batches larger than this are rejected by Coze.
MAX_DOCUMENT_BASES = 10


class DocumentStatus(IntEnum):
    PROCESSING = 0
    DONE = 1
    FAILED = 9


class DocumentSource(IntEnum):
    """Upload origin of a document."""

    LOCAL_FILE = 0
    WEB_URL = 1
    IMAGE = 5


class Document(BaseModel):
    """Document entity as listed by Coze."""

    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)

    document_id: str = Field(..., description="Document ID")
    name: str = Field(..., description="Document name")
    status: int | None = Field(
        None, description="Processing status (0 processing, 1 done, 9 failed)"
    )
    source_type: int | None = Field(None, description="0 local file, 1 web page")
    type: str | None = Field(None, description="File type")
    size: int | None = Field(None, description="Size in bytes")
    char_count: int | None = Field(None, description="Number of characters")
    slice_count: int | None = Field(None, description="Number of slices")
    hit_count: int | None = Field(None, description="Number of retrieval hits")
    format_type: int | None = Field(None, description="Format type of the dataset")
    web_url: str | None = Field(None, description="Source URL for web documents")
    preview_tos_url: str | None = Field(None, description="Preview URL")
    create_time: int | None = Field(None, description="Creation timestamp (s)")
    update_time: int | None = Field(None, description="Update timestamp (s)")

    @property
    def is_processing(self) -> bool:
        return self.status == DocumentStatus.PROCESSING

    @property
    def has_failed(self) -> bool:
        return self.status == DocumentStatus.FAILED


class SourceInfo(BaseModel):
    """Where the content of an uploaded document comes from."""

    document_source: int = Field(..., description="0 local, 1 web, 5 image")
    file_base64: str | None = Field(None, description="Base64 file content")
    file_type: str | None = Field(None, description="File extension")
    web_url: str | None = Field(None, description="Web page URL")
    source_file_id: str | None = Field(None, description="Previously uploaded file id")


class UpdateRule(BaseModel):
    update_interval: int | None = Field(None, description="Refresh interval (hours)")
    update_type: int | None = Field(None, description="0 never, 1 periodic")


class DocumentBase(BaseModel):
    """One entry of the ``document_bases`` upload payload."""

    name: str = Field(..., min_length=1, description="Document name")
    source_info: SourceInfo
    update_rule: UpdateRule | None = None


class ChunkStrategy(BaseModel):
    """Segmentation settings of an upload; Coze chunks automatically when omitted."""

    model_config = ConfigDict(extra="allow")

    chunk_type: int | None = Field(None, description="0 automatic, 1 custom")
    separator: str | None = None
    max_tokens: int | None = None
    remove_extra_spaces: bool | None = None
    remove_urls_emails: bool | None = None


class DocumentListResponse(BaseModel):
    """Envelope returned by the document list endpoint."""

    model_config = ConfigDict(extra="allow")

    code: int | None = None
    msg: str | None = None
    document_infos: list[Document] = Field(default_factory=list)
    total: int | None = None

    @field_validator("document_infos", mode="before")
    @classmethod
    def null_as_empty(cls, value):
        return [] if value is None else value


class DocumentUploadResponse(BaseModel):
    """Envelope returned by the document create endpoint."""

    model_config = ConfigDict(extra="allow")

    code: int | None = None
    msg: str | None = None
    document_infos: list[Document] = Field(default_factory=list)

    @field_validator("document_infos", mode="before")
    @classmethod
    def null_as_empty(cls, value):
        return [] if value is None else value
