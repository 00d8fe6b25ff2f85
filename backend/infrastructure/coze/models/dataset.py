from enum import IntEnum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class FormatType(IntEnum):
    """Dataset content kind, fixed at creation."""

    TEXT = 0
    IMAGE = 2


class Dataset(BaseModel):
    """Dataset (knowledge base) entity."""

    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)

    dataset_id: str = Field(..., description="Dataset ID")
    name: str = Field(..., description="Dataset name")
    description: str | None = Field(None, description="Dataset description")
    format_type: int = Field(FormatType.TEXT, description="0 for text, 2 for image")
    icon: str | None = Field(None, description="Icon file id")
    icon_url: str | None = Field(None, description="Icon URL")
    doc_count: int | None = Field(None, description="Number of documents")
    slice_count: int | None = Field(None, description="Number of slices")
    status: int | None = Field(None, description="Dataset status")
    file_list: list[str] | None = Field(None, description="Names of contained files")
    create_time: int | None = Field(None, description="Creation timestamp (s)")
    update_time: int | None = Field(None, description="Update timestamp (s)")


class DatasetListData(BaseModel):
    model_config = ConfigDict(extra="allow")

    total_count: int | None = None
    dataset_list: list[Dataset] = Field(default_factory=list)

    @field_validator("dataset_list", mode="before")
    @classmethod
    def null_as_empty(cls, value):
        return [] if value is None else value


class DatasetListResponse(BaseModel):
    """Envelope returned by the dataset list endpoint."""

    model_config = ConfigDict(extra="allow")

    code: int | None = None
    msg: str | None = None
    data: DatasetListData | None = None

    @property
    def datasets(self) -> list[Dataset]:
        return self.data.dataset_list if self.data else []
