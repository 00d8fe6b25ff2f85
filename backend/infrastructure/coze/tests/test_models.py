"""
Tests for Coze pydantic models.
"""

import pytest
from pydantic import ValidationError

from infrastructure.coze.config import CozeConfig
from infrastructure.coze.models import (
    APIResponse,
    DatasetListResponse,
    Document,
    DocumentBase,
    DocumentListResponse,
    DocumentSource,
    FormatType,
    Paginated,
    SourceInfo,
)


class TestDatasetModels:
    def test_dataset_list_response(self):
        response = DatasetListResponse.model_validate(
            {
                "code": 0,
                "msg": "",
                "data": {
                    "total_count": 1,
                    "dataset_list": [
                        {"dataset_id": "d1", "name": "Manuals", "format_type": 2, "doc_count": 3}
                    ],
                },
            }
        )
        assert response.datasets[0].format_type == FormatType.IMAGE
        assert response.datasets[0].doc_count == 3

    def test_empty_dataset_list(self):
        assert DatasetListResponse(code=0).datasets == []


class TestDocumentModels:
    def test_document_status(self):
        assert Document(document_id="1", name="a", status=0).is_processing
        assert Document(document_id="1", name="a", status=9).has_failed
        assert not Document(document_id="1", name="a", status=1).is_processing

    def test_unknown_fields_are_kept(self):
        document = Document.model_validate({"document_id": "1", "name": "a", "tos_uri": "x"})
        assert document.model_dump()["tos_uri"] == "x"

    def test_document_list_response(self):
        response = DocumentListResponse.model_validate(
            {"code": 0, "document_infos": [{"document_id": "1", "name": "a"}], "total": 1}
        )
        assert response.total == 1
        assert response.document_infos[0].name == "a"

    def test_document_base_requires_name(self):
        with pytest.raises(ValidationError):
            DocumentBase(name="", source_info=SourceInfo(document_source=0))

    def test_web_document_base_dump(self):
        base = DocumentBase(
            name="https://example.com",
            source_info=SourceInfo(
                web_url="https://example.com", document_source=DocumentSource.WEB_URL
            ),
        )
        assert base.model_dump(mode="json", exclude_none=True) == {
            "name": "https://example.com",
            "source_info": {"web_url": "https://example.com", "document_source": 1},
        }


class TestGenericModels:
    def test_api_response_success(self):
        assert APIResponse[dict](code=0, data={}).is_success
        assert not APIResponse[dict](code=4000, msg="bad").is_success
        assert not APIResponse[dict](error=True, message="bad").is_success

    @pytest.mark.parametrize(
        "total,page_size,expected",
        [(0, 100, 1), (100, 100, 1), (101, 100, 2), (250, 100, 3)],
    )
    def test_paginated_total_pages(self, total, page_size, expected):
        assert Paginated[Document](total=total, page_size=page_size).total_pages == expected

    def test_paginated_has_next(self):
        assert Paginated[Document](total=250, page=2, page_size=100).has_next
        assert not Paginated[Document](total=250, page=3, page_size=100).has_next


class TestCozeConfig:
    def test_defaults(self):
        config = CozeConfig()
        assert config.base_url == "https://api.coze.cn"
        assert config.timeout == 60
        assert not config.is_complete

    def test_from_settings(self):
        config = CozeConfig.from_settings()
        assert config.api_token == "test-token"
        assert config.space_id == "test-space"
        assert config.is_complete

    def test_config_is_frozen(self):
        config = CozeConfig(api_token="t")
        with pytest.raises(ValidationError):
            config.api_token = "other"

    def test_timeout_must_be_positive(self):
        with pytest.raises(ValidationError):
            CozeConfig(timeout=0)

    def test_log_status_warns_on_missing_credentials(self, caplog):
        with caplog.at_level("WARNING", logger="infrastructure.coze.config"):
            CozeConfig().log_status()
        assert "COZE_API_TOKEN is not set" in caplog.text
        assert "COZE_SPACE_ID is not set" in caplog.text
