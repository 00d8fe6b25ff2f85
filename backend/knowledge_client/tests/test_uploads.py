"""
Tests for upload payload assembly.
"""

import base64
from unittest.mock import patch

import pytest

from knowledge_client.exceptions import UploadError, UploadValidationError
from knowledge_client.uploads import (
    LocalFile,
    UploadMode,
    assemble_document_bases,
    build_file_document_bases,
    build_web_document_base,
    encode_file_base64,
    get_file_extension,
)


class TestFileExtension:
    @pytest.mark.parametrize(
        "name,expected",
        [
            ("report.PDF", "pdf"),
            ("archive.tar.md", "md"),
            ("README", ""),
            ("notes.", ""),
        ],
    )
    def test_get_file_extension(self, name, expected):
        assert get_file_extension(name) == expected


class TestEncoding:
    def test_bytes_are_base64_encoded(self):
        assert encode_file_base64(b"hello") == base64.b64encode(b"hello").decode()

    def test_data_url_prefix_is_stripped(self):
        assert encode_file_base64("data:application/pdf;base64,JVBERi0=") == "JVBERi0="

    def test_plain_base64_is_kept(self):
        assert encode_file_base64("aGVsbG8=") == "aGVsbG8="

    def test_plain_data_url_payload_is_encoded(self):
        assert encode_file_base64("data:text/plain,hello") == base64.b64encode(b"hello").decode()

    def test_percent_encoded_data_url(self):
        expected = base64.b64encode(b"a b").decode()
        assert encode_file_base64("data:text/plain;charset=utf-8,a%20b") == expected

    def test_base64_header_is_case_insensitive(self):
        assert encode_file_base64("data:application/pdf;BASE64,JVBERi0=") == "JVBERi0="


class TestBuildFileDocumentBases:
    def test_entries(self):
        files = [
            LocalFile("a.txt", b"hello"),
            LocalFile("Guide.DOCX", "data:application/octet-stream;base64,UEsD"),
        ]

        bases = build_file_document_bases(files)

        assert [base.model_dump(mode="json", exclude_none=True) for base in bases] == [
            {
                "name": "a.txt",
                "source_info": {
                    "file_base64": "aGVsbG8=",
                    "file_type": "txt",
                    "document_source": 0,
                },
            },
            {
                "name": "Guide.DOCX",
                "source_info": {
                    "file_base64": "UEsD",
                    "file_type": "docx",
                    "document_source": 0,
                },
            },
        ]

    @pytest.mark.parametrize("files", [[], None])
    def test_no_files(self, files):
        with pytest.raises(UploadValidationError) as exc_info:
            build_file_document_bases(files)
        assert exc_info.value.message == "Please select files to upload"

    def test_eleven_files_rejected_before_encoding(self):
        files = [LocalFile(f"{i}.txt", b"x") for i in range(11)]

        with patch("knowledge_client.uploads.encode_file_base64") as mock_encode:
            with pytest.raises(UploadValidationError) as exc_info:
                build_file_document_bases(files)

        assert exc_info.value.message == "At most 10 files can be uploaded at a time"
        mock_encode.assert_not_called()

    def test_ten_files_accepted(self):
        files = [LocalFile(f"{i}.md", b"# x") for i in range(10)]
        assert len(build_file_document_bases(files)) == 10

    def test_unsupported_extension_rejected_before_encoding(self):
        files = [LocalFile("a.txt", b"x"), LocalFile("photo.png", b"x")]

        with patch("knowledge_client.uploads.encode_file_base64") as mock_encode:
            with pytest.raises(UploadValidationError) as exc_info:
                build_file_document_bases(files)

        assert exc_info.value.message == "Unsupported file format: photo.png"
        mock_encode.assert_not_called()

    def test_read_failure_aborts_batch(self, tmp_path):
        existing = tmp_path / "a.txt"
        existing.write_bytes(b"hello")
        files = [LocalFile.from_path(existing), LocalFile.from_path(tmp_path / "missing.txt")]

        with pytest.raises(UploadError) as exc_info:
            build_file_document_bases(files)

        assert not isinstance(exc_info.value, UploadValidationError)
        assert "missing.txt" in exc_info.value.message

    def test_from_path_reads_content(self, tmp_path):
        path = tmp_path / "notes.md"
        path.write_bytes(b"# Notes")

        (base,) = build_file_document_bases([LocalFile.from_path(path)])

        assert base.name == "notes.md"
        assert base.source_info.file_base64 == base64.b64encode(b"# Notes").decode()


class TestBuildWebDocumentBase:
    def test_entry(self):
        (base,) = build_web_document_base(" https://example.com/page ")
        assert base.model_dump(mode="json", exclude_none=True) == {
            "name": "https://example.com/page",
            "source_info": {"web_url": "https://example.com/page", "document_source": 1},
        }

    @pytest.mark.parametrize("url", [None, "", "   "])
    def test_blank_url(self, url):
        with pytest.raises(UploadValidationError) as exc_info:
            build_web_document_base(url)
        assert exc_info.value.message == "Please enter a web page URL"


class TestAssembleDocumentBases:
    def test_url_mode(self):
        bases = assemble_document_bases("url", url="https://example.com")
        assert bases[0].source_info.web_url == "https://example.com"

    def test_file_mode(self):
        bases = assemble_document_bases(UploadMode.FILES, files=[LocalFile("a.pdf", b"%PDF")])
        assert bases[0].source_info.file_type == "pdf"

    def test_file_mode_without_files(self):
        with pytest.raises(UploadValidationError):
            assemble_document_bases(UploadMode.FILES)
