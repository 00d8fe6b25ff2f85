"""
Assembly of the ``document_bases`` payload for document uploads.

Two modes are supported: a set of local files, each sent base64 encoded, or a
single web page URL. Input is checked before anything is encoded so an
invalid batch never costs a read or a request.
"""

import base64
import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from urllib.parse import unquote_to_bytes

from infrastructure.coze.models import (
    MAX_DOCUMENT_BASES,
    DocumentBase,
    DocumentSource,
    SourceInfo,
)

from .exceptions import UploadError, UploadValidationError

logger = logging.getLogger(__name__)

SUPPORTED_EXTENSIONS = frozenset({"pdf", "txt", "doc", "docx", "md"})

NO_FILES_MESSAGE = "Please select files to upload"
TOO_MANY_FILES_MESSAGE = f"At most {MAX_DOCUMENT_BASES} files can be uploaded at a time"
UNSUPPORTED_FORMAT_MESSAGE = "Unsupported file format: {name}"
NO_URL_MESSAGE = "Please enter a web page URL"


class UploadMode(str, Enum):
    FILES = "files"
    URL = "url"


@dataclass
class LocalFile:
    """
    A file selected for upload.

    ``content`` is either raw bytes, a base64 string, or a data URL such as
    ``data:application/pdf;base64,JVBERi0...``. When ``path`` is set and
    ``content`` is empty the file is read at encoding time.
    """

    name: str
    content: bytes | str | None = None
    path: Path | None = None

    @classmethod
    def from_path(cls, path) -> "LocalFile":
        path = Path(path)
        return cls(name=path.name, path=path)

    @property
    def extension(self) -> str:
        return get_file_extension(self.name)

    def read(self) -> bytes | str:
        if self.content is not None:
            return self.content
        if self.path is None:
            raise UploadError(f"No content for file: {self.name}")
        try:
            return self.path.read_bytes()
        except OSError as e:
            raise UploadError(f"Failed to read file {self.name}: {e}") from e


def get_file_extension(filename: str) -> str:
    """Lower-cased text after the last dot, or an empty string."""
    if "." not in filename:
        return ""
    return filename.rsplit(".", 1)[1].lower()


def decode_data_url(value: str) -> str:
    """
    Base64 payload of a data URL.

    ``data:<mime>;base64,<payload>`` yields the payload as is; a plain data URL
    such as ``data:text/plain,hello`` has its percent-decoded payload encoded.
    Strings that are not data URLs are taken to be base64 already.
    """
    if not value.startswith("data:") or "," not in value:
        return value
    header, payload = value.split(",", 1)
    if header.lower().endswith(";base64"):
        return payload
    return base64.b64encode(unquote_to_bytes(payload)).decode("ascii")


def encode_file_base64(content: bytes | str) -> str:
    """Base64 text for the given file content, without any data URL header."""
    if isinstance(content, str):
        return decode_data_url(content)
    return base64.b64encode(content).decode("ascii")


def validate_files(files: list[LocalFile]) -> None:
    if not files:
        raise UploadValidationError(NO_FILES_MESSAGE)
    if len(files) > MAX_DOCUMENT_BASES:
        raise UploadValidationError(TOO_MANY_FILES_MESSAGE)
    for file in files:
        if file.extension not in SUPPORTED_EXTENSIONS:
            raise UploadValidationError(UNSUPPORTED_FORMAT_MESSAGE.format(name=file.name))


def build_file_document_bases(files: list[LocalFile]) -> list[DocumentBase]:
    """
    Build one document base per local file.

    Raises:
        UploadValidationError: Empty batch, too many files or unsupported extension
        UploadError: A file could not be read; the whole batch is dropped
    """
    files = list(files or [])
    validate_files(files)

    document_bases = []
    for file in files:
        document_bases.append(
            DocumentBase(
                name=file.name,
                source_info=SourceInfo(
                    file_base64=encode_file_base64(file.read()),
                    file_type=file.extension,
                    document_source=DocumentSource.LOCAL_FILE,
                ),
            )
        )

    logger.debug(f"Assembled {len(document_bases)} file document bases")
    return document_bases


def build_web_document_base(url: str | None) -> list[DocumentBase]:
    """Build the single document base of a web page upload."""
    url = (url or "").strip()
    if not url:
        raise UploadValidationError(NO_URL_MESSAGE)

    return [
        DocumentBase(
            name=url,
            source_info=SourceInfo(web_url=url, document_source=DocumentSource.WEB_URL),
        )
    ]


def assemble_document_bases(
    mode: UploadMode | str,
    files: list[LocalFile] | None = None,
    url: str | None = None,
) -> list[DocumentBase]:
    mode = UploadMode(mode)
    if mode is UploadMode.URL:
        return build_web_document_base(url)
    return build_file_document_bases(files)
