"""
Tests for the knowledge manager API client.

Requests are served by ``httpx.MockTransport`` handlers that record what the
client sent.
"""

import json

import httpx
import pytest

from knowledge_client import (
    BatchDeleteError,
    BatchDeletePolicy,
    ClientValidationError,
    KnowledgeClient,
    KnowledgeClientError,
    LocalFile,
    UploadValidationError,
)


class Recorder:
    """MockTransport handler returning queued responses and keeping requests."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        response = self.responses.pop(0) if len(self.responses) > 1 else self.responses[0]
        if isinstance(response, Exception):
            raise response
        if callable(response):
            return response(request)
        return response

    def body(self, index=-1):
        return json.loads(self.requests[index].content)


def make_client(handler) -> KnowledgeClient:
    return KnowledgeClient("http://backend.test/api/", transport=httpx.MockTransport(handler))


def ok(body):
    return httpx.Response(200, json=body)


class TestErrorNormalization:
    def test_backend_message_is_used(self):
        handler = Recorder(
            httpx.Response(400, json={"error": True, "message": "Dataset name is required"})
        )
        with make_client(handler) as client:
            with pytest.raises(KnowledgeClientError) as exc_info:
                client.get_datasets()

        assert exc_info.value.message == "Dataset name is required"
        assert exc_info.value.status_code == 400

    def test_body_without_message_uses_transport_message(self):
        handler = Recorder(httpx.Response(502, text="Bad Gateway"))
        with make_client(handler) as client:
            with pytest.raises(KnowledgeClientError) as exc_info:
                client.get_datasets()

        assert "502" in exc_info.value.message
        assert exc_info.value.status_code == 502

    def test_transport_failure(self):
        handler = Recorder(httpx.ConnectError("Connection refused"))
        with make_client(handler) as client:
            with pytest.raises(KnowledgeClientError) as exc_info:
                client.health()

        assert exc_info.value.message == "Connection refused"
        assert exc_info.value.status_code is None

    def test_empty_transport_message_uses_fallback(self):
        handler = Recorder(httpx.ConnectError(""))
        with make_client(handler) as client:
            with pytest.raises(KnowledgeClientError) as exc_info:
                client.health()

        assert exc_info.value.message == "Request failed"

    def test_error_message_never_empty(self):
        assert KnowledgeClientError("").message == "Request failed"


class TestDatasets:
    def test_get_datasets(self):
        handler = Recorder(
            ok({"code": 0, "data": {"total_count": 1, "dataset_list": [{"dataset_id": "d1", "name": "kb"}]}})
        )
        with make_client(handler) as client:
            response = client.get_datasets(name="kb", page_size=50)

        request = handler.requests[0]
        assert request.method == "GET"
        assert request.url.path == "/api/datasets"
        assert dict(request.url.params) == {"name": "kb", "page_num": "1", "page_size": "50"}
        assert response.datasets[0].dataset_id == "d1"

    def test_create_dataset(self):
        handler = Recorder(ok({"code": 0, "data": {"dataset_id": "d1"}}))
        with make_client(handler) as client:
            response = client.create_dataset("Manuals", format_type=2)

        assert handler.body() == {"name": "Manuals", "format_type": 2}
        assert response.data == {"dataset_id": "d1"}

    @pytest.mark.parametrize(
        "kwargs,message",
        [
            ({"name": "  "}, "Dataset name is required"),
            ({"name": "kb", "format_type": 1}, "format_type must be 0 (text) or 2 (image)"),
        ],
    )
    def test_create_dataset_validation(self, kwargs, message):
        handler = Recorder(ok({}))
        with make_client(handler) as client:
            with pytest.raises(ClientValidationError) as exc_info:
                client.create_dataset(**kwargs)

        assert exc_info.value.message == message
        assert handler.requests == []

    def test_update_dataset_never_sends_format_type(self):
        handler = Recorder(ok({"code": 0}))
        with make_client(handler) as client:
            client.update_dataset("d1", name="New", description=None, format_type=2)

        request = handler.requests[0]
        assert request.method == "PUT"
        assert request.url.path == "/api/datasets/d1"
        assert handler.body() == {"name": "New"}

    def test_delete_dataset(self):
        handler = Recorder(ok({"code": 0, "msg": ""}))
        with make_client(handler) as client:
            assert client.delete_dataset("d1").is_success
        assert handler.requests[0].method == "DELETE"


def document_page(start, count, total):
    return ok(
        {
            "code": 0,
            "document_infos": [
                {"document_id": str(i), "name": f"{i}.txt"} for i in range(start, start + count)
            ],
            "total": total,
        }
    )


class TestDocuments:
    def test_list_all_documents(self):
        handler = Recorder(
            document_page(0, 100, 250), document_page(100, 100, 250), document_page(200, 50, 250)
        )
        with make_client(handler) as client:
            documents = client.list_all_documents("d1")

        assert [r.url.params["page"] for r in handler.requests] == ["1", "2", "3"]
        assert all(r.url.params["size"] == "100" for r in handler.requests)
        assert all(r.url.path == "/api/datasets/d1/documents" for r in handler.requests)
        assert len(documents) == 250
        assert documents[-1].document_id == "249"

    def test_list_all_documents_page_failure(self):
        handler = Recorder(
            document_page(0, 100, 250),
            httpx.Response(500, json={"error": True, "message": "upstream down"}),
        )
        with make_client(handler) as client:
            with pytest.raises(KnowledgeClientError) as exc_info:
                client.list_all_documents("d1")

        assert exc_info.value.message == "upstream down"
        assert len(handler.requests) == 2

    def test_iter_document_pages_with_cap(self):
        handler = Recorder(document_page(0, 10, 100))
        with make_client(handler) as client:
            pages = list(client.iter_document_pages("d1", page_size=10, max_pages=1))

        assert len(pages) == 1
        assert pages[0].total == 100
        assert len(handler.requests) == 1

    def test_upload_files(self):
        handler = Recorder(ok({"code": 0, "document_infos": [{"document_id": "9", "name": "a.txt"}]}))
        with make_client(handler) as client:
            response = client.upload_files("d1", [LocalFile("a.txt", b"hi")])

        request = handler.requests[0]
        assert request.method == "POST"
        assert request.url.path == "/api/datasets/d1/documents"
        assert handler.body() == {
            "document_bases": [
                {
                    "name": "a.txt",
                    "source_info": {"document_source": 0, "file_base64": "aGk=", "file_type": "txt"},
                }
            ],
            "format_type": 0,
        }
        assert response.document_infos[0].document_id == "9"

    def test_upload_web_page_echoes_format_type(self):
        handler = Recorder(ok({"code": 0}))
        with make_client(handler) as client:
            client.upload_web_page("d1", "https://example.com", format_type=2)

        assert handler.body() == {
            "document_bases": [
                {
                    "name": "https://example.com",
                    "source_info": {"document_source": 1, "web_url": "https://example.com"},
                }
            ],
            "format_type": 2,
        }

    def test_upload_without_files_sends_nothing(self):
        handler = Recorder(ok({}))
        with make_client(handler) as client:
            with pytest.raises(UploadValidationError) as exc_info:
                client.upload_files("d1", [])

        assert exc_info.value.message == "Please select files to upload"
        assert handler.requests == []

    def test_upload_documents_rejects_large_batch(self):
        handler = Recorder(ok({}))
        bases = [{"name": f"{i}"} for i in range(11)]
        with make_client(handler) as client:
            with pytest.raises(ClientValidationError):
                client.upload_documents("d1", bases)
        assert handler.requests == []

    def test_update_document(self):
        handler = Recorder(ok({"code": 0}))
        with make_client(handler) as client:
            client.update_document("doc1", "renamed.pdf")

        assert handler.requests[0].method == "PUT"
        assert handler.requests[0].url.path == "/api/documents/doc1"
        assert handler.body() == {"name": "renamed.pdf"}

    def test_batch_delete_documents(self):
        handler = Recorder(ok({"code": 0}))
        with make_client(handler) as client:
            client.batch_delete_documents(["a", "b"])

        assert handler.requests[0].url.path == "/api/documents/batch-delete"
        assert handler.body() == {"document_ids": ["a", "b"]}

    def test_get_document_progress(self):
        handler = Recorder(ok({"code": 0, "data": {"data": [{"document_id": "a", "progress": 100}]}}))
        with make_client(handler) as client:
            response = client.get_document_progress("d1", ["a"])

        assert handler.requests[0].url.path == "/api/documents/progress"
        assert handler.body() == {"dataset_id": "d1", "document_ids": ["a"]}
        assert response.is_success


class TestSequentialDelete:
    def test_failure_in_middle_aborts(self):
        def handler(request):
            if request.url.path.endswith("/B"):
                return httpx.Response(404, json={"error": True, "message": "document not found"})
            return ok({"code": 0})

        recorder = Recorder(handler)
        with make_client(recorder) as client:
            with pytest.raises(BatchDeleteError) as exc_info:
                client.delete_documents_sequentially(["A", "B", "C"])

        assert [r.url.path for r in recorder.requests] == ["/api/documents/A", "/api/documents/B"]
        assert all(r.method == "DELETE" for r in recorder.requests)
        result = exc_info.value.result
        assert result.deleted == ["A"]
        assert result.failed == {"B": "document not found"}
        assert result.skipped == ["C"]

    def test_continue_policy(self):
        def handler(request):
            if request.url.path.endswith("/B"):
                return httpx.Response(404, json={"error": True, "message": "document not found"})
            return ok({"code": 0})

        recorder = Recorder(handler)
        with make_client(recorder) as client:
            with pytest.raises(BatchDeleteError) as exc_info:
                client.delete_documents_sequentially(["A", "B", "C"], BatchDeletePolicy.CONTINUE)

        assert len(recorder.requests) == 3
        assert exc_info.value.result.deleted == ["A", "C"]


class TestResponseShapes:
    """Bodies that do not fit the models still surface as KnowledgeClientError."""

    def test_null_document_list_is_empty(self):
        handler = Recorder(ok({"code": 0, "document_infos": None, "total": 0}))
        with make_client(handler) as client:
            assert client.list_all_documents("d1") == []

    def test_null_dataset_list_is_empty(self):
        handler = Recorder(ok({"code": 0, "data": {"dataset_list": None}}))
        with make_client(handler) as client:
            assert client.get_datasets().datasets == []

    def test_null_upload_result_is_empty(self):
        handler = Recorder(ok({"code": 0, "document_infos": None}))
        with make_client(handler) as client:
            response = client.upload_web_page("d1", "https://example.com")
        assert response.document_infos == []

    def test_numeric_ids_are_accepted(self):
        handler = Recorder(
            ok({"code": 0, "document_infos": [{"document_id": 7411, "name": "a.txt"}], "total": 1})
        )
        with make_client(handler) as client:
            (document,) = client.list_all_documents("d1")
        assert document.document_id == "7411"

    def test_numeric_dataset_id_is_accepted(self):
        handler = Recorder(ok({"data": {"dataset_list": [{"dataset_id": 42, "name": "kb"}]}}))
        with make_client(handler) as client:
            assert client.get_datasets().datasets[0].dataset_id == "42"

    def test_malformed_body_raises_client_error(self):
        handler = Recorder(ok({"code": 0, "document_infos": "oops", "total": 1}))
        with make_client(handler) as client:
            with pytest.raises(KnowledgeClientError) as exc_info:
                client.list_all_documents("d1")

        assert exc_info.value.message.startswith("Invalid response from backend: document_infos")

    def test_missing_document_fields_raise_client_error(self):
        handler = Recorder(ok({"document_infos": [{"name": "no id"}]}))
        with make_client(handler) as client:
            with pytest.raises(KnowledgeClientError):
                client.get_documents("d1")


class TestChunkStrategy:
    def test_chunk_strategy_is_validated_and_sent(self):
        handler = Recorder(ok({"code": 0}))
        with make_client(handler) as client:
            client.upload_web_page(
                "d1", "https://example.com", chunk_strategy={"chunk_type": 1, "max_tokens": "800"}
            )

        assert handler.body()["chunk_strategy"] == {"chunk_type": 1, "max_tokens": 800}

    def test_invalid_chunk_strategy_sends_nothing(self):
        handler = Recorder(ok({}))
        with make_client(handler) as client:
            with pytest.raises(ClientValidationError) as exc_info:
                client.upload_web_page(
                    "d1", "https://example.com", chunk_strategy={"max_tokens": "many"}
                )

        assert exc_info.value.message.startswith("Invalid chunk_strategy: max_tokens")
        assert handler.requests == []
