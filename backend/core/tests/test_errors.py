"""
Tests for the shared error message normalization.
"""

import pytest

from core.errors import DEFAULT_FALLBACK_MESSAGE, error_envelope, normalize_error_message


class TestNormalizeErrorMessage:
    def test_payload_message_wins(self):
        message = normalize_error_message({"msg": "invalid token"}, "status 401")
        assert message == "invalid token"

    def test_custom_field(self):
        payload = {"error": True, "message": "Dataset name is required"}
        assert normalize_error_message(payload, "boom", field="message") == "Dataset name is required"

    def test_falls_back_to_transport_message(self):
        assert normalize_error_message({"code": 500}, "connection reset") == "connection reset"

    @pytest.mark.parametrize("payload", [None, {}, {"msg": ""}, {"msg": "   "}, "text", ["msg"]])
    def test_ignores_unusable_payloads(self, payload):
        assert normalize_error_message(payload, "transport") == "transport"

    @pytest.mark.parametrize("transport", [None, "", "  "])
    def test_fixed_fallback(self, transport):
        assert normalize_error_message({"msg": None}, transport) == DEFAULT_FALLBACK_MESSAGE
        assert DEFAULT_FALLBACK_MESSAGE == "Request failed"

    def test_custom_fallback(self):
        assert normalize_error_message(fallback="Connection error") == "Connection error"

    def test_non_string_message_is_stringified(self):
        assert normalize_error_message({"msg": 42}) == "42"


class TestErrorEnvelope:
    def test_envelope(self):
        assert error_envelope("nope") == {"error": True, "message": "nope"}

    def test_envelope_never_empty(self):
        assert error_envelope("") == {"error": True, "message": "Request failed"}
