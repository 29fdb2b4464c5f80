"""Unit tests for error classes."""

from __future__ import annotations

import httpx

from tenor_sdk.errors import TenorAPIError
from tenor_sdk.models.errors import ErrorResponse


class TestTenorAPIError:
    def test_from_response(self):
        response = httpx.Response(
            400,
            json={"error": {"code": "BAD_REQUEST", "message": "x"}},
        )
        err = TenorAPIError.from_response(response, response.json())
        assert err.status == 400
        assert err.code == "BAD_REQUEST"
        assert err.message == "x"
        assert err.error is not None
        assert err.response is response

    def test_google_style_envelope(self):
        body = {
            "error": {
                "code": 400,
                "message": "API key not valid. Please pass a valid API key.",
                "status": "INVALID_ARGUMENT",
                "details": [{"@type": "type.googleapis.com/google.rpc.ErrorInfo", "reason": "API_KEY_INVALID"}],
            }
        }
        err = TenorAPIError.from_response(httpx.Response(400, json=body), body)
        assert err.code == 400
        assert err.error.status == "INVALID_ARGUMENT"
        assert err.error.details[0]["reason"] == "API_KEY_INVALID"

    def test_body_without_error_object(self):
        err = TenorAPIError.from_response(httpx.Response(500, json={}), {})
        assert err.status == 500
        assert err.error is None
        assert err.code is None
        assert err.message is None
        assert "HTTP 500" in str(err)

    def test_non_dict_body(self):
        err = TenorAPIError.from_response(httpx.Response(500, json=["oops"]), ["oops"])
        assert err.error is None

    def test_str(self):
        err = TenorAPIError(404, ErrorResponse(code="NOT_FOUND", message="Resource not found"))
        s = str(err)
        assert "404" in s
        assert "NOT_FOUND" in s
        assert "Resource not found" in s

    def test_is_exception(self):
        assert isinstance(TenorAPIError(400), Exception)

    def test_error_without_message(self):
        body = {"error": {"code": 400}}
        err = TenorAPIError.from_response(httpx.Response(400, json=body), body)
        assert err.status == 400
        assert err.code == 400
        assert err.message is None
        assert "HTTP 400" in str(err)

    def test_error_with_null_code(self):
        body = {"error": {"code": None, "message": "boom"}}
        err = TenorAPIError.from_response(httpx.Response(500, json=body), body)
        assert err.status == 500
        assert err.code is None
        assert err.message == "boom"
        assert "UNKNOWN" in str(err)

    def test_unparseable_error_object(self):
        body = {"error": {"code": 400, "message": "bad", "details": "not-a-list"}}
        err = TenorAPIError.from_response(httpx.Response(400, json=body), body)
        assert err.status == 400
        assert err.error is None
