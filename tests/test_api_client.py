# tests/test_api_client.py
import json

import httpx
import pytest

from models.prompt import PromptCreate
from services.api_client import PromptApiClient
from services.errors import ApiError, ErrorCode

BASE = "http://backend.test"


def make_client(handler):
    return PromptApiClient(BASE + "/", timeout=2.0, transport=httpx.MockTransport(handler))


def test_list_prompts_coerces_records():
    def handler(request):
        assert request.method == "GET"
        assert request.url.path == "/api/prompts/"
        return httpx.Response(200, json=[
            {"id": 1, "title": "A", "content": "x", "complexity": 2, "view_count": 10, "created_at": "2024-01-01"},
            {"id": 2, "title": "B", "content": "y", "complexity": 9},
        ])

    records = make_client(handler).list_prompts()
    assert [r.id for r in records] == [1, 2]
    assert records[1].view_count == 0


def test_list_prompts_rejects_non_list():
    client = make_client(lambda request: httpx.Response(200, json={"results": []}))
    with pytest.raises(ApiError) as exc:
        client.list_prompts()
    assert exc.value.code == ErrorCode.INVALID_RESPONSE


def test_get_prompt_uses_detail_path():
    seen = {}

    def handler(request):
        seen["path"] = request.url.path
        return httpx.Response(200, json={"id": "abc", "title": "T", "content": "C", "complexity": 4})

    rec = make_client(handler).get_prompt("abc")
    assert seen["path"] == "/api/prompts/abc/"
    assert rec.title == "T"


def test_get_prompt_404_maps_to_not_found():
    client = make_client(lambda request: httpx.Response(404, json={"message": "No Prompt matches the given query."}))
    with pytest.raises(ApiError) as exc:
        client.get_prompt(99)
    assert exc.value.code == ErrorCode.NOT_FOUND
    assert exc.value.status_code == 404
    assert "No Prompt matches" in exc.value.message


def test_create_prompt_posts_payload():
    captured = {}

    def handler(request):
        captured["path"] = request.url.path
        captured["body"] = json.loads(request.content)
        return httpx.Response(201, json={"id": 5, **captured["body"], "view_count": 0,
                                         "created_at": "2024-02-02T10:00:00Z"})

    payload = PromptCreate(title="Koi pond", content="Koi fish in a pond, ukiyo-e style", complexity=3)
    rec = make_client(handler).create_prompt(payload)
    assert captured["path"] == "/api/prompts/create/"
    assert captured["body"] == {"title": "Koi pond", "content": "Koi fish in a pond, ukiyo-e style", "complexity": 3}
    assert rec.id == 5


def test_server_error_raises_http_error():
    client = make_client(lambda request: httpx.Response(500, text="boom"))
    with pytest.raises(ApiError) as exc:
        client.list_prompts()
    assert exc.value.code == ErrorCode.HTTP_ERROR
    assert "boom" in exc.value.message


def test_invalid_json_raises_invalid_response():
    client = make_client(lambda request: httpx.Response(200, text="<html>"))
    with pytest.raises(ApiError) as exc:
        client.list_prompts()
    assert exc.value.code == ErrorCode.INVALID_RESPONSE


def test_connection_error_is_wrapped():
    def handler(request):
        raise httpx.ConnectError("refused", request=request)

    with pytest.raises(ApiError) as exc:
        make_client(handler).list_prompts()
    assert exc.value.code == ErrorCode.CONNECTION_ERROR


def test_login_returns_result_or_none():
    def ok(request):
        assert request.url.path == "/api/auth/login/"
        return httpx.Response(200, json={"token": "tok", "user": {"id": 3, "name": "Ann", "email": "a@b.co"}})

    result = make_client(ok).login("a@b.co", "secret1")
    assert result.token == "tok"
    assert result.user.name == "Ann"

    assert make_client(lambda request: httpx.Response(200, json={"detail": "ok"})).login("a@b.co", "secret1") is None
