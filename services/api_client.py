"""Blocking REST client for the prompt backend (list / detail / create / login)."""
from __future__ import annotations

import logging
from typing import Any, List, Optional

import httpx

from models.prompt import PromptCreate, RawPromptRecord
from models.user import LoginResult, User
from services.errors import ApiError, ErrorCode

log = logging.getLogger(__name__)


class PromptApiClient:
    LIST_PROMPTS_ENDPOINT = "/api/prompts/"
    PROMPT_DETAIL_ENDPOINT = "/api/prompts/{prompt_id}/"
    CREATE_PROMPT_ENDPOINT = "/api/prompts/create/"
    LOGIN_ENDPOINT = "/api/auth/login/"

    def __init__(self, base_url: str, timeout: float = 10.0, transport: Optional[httpx.BaseTransport] = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        # injectable for tests (httpx.MockTransport)
        self._transport = transport

    def _client(self) -> httpx.Client:
        return httpx.Client(base_url=self.base_url, timeout=self.timeout, transport=self._transport)

    def _request(self, method: str, path: str, **kwargs) -> Any:
        try:
            with self._client() as client:
                res = client.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            log.warning("%s %s failed: %s", method, path, e)
            raise ApiError(f"Could not reach {self.base_url}: {e}", code=ErrorCode.CONNECTION_ERROR) from e

        body = None
        try:
            body = res.json()
        except ValueError:
            body = None

        if res.status_code >= 400:
            code = ErrorCode.NOT_FOUND if res.status_code == 404 else ErrorCode.HTTP_ERROR
            msg = body.get("message") if isinstance(body, dict) and body.get("message") else res.text
            log.warning("%s %s -> HTTP %s", method, path, res.status_code)
            raise ApiError(f"HTTP {res.status_code}: {msg}", code=code, status_code=res.status_code, details=body or {})

        if body is None:
            raise ApiError(f"Invalid JSON from {path}", code=ErrorCode.INVALID_RESPONSE, status_code=res.status_code)
        log.debug("%s %s -> %s", method, path, res.status_code)
        return body

    def list_prompts(self) -> List[RawPromptRecord]:
        data = self._request("GET", PromptApiClient.LIST_PROMPTS_ENDPOINT)
        if not isinstance(data, list):
            raise ApiError("Expected a list of prompts", code=ErrorCode.INVALID_RESPONSE, details=data)
        records = [RawPromptRecord.coerce(d) for d in data]
        log.info("Loaded %d prompts", len(records))
        return records

    def get_prompt(self, prompt_id: str | int) -> RawPromptRecord:
        path = PromptApiClient.PROMPT_DETAIL_ENDPOINT.format(prompt_id=prompt_id)
        data = self._request("GET", path)
        if not isinstance(data, dict):
            raise ApiError(f"Expected a prompt object for id {prompt_id}", code=ErrorCode.INVALID_RESPONSE, details=data)
        return RawPromptRecord.coerce(data)

    def create_prompt(self, payload: PromptCreate) -> RawPromptRecord:
        data = self._request("POST", PromptApiClient.CREATE_PROMPT_ENDPOINT, json=payload.model_dump())
        if not isinstance(data, dict):
            raise ApiError("Expected the created prompt", code=ErrorCode.INVALID_RESPONSE, details=data)
        rec = RawPromptRecord.coerce(data)
        log.info("Prompt created: id=%s title=%r", rec.id, rec.title)
        return rec

    def login(self, email: str, password: str) -> Optional[LoginResult]:
        """Returns None when the backend answers without a token."""
        data = self._request("POST", PromptApiClient.LOGIN_ENDPOINT, json={"email": email, "password": password})
        if not isinstance(data, dict) or not data.get("token"):
            return None
        user = data.get("user") if isinstance(data.get("user"), dict) else {}
        return LoginResult(token=str(data["token"]), user=User.model_validate(user))
