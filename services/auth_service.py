"""Mock login: demo credentials get a locally minted JWT-shaped token,
anything else is forwarded to the backend's /api/auth/login/.
"""
from __future__ import annotations

import base64, json, logging, re, time
from typing import Optional

from models.user import User
from services.api_client import PromptApiClient
from services.errors import ApiError, AuthError, ErrorCode
from services.session_store import SessionContext

log = logging.getLogger(__name__)

DEMO_EMAIL = "demo@example.com"
DEMO_PASSWORD = "demoExample123!"
DEMO_USER = User(id=1, name="Demo User", email=DEMO_EMAIL, role="user")

MOCK_SIGNATURE = "demo_mock_signature"
TOKEN_TTL_SECONDS = 60 * 60
MIN_PASSWORD_LENGTH = 6

_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def _b64(obj: dict) -> str:
    return base64.b64encode(json.dumps(obj, separators=(",", ":")).encode("utf-8")).decode("ascii")


def generate_mock_token(user: User = DEMO_USER, now: Optional[float] = None) -> str:
    issued = time.time() if now is None else now
    header = _b64({"alg": "HS256", "typ": "JWT"})
    payload = _b64({"user_id": user.id, "email": user.email, "exp": int(issued) + TOKEN_TTL_SECONDS})
    return f"{header}.{payload}.{MOCK_SIGNATURE}"


def token_expiry(token: str) -> Optional[int]:
    """'exp' of a mock token, None for tokens we did not mint."""
    parts = (token or "").split(".")
    if len(parts) != 3 or parts[2] != MOCK_SIGNATURE:
        return None
    try:
        payload = json.loads(base64.b64decode(parts[1]).decode("utf-8"))
    except ValueError:
        return None
    exp = payload.get("exp") if isinstance(payload, dict) else None
    return exp if isinstance(exp, int) else None


def validate_credentials(email: str, password: str) -> None:
    errors = []
    if not _EMAIL_RE.match((email or "").strip()):
        errors.append("Please enter a valid email address.")
    if len(password or "") < MIN_PASSWORD_LENGTH:
        errors.append(f"Password must be at least {MIN_PASSWORD_LENGTH} characters.")
    if errors:
        raise AuthError(" ".join(errors), code=ErrorCode.INVALID_ARGUMENT, details={"errors": errors})


class AuthService:
    def __init__(self, session: SessionContext, api: PromptApiClient):
        self.session = session
        self.api = api

    def is_logged_in(self, now: Optional[float] = None) -> bool:
        if not self.session.is_authenticated():
            return False
        exp = token_expiry(self.session.token)
        if exp is not None and exp <= (time.time() if now is None else now):
            log.info("Demo session expired; logging out.")
            self.session.clear()
            return False
        return True

    def login(self, email: str, password: str) -> User:
        email = (email or "").strip()
        validate_credentials(email, password)

        if email == DEMO_EMAIL and password == DEMO_PASSWORD:
            self.session.save(generate_mock_token(DEMO_USER), DEMO_USER)
            log.info("Login successful with demo credentials")
            return DEMO_USER

        try:
            result = self.api.login(email, password)
        except ApiError as e:
            msg = e.details.get("message") if isinstance(e.details, dict) else None
            log.warning("Login error for %s: %s", email, e)
            raise AuthError(msg or "Login failed. Please check your credentials.",
                            code=ErrorCode.INVALID_CREDENTIALS, details={"status": e.status_code}) from e
        if result is None:
            raise AuthError("Login failed. Please check your credentials.", code=ErrorCode.INVALID_CREDENTIALS)

        self.session.save(result.token, result.user)
        log.info("Login successful for %s", email)
        return result.user

    def logout(self) -> None:
        self.session.clear()
        log.info("Logged out")
