"""Login session (token + user) as an explicit object, persisted as JSON."""
from __future__ import annotations
from pathlib import Path
from typing import Optional
import json, logging

from pydantic import ValidationError

from models.user import User

log = logging.getLogger(__name__)


class SessionContext:
    def __init__(self, path: Path):
        self.path = Path(path)
        self.token: Optional[str] = None
        self.user: Optional[User] = None

    def load(self) -> "SessionContext":
        if not self.path.exists():
            return self
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            log.warning("Session file %s unreadable (%s); starting logged out.", self.path, e)
            return self
        if isinstance(data, dict) and data.get("token"):
            self.token = str(data["token"])
            user = data.get("user")
            try:
                self.user = User.model_validate(user) if isinstance(user, dict) else None
            except ValidationError:
                self.user = None
        return self

    def save(self, token: str, user: Optional[User]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        data = {"token": token, "user": user.model_dump() if user else None}
        self.path.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")
        self.token = token
        self.user = user
        log.info("Session saved for %s", user.email if user else "<unknown>")

    def clear(self) -> None:
        self.token = None
        self.user = None
        try:
            self.path.unlink(missing_ok=True)
        except OSError as e:
            log.warning("Could not remove session file %s: %s", self.path, e)

    def is_authenticated(self) -> bool:
        return bool(self.token)
