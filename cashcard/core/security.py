import hashlib
import hmac
import logging
from datetime import datetime, timedelta, timezone
from functools import lru_cache
from typing import Dict, FrozenSet, Optional, Tuple

import jwt
from pydantic import BaseModel, ConfigDict

from cashcard.core.config import settings
from cashcard.core.errors import AuthError

logger = logging.getLogger(__name__)


class Principal(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    roles: FrozenSet[str] = frozenset()


def hash_token(token: str) -> str:
    return hashlib.sha256(token.encode("utf-8")).hexdigest()


class InMemoryUserStore:
    """Demo credential store.

    Passwords are kept only as SHA-256 digests. Anything that exposes
    ``authenticate`` and ``authorize`` with the same signatures can replace it
    through ``get_user_store``.
    """

    def __init__(self, users: Dict[str, Tuple[str, FrozenSet[str]]]):
        # name -> (password digest, roles)
        self._users = users

    @classmethod
    def from_config(cls, raw: str) -> "InMemoryUserStore":
        users = {}
        for entry in raw.split(";"):
            entry = entry.strip()
            if not entry:
                continue
            parts = entry.split(":", 2)
            parts += [""] * (3 - len(parts))
            name, password, roles = parts
            if not name or not password:
                raise ValueError(f"Invalid user entry: {name or entry!r}")
            users[name] = (
                hash_token(password),
                frozenset(r.strip() for r in roles.split(",") if r.strip()),
            )
        return cls(users)

    def authenticate(self, username: str, password: str) -> Optional[Principal]:
        record = self._users.get(username)
        if record is None:
            # сравниваем всё равно, чтобы время ответа не выдавало имя
            hmac.compare_digest(hash_token(password), hash_token(""))
            return None
        digest, roles = record
        if not hmac.compare_digest(hash_token(password), digest):
            return None
        return Principal(name=username, roles=roles)

    def authorize(self, principal: Principal, required_role: str) -> bool:
        if not required_role:
            return True
        record = self._users.get(principal.name)
        return record is not None and required_role in record[1]


@lru_cache()
def get_user_store() -> InMemoryUserStore:
    return InMemoryUserStore.from_config(settings.USERS)


def make_access_token(principal: Principal) -> str:
    now = datetime.now(timezone.utc)
    payload = {
        "sub": principal.name,
        "roles": sorted(principal.roles),
        "iat": int(now.timestamp()),
        "exp": int((now + timedelta(seconds=settings.ACCESS_TOKEN_TTL_SEC)).timestamp()),
    }
    return jwt.encode(payload, settings.JWT_SECRET, algorithm=settings.JWT_ALG)


def verify_access_token(token: str) -> Principal:
    try:
        payload = jwt.decode(token, settings.JWT_SECRET, algorithms=[settings.JWT_ALG])
    except jwt.ExpiredSignatureError:
        raise AuthError("ACCESS_TOKEN_EXPIRED", "Access token expired.", scheme="Bearer")
    except jwt.InvalidTokenError:
        logger.warning("Rejected invalid access token")
        raise AuthError("ACCESS_TOKEN_INVALID", "Invalid access token.", scheme="Bearer")

    name = payload.get("sub")
    if not name:
        raise AuthError("ACCESS_TOKEN_INVALID", "Invalid access token.", scheme="Bearer")
    return Principal(name=name, roles=frozenset(payload.get("roles") or ()))
