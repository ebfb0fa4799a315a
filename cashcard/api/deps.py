import logging
from typing import Optional

from fastapi import Depends
from fastapi.security import (
    HTTPAuthorizationCredentials,
    HTTPBasic,
    HTTPBasicCredentials,
    HTTPBearer,
)
from sqlalchemy.orm import Session

from cashcard.core.config import get_settings, Settings
from cashcard.core.errors import AuthError
from cashcard.core.security import (
    InMemoryUserStore,
    Principal,
    get_user_store,
    verify_access_token,
)
from cashcard.db.repository import CashCardRepository
from cashcard.db.session import get_db

logger = logging.getLogger(__name__)

basic_scheme = HTTPBasic(auto_error=False, realm="cashcards")
bearer_scheme = HTTPBearer(auto_error=False)


def get_repository(db: Session = Depends(get_db)) -> CashCardRepository:
    return CashCardRepository(db)


def get_basic_principal(
    credentials: Optional[HTTPBasicCredentials] = Depends(basic_scheme),
    users: InMemoryUserStore = Depends(get_user_store),
) -> Principal:
    if credentials is None:
        raise AuthError("UNAUTHENTICATED", "Authentication required.")

    principal = users.authenticate(credentials.username, credentials.password)
    if principal is None:
        logger.warning("Failed basic authentication for %r", credentials.username)
        raise AuthError("BAD_CREDENTIALS", "Invalid username or password.")
    return principal


def get_current_principal(
    basic: Optional[HTTPBasicCredentials] = Depends(basic_scheme),
    bearer: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    users: InMemoryUserStore = Depends(get_user_store),
) -> Principal:
    # Bearer-токен или HTTP Basic, что пришло
    if bearer is not None:
        return verify_access_token(bearer.credentials)
    return get_basic_principal(basic, users)


def require_card_owner(
    principal: Principal = Depends(get_current_principal),
    users: InMemoryUserStore = Depends(get_user_store),
    settings: Settings = Depends(get_settings),
) -> Principal:
    if not users.authorize(principal, settings.REQUIRED_ROLE):
        logger.warning("%s lacks role %s", principal.name, settings.REQUIRED_ROLE)
        raise AuthError("FORBIDDEN", "Access denied.", 403)
    return principal
