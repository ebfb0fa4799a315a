from fastapi import APIRouter, Depends

from cashcard.api.deps import get_basic_principal
from cashcard.core.config import get_settings, Settings
from cashcard.core.security import Principal, make_access_token
from cashcard.schemas.auth import TokenResponse

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/token", response_model=TokenResponse)
def issue_token(
    principal: Principal = Depends(get_basic_principal),
    settings: Settings = Depends(get_settings),
):
    return TokenResponse(
        access_token=make_access_token(principal),
        expires_in=settings.ACCESS_TOKEN_TTL_SEC,
    )
