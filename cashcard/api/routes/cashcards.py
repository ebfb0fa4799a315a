from typing import List, Optional

from fastapi import APIRouter, Depends, Path, Query, Request, Response, status

from cashcard.api.deps import get_repository, require_card_owner
from cashcard.core.config import get_settings, Settings
from cashcard.core.security import Principal
from cashcard.db.models import MAX_ID
from cashcard.db.repository import CashCardRepository
from cashcard.schemas.cashcards import CashCardRead, CashCardRequest
from cashcard.schemas.paging import resolve_page_request
from cashcard.services import cashcard_service

router = APIRouter(prefix="/cashcards", tags=["cashcards"])


@router.get("/{requested_id}", response_model=CashCardRead, name="get_cashcard")
def get_cashcard(
    requested_id: int = Path(ge=-MAX_ID - 1, le=MAX_ID),
    repo: CashCardRepository = Depends(get_repository),
    principal: Principal = Depends(require_card_owner),
):
    card = cashcard_service.find_cashcard(repo, requested_id, principal.name)
    if card is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return card


@router.post("", status_code=status.HTTP_201_CREATED)
def create_cashcard(
    req: CashCardRequest,
    request: Request,
    repo: CashCardRepository = Depends(get_repository),
    principal: Principal = Depends(require_card_owner),
):
    saved = cashcard_service.create_cashcard(repo, req, principal.name)
    location = request.url_for("get_cashcard", requested_id=str(saved.id))
    return Response(
        status_code=status.HTTP_201_CREATED,
        headers={"Location": str(location)},
    )


@router.get("", response_model=List[CashCardRead])
def list_cashcards(
    page: Optional[int] = Query(default=None),
    size: Optional[int] = Query(default=None),
    sort: Optional[List[str]] = Query(default=None),
    repo: CashCardRepository = Depends(get_repository),
    principal: Principal = Depends(require_card_owner),
    settings: Settings = Depends(get_settings),
):
    page_request = resolve_page_request(page, size, sort, settings)
    return cashcard_service.list_cashcards(repo, page_request, principal.name)


@router.put("/{requested_id}", status_code=status.HTTP_204_NO_CONTENT)
def put_cashcard(
    req: CashCardRequest,
    requested_id: int = Path(ge=-MAX_ID - 1, le=MAX_ID),
    repo: CashCardRepository = Depends(get_repository),
    principal: Principal = Depends(require_card_owner),
):
    if not cashcard_service.update_cashcard(repo, requested_id, req, principal.name):
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{requested_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_cashcard(
    requested_id: int = Path(ge=-MAX_ID - 1, le=MAX_ID),
    repo: CashCardRepository = Depends(get_repository),
    principal: Principal = Depends(require_card_owner),
):
    if not cashcard_service.delete_cashcard(repo, requested_id, principal.name):
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
