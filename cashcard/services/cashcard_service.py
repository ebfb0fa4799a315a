import logging
from typing import List, Optional

from cashcard.core.errors import PrincipalMissingError
from cashcard.db import models
from cashcard.db.repository import CashCardRepository
from cashcard.schemas.cashcards import CashCardRequest
from cashcard.schemas.paging import PageRequest

logger = logging.getLogger(__name__)


def _require_owner(owner: Optional[str]) -> str:
    # Аутентификация происходит до хендлера, пустой owner - ошибка wiring-а
    if not owner:
        raise PrincipalMissingError()
    return owner


def find_cashcard(
    repo: CashCardRepository, card_id: int, owner: str
) -> Optional[models.CashCard]:
    """Return the card only if ``owner`` owns it.

    A card that exists but belongs to someone else is reported the same way
    as a card that does not exist.
    """
    return repo.find_by_id_and_owner(card_id, _require_owner(owner))


def create_cashcard(
    repo: CashCardRepository, req: CashCardRequest, owner: str
) -> models.CashCard:
    card = models.CashCard(id=None, amount=req.amount, owner=_require_owner(owner))
    saved = repo.save(card)
    logger.info("Created cash card %s for %s", saved.id, owner)
    return saved


def list_cashcards(
    repo: CashCardRepository, page_request: PageRequest, owner: str
) -> List[models.CashCard]:
    return repo.find_by_owner(_require_owner(owner), page_request)


def update_cashcard(
    repo: CashCardRepository, card_id: int, req: CashCardRequest, owner: str
) -> bool:
    existing = find_cashcard(repo, card_id, owner)
    if existing is None:
        return False

    # полная замена записи, id и владелец остаются прежними
    repo.save(models.CashCard(id=existing.id, amount=req.amount, owner=owner))
    logger.info("Updated cash card %s for %s", card_id, owner)
    return True


def delete_cashcard(repo: CashCardRepository, card_id: int, owner: str) -> bool:
    if not repo.exists_by_id_and_owner(card_id, _require_owner(owner)):
        return False

    repo.delete_by_id(card_id)
    logger.info("Deleted cash card %s for %s", card_id, owner)
    return True
