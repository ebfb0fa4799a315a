from typing import List, Optional

from sqlalchemy.orm import Session

from cashcard.db import models
from cashcard.schemas.paging import Direction, PageRequest

SORT_COLUMNS = {
    "id": models.CashCard.id,
    "amount": models.CashCard.amount,
}


class CashCardRepository:
    """Owner-aware access to the ``cash_card`` table.

    Every read goes through an owner filter in the query itself; only
    ``delete_by_id`` takes a bare id, and callers check ownership first.
    """

    def __init__(self, db: Session):
        self.db = db

    def find_by_id_and_owner(self, card_id: int, owner: str) -> Optional[models.CashCard]:
        return (
            self.db.query(models.CashCard)
            .filter(models.CashCard.id == card_id, models.CashCard.owner == owner)
            .first()
        )

    def exists_by_id_and_owner(self, card_id: int, owner: str) -> bool:
        q = self.db.query(models.CashCard).filter(
            models.CashCard.id == card_id, models.CashCard.owner == owner
        )
        return self.db.query(q.exists()).scalar()

    def find_by_owner(self, owner: str, page_request: PageRequest) -> List[models.CashCard]:
        order_by = []
        for order in page_request.sort:
            column = SORT_COLUMNS[order.property]
            order_by.append(column.desc() if order.direction == Direction.DESC else column.asc())
        if not any(o.property == "id" for o in page_request.sort):
            # стабильный порядок при равных суммах
            order_by.append(models.CashCard.id.asc())

        return (
            self.db.query(models.CashCard)
            .filter(models.CashCard.owner == owner)
            .order_by(*order_by)
            .offset(page_request.offset)
            .limit(page_request.size)
            .all()
        )

    def save(self, card: models.CashCard) -> models.CashCard:
        try:
            if card.id is None:
                self.db.add(card)
            else:
                card = self.db.merge(card)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        self.db.refresh(card)
        return card

    def delete_by_id(self, card_id: int) -> None:
        try:
            self.db.query(models.CashCard).filter(models.CashCard.id == card_id).delete(
                synchronize_session=False
            )
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
