import logging
from decimal import Decimal

from sqlalchemy.orm import Session

from cashcard.db.base import Base
from cashcard.db.models import CashCard
from cashcard.db.session import engine

logger = logging.getLogger(__name__)

# (id, amount, owner)
DEMO_CASHCARDS = [
    (99, Decimal("123.45"), "sarah1"),
    (100, Decimal("1.00"), "sarah1"),
    (101, Decimal("150.00"), "sarah1"),
    (102, Decimal("200.00"), "kumar2"),
]


def init_db() -> None:
    Base.metadata.create_all(bind=engine)


def seed_demo_cashcards(db: Session) -> int:
    """Insert the demo cards into an empty table. Returns how many were added.

    Once the table holds any card the seed does nothing, so cards deleted by
    their owners are not brought back on the next startup.
    """
    if db.query(CashCard).first() is not None:
        return 0

    for card_id, amount, owner in DEMO_CASHCARDS:
        db.add(CashCard(id=card_id, amount=amount, owner=owner))
    db.commit()
    logger.info("Seeded %d demo cash cards", len(DEMO_CASHCARDS))
    return len(DEMO_CASHCARDS)
