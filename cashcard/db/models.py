from sqlalchemy import Column, BigInteger, Integer, Numeric, String

from cashcard.db.base import Base

# BIGINT / SQLite INTEGER
MAX_ID = 2**63 - 1


# ---------- Cash cards ----------

class CashCard(Base):
    __tablename__ = "cash_card"

    # BigInteger без variant на SQLite не получает AUTOINCREMENT
    id = Column(BigInteger().with_variant(Integer, "sqlite"), primary_key=True, autoincrement=True)
    amount = Column(Numeric(10, 2), nullable=False, default=0)
    owner = Column(String(256), nullable=False, index=True)

    def __repr__(self) -> str:
        return f"<CashCard {self.id} owner={self.owner}>"
