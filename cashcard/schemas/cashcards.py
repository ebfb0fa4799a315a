from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class CashCardRequest(BaseModel):
    # id и owner из тела запроса игнорируются;
    # точность та же, что у колонки Numeric(10, 2), без молчаливого округления
    amount: Decimal = Field(ge=0, max_digits=10, decimal_places=2)


class CashCardRead(BaseModel):
    id: int
    amount: float

    model_config = ConfigDict(from_attributes=True)
