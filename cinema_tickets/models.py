from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Dict, Union

from cinema_tickets.errors import InvalidTicketRequest, UnknownTicketCategory


class TicketCategory(Enum):
    ADULT = "ADULT"
    CHILD = "CHILD"
    INFANT = "INFANT"

    @classmethod
    def parse(cls, token: Union[str, TicketCategory]) -> TicketCategory:
        if isinstance(token, cls):
            return token
        if isinstance(token, str):
            try:
                return cls(token.strip().upper())
            except ValueError:
                pass
        raise UnknownTicketCategory(f"Unknown ticket type: {token}")

    @property
    def occupies_seat(self) -> bool:
        # младенцы сидят на коленях у взрослых
        return self is not TicketCategory.INFANT


TicketCounts = Dict[TicketCategory, int]


def empty_counts() -> TicketCounts:
    return {category: 0 for category in TicketCategory}


def pence_to_amount(pence: int) -> Decimal:
    # строка, а не деление: деление в Decimal ограничено 28 знаками
    return Decimal(f"{pence // 100}.{pence % 100:02d}")


@dataclass(frozen=True, slots=True)
class TicketRequest:
    """
    "N билетов категории T", одна строка покупки.

    Проверки выполняются при создании: невалидный экземпляр получить нельзя.
    """

    category: TicketCategory
    count: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "category", TicketCategory.parse(self.category))
        if isinstance(self.count, bool) or not isinstance(self.count, int):
            raise InvalidTicketRequest(f"Number of tickets must be an integer, got {self.count!r}")
        if self.count <= 0:
            raise InvalidTicketRequest("Number of tickets must be greater than 0")


@dataclass(frozen=True, slots=True)
class PurchaseOrder:
    total_amount_due: Decimal
    total_seats_required: int
    ticket_counts: TicketCounts
