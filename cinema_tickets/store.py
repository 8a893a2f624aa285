from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Dict, List

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class Account:
    id: int
    balance: Decimal


@dataclass(slots=True)
class Auditorium:
    seats_available: int


class Store:
    """
    Состояние "внешних" сервисов оплаты и бронирования для демо и тестов.

    Сам сервис продажи билетов сюда ничего не пишет: он не хранит
    ни заказов, ни истории покупок.
    """

    def __init__(self, seats_available: int = 0) -> None:
        self.accounts: Dict[int, Account] = {}
        self.auditorium = Auditorium(seats_available=seats_available)

        self.logs: List[str] = []

    def log(self, message: str) -> None:
        self.logs.append(message)
        logger.info(message)

    def add_account(self, account_id: int, balance: Decimal) -> None:
        self.accounts[account_id] = Account(id=account_id, balance=balance)
