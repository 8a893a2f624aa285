from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from decimal import Decimal
from typing import List, Optional

from cinema_tickets.errors import PurchaseFailed
from cinema_tickets.models import TicketRequest
from cinema_tickets.pricing import PricingEngine
from cinema_tickets.services import PaymentGateway, SeatReservation

logger = logging.getLogger(__name__)


class Step(ABC):
    def __init__(self, account_id: int):
        self.account_id = account_id

    @abstractmethod
    def name(self) -> str: ...

    @abstractmethod
    def execute(self) -> None: ...

    def run(self) -> None:
        logger.info("[account=%s] STEP %s", self.account_id, self.name())
        self.execute()
        logger.info("[account=%s] STEP %s OK", self.account_id, self.name())


class MakePayment(Step):
    def __init__(self, account_id: int, amount: Decimal, service: PaymentGateway):
        super().__init__(account_id)
        self.amount = amount
        self.service = service

    def name(self) -> str:
        return "MakePayment"

    def execute(self) -> None:
        self.service.charge(self.account_id, self.amount)


class ReserveSeats(Step):
    def __init__(self, account_id: int, seat_count: int, service: SeatReservation):
        super().__init__(account_id)
        self.seat_count = seat_count
        self.service = service

    def name(self) -> str:
        return "ReserveSeats"

    def execute(self) -> None:
        self.service.reserve(self.account_id, self.seat_count)


class TicketService:
    """
    Точка входа: проверка → расчёт → оплата → бронирование мест.

    Компенсаций нет: если оплата прошла, а бронирование упало, деньги
    не возвращаются, покупка просто считается неуспешной.
    """

    def __init__(
        self,
        payment_service: PaymentGateway,
        reservation_service: SeatReservation,
        engine: Optional[PricingEngine] = None,
    ):
        self.payment_service = payment_service
        self.reservation_service = reservation_service
        self.engine = engine or PricingEngine()

    def purchase_tickets(self, account_id: int, *ticket_requests: TicketRequest) -> None:
        self.engine.validate_account_id(account_id)
        self.engine.validate_ticket_requests(ticket_requests)

        order = self.engine.calculate_totals(ticket_requests)
        self.engine.apply_business_rules(order.ticket_counts)
        logger.info(
            "[account=%s] order: amount=%s seats=%s",
            account_id,
            order.total_amount_due,
            order.total_seats_required,
        )

        steps: List[Step] = [
            MakePayment(account_id, order.total_amount_due, self.payment_service),
            ReserveSeats(account_id, order.total_seats_required, self.reservation_service),
        ]
        try:
            for step in steps:
                step.run()
        except Exception as e:
            logger.info("[account=%s] PURCHASE FAILED: %s", account_id, e)
            raise PurchaseFailed(f"Payment or seat reservation failed: {e}") from e

        logger.info("[account=%s] PURCHASE OK", account_id)
