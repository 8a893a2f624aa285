from __future__ import annotations

from typing import Iterable, Mapping, Optional, Sequence

from cinema_tickets.config import PricingConfig
from cinema_tickets.errors import (
    AdultRequired,
    InfantsExceedAdults,
    InvalidAccountId,
    InvalidTicketRequests,
    MaxTicketsExceeded,
    UnknownTicketCategory,
)
from cinema_tickets.models import PurchaseOrder, TicketCategory, TicketRequest, empty_counts, pence_to_amount


class PricingEngine:
    """
    Проверка и расчёт покупки. Все методы являются чистыми функциями от аргументов
    и конфигурации; состояние между вызовами не хранится.
    """

    def __init__(self, config: Optional[PricingConfig] = None):
        self.config = config or PricingConfig()

    def validate_account_id(self, account_id: object) -> None:
        if isinstance(account_id, bool) or not isinstance(account_id, int) or account_id <= 0:
            raise InvalidAccountId("Account ID must be a positive integer")

    def validate_ticket_requests(self, requests: Optional[Sequence[object]]) -> None:
        if requests is not None and not isinstance(requests, (list, tuple)):
            raise InvalidTicketRequests("Ticket requests must be a list or tuple of TicketRequest instances")
        if not requests:
            raise InvalidTicketRequests("At least one ticket request is required")

        for request in requests:
            if not isinstance(request, TicketRequest):
                raise InvalidTicketRequests("All ticket requests must be TicketRequest instances")
            # конструктор уже это гарантирует, но объект мог быть собран в обход него
            if request.count <= 0:
                raise InvalidTicketRequests("Number of tickets must be greater than 0")

    def calculate_totals(self, requests: Iterable[TicketRequest]) -> PurchaseOrder:
        total_pence = 0
        total_seats = 0
        counts = empty_counts()

        for request in requests:
            category = request.category
            if not isinstance(category, TicketCategory):
                raise UnknownTicketCategory(f"Unknown ticket type: {category}")

            counts[category] += request.count
            total_pence += self.config.prices_pence[category] * request.count
            if category.occupies_seat:
                total_seats += request.count

        amount = pence_to_amount(total_pence)
        return PurchaseOrder(total_amount_due=amount, total_seats_required=total_seats, ticket_counts=counts)

    def apply_business_rules(self, ticket_counts: Mapping[TicketCategory, int]) -> None:
        adults = ticket_counts.get(TicketCategory.ADULT, 0)
        children = ticket_counts.get(TicketCategory.CHILD, 0)
        infants = ticket_counts.get(TicketCategory.INFANT, 0)

        limit = self.config.max_tickets_per_purchase
        if adults + children + infants > limit:
            raise MaxTicketsExceeded(f"Cannot purchase more than {limit} tickets at once")

        if (children > 0 or infants > 0) and adults <= 0:
            raise AdultRequired("Child and Infant tickets cannot be purchased without Adult tickets")

        if infants > adults:
            raise InfantsExceedAdults("Cannot have more Infant tickets than Adult tickets (infants sit on adult laps)")
