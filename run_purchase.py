from __future__ import annotations

import argparse
import logging
import sys
from decimal import Decimal
from typing import List, Optional

from cinema_tickets.config import Settings
from cinema_tickets.errors import InvalidPurchase
from cinema_tickets.models import TicketCategory, TicketRequest
from cinema_tickets.pricing import PricingEngine
from cinema_tickets.services import SeatReservationService, TicketPaymentService
from cinema_tickets.store import Store
from cinema_tickets.ticket_service import TicketService


def build_requests(adult: int, child: int, infant: int) -> List[TicketRequest]:
    counts = [(TicketCategory.ADULT, adult), (TicketCategory.CHILD, child), (TicketCategory.INFANT, infant)]
    return [TicketRequest(category, count) for category, count in counts if count]


def main(argv: Optional[List[str]] = None) -> int:
    settings = Settings()
    logging.basicConfig(level=settings.LOG_LEVEL, format="%(message)s")

    p = argparse.ArgumentParser(description="Run one cinema ticket purchase and print the outcome.")
    p.add_argument("--account-id", type=int, default=1)
    p.add_argument("--adult", type=int, default=0)
    p.add_argument("--child", type=int, default=0)
    p.add_argument("--infant", type=int, default=0)
    p.add_argument("--balance", type=Decimal, default=Decimal("1000.00"), help="Starting balance of the account")
    p.add_argument("--seats", type=int, default=100, help="Free seats in the auditorium")
    args = p.parse_args(argv)

    store = Store(seats_available=args.seats)
    store.add_account(args.account_id, args.balance)

    engine = PricingEngine(settings.pricing_config())
    service = TicketService(TicketPaymentService(store), SeatReservationService(store), engine)

    try:
        requests = build_requests(args.adult, args.child, args.infant)
        service.purchase_tickets(args.account_id, *requests)
    except InvalidPurchase as e:
        print("\n=== RESULT ===")
        print("success: False")
        print(f"error: [{e.code.value}] {e.message}")
        return 1

    # итоги берём из того, что реально списали и забронировали сервисы
    print("\n=== RESULT ===")
    print("success: True")
    print("amount:", args.balance - store.accounts[args.account_id].balance)
    print("seats:", args.seats - store.auditorium.seats_available)
    print("accounts:", store.accounts)
    print("auditorium:", store.auditorium)
    return 0


if __name__ == "__main__":
    sys.exit(main())
