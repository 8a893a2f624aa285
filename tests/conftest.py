"""Pytest fixtures for cinema ticket purchases."""

from decimal import Decimal

import pytest

from cinema_tickets.pricing import PricingEngine
from cinema_tickets.store import Store
from cinema_tickets.ticket_service import TicketService


class RecordingPayment:
    def __init__(self, error: Exception | None = None):
        self.calls: list[tuple[int, Decimal]] = []
        self.error = error

    def charge(self, account_id: int, amount: Decimal) -> None:
        self.calls.append((account_id, amount))
        if self.error:
            raise self.error


class RecordingReservation:
    def __init__(self, error: Exception | None = None):
        self.calls: list[tuple[int, int]] = []
        self.error = error

    def reserve(self, account_id: int, seat_count: int) -> None:
        self.calls.append((account_id, seat_count))
        if self.error:
            raise self.error


@pytest.fixture
def store() -> Store:
    store = Store(seats_available=30)

    store.add_account(1, Decimal("1000.00"))
    store.add_account(2, Decimal("20.00"))  # Not enough for one adult

    return store


@pytest.fixture
def engine() -> PricingEngine:
    return PricingEngine()


@pytest.fixture
def payment() -> RecordingPayment:
    return RecordingPayment()


@pytest.fixture
def reservation() -> RecordingReservation:
    return RecordingReservation()


@pytest.fixture
def service(payment, reservation, engine) -> TicketService:
    return TicketService(payment, reservation, engine)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    for name in ("ADULT_PRICE_PENCE", "CHILD_PRICE_PENCE", "MAX_TICKETS", "LOG_LEVEL"):
        monkeypatch.delenv(f"CINEMA_{name}", raising=False)
    # a stray .env in the checkout must not leak into Settings()
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def make_payment():
    return RecordingPayment


@pytest.fixture
def make_reservation():
    return RecordingReservation
