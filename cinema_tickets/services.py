from __future__ import annotations

from decimal import Decimal
from typing import Protocol

from cinema_tickets.store import Store


class PaymentGateway(Protocol):
    def charge(self, account_id: int, amount: Decimal) -> None: ...


class SeatReservation(Protocol):
    def reserve(self, account_id: int, seat_count: int) -> None: ...


class TicketPaymentService:
    """In-memory payment gateway; stands in for the third-party one."""

    def __init__(self, store: Store):
        self.store = store

    def charge(self, account_id: int, amount: Decimal) -> None:
        if account_id <= 0:
            raise ValueError(f"Invalid account id: {account_id}")
        if amount < 0:
            raise ValueError(f"Invalid amount: {amount}")
        account = self.store.accounts.get(account_id)
        if not account:
            raise ValueError(f"Account {account_id} not found")
        if account.balance < amount:
            raise ValueError(f"Insufficient balance for account {account_id}: have={account.balance}, need={amount}")
        account.balance -= amount
        self.store.log(f"[account={account_id}] charged amount={amount} (balance={account.balance})")


class SeatReservationService:
    """In-memory seat booking; stands in for the third-party one."""

    def __init__(self, store: Store):
        self.store = store

    def reserve(self, account_id: int, seat_count: int) -> None:
        if account_id <= 0:
            raise ValueError(f"Invalid account id: {account_id}")
        if seat_count < 0:
            raise ValueError(f"Invalid seat count: {seat_count}")
        auditorium = self.store.auditorium
        if auditorium.seats_available < seat_count:
            raise ValueError(f"Not enough seats: have={auditorium.seats_available}, need={seat_count}")
        auditorium.seats_available -= seat_count
        self.store.log(f"[account={account_id}] reserved seats={seat_count} (available={auditorium.seats_available})")
