"""Tests for ticket value types."""
import dataclasses

import pytest

from cinema_tickets.errors import ErrorCode, InvalidPurchase, InvalidTicketRequest, UnknownTicketCategory
from cinema_tickets.models import TicketCategory, TicketRequest


def test_request_from_enum():
    req = TicketRequest(TicketCategory.ADULT, 2)
    assert req.category is TicketCategory.ADULT
    assert req.count == 2


def test_request_from_token_any_case():
    assert TicketRequest("child", 1).category is TicketCategory.CHILD
    assert TicketRequest("INFANT", 1).category is TicketCategory.INFANT


def test_request_is_read_only():
    req = TicketRequest(TicketCategory.ADULT, 1)
    with pytest.raises(dataclasses.FrozenInstanceError):
        req.count = 5


@pytest.mark.parametrize("count", [0, -1, 1.5, "2", None, True])
def test_request_rejects_bad_count(count):
    with pytest.raises(InvalidTicketRequest) as exc:
        TicketRequest(TicketCategory.ADULT, count)
    assert exc.value.code is ErrorCode.INVALID_TICKET_REQUEST


def test_request_rejects_unknown_category():
    with pytest.raises(InvalidTicketRequest) as exc:
        TicketRequest("SENIOR", 1)
    assert isinstance(exc.value, UnknownTicketCategory)
    assert str(exc.value) == "Unknown ticket type: SENIOR"


def test_construction_errors_are_invalid_purchase():
    """Callers that only catch InvalidPurchase still see bad requests."""
    with pytest.raises(InvalidPurchase):
        TicketRequest(TicketCategory.ADULT, 0)


def test_only_infant_is_seatless():
    assert TicketCategory.ADULT.occupies_seat
    assert TicketCategory.CHILD.occupies_seat
    assert not TicketCategory.INFANT.occupies_seat


def test_parse_rejects_non_string():
    with pytest.raises(UnknownTicketCategory):
        TicketCategory.parse(3)
