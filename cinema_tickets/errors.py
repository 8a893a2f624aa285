from __future__ import annotations

from enum import Enum
from typing import Optional


class ErrorCode(Enum):
    INVALID_PURCHASE = "INVALID_PURCHASE"
    INVALID_ACCOUNT_ID = "INVALID_ACCOUNT_ID"
    INVALID_TICKET_REQUESTS = "INVALID_TICKET_REQUESTS"
    INVALID_TICKET_REQUEST = "INVALID_TICKET_REQUEST"
    UNKNOWN_TICKET_CATEGORY = "UNKNOWN_TICKET_CATEGORY"
    MAX_TICKETS_EXCEEDED = "MAX_TICKETS_EXCEEDED"
    ADULT_REQUIRED = "ADULT_REQUIRED"
    INFANTS_EXCEED_ADULTS = "INFANTS_EXCEED_ADULTS"
    PURCHASE_FAILED = "PURCHASE_FAILED"


class InvalidPurchase(Exception):
    """
    Единственный тип ошибки, который видит вызывающий код.

    Подклассы нужны только для того, чтобы тесты и вызывающие могли
    различать причину по `code`, не разбирая текст сообщения.
    """

    code: ErrorCode = ErrorCode.INVALID_PURCHASE

    def __init__(self, message: str, code: Optional[ErrorCode] = None):
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code


class InvalidAccountId(InvalidPurchase):
    code = ErrorCode.INVALID_ACCOUNT_ID


class InvalidTicketRequests(InvalidPurchase):
    code = ErrorCode.INVALID_TICKET_REQUESTS


class InvalidTicketRequest(InvalidPurchase):
    code = ErrorCode.INVALID_TICKET_REQUEST


class UnknownTicketCategory(InvalidTicketRequest):
    code = ErrorCode.UNKNOWN_TICKET_CATEGORY


class MaxTicketsExceeded(InvalidPurchase):
    code = ErrorCode.MAX_TICKETS_EXCEEDED


class AdultRequired(InvalidPurchase):
    code = ErrorCode.ADULT_REQUIRED


class InfantsExceedAdults(InvalidPurchase):
    code = ErrorCode.INFANTS_EXCEED_ADULTS


class PurchaseFailed(InvalidPurchase):
    """Payment or seat reservation raised; the original error is the __cause__."""

    code = ErrorCode.PURCHASE_FAILED
