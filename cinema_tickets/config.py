from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from types import MappingProxyType
from typing import Literal, Mapping

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from cinema_tickets.models import TicketCategory, pence_to_amount

DEFAULT_PRICES_PENCE: Mapping[TicketCategory, int] = MappingProxyType(
    {
        TicketCategory.INFANT: 0,
        TicketCategory.CHILD: 1500,
        TicketCategory.ADULT: 2500,
    }
)
DEFAULT_MAX_TICKETS = 25


@dataclass(frozen=True, slots=True)
class PricingConfig:
    """Unit prices in pence plus the per-purchase ticket limit. Immutable once built."""

    prices_pence: Mapping[TicketCategory, int] = field(default_factory=lambda: dict(DEFAULT_PRICES_PENCE))
    max_tickets_per_purchase: int = DEFAULT_MAX_TICKETS

    def __post_init__(self) -> None:
        prices = dict(self.prices_pence)
        missing = [c.value for c in TicketCategory if c not in prices]
        if missing:
            raise ValueError(f"Missing prices for: {', '.join(missing)}")
        for category, pence in prices.items():
            if isinstance(pence, bool) or not isinstance(pence, int) or pence < 0:
                raise ValueError(f"Price for {category.value} must be a non-negative integer of pence, got {pence!r}")
        if prices[TicketCategory.INFANT] != 0:
            raise ValueError("Infant tickets are always free")
        limit = self.max_tickets_per_purchase
        if isinstance(limit, bool) or not isinstance(limit, int) or limit <= 0:
            raise ValueError(f"max_tickets_per_purchase must be a positive integer, got {limit!r}")
        object.__setattr__(self, "prices_pence", MappingProxyType(prices))

    def unit_price(self, category: TicketCategory) -> Decimal:
        return pence_to_amount(self.prices_pence[category])


class Settings(BaseSettings):
    """Environment overrides, e.g. CINEMA_ADULT_PRICE_PENCE=2700."""

    model_config = SettingsConfigDict(
        env_prefix="CINEMA_",
        env_file=".env",
        env_ignore_empty=True,
        extra="ignore",
    )

    ADULT_PRICE_PENCE: int = DEFAULT_PRICES_PENCE[TicketCategory.ADULT]
    CHILD_PRICE_PENCE: int = DEFAULT_PRICES_PENCE[TicketCategory.CHILD]
    MAX_TICKETS: int = DEFAULT_MAX_TICKETS
    LOG_LEVEL: Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"] = "INFO"

    @field_validator("ADULT_PRICE_PENCE", "CHILD_PRICE_PENCE")
    @classmethod
    def non_negative_price(cls, v: int) -> int:
        if v < 0:
            raise ValueError("price must be >= 0")
        return v

    @field_validator("MAX_TICKETS")
    @classmethod
    def positive_limit(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("max tickets must be > 0")
        return v

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def upper_level(cls, v: object) -> object:
        return v.upper() if isinstance(v, str) else v

    def pricing_config(self) -> PricingConfig:
        return PricingConfig(
            prices_pence={
                TicketCategory.INFANT: 0,
                TicketCategory.CHILD: self.CHILD_PRICE_PENCE,
                TicketCategory.ADULT: self.ADULT_PRICE_PENCE,
            },
            max_tickets_per_purchase=self.MAX_TICKETS,
        )
