from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Iterator


class BankProduct(str, Enum):
    OSCHADBANK = "oschadbank"
    AGRICOLE = "agricole"
    PRIVATBANK = "privatbank"
    PRIVATBANK_24 = "privatbank24"
    PRIVATBANK_36 = "privatbank36"


@dataclass(frozen=True, slots=True)
class Offer:
    product: BankProduct
    bank_name: str
    monthly_payment: Decimal
    upfront_cost: Decimal
    rate: Decimal
    visible: bool
    # False when the rate resolved to 0 for a positive principal: there is
    # no rate tier for these parameters, this is not a free loan.
    computable: bool = True


@dataclass(frozen=True, slots=True)
class OfferSet:
    """Exactly one offer per bank product, in display order."""

    offers: tuple[Offer, ...]

    def __getitem__(self, product: BankProduct) -> Offer:
        for offer in self.offers:
            if offer.product is product:
                return offer
        raise KeyError(product)

    def __iter__(self) -> Iterator[Offer]:
        return iter(self.offers)

    def __len__(self) -> int:
        return len(self.offers)

    def visible(self) -> list[Offer]:
        return [offer for offer in self.offers if offer.visible and offer.computable]
