"""Parsing of the partner banks' rate payload.

The supplier sends, per bank, raw matrices whose cells may be numbers,
numeric strings, empty strings or nulls. The last row of the
``individual`` and ``legal`` matrices is the commission row, not a rate
tier; it is split off and discarded. Preferential matrices are ignored.
Any bank or matrix missing from the payload becomes empty, which the
offer engine reads as "no rate".
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Any, Mapping, Sequence

from car_credit.domain.rates import EMPTY_MATRIX, Bank, BankRateTable, BankRates, RateMatrix


def to_decimal(value: Any) -> Decimal:
    """Convert a raw cell to Decimal; empty, non-numeric or non-finite cells become 0."""
    if isinstance(value, bool) or not isinstance(value, (int, float, str)):
        return Decimal("0")

    try:
        number = Decimal(str(value).strip())
    except InvalidOperation:
        return Decimal("0")

    return number if number.is_finite() else Decimal("0")


def normalize_matrix(rows: Sequence[Sequence[Any]] | None) -> RateMatrix:
    if not rows:
        return EMPTY_MATRIX
    return tuple(tuple(to_decimal(cell) for cell in row) for row in rows)


def split_rates_and_commission(
    rows: Sequence[Sequence[Any]] | None,
) -> tuple[RateMatrix, tuple[Decimal, ...]]:
    """Separate the trailing commission row from the rate tiers."""
    normalized = normalize_matrix(rows)
    if not normalized:
        return EMPTY_MATRIX, ()
    return normalized[:-1], normalized[-1]


def parse_bank_table(raw: Mapping[str, Any]) -> BankRateTable:
    individual, _ = split_rates_and_commission(raw.get("individual"))
    legal, _ = split_rates_and_commission(raw.get("legal"))

    return BankRateTable(individual=individual, legal=legal)


def parse_bank_rates(payload: Any) -> BankRates:
    """
    Build BankRates from the decoded supplier payload.

    Raises:
        ValueError: If the payload or a bank entry is not a JSON object,
            or a matrix is not a list of rows
    """
    if not isinstance(payload, Mapping):
        raise ValueError("bank rate payload must be an object")

    tables: dict[str, BankRateTable] = {}
    for bank in Bank:
        raw = payload.get(bank.value) or {}
        if not isinstance(raw, Mapping):
            raise ValueError(f"rates of {bank.value} must be an object")
        try:
            tables[bank.value] = parse_bank_table(raw)
        except TypeError as exc:
            raise ValueError(f"rates of {bank.value} are malformed: {exc}") from exc

    return BankRates(**tables)
