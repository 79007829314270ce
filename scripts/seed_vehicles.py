#!/usr/bin/env python3
"""
Seed the vehicles table from a catalog export.

The export is a JSON list of configurations with the upstream field
names (including its GRADE_LABLE / EGINE_LABEL spellings).

- Idempotent: clears the table before seeding
- Fails fast on a record without FULL_MODEL_CODE, MODEL_NAME or PRICE

Usage:
    python scripts/seed_vehicles.py [path/to/vehicles.json]
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from decimal import Decimal
from pathlib import Path
from typing import Any

# Add src to path so we can import our modules
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from sqlalchemy import delete

from car_credit.infra.db.models.vehicle import VehicleRow
from car_credit.infra.db.session import dispose_engine, get_session

logger = logging.getLogger("seed_vehicles")

DEFAULT_CATALOG_PATH = Path(__file__).parent.parent / "data" / "vehicles.json"


def to_row(record: dict[str, Any]) -> VehicleRow:
    """Map one export record to a VehicleRow; missing labels become empty strings."""
    try:
        code = str(record["FULL_MODEL_CODE"])
        model_name = str(record["MODEL_NAME"])
        price = Decimal(str(record["PRICE"]))
    except KeyError as exc:
        raise ValueError(f"catalog record is missing {exc.args[0]}: {record!r}") from exc

    return VehicleRow(
        full_model_code=code,
        model_name=model_name,
        body_label=str(record.get("BODY_LABEL") or ""),
        grade_label=str(record.get("GRADE_LABLE") or ""),
        year=int(record.get("YEAR") or 0),
        price=price,
        engine_label=str(record.get("EGINE_LABEL") or ""),
        transmission=str(record.get("TRANSMISSION") or ""),
        fuel_type=str(record.get("FUEL_TYPE") or ""),
        photo_link=str(record.get("PHOTO_LINK") or ""),
    )


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[1])
    parser.add_argument("path", nargs="?", type=Path, default=DEFAULT_CATALOG_PATH)
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")

    with args.path.open(encoding="utf-8") as fh:
        records = json.load(fh)

    rows = [to_row(record) for record in records]

    with get_session() as session:
        deleted = session.execute(delete(VehicleRow)).rowcount
        session.add_all(rows)

    dispose_engine()
    logger.info("Seeded %d vehicles (replaced %d) from %s", len(rows), deleted, args.path)


if __name__ == "__main__":
    main()
