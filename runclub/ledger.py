"""
Run ledger: the newest-first history of logged runs kept under one store key.
"""
import json
import logging
import math
from dataclasses import asdict, dataclass
from datetime import date
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

from runclub.config import HISTORY_KEY, NO_PLEDGE, PLEDGE_RATE
from runclub.store import Store

logger = logging.getLogger(__name__)


class InvalidRunError(ValueError):
    """Raised when a run cannot be recorded from the given input."""


@dataclass(frozen=True)
class Run:
    date: str  # locale date, M/D/YYYY
    distance: float  # km
    pledge: str  # charity id or "none"
    wealth: str  # distance * rate, 2 decimals

    @property
    def pledged(self) -> bool:
        return self.pledge != NO_PLEDGE

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> "Run":
        return cls(
            date=str(raw.get("date", "")),
            distance=parse_distance(raw["distance"]),
            pledge=str(raw.get("pledge") or NO_PLEDGE),
            wealth=str(raw.get("wealth", "0.00")),
        )


def to_fixed(value: float, places: int) -> str:
    """Fixed-point text with halves rounded up, e.g. ``1.125`` -> ``1.13``."""
    step = Decimal(1).scaleb(-places)
    return str(Decimal(float(value)).quantize(step, rounding=ROUND_HALF_UP))


def format_amount(value: float) -> str:
    return to_fixed(value, 2)


def format_km(value: float) -> str:
    return f"{to_fixed(value, 1)} km"


def format_number(value: float) -> str:
    """Plain number text: ``5`` for whole values, ``5.5`` otherwise."""
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def locale_date(day: date) -> str:
    return f"{day.month}/{day.day}/{day.year}"


def wealth_for(distance: float) -> str:
    return format_amount(distance * PLEDGE_RATE)


def parse_distance(value: Any) -> float:
    if isinstance(value, str) and not value.strip():
        raise InvalidRunError("distance is required.")
    try:
        distance = float(value)
    except (TypeError, ValueError) as err:
        raise InvalidRunError("distance must be a number.") from err
    if not math.isfinite(distance) or distance < 0:
        raise InvalidRunError("distance must be a non-negative number of km.")
    return distance


def normalize_pledge(value: Any) -> str:
    pledge = str(value or "").strip()
    return pledge or NO_PLEDGE


class RunLedger:
    def __init__(self, store: Store) -> None:
        self.store = store

    def load(self) -> list[Run]:
        text = self.store.get(HISTORY_KEY)
        if text is None:
            return []
        try:
            raw = json.loads(text)
        except (ValueError, RecursionError):
            logger.warning("Stored run history is not valid JSON, treating it as empty.")
            return []
        if not isinstance(raw, list):
            logger.warning("Stored run history is not a list, treating it as empty.")
            return []

        runs: list[Run] = []
        for i, row in enumerate(raw):
            if not isinstance(row, dict):
                logger.warning("Skipping run history entry %d: not an object.", i)
                continue
            try:
                runs.append(Run.from_dict(row))
            except (KeyError, TypeError, ValueError):
                logger.warning("Skipping run history entry %d: missing or invalid distance.", i)
        return runs

    def append(self, distance: Any, pledge: Any = NO_PLEDGE, today: date | None = None) -> Run:
        km = parse_distance(distance)
        run = Run(
            date=locale_date(today or date.today()),
            distance=km,
            pledge=normalize_pledge(pledge),
            wealth=wealth_for(km),
        )
        runs = self.load()
        runs.insert(0, run)
        self.store.set(HISTORY_KEY, json.dumps([r.to_dict() for r in runs]))
        logger.info("Logged %s km run (pledge=%s).", format_number(km), run.pledge)
        return run
