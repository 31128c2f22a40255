"""Trade ingestion from journal exports.

Reads CSV or JSON exports into validated :class:`Trade` models.  This is
the only place trade data is validated: a record without a usable date
is rejected here with :class:`MalformedTradeError`, so the analytics
engine never has to guess at a bucket key.

Usage::

    trades = load_trades("exports/trades.csv")
    report = AnalyticsEngine().report(TradeQuery().apply(trades))
"""

from __future__ import annotations

import csv
import json
import logging
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from ..core.errors import MalformedTradeError, TradeLoadError
from ..core.models import Trade

logger = logging.getLogger(__name__)

SUPPORTED_SUFFIXES = (".json", ".csv")


def parse_trades(rows: Iterable[Mapping[str, Any]]) -> list[Trade]:
    """Validate raw records into trades, preserving order.

    Raises
    ------
    MalformedTradeError
        On the first record that fails validation.  ``index`` is the
        0-based position of the record.
    """
    trades = []
    for index, row in enumerate(rows):
        if not isinstance(row, Mapping):
            raise MalformedTradeError(index, f"expected an object, got {type(row).__name__}")
        try:
            trades.append(Trade.model_validate(dict(row)))
        except ValidationError as exc:
            errors = "; ".join(
                f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}"
                for err in exc.errors()
            )
            raise MalformedTradeError(index, errors) from exc
    return trades


def _read_json(path: Path) -> list[Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise TradeLoadError(f"Invalid JSON in {path}: {exc}") from exc

    if isinstance(data, dict):
        data = data.get("trades")
    if not isinstance(data, list):
        raise TradeLoadError(
            f"{path}: expected a list of trades or an object with a 'trades' list"
        )
    return data


def _read_csv(path: Path) -> list[dict[str, Any]]:
    with open(path, newline="", encoding="utf-8") as f:
        reader = csv.DictReader(f)
        # Empty cells mean "not recorded"
        return [
            {k: (v if v != "" else None) for k, v in row.items() if k}
            for row in reader
        ]


def load_trades(path: str | Path) -> list[Trade]:
    """Load trades from a ``.json`` or ``.csv`` export.

    JSON may be a list of trade objects or ``{"trades": [...]}``.  CSV
    needs a header row using the journal's field names.  Records are
    returned in file order; sorting is the query's job.

    Raises
    ------
    TradeLoadError
        Missing file, unreadable content or unsupported suffix.
    MalformedTradeError
        A record failed validation.
    """
    path = Path(path)
    if not path.is_file():
        raise TradeLoadError(f"Trade file not found: {path}")

    suffix = path.suffix.lower()
    if suffix not in SUPPORTED_SUFFIXES:
        raise TradeLoadError(
            f"Unsupported trade file format {suffix!r} "
            f"(expected one of {', '.join(SUPPORTED_SUFFIXES)})"
        )

    try:
        rows = _read_json(path) if suffix == ".json" else _read_csv(path)
    except OSError as exc:
        raise TradeLoadError(f"Cannot read {path}: {exc}") from exc

    trades = parse_trades(rows)
    logger.info("Loaded %d trades from %s", len(trades), path)
    return trades
