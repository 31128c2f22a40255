"""CLI entry point for the journal analytics engine."""

from __future__ import annotations

import json
from datetime import datetime

import click
from pydantic import ValidationError

from .core.enums import Direction, Session, TradeType
from .core.errors import JournalAnalyticsError


def _parse_date(ctx: click.Context, param: click.Parameter, value: str | None) -> datetime | None:
    if value is None:
        return None
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError as exc:
        raise click.BadParameter(f"expected an ISO date (YYYY-MM-DD), got {value!r}") from exc
    # A bare end date covers the whole day
    if param.name == "date_to" and "T" not in value and " " not in value.strip():
        parsed = parsed.replace(hour=23, minute=59, second=59, microsecond=999999)
    return parsed


@click.group()
def main() -> None:
    """Trading Journal Analytics."""


@main.command()
@click.argument("trades_file", type=click.Path(dir_okay=False))
@click.option("--config", default=None, help="Config file path (TOML)")
@click.option("--date-from", default=None, callback=_parse_date, help="Start date (YYYY-MM-DD)")
@click.option("--date-to", default=None, callback=_parse_date, help="End date (YYYY-MM-DD)")
@click.option("--instrument", default=None, help="Only this instrument / pair")
@click.option("--strategy", default=None, help="Only this strategy")
@click.option("--session", default=None, help=f"Only this session ({', '.join(s.value for s in Session)})")
@click.option("--direction", default=None, help=f"Only this direction ({', '.join(d.value for d in Direction)})")
@click.option(
    "--trade-type",
    type=click.Choice([t.value for t in TradeType]),
    default=TradeType.ALL.value,
    help="Real trades, backtests, or both",
)
@click.option("--section", default=None, help="Print a single report section")
@click.option("--indent", default=2, type=int, help="JSON indentation")
def report(
    trades_file: str,
    config: str | None,
    date_from: datetime | None,
    date_to: datetime | None,
    instrument: str | None,
    strategy: str | None,
    session: str | None,
    direction: str | None,
    trade_type: str,
    section: str | None,
    indent: int,
) -> None:
    """Build the analytics report for a journal export (JSON or CSV)."""
    from .analytics import REPORT_SECTIONS, AnalyticsEngine, TradeQuery
    from .core.config import load_settings
    from .observability import get_logger, new_request_id, setup_logging
    from .storage import load_trades

    if section is not None and section not in REPORT_SECTIONS:
        raise click.BadParameter(
            f"unknown section {section!r}; see 'journal-analytics sections'",
            param_hint="--section",
        )

    try:
        settings = load_settings(config_path=config)
        setup_logging(
            level=settings.observability.log_level,
            format=settings.observability.log_format,
        )
        new_request_id()
        log = get_logger(__name__)

        query = TradeQuery(
            date_from=date_from,
            date_to=date_to,
            instrument=instrument,
            strategy=strategy,
            session=session,
            direction=direction,
            trade_type=TradeType(trade_type),
        )
        trades = query.apply(load_trades(trades_file))
        log.info("trades_selected", count=len(trades), **query.describe())

        result = AnalyticsEngine(settings.analytics).report(trades)
    except (JournalAnalyticsError, ValidationError) as exc:
        raise click.ClickException(str(exc)) from exc

    output = result[section] if section else result
    click.echo(json.dumps(output, indent=indent or None, default=str))


@main.command()
def sections() -> None:
    """List the report section names."""
    from .analytics import REPORT_SECTIONS

    for name in REPORT_SECTIONS:
        click.echo(name)


if __name__ == "__main__":
    main()
