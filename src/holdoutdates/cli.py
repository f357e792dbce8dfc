"""Command-line entry point: print the validation/holdout split of a date range."""

from __future__ import annotations

import logging
import sys
from datetime import date
from typing import Optional

import structlog
import typer

from holdoutdates.config import get_settings
from holdoutdates.dates import DateInterval
from holdoutdates.errors import DateSelectionError
from holdoutdates.partition import partition
from holdoutdates.periods import Day
from holdoutdates.selectors import NoneSelector, PeriodicSelector, RandomSelector, Selector

logger = structlog.get_logger(__name__)
app = typer.Typer()

_SELECTORS = ("none", "periodic", "random")


def configure_logging(level: str) -> None:
    """Route structlog output to stderr, filtered at *level*."""
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, level.upper(), logging.WARNING)
        ),
        logger_factory=structlog.PrintLoggerFactory(sys.stderr),
    )


def _parse_date(value: str, name: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError as exc:
        raise typer.BadParameter(f"{name} must be an ISO date (YYYY-MM-DD), got {value!r}") from exc


@app.command()
def main(
    start: str = typer.Argument(..., help="First date of the range (YYYY-MM-DD)"),
    end: str = typer.Argument(..., help="Last date of the range (YYYY-MM-DD)"),
    start_exclusive: bool = typer.Option(False, help="Exclude the start date"),
    end_exclusive: bool = typer.Option(False, help="Exclude the end date"),
    selector: str = typer.Option("none", help="Holdout strategy: none, periodic or random"),
    period_days: int = typer.Option(7, help="Periodic: repeat interval in days"),
    stride_days: int = typer.Option(1, help="Periodic: holdout window length in days"),
    offset_days: int = typer.Option(0, help="Periodic: offset from the start date in days"),
    holdout_blocks: int = typer.Option(1, help="Random: number of blocks to hold out"),
    block_size: Optional[int] = typer.Option(None, help="Random: dates per block"),
    seed: Optional[int] = typer.Option(None, help="Random: RNG seed"),
) -> None:
    """Split START..END into validation and holdout dates."""
    settings = get_settings()
    configure_logging(settings.log_level)

    interval = DateInterval(
        _parse_date(start, "start"),
        _parse_date(end, "end"),
        first_inclusive=not start_exclusive,
        last_inclusive=not end_exclusive,
    )

    kind = selector.lower()
    if kind not in _SELECTORS:
        raise typer.BadParameter(f"selector must be one of {', '.join(_SELECTORS)}, got {selector!r}")

    try:
        chosen: Selector
        if kind == "periodic":
            chosen = PeriodicSelector(Day(period_days), Day(stride_days), Day(offset_days))
        elif kind == "random":
            chosen = RandomSelector(
                holdout_blocks,
                block_size if block_size is not None else settings.default_block_size,
                seed if seed is not None else settings.default_seed,
            )
        else:
            chosen = NoneSelector()
        result = partition(interval, chosen)
    except DateSelectionError as exc:
        raise typer.BadParameter(str(exc)) from exc

    logger.info(
        "partition_complete",
        interval=str(interval),
        selector=kind,
        validation=len(result.validation),
        holdout=len(result.holdout),
    )
    for d in result.validation:
        typer.echo(f"validation\t{d.isoformat()}")
    for d in result.holdout:
        typer.echo(f"holdout\t{d.isoformat()}")


if __name__ == "__main__":
    app()
