import logging
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional, Sequence

from tabulate import tabulate

from cargo_tariff.models.cargo import Cargo
from cargo_tariff.models.exceptions import InvalidCargo
from cargo_tariff.settings import configure_logging
from cargo_tariff.tariff.engine import Leg
from cargo_tariff.utils.formatting import format_money

configure_logging()
logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LegQuote:
    index: int
    price: float
    accumulated: float
    crosses_border: bool
    border_name: Optional[str] = None


@dataclass
class RouteQuote:
    legs: List[LegQuote] = field(default_factory=list)
    total_price: float = 0
    accumulated: float = 0

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)


def quote_route(legs: Sequence[Leg], cargo: Cargo, accumulated: float = 0) -> RouteQuote:
    """Price ``cargo`` over ``legs`` in order.

    Each leg receives the accumulated value returned by the previous one, so
    duties on later border crossings are assessed on the value built up
    along the route.
    """
    if not isinstance(cargo, Cargo):
        raise InvalidCargo(f"Invalid cargo: {cargo!r}")

    quote = RouteQuote(accumulated=accumulated)
    for index, leg in enumerate(legs, start=1):
        trip = leg.get_trip_price(cargo, quote.accumulated)
        border_name = leg.border.name if leg.border is not None else None
        quote.legs.append(
            LegQuote(
                index=index,
                price=trip.price,
                accumulated=trip.accumulated,
                crosses_border=leg.crosses_border,
                border_name=border_name,
            )
        )
        quote.total_price += trip.price
        quote.accumulated = trip.accumulated
        logger.debug("Leg %d priced at %s (accumulated %s)", index, trip.price, trip.accumulated)

    logger.info("Route of %d leg(s) quoted at %s", len(quote.legs), format_money(quote.total_price))
    return quote


def format_route_quote(quote: RouteQuote, currency: str | None = None) -> str:
    """Render the quote as a psql-style table, one row per leg plus the total."""
    table = [
        [
            leg.index,
            (leg.border_name or "(unnamed)") if leg.crosses_border else "-",
            format_money(leg.price, currency),
            format_money(leg.accumulated, currency),
        ]
        for leg in quote.legs
    ]
    table.append(["Total", "", format_money(quote.total_price, currency), format_money(quote.accumulated, currency)])
    return tabulate(
        table,
        headers=["Leg", "Border", "Price", "Accumulated"],
        tablefmt="psql",
        disable_numparse=True,
    )


__all__ = ["LegQuote", "RouteQuote", "quote_route", "format_route_quote"]
