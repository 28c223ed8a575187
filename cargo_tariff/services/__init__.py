"""Convenience exports for service layer."""

from .quote import LegQuote, RouteQuote, format_route_quote, quote_route

__all__ = [
    "LegQuote",
    "RouteQuote",
    "quote_route",
    "format_route_quote",
]
