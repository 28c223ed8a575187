from __future__ import annotations

from typing import Iterable, List

from cargo_tariff.models.exceptions import InvalidRule
from .rules import Rule


class Duty:
    """Named chain of rules evaluated in insertion order."""

    def __init__(self, code: str, rules: Iterable[Rule] = ()):
        self.code = code
        self._rules: List[Rule] = []
        for rule in rules:
            self.add_rule(rule)

    @property
    def rules(self) -> tuple[Rule, ...]:
        return tuple(self._rules)

    def add_rule(self, rule: Rule) -> None:
        if not isinstance(rule, Rule):
            raise InvalidRule(f"Invalid rule for duty '{self.code}': {rule!r}")
        self._rules.append(rule)

    def calculate(self, value: float) -> float:
        """Fold ``value`` through every rule, each one receiving the previous result.

        With ``[Rule('*', 2), Rule('+', 5)]`` a base of 10 becomes 25. An empty
        chain returns ``value`` unchanged.
        """
        result = value
        for rule in self._rules:
            result = rule.calculate(result)
        return result

    def __repr__(self) -> str:
        return f"Duty({self.code!r}, rules={self._rules!r})"


__all__ = ["Duty"]
