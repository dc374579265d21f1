"""Extraction of integrands and integration variables from integral notation."""

from __future__ import annotations

import re
from dataclasses import dataclass

from .errors import ParseError
from .outcome import Err, Ok, Outcome

INTEGRAL_MARKER = "∫"
FACTOR_SEPARATOR = "*"

# Marker, integrand up to the first "d", then "d" plus a one-letter variable.
_INTEGRAL_PATTERN = re.compile(INTEGRAL_MARKER + r"\s*([^d]*)\s*d([a-z])", re.IGNORECASE)


@dataclass(frozen=True, slots=True)
class IntegralSpec:
    """An integrand and its variables, outermost first."""

    integrand: str
    variables: tuple[str, ...]

    @property
    def order(self) -> int:
        return len(self.variables)


def has_integral(text: str) -> bool:
    return INTEGRAL_MARKER in text


def split_factors(text: str) -> list[str]:
    """Split on every ``*``, ignoring parentheses and integrand boundaries."""

    return [part.strip() for part in text.split(FACTOR_SEPARATOR)]


def parse_integral(text: str) -> Outcome[IntegralSpec]:
    """Parse one integral expression, unrolling repeated markers into variables.

    Each pass takes the first match, records its variable and replaces the
    matched text by its bare integrand. Passing stops once a pass finds a
    single match, whose integrand becomes the final integrand.
    """

    variables: list[str] = []
    remaining = text
    while True:
        matches = list(_INTEGRAL_PATTERN.finditer(remaining))
        if not matches:
            return Err(ParseError("No valid integral found"))
        first = matches[0]
        integrand = first.group(1).strip()
        variables.append(first.group(2).lower())
        if len(matches) == 1:
            return Ok(IntegralSpec(integrand=integrand, variables=tuple(variables)))
        remaining = remaining.replace(first.group(0), integrand, 1)


__all__ = [
    "INTEGRAL_MARKER",
    "IntegralSpec",
    "has_integral",
    "split_factors",
    "parse_integral",
]
