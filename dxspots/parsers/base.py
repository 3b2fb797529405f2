# dxspots/parsers/base.py
"""
Pattern registry for cluster lines.

Each rule binds a spot category and a server dialect to a regular expression
with named groups, plus an extractor that turns the captures into a spot
model. Rules register themselves with the @register decorator when their
module is imported; ``dxspots.parsers`` imports them in precedence order and
then seals the registry, after which it is a read-only tuple.

To add a rule:

    from ..models import Category, Dialect, WX
    from .base import register

    @register(Category.WX, Dialect.AR_CLUSTER, r"WX de (?P<originator>\\S+) ...")
    def wx_arcluster(fields, dialect):
        return WX(dialect=dialect, originator=callsign(fields, "originator"))

Patterns are matched against the whole cleaned line (``re.fullmatch``), so
they carry no ``^``/``$`` anchors. Narrower patterns must be registered
before looser ones that would also match their lines.
"""

import logging
import re
from dataclasses import dataclass
from typing import Any, Callable, Optional, Sequence

from ..fields import Captures, clean_line
from ..models import Category, Dialect

logger = logging.getLogger(__name__)

Extractor = Callable[[Captures, Dialect], Any]


class RegistryError(RuntimeError):
    """A rule definition is broken. Raised while the registry is built, never per line."""


@dataclass(frozen=True)
class SpotRule:
    name: str
    category: Category
    dialect: Dialect
    pattern: re.Pattern
    extract: Extractor


@dataclass(frozen=True)
class RuleMatch:
    rule: SpotRule
    fields: Captures

    @property
    def category(self) -> Category:
        return self.rule.category

    @property
    def dialect(self) -> Dialect:
        return self.rule.dialect


# Rules collect here while the rule modules import; seal() freezes them into REGISTRY
_PENDING: list[SpotRule] = []
_sealed = False

# Global rule registry, evaluated top-down; registration order is precedence
REGISTRY: tuple[SpotRule, ...] = ()


def register(
    category: Category,
    dialect: Dialect,
    pattern: str,
    name: Optional[str] = None,
    rules: Optional[list[SpotRule]] = None,
):
    """
    Decorator to register an extractor under a (category, dialect) pattern.

    Args:
        category (Category): Spot category produced by the extractor.
        dialect (Dialect): Cluster dialect whose layout the pattern describes.
        pattern (str): Regular expression with named groups, matched against
                       the full line. Compiled ASCII-only, so ``\\d`` means 0-9.
        name (str): Unique rule name; defaults to the extractor's name.
        rules (list): Scratch rule list to append to instead of the global
                      registry.
    """
    if rules is None and _sealed:
        raise RegistryError("the rule registry is sealed; register rules at import time")
    target = _PENDING if rules is None else rules

    def decorator(fn: Extractor) -> Extractor:
        rule_name = name or fn.__name__
        try:
            compiled = re.compile(pattern, re.ASCII)
        except re.error as exc:
            raise RegistryError(f"rule {rule_name!r}: invalid pattern: {exc}") from exc
        if not compiled.groupindex:
            raise RegistryError(f"rule {rule_name!r}: pattern has no named groups")
        if any(rule.name == rule_name for rule in target):
            raise RegistryError(f"rule {rule_name!r} is already registered")

        target.append(SpotRule(rule_name, category, dialect, compiled, fn))
        logger.debug(
            "Registered rule %s (%s/%s) at position %d",
            rule_name,
            category.value,
            dialect.value,
            len(target),
        )
        return fn

    return decorator


def seal() -> tuple[SpotRule, ...]:
    """Freeze the registered rules; later global registrations raise RegistryError."""
    global REGISTRY, _sealed
    if not _sealed:
        REGISTRY = tuple(_PENDING)
        _sealed = True
        logger.debug("Rule registry sealed with %d rules", len(REGISTRY))
    return REGISTRY


def match_line(line: str, rules: Optional[Sequence[SpotRule]] = None) -> Optional[RuleMatch]:
    """
    Return the first rule, in registration order, matching the whole line.
    None means the line is not a known spot format.
    """
    cleaned = clean_line(line)
    if not cleaned:
        return None
    for rule in REGISTRY if rules is None else rules:
        m = rule.pattern.fullmatch(cleaned)
        if m:
            return RuleMatch(rule, m.groupdict())
    return None
