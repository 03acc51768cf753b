"""Closure of the seed rules into a complete conversion table."""

import logging
import threading
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, List, Optional, Sequence, Tuple

from massconv.conversion.rules import ConversionRule, load_seed_rules
from massconv.conversion.units import Unit

logger = logging.getLogger(__name__)

UnitPair = Tuple[Unit, Unit]


class IncompleteConversionTableError(AssertionError):
    """Raised when the table has no rule for a pair of known units.

    This means a unit was added without a seed rule connecting it to
    the others. It is a programming error, never a client error.
    """
    pass


class ConversionTable:
    """Read-only mapping of (from, to) unit pairs to conversion rules."""

    def __init__(self, rules: Dict[UnitPair, ConversionRule]):
        self._rules = MappingProxyType(dict(rules))

    def get(self, from_unit: Unit, to_unit: Unit) -> Optional[ConversionRule]:
        return self._rules.get((from_unit, to_unit))

    def lookup(self, from_unit: Unit, to_unit: Unit) -> ConversionRule:
        """Return the rule for a pair.

        Raises:
            IncompleteConversionTableError: If the pair is missing
        """
        rule = self._rules.get((from_unit, to_unit))
        if rule is None:
            raise IncompleteConversionTableError(
                f"No conversion rule from '{from_unit}' to '{to_unit}'"
            )
        return rule

    def rules(self) -> List[ConversionRule]:
        return list(self._rules.values())

    def __contains__(self, pair: object) -> bool:
        return pair in self._rules

    def __iter__(self) -> Iterator[UnitPair]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)


def build_conversion_table(
    seed_rules: Iterable[ConversionRule],
    units: Sequence[Unit] = tuple(Unit),
) -> ConversionTable:
    """Derive a rule for every ordered pair of units from the seed rules.

    Each seed is inserted followed by its inverse; the first rule stored for
    a pair wins, so a later seed for an already derived pair is ignored. Each pass
    combines every chainable pair of rules from a snapshot of the table and
    adds the result and its inverse if their pairs are new.

    Args:
        seed_rules: Directly known rules
        units: Unit set the table must cover

    Returns:
        ConversionTable with len(units) ** 2 rules

    Raises:
        IncompleteConversionTableError: If some pairs cannot be derived
    """
    target = len(units) ** 2
    seeds = list(seed_rules)
    rules: Dict[UnitPair, ConversionRule] = {}

    for rule in seeds:
        rules.setdefault(rule.pair, rule)
        inverted = rule.invert()
        rules.setdefault(inverted.pair, inverted)

    logger.debug(f"Seeded conversion table with {len(rules)} rules from {len(seeds)} seeds")

    passes = 0
    while len(rules) < target:
        passes += 1
        snapshot = list(rules.values())
        pending: Dict[UnitPair, ConversionRule] = {}

        for rule in snapshot:
            for other in snapshot:
                if other.from_unit != rule.to_unit:
                    continue
                combined = rule.combine(other)
                if combined.pair in rules or combined.pair in pending:
                    continue
                pending[combined.pair] = combined

                inverted = combined.invert()
                if inverted.pair not in rules and inverted.pair not in pending:
                    pending[inverted.pair] = inverted

        if not pending:
            missing = [
                f"{from_unit} -> {to_unit}"
                for from_unit in units
                for to_unit in units
                if (from_unit, to_unit) not in rules
            ]
            raise IncompleteConversionTableError(
                f"Cannot derive conversion rules for: {', '.join(missing)}"
            )

        rules.update(pending)
        logger.debug(f"Closure pass {passes} added {len(pending)} rules")

    logger.info(f"Built conversion table with {len(rules)} rules in {passes} passes")
    return ConversionTable(rules)


_table: Optional[ConversionTable] = None
_table_lock = threading.Lock()


def get_conversion_table() -> ConversionTable:
    """Return (and lazily build) the process-wide conversion table."""
    global _table
    if _table is None:
        with _table_lock:
            if _table is None:
                _table = build_conversion_table(load_seed_rules())
    return _table
