"""Conversion rules and the directly known seed factors."""

from dataclasses import dataclass, field
from math import ceil
from typing import Iterable, List, Sequence, Tuple

from massconv.conversion.units import Unit

# (from code, to code, factor) rows that every other factor is derived from
KNOWN_CONVERSIONS: Tuple[Tuple[str, str, str], ...] = (
    ("lb", "kg", "0.45359237"),
    ("lb", "g", "453.59237"),
    ("kg", "lb", "2.20462262"),
    ("kg", "metric ton", "0.001"),
)


@dataclass(frozen=True)
class ConversionRule:
    """Convert a quantity in `from_unit` to `to_unit`: to = factor * from.

    Rules compare and hash on the unit pair only, so two rules for the
    same pair are the same rule whatever their factors.
    """
    from_unit: Unit
    to_unit: Unit
    factor: float = field(compare=False)

    @property
    def pair(self) -> Tuple[Unit, Unit]:
        return (self.from_unit, self.to_unit)

    def apply(self, quantity: float) -> float:
        """Apply the conversion factor to a quantity."""
        return self.factor * quantity

    def invert(self) -> "ConversionRule":
        """Return the rule going the other way."""
        return ConversionRule(self.to_unit, self.from_unit, 1.0 / self.factor)

    def combine(self, other: "ConversionRule") -> "ConversionRule":
        """Chain this rule with one starting where this one ends.

        Args:
            other: Rule whose from_unit is this rule's to_unit

        Returns:
            Rule from this rule's from_unit to other's to_unit
        """
        if other.from_unit != self.to_unit:
            raise ValueError(
                f"Cannot combine {self.from_unit} -> {self.to_unit} "
                f"with {other.from_unit} -> {other.to_unit}"
            )

        from_unit = self.from_unit
        to_unit = other.to_unit

        if from_unit == to_unit:
            factor = 1.0
        else:
            factor = self.factor * other.factor

        # Chaining metric to metric through pounds (kg -> lb -> g) lands just
        # below the exact integer factor.
        if from_unit.is_metric and to_unit.is_metric and factor > 1.0:
            factor = float(ceil(factor))

        return ConversionRule(from_unit, to_unit, factor)


def parse_rule(row: Sequence[str]) -> ConversionRule:
    """Build a rule from a (from code, to code, factor) row.

    Raises:
        UnknownUnitError: If either unit code is not recognized
    """
    from_code, to_code, factor = row
    return ConversionRule(Unit.parse(from_code), Unit.parse(to_code), float(factor))


def load_seed_rules(
    rows: Iterable[Sequence[str]] = KNOWN_CONVERSIONS,
) -> List[ConversionRule]:
    """Parse seed rows into rules, keeping their order."""
    return [parse_rule(row) for row in rows]
