"""Apply conversion rules to quantities."""

from typing import Optional

from massconv.conversion.table import ConversionTable, get_conversion_table
from massconv.conversion.units import Unit

# Converted quantities are rounded to this many decimal digits
RESULT_PRECISION = 8


def round_result(value: float) -> float:
    return round(value, RESULT_PRECISION)


def convert(
    from_unit: Unit,
    to_unit: Unit,
    quantity: float,
    table: Optional[ConversionTable] = None,
) -> float:
    """Convert a quantity from one unit to another.

    Args:
        from_unit: Unit of the given quantity
        to_unit: Target unit
        quantity: Quantity to convert
        table: Conversion table to use (defaults to the shared table)

    Returns:
        Converted quantity rounded to RESULT_PRECISION decimals

    Raises:
        IncompleteConversionTableError: If the table has no rule for the pair
    """
    if table is None:
        table = get_conversion_table()
    rule = table.lookup(from_unit, to_unit)
    return round_result(rule.apply(quantity))


def convert_codes(from_code: str, to_code: str, quantity: float) -> float:
    """Convert a quantity between units given by their codes.

    Raises:
        UnknownUnitError: If either code is not a supported unit
    """
    return convert(Unit.parse(from_code), Unit.parse(to_code), quantity)
