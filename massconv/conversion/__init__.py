"""Conversion module for mass units."""

from .units import (
    Unit,
    UnknownUnitError,
)
from .rules import (
    ConversionRule,
    KNOWN_CONVERSIONS,
    load_seed_rules,
    parse_rule,
)
from .table import (
    ConversionTable,
    IncompleteConversionTableError,
    build_conversion_table,
    get_conversion_table,
)
from .converter import (
    RESULT_PRECISION,
    convert,
    convert_codes,
    round_result,
)

__all__ = [
    'Unit',
    'UnknownUnitError',
    'ConversionRule',
    'KNOWN_CONVERSIONS',
    'load_seed_rules',
    'parse_rule',
    'ConversionTable',
    'IncompleteConversionTableError',
    'build_conversion_table',
    'get_conversion_table',
    'RESULT_PRECISION',
    'convert',
    'convert_codes',
    'round_result',
]
