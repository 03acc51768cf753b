"""API endpoints for mass unit conversion."""
import logging
from typing import List

from fastapi import APIRouter, HTTPException, Query

from massconv.common.schemas import (
    ConversionRequest,
    ConversionResponse,
    ConversionRuleSchema,
    ErrorResponse,
    UnitInfo,
)
from massconv.conversion import (
    Unit,
    UnknownUnitError,
    convert,
    get_conversion_table,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["conversion"])


def _parse_unit(code: str) -> Unit:
    try:
        return Unit.parse(code)
    except UnknownUnitError as e:
        logger.info(f"Rejected unknown unit: {e.token!r}")
        raise HTTPException(status_code=400, detail=str(e))


def _rule_schema(from_unit: Unit, to_unit: Unit, factor: float) -> ConversionRuleSchema:
    return ConversionRuleSchema(from_unit=from_unit.value, to_unit=to_unit.value, factor=factor)


@router.post(
    "/convert",
    response_model=ConversionResponse,
    responses={400: {"model": ErrorResponse, "description": "Unknown unit"}},
)
def convert_quantity(request: ConversionRequest) -> ConversionResponse:
    """Convert a quantity from one unit to another.
    
    Args:
        request: Source unit code, target unit code and quantity
        
    Returns:
        ConversionResponse with the result rounded to 8 decimals
    """
    from_unit = _parse_unit(request.from_unit)
    to_unit = _parse_unit(request.to_unit)
    return ConversionResponse(result=convert(from_unit, to_unit, request.quantity))


@router.get("/units", response_model=List[UnitInfo])
def list_units() -> List[UnitInfo]:
    """List supported unit codes."""
    return [UnitInfo(code=unit.value, is_metric=unit.is_metric) for unit in Unit]


@router.get(
    "/factor",
    response_model=ConversionRuleSchema,
    responses={400: {"model": ErrorResponse, "description": "Unknown unit"}},
)
def get_factor(
    from_code: str = Query(..., alias="from", description="Source unit code"),
    to_code: str = Query(..., alias="to", description="Target unit code"),
) -> ConversionRuleSchema:
    """Get the conversion factor between two units."""
    from_unit = _parse_unit(from_code)
    to_unit = _parse_unit(to_code)
    rule = get_conversion_table().lookup(from_unit, to_unit)
    return _rule_schema(rule.from_unit, rule.to_unit, rule.factor)


@router.get("/rules", response_model=List[ConversionRuleSchema])
def list_rules() -> List[ConversionRuleSchema]:
    """List every rule of the completed conversion table."""
    table = get_conversion_table()
    return [
        _rule_schema(from_unit, to_unit, table.lookup(from_unit, to_unit).factor)
        for from_unit in Unit
        for to_unit in Unit
    ]
