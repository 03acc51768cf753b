"""Pydantic schemas for API requests and responses"""
from pydantic import BaseModel, Field


# Request Schemas

class ConversionRequest(BaseModel):
    """Convert `quantity` from one unit code to another"""
    from_unit: str = Field(..., alias="from", examples=["lb"])
    to_unit: str = Field(..., alias="to", examples=["kg"])
    quantity: float

    model_config = {"populate_by_name": True}


# Response Schemas

class ConversionResponse(BaseModel):
    """Converted quantity, rounded to 8 decimals"""
    result: float


class UnitInfo(BaseModel):
    """Supported unit"""
    code: str
    is_metric: bool


class ConversionRuleSchema(BaseModel):
    """Conversion factor between two units"""
    from_unit: str = Field(..., alias="from")
    to_unit: str = Field(..., alias="to")
    factor: float

    model_config = {"populate_by_name": True}


class ErrorResponse(BaseModel):
    """Standard error response"""
    detail: str
