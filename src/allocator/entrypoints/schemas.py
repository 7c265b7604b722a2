from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, NonNegativeInt


class AllocateRequest(BaseModel):
    orders: List[Any] = Field(..., description="Raw order records, as JSON objects or JSON strings.")
    inventory: Optional[Dict[str, NonNegativeInt]] = None


class AllocationReportSchema(BaseModel):
    header: Any
    demand: Dict[str, int]
    allocation: Dict[str, int]
    backorder: Dict[str, int]


class AllocateResponse(BaseModel):
    reports: List[AllocationReportSchema]
    lines: List[str]
    inventory: Dict[str, int]
