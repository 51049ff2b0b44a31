from pydantic import BaseModel, Field
from typing import List, Optional

class SuccessResponse(BaseModel):
    success: bool = Field(True, description="Whether the filter produced a value")
    message: Optional[str] = Field(None, description="The filter result")

class FilterListResponse(BaseModel):
    filters: List[str] = Field(..., description="Registered color filter names")
