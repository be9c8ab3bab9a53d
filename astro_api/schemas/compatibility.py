from pydantic import BaseModel, ConfigDict
from typing import Optional

from .analysis import AnalyzeRequest, AnalyzeResponse


class CompatibilityRequest(BaseModel):
    partner1: Optional[AnalyzeRequest] = None
    partner2: Optional[AnalyzeRequest] = None
    language: Optional[str] = None
    mode: Optional[str] = "detailed"

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "partner1": {"date": "1990-05-15", "gender": "female"},
                "partner2": {"date": "1988-11-02", "time": "07:45", "gender": "male"},
                "language": "en",
            }
        }
    )


class CompatibilityResponse(BaseModel):
    partner1: AnalyzeResponse
    partner2: AnalyzeResponse
    aiCompatibility: Optional[str] = None
    language: str
