from fastapi import APIRouter, Body

from ..schemas import CompatibilityRequest, CompatibilityResponse
from ..services import analysis_service

router = APIRouter(prefix="/api", tags=["compatibility"])


@router.post("/compatibility", response_model=CompatibilityResponse)
async def compatibility_endpoint(
    req: CompatibilityRequest = Body(
        ...,
        example={
            "partner1": {"date": "1990-05-15", "time": "14:30", "gender": "female"},
            "partner2": {"date": "1988-11-02", "place": "Lviv", "gender": "male"},
            "language": "en",
        },
    )
) -> CompatibilityResponse:
    data = await analysis_service.analyze_compatibility(req)
    return CompatibilityResponse(**data)
