from fastapi import APIRouter, Body

from ..schemas import AnalyzeRequest, AnalyzeResponse, TranslateRequest, TranslateResponse
from ..services import analysis_service

router = APIRouter(prefix="/api", tags=["analysis"])


@router.post("/analyze", response_model=AnalyzeResponse)
async def analyze_endpoint(
    req: AnalyzeRequest = Body(
        ...,
        example={
            "date": "1990-05-15",
            "time": "14:30",
            "place": "Kyiv, Ukraine",
            "gender": "female",
            "language": "en",
            "mode": "concise",
        },
    )
) -> AnalyzeResponse:
    data = await analysis_service.analyze(req)
    return AnalyzeResponse(**data)


@router.post("/translate", response_model=TranslateResponse)
async def translate_endpoint(
    req: TranslateRequest = Body(
        ...,
        example={"text": "<h3>🌌 The Cosmic Blueprint</h3><p>...</p>", "targetLang": "de"},
    )
) -> TranslateResponse:
    data = await analysis_service.translate(req)
    return TranslateResponse(**data)
