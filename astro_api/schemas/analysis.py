from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, List, Dict, Literal

Gender = Literal["male", "female"]


class AnalyzeRequest(BaseModel):
    # date is checked by the service so a missing value yields "Date is required"
    date: Optional[str] = None  # YYYY-MM-DD
    time: Optional[str] = None  # HH:MM
    place: Optional[str] = None
    gender: Gender = "male"
    language: Optional[str] = "uk"
    mode: Optional[str] = "detailed"  # unknown modes fall back to detailed

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "date": "1990-05-15",
                "time": "14:30",
                "place": "Kyiv, Ukraine",
                "gender": "female",
                "language": "en",
            }
        }
    )


class PythagorasMeta(BaseModel):
    firstNum: int
    secondNum: int
    thirdNum: int
    fourthNum: int


class PythagorasOut(BaseModel):
    square: Dict[int, int]
    meta: PythagorasMeta


class MoonOut(BaseModel):
    phase: str
    emoji: str


class EchoedInput(BaseModel):
    date: str
    time: Optional[str] = None
    place: Optional[str] = None
    gender: str
    language: str
    mode: str


class AnalyzeResponse(BaseModel):
    zodiac: str
    chineseZodiac: str
    pythagoras: PythagorasOut
    moon: MoonOut
    aiAnalysis: Optional[str] = None
    input: EchoedInput
    warnings: List[str] = []


class TranslateRequest(BaseModel):
    text: Optional[str] = None
    targetLang: Optional[str] = Field(None, description="Target language code (en, de, fr, es, uk, ru)")


class TranslateResponse(BaseModel):
    translatedText: str
    language: str


class ErrorResponse(BaseModel):
    error: str
