from .analysis import (
    AnalyzeRequest,
    AnalyzeResponse,
    EchoedInput,
    ErrorResponse,
    MoonOut,
    PythagorasMeta,
    PythagorasOut,
    TranslateRequest,
    TranslateResponse,
)
from .compatibility import CompatibilityRequest, CompatibilityResponse
