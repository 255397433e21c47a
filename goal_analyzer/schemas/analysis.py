from typing import List, Literal

from pydantic import BaseModel, ConfigDict, Field


class AnalysisResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    summaryBullets: List[str] = Field(min_length=1, max_length=3)
    sentimentLabel: Literal["Positive", "Neutral", "Negative"]
    nextStep: str


class ErrorResponse(BaseModel):
    error: str
    message: str
