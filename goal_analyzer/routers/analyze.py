import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Body

from ..config import settings
from ..errors import AnalyzeRequestError
from ..orchestrator.analysis import analyze_text
from ..schemas.analysis import AnalysisResult
from ..schemas.validator import validate_analyze_body

logger = logging.getLogger(__name__)

router = APIRouter(prefix="", tags=["analyze"])


@router.post("/analyze", response_model=AnalysisResult)
async def analyze(body: Optional[Dict[str, Any]] = Body(default=None)) -> AnalysisResult:
    try:
        text = validate_analyze_body(body, settings.max_text_length)
    except AnalyzeRequestError as error:
        logger.warning("Rejected analyze request: %s", error.error)
        raise

    try:
        result = analyze_text(text)
    except Exception as error:  # pylint: disable=broad-except
        logger.exception("Error analyzing text")
        raise AnalyzeRequestError.internal() from error

    logger.debug("Analyzed %d characters as %s", len(text), result.sentimentLabel)
    return result
