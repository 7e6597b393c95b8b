import asyncio
import logging
from datetime import datetime
from typing import List

from fastapi import APIRouter, Depends, HTTPException

from plagiasure.dependencies.auth import verify_token
from plagiasure.dependencies.providers import get_providers
from plagiasure.schemas.plagiarism_schemas import DetectionResult
from plagiasure.schemas.report_schemas import AIDetectionResult, AnalysisReport, TextRequest
from plagiasure.utils.ai_detector import detect_ai_probability
from plagiasure.utils.aggregator import detect_plagiarism
from plagiasure.utils.verdict import build_verdict, risk_level
from plagiasure.utils.web_utils import ProviderClient

router = APIRouter(prefix="/reports", tags=["reports"])

logger = logging.getLogger(__name__)


@router.post("/analyze", response_model=AnalysisReport)
async def analyze(
    body: TextRequest,
    current_user: dict = Depends(verify_token),
    providers: List[ProviderClient] = Depends(get_providers),
):
    """Run AI detection and plagiarism detection side by side and combine them into a verdict."""
    text = body.text.strip()
    if not text:
        raise HTTPException(status_code=400, detail="Text is required")

    t0 = datetime.utcnow()
    logger.info(f"📄 Starting analysis for user {current_user.get('sub')}")

    ai_result, plagiarism = await asyncio.gather(
        asyncio.to_thread(detect_ai_probability, text),
        asyncio.to_thread(detect_plagiarism, text, providers),
        return_exceptions=True,
    )
    if isinstance(ai_result, BaseException):
        logger.error(f"AI detection failed: {ai_result}")
        ai_result = AIDetectionResult()
    if isinstance(plagiarism, BaseException):
        logger.error(f"Plagiarism detection failed: {plagiarism}")
        plagiarism = DetectionResult.empty()

    verdict = build_verdict(ai_result.probability, plagiarism.score)

    elapsed = (datetime.utcnow() - t0).total_seconds()
    mm = int(elapsed // 60)
    ss = int(elapsed % 60)

    logger.info(f"✅ Analysis completed: {verdict}")
    return AnalysisReport(
        ai_probability=ai_result.probability,
        ai_available=ai_result.available,
        ai_risk=risk_level(ai_result.probability, "ai"),
        plagiarism=plagiarism,
        plagiarism_risk=risk_level(plagiarism.score, "plagiarism"),
        verdict=verdict,
        word_count=len(text.split()),
        processing_time=f"{mm}m {ss:02d}s",
    )
