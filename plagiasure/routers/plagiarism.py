import asyncio
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException

from plagiasure.dependencies.auth import verify_token
from plagiasure.dependencies.providers import get_providers
from plagiasure.schemas.report_schemas import DetectResponse, TextRequest
from plagiasure.utils.aggregator import detect_plagiarism
from plagiasure.utils.query_utils import build_probes
from plagiasure.utils.web_utils import ProviderClient

router = APIRouter(prefix="/plagiarism", tags=["plagiarism"])

logger = logging.getLogger(__name__)


@router.post("/detect", response_model=DetectResponse)
async def detect(
    body: TextRequest,
    include_probes: bool = False,
    current_user: dict = Depends(verify_token),
    providers: List[ProviderClient] = Depends(get_providers),
):
    text = body.text.strip()
    if not text:
        raise HTTPException(status_code=400, detail="Text is required")

    logger.info(f"🔍 Plagiarism check for user {current_user.get('sub')} ({len(text.split())} words)")
    result = await asyncio.to_thread(detect_plagiarism, text, providers)

    response = DetectResponse(**result.model_dump())
    if include_probes:
        response.probes = build_probes(text)
    return response
