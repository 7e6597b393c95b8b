"""
AI-generated content detection through the HuggingFace Inference API.
The classifier itself is an external service; this module only calls it and
maps its label onto a 0-1 probability.
"""
import logging
from typing import Optional

from huggingface_hub import InferenceClient

from plagiasure.config import AI_MAX_TEXT_LENGTH, AI_MIN_TEXT_LENGTH, AI_MODEL, HF_TOKEN
from plagiasure.schemas.report_schemas import AIDetectionResult

logger = logging.getLogger(__name__)

_hf_client: Optional[InferenceClient] = None


def get_hf_client() -> Optional[InferenceClient]:
    global _hf_client
    if _hf_client is None and HF_TOKEN:
        try:
            _hf_client = InferenceClient(api_key=HF_TOKEN)
            logger.info("✓ HuggingFace client initialized")
        except Exception as e:
            logger.error(f"❌ Failed to initialize HuggingFace client: {e}")
    return _hf_client


def _field(item, name):
    return item.get(name) if isinstance(item, dict) else getattr(item, name, None)


def _label_to_probability(label: str, confidence: float) -> float:
    label = (label or "").upper()
    if label == "AI":
        return confidence
    if label == "HUMAN":
        return 1.0 - confidence
    return 0.5


def detect_ai_probability(text: str, client: Optional[InferenceClient] = None) -> AIDetectionResult:
    """
    Returns probability 0.0-1.0 where 1.0 = definitely AI. Unavailable model,
    short text or API errors give probability 0 with ``available=False``.
    """
    if not text or len(text) < AI_MIN_TEXT_LENGTH:
        logger.warning("Text too short for AI detection")
        return AIDetectionResult(available=False)

    client = client or get_hf_client()
    if client is None:
        logger.info("HF_TOKEN not configured, skipping AI detection")
        return AIDetectionResult(available=False)

    try:
        result = client.text_classification(text[:AI_MAX_TEXT_LENGTH], model=AI_MODEL)
    except Exception as e:
        logger.error(f"❌ AI detection error: {e}", exc_info=True)
        return AIDetectionResult(available=False)

    if not result:
        logger.error("No result from AI classifier")
        return AIDetectionResult(available=False)

    top = result[0]
    label = _field(top, "label")
    confidence = _field(top, "score")
    if confidence is None:
        confidence = 0.5

    probability = round(min(max(_label_to_probability(label, float(confidence)), 0.0), 1.0), 3)
    logger.info(f"✅ AI detection complete: {label} -> {probability:.3f}")
    return AIDetectionResult(probability=probability, label=label, model=AI_MODEL, available=True)
