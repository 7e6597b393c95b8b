from typing import List, Optional

from pydantic import BaseModel, Field

from plagiasure.schemas.plagiarism_schemas import DetectionResult, ProbeQuery


class TextRequest(BaseModel):
    text: str


class DetectResponse(DetectionResult):
    probes: List[ProbeQuery] = Field(default_factory=list)   # filled only with ?include_probes=true


class AIDetectionResult(BaseModel):
    probability: float = 0.0    # 0 = human, 1 = AI
    label: Optional[str] = None
    model: Optional[str] = None
    available: bool = False


class RiskLevel(BaseModel):
    level: str          # "HIGH" | "MEDIUM" | "LOW"
    description: str


class AnalysisReport(BaseModel):
    ai_probability: float
    ai_available: bool
    ai_risk: RiskLevel
    plagiarism: DetectionResult
    plagiarism_risk: RiskLevel
    verdict: str
    word_count: int
    processing_time: str    # e.g. "0m 07s"
