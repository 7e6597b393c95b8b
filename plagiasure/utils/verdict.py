"""Report verdicts and risk levels from the AI and plagiarism scores."""
from plagiasure.schemas.plagiarism_schemas import clamp_score
from plagiasure.schemas.report_schemas import RiskLevel

AI_HIGH = 0.7
AI_MEDIUM = 0.4
PLAGIARISM_SIGNIFICANT = 0.3
PLAGIARISM_MINOR = 0.1
PLAGIARISM_HIGH = 0.5


def build_verdict(ai_probability, plagiarism_score) -> str:
    ai = clamp_score(ai_probability)
    plag = clamp_score(plagiarism_score)

    if ai > AI_HIGH and plag > PLAGIARISM_SIGNIFICANT:
        return "High AI probability with significant plagiarism detected"
    if ai > AI_HIGH:
        return "Likely AI-generated content"
    if plag > PLAGIARISM_SIGNIFICANT:
        return "Plagiarism detected"
    if ai > AI_MEDIUM or plag > PLAGIARISM_MINOR:
        return "Some concerns detected - manual review recommended"
    return "Content appears original"


def risk_level(score, kind: str = "plagiarism") -> RiskLevel:
    score = clamp_score(score)

    if kind == "ai":
        if score > AI_HIGH:
            return RiskLevel(level="HIGH", description="High probability of AI-generated content")
        if score > AI_MEDIUM:
            return RiskLevel(level="MEDIUM", description="Moderate AI detection signals")
        return RiskLevel(level="LOW", description="Low AI probability - likely human-written")

    if score > PLAGIARISM_HIGH:
        return RiskLevel(level="HIGH", description="Significant similarity detected")
    if score > PLAGIARISM_SIGNIFICANT:
        return RiskLevel(level="MEDIUM", description="Moderate similarity - review recommended")
    return RiskLevel(level="LOW", description="Low similarity - likely acceptable")
