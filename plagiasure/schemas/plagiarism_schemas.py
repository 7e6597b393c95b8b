from enum import Enum
from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, Field, field_validator

from plagiasure.config import DETECTION_METHOD

UNKNOWN_SOURCE = "Unknown Source"
UNTITLED = "Untitled"


def clamp_score(value) -> float:
    """Coerce a provider-native score into [0, 1]; junk becomes 0."""
    try:
        score = float(value)
    except (TypeError, ValueError):
        return 0.0
    if score != score:  # NaN
        return 0.0
    return min(max(score, 0.0), 1.0)


class ProbeKind(str, Enum):
    SENTENCE = "sentence"
    ACADEMIC_PHRASE = "academic_phrase"
    CAPITALIZED_TERM = "capitalized_term"
    KEY_PHRASE = "key_phrase"
    CHUNK = "chunk"


class ProbeQuery(BaseModel):
    model_config = {"frozen": True}

    text: str = Field(min_length=1)
    kind: ProbeKind


# ---- Highlight metadata (one variant per provider family) ----

class AcademicMetadata(BaseModel):
    kind: Literal["academic"] = "academic"
    authors: str = "Unknown"
    year: Optional[int] = None
    citation_count: Optional[int] = None
    doi: Optional[str] = None
    reason: Optional[str] = None


class WebMetadata(BaseModel):
    kind: Literal["web"] = "web"
    snippet: Optional[str] = None
    reason: Optional[str] = None


class GenericMetadata(BaseModel):
    kind: Literal["generic"] = "generic"
    reason: Optional[str] = None


HighlightMetadata = Annotated[
    Union[AcademicMetadata, WebMetadata, GenericMetadata],
    Field(discriminator="kind"),
]


class Highlight(BaseModel):
    text: str
    source: str = UNKNOWN_SOURCE
    score: float = 0.0
    title: str = UNTITLED
    extra: HighlightMetadata = Field(default_factory=GenericMetadata)

    @field_validator("source", mode="before")
    @classmethod
    def _default_source(cls, v):
        return v or UNKNOWN_SOURCE

    @field_validator("title", mode="before")
    @classmethod
    def _default_title(cls, v):
        return v or UNTITLED

    @field_validator("score", mode="before")
    @classmethod
    def _clamp(cls, v):
        return clamp_score(v)

    def dedup_key(self, prefix_chars: int) -> str:
        return self.text.lower().strip()[:prefix_chars]


class ProviderResult(BaseModel):
    provider: str
    score: float = 0.0
    highlights: List[Highlight] = Field(default_factory=list)

    @field_validator("score", mode="before")
    @classmethod
    def _clamp(cls, v):
        return clamp_score(v)

    @classmethod
    def empty(cls, provider: str) -> "ProviderResult":
        return cls(provider=provider)


class DetectionResult(BaseModel):
    score: float = 0.0
    highlights: List[Highlight] = Field(default_factory=list)
    sources: List[str] = Field(default_factory=list)
    method: str = DETECTION_METHOD

    @field_validator("score", mode="before")
    @classmethod
    def _clamp(cls, v):
        return clamp_score(v)

    @classmethod
    def empty(cls) -> "DetectionResult":
        return cls()
