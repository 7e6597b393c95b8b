"""
Probe extraction: turns a document into the short search strings each
provider is queried with. Everything here is pure and deterministic.
"""
import re
from typing import List

from plagiasure.config import (
    ACADEMIC_MAX_PHRASES,
    ACADEMIC_MIN_LENGTH,
    ACADEMIC_PHRASE_CHARS,
    BING_MIN_SENTENCE_LENGTH,
    CAPITALIZED_TERM_MIN_LENGTH,
    CHUNK_SIZE,
    GOOGLE_MIN_SENTENCE_LENGTH,
    KEY_PHRASE_SENTENCE_MIN,
    MAX_CAPITALIZED_TERMS,
    MAX_KEY_PHRASES,
)
from plagiasure.schemas.plagiarism_schemas import ProbeKind, ProbeQuery

_SENTENCE_END = re.compile(r"[.!?]+")
_CAPITALIZED_RUN = re.compile(r"\b[A-Z][a-z]+(?:\s+[A-Z][a-z]+)*\b")
_CONCEPT_PHRASE = re.compile(
    r"\b(?:theory|algorithm|method|system|technology|principle|concept|model)\s+\w+",
    re.IGNORECASE,
)


def split_sentences(text: str) -> List[str]:
    return [s.strip() for s in _SENTENCE_END.split(text or "") if s.strip()]


def extract_sentence_probes(text: str, min_length: int) -> List[str]:
    """Sentences strictly longer than ``min_length`` characters, in document order."""
    return [s for s in split_sentences(text) if len(s) > min_length]


def quote_probe(sentence: str, max_chars: int) -> str:
    return f'"{sentence[:max_chars]}"'


def extract_academic_phrases(text: str) -> List[str]:
    sentences = extract_sentence_probes(text, ACADEMIC_MIN_LENGTH)
    return [s[:ACADEMIC_PHRASE_CHARS] for s in sentences[:ACADEMIC_MAX_PHRASES]]


def extract_capitalized_terms(text: str) -> List[str]:
    """Proper-noun-like runs ("Albert Einstein", "Quantum Field Theory")."""
    terms = _CAPITALIZED_RUN.findall(text or "")
    return [t for t in terms if len(t) > CAPITALIZED_TERM_MIN_LENGTH][:MAX_CAPITALIZED_TERMS]


def extract_key_phrases(text: str) -> List[str]:
    """
    General-knowledge lookups: proper nouns plus "<concept word> <word>"
    phrases, first-seen order, duplicates dropped.
    """
    phrases: List[str] = []
    for sentence in extract_sentence_probes(text, KEY_PHRASE_SENTENCE_MIN):
        phrases.extend(_CAPITALIZED_RUN.findall(sentence))
        phrases.extend(_CONCEPT_PHRASE.findall(sentence))

    unique = list(dict.fromkeys(phrases))
    return [p for p in unique if 5 < len(p) < 50][:MAX_KEY_PHRASES]


def split_text_into_chunks(text: str, size: int = CHUNK_SIZE) -> List[str]:
    text = text or ""
    return [text[i:i + size] for i in range(0, len(text), size)]


def build_probes(text: str) -> List[ProbeQuery]:
    """All probe sets one detection run would issue, tagged by kind."""
    probes: List[ProbeQuery] = []
    sentences = extract_sentence_probes(text, min(GOOGLE_MIN_SENTENCE_LENGTH, BING_MIN_SENTENCE_LENGTH))
    probes.extend(ProbeQuery(text=s, kind=ProbeKind.SENTENCE) for s in sentences)
    probes.extend(ProbeQuery(text=p, kind=ProbeKind.ACADEMIC_PHRASE) for p in extract_academic_phrases(text))
    probes.extend(ProbeQuery(text=t, kind=ProbeKind.CAPITALIZED_TERM) for t in extract_capitalized_terms(text))
    probes.extend(ProbeQuery(text=k, kind=ProbeKind.KEY_PHRASE) for k in extract_key_phrases(text))
    probes.extend(ProbeQuery(text=c, kind=ProbeKind.CHUNK) for c in split_text_into_chunks(text) if c.strip())
    return probes
