"""
General web-search providers: Google Custom Search, Bing Web Search,
DupliChecker (keyed) and the DuckDuckGo Instant Answer API (keyless).
"""
from typing import List

from plagiasure.config import (
    BING_DELAY,
    BING_MAX_QUERIES,
    BING_MIN_SENTENCE_LENGTH,
    BING_QUERY_CHARS,
    BING_SEARCH_URL,
    CHUNK_SIZE,
    DUCKDUCKGO_DELAY,
    DUCKDUCKGO_URL,
    DUPLICHECKER_DELAY,
    DUPLICHECKER_TIMEOUT,
    DUPLICHECKER_URL,
    GOOGLE_DELAY,
    GOOGLE_MAX_QUERIES,
    GOOGLE_MIN_SENTENCE_LENGTH,
    GOOGLE_QUERY_CHARS,
    GOOGLE_SEARCH_URL,
)
from plagiasure.schemas.plagiarism_schemas import GenericMetadata, Highlight, ProviderResult, WebMetadata
from plagiasure.utils.query_utils import (
    extract_key_phrases,
    extract_sentence_probes,
    quote_probe,
    split_text_into_chunks,
)
from plagiasure.utils.web_utils import ProbeOutcome, ProviderClient


# ---- Google Custom Search (free tier: 100 queries/day) ----
class GoogleSearchClient(ProviderClient):
    name = "google"
    delay = GOOGLE_DELAY

    def is_configured(self) -> bool:
        return bool(self.config.google_api_key and self.config.google_engine_id)

    def _check(self, text: str) -> ProviderResult:
        sentences = extract_sentence_probes(text, GOOGLE_MIN_SENTENCE_LENGTH)[:GOOGLE_MAX_QUERIES]
        return self._run_probes(sentences, self._query)

    def _query(self, sentence: str) -> ProbeOutcome:
        params = {
            "key": self.config.google_api_key,
            "cx": self.config.google_engine_id,
            "q": quote_probe(sentence, GOOGLE_QUERY_CHARS),
            "num": 5,
        }
        items = self._get(GOOGLE_SEARCH_URL, params=params).json().get("items") or []
        if not items:
            return 0.0, []

        score = min(0.9, len(items) * 0.2)
        highlights = [
            Highlight(
                text=sentence,
                source=item.get("link"),
                score=score,
                title=item.get("title"),
                extra=WebMetadata(snippet=item.get("snippet")),
            )
            for item in items
        ]
        return score, highlights


# ---- Bing Web Search (free tier: 1000 queries/month) ----
class BingSearchClient(ProviderClient):
    name = "bing"
    delay = BING_DELAY

    def is_configured(self) -> bool:
        return bool(self.config.bing_api_key)

    def _check(self, text: str) -> ProviderResult:
        sentences = extract_sentence_probes(text, BING_MIN_SENTENCE_LENGTH)[:BING_MAX_QUERIES]
        return self._run_probes(sentences, self._query)

    def _query(self, sentence: str) -> ProbeOutcome:
        r = self._get(
            BING_SEARCH_URL,
            params={"q": quote_probe(sentence, BING_QUERY_CHARS), "count": 5},
            headers={"Ocp-Apim-Subscription-Key": self.config.bing_api_key},
        )
        pages = (r.json().get("webPages") or {}).get("value") or []
        if not pages:
            return 0.0, []

        score = min(0.8, len(pages) * 0.2)
        highlights = [
            Highlight(
                text=sentence,
                source=page.get("url"),
                score=score,
                title=page.get("name"),
                extra=WebMetadata(snippet=page.get("snippet")),
            )
            for page in pages
        ]
        return score, highlights


# ---- DupliChecker (free tier: 1000 queries/month) ----
class DupliCheckerClient(ProviderClient):
    """Submits the document in fixed-size chunks; the reported percentage is the score."""

    name = "duplichecker"
    delay = DUPLICHECKER_DELAY
    timeout = DUPLICHECKER_TIMEOUT
    max_chunks = 2

    def is_configured(self) -> bool:
        return bool(self.config.duplichecker_api_key)

    def _check(self, text: str) -> ProviderResult:
        chunks = split_text_into_chunks(text, CHUNK_SIZE)[:self.max_chunks]
        return self._run_probes(chunks, self._query)

    def _query(self, chunk: str) -> ProbeOutcome:
        r = self._post(DUPLICHECKER_URL, json={"text": chunk, "api_key": self.config.duplichecker_api_key})
        data = r.json() or {}
        percentage = data.get("percentage")
        if not percentage:
            return 0.0, []

        score = float(percentage) / 100
        highlights = [
            Highlight(
                text=match.get("text") or chunk[:100] + "...",
                source=match.get("url") or "DupliChecker Database",
                score=score,
                extra=GenericMetadata(reason=f"{percentage}% reported by DupliChecker"),
            )
            for match in data.get("matches") or []
        ]
        return score, highlights


# ---- DuckDuckGo Instant Answer (keyless) ----
class DuckDuckGoClient(ProviderClient):
    name = "duckduckgo"
    delay = DUCKDUCKGO_DELAY
    max_queries = 2

    # (text field, url field, title field, fallback title)
    SECTIONS = [
        ("Abstract", "AbstractURL", "AbstractSource", "Knowledge Base"),
        ("Definition", "DefinitionURL", "DefinitionSource", "Definition"),
        ("Answer", "AnswerURL", "AnswerType", "Direct Answer"),
    ]

    def _check(self, text: str) -> ProviderResult:
        phrases = extract_key_phrases(text)[:self.max_queries]
        return self._run_probes(phrases, self._query)

    def _query(self, phrase: str) -> ProbeOutcome:
        params = {"q": phrase, "format": "json", "no_html": "1", "skip_disambig": "1"}
        data = self._get(DUCKDUCKGO_URL, params=params).json() or {}

        found: List[dict] = []
        for field, url_field, title_field, fallback in self.SECTIONS:
            value = data.get(field)
            if isinstance(value, str) and value.strip():
                found.append({
                    "url": data.get(url_field) or "https://duckduckgo.com",
                    "title": data.get(title_field) or fallback,
                    "snippet": value,
                })
        if not found:
            return 0.0, []

        score = min(0.6, len(found) * 0.3)
        highlights = [
            Highlight(
                text=phrase,
                source=f["url"],
                score=score,
                title=f["title"],
                extra=WebMetadata(
                    snippet=f["snippet"][:150] + "...",
                    reason="Found in DuckDuckGo knowledge base",
                ),
            )
            for f in found
        ]
        return score, highlights
