"""
Keyless scholarly catalogs: CrossRef, arXiv and Semantic Scholar.
"""
from typing import List, Optional

import requests
from bs4 import BeautifulSoup

from plagiasure.config import (
    ARXIV_DELAY,
    ARXIV_URL,
    CROSSREF_DELAY,
    CROSSREF_URL,
    SEMANTIC_SCHOLAR_DELAY,
    SEMANTIC_SCHOLAR_TIMEOUT,
    SEMANTIC_SCHOLAR_URL,
)
from plagiasure.schemas.plagiarism_schemas import AcademicMetadata, GenericMetadata, Highlight, ProviderResult
from plagiasure.utils.query_utils import extract_academic_phrases, extract_capitalized_terms
from plagiasure.utils.web_utils import ProbeOutcome, ProviderClient, ProviderRateLimited


def _crossref_authors(item: dict) -> str:
    names = []
    for a in item.get("author") or []:
        name = " ".join(p for p in (a.get("given"), a.get("family")) if p)
        if name:
            names.append(name)
    return ", ".join(names) if names else "Unknown"


def _crossref_year(item: dict) -> Optional[int]:
    try:
        return int(item["issued"]["date-parts"][0][0])
    except (KeyError, IndexError, TypeError, ValueError):
        return None


# ---- CrossRef (free, polite pool with mailto) ----
class CrossRefClient(ProviderClient):
    name = "crossref"
    delay = CROSSREF_DELAY
    max_queries = 3

    def _check(self, text: str) -> ProviderResult:
        phrases = extract_academic_phrases(text)[:self.max_queries]
        return self._run_probes(phrases, self._query)

    def _query(self, phrase: str) -> ProbeOutcome:
        r = self._get(
            CROSSREF_URL,
            params={"query": phrase, "rows": 5},
            headers={"User-Agent": f"{self.config.user_agent} (mailto:{self.config.crossref_mailto})"},
        )
        items = (r.json().get("message") or {}).get("items") or []
        if not items:
            return 0.0, []

        score = min(0.7, len(items) * 0.15)
        highlights = []
        for item in items:
            doi = item.get("DOI")
            titles = item.get("title") or []
            highlights.append(Highlight(
                text=phrase,
                source=f"https://doi.org/{doi}" if doi else item.get("URL"),
                score=score,
                title=titles[0] if titles else "Academic Paper",
                extra=AcademicMetadata(
                    authors=_crossref_authors(item),
                    year=_crossref_year(item),
                    citation_count=item.get("is-referenced-by-count"),
                    doi=doi,
                ),
            ))
        return score, highlights


# ---- arXiv (free, Atom feed) ----
class ArxivClient(ProviderClient):
    """A term with any matching paper counts as one fixed-confidence hit."""

    name = "arxiv"
    delay = ARXIV_DELAY
    max_queries = 2
    hit_score = 0.5

    def _check(self, text: str) -> ProviderResult:
        terms = extract_capitalized_terms(text)[:self.max_queries]
        return self._run_probes(terms, self._query)

    def _query(self, term: str) -> ProbeOutcome:
        r = self._get(ARXIV_URL, params={"search_query": f'all:"{term}"', "max_results": 5})
        entries = BeautifulSoup(r.text, "xml").find_all("entry")
        if not entries:
            return 0.0, []

        highlight = Highlight(
            text=term,
            source="arXiv.org Scientific Papers",
            score=self.hit_score,
            title="Scientific Literature Match",
            extra=GenericMetadata(reason=f"{len(entries)} arXiv papers match this term"),
        )
        return self.hit_score, [highlight]


# ---- Semantic Scholar (free, aggressively rate limited) ----
class SemanticScholarClient(ProviderClient):
    name = "semantic_scholar"
    delay = SEMANTIC_SCHOLAR_DELAY
    timeout = SEMANTIC_SCHOLAR_TIMEOUT
    max_queries = 1

    def _check(self, text: str) -> ProviderResult:
        phrases = extract_academic_phrases(text)[:self.max_queries]
        return self._run_probes(phrases, self._query)

    def _query(self, phrase: str) -> ProbeOutcome:
        try:
            r = self._get(
                SEMANTIC_SCHOLAR_URL,
                params={"query": phrase, "limit": 3, "fields": "paperId,title,authors,year,url,citationCount"},
                headers={"Accept": "application/json"},
            )
        except requests.HTTPError as e:
            if e.response is not None and e.response.status_code == 429:
                raise ProviderRateLimited() from e
            raise

        papers: List[dict] = r.json().get("data") or []
        if not papers:
            return 0.0, []

        # Conservative: a few hits are common for any academic sentence.
        base = min(0.7, len(papers) * 0.2)
        bonus = 0.1 if any((p.get("citationCount") or 0) > 50 for p in papers) else 0.0
        score = min(0.8, base + bonus)

        highlights = []
        for paper in papers:
            citations = paper.get("citationCount") or 0
            authors = [a.get("name") for a in paper.get("authors") or [] if a.get("name")]
            highlights.append(Highlight(
                text=phrase,
                source=paper.get("url") or f"https://www.semanticscholar.org/paper/{paper.get('paperId')}",
                score=score,
                title=paper.get("title") or "Academic Paper",
                extra=AcademicMetadata(
                    authors=", ".join(authors) if authors else "Unknown Authors",
                    year=paper.get("year"),
                    citation_count=citations,
                    reason=f"Found in academic literature ({citations} citations)",
                ),
            ))
        return score, highlights
