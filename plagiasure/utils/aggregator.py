"""
Multi-provider plagiarism detection.

Every provider runs concurrently; each one's failure is absorbed as a zero
result. The overall score is the strongest single provider score, not an
average, so one confident match is not diluted by unconfigured providers.
"""
import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Dict, List, Optional, Sequence

from plagiasure.config import DEDUP_PREFIX_CHARS, MAX_HIGHLIGHTS, ProviderConfig, load_provider_config
from plagiasure.schemas.plagiarism_schemas import DetectionResult, Highlight, ProviderResult
from plagiasure.utils.academic_providers import ArxivClient, CrossRefClient, SemanticScholarClient
from plagiasure.utils.search_providers import (
    BingSearchClient,
    DuckDuckGoClient,
    DupliCheckerClient,
    GoogleSearchClient,
)
from plagiasure.utils.web_utils import ProviderClient

logger = logging.getLogger(__name__)


def build_default_providers(config: Optional[ProviderConfig] = None) -> List[ProviderClient]:
    config = config or load_provider_config()
    return [
        DupliCheckerClient(config),
        GoogleSearchClient(config),
        CrossRefClient(config),
        ArxivClient(config),
        BingSearchClient(config),
        DuckDuckGoClient(config),
        SemanticScholarClient(config),
    ]


def remove_duplicate_highlights(highlights: Sequence[Highlight], prefix_chars: int = DEDUP_PREFIX_CHARS) -> List[Highlight]:
    """
    Drop highlights whose lowercased, trimmed text prefix was already seen.
    Input is stably sorted by descending score first, so the strongest of a
    set of duplicates survives regardless of provider completion order.
    """
    seen = set()
    unique: List[Highlight] = []
    for h in sorted(highlights, key=lambda h: h.score, reverse=True):
        key = h.dedup_key(prefix_chars)
        if key in seen:
            continue
        seen.add(key)
        unique.append(h)
    return unique


def merge_provider_results(results: Sequence[ProviderResult], max_highlights: int = MAX_HIGHLIGHTS) -> DetectionResult:
    score = max((r.score for r in results), default=0.0)

    all_highlights: List[Highlight] = []
    for r in results:
        all_highlights.extend(r.highlights)

    top = remove_duplicate_highlights(all_highlights)[:max_highlights]
    sources = list(dict.fromkeys(h.source for h in top))
    return DetectionResult(score=score, highlights=top, sources=sources)


def _run_providers(providers: Sequence[ProviderClient], text: str) -> List[ProviderResult]:
    """Fire all provider checks, wait for all; results come back in provider order."""
    if not providers:
        return []

    by_index: Dict[int, ProviderResult] = {}
    with ThreadPoolExecutor(max_workers=len(providers)) as ex:
        future_to_idx = {ex.submit(p.check, text): i for i, p in enumerate(providers)}
        for fut in as_completed(future_to_idx):
            i = future_to_idx[fut]
            try:
                by_index[i] = fut.result()
            except Exception as e:
                logger.error(f"Provider {providers[i].name} raised despite its guard: {e}", exc_info=True)
                by_index[i] = ProviderResult.empty(providers[i].name)

    return [by_index[i] for i in range(len(providers))]


def detect_plagiarism(
    text: str,
    providers: Optional[Sequence[ProviderClient]] = None,
    config: Optional[ProviderConfig] = None,
) -> DetectionResult:
    """
    Check ``text`` against every provider and merge the evidence.

    Never raises: a failure anywhere degrades to "no evidence found".
    """
    try:
        if providers is None:
            providers = build_default_providers(config)

        logger.info(f"Starting multi-API plagiarism detection: {len(providers)} providers, {len(text)} chars")

        results = _run_providers(providers, text)
        detection = merge_provider_results(results)

        logger.info(
            f"✅ Detection complete: score {detection.score:.2f}, "
            f"{len(detection.highlights)} highlights, {len(detection.sources)} sources"
        )
        return detection
    except Exception:
        logger.exception("❌ Multi-API plagiarism detection failed")
        return DetectionResult.empty()
