"""
Shared HTTP plumbing and the contract every external provider client follows.

``ProviderClient.check`` never raises: missing keys, timeouts, bad status
codes and malformed bodies all come back as a zero-score, empty result.
"""
import logging
from typing import Callable, Iterable, List, Optional, Tuple

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from plagiasure.config import ProviderConfig
from plagiasure.schemas.plagiarism_schemas import Highlight, ProviderResult
from plagiasure.utils.rate_limit import RateLimiter

logger = logging.getLogger(__name__)

ProbeOutcome = Tuple[float, List[Highlight]]


class ProviderRateLimited(Exception):
    """Raised by a probe when the provider answered 429; stops the probe loop."""


# ---- Session ----
def _make_session(user_agent: str) -> requests.Session:
    s = requests.Session()
    # Failed calls are not retried within one detection run.
    retries = Retry(total=0, raise_on_status=False)
    s.mount("https://", HTTPAdapter(max_retries=retries, pool_connections=20, pool_maxsize=20))
    s.mount("http://", HTTPAdapter(max_retries=retries, pool_connections=20, pool_maxsize=20))
    s.headers.update({
        "User-Agent": user_agent,
        "Accept": "application/json, application/atom+xml;q=0.9, */*;q=0.8",
        "Accept-Language": "en-US,en;q=0.5",
    })
    return s


_SESSION: Optional[requests.Session] = None


def get_session(config: ProviderConfig) -> requests.Session:
    global _SESSION
    if _SESSION is None:
        _SESSION = _make_session(config.user_agent)
    return _SESSION


# ---- Provider contract ----
class ProviderClient:
    name = "provider"
    delay = 1.0
    timeout: Optional[float] = None

    def __init__(
        self,
        config: ProviderConfig,
        session: Optional[requests.Session] = None,
        rate_limiter: Optional[RateLimiter] = None,
    ):
        self.config = config
        self.session = session if session is not None else get_session(config)
        self.rate_limiter = rate_limiter if rate_limiter is not None else RateLimiter(self.delay)

    def is_configured(self) -> bool:
        return True

    def check(self, text: str) -> ProviderResult:
        if not self.is_configured():
            logger.info(f"{self.name} not configured, skipping")
            return ProviderResult.empty(self.name)

        try:
            result = self._check(text)
        except Exception as e:
            logger.warning(f"{self.name} check failed: {e}", exc_info=True)
            return ProviderResult.empty(self.name)

        logger.info(f"{self.name} found {len(result.highlights)} matches with max score {result.score:.2f}")
        return result

    def _check(self, text: str) -> ProviderResult:
        raise NotImplementedError

    # ---- helpers for subclasses ----
    def _request_timeout(self) -> float:
        return self.timeout if self.timeout is not None else self.config.request_timeout

    def _get(self, url: str, **kwargs) -> requests.Response:
        self.rate_limiter.wait()
        r = self.session.get(url, timeout=self._request_timeout(), **kwargs)
        r.raise_for_status()
        return r

    def _post(self, url: str, **kwargs) -> requests.Response:
        self.rate_limiter.wait()
        r = self.session.post(url, timeout=self._request_timeout(), **kwargs)
        r.raise_for_status()
        return r

    def _run_probes(self, probes: Iterable[str], query: Callable[[str], ProbeOutcome]) -> ProviderResult:
        """
        Query probes one after another. A failing probe is logged and
        skipped; highlights from earlier probes are kept.
        """
        max_score = 0.0
        highlights: List[Highlight] = []
        for probe in probes:
            try:
                score, found = query(probe)
            except ProviderRateLimited:
                logger.warning(f"{self.name} rate limit reached, skipping remaining probes")
                break
            except Exception as e:
                logger.warning(f"{self.name} query failed for '{probe[:60]}': {e}")
                continue
            max_score = max(max_score, score)
            highlights.extend(found)
        return ProviderResult(provider=self.name, score=max_score, highlights=highlights)
