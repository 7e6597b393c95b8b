"""
Pytest configuration and shared fixtures.
"""

from unittest.mock import MagicMock

import pytest
import requests

from plagiasure.config import ProviderConfig
from plagiasure.utils.rate_limit import RateLimiter

EINSTEIN_TEXT = (
    "The theory of relativity, developed by Albert Einstein, fundamentally "
    "changed our understanding of space, time, and gravity."
)


def make_response(json_data=None, text="", status_code=200):
    """Fake ``requests.Response`` with json(), text and raise_for_status()."""
    r = MagicMock()
    r.status_code = status_code
    r.json.return_value = json_data if json_data is not None else {}
    r.text = text
    if status_code >= 400:
        r.raise_for_status.side_effect = requests.HTTPError(f"{status_code} Error", response=r)
    else:
        r.raise_for_status.return_value = None
    return r


# ============================================================
# Config / HTTP fixtures
# ============================================================


@pytest.fixture
def config():
    """Provider config with no API keys configured."""
    return ProviderConfig()


@pytest.fixture
def keyed_config():
    return ProviderConfig(
        google_api_key="g-key",
        google_engine_id="g-cx",
        bing_api_key="b-key",
        duplichecker_api_key="d-key",
    )


@pytest.fixture
def session():
    return MagicMock()


@pytest.fixture
def no_wait():
    """Rate limiter that never sleeps."""
    return RateLimiter(0)


@pytest.fixture
def crossref_payload():
    return {
        "message": {
            "items": [
                {
                    "DOI": "10.1002/andp.19163540702",
                    "URL": "http://dx.doi.org/10.1002/andp.19163540702",
                    "title": ["Die Grundlage der allgemeinen Relativitätstheorie"],
                    "author": [{"given": "Albert", "family": "Einstein"}],
                    "issued": {"date-parts": [[1916, 1, 1]]},
                    "is-referenced-by-count": 4000,
                },
                {
                    "URL": "https://example.org/relativity-review",
                    "title": [],
                    "author": [
                        {"given": "Marcel", "family": "Grossmann"},
                        {"family": "Hilbert"},
                    ],
                },
            ]
        }
    }


ARXIV_FEED = (
    '<?xml version="1.0" encoding="UTF-8"?>'
    '<feed xmlns="http://www.w3.org/2005/Atom">'
    "<title>arXiv Query</title>"
    "<entry><id>http://arxiv.org/abs/1234.5678v1</id><title>On Albert Einstein</title></entry>"
    "<entry><id>http://arxiv.org/abs/2345.6789v1</id><title>Relativity revisited</title></entry>"
    "</feed>"
)

EMPTY_ARXIV_FEED = (
    '<?xml version="1.0" encoding="UTF-8"?>'
    '<feed xmlns="http://www.w3.org/2005/Atom"><title>arXiv Query</title></feed>'
)
