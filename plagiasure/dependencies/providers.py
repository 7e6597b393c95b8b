from functools import lru_cache
from typing import List

from plagiasure.config import load_provider_config
from plagiasure.utils.aggregator import build_default_providers
from plagiasure.utils.web_utils import ProviderClient


@lru_cache(maxsize=1)
def get_providers() -> List[ProviderClient]:
    """One set of clients per process so their rate limiters span requests."""
    return build_default_providers(load_provider_config())
