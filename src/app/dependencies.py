from .config import get_settings
from .perplexity import PerplexityClient

def get_perplexity_client() -> PerplexityClient:
    return PerplexityClient(get_settings())
