from .search import search_handler
from .utils import format_search_results
