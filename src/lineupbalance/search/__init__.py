from lineupbalance.search.config import SearchConfig, load_config
from lineupbalance.search.engine import BestResult, LineupSearch, SearchResult
from lineupbalance.search.fitness import Score, evaluate, match_differences
from lineupbalance.search.shuffler import PermutationGenerator

__all__ = [
    "BestResult",
    "LineupSearch",
    "PermutationGenerator",
    "Score",
    "SearchConfig",
    "SearchResult",
    "evaluate",
    "load_config",
    "match_differences",
]
