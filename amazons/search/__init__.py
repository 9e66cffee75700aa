"""Alpha-beta move selection."""

from .alphabeta import (
    INFTY,
    WINNING_VALUE,
    AlphaBetaSearch,
    SearchConfig,
    SearchResult,
    mobility,
    static_score,
)

__all__ = [
    "AlphaBetaSearch",
    "SearchConfig",
    "SearchResult",
    "INFTY",
    "WINNING_VALUE",
    "mobility",
    "static_score",
]
