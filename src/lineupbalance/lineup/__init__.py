from lineupbalance.lineup.americano import default_template
from lineupbalance.lineup.template import Court, LineupTemplate

__all__ = [
    "Court",
    "LineupTemplate",
    "default_template",
]
