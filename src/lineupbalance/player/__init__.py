from lineupbalance.player.base_player import Player
from lineupbalance.player.factory import (
    create_player,
    create_player_from_dict,
    create_roster,
    default_roster,
)

__all__ = [
    "Player",
    "create_player",
    "create_player_from_dict",
    "create_roster",
    "default_roster",
]
