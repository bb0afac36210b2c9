from datetime import datetime
from typing import List, final
from pydantic import BaseModel
from .game import Game, GameState


###############################################################################################################################################
@final
class GameSummary(BaseModel):
    """
    游戏的轻量摘要

    面向大厅/通知订阅者, 只携带列表展示所需的字段,
    不包含走法历史等完整的游戏数据。
    """

    id: int
    game_type: str
    state: GameState
    players: List[str]
    player_count: int
    max_players: int
    created: datetime

    ###########################################################################################################################################
    @classmethod
    def from_game(cls, game: Game) -> "GameSummary":
        return cls(
            id=game.id,
            game_type=game.game_type,
            state=game.state,
            players=[player.name for player in game.players],
            player_count=len(game.players),
            max_players=game.max_players,
            created=game.created,
        )


###############################################################################################################################################
