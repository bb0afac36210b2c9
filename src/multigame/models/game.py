from datetime import datetime
from enum import StrEnum, unique
from typing import List, Optional, final
from pydantic import BaseModel, Field


###############################################################################################################################################
@final
@unique
class GameState(StrEnum):
    WAITING = "WAITING"  # 等待玩家加入
    BEGIN = "BEGIN"
    PLAY = "PLAY"
    END = "END"


###############################################################################################################################################
@final
@unique
class MoveStatus(StrEnum):
    UNVERIFIED = "UNVERIFIED"
    VERIFIED = "VERIFIED"
    INVALID = "INVALID"
    MOVED = "MOVED"
    EVALUATED = "EVALUATED"


###############################################################################################################################################
@final
@unique
class SuggestionStatus(StrEnum):
    UNEVALUATED = "UNEVALUATED"
    EVALUATED = "EVALUATED"
    ACCEPT = "ACCEPT"
    REJECT = "REJECT"


###############################################################################################################################################
@final
class GamePlayer(BaseModel):
    name: str
    color: str = ""
    turn: bool = False


###############################################################################################################################################
@final
class Cell(BaseModel):
    row: int
    column: int
    color: str = ""


###############################################################################################################################################
@final
class Move(BaseModel):
    id: int = 0
    player: GamePlayer
    current_cell: Optional[Cell] = None  # 为空表示落子(没有起点)
    destination_cell: Optional[Cell] = None
    status: MoveStatus = MoveStatus.UNVERIFIED

    ###########################################################################################################################################
    def same_as(self, other: "Move") -> bool:
        """
        判断两个走法是否描述同一个动作

        只比较玩家与起止格子, 忽略 id 与 status,
        因为同一个走法在规则引擎验证前后 status 会变化。
        """
        return (
            self.player.name == other.player.name
            and self.current_cell == other.current_cell
            and self.destination_cell == other.destination_cell
        )


###############################################################################################################################################
@final
class Game(BaseModel):
    id: int
    game_type: str = ""
    state: GameState = GameState.WAITING
    players: List[GamePlayer] = []
    moves: List[Move] = []
    max_players: int = 4
    created: datetime = Field(default_factory=datetime.now)

    @property
    def is_over(self) -> bool:
        return self.state == GameState.END


###############################################################################################################################################
@final
class Suggestion(BaseModel):
    move: Move
    suggestor: GamePlayer
    status: SuggestionStatus = SuggestionStatus.UNEVALUATED


###############################################################################################################################################
