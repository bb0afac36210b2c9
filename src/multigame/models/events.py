"""
游戏事件定义

事件分为两个互不相交的族:
- GameEvent: 游戏生命周期事件, 发给游戏内的订阅者
- NotificationEvent: 大厅/目录方向的摘要事件, 发给更轻量的通知订阅者

两个枚举都不混入 str, 所以 GameEvent.CREATE != NotificationEvent.CREATE。
"""

from enum import Enum, StrEnum, unique
from typing import TypeAlias, Union, final


###############################################################################################################################################
@final
@unique
class EventFamily(StrEnum):
    GAME = "GAME"
    NOTIFICATION = "NOTIFICATION"

    @property
    def id_property(self) -> str:
        return f"{self.value}_ID"

    @property
    def event_property(self) -> str:
        return f"{self.value}_EVENT"


###############################################################################################################################################
@final
@unique
class GameEvent(Enum):
    CREATE = "CREATE"
    PLAYER_JOIN = "PLAYER_JOIN"
    DESTROY = "DESTROY"
    BEGIN = "BEGIN"
    PLAYER_CHANGE = "PLAYER_CHANGE"
    MOVE_COMPLETE = "MOVE_COMPLETE"
    STATE_CHANGE = "STATE_CHANGE"
    GAME_CHANGE = "GAME_CHANGE"
    END = "END"

    @property
    def family(self) -> EventFamily:
        return EventFamily.GAME

    def __str__(self) -> str:
        return self.name


###############################################################################################################################################
@final
@unique
class NotificationEvent(Enum):
    CREATE = "CREATE"
    JOIN = "JOIN"
    DESTROY = "DESTROY"

    @property
    def family(self) -> EventFamily:
        return EventFamily.NOTIFICATION

    def __str__(self) -> str:
        return self.name


###############################################################################################################################################
Event: TypeAlias = Union[GameEvent, NotificationEvent]
