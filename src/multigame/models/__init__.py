from typing import List

from .game import *
from .summary import *
from .events import *
from .message import *
from .selector import *

__all__: List[str] = [
    # 游戏模型
    "GameState",
    "MoveStatus",
    "SuggestionStatus",
    "GamePlayer",
    "Cell",
    "Move",
    "Game",
    "Suggestion",
    "GameSummary",
    # 事件
    "EventFamily",
    "GameEvent",
    "NotificationEvent",
    "Event",
    # 消息
    "PropertyValue",
    "MESSAGE_ID",
    "BrokerMessage",
    "current_time_millis",
    "MessageSelector",
]
