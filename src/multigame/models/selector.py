from typing import Optional, final
from pydantic import BaseModel
from .events import EventFamily
from .message import BrokerMessage


###############################################################################################################################################
@final
class MessageSelector(BaseModel):
    """
    订阅端的消息过滤条件

    family 为空时接收两个族的消息; game_id 为空时接收所有游戏的消息。
    game_id 与该消息所属族的 id 属性(GAME_ID 或 NOTIFICATION_ID)比较。
    """

    family: Optional[EventFamily] = None
    game_id: Optional[int] = None

    ###########################################################################################################################################
    def matches(self, message: BrokerMessage) -> bool:
        families = [self.family] if self.family is not None else list(EventFamily)
        for family in families:
            if message.get_property(family.event_property) is None:
                continue
            if self.game_id is None:
                return True
            if message.get_property(family.id_property) == self.game_id:
                return True
        return False


###############################################################################################################################################
