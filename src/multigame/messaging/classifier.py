from typing import Any, Optional, final
from loguru import logger
from pydantic import BaseModel
from ..models.events import EventFamily, GameEvent, NotificationEvent


###############################################################################################################################################
@final
class EventClassification(BaseModel):
    family: EventFamily
    id_property: str
    event_property: str


###############################################################################################################################################
def classify_event(event: Any) -> Optional[EventClassification]:
    """
    判断事件所属的族以及需要附加的属性键

    返回:
        EventClassification: GameEvent -> GAME_ID/GAME_EVENT,
            NotificationEvent -> NOTIFICATION_ID/NOTIFICATION_EVENT
        None: 不属于任何已知族, 调用方不附加分类属性
    """
    match event:
        case GameEvent() | NotificationEvent():
            family: EventFamily = event.family
            return EventClassification(
                family=family,
                id_property=family.id_property,
                event_property=family.event_property,
            )
        case _:
            logger.debug(f"unclassified event: {event!r}")
            return None


###############################################################################################################################################
