import time
from typing import Any, Dict, Final, Optional, TypeAlias, Union, final
from pydantic import BaseModel

# 消息属性的值类型
PropertyValue: TypeAlias = Union[int, str]

# 消息序号属性, 每个游戏 id 独立递增
MESSAGE_ID: Final[str] = "MESSAGE_ID"


###############################################################################################################################################
def current_time_millis() -> int:
    return int(time.time() * 1000)


###############################################################################################################################################
@final
class BrokerMessage(BaseModel):
    """
    发布到代理(broker)上的消息信封

    属性:
        properties: 字符串/整数属性, 订阅者用来做选择过滤
        body: 可选的消息体, 为某个 pydantic 模型的 JSON 兼容形式(字典, 列表或标量)
        body_type: 消息体的模型类名, 方便订阅者反序列化
        time_to_live: 存活时间(毫秒), 0 表示永不过期
        timestamp: 发送时间(毫秒)
        expiration: 过期时间(毫秒), 0 表示永不过期
    """

    properties: Dict[str, PropertyValue] = {}
    body: Optional[Any] = None
    body_type: Optional[str] = None
    time_to_live: int = 0
    timestamp: int = 0
    expiration: int = 0

    ###########################################################################################################################################
    def set_property(self, key: str, value: PropertyValue) -> None:
        self.properties[key] = value

    ###########################################################################################################################################
    def get_property(self, key: str) -> Optional[PropertyValue]:
        return self.properties.get(key, None)

    ###########################################################################################################################################
    def set_object(self, body: BaseModel) -> None:
        self.body = body.model_dump(mode="json")
        self.body_type = type(body).__name__

    ###########################################################################################################################################
    def stamp(self, time_to_live: int, now: Optional[int] = None) -> None:
        """由发布者在发送时调用, 写入发送时间与过期时间"""
        self.timestamp = now if now is not None else current_time_millis()
        self.time_to_live = time_to_live
        self.expiration = self.timestamp + time_to_live if time_to_live > 0 else 0

    ###########################################################################################################################################
    def is_expired(self, now: Optional[int] = None) -> bool:
        if self.expiration == 0:
            return False
        return (now if now is not None else current_time_millis()) > self.expiration


###############################################################################################################################################
