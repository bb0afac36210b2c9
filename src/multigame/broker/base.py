"""代理(broker)抽象

连接工厂 -> 连接 -> 会话 -> 发布者 的分层与 JMS 风格一致。
连接与会话都是上下文管理器, 离开 with 块时一定会被关闭,
即使发布过程中抛出了异常。
"""

from abc import ABC, abstractmethod
from types import TracebackType
from typing import Optional, Self, Type, final
from pydantic import BaseModel
from ..models.message import BrokerMessage


###############################################################################################################################################
class BrokerError(Exception):
    """代理层的所有失败(连接、会话、发布)都以此异常抛出"""


###############################################################################################################################################
@final
class Topic(BaseModel):
    name: str


###############################################################################################################################################
class Publisher(ABC):

    def __init__(self, topic: Topic) -> None:
        self._topic = topic
        self._time_to_live: int = 0

    @property
    def topic(self) -> Topic:
        return self._topic

    @property
    def time_to_live(self) -> int:
        return self._time_to_live

    @time_to_live.setter
    def time_to_live(self, value: int) -> None:
        if value < 0:
            raise ValueError(f"time_to_live must be non-negative, got {value}")
        self._time_to_live = value

    def send(self, message: BrokerMessage) -> None:
        message.stamp(self._time_to_live)
        self._publish(message)

    @abstractmethod
    def _publish(self, message: BrokerMessage) -> None:
        pass


###############################################################################################################################################
class Session(ABC):

    @abstractmethod
    def create_publisher(self, topic: Topic) -> Publisher:
        pass

    def create_message(self) -> BrokerMessage:
        return BrokerMessage()

    @abstractmethod
    def close(self) -> None:
        pass

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_value: Optional[BaseException],
        traceback: Optional[TracebackType],
    ) -> None:
        self.close()


###############################################################################################################################################
class Connection(ABC):

    @abstractmethod
    def create_session(self) -> Session:
        pass

    @abstractmethod
    def close(self) -> None:
        pass

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_value: Optional[BaseException],
        traceback: Optional[TracebackType],
    ) -> None:
        self.close()


###############################################################################################################################################
class ConnectionFactory(ABC):

    @abstractmethod
    def create_connection(self) -> Connection:
        pass


###############################################################################################################################################
