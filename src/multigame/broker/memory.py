"""进程内代理

不依赖外部服务的代理实现: 单进程部署或本地调试时使用。
发布的消息按主题保存, 并同步投递给注册在该主题上的监听者。
"""

from collections import defaultdict
from typing import Callable, Dict, List, Optional, Tuple, TypeAlias, final

from loguru import logger
from overrides import override

from ..models.message import BrokerMessage
from ..models.selector import MessageSelector
from .base import BrokerError, Connection, ConnectionFactory, Publisher, Session, Topic

MessageListener: TypeAlias = Callable[[BrokerMessage], None]


###############################################################################################################################################
@final
class InMemoryBroker:

    def __init__(self) -> None:
        self._published: Dict[str, List[BrokerMessage]] = defaultdict(list)
        self._listeners: Dict[
            str, List[Tuple[MessageListener, Optional[MessageSelector]]]
        ] = defaultdict(list)
        self.available: bool = True
        self.open_connections: int = 0
        self.open_sessions: int = 0

    ###########################################################################################################################################
    def subscribe(
        self,
        topic_name: str,
        listener: MessageListener,
        selector: Optional[MessageSelector] = None,
    ) -> None:
        self._listeners[topic_name].append((listener, selector))

    ###########################################################################################################################################
    def published(self, topic_name: str) -> List[BrokerMessage]:
        return list(self._published.get(topic_name, []))

    ###########################################################################################################################################
    def deliver(self, topic_name: str, message: BrokerMessage) -> None:
        self._published[topic_name].append(message)
        for listener, selector in self._listeners.get(topic_name, []):
            if selector is not None and not selector.matches(message):
                continue
            # 监听者的异常不影响发布方, 也不影响其他监听者
            try:
                listener(message.model_copy(deep=True))
            except Exception as e:
                logger.error(f"listener error on topic {topic_name}: {e}")


###############################################################################################################################################
@final
class InMemoryPublisher(Publisher):

    def __init__(self, broker: InMemoryBroker, topic: Topic) -> None:
        super().__init__(topic)
        self._broker = broker

    @override
    def _publish(self, message: BrokerMessage) -> None:
        if not self._broker.available:
            raise BrokerError(f"broker unavailable, cannot publish to {self.topic.name}")
        self._broker.deliver(self.topic.name, message.model_copy(deep=True))


###############################################################################################################################################
@final
class InMemorySession(Session):

    def __init__(self, broker: InMemoryBroker) -> None:
        self._broker = broker
        self._closed = False
        self._broker.open_sessions += 1

    @override
    def create_publisher(self, topic: Topic) -> Publisher:
        if self._closed:
            raise BrokerError("session closed, cannot create publisher")
        return InMemoryPublisher(self._broker, topic)

    @override
    def close(self) -> None:
        if not self._closed:
            self._closed = True
            self._broker.open_sessions -= 1


###############################################################################################################################################
@final
class InMemoryConnection(Connection):

    def __init__(self, broker: InMemoryBroker) -> None:
        self._broker = broker
        self._closed = False
        self._broker.open_connections += 1

    @override
    def create_session(self) -> Session:
        if self._closed:
            raise BrokerError("connection closed, cannot create session")
        return InMemorySession(self._broker)

    @override
    def close(self) -> None:
        if not self._closed:
            self._closed = True
            self._broker.open_connections -= 1


###############################################################################################################################################
@final
class InMemoryConnectionFactory(ConnectionFactory):

    def __init__(self, broker: InMemoryBroker) -> None:
        self._broker = broker

    @property
    def broker(self) -> InMemoryBroker:
        return self._broker

    @override
    def create_connection(self) -> Connection:
        if not self._broker.available:
            raise BrokerError("broker unavailable, cannot create connection")
        return InMemoryConnection(self._broker)


###############################################################################################################################################
