"""测试用的代理替身"""

from typing import Any, Dict, List

from src.multigame.broker import (
    BrokerError,
    Connection,
    ConnectionFactory,
    Publisher,
    Session,
    Topic,
)
from src.multigame.messaging import ServiceRegistry, messaging_config
from src.multigame.models import BrokerMessage

TEST_TOPIC = messaging_config.topic_name


###############################################################################################################################################
class FailingPublisher(Publisher):
    def _publish(self, message: BrokerMessage) -> None:
        raise BrokerError("simulated publish failure")


class TrackingSession(Session):
    def __init__(self) -> None:
        self.closed = False

    def create_publisher(self, topic: Topic) -> Publisher:
        return FailingPublisher(topic)

    def close(self) -> None:
        self.closed = True


class TrackingConnection(Connection):
    def __init__(self) -> None:
        self.closed = False
        self.sessions: List[TrackingSession] = []

    def create_session(self) -> Session:
        session = TrackingSession()
        self.sessions.append(session)
        return session

    def close(self) -> None:
        self.closed = True


class FailingPublishConnectionFactory(ConnectionFactory):
    """连接与会话都能建立, 但每次发布都失败"""

    def __init__(self) -> None:
        self.connections: List[TrackingConnection] = []

    def create_connection(self) -> Connection:
        connection = TrackingConnection()
        self.connections.append(connection)
        return connection


###############################################################################################################################################
def make_registry(factory: ConnectionFactory) -> ServiceRegistry:
    registry = ServiceRegistry()
    registry.bind(messaging_config.connection_factory_name, factory)
    registry.bind(TEST_TOPIC, Topic(name=TEST_TOPIC))
    return registry


def error_records(records: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    return [record for record in records if record["level"].name == "ERROR"]
