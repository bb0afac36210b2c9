from typing import TYPE_CHECKING, Final, Optional, TypeAlias, cast, final

import redis
from loguru import logger
from overrides import override
from pydantic import BaseModel

from ..models.message import BrokerMessage
from .base import BrokerError, Connection, ConnectionFactory, Publisher, Session, Topic

# 为Redis客户端定义明确的类型
if TYPE_CHECKING:
    from redis import Redis

    RedisClientType: TypeAlias = Redis[str]
else:
    RedisClientType: TypeAlias = redis.Redis


# redis的配置
@final
class RedisConfig(BaseModel):
    host: str = "localhost"
    port: int = 6379
    db: int = 0
    socket_timeout: Optional[float] = 5.0


# 默认配置实例
redis_config: Final[RedisConfig] = RedisConfig()


###################################################################################################
def create_redis_client(config: RedisConfig) -> RedisClientType:
    """
    创建一个独立的Redis客户端(不与其他调用共享连接池)。

    参数:
        config: Redis配置

    返回:
        RedisClientType: Redis客户端实例，已配置为返回字符串
    """
    return cast(
        RedisClientType,
        redis.Redis(
            host=config.host,
            port=config.port,
            db=config.db,
            socket_timeout=config.socket_timeout,
            decode_responses=True,
        ),
    )


###################################################################################################
@final
class RedisPublisher(Publisher):

    def __init__(self, session: "RedisSession", topic: Topic) -> None:
        super().__init__(topic)
        self._session = session

    @override
    def _publish(self, message: BrokerMessage) -> None:
        if self._session.closed:
            raise BrokerError(f"session closed, cannot publish to {self.topic.name}")
        try:
            receivers = self._session.client.publish(
                self.topic.name, message.model_dump_json()
            )
            logger.debug(
                f"Redis PUBLISH {self.topic.name}: {message.properties}, receivers = {receivers}"
            )
        except redis.RedisError as e:
            raise BrokerError(f"Redis error while publishing to {self.topic.name}: {e}") from e


###################################################################################################
@final
class RedisSession(Session):

    def __init__(self, client: RedisClientType) -> None:
        self._client = client
        self._closed = False

    @property
    def client(self) -> RedisClientType:
        return self._client

    @property
    def closed(self) -> bool:
        return self._closed

    @override
    def create_publisher(self, topic: Topic) -> Publisher:
        if self._closed:
            raise BrokerError("session closed, cannot create publisher")
        return RedisPublisher(self, topic)

    @override
    def close(self) -> None:
        self._closed = True


###################################################################################################
@final
class RedisConnection(Connection):

    def __init__(self, client: RedisClientType) -> None:
        self._client = client
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    @override
    def create_session(self) -> Session:
        if self._closed:
            raise BrokerError("connection closed, cannot create session")
        return RedisSession(self._client)

    @override
    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        try:
            self._client.close()
        except redis.RedisError as e:
            raise BrokerError(f"Redis error while closing connection: {e}") from e


###################################################################################################
@final
class RedisConnectionFactory(ConnectionFactory):
    """每次 create_connection 都建立新的Redis连接, 并用 PING 确认代理可达"""

    def __init__(self, config: RedisConfig = redis_config) -> None:
        self._config = config

    @property
    def config(self) -> RedisConfig:
        return self._config

    @override
    def create_connection(self) -> Connection:
        client = create_redis_client(self._config)
        try:
            client.ping()
        except redis.RedisError as e:
            client.close()
            raise BrokerError(
                f"Redis unreachable at {self._config.host}:{self._config.port}: {e}"
            ) from e
        return RedisConnection(client)


###################################################################################################
