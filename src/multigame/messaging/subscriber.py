"""
主题订阅模块

订阅端从 Redis 频道接收 MessageSender 发布的消息:
- 解析失败的消息直接丢弃(记录警告)
- 已过期(超过 time_to_live)的消息丢弃
- 不满足 MessageSelector 的消息丢弃
"""

from typing import Generator, Optional, final

import redis
from loguru import logger
from pydantic import ValidationError

from ..broker import BrokerError, RedisConfig, create_redis_client, redis_config
from ..models import BrokerMessage, MessageSelector
from .config import messaging_config


###############################################################################################################################################
def parse_message(
    raw: str, selector: Optional[MessageSelector] = None
) -> Optional[BrokerMessage]:
    """把频道上的原始 JSON 还原为 BrokerMessage, 不可用时返回 None"""
    try:
        message = BrokerMessage.model_validate_json(raw)
    except ValidationError as e:
        logger.warning(f"discarding malformed message: {e}")
        return None

    if message.is_expired():
        logger.debug(f"discarding expired message: {message.properties}")
        return None

    if selector is not None and not selector.matches(message):
        return None

    return message


###############################################################################################################################################
@final
class RedisTopicSubscriber:

    def __init__(
        self,
        topic_name: str = messaging_config.topic_name,
        selector: Optional[MessageSelector] = None,
        config: RedisConfig = redis_config,
    ) -> None:
        self._topic_name = topic_name
        self._selector = selector
        self._client = create_redis_client(config)
        self._pubsub = self._client.pubsub(ignore_subscribe_messages=True)
        try:
            self._pubsub.subscribe(topic_name)
        except redis.RedisError as e:
            self.close()
            raise BrokerError(f"Redis error while subscribing to {topic_name}: {e}") from e

    ###########################################################################################################################################
    @property
    def topic_name(self) -> str:
        return self._topic_name

    ###########################################################################################################################################
    def get_message(self, timeout: float = 1.0) -> Optional[BrokerMessage]:
        try:
            raw = self._pubsub.get_message(timeout=timeout)
        except redis.RedisError as e:
            raise BrokerError(f"Redis error while reading {self._topic_name}: {e}") from e

        if raw is None or raw.get("type") != "message":
            return None
        return parse_message(raw["data"], self._selector)

    ###########################################################################################################################################
    def listen(self) -> Generator[BrokerMessage, None, None]:
        try:
            for raw in self._pubsub.listen():
                if raw.get("type") != "message":
                    continue
                message = parse_message(raw["data"], self._selector)
                if message is not None:
                    yield message
        except redis.RedisError as e:
            raise BrokerError(f"Redis error while listening on {self._topic_name}: {e}") from e

    ###########################################################################################################################################
    def close(self) -> None:
        try:
            self._pubsub.close()
        finally:
            self._client.close()


###############################################################################################################################################
