"""
消息发送模块

MessageSender 代表游戏引擎把事件发布到代理上:
1. 通过服务注册表(惰性)解析连接工厂与主题
2. 每次调用建立独立的连接与会话, 调用结束即关闭
3. 分类事件, 附加游戏 id、事件名与按游戏递增的消息序号
4. 发布, 失败只记录日志, 从不向调用方抛出异常

发送是尽力而为的: 调用方无法感知投递是否成功, 也不应依赖它。
"""

import asyncio
from typing import Optional, final

from loguru import logger
from pydantic import BaseModel

from ..broker import ConnectionFactory, Topic
from ..models.events import Event
from ..models.message import MESSAGE_ID
from .classifier import classify_event
from .config import MessagingConfig, messaging_config
from .registry import ServiceRegistry, create_default_registry
from .sequence import MessageSequencer, message_sequencer


###############################################################################################################################################
@final
class MessageSender:

    def __init__(
        self,
        topic_name: Optional[str] = None,
        registry: Optional[ServiceRegistry] = None,
        sequencer: MessageSequencer = message_sequencer,
        config: MessagingConfig = messaging_config,
    ) -> None:
        """
        参数:
            topic_name: 主题在注册表里的名称, 默认 config.topic_name
            registry: 服务注册表; 传入时立即解析, 否则首次发送时用默认注册表解析
            sequencer: 消息序号分配器, 默认进程内共享的实例
            config: 消息配置
        """
        self._config = config
        self._topic_name: str = topic_name or config.topic_name
        self._registry = registry
        self._sequencer = sequencer
        self._connection_factory: Optional[ConnectionFactory] = None
        self._topic: Optional[Topic] = None

        if self._registry is not None:
            self.initialize()

    ###############################################################################################################################################
    @property
    def topic_name(self) -> str:
        return self._topic_name

    ###############################################################################################################################################
    @property
    def sequencer(self) -> MessageSequencer:
        return self._sequencer

    ###############################################################################################################################################
    @property
    def initialized(self) -> bool:
        return self._connection_factory is not None and self._topic is not None

    ###############################################################################################################################################
    def initialize(self) -> None:
        """解析尚未解析的连接工厂与主题, 失败只记录日志"""
        if self.initialized:
            return

        try:
            if self._registry is None:
                self._registry = create_default_registry(self._config)

            if self._connection_factory is None:
                self._connection_factory = self._registry.lookup(
                    self._config.connection_factory_name
                )
            if self._topic is None:
                self._topic = self._registry.lookup(self._topic_name)

        except Exception as e:
            logger.error(
                f"Unable to get connection and topic from connection factory "
                f"{self._config.connection_factory_name} and topic {self._topic_name}: {e}"
            )

    ###############################################################################################################################################
    def send_message(
        self, game_id: int, event: Event, body: Optional[BaseModel] = None
    ) -> None:
        if not self.initialized:
            self.initialize()

        if self._connection_factory is None or self._topic is None:
            logger.warning(f"dropping event {event} for game {game_id}")
            return

        try:
            with self._connection_factory.create_connection() as connection:
                with connection.create_session() as session:
                    publisher = session.create_publisher(self._topic)
                    publisher.time_to_live = self._config.time_to_live
                    message = session.create_message()

                    classification = classify_event(event)
                    if classification is not None:
                        message.set_property(classification.id_property, game_id)
                        message.set_property(classification.event_property, str(event))

                    # 完成消息并发送
                    message.set_property(MESSAGE_ID, self._sequencer.next(game_id))
                    if body is not None:
                        message.set_object(body)

                    publisher.send(message)
                    logger.debug(
                        f"sent {event} for game {game_id}: {message.properties}"
                    )

        except Exception as e:
            logger.error(
                f"Not able to send message for event: {event} with body: [{body}], error: {e}"
            )

    ###############################################################################################################################################
    async def async_send_message(
        self, game_id: int, event: Event, body: Optional[BaseModel] = None
    ) -> None:
        """在工作线程中发送, 不阻塞事件循环"""
        await asyncio.to_thread(self.send_message, game_id, event, body)


###############################################################################################################################################
