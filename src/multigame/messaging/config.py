from typing import Final, final
from pydantic import BaseModel


@final
class MessagingConfig(BaseModel):
    connection_factory_name: str = "MultiGameConnectionFactory"
    topic_name: str = "MultiGame"
    # 消息存活时间(毫秒), 过期后代理/订阅者可以丢弃
    time_to_live: int = 120000


"""
MessagingConfig() - 默认连接工厂 MultiGameConnectionFactory, 主题 MultiGame
MessagingConfig(topic_name="MultiGameTest") - 自定义主题
"""

# 默认配置实例
messaging_config: Final[MessagingConfig] = MessagingConfig()
