"""服务注册表

按逻辑名称查找连接工厂与主题, 对应部署环境里的目录服务。
"""

from typing import Any, Dict, List, final
from loguru import logger
from ..broker import RedisConfig, RedisConnectionFactory, Topic, redis_config
from .config import MessagingConfig, messaging_config


###############################################################################################################################################
class RegistryLookupError(LookupError):
    pass


###############################################################################################################################################
@final
class ServiceRegistry:

    def __init__(self) -> None:
        self._bindings: Dict[str, Any] = {}

    ###########################################################################################################################################
    def bind(self, name: str, service: Any) -> None:
        if name in self._bindings:
            logger.warning(f"rebinding {name} in service registry")
        self._bindings[name] = service

    ###########################################################################################################################################
    def unbind(self, name: str) -> None:
        self._bindings.pop(name, None)

    ###########################################################################################################################################
    def lookup(self, name: str) -> Any:
        if name not in self._bindings:
            raise RegistryLookupError(f"{name} is not bound in service registry")
        return self._bindings[name]

    ###########################################################################################################################################
    @property
    def names(self) -> List[str]:
        return list(self._bindings.keys())


###############################################################################################################################################
def create_default_registry(
    config: MessagingConfig = messaging_config,
    broker_config: RedisConfig = redis_config,
) -> ServiceRegistry:
    """
    创建默认的服务注册表

    绑定:
        config.connection_factory_name -> RedisConnectionFactory
        config.topic_name -> Topic
    """
    registry = ServiceRegistry()
    registry.bind(
        config.connection_factory_name, RedisConnectionFactory(broker_config)
    )
    registry.bind(config.topic_name, Topic(name=config.topic_name))
    return registry


###############################################################################################################################################
