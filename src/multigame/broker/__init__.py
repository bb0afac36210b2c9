"""
Broker access layer for the multigame event notification layer.

This module provides:
- Abstract connection factory / connection / session / publisher
- Redis pub/sub implementation
- In-process implementation for single process deployments
"""

from typing import List

from .base import *
from .redis_broker import *
from .memory import *

__all__: List[str] = [
    "BrokerError",
    "Topic",
    "Publisher",
    "Session",
    "Connection",
    "ConnectionFactory",
    "RedisConfig",
    "redis_config",
    "create_redis_client",
    "RedisPublisher",
    "RedisSession",
    "RedisConnection",
    "RedisConnectionFactory",
    "MessageListener",
    "InMemoryBroker",
    "InMemoryPublisher",
    "InMemorySession",
    "InMemoryConnection",
    "InMemoryConnectionFactory",
]
