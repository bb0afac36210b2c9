"""
Event dispatch and sequencing for the multigame server.

This module provides:
- MessageSender: classify, sequence and publish one event (best effort)
- GameNotifier: named operations for game occurrences
- MessageSequencer: per game monotonic message ids
- ServiceRegistry: name based lookup of connection factory and topic
- RedisTopicSubscriber: receiving side with selectors and expiry
"""

from typing import List

from .config import MessagingConfig, messaging_config
from .sequence import MessageSequencer, message_sequencer
from .classifier import EventClassification, classify_event
from .registry import RegistryLookupError, ServiceRegistry, create_default_registry
from .sender import MessageSender
from .notifier import GameNotifier
from .subscriber import RedisTopicSubscriber, parse_message

__all__: List[str] = [
    "MessagingConfig",
    "messaging_config",
    "MessageSequencer",
    "message_sequencer",
    "EventClassification",
    "classify_event",
    "RegistryLookupError",
    "ServiceRegistry",
    "create_default_registry",
    "MessageSender",
    "GameNotifier",
    "RedisTopicSubscriber",
    "parse_message",
]
