"""Multigame event notification layer

Publishes game lifecycle and lobby notification events to a message broker,
and defines the contract for automated game participants.
"""

__version__ = "0.1.0"

from .logger import setup_logger
from .messaging import GameNotifier, MessageSender
from .agent import AbstractAgent

__all__ = [
    "setup_logger",
    "MessageSender",
    "GameNotifier",
    "AbstractAgent",
]
