"""Test configuration and fixtures."""

from typing import Any, Dict, Generator, List

import pytest
from loguru import logger

from src.multigame.broker import InMemoryBroker, InMemoryConnectionFactory
from src.multigame.messaging import (
    GameNotifier,
    MessageSender,
    MessageSequencer,
    ServiceRegistry,
)
from src.multigame.models import Game, GamePlayer, GameState
from tests.doubles import make_registry


@pytest.fixture
def broker() -> InMemoryBroker:
    return InMemoryBroker()


@pytest.fixture
def registry(broker: InMemoryBroker) -> ServiceRegistry:
    return make_registry(InMemoryConnectionFactory(broker))


@pytest.fixture
def sequencer() -> MessageSequencer:
    return MessageSequencer()


@pytest.fixture
def sender(registry: ServiceRegistry, sequencer: MessageSequencer) -> MessageSender:
    return MessageSender(registry=registry, sequencer=sequencer)


@pytest.fixture
def notifier(sender: MessageSender) -> GameNotifier:
    return GameNotifier(sender)


@pytest.fixture
def sample_game() -> Game:
    """Create a sample game for testing."""
    return Game(
        id=42,
        game_type="Gente",
        state=GameState.PLAY,
        players=[
            GamePlayer(name="alice", color="RED", turn=True),
            GamePlayer(name="bob", color="BLUE"),
        ],
    )


@pytest.fixture
def log_records() -> Generator[List[Dict[str, Any]], None, None]:
    """收集测试期间 loguru 输出的日志记录"""
    records: List[Dict[str, Any]] = []
    handler_id = logger.add(lambda message: records.append(message.record), level="DEBUG")
    yield records
    logger.remove(handler_id)
