"""
Tests for the game models, the message envelope and message selectors.
"""

from pydantic import RootModel

from src.multigame.messaging import parse_message
from src.multigame.models import (
    MESSAGE_ID,
    BrokerMessage,
    Cell,
    EventFamily,
    Game,
    GamePlayer,
    GameState,
    GameSummary,
    Move,
    MoveStatus,
    MessageSelector,
)


class TestGameModels:
    """Test cases for Game, Move and GameSummary."""

    def test_is_over(self) -> None:
        assert not Game(id=1).is_over
        assert Game(id=1, state=GameState.END).is_over

    def test_move_same_as_ignores_status_and_id(self) -> None:
        player = GamePlayer(name="alice")
        move = Move(id=1, player=player, destination_cell=Cell(row=1, column=2))
        verified = Move(
            id=7,
            player=GamePlayer(name="alice", turn=True),
            destination_cell=Cell(row=1, column=2),
            status=MoveStatus.VERIFIED,
        )
        other = Move(player=player, destination_cell=Cell(row=2, column=2))

        assert move.same_as(verified)
        assert not move.same_as(other)

    def test_summary_from_game(self, sample_game: Game) -> None:
        summary = GameSummary.from_game(sample_game)

        assert summary.id == sample_game.id
        assert summary.game_type == "Gente"
        assert summary.state == GameState.PLAY
        assert summary.players == ["alice", "bob"]
        assert summary.player_count == 2
        assert summary.max_players == 4
        assert summary.created == sample_game.created


class TestBrokerMessage:
    """Test cases for the message envelope."""

    def test_properties(self) -> None:
        message = BrokerMessage()
        message.set_property("GAME_ID", 3)
        message.set_property("GAME_EVENT", "END")

        assert message.get_property("GAME_ID") == 3
        assert message.get_property("GAME_EVENT") == "END"
        assert message.get_property("MISSING") is None

    def test_set_object(self) -> None:
        message = BrokerMessage()
        message.set_object(GamePlayer(name="alice", color="RED"))

        assert message.body_type == "GamePlayer"
        assert message.body == {"name": "alice", "color": "RED", "turn": False}

    def test_set_object_with_root_model(self) -> None:
        message = BrokerMessage()
        message.set_property("GAME_ID", 3)
        message.set_property("GAME_EVENT", "PLAYER_CHANGE")
        message.set_object(
            RootModel[list[GamePlayer]]([GamePlayer(name="alice"), GamePlayer(name="bob")])
        )

        restored = parse_message(message.model_dump_json())

        assert restored is not None
        assert restored.body == [
            {"name": "alice", "color": "", "turn": False},
            {"name": "bob", "color": "", "turn": False},
        ]

    def test_stamp_and_expiry(self) -> None:
        message = BrokerMessage()
        message.stamp(120000, now=1_000)

        assert message.timestamp == 1_000
        assert message.expiration == 121_000
        assert not message.is_expired(now=121_000)
        assert message.is_expired(now=121_001)

    def test_zero_time_to_live_never_expires(self) -> None:
        message = BrokerMessage()
        message.stamp(0, now=1_000)

        assert message.expiration == 0
        assert not message.is_expired(now=10**15)

    def test_json_round_trip_keeps_property_types(self) -> None:
        message = BrokerMessage()
        message.set_property("GAME_ID", 3)
        message.set_property("GAME_EVENT", "END")
        message.set_property(MESSAGE_ID, 12)

        restored = BrokerMessage.model_validate_json(message.model_dump_json())

        assert restored.properties == {"GAME_ID": 3, "GAME_EVENT": "END", MESSAGE_ID: 12}


def game_message(game_id: int) -> BrokerMessage:
    message = BrokerMessage()
    message.set_property("GAME_ID", game_id)
    message.set_property("GAME_EVENT", "BEGIN")
    return message


def notification_message(game_id: int) -> BrokerMessage:
    message = BrokerMessage()
    message.set_property("NOTIFICATION_ID", game_id)
    message.set_property("NOTIFICATION_EVENT", "CREATE")
    return message


class TestMessageSelector:
    """Test cases for MessageSelector."""

    def test_empty_selector_matches_classified_messages(self) -> None:
        selector = MessageSelector()
        assert selector.matches(game_message(1))
        assert selector.matches(notification_message(1))
        assert not selector.matches(BrokerMessage())

    def test_family_filter(self) -> None:
        selector = MessageSelector(family=EventFamily.NOTIFICATION)
        assert selector.matches(notification_message(1))
        assert not selector.matches(game_message(1))

    def test_game_id_filter(self) -> None:
        selector = MessageSelector(family=EventFamily.GAME, game_id=5)
        assert selector.matches(game_message(5))
        assert not selector.matches(game_message(6))
        assert not selector.matches(notification_message(5))

    def test_game_id_without_family(self) -> None:
        selector = MessageSelector(game_id=5)
        assert selector.matches(game_message(5))
        assert selector.matches(notification_message(5))
        assert not selector.matches(notification_message(4))
