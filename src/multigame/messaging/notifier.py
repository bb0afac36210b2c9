from typing import Callable, final

from loguru import logger

from ..models import (
    Game,
    GameEvent,
    GameSummary,
    Move,
    NotificationEvent,
)
from .sender import MessageSender


###############################################################################################################################################
@final
class GameNotifier:
    """
    游戏事件的便捷发送接口

    每个方法把一次游戏内发生的事情映射为一到两次 send_message 调用,
    消息 id 一律使用 game.id。创建、加入、销毁三类事情除了游戏事件,
    还会向通知订阅者额外发送一条带游戏摘要的 NotificationEvent。
    """

    def __init__(
        self,
        sender: MessageSender,
        summarize: Callable[[Game], GameSummary] = GameSummary.from_game,
    ) -> None:
        self._sender = sender
        self._summarize = summarize

    ###############################################################################################################################################
    @property
    def sender(self) -> MessageSender:
        return self._sender

    ###############################################################################################################################################
    def _send_notification(self, game: Game, event: NotificationEvent) -> None:
        """生成摘要并发送通知; 摘要失败时只跳过这一条通知"""
        try:
            summary = self._summarize(game)
        except Exception as e:
            logger.error(
                f"Not able to summarize game {game.id} for event: {event}, error: {e}"
            )
            return

        self._sender.send_message(game.id, event, summary)

    ###############################################################################################################################################
    def send_create_game(self, game: Game) -> None:
        """发送 GameEvent.CREATE(新游戏) 与 NotificationEvent.CREATE(摘要)"""
        self._sender.send_message(game.id, GameEvent.CREATE, game)
        self._send_notification(game, NotificationEvent.CREATE)

    ###############################################################################################################################################
    def send_player_join(self, game: Game) -> None:
        """
        玩家加入已创建的游戏时发送 GameEvent.PLAYER_JOIN 与 NotificationEvent.JOIN
        (创建者本人不算, 之后加入的玩家都算)
        """
        self._sender.send_message(game.id, GameEvent.PLAYER_JOIN, game)
        self._send_notification(game, NotificationEvent.JOIN)

    ###############################################################################################################################################
    def send_game_destroy(self, game: Game) -> None:
        """游戏被终止时发送 GameEvent.DESTROY 与 NotificationEvent.DESTROY"""
        self._sender.send_message(game.id, GameEvent.DESTROY, game)
        self._send_notification(game, NotificationEvent.DESTROY)

    ###############################################################################################################################################
    def send_start_game(self, game: Game) -> None:
        self._sender.send_message(game.id, GameEvent.BEGIN, game)

    ###############################################################################################################################################
    def send_player_change(self, game: Game) -> None:
        """携带当前玩家列表(即整个游戏对象)"""
        self._sender.send_message(game.id, GameEvent.PLAYER_CHANGE, game)

    ###############################################################################################################################################
    def send_move_complete(self, game: Game, move: Move) -> None:
        """消息体是完成的走法, 不是游戏"""
        self._sender.send_message(game.id, GameEvent.MOVE_COMPLETE, move)

    ###############################################################################################################################################
    def send_state_change(self, game: Game) -> None:
        self._sender.send_message(game.id, GameEvent.STATE_CHANGE, game)

    ###############################################################################################################################################
    def send_game_change(self, game: Game) -> None:
        self._sender.send_message(game.id, GameEvent.GAME_CHANGE, game)

    ###############################################################################################################################################
    def send_end_game(self, game: Game) -> None:
        self._sender.send_message(game.id, GameEvent.END, game)


###############################################################################################################################################
