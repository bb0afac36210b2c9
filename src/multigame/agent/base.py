"""游戏代理抽象基类"""

from abc import ABC, abstractmethod
from typing import List
from ..models import Game, GamePlayer, Move, Suggestion


class AgentNotReadyError(RuntimeError):
    """在 initialize() 之前调用了代理的决策方法"""


class AbstractAgent(ABC):
    """游戏代理抽象基类

    自动或远程参与者必须实现的接口。代理以某个 GamePlayer 的身份参与游戏。
    所有决策方法都不得修改传入的 game, 代理内部状态的变化只属于代理自己。
    """

    def __init__(self, player: GamePlayer) -> None:
        self._player = player

    @property
    def player(self) -> GamePlayer:
        return self._player

    @abstractmethod
    def initialize(self) -> None:
        """准备代理的内部状态/资源, 必须在其他方法之前调用"""
        pass

    @abstractmethod
    def ready(self) -> bool:
        """代理当前是否能够行动(非阻塞)"""
        pass

    @abstractmethod
    def determine_moves(self, game: Game) -> List[Move]:
        """根据当前游戏状态给出候选走法

        Args:
            game: 当前游戏

        Returns:
            List[Move]: 按代理偏好排序, 第一个最优先; 游戏结束或无合法走法时为空
        """
        pass

    @abstractmethod
    def process_suggestion(self, game: Game, suggestion: Suggestion) -> Suggestion:
        """评估其他参与者提出的走法建议

        Args:
            game: 当前游戏
            suggestion: 收到的建议

        Returns:
            Suggestion: 新的建议对象, status 表示接受或拒绝
        """
        pass
