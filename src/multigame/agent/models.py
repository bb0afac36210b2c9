"""游戏代理模型实现"""

import random
from typing import Callable, List, Optional, TypeAlias

from loguru import logger
from overrides import override

from ..models import Game, GamePlayer, Move, Suggestion, SuggestionStatus
from .base import AbstractAgent, AgentNotReadyError

# 规则引擎: 给出某个玩家在当前游戏中的全部合法走法
MoveGenerator: TypeAlias = Callable[[Game, GamePlayer], List[Move]]

# 走法评估: 分数越高越优先
MoveEvaluator: TypeAlias = Callable[[Game, Move], float]


class StrategyAgent(AbstractAgent):
    """基于规则引擎的代理公共部分

    子类只需要决定候选走法的顺序(_order_moves)。
    """

    def __init__(self, player: GamePlayer, move_generator: MoveGenerator) -> None:
        super().__init__(player)
        self._move_generator = move_generator
        self._initialized = False

    @override
    def initialize(self) -> None:
        self._initialized = True

    @override
    def ready(self) -> bool:
        return self._initialized

    @override
    def determine_moves(self, game: Game) -> List[Move]:
        self._check_ready()
        if game.is_over:
            return []
        moves = self._move_generator(game, self.player)
        if not moves:
            return []
        return self._order_moves(game, list(moves))

    @override
    def process_suggestion(self, game: Game, suggestion: Suggestion) -> Suggestion:
        self._check_ready()
        candidates = self.determine_moves(game)
        accepted = any(suggestion.move.same_as(move) for move in candidates)
        status = SuggestionStatus.ACCEPT if accepted else SuggestionStatus.REJECT
        logger.debug(
            f"[{self.player.name}] suggestion from {suggestion.suggestor.name}: {status}"
        )
        return suggestion.model_copy(update={"status": status}, deep=True)

    def _order_moves(self, game: Game, moves: List[Move]) -> List[Move]:
        return moves

    def _check_ready(self) -> None:
        if not self._initialized:
            raise AgentNotReadyError(
                f"agent {self.player.name} used before initialize()"
            )


class RuleBasedAgent(StrategyAgent):
    """按评估分数从高到低排列走法, 分数相同时保持规则引擎给出的顺序"""

    def __init__(
        self,
        player: GamePlayer,
        move_generator: MoveGenerator,
        evaluator: Optional[MoveEvaluator] = None,
    ) -> None:
        super().__init__(player, move_generator)
        self._evaluator = evaluator

    @override
    def _order_moves(self, game: Game, moves: List[Move]) -> List[Move]:
        if self._evaluator is None:
            return moves
        evaluator = self._evaluator
        return sorted(moves, key=lambda move: evaluator(game, move), reverse=True)


class RandomAgent(StrategyAgent):
    """随机打乱合法走法"""

    def __init__(
        self,
        player: GamePlayer,
        move_generator: MoveGenerator,
        seed: Optional[int] = None,
    ) -> None:
        super().__init__(player, move_generator)
        self._seed = seed
        self._rng = random.Random(seed)

    @override
    def initialize(self) -> None:
        # 重新初始化时重置随机序列
        self._rng = random.Random(self._seed)
        super().initialize()

    @override
    def _order_moves(self, game: Game, moves: List[Move]) -> List[Move]:
        self._rng.shuffle(moves)
        return moves
