"""游戏代理模块

提供自动/远程参与者的抽象定义与基于规则引擎的具体实现。
"""

from .base import AbstractAgent, AgentNotReadyError
from .models import (
    MoveEvaluator,
    MoveGenerator,
    RandomAgent,
    RuleBasedAgent,
    StrategyAgent,
)
from .runner import determine_moves_with_timeout

__all__ = [
    "AbstractAgent",
    "AgentNotReadyError",
    "MoveGenerator",
    "MoveEvaluator",
    "StrategyAgent",
    "RuleBasedAgent",
    "RandomAgent",
    "determine_moves_with_timeout",
]
