import asyncio
from typing import List
from loguru import logger
from ..models import Game, Move
from .base import AbstractAgent


###############################################################################################################################################
async def determine_moves_with_timeout(
    agent: AbstractAgent, game: Game, timeout: float
) -> List[Move]:
    """
    在工作线程中调用 agent.determine_moves, 超时返回空列表

    代理拿到的是 game 的深拷贝, 所以调用方的游戏对象不会被修改。
    超时后工作线程会继续跑完, 其结果被丢弃。

    参数:
        agent: 已初始化的代理
        game: 当前游戏
        timeout: 超时时间(秒)

    返回:
        List[Move]: 代理给出的走法; 超时为空
    """
    snapshot = game.model_copy(deep=True)
    try:
        return await asyncio.wait_for(
            asyncio.to_thread(agent.determine_moves, snapshot), timeout=timeout
        )
    except asyncio.TimeoutError:
        logger.warning(
            f"agent {agent.player.name} timed out after {timeout}s on game {game.id}"
        )
        return []


###############################################################################################################################################
