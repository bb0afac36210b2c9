import threading
from typing import Dict, Final, final


###############################################################################################################################################
@final
class MessageSequencer:
    """
    按游戏 id 分配消息序号

    同一个游戏 id 第一次返回 1, 之后每次加 1, 不跳号不重复。
    条目在进程生命周期内保留, 需要回收时由调用方显式 discard。
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._counters: Dict[int, int] = {}

    ###########################################################################################################################################
    def next(self, game_id: int) -> int:
        with self._lock:
            value = self._counters.get(game_id, 0) + 1
            self._counters[game_id] = value
            return value

    ###########################################################################################################################################
    def current(self, game_id: int) -> int:
        with self._lock:
            return self._counters.get(game_id, 0)

    ###########################################################################################################################################
    def discard(self, game_id: int) -> None:
        with self._lock:
            self._counters.pop(game_id, None)

    ###########################################################################################################################################
    def __len__(self) -> int:
        with self._lock:
            return len(self._counters)


###############################################################################################################################################
# 进程内共享的序号分配器, 所有 MessageSender 默认使用它
message_sequencer: Final[MessageSequencer] = MessageSequencer()
