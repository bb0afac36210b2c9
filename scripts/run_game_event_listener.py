#!/usr/bin/env python3
"""
监听游戏事件主题并打印收到的消息

使用方法：
    python scripts/run_game_event_listener.py                       # 监听默认主题上的全部消息
    python scripts/run_game_event_listener.py --family GAME --game-id 42
    python scripts/run_game_event_listener.py --topic MultiGameTest --host 192.168.1.50
"""

import argparse
import os
import sys

# 将 src 目录添加到模块搜索路径
sys.path.insert(
    0, os.path.join(os.path.dirname(os.path.abspath(__file__)), "..", "src")
)

from loguru import logger
from multigame import setup_logger
from multigame.broker import BrokerError, RedisConfig
from multigame.messaging import RedisTopicSubscriber, messaging_config
from multigame.models import MESSAGE_ID, EventFamily, MessageSelector


def main() -> None:
    parser = argparse.ArgumentParser(description="监听 multigame 事件主题")
    parser.add_argument("--topic", type=str, default=messaging_config.topic_name, help="主题名称")
    parser.add_argument("--host", type=str, default="localhost", help="Redis 主机")
    parser.add_argument("--port", type=int, default=6379, help="Redis 端口")
    parser.add_argument("--family", choices=[f.value for f in EventFamily], help="只接收某个族的消息")
    parser.add_argument("--game-id", type=int, help="只接收某个游戏的消息")
    args = parser.parse_args()

    setup_logger(level="INFO")

    selector = MessageSelector(
        family=EventFamily(args.family) if args.family else None,
        game_id=args.game_id,
    )

    try:
        subscriber = RedisTopicSubscriber(
            topic_name=args.topic,
            selector=selector,
            config=RedisConfig(host=args.host, port=args.port),
        )
    except BrokerError as e:
        logger.error(f"❌ 无法订阅主题 {args.topic}: {e}")
        sys.exit(1)

    logger.info(f"👂 开始监听主题 {args.topic}, 过滤条件: {selector.model_dump()}")
    try:
        for message in subscriber.listen():
            logger.info(
                f"📨 #{message.get_property(MESSAGE_ID)} {message.properties} body_type={message.body_type}"
            )
    except KeyboardInterrupt:
        logger.info("停止监听")
    except BrokerError as e:
        logger.error(f"❌ 监听中断: {e}")
        sys.exit(1)
    finally:
        subscriber.close()


if __name__ == "__main__":
    main()
