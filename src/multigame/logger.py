import datetime
import sys
from pathlib import Path
from typing import Final
from loguru import logger

###########################################################################################################################################
# 生成log的目录
LOGS_DIR: Final[Path] = Path("logs")

###########################################################################################################################################
# 日志配置
LOG_LEVEL: Final[str] = "DEBUG"  # 可以改为 "INFO" 来减少日志输出


###########################################################################################################################################
# 设置logger
def setup_logger(level: str = LOG_LEVEL, logs_dir: Path = LOGS_DIR) -> Path:
    log_start_time = datetime.datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
    logs_dir.mkdir(parents=True, exist_ok=True)

    # 移除默认的控制台处理器
    logger.remove()

    # 添加控制台处理器，使用配置的日志级别
    logger.add(
        sys.stderr,
        level=level,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
    )

    # 添加文件处理器，保存到指定的目录
    log_file_path = logs_dir / f"{log_start_time}.log"
    logger.add(log_file_path, level=level)

    # 输出配置信息
    logger.info(f"日志配置: 级别={level}, 文件路径={log_file_path}")
    return log_file_path


###########################################################################################################################################
