"""Unit tests for the multigame package layout and logger setup."""

import sys
from pathlib import Path

from loguru import logger


def test_package_structure() -> None:
    """Test that the package structure is correctly set up."""
    src_path = Path(__file__).parent.parent.parent / "src"
    assert src_path.exists()
    assert (src_path / "multigame" / "__init__.py").exists()
    for subpackage in ("models", "broker", "messaging", "agent"):
        assert (src_path / "multigame" / subpackage / "__init__.py").exists()


def test_import_main_package() -> None:
    """Test that the main package can be imported."""
    import src.multigame as multigame

    assert multigame.__version__ == "0.1.0"
    assert multigame.MessageSender is not None
    assert multigame.GameNotifier is not None


def test_setup_logger(tmp_path: Path) -> None:
    from src.multigame import setup_logger

    log_file = setup_logger(level="INFO", logs_dir=tmp_path / "logs")
    logger.info("logger test line")

    # 移除处理器会关闭并刷新日志文件, 然后恢复默认的控制台处理器
    logger.remove()
    logger.add(sys.stderr)

    assert log_file.parent.exists()
    assert "logger test line" in log_file.read_text(encoding="utf-8")
