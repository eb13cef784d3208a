"""cardrender 日志配置

级别、日志文件和调试开关全部来自 RenderConfig（见 cardrender.config）：
    CARDRENDER_LOG_LEVEL  文件日志级别
    CARDRENDER_LOG_FILE   日志文件路径，默认 logs/cardrender.log
    CARDRENDER_DEBUG      调试模式：文件与终端都降到 DEBUG

重复调用 setup_logging() 只更新已挂载的处理器，不会重复添加。
"""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from cardrender.config import RenderConfig, get_config

FILE_HANDLER_NAME = "cardrender_file"
CONSOLE_HANDLER_NAME = "cardrender_console"

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s:%(lineno)d | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def level_for(config: RenderConfig) -> int:
    """配置对应的文件日志级别；调试模式固定为 DEBUG"""
    if config.debug_mode:
        return logging.DEBUG
    level = logging.getLevelName(config.log_level.strip().upper())
    return level if isinstance(level, int) else logging.INFO


def _attach(root: logging.Logger, name: str, factory) -> logging.Handler:
    for handler in root.handlers:
        if handler.name == name:
            return handler
    handler = factory()
    handler.name = name
    root.addHandler(handler)
    return handler


def _file_handler(path: Path) -> RotatingFileHandler:
    path.parent.mkdir(parents=True, exist_ok=True)
    # 中文标签需要 UTF-8
    return RotatingFileHandler(str(path), maxBytes=1024 * 1024, backupCount=3, encoding="utf-8")


def setup_logging(config: RenderConfig | None = None, *, enable_console: bool = False) -> logging.Logger:
    """按配置挂载文件处理器（及可选的终端处理器），返回根 logger

    终端处理器默认只输出 WARNING 以上，避免与渲染出的卡面交错；
    调试模式下强制开启并降到 DEBUG。
    """
    config = config or get_config()
    level = level_for(config)
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    log_path = Path(config.log_file).resolve()
    file_handler = _attach(root, FILE_HANDLER_NAME, lambda: _file_handler(log_path))
    file_handler.setFormatter(formatter)
    file_handler.setLevel(level)

    if enable_console or config.debug_mode:
        console = _attach(root, CONSOLE_HANDLER_NAME, logging.StreamHandler)
        console.setFormatter(formatter)
        console.setLevel(logging.DEBUG if config.debug_mode else logging.WARNING)

    logging.getLogger(__name__).info(
        "Logging initialized | level=%s file=%s debug=%s",
        logging.getLevelName(level),
        log_path,
        config.debug_mode,
    )
    return root
