"""渲染配置中心 (SSOT - 单一事实来源)

所有可配置的参数在此定义，支持从环境变量覆盖。
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from .enums import ItemSize


def _get_env_int(key: str, default: int) -> int:
    """从环境变量获取整数配置"""
    value = os.environ.get(key)
    if value is not None:
        try:
            return int(value)
        except ValueError:
            pass
    return default


def _get_env_bool(key: str, default: bool) -> bool:
    """从环境变量获取布尔配置"""
    value = os.environ.get(key, "").lower()
    if value in ("true", "1", "yes", "on"):
        return True
    elif value in ("false", "0", "no", "off"):
        return False
    return default


def _get_env_size(key: str, default: ItemSize) -> ItemSize:
    """从环境变量获取尺寸配置，非法值回退到默认"""
    value = os.environ.get(key, "").strip().lower()
    try:
        return ItemSize(value) if value else default
    except ValueError:
        return default


@dataclass(frozen=True)
class RenderConfig:
    """渲染配置类 (不可变)

    所有配置项支持通过环境变量覆盖：
    - CARDRENDER_SYMBOL_SIZE: 符号默认尺寸 small|medium|large
    - CARDRENDER_LOCALE: 异常信息与终端标签的语言
    - CARDRENDER_LOG_LEVEL: 日志级别
    - CARDRENDER_LOG_FILE: 日志文件路径
    - CARDRENDER_DEBUG: 调试模式
    - CARDRENDER_CONSOLE_WIDTH: 终端渲染宽度
    """

    # ==================== 构建器 ====================
    default_symbol_size: ItemSize = field(
        default_factory=lambda: _get_env_size("CARDRENDER_SYMBOL_SIZE", ItemSize.MEDIUM)
    )

    # ==================== 本地化 ====================
    locale: str = field(
        default_factory=lambda: os.environ.get("CARDRENDER_LOCALE", "en_US")
    )

    # ==================== 终端渲染 ====================
    console_width: int = field(
        default_factory=lambda: _get_env_int("CARDRENDER_CONSOLE_WIDTH", 80)
    )

    # ==================== 日志与调试 ====================
    log_level: str = field(
        default_factory=lambda: os.environ.get("CARDRENDER_LOG_LEVEL", "INFO")
    )
    log_file: str = field(
        default_factory=lambda: os.environ.get("CARDRENDER_LOG_FILE", "logs/cardrender.log")
    )
    debug_mode: bool = field(
        default_factory=lambda: _get_env_bool("CARDRENDER_DEBUG", False)
    )

    @classmethod
    def from_env(cls) -> RenderConfig:
        """从环境变量创建配置实例"""
        return cls()

    def validate(self) -> list[str]:
        """验证配置合法性

        Returns:
            错误信息列表（空 = 合法）
        """
        from .i18n import get_available_locales

        errors: list[str] = []
        if not isinstance(self.default_symbol_size, ItemSize):
            errors.append(f"default_symbol_size must be an ItemSize, got {self.default_symbol_size!r}")
        if self.locale not in get_available_locales():
            errors.append(f"locale: unsupported locale {self.locale!r}")
        if self.console_width < 20:
            errors.append(f"console_width must be >= 20, got {self.console_width}")
        if self.log_level.upper() not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            errors.append(f"log_level: unknown level {self.log_level!r}")
        if not self.log_file:
            errors.append("log_file must not be empty")
        return errors


# 全局配置单例
_config: RenderConfig | None = None


def get_config() -> RenderConfig:
    """获取全局配置实例（懒加载）"""
    global _config
    if _config is None:
        _config = RenderConfig.from_env()
    return _config


def reset_config() -> None:
    """重置配置（用于测试）"""
    global _config
    _config = None
