"""轻量级 i18n 框架：零外部依赖。

用法::

    from cardrender.i18n import t, set_locale

    set_locale("zh_CN")
    print(t("exc.missing_node", operation="played"))

    # 便捷别名
    from cardrender.i18n import _
    print(_("item.oxygen"))  # → "O2" (en_US) / "氧" (zh_CN)

    # 领域助手
    from cardrender.i18n import item_label
    print(item_label(ItemType.HEAT))

只翻译异常信息和终端渲染标签，卡面文本节点原样输出。
"""

from __future__ import annotations

import logging

from ..enums import ItemType

logger = logging.getLogger(__name__)

DEFAULT_LOCALE = "en_US"

_locale: str = DEFAULT_LOCALE
_tables: dict[str, dict[str, str]] = {}


def _load_table(locale: str) -> dict[str, str]:
    """按需加载翻译表。"""
    if locale == "en_US":
        from .en_US import STRINGS
    elif locale == "zh_CN":
        from .zh_CN import STRINGS
    else:
        raise ValueError(f"Unsupported locale: {locale}")
    return STRINGS


def set_locale(locale: str) -> None:
    """设置当前语言。"""
    global _locale
    # 预加载以确保 locale 有效
    if locale not in _tables:
        _tables[locale] = _load_table(locale)
    _locale = locale


def get_locale() -> str:
    """获取当前语言。"""
    return _locale


def get_available_locales() -> list[str]:
    """返回所有可用的 locale 列表。"""
    return ["en_US", "zh_CN"]


def t(key: str, **kwargs: object) -> str:
    """翻译函数。

    查找当前 locale 对应的字符串，用 ``kwargs`` 做 format 替换。
    若 key 缺失则回退到 en_US，仍缺失则返回 ``"[key]"``。

    Args:
        key: 翻译键，如 ``"exc.missing_node"``。
        **kwargs: 格式化参数，如 ``operation="any"``。
    """
    if _locale not in _tables:
        _tables[_locale] = _load_table(_locale)

    template = _tables[_locale].get(key)

    if template is None and _locale != DEFAULT_LOCALE:
        if DEFAULT_LOCALE not in _tables:
            _tables[DEFAULT_LOCALE] = _load_table(DEFAULT_LOCALE)
        template = _tables[DEFAULT_LOCALE].get(key)
        if template is not None:
            logger.debug("i18n fallback: '%s' not in %s, using %s", key, _locale, DEFAULT_LOCALE)

    if template is None:
        logger.warning("i18n missing key: '%s' (lang=%s)", key, _locale)
        return f"[{key}]"

    if kwargs:
        try:
            return template.format_map(kwargs)
        except KeyError as e:
            logger.warning("i18n format error: key='%s', missing=%s", key, e)
            return template
    return template


# ── 便捷别名 ──
_ = t


# ── 领域助手函数 ──


def _is_missing(key: str, result: str) -> bool:
    return result == f"[{key}]"


def item_label(item_type: ItemType) -> str:
    """获取资源图标的终端标签，缺失时回退到枚举值。"""
    key = f"item.{item_type.value}"
    result = t(key)
    return result if not _is_missing(key, result) else item_type.value
