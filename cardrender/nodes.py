"""叶子节点模块
定义资源图标 (Item)、符号 (Symbol) 和文本 (Text) 三种叶子节点
"""

from __future__ import annotations

from dataclasses import dataclass

from .enums import ItemSize, ItemType, SymbolType

# 标记类图标 (event / space / trade) 没有数量，amount 存 NO_AMOUNT
NO_AMOUNT = -1
MARKER_TYPES = frozenset({ItemType.EVENT, ItemType.SPACE, ItemType.TRADE})


@dataclass(slots=True)
class CardRenderItem:
    """资源/标记图标

    Attributes:
        type: 资源类型
        amount: 数量，标记类图标为 NO_AMOUNT
        amount_inside: 数字显示在图标内部而不是旁边
        show_digit: 强制显示数字
        any_player: 作用于任意玩家（红框）
        is_played: 已打出的形态（圆形图标）
    """

    type: ItemType
    amount: int = NO_AMOUNT
    amount_inside: bool = False
    show_digit: bool = False
    any_player: bool = False
    is_played: bool = False

    def __post_init__(self):
        if isinstance(self.type, str):
            self.type = ItemType(self.type)

    @property
    def has_amount(self) -> bool:
        # 按类型判断，不看 amount 的值
        return self.type not in MARKER_TYPES

    def __str__(self) -> str:
        if not self.has_amount:
            return self.type.value
        return f"{self.amount} {self.type.value}"


@dataclass(frozen=True, slots=True)
class CardRenderSymbol:
    """符号节点（运算符、括号、分隔符）"""

    type: SymbolType
    size: ItemSize = ItemSize.MEDIUM

    def __str__(self) -> str:
        return self.type.glyph

    @classmethod
    def or_(cls, size: ItemSize = ItemSize.MEDIUM) -> CardRenderSymbol:
        return cls(SymbolType.OR, size)

    @classmethod
    def asterix(cls, size: ItemSize = ItemSize.MEDIUM) -> CardRenderSymbol:
        return cls(SymbolType.ASTERIX, size)

    @classmethod
    def plus(cls, size: ItemSize = ItemSize.MEDIUM) -> CardRenderSymbol:
        return cls(SymbolType.PLUS, size)

    @classmethod
    def minus(cls, size: ItemSize = ItemSize.MEDIUM) -> CardRenderSymbol:
        return cls(SymbolType.MINUS, size)

    @classmethod
    def slash(cls, size: ItemSize = ItemSize.MEDIUM) -> CardRenderSymbol:
        return cls(SymbolType.SLASH, size)

    @classmethod
    def colon(cls, size: ItemSize = ItemSize.MEDIUM) -> CardRenderSymbol:
        return cls(SymbolType.COLON, size)

    @classmethod
    def arrow(cls, size: ItemSize = ItemSize.MEDIUM) -> CardRenderSymbol:
        return cls(SymbolType.ARROW, size)

    @classmethod
    def bracket_open(cls, size: ItemSize = ItemSize.MEDIUM) -> CardRenderSymbol:
        return cls(SymbolType.BRACKET_OPEN, size)

    @classmethod
    def bracket_close(cls, size: ItemSize = ItemSize.MEDIUM) -> CardRenderSymbol:
        return cls(SymbolType.BRACKET_CLOSE, size)

    @classmethod
    def empty(cls, size: ItemSize = ItemSize.MEDIUM) -> CardRenderSymbol:
        return cls(SymbolType.EMPTY, size)


@dataclass(frozen=True, slots=True)
class CardRenderText:
    """卡面文本（不做本地化）"""

    text: str

    def __str__(self) -> str:
        return self.text
