"""渲染树枚举：资源类型、符号类型、尺寸与节点标签

独立成模块，builder / tree / ui 都直接从这里导入，避免
tree → builder → tree 的循环依赖。
"""

from enum import Enum


class ItemType(Enum):
    """资源/标记类型枚举"""

    TEMPERATURE = "temperature"  # 温度
    OCEANS = "oceans"  # 海洋
    OXYGEN = "oxygen"  # 氧气
    VENUS = "venus"  # 金星
    PLANTS = "plants"  # 植物
    MICROBES = "microbes"  # 微生物
    ANIMALS = "animals"  # 动物
    HEAT = "heat"  # 热量
    ENERGY = "energy"  # 能量
    TITANIUM = "titanium"  # 钛
    STEEL = "steel"  # 钢
    MEGACREDITS = "megacredits"  # 兆信用点
    CARDS = "cards"  # 卡牌
    FLOATERS = "floaters"  # 浮空器
    EVENT = "event"  # 事件标记
    SPACE = "space"  # 太空标记
    TRADE = "trade"  # 贸易
    TRADE_DISCOUNT = "trade_discount"  # 贸易折扣
    INFLUENCE = "influence"  # 影响力


class ItemSize(Enum):
    """图标/符号尺寸"""

    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"


class SymbolType(Enum):
    """符号字形枚举，值即终端显示的字形"""

    OR = "OR"
    ASTERIX = "*"
    PLUS = "+"
    MINUS = "-"
    SLASH = "/"
    COLON = ":"
    ARROW = "->"
    BRACKET_OPEN = "("
    BRACKET_CLOSE = ")"
    EMPTY = " "

    @property
    def glyph(self) -> str:
        return self.value


class NodeKind(Enum):
    """节点标签，渲染层按此分派"""

    ITEM = "item"
    SYMBOL = "symbol"
    PRODUCTION = "production"
    EFFECT = "effect"
    TEXT = "text"


class TreeKind(Enum):
    """渲染树种类"""

    GENERIC = "generic"  # 卡面整体
    PRODUCTION = "production"  # 生产框
    EFFECT = "effect"  # 效果框 (cause / delimiter / effect)
