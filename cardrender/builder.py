"""卡面构建器模块

卡牌定义通过一串链式调用描述卡面布局::

    build_card(lambda b: b.oxygen(1).plus().temperature(2).br().description("x"))

构建器维护一个行序列和当前行下标 ``_active``（始终指向最后一行）。
``production_box`` / ``effect_box`` 递归运行一个受限的子构建器，把结果作为
一个节点放进父构建器的当前行；``build()`` 把行序列冻结为 RenderTree。
"""

from __future__ import annotations

import logging
from typing import Callable

from .config import get_config
from .enums import ItemSize, ItemType, NodeKind, TreeKind
from .exceptions import MissingNodeError, TypeMismatchError, raise_if_no_rows
from .nodes import NO_AMOUNT, CardRenderItem, CardRenderSymbol, CardRenderText
from .tree import POLICIES, LeafPolicy, Node, RenderTree, node_kind

logger = logging.getLogger(__name__)


class Builder:
    """通用构建器

    由叶子接受策略 (LeafPolicy) 参数化：生产框构建器只接受图标和符号，
    效果框构建器额外接受生产框和文本。所有操作返回 self 以便链式调用。
    """

    def __init__(self, kind: TreeKind = TreeKind.GENERIC):
        self.kind = kind
        self._policy: LeafPolicy = POLICIES[kind]
        self._rows: list[list[Node]] = [[]]
        self._active = 0
        self._built = False

    @property
    def row_count(self) -> int:
        return len(self._rows)

    @property
    def active_row_index(self) -> int:
        return self._active

    @property
    def rows(self) -> tuple[tuple[Node, ...], ...]:
        """当前行序列的只读快照（节点本身不复制）"""
        return tuple(tuple(row) for row in self._rows)

    def build(self) -> RenderTree:
        """冻结行序列，返回对应种类的 RenderTree"""
        if self._built:
            logger.debug("Builder(%s) reused after build()", self.kind.value)
        self._built = True
        tree = RenderTree(self.kind, self.rows)
        logger.debug("Built %s tree | rows=%d", self.kind.value, len(tree.rows))
        return tree

    # ==================== 内部工具 ====================

    def _add_node(self, node: Node, operation: str) -> Builder:
        self._policy.check(node_kind(node), operation)
        self._rows[self._active].append(node)
        return self

    def _add_item(self, item_type: ItemType, amount: int = NO_AMOUNT) -> Builder:
        return self._add_node(CardRenderItem(item_type, amount), item_type.value)

    def _add_symbol(self, symbol: CardRenderSymbol, operation: str) -> Builder:
        # 只检查行序列非空，不要求当前行已有图标
        raise_if_no_rows(self._rows, operation)
        return self._add_node(symbol, operation)

    def _symbol_size(self, size: ItemSize | None) -> ItemSize:
        return size if size is not None else get_config().default_symbol_size

    def _last_item(self, operation: str) -> CardRenderItem:
        """返回当前行末尾的图标（按下标访问，不弹出）"""
        raise_if_no_rows(self._rows, operation)
        row = self._rows[self._active]
        if not row:
            raise MissingNodeError(operation=operation)
        last = row[-1]
        if not isinstance(last, CardRenderItem):
            raise TypeMismatchError(operation=operation, node_kind=node_kind(last))
        return last

    # ==================== 资源/标记图标 ====================

    def temperature(self, amount: int) -> Builder:
        return self._add_item(ItemType.TEMPERATURE, amount)

    def oceans(self, amount: int) -> Builder:
        return self._add_item(ItemType.OCEANS, amount)

    def oxygen(self, amount: int) -> Builder:
        return self._add_item(ItemType.OXYGEN, amount)

    def venus(self, amount: int) -> Builder:
        return self._add_item(ItemType.VENUS, amount)

    def plants(self, amount: int) -> Builder:
        return self._add_item(ItemType.PLANTS, amount)

    def microbes(self, amount: int) -> Builder:
        return self._add_item(ItemType.MICROBES, amount)

    def animals(self, amount: int) -> Builder:
        return self._add_item(ItemType.ANIMALS, amount)

    def heat(self, amount: int) -> Builder:
        return self._add_item(ItemType.HEAT, amount)

    def energy(self, amount: int) -> Builder:
        return self._add_item(ItemType.ENERGY, amount)

    def titanium(self, amount: int) -> Builder:
        return self._add_item(ItemType.TITANIUM, amount)

    def steel(self, amount: int) -> Builder:
        return self._add_item(ItemType.STEEL, amount)

    def megacredits(self, amount: int) -> Builder:
        item = CardRenderItem(ItemType.MEGACREDITS, amount)
        item.amount_inside = True
        item.show_digit = False
        return self._add_node(item, ItemType.MEGACREDITS.value)

    def cards(self, amount: int) -> Builder:
        return self._add_item(ItemType.CARDS, amount)

    def floaters(self, amount: int) -> Builder:
        return self._add_item(ItemType.FLOATERS, amount)

    def event(self) -> Builder:
        return self._add_item(ItemType.EVENT)

    def space(self) -> Builder:
        return self._add_item(ItemType.SPACE)

    def trade(self) -> Builder:
        return self._add_item(ItemType.TRADE)

    def trade_discount(self, amount: int) -> Builder:
        item = CardRenderItem(ItemType.TRADE_DISCOUNT, amount * -1)
        item.amount_inside = True
        return self._add_node(item, ItemType.TRADE_DISCOUNT.value)

    def influence(self, amount: int) -> Builder:
        return self._add_item(ItemType.INFLUENCE, amount)

    # ==================== 文本与嵌套框 ====================

    def description(self, text: str) -> Builder:
        raise_if_no_rows(self._rows, "description")
        return self._add_node(CardRenderText(text), "description")

    def production_box(self, configure: Callable[[Builder], object]) -> Builder:
        self._policy.check(NodeKind.PRODUCTION, "production_box")
        return self._add_node(build_production_box(configure), "production_box")

    def effect_box(self, configure: Callable[[Builder], object]) -> Builder:
        self._policy.check(NodeKind.EFFECT, "effect_box")
        return self._add_node(build_effect(configure), "effect_box")

    # ==================== 符号 ====================

    def or_(self, size: ItemSize | None = None) -> Builder:
        return self._add_symbol(CardRenderSymbol.or_(self._symbol_size(size)), "or")

    def asterix(self, size: ItemSize | None = None) -> Builder:
        return self._add_symbol(CardRenderSymbol.asterix(self._symbol_size(size)), "asterix")

    def plus(self, size: ItemSize | None = None) -> Builder:
        return self._add_symbol(CardRenderSymbol.plus(self._symbol_size(size)), "plus")

    def minus(self, size: ItemSize | None = None) -> Builder:
        return self._add_symbol(CardRenderSymbol.minus(self._symbol_size(size)), "minus")

    def slash(self, size: ItemSize | None = None) -> Builder:
        return self._add_symbol(CardRenderSymbol.slash(self._symbol_size(size)), "slash")

    def empty(self, size: ItemSize | None = None) -> Builder:
        return self._add_symbol(CardRenderSymbol.empty(self._symbol_size(size)), "empty")

    # ==================== 换行 ====================

    def br(self) -> Builder:
        self._rows.append([])
        self._active = len(self._rows) - 1
        return self

    def start_effect(self) -> Builder:
        """结束当前行，加入冒号分隔行，再开新行（效果框）"""
        self.br()
        self._add_symbol(CardRenderSymbol.colon(), "start_effect")
        return self.br()

    def start_action(self) -> Builder:
        """同 start_effect，分隔符为箭头（行动框）"""
        self.br()
        self._add_symbol(CardRenderSymbol.arrow(), "start_action")
        return self.br()

    # ==================== 后缀修饰符 ====================

    def any(self) -> Builder:
        """标记上一个图标作用于任意玩家"""
        self._last_item("any").any_player = True
        return self

    def played(self) -> Builder:
        """标记上一个图标为已打出形态

        e.g. titanium(1).played() 显示为圆形资源而不是方形
        """
        self._last_item("played").is_played = True
        return self

    def digit(self) -> Builder:
        self._last_item("digit").show_digit = True
        return self

    def brackets(self) -> Builder:
        """用括号包住上一个图标：[Item] → [(, Item, )]"""
        item = self._last_item("brackets")
        row = self._rows[self._active]
        row[-1:] = [CardRenderSymbol.bracket_open(), item, CardRenderSymbol.bracket_close()]
        return self


# ==================== 入口函数 ====================


def _run(kind: TreeKind, configure: Callable[[Builder], object]) -> RenderTree:
    builder = Builder(kind)
    configure(builder)
    return builder.build()


def build_card(configure: Callable[[Builder], object]) -> RenderTree:
    """用配置回调构建卡面整体渲染树"""
    return _run(TreeKind.GENERIC, configure)


def build_production_box(configure: Callable[[Builder], object]) -> RenderTree:
    """构建生产框（只含图标和符号）"""
    return _run(TreeKind.PRODUCTION, configure)


def build_effect(configure: Callable[[Builder], object]) -> RenderTree:
    """构建效果框；三行结构在读取访问器时才检查"""
    return _run(TreeKind.EFFECT, configure)
