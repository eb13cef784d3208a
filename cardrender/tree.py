"""渲染树模块
定义节点标签分派、叶子接受策略和不可变的 RenderTree

RenderTree 用 kind 字段区分卡面整体 / 生产框 / 效果框三种变体，
不使用子类继承；每种变体能容纳的节点种类由 LeafPolicy 决定。
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .enums import NodeKind, TreeKind
from .exceptions import (
    DelimiterNotSymbolError,
    InvalidDelimiterError,
    InvalidRowCountError,
    NodeNotAllowedError,
    WrongTreeKindError,
)
from .nodes import CardRenderItem, CardRenderSymbol, CardRenderText

Node = Union[CardRenderItem, CardRenderSymbol, CardRenderText, "RenderTree"]
Row = tuple[Node, ...]

# 效果树的行号
CAUSE_ROW = 0
DELIMITER_ROW = 1
EFFECT_ROW = 2
EFFECT_ROW_COUNT = 3


def node_kind(node: Node) -> NodeKind:
    """返回节点标签

    Raises:
        TypeError: 不是渲染节点（包括嵌套的 GENERIC 树）
    """
    match node:
        case CardRenderItem():
            return NodeKind.ITEM
        case CardRenderSymbol():
            return NodeKind.SYMBOL
        case CardRenderText():
            return NodeKind.TEXT
        case RenderTree(kind=TreeKind.PRODUCTION):
            return NodeKind.PRODUCTION
        case RenderTree(kind=TreeKind.EFFECT):
            return NodeKind.EFFECT
    raise TypeError(f"Not a render node: {node!r}")


@dataclass(frozen=True)
class LeafPolicy:
    """叶子接受策略：某种树允许出现的节点种类"""

    tree_kind: TreeKind
    accepts: frozenset[NodeKind]

    def allows(self, kind: NodeKind) -> bool:
        return kind in self.accepts

    def check(self, kind: NodeKind, operation: str | None = None) -> None:
        """节点种类不被接受时抛出 NodeNotAllowedError"""
        if kind not in self.accepts:
            raise NodeNotAllowedError(operation=operation, node_kind=kind, tree_kind=self.tree_kind)


GENERIC_POLICY = LeafPolicy(TreeKind.GENERIC, frozenset(NodeKind))
PRODUCTION_POLICY = LeafPolicy(TreeKind.PRODUCTION, frozenset({NodeKind.ITEM, NodeKind.SYMBOL}))
# 效果框内不能再嵌套效果框
EFFECT_POLICY = LeafPolicy(
    TreeKind.EFFECT,
    frozenset({NodeKind.ITEM, NodeKind.SYMBOL, NodeKind.PRODUCTION, NodeKind.TEXT}),
)

POLICIES: dict[TreeKind, LeafPolicy] = {
    TreeKind.GENERIC: GENERIC_POLICY,
    TreeKind.PRODUCTION: PRODUCTION_POLICY,
    TreeKind.EFFECT: EFFECT_POLICY,
}


@dataclass(frozen=True)
class RenderTree:
    """不可变渲染树

    Attributes:
        kind: 树种类
        rows: 行序列，每行是从左到右渲染的节点序列

    效果树 (EFFECT) 的三行结构不在构造时检查，而是在每次读取
    cause / delimiter / effect / description 时检查。
    """

    kind: TreeKind = TreeKind.GENERIC
    rows: tuple[Row, ...] = ((),)

    def __post_init__(self):
        rows = tuple(tuple(row) for row in self.rows)
        object.__setattr__(self, "rows", rows)
        policy = self.policy
        for row in rows:
            for node in row:
                policy.check(node_kind(node))

    @property
    def policy(self) -> LeafPolicy:
        return POLICIES[self.kind]

    @property
    def is_production(self) -> bool:
        return self.kind == TreeKind.PRODUCTION

    @property
    def is_effect(self) -> bool:
        return self.kind == TreeKind.EFFECT

    def validate(self) -> None:
        """检查效果树结构（纯检查，可重复调用）

        Raises:
            WrongTreeKindError: 不是效果树
            InvalidRowCountError: 行数不为 3
            InvalidDelimiterError: 分隔行节点数不为 1
            DelimiterNotSymbolError: 分隔节点不是符号
        """
        if not self.is_effect:
            raise WrongTreeKindError(tree_kind=self.kind)
        if len(self.rows) != EFFECT_ROW_COUNT:
            raise InvalidRowCountError(row_count=len(self.rows))
        delimiter_row = self.rows[DELIMITER_ROW]
        if len(delimiter_row) != 1:
            raise InvalidDelimiterError(length=len(delimiter_row))
        if not isinstance(delimiter_row[0], CardRenderSymbol):
            raise DelimiterNotSymbolError(node_kind=node_kind(delimiter_row[0]))

    def cause(self) -> Row:
        self.validate()
        return self.rows[CAUSE_ROW]

    def delimiter(self) -> CardRenderSymbol | None:
        """分隔符；条件行为空时不显示分隔符，返回 None"""
        self.validate()
        if len(self.rows[CAUSE_ROW]) == 0:
            return None
        return self.rows[DELIMITER_ROW][0]

    def effect(self) -> Row:
        self.validate()
        return self.rows[EFFECT_ROW]

    def description(self) -> str:
        """效果行最后一个节点的文本形式

        约定由调用方把文本节点放在效果行末尾，这里不检查节点类型。
        """
        self.validate()
        effect_row = self.rows[EFFECT_ROW]
        if not effect_row:
            return ""
        return str(effect_row[-1])
