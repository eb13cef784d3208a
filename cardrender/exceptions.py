"""渲染树异常模块
定义构建器与效果树访问器抛出的各类异常，提供明确的错误类型和信息

全部为编写卡牌时的契约错误：同步抛出，库内不捕获、不重试。
"""

from __future__ import annotations

from typing import Any

from .i18n import t as _t


class RenderError(Exception):
    """渲染异常基类

    所有渲染树相关的异常都应该继承此类，
    提供统一的异常处理接口。
    """

    def __init__(self, message: str, details: dict | None = None):
        """初始化渲染异常

        Args:
            message: 错误消息
            details: 额外的错误详情（可选）
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


# ==================== 构建器异常 ====================


class BuilderError(RenderError):
    """构建器异常基类

    operation 为触发异常的构建器操作名（如 "any"、"plus"）
    """

    def __init__(self, message: str | None = None, operation: str | None = None):
        if message is None:
            message = _t("exc.builder_error")
        details = {}
        if operation:
            details["operation"] = operation
        super().__init__(message, details)
        self.operation = operation


class StructuralPreconditionError(BuilderError):
    """结构前置条件异常

    需要至少一行的操作在行序列为空时被调用
    """

    def __init__(self, message: str | None = None, operation: str | None = None):
        if message is None:
            message = _t("exc.no_rows", operation=operation or "?")
        super().__init__(message, operation)


class MissingNodeError(BuilderError):
    """缺少节点异常

    后缀修饰符（any/played/digit/brackets）作用于空的当前行
    """

    def __init__(self, message: str | None = None, operation: str | None = None):
        if message is None:
            message = _t("exc.missing_node", operation=operation or "?")
        super().__init__(message, operation)


class TypeMismatchError(BuilderError):
    """类型不匹配异常

    后缀修饰符作用的末尾节点不是 CardRenderItem
    """

    def __init__(
        self,
        message: str | None = None,
        operation: str | None = None,
        node_kind: Any = None,
    ):
        kind_name = getattr(node_kind, "value", node_kind)
        if message is None:
            message = _t("exc.type_mismatch", operation=operation or "?", node_kind=kind_name)
        super().__init__(message, operation)
        self.node_kind = node_kind
        if node_kind is not None:
            self.details["node_kind"] = kind_name


class NodeNotAllowedError(BuilderError):
    """节点不被接受异常

    节点种类不在当前树种类的叶子策略之内（如生产框中的文本）
    """

    def __init__(
        self,
        message: str | None = None,
        operation: str | None = None,
        node_kind: Any = None,
        tree_kind: Any = None,
    ):
        kind_name = getattr(node_kind, "value", node_kind)
        tree_name = getattr(tree_kind, "value", tree_kind)
        if message is None:
            message = _t("exc.node_not_allowed", node_kind=kind_name, tree_kind=tree_name)
        super().__init__(message, operation)
        self.node_kind = node_kind
        self.tree_kind = tree_kind
        self.details.update({"node_kind": kind_name, "tree_kind": tree_name})


# ==================== 树结构异常 ====================


class TreeShapeError(RenderError):
    """树结构异常基类

    效果树访问器读取时发现结构不满足 cause/delimiter/effect 三行约束
    """

    def __init__(self, message: str | None = None, details: dict | None = None):
        if message is None:
            message = _t("exc.tree_shape")
        super().__init__(message, details)


class InvalidRowCountError(TreeShapeError):
    """行数不为 3"""

    def __init__(self, message: str | None = None, row_count: int = 0):
        if message is None:
            message = _t("exc.row_count", row_count=row_count)
        super().__init__(message, {"row_count": row_count})
        self.row_count = row_count


class InvalidDelimiterError(TreeShapeError):
    """分隔行节点数不为 1"""

    def __init__(self, message: str | None = None, length: int = 0):
        if message is None:
            message = _t("exc.delimiter_length", length=length)
        super().__init__(message, {"length": length})
        self.length = length


class DelimiterNotSymbolError(TreeShapeError):
    """分隔行唯一的节点不是符号"""

    def __init__(self, message: str | None = None, node_kind: Any = None):
        kind_name = getattr(node_kind, "value", node_kind)
        if message is None:
            message = _t("exc.delimiter_not_symbol", node_kind=kind_name)
        super().__init__(message, {"node_kind": kind_name})
        self.node_kind = node_kind


class WrongTreeKindError(TreeShapeError):
    """在非效果树上调用效果访问器"""

    def __init__(self, message: str | None = None, tree_kind: Any = None):
        tree_name = getattr(tree_kind, "value", tree_kind)
        if message is None:
            message = _t("exc.wrong_tree_kind", tree_kind=tree_name)
        super().__init__(message, {"tree_kind": tree_name})
        self.tree_kind = tree_kind


# ==================== 工具函数 ====================


def raise_if_no_rows(rows: list, operation: str) -> None:
    """检查构建器是否至少有一行，没有则抛出异常

    Args:
        rows: 构建器的行序列
        operation: 调用方操作名

    Raises:
        StructuralPreconditionError: 如果行序列为空
    """
    if len(rows) == 0:
        raise StructuralPreconditionError(operation=operation)
