# -*- coding: utf-8 -*-
"""
卡面渲染树核心模块
包含链式构建器、不可变渲染树、叶子节点和异常体系

渲染层只读取 RenderTree：按 node_kind() 分派节点，
效果框通过 cause() / delimiter() / effect() / description() 读取。
"""

from .builder import Builder, build_card, build_effect, build_production_box
from .enums import ItemSize, ItemType, NodeKind, SymbolType, TreeKind
from .exceptions import (
    BuilderError, DelimiterNotSymbolError, InvalidDelimiterError,
    InvalidRowCountError, MissingNodeError, NodeNotAllowedError, RenderError,
    StructuralPreconditionError, TreeShapeError, TypeMismatchError,
    WrongTreeKindError,
)
from .nodes import NO_AMOUNT, CardRenderItem, CardRenderSymbol, CardRenderText
from .tree import LeafPolicy, RenderTree, node_kind

__all__ = [
    # 构建器
    'Builder', 'build_card', 'build_effect', 'build_production_box',
    # 枚举
    'ItemSize', 'ItemType', 'NodeKind', 'SymbolType', 'TreeKind',
    # 节点与树
    'NO_AMOUNT', 'CardRenderItem', 'CardRenderSymbol', 'CardRenderText',
    'LeafPolicy', 'RenderTree', 'node_kind',
    # 异常
    'RenderError', 'BuilderError', 'StructuralPreconditionError',
    'MissingNodeError', 'TypeMismatchError', 'NodeNotAllowedError',
    'TreeShapeError', 'InvalidRowCountError', 'InvalidDelimiterError',
    'DelimiterNotSymbolError', 'WrongTreeKindError',
]

__version__ = '1.0.0'
