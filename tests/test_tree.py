"""
渲染树测试

验证:
1. 节点标签分派
2. 叶子接受策略在构造时生效
3. 效果树访问器的惰性结构检查
"""

import dataclasses

import pytest

from cardrender import (
    CardRenderItem,
    CardRenderSymbol,
    CardRenderText,
    DelimiterNotSymbolError,
    InvalidDelimiterError,
    InvalidRowCountError,
    ItemType,
    NodeKind,
    NodeNotAllowedError,
    RenderTree,
    TreeKind,
    TreeShapeError,
    WrongTreeKindError,
    build_effect,
    node_kind,
)
from cardrender.tree import EFFECT_POLICY, GENERIC_POLICY, PRODUCTION_POLICY

HEAT = CardRenderItem(ItemType.HEAT, 1)
OCEAN = CardRenderItem(ItemType.OCEANS, 1)
COLON = CardRenderSymbol.colon()


def effect_tree(*rows):
    return RenderTree(TreeKind.EFFECT, rows)


class TestNodeKind:
    def test_leaves(self):
        assert node_kind(HEAT) == NodeKind.ITEM
        assert node_kind(COLON) == NodeKind.SYMBOL
        assert node_kind(CardRenderText("x")) == NodeKind.TEXT

    def test_trees(self):
        assert node_kind(RenderTree(TreeKind.PRODUCTION)) == NodeKind.PRODUCTION
        assert node_kind(RenderTree(TreeKind.EFFECT)) == NodeKind.EFFECT

    def test_generic_tree_is_not_a_node(self):
        with pytest.raises(TypeError):
            node_kind(RenderTree())

    def test_plain_string_is_not_a_node(self):
        with pytest.raises(TypeError):
            node_kind("text")


class TestLeafPolicies:
    def test_generic_accepts_everything(self):
        assert all(GENERIC_POLICY.allows(kind) for kind in NodeKind)

    def test_production(self):
        assert PRODUCTION_POLICY.allows(NodeKind.ITEM)
        assert PRODUCTION_POLICY.allows(NodeKind.SYMBOL)
        assert not PRODUCTION_POLICY.allows(NodeKind.TEXT)
        assert not PRODUCTION_POLICY.allows(NodeKind.PRODUCTION)
        assert not PRODUCTION_POLICY.allows(NodeKind.EFFECT)

    def test_effect(self):
        assert EFFECT_POLICY.allows(NodeKind.PRODUCTION)
        assert EFFECT_POLICY.allows(NodeKind.TEXT)
        assert not EFFECT_POLICY.allows(NodeKind.EFFECT)

    def test_construction_rejects_text_in_production(self):
        with pytest.raises(NodeNotAllowedError):
            RenderTree(TreeKind.PRODUCTION, ((HEAT, CardRenderText("x")),))


class TestRenderTree:
    def test_default_rows(self):
        assert RenderTree().rows == ((),)

    def test_rows_frozen(self):
        tree = RenderTree(TreeKind.GENERIC, [[HEAT]])
        assert tree.rows == ((HEAT,),)
        with pytest.raises(dataclasses.FrozenInstanceError):
            tree.rows = ()

    def test_kind_helpers(self):
        assert RenderTree(TreeKind.PRODUCTION).is_production
        assert RenderTree(TreeKind.EFFECT).is_effect
        assert not RenderTree().is_effect


class TestEffectAccessors:
    def test_valid_tree(self):
        tree = effect_tree([HEAT], [COLON], [OCEAN, CardRenderText("desc")])
        assert tree.cause() == (HEAT,)
        assert tree.delimiter() == COLON
        assert tree.effect() == (OCEAN, CardRenderText("desc"))
        assert tree.description() == "desc"

    def test_empty_cause_hides_delimiter(self):
        tree = build_effect(lambda b: b.start_effect().oceans(1))
        assert tree.rows == ((), (COLON,), (OCEAN,))
        assert tree.cause() == ()
        assert tree.delimiter() is None
        assert tree.effect() == (OCEAN,)

    def test_description_coerces_last_node(self):
        tree = effect_tree([HEAT], [COLON], [OCEAN])
        assert tree.description() == str(OCEAN)

    def test_description_empty_effect_row(self):
        assert effect_tree([HEAT], [COLON], []).description() == ""

    @pytest.mark.parametrize("rows", [[[HEAT]], [[HEAT], [COLON]], [[], [COLON], [], []]])
    def test_row_count(self, rows):
        tree = effect_tree(*rows)
        for accessor in (tree.cause, tree.delimiter, tree.effect, tree.description):
            with pytest.raises(InvalidRowCountError) as exc_info:
                accessor()
            assert exc_info.value.row_count == len(rows)

    @pytest.mark.parametrize("delimiter_row", [[], [COLON, COLON]])
    def test_delimiter_length(self, delimiter_row):
        tree = effect_tree([HEAT], delimiter_row, [OCEAN])
        with pytest.raises(InvalidDelimiterError) as exc_info:
            tree.effect()
        assert exc_info.value.length == len(delimiter_row)

    def test_delimiter_not_symbol(self):
        tree = effect_tree([HEAT], [OCEAN], [OCEAN])
        with pytest.raises(DelimiterNotSymbolError) as exc_info:
            tree.cause()
        assert exc_info.value.node_kind == NodeKind.ITEM

    def test_shape_errors_share_base(self):
        for exc in (InvalidRowCountError, InvalidDelimiterError, DelimiterNotSymbolError, WrongTreeKindError):
            assert issubclass(exc, TreeShapeError)

    def test_non_effect_tree(self):
        tree = RenderTree(TreeKind.PRODUCTION, [[HEAT], [COLON], [OCEAN]])
        with pytest.raises(WrongTreeKindError):
            tree.cause()

    def test_validation_is_repeatable(self):
        tree = effect_tree([HEAT], [COLON], [OCEAN])
        for _ in range(3):
            tree.validate()
            assert tree.effect() == (OCEAN,)
        assert tree.rows == ((HEAT,), (COLON,), (OCEAN,))
