"""Tests for postfix modifiers: any / played / digit / brackets."""

import pytest

from cardrender import (
    Builder,
    CardRenderItem,
    CardRenderSymbol,
    ItemType,
    MissingNodeError,
    NodeKind,
    StructuralPreconditionError,
    SymbolType,
    TypeMismatchError,
    build_card,
)

MODIFIERS = ["any", "played", "digit", "brackets"]


class TestFlagModifiers:
    def test_any(self):
        item = build_card(lambda b: b.plants(2).any()).rows[0][0]
        assert item.any_player is True
        assert item.is_played is False

    def test_played(self):
        item = build_card(lambda b: b.titanium(1).played()).rows[0][0]
        assert item.is_played is True
        assert item.any_player is False

    def test_digit(self):
        item = build_card(lambda b: b.heat(7).digit()).rows[0][0]
        assert item.show_digit is True

    def test_megacredits_digit_overrides_default(self):
        item = build_card(lambda b: b.megacredits(3).digit()).rows[0][0]
        assert item.show_digit is True
        assert item.amount_inside is True

    def test_stacked_modifiers(self):
        item = build_card(lambda b: b.animals(1).any().played()).rows[0][0]
        assert item.any_player and item.is_played

    def test_only_tail_is_modified(self):
        tree = build_card(lambda b: b.heat(1).br().heat(2).steel(3).any())
        assert tree.rows[0][0].any_player is False
        heat, steel = tree.rows[1]
        assert heat.any_player is False
        assert steel.any_player is True


class TestBrackets:
    def test_brackets_wrap_tail(self):
        tree = build_card(lambda b: b.heat(1).brackets())
        assert tree.rows[0] == (
            CardRenderSymbol.bracket_open(),
            CardRenderItem(ItemType.HEAT, 1),
            CardRenderSymbol.bracket_close(),
        )

    def test_brackets_keep_item_fields(self):
        tree = build_card(lambda b: b.plants(4).any().brackets())
        open_, item, close = tree.rows[0]
        assert open_.type == SymbolType.BRACKET_OPEN
        assert close.type == SymbolType.BRACKET_CLOSE
        assert item == CardRenderItem(ItemType.PLANTS, 4, any_player=True)

    def test_brackets_add_two_nodes(self):
        builder = Builder()
        builder.steel(1).plus().megacredits(2)
        builder.brackets()
        row = builder.build().rows[0]
        assert len(row) == 5
        assert row[0] == CardRenderItem(ItemType.STEEL, 1)
        assert row[1] == CardRenderSymbol.plus()


class TestModifierErrors:
    @pytest.mark.parametrize("modifier", MODIFIERS)
    def test_missing_node_after_br(self, modifier):
        builder = Builder()
        builder.heat(1).br()
        with pytest.raises(MissingNodeError) as exc_info:
            getattr(builder, modifier)()
        assert exc_info.value.operation == modifier

    def test_played_after_br(self):
        with pytest.raises(MissingNodeError):
            build_card(lambda b: b.heat(1).br().played())

    @pytest.mark.parametrize("modifier", MODIFIERS)
    def test_type_mismatch_after_symbol(self, modifier):
        builder = Builder()
        builder.heat(1).plus()
        with pytest.raises(TypeMismatchError) as exc_info:
            getattr(builder, modifier)()
        assert exc_info.value.node_kind == NodeKind.SYMBOL

    def test_any_after_plus(self):
        with pytest.raises(TypeMismatchError):
            build_card(lambda b: b.plus().any())

    def test_type_mismatch_after_text(self):
        with pytest.raises(TypeMismatchError) as exc_info:
            build_card(lambda b: b.description("x").digit())
        assert exc_info.value.node_kind == NodeKind.TEXT

    def test_type_mismatch_after_box(self):
        with pytest.raises(TypeMismatchError) as exc_info:
            build_card(lambda b: b.production_box(lambda pb: pb.heat(1)).any())
        assert exc_info.value.node_kind == NodeKind.PRODUCTION

    def test_failed_modifier_leaves_row_intact(self):
        builder = Builder()
        builder.heat(1).plus()
        with pytest.raises(TypeMismatchError):
            builder.brackets()
        assert builder.build().rows[0] == (CardRenderItem(ItemType.HEAT, 1), CardRenderSymbol.plus())


class TestStructuralPrecondition:
    """行序列被清空时的前置条件检查"""

    @pytest.fixture
    def rowless(self):
        builder = Builder()
        builder._rows.clear()
        return builder

    @pytest.mark.parametrize("operation", ["plus", "minus", "slash", "or_", "asterix", "empty"])
    def test_symbol_requires_rows(self, rowless, operation):
        with pytest.raises(StructuralPreconditionError):
            getattr(rowless, operation)()

    def test_description_requires_rows(self, rowless):
        with pytest.raises(StructuralPreconditionError) as exc_info:
            rowless.description("x")
        assert exc_info.value.operation == "description"

    @pytest.mark.parametrize("modifier", MODIFIERS)
    def test_modifier_requires_rows(self, rowless, modifier):
        with pytest.raises(StructuralPreconditionError):
            getattr(rowless, modifier)()

    def test_empty_active_row_is_not_structural(self):
        """空的当前行不触发结构异常"""
        builder = Builder()
        builder.plus().description("x")
        assert len(builder.build().rows[0]) == 2
