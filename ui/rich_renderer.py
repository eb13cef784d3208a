# -*- coding: utf-8 -*-
"""
Rich Card Renderer
Walks a finished RenderTree and draws it with the 'rich' library.
"""

from __future__ import annotations

import io
from typing import Optional

from rich import box
from rich.console import Console, Group, RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from cardrender.config import get_config
from cardrender.enums import ItemSize, ItemType, NodeKind
from cardrender.i18n import item_label, t
from cardrender.nodes import CardRenderItem, CardRenderSymbol
from cardrender.tree import Node, RenderTree, Row, node_kind

# Icons with up to this many units are drawn repeated instead of with a digit
MAX_REPEATED_ICONS = 5

ITEM_COLORS: dict[ItemType, str] = {
    ItemType.TEMPERATURE: "red",
    ItemType.OCEANS: "blue",
    ItemType.OXYGEN: "cyan",
    ItemType.VENUS: "magenta",
    ItemType.PLANTS: "green",
    ItemType.MICROBES: "green",
    ItemType.ANIMALS: "green",
    ItemType.HEAT: "red",
    ItemType.ENERGY: "magenta",
    ItemType.TITANIUM: "white",
    ItemType.STEEL: "yellow",
    ItemType.MEGACREDITS: "yellow",
    ItemType.CARDS: "white",
    ItemType.FLOATERS: "white",
    ItemType.EVENT: "white",
    ItemType.SPACE: "white",
    ItemType.TRADE: "cyan",
    ItemType.TRADE_DISCOUNT: "cyan",
    ItemType.INFLUENCE: "white",
}


class CardTreeRenderer:
    """
    Terminal renderer for card trees.
    Every node is dispatched on its NodeKind tag.
    """

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console(highlight=False, width=get_config().console_width)

    def print_tree(self, tree: RenderTree, title: Optional[str] = None) -> None:
        body = self.render(tree)
        if title:
            body = Panel(body, title=title, box=box.ROUNDED)
        self.console.print(body)

    def render(self, tree: RenderTree) -> RenderableType:
        return Group(*(self.render_row(row) for row in tree.rows))

    def render_row(self, row: Row) -> RenderableType:
        grid = Table.grid(padding=(0, 1))
        grid.add_row(*(self.render_node(node) for node in row))
        return grid

    def render_node(self, node: Node) -> RenderableType:
        match node_kind(node):
            case NodeKind.ITEM:
                return self.render_item(node)
            case NodeKind.SYMBOL:
                return self.render_symbol(node)
            case NodeKind.PRODUCTION:
                return self.render_production(node)
            case NodeKind.EFFECT:
                return self.render_effect(node)
            case NodeKind.TEXT:
                return Text(str(node), style="italic")

    # --- Leaves ---

    def item_text(self, item: CardRenderItem) -> str:
        """Plain text form of an item, honoring the presentation flags"""
        label = item_label(item.type)
        if not item.has_amount:
            body = label
        elif item.amount_inside:
            body = f"[{item.amount} {label}]"
        elif item.show_digit or not 0 < item.amount <= MAX_REPEATED_ICONS:
            body = f"{item.amount} {label}"
        else:
            body = " ".join([label] * item.amount)

        if item.is_played:
            body = f"<{body}>"
        if item.any_player:
            body = f"{body}*"
        return body

    def render_item(self, item: CardRenderItem) -> Text:
        style = "bold red" if item.any_player else ITEM_COLORS.get(item.type, "white")
        if item.is_played:
            style += " italic"
        return Text(self.item_text(item), style=style)

    def render_symbol(self, symbol: CardRenderSymbol) -> Text:
        style = {
            ItemSize.SMALL: "dim",
            ItemSize.MEDIUM: "",
            ItemSize.LARGE: "bold",
        }[symbol.size]
        return Text(symbol.type.glyph, style=style)

    # --- Nested boxes ---

    def render_production(self, tree: RenderTree) -> Panel:
        return Panel(
            Group(*(self.render_row(row) for row in tree.rows)),
            title=t("ui.production"),
            box=box.SQUARE,
            expand=False,
            border_style="dark_orange",
        )

    def render_effect(self, tree: RenderTree) -> RenderableType:
        delimiter = tree.delimiter()
        cells: list[RenderableType] = []
        if delimiter is not None:
            cells.extend(self.render_node(node) for node in tree.cause())
            cells.append(self.render_symbol(delimiter))
        cells.extend(self.render_node(node) for node in tree.effect())
        grid = Table.grid(padding=(0, 1))
        grid.add_row(*cells)
        return grid


def render_to_text(tree: RenderTree, width: int = 80) -> str:
    """Render a tree to plain text (no colors)"""
    console = Console(file=io.StringIO(), width=width, color_system=None, highlight=False)
    CardTreeRenderer(console).print_tree(tree)
    return console.file.getvalue()
