"""English translation table."""

STRINGS: dict[str, str] = {
    # ── Exceptions ──
    "exc.builder_error": "Invalid builder operation",
    "exc.no_rows": "No items in builder data! ({operation})",
    "exc.missing_node": 'Called "{operation}" without a CardRenderItem.',
    "exc.type_mismatch": '"{operation}" could be called on CardRenderItem only, got {node_kind}',
    "exc.node_not_allowed": "A {node_kind} node is not allowed in a {tree_kind} tree",
    "exc.tree_shape": "Invalid card effect structure",
    "exc.row_count": "Card effect must have 3 rows representing cause, delimiter and effect (got {row_count})",
    "exc.delimiter_length": "Card effect delimiter row must contain exactly 1 item (got {length})",
    "exc.delimiter_not_symbol": "Effect delimiter must be a symbol (got {node_kind})",
    "exc.wrong_tree_kind": "Effect accessors need an effect tree (got {tree_kind})",

    # ── Item labels (terminal renderer) ──
    "item.temperature": "°C",
    "item.oceans": "Ocean",
    "item.oxygen": "O2",
    "item.venus": "Venus",
    "item.plants": "Plant",
    "item.microbes": "Microbe",
    "item.animals": "Animal",
    "item.heat": "Heat",
    "item.energy": "Energy",
    "item.titanium": "Ti",
    "item.steel": "Steel",
    "item.megacredits": "M€",
    "item.cards": "Card",
    "item.floaters": "Floater",
    "item.event": "Event",
    "item.space": "Space",
    "item.trade": "Trade",
    "item.trade_discount": "Trade",
    "item.influence": "Influence",

    # ── Renderer / CLI ──
    "ui.production": "Production",
    "ui.gallery_title": "Card gallery",
    "ui.unknown_card": "Unknown card: {name}",
    "ui.available_cards": "Available cards:",
}
