"""中文翻译表"""

STRINGS: dict[str, str] = {
    # ── 异常 ──
    "exc.builder_error": "无效的构建操作",
    "exc.no_rows": "构建器中没有任何行！({operation})",
    "exc.missing_node": "调用 \"{operation}\" 时当前行没有 CardRenderItem",
    "exc.type_mismatch": "\"{operation}\" 只能作用于 CardRenderItem，实际为 {node_kind}",
    "exc.node_not_allowed": "{tree_kind} 树中不允许 {node_kind} 节点",
    "exc.tree_shape": "效果框结构无效",
    "exc.row_count": "效果框必须恰好有 3 行：条件、分隔符、效果（实际 {row_count} 行）",
    "exc.delimiter_length": "效果框分隔行必须恰好包含 1 个节点（实际 {length} 个）",
    "exc.delimiter_not_symbol": "效果框分隔符必须是符号（实际为 {node_kind}）",
    "exc.wrong_tree_kind": "效果访问器只能用于效果树（实际为 {tree_kind}）",

    # ── 资源标签 ──
    "item.temperature": "温度",
    "item.oceans": "海洋",
    "item.oxygen": "氧",
    "item.venus": "金星",
    "item.plants": "植物",
    "item.microbes": "微生物",
    "item.animals": "动物",
    "item.heat": "热",
    "item.energy": "能量",
    "item.titanium": "钛",
    "item.steel": "钢",
    "item.megacredits": "M€",
    "item.cards": "卡牌",
    "item.floaters": "浮空器",
    "item.event": "事件",
    "item.space": "太空",
    "item.trade": "贸易",
    "item.trade_discount": "贸易",
    "item.influence": "影响力",

    # ── 渲染 / 命令行 ──
    "ui.production": "生产",
    "ui.gallery_title": "卡牌图鉴",
    "ui.unknown_card": "未知卡牌：{name}",
    "ui.available_cards": "可用卡牌：",
}
