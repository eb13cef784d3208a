# -*- coding: utf-8 -*-
"""
卡面渲染 - 命令行演示
用终端渲染器展示几张示例卡牌的渲染树

使用方法:
    python main.py                 # 显示全部示例卡牌
    python main.py --card ants     # 只显示一张
    python main.py --list          # 列出示例卡牌
    python main.py --locale zh_CN  # 中文标签
"""

from __future__ import annotations

import argparse
import dataclasses
import logging
import sys
from typing import Callable

from rich.markup import escape

from cardrender import RenderTree, build_card
from cardrender.config import get_config
from cardrender.i18n import set_locale, t
from logging_config import setup_logging
from ui.rich_renderer import CardTreeRenderer

logger = logging.getLogger(__name__)


def _ants() -> RenderTree:
    return build_card(
        lambda b: b.effect_box(
            lambda eb: eb.microbes(1).any().start_action().microbes(1).description(
                "Action: Remove 1 microbe from any card to add 1 to this card."
            )
        ).br().description("1 VP per 2 microbes on this card.")
    )


def _arctic_algae() -> RenderTree:
    return build_card(
        lambda b: b.effect_box(
            lambda eb: eb.oceans(1).any().start_effect().plants(2).description(
                "Effect: When anyone places an ocean tile, gain 2 plants."
            )
        ).br().plants(1).description("Gain 1 plant.")
    )


def _aerobraked_ammonia_asteroid() -> RenderTree:
    return build_card(
        lambda b: b.production_box(lambda pb: pb.heat(3).br().plants(1))
        .microbes(2).asterix()
        .br().description("Increase heat production 3 steps and plant production 1 step.")
    )


def _comet() -> RenderTree:
    return build_card(
        lambda b: b.temperature(1).oceans(1)
        .br().minus().plants(3).any()
        .br().description("Raise temperature 1 step and place an ocean tile. Remove up to 3 plants from any player.")
    )


def _trade_envoys() -> RenderTree:
    return build_card(
        lambda b: b.effect_box(
            lambda eb: eb.empty().start_effect().trade().trade_discount(1).description(
                "Effect: When you trade, you may first increase that colony tile track 1 step."
            )
        )
    )


def _solar_wind_power() -> RenderTree:
    return build_card(
        lambda b: b.production_box(lambda pb: pb.energy(1)).titanium(2)
        .br().space().event().megacredits(8).brackets()
    )


SAMPLE_CARDS: dict[str, Callable[[], RenderTree]] = {
    "ants": _ants,
    "arctic_algae": _arctic_algae,
    "aerobraked_ammonia_asteroid": _aerobraked_ammonia_asteroid,
    "comet": _comet,
    "trade_envoys": _trade_envoys,
    "solar_wind_power": _solar_wind_power,
}


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    config = get_config()
    parser = argparse.ArgumentParser(description="Render sample card trees in the terminal")
    parser.add_argument("--card", help="render only this sample card")
    parser.add_argument("--list", action="store_true", help="list sample cards and exit")
    parser.add_argument("--locale", default=config.locale, help="label locale (en_US / zh_CN)")
    parser.add_argument("--log-level", default=config.log_level, help="file log level")
    parser.add_argument("--console-log", action="store_true", help="also log to stderr")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    config = dataclasses.replace(get_config(), log_level=args.log_level)
    setup_logging(config, enable_console=args.console_log)
    set_locale(args.locale)

    renderer = CardTreeRenderer()

    if args.list:
        renderer.console.print(t("ui.available_cards"))
        for name in SAMPLE_CARDS:
            renderer.console.print(f"  {name}")
        return 0

    if args.card:
        factory = SAMPLE_CARDS.get(args.card)
        if factory is None:
            renderer.console.print(f"[red]{t('ui.unknown_card', name=escape(args.card))}[/red]")
            return 1
        selected = {args.card: factory}
    else:
        selected = SAMPLE_CARDS

    renderer.console.rule(t("ui.gallery_title"))
    for name, factory in selected.items():
        logger.info("Rendering sample card %s", name)
        renderer.print_tree(factory(), title=name)
    return 0


if __name__ == "__main__":
    sys.exit(main())
