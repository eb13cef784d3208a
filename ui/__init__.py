# -*- coding: utf-8 -*-
"""
UI模块
提供卡面渲染树的终端显示
"""

from .rich_renderer import CardTreeRenderer, render_to_text

__all__ = ['CardTreeRenderer', 'render_to_text']
