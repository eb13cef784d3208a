"""Tests for the cardrender.i18n module."""

import pytest

from cardrender.enums import ItemType
from cardrender.i18n import (
    get_available_locales,
    get_locale,
    item_label,
    set_locale,
    t,
)


@pytest.fixture(autouse=True)
def _reset_locale():
    original = get_locale()
    set_locale("en_US")
    yield
    set_locale(original)


class TestSetLocale:
    def test_switch_to_zh(self):
        set_locale("zh_CN")
        assert get_locale() == "zh_CN"

    def test_invalid_locale(self):
        with pytest.raises(ValueError, match="Unsupported locale"):
            set_locale("ja_JP")

    def test_available_locales(self):
        assert get_available_locales() == ["en_US", "zh_CN"]


class TestTranslation:
    def test_basic_key(self):
        assert t("ui.production") == "Production"
        set_locale("zh_CN")
        assert t("ui.production") == "生产"

    def test_format_kwargs(self):
        assert t("ui.unknown_card", name="foo") == "Unknown card: foo"

    def test_missing_key(self):
        assert t("no.such.key") == "[no.such.key]"

    def test_missing_format_arg_returns_template(self):
        assert t("ui.unknown_card", other=1) == "Unknown card: {name}"

    def test_tables_have_same_keys(self):
        from cardrender.i18n.en_US import STRINGS as EN
        from cardrender.i18n.zh_CN import STRINGS as ZH
        assert set(EN) == set(ZH)

    def test_every_key_is_referenced(self):
        """除资源标签外，每个翻译键都应在代码中被引用"""
        from pathlib import Path

        from cardrender.i18n.en_US import STRINGS as EN

        root = Path(__file__).resolve().parent.parent
        sources = [root / "main.py", *(root / "cardrender").glob("*.py"), *(root / "ui").glob("*.py")]
        code = "\n".join(path.read_text(encoding="utf-8") for path in sources)
        referenced = {key for key in EN if f'"{key}"' in code or f"'{key}'" in code}
        unused = [key for key in EN if not key.startswith("item.") and key not in referenced]
        assert unused == []


class TestLabels:
    def test_every_item_has_label(self):
        for item_type in ItemType:
            assert not item_label(item_type).startswith("[item.")

    def test_item_label(self):
        assert item_label(ItemType.OXYGEN) == "O2"
        set_locale("zh_CN")
        assert item_label(ItemType.OXYGEN) == "氧"
