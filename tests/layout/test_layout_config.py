"""
Unit tests for LayoutConfig.
"""

import pytest

from photoprint_toolkit.layout import LayoutConfig, PAPER_SIZES_IN


class TestLayoutConfig:

    def test_defaults_when_constructed_then_letter_at_96_dpi(self):
        config = LayoutConfig()
        assert (config.page_width_in, config.page_height_in) == (8.5, 11.0)
        assert config.dpi == 96
        assert config.margin_px == pytest.approx(9.6)
        assert config.gap_px == 0

    def test_usable_area_when_default_then_inside_margins(self):
        config = LayoutConfig()
        assert config.usable_width_px == pytest.approx(796.8)
        assert config.usable_height_px == pytest.approx(1036.8)
        assert not config.is_degenerate

    @pytest.mark.parametrize("field,value", [
        ("page_width_in", 0),
        ("page_height_in", -1),
        ("dpi", 0),
        ("margin_in", -0.1),
        ("gap_in", -1),
    ])
    def test_init_when_invalid_value_then_raises_error(self, field, value):
        with pytest.raises(ValueError, match=field):
            LayoutConfig(**{field: value})

    def test_init_when_margin_too_large_then_degenerate_not_error(self):
        """Oversized margins are reported by the packer, not rejected here."""
        config = LayoutConfig(margin_in=5.0)
        assert config.usable_width_px < 0
        assert config.is_degenerate

    def test_for_paper_when_known_name_then_uses_paper_size(self):
        config = LayoutConfig.for_paper("A4", margin_in=0.25)
        assert (config.page_width_in, config.page_height_in) == PAPER_SIZES_IN["a4"]
        assert config.margin_in == 0.25

    def test_for_paper_when_unknown_name_then_raises_error(self):
        with pytest.raises(ValueError, match="Unknown paper size"):
            LayoutConfig.for_paper("tabloid")
