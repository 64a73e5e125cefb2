from __future__ import annotations

from objtasks.config import ObjtasksConfig
from objtasks.model import Rectangle


class TestRectangle:
    def test_fields(self) -> None:
        r = Rectangle(10, 20)
        assert r.width == 10
        assert r.height == 20

    def test_area(self) -> None:
        assert Rectangle(10, 20).area() == 200

    def test_area_follows_field_updates(self) -> None:
        r = Rectangle(2, 3)
        r.width = 5
        assert r.area() == 15

    def test_float_dimensions(self) -> None:
        assert Rectangle(1.5, 4).area() == 6.0

    def test_zero_area(self) -> None:
        assert Rectangle(0, 7).area() == 0


class TestObjtasksConfig:
    def test_default_values(self) -> None:
        cfg = ObjtasksConfig()
        assert cfg.json_indent is None
        assert cfg.json_sort_keys is False
        assert cfg.log_level == "WARNING"

    def test_custom_values(self) -> None:
        cfg = ObjtasksConfig(json_indent=2, json_sort_keys=True, log_level="DEBUG")
        assert cfg.json_indent == 2
        assert cfg.json_sort_keys is True
        assert cfg.log_level == "DEBUG"
