from __future__ import annotations

from pathlib import Path
from typing import Any

from bloxfruits_tracker.client import StockPage, parse_servers
from bloxfruits_tracker.constants import LOADING_TEXT, NO_DATA_TEXT, NO_STOCK_TEXT, PLACEHOLDER_IMAGE
from bloxfruits_tracker.storage import JsonStore
from bloxfruits_tracker.timers import StockTimers
from bloxfruits_tracker.view import render_status, render_stock, render_timers


def _page(payload: dict[str, Any] | None = None, loading: bool = False) -> StockPage:
    page = StockPage("http://relay.invalid/api/data")
    page.loading = loading
    if payload is not None:
        page.servers = parse_servers(payload)
    return page


def test_loading_state() -> None:
    text = render_stock(_page(loading=True), "normal", remaining_ms=5000)
    assert LOADING_TEXT in text
    assert "00:00:05" in text


def test_empty_response_renders_no_data_for_both_lists() -> None:
    page = _page({"data": []})
    for kind in ("normal", "mirage"):
        text = render_stock(page, kind)
        assert NO_DATA_TEXT in text
        assert "Server:" not in text


def test_normal_stock_lists_fruits_with_prices(sample_payload: dict[str, Any]) -> None:
    text = render_stock(_page(sample_payload), "normal", remaining_ms=4 * 3600 * 1000)

    assert "NORMAL STOCK" in text
    assert "04:00:00" in text
    assert "Server: Stockbot &lt;One&gt;" in text
    assert '<a href="/images/fruits/DragonFruitEast.webp">Dragon-East</a> - $3,500,000' in text
    assert "Spin</a> - $7,500" in text
    # second server has no normal stock
    assert NO_STOCK_TEXT in text
    assert "Updated: 2023-11-14 22:13:20 UTC" in text


def test_mirage_stock(sample_payload: dict[str, Any]) -> None:
    text = render_stock(_page(sample_payload), "mirage", asset_base_url="https://cdn.example.com")

    assert "MIRAGE STOCK" in text
    assert '<a href="https://cdn.example.com/images/fruits/Kitsune.webp">kitsune</a> - $8,000,000' in text
    assert text.count(NO_STOCK_TEXT) == 1


def test_unknown_fruit_uses_placeholder() -> None:
    payload = {"data": [{"playerName": "p", "normalStock": [{"name": "Unknown123", "price": 1}]}]}
    text = render_stock(_page(payload), "normal")
    assert PLACEHOLDER_IMAGE in text


def test_theme_changes_icons(sample_payload: dict[str, Any]) -> None:
    light = render_stock(_page(sample_payload), "normal", is_dark=False)
    dark = render_stock(_page(sample_payload), "normal", is_dark=True)

    assert light.startswith("☀️")
    assert dark.startswith("🌙")
    assert "🏷" in light and "🔥" in dark


def test_render_timers(tmp_path: Path) -> None:
    timers = StockTimers(JsonStore(tmp_path / "t.json"), clock=lambda: 0)
    timers.restore()

    text = render_timers(timers)

    assert "Normal: 04:00:00" in text
    assert "Mirage: 02:00:00" in text


def test_render_status(sample_payload: dict[str, Any]) -> None:
    assert render_status(_page(loading=True)) == LOADING_TEXT
    assert render_status(_page({"data": []})) == NO_DATA_TEXT
    assert render_status(_page(sample_payload)) == (
        "Servers: 2\nNormal stock: 2 fruit(s)\nMirage stock: 1 fruit(s)"
    )


def test_out_of_range_created_at_omits_updated_line() -> None:
    payload = {"data": [{"playerName": "p", "normalStock": [{"name": "Spin", "price": 1}],
                         "createdAt": 10**17}]}

    text = render_stock(_page(payload), "normal")

    assert "Spin</a> - $1" in text
    assert "Updated:" not in text
