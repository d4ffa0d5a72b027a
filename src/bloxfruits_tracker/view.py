from datetime import datetime, timezone
from html import escape

from .constants import LOADING_TEXT, NO_DATA_TEXT, NO_STOCK_TEXT
from .names import fruit_image
from .timers import format_remaining

TITLES = {'normal': "NORMAL STOCK", 'mirage': "MIRAGE STOCK"}
MARKERS = {'normal': "🟢", 'mirage': "🟣"}

THEMES = {
    False: {'icon': "☀️", 'bullet': "•", 'sale': "🏷"},
    True: {'icon': "🌙", 'bullet': "▪️", 'sale': "🔥"},
}


def render_stock(page, kind, is_dark=False, remaining_ms=0, asset_base_url=""):
    theme = THEMES[bool(is_dark)]
    lines = [
        f"{theme['icon']} ━━━━ {MARKERS[kind]} {TITLES[kind]} ━━━━",
        f"⏱ Next restock in {format_remaining(remaining_ms)}",
        "",
    ]

    if page.loading:
        lines.append(LOADING_TEXT)
        return "\n".join(lines)
    if not page.servers:
        lines.append(NO_DATA_TEXT)
        return "\n".join(lines)

    for server in page.servers:
        lines.append(f"<b>Server: {escape(server.player_name)}</b>")
        fruits = server.stock(kind)
        if not fruits:
            lines.append(f"<i>{NO_STOCK_TEXT}</i>")
        for fruit in fruits:
            image = escape(fruit_image(fruit.name, asset_base_url), quote=True)
            line = f"{theme['bullet']} <a href=\"{image}\">{escape(fruit.name)}</a> - ${fruit.price:,}"
            if fruit.on_sale:
                line += f" {theme['sale']}"
            lines.append(line)
        lines.append("")

    updated = _updated_at(page.created_at)
    if updated is not None:
        lines.append(f"Updated: {updated} UTC")
    return "\n".join(lines).rstrip()


def render_timers(timers):
    return (
        "━━━━ ⏱ RESTOCK TIMERS ━━━━\n\n"
        f"{MARKERS['normal']} Normal: {format_remaining(timers.remaining('normal'))}\n"
        f"{MARKERS['mirage']} Mirage: {format_remaining(timers.remaining('mirage'))}"
    )


def render_status(page):
    if page.loading:
        return LOADING_TEXT
    if not page.servers:
        return NO_DATA_TEXT
    normal = sum(len(s.normal_stock) for s in page.servers)
    mirage = sum(len(s.mirage_stock) for s in page.servers)
    return (
        f"Servers: {len(page.servers)}\n"
        f"Normal stock: {normal} fruit(s)\n"
        f"Mirage stock: {mirage} fruit(s)"
    )


def _updated_at(created_at):
    if created_at is None:
        return None
    try:
        updated = datetime.fromtimestamp(created_at / 1000, tz=timezone.utc)
    except (OverflowError, ValueError, OSError):
        return None
    return updated.strftime('%Y-%m-%d %H:%M:%S')
