from typing import Optional

from .constants import FRUIT_IMAGES, IMAGE_PATH_PREFIX, PLACEHOLDER_IMAGE


def normalize_fruit_name(raw: Optional[str]) -> str:
    """Canonical lookup key for a raw fruit name.

    "Dragon-East" -> "Dragon", "  dark   BLADE " -> "Dark blade".
    """
    if not raw:
        return ""
    base = " ".join(raw.split("-", 1)[0].split())
    return base[:1].upper() + base[1:].lower()


def fruit_image(raw: Optional[str], base_url: str = "") -> str:
    filename = FRUIT_IMAGES.get(normalize_fruit_name(raw))
    if filename is None:
        return PLACEHOLDER_IMAGE
    return f"{base_url}{IMAGE_PATH_PREFIX}{filename}"
