"""
Link-outs built from stored club settings
"""

import re
from typing import Mapping, Optional
from urllib.parse import quote_plus

from cueclub.config import settings as app_settings

_NON_DIGITS = re.compile(r"\D")


def whatsapp_url(number: Optional[str]) -> str:
    digits = _NON_DIGITS.sub("", number or "") or app_settings.DEFAULT_WHATSAPP_NUMBER
    return f"https://wa.me/{digits}"


def tel_url(number: Optional[str]) -> Optional[str]:
    if not number or not number.strip():
        return None
    return "tel:" + re.sub(r"\s+", "", number)


def directions_url(club_settings: Optional[Mapping]) -> Optional[str]:
    """Stored maps link, or a maps search on the address when none is stored"""
    if not club_settings:
        return None
    if club_settings.get("google_maps_link"):
        return club_settings["google_maps_link"]
    address = club_settings.get("address")
    if address:
        return f"https://www.google.com/maps/search/?api=1&query={quote_plus(address)}"
    return None


def map_embed_url(club_settings: Optional[Mapping]) -> Optional[str]:
    """iframe source for the location map"""
    if not club_settings:
        return None
    link = club_settings.get("google_maps_link") or ""
    if "/maps/embed" in link:
        return link
    address = club_settings.get("address")
    if address:
        return f"https://www.google.com/maps?q={quote_plus(address)}&output=embed"
    return None


def with_links(club_settings: Optional[Mapping]) -> Optional[dict]:
    """Settings row plus the computed contact links"""
    if club_settings is None:
        return None
    data = dict(club_settings)
    data["whatsapp_url"] = whatsapp_url(data.get("whatsapp_number"))
    data["phone_url"] = tel_url(data.get("contact_number"))
    data["directions_url"] = directions_url(data)
    data["map_embed_url"] = map_embed_url(data)
    return data
