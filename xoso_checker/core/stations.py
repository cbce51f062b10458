"""Southern lottery stations and station-name matching."""

import re
from dataclasses import dataclass

from xoso_checker.core.normalize import normalize, normalize_token

_TRAILING_DIGITS = re.compile(r"\d+$")


@dataclass(frozen=True)
class StationInfo:
    code: str
    name: str
    draw_day: int  # 0=Sunday ... 6=Saturday
    region: str = "MN"


# Built-in schedule, used when the stations table is empty or unreachable.
STATIONS: tuple[StationInfo, ...] = (
    StationInfo("TG", "Tiền Giang", 0),
    StationInfo("KG", "Kiên Giang", 0),
    StationInfo("DL", "Đà Lạt", 0),
    StationInfo("TP", "TP. HCM", 1),
    StationInfo("DT", "Đồng Tháp", 1),
    StationInfo("CM", "Cà Mau", 1),
    StationInfo("BT", "Bến Tre", 2),
    StationInfo("VT", "Vũng Tàu", 2),
    StationInfo("BL", "Bạc Liêu", 2),
    StationInfo("DN", "Đồng Nai", 3),
    StationInfo("CT", "Cần Thơ", 3),
    StationInfo("ST", "Sóc Trăng", 3),
    StationInfo("TN", "Tây Ninh", 4),
    StationInfo("AG", "An Giang", 4),
    StationInfo("BTH", "Bình Thuận", 4),
    StationInfo("VL", "Vĩnh Long", 5),
    StationInfo("BD", "Bình Dương", 5),
    StationInfo("TV", "Trà Vinh", 5),
    StationInfo("TP2", "TP. HCM", 6),
    StationInfo("LA", "Long An", 6),
    StationInfo("BP", "Bình Phước", 6),
    StationInfo("HG", "Hậu Giang", 6),
)

# Names as they appear on result pages, keyed by lower-cased code without
# its trailing disambiguation digits. Slug-style codes are accepted too.
STATION_KEYWORDS: dict[str, tuple[str, ...]] = {
    "tp": ("tp.hcm", "tp. hcm", "tphcm", "hồ chí minh"),
    "tphcm": ("tp.hcm", "tp. hcm", "tphcm", "hồ chí minh"),
    "dt": ("đồng tháp",),
    "dongthap": ("đồng tháp",),
    "cm": ("cà mau",),
    "camau": ("cà mau",),
    "bt": ("bến tre",),
    "bentre": ("bến tre",),
    "vt": ("vũng tàu",),
    "vungtau": ("vũng tàu",),
    "bl": ("bạc liêu",),
    "baclieu": ("bạc liêu",),
    "dn": ("đồng nai",),
    "dongnai": ("đồng nai",),
    "ct": ("cần thơ",),
    "cantho": ("cần thơ",),
    "st": ("sóc trăng",),
    "soctrang": ("sóc trăng",),
    "tn": ("tây ninh",),
    "tayninh": ("tây ninh",),
    "ag": ("an giang",),
    "angiang": ("an giang",),
    "bth": ("bình thuận",),
    "binhthuan": ("bình thuận",),
    "vl": ("vĩnh long",),
    "vinhlong": ("vĩnh long",),
    "bd": ("bình dương",),
    "binhduong": ("bình dương",),
    "tv": ("trà vinh",),
    "travinh": ("trà vinh",),
    "la": ("long an",),
    "longan": ("long an",),
    "bp": ("bình phước",),
    "binhphuoc": ("bình phước",),
    "hg": ("hậu giang",),
    "haugiang": ("hậu giang",),
    "tg": ("tiền giang",),
    "tiengiang": ("tiền giang",),
    "kg": ("kiên giang",),
    "kiengiang": ("kiên giang",),
    "dl": ("đà lạt", "lâm đồng"),
    "dalat": ("đà lạt", "lâm đồng"),
}


def strip_station_code(code: str) -> str:
    """"TP2" -> "tp": drop the weekday disambiguation suffix."""
    return _TRAILING_DIGITS.sub("", normalize_token(code))


def station_keywords(code: str) -> tuple[str, ...]:
    """Normalized names a result page may use for ``code``."""
    clean = strip_station_code(code)
    if not clean:
        return ()
    return tuple(normalize(kw) for kw in STATION_KEYWORDS.get(clean, (clean,)))


def is_station_match(text: str | None, code: str) -> bool:
    """True if a table label mentions the station identified by ``code``."""
    label = normalize(text)
    if not label:
        return False
    return any(kw in label for kw in station_keywords(code))


def stations_for_day(day: int | None = None) -> list[StationInfo]:
    if day is None:
        return list(STATIONS)
    return [s for s in STATIONS if s.draw_day == day]
