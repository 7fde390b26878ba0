"""WMO condition-code tables and the small derivations built on top of them.

Open-Meteo reports the sky as a WMO weather code and leaves out a few fields
the UI wants (visibility, dew point). Everything here is pure so it can be
exercised without any network access.
"""
from __future__ import annotations

import datetime as dt
import math
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

IS_DAY = 1
UNKNOWN_DESCRIPTION = "unknown"


@dataclass(frozen=True)
class IconPair:
    """Day and night icon identifiers for one condition."""
    day: str
    night: str

    def pick(self, is_day: bool) -> str:
        return self.day if is_day else self.night


CLEAR_SKY_ICONS = IconPair("01d", "01n")

_PARTLY_CLOUDY = IconPair("02d", "02n")
_OVERCAST = IconPair("03d", "03n")
_FOG = IconPair("50d", "50n")
_DRIZZLE = IconPair("09d", "09n")
_RAIN = IconPair("10d", "10n")
_SNOW = IconPair("13d", "13n")
_THUNDER = IconPair("11d", "11n")

CONDITION_DESCRIPTIONS: Mapping[int, str] = MappingProxyType({
    0: "clear sky",
    1: "mainly clear",
    2: "partly cloudy",
    3: "overcast",
    45: "fog",
    48: "depositing rime fog",
    51: "light drizzle",
    53: "moderate drizzle",
    55: "dense drizzle",
    61: "slight rain",
    63: "moderate rain",
    65: "heavy rain",
    71: "slight snow",
    73: "moderate snow",
    75: "heavy snow",
    95: "thunderstorm",
    96: "thunderstorm with slight hail",
    99: "thunderstorm with heavy hail",
})

CONDITION_ICONS: Mapping[int, IconPair] = MappingProxyType({
    0: CLEAR_SKY_ICONS,
    1: CLEAR_SKY_ICONS,
    2: _PARTLY_CLOUDY,
    3: _OVERCAST,
    45: _FOG,
    48: _FOG,
    51: _DRIZZLE,
    53: _DRIZZLE,
    55: _DRIZZLE,
    61: _RAIN,
    63: _RAIN,
    65: _RAIN,
    71: _SNOW,
    73: _SNOW,
    75: _SNOW,
    95: _THUNDER,
    96: _THUNDER,
    99: _THUNDER,
})

# Checked in order, first match wins. Values are kilometres.
VISIBILITY_BY_FAMILY: Tuple[Tuple[range, int], ...] = (
    (range(45, 49), 2),  # fog
    (range(51, 66), 5),  # drizzle / rain
    (range(71, 76), 3),  # snow
)
HUMID_THRESHOLD = 80
HUMID_VISIBILITY_KM = 8
CLEAR_VISIBILITY_KM = 10

# Magnus formula constants
MAGNUS_A = 17.27
MAGNUS_B = 237.7


def describe_condition(code: int) -> str:
    """Human-readable description of a WMO code, ``"unknown"`` when unmapped."""
    return CONDITION_DESCRIPTIONS.get(code, UNKNOWN_DESCRIPTION)


def condition_icon(code: int, is_day: bool) -> str:
    """Icon identifier for a WMO code; unmapped codes use the clear-sky pair."""
    return CONDITION_ICONS.get(code, CLEAR_SKY_ICONS).pick(is_day)


def is_daytime(flag: object) -> bool:
    """Open-Meteo sends ``is_day`` as 0/1; only the exact sentinel counts as day."""
    return flag == IS_DAY and not isinstance(flag, bool)


def estimate_visibility(code: int, humidity: float) -> int:
    """Estimate visibility in km since Open-Meteo does not report it."""
    for codes, km in VISIBILITY_BY_FAMILY:
        if code in codes:
            return km
    if humidity > HUMID_THRESHOLD:
        return HUMID_VISIBILITY_KM
    return CLEAR_VISIBILITY_KM


def dew_point(temperature: float, humidity: float) -> Optional[float]:
    """Magnus approximation of the dew point.

    Returns None when humidity is not positive, as the logarithm is undefined.
    """
    if humidity <= 0:
        return None
    alpha = (MAGNUS_A * temperature) / (MAGNUS_B + temperature) + math.log(humidity / 100)
    return (MAGNUS_B * alpha) / (MAGNUS_A - alpha)


def round_half_away(value: float) -> int:
    """Round to the nearest integer with halves going away from zero."""
    return int(Decimal(str(value)).quantize(Decimal(1), rounding=ROUND_HALF_UP))


def format_clock_time(iso: str) -> str:
    """Render an ISO timestamp as ``"6:42 AM"``.

    The wall-clock part is used as given; Open-Meteo already converted it to
    the location's timezone. AM/PM is always English regardless of host locale.
    """
    moment = dt.datetime.fromisoformat(iso)
    hour = moment.hour % 12 or 12
    marker = "AM" if moment.hour < 12 else "PM"
    return f"{hour}:{moment.minute:02d} {marker}"
