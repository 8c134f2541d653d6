"""Weather condition codes, their symbols and their coloured ASCII pictures."""

from __future__ import annotations

from typing import Optional, Union

_CODES_BY_CONDITION: dict[str, tuple[str, ...]] = {
    "Sunny": ("113",),
    "PartlyCloudy": ("116",),
    "Cloudy": ("119",),
    "VeryCloudy": ("122",),
    "Fog": ("143", "248", "260"),
    "LightShowers": ("176", "263", "353"),
    "LightSleetShowers": ("179", "362", "365", "374"),
    "LightSleet": ("182", "185", "281", "284", "311", "314", "317", "350", "377"),
    "ThunderyShowers": ("200", "386"),
    "LightSnow": ("227", "320"),
    "HeavySnow": ("230", "329", "332", "338"),
    "LightRain": ("266", "293", "296"),
    "HeavyShowers": ("299", "305", "356"),
    "HeavyRain": ("302", "308", "359"),
    "LightSnowShowers": ("323", "326", "368"),
    "HeavySnowShowers": ("335", "371", "395"),
    "ThunderyHeavyRain": ("389",),
    "ThunderySnowShowers": ("392",),
}

WEATHER_CODES: dict[str, str] = {
    code: condition
    for condition, codes in _CODES_BY_CONDITION.items()
    for code in codes
}

_SYMBOL_GROUPS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("\u2728", ("Unknown",)),
    ("\U0001f327", ("HeavyRain", "HeavyShowers", "LightSleet", "LightSleetShowers")),
    ("\U0001f326", ("LightRain", "LightShowers")),
    ("\U0001f329", ("ThunderyHeavyRain",)),
    ("", ("Cloudy",)),
    ("", ("Fog",)),
    ("󰼶", ("HeavySnow",)),
    ("󰙿", ("HeavySnowShowers",)),
    ("󰖘", ("LightSnow",)),
    ("", ("LightSnowShowers",)),
    ("", ("PartlyCloudy",)),
    ("", ("Sunny",)),
    ("", ("ThunderyShowers",)),
    ("", ("ThunderySnowShowers",)),
    ("", ("VeryCloudy",)),
)

WEATHER_SYMBOLS: dict[str, str] = {
    condition: symbol
    for symbol, conditions in _SYMBOL_GROUPS
    for condition in conditions
}

# Picture building blocks: every picture line is 13 columns wide.
_WIDTH = 13
_BLANK = " " * _WIDTH
_RESET = "\033[0m"

_YELLOW = "226"
_GREY = "250"
_DARK = "240;1"
_BLUE = "111"
_BLUE_STEADY = "111;25"
_DEEP_BLUE = "21;1"
_DEEP_BLUE_STEADY = "21;25"
_WHITE = "255"
_WHITE_STEADY = "255;25"
_BRIGHT_WHITE = "255;1"
_MIST = "251"
_FLASH = "228;5"

_DROP = "\u2018"
_DROP_RIGHT = "\u2019"
_LOW_QUOTE = "\u201a"
_BOLT = "\u26a1"
_BAR = "\u2015"
_BULLET = "\u2022"

_LIGHT_DROPS = " ".join([_DROP] * 4)
_HEAVY_DROPS = (_LOW_QUOTE + _DROP) * 4
_HEAVY_DROPS_RIGHT = (_LOW_QUOTE + _DROP_RIGHT) * 4
_SPARSE_FLAKES = "*  *  *"
_DENSE_FLAKES = "* * * *"

_SHOWER_SUN = (' _`/""', "  ,\\_", "   /")
_PARTLY_SUN = (' _ /""', "   \\_", "   /")
_SMALL_CLOUD = (".-.    ", "(   ).  ", "(___(__) ")


def _fg(spec: str) -> str:
    return f"\033[38;5;{spec}m"


def _mix(*segments: tuple[str, str]) -> str:
    return "".join(_fg(spec) + text for spec, text in segments) + _RESET


def _row(indent: int, body: str) -> str:
    return (" " * indent + body).ljust(_WIDTH)


def _paint(spec: str, indent: int, body: str) -> str:
    return _mix((spec, _row(indent, body)))


def _cloud(spec: str) -> tuple[str, ...]:
    return (
        _paint(spec, 5, ".-."),
        _paint(spec, 4, "(   )."),
        _paint(spec, 3, "(___(__)"),
    )


def _big_cloud(spec: str) -> tuple[str, ...]:
    return (
        _BLANK,
        _paint(spec, 5, ".--."),
        _paint(spec, 2, ".-(    )."),
        _paint(spec, 1, "(___.__)__)"),
        _BLANK,
    )


def _sun_and_cloud(spec: str, tops: tuple[str, ...] = _SHOWER_SUN) -> tuple[str, ...]:
    return tuple(
        _mix((_YELLOW, top), (spec, body)) for top, body in zip(tops, _SMALL_CLOUD)
    )


def _sleet(indent: int) -> tuple[str, ...]:
    pad = " " * (6 - indent)
    return (
        _mix(
            (_BLUE, " " * indent + _DROP + " "),
            (_WHITE, "*"),
            (_BLUE, " " + _DROP + " "),
            (_WHITE, "*" + pad),
        ),
        _mix(
            (_WHITE, " " * (indent - 1) + "*"),
            (_BLUE, " " + _DROP + " "),
            (_WHITE, "*"),
            (_BLUE, " " + _DROP + " " + pad),
        ),
    )


WEATHER_ASCII_SYMBOLS: dict[str, tuple[str, ...]] = {
    "Unknown": (
        _row(4, ".-."),
        _row(5, "__)"),
        _row(4, "("),
        _row(5, "`-" + _DROP_RIGHT),
        _row(6, _BULLET),
    ),
    "Sunny": tuple(
        _paint(_YELLOW, indent, body)
        for indent, body in (
            (4, "\\   /"),
            (5, ".-."),
            (2, f"{_BAR} (   ) {_BAR}"),
            (5, "`-" + _DROP_RIGHT),
            (4, "/   \\"),
        )
    ),
    "PartlyCloudy": (
        _mix((_YELLOW, "   \\  /")) + " " * 6,
        *_sun_and_cloud(_GREY, _PARTLY_SUN),
        _BLANK,
    ),
    "Cloudy": _big_cloud(_GREY),
    "VeryCloudy": _big_cloud(_DARK),
    "LightShowers": (
        *_sun_and_cloud(_GREY),
        _paint(_BLUE, 5, _LIGHT_DROPS),
        _paint(_BLUE, 4, _LIGHT_DROPS),
    ),
    "HeavyShowers": (
        *_sun_and_cloud(_DARK),
        _paint(_DEEP_BLUE, 3, _HEAVY_DROPS),
        _paint(_DEEP_BLUE, 3, _HEAVY_DROPS_RIGHT),
    ),
    "LightSnowShowers": (
        *_sun_and_cloud(_GREY),
        _paint(_WHITE, 5, _SPARSE_FLAKES),
        _paint(_WHITE, 4, _SPARSE_FLAKES),
    ),
    "HeavySnowShowers": (
        *_sun_and_cloud(_DARK),
        _paint(_BRIGHT_WHITE, 4, _DENSE_FLAKES),
        _paint(_BRIGHT_WHITE, 3, _DENSE_FLAKES),
    ),
    "LightSleetShowers": (*_sun_and_cloud(_GREY), *_sleet(5)),
    "ThunderyShowers": (
        *_sun_and_cloud(_GREY),
        _mix(
            (_FLASH, "    " + _BOLT),
            (_BLUE_STEADY, _DROP + " " + _DROP),
            (_FLASH, _BOLT),
            (_BLUE_STEADY, _DROP + " " + _DROP + " "),
        ),
        _paint(_BLUE, 4, _LIGHT_DROPS),
    ),
    "ThunderyHeavyRain": (
        *_cloud(_DARK),
        _mix(
            (_DEEP_BLUE, "  " + _LOW_QUOTE + _DROP),
            (_FLASH, _BOLT),
            (_DEEP_BLUE_STEADY, _DROP + _LOW_QUOTE),
            (_FLASH, _BOLT),
            (_DEEP_BLUE_STEADY, _LOW_QUOTE + _DROP + " "),
        ),
        _mix(
            (_DEEP_BLUE, "  " + (_LOW_QUOTE + _DROP_RIGHT) * 2),
            (_FLASH, _BOLT),
            (_DEEP_BLUE_STEADY, _DROP_RIGHT + _LOW_QUOTE + _DROP_RIGHT + "  "),
        ),
    ),
    "ThunderySnowShowers": (
        *_sun_and_cloud(_GREY),
        _mix(
            (_WHITE, "     *"),
            (_FLASH, _BOLT),
            (_WHITE_STEADY, "*"),
            (_FLASH, _BOLT),
            (_WHITE_STEADY, "* "),
        ),
        _paint(_WHITE, 4, _SPARSE_FLAKES),
    ),
    "LightRain": (
        *_cloud(_GREY),
        _paint(_BLUE, 4, _LIGHT_DROPS),
        _paint(_BLUE, 3, _LIGHT_DROPS),
    ),
    "HeavyRain": (
        *_cloud(_DARK),
        _paint(_DEEP_BLUE, 2, _HEAVY_DROPS),
        _paint(_DEEP_BLUE, 2, _HEAVY_DROPS_RIGHT),
    ),
    "LightSnow": (
        *_cloud(_GREY),
        _paint(_WHITE, 4, _SPARSE_FLAKES),
        _paint(_WHITE, 3, _SPARSE_FLAKES),
    ),
    "HeavySnow": (
        *_cloud(_DARK),
        _paint(_BRIGHT_WHITE, 3, _DENSE_FLAKES),
        _paint(_BRIGHT_WHITE, 2, _DENSE_FLAKES),
    ),
    "LightSleet": (*_cloud(_GREY), *_sleet(4)),
    "Fog": (
        _BLANK,
        _paint(_MIST, 1, "_ - _ - _ -"),
        _paint(_MIST, 2, "_ - _ - _"),
        _paint(_MIST, 1, "_ - _ - _ -"),
        _BLANK,
    ),
}


def condition_for_code(code: Union[str, int]) -> Optional[str]:
    """Return the condition name for a weather code, or None if it is unknown."""
    return WEATHER_CODES.get(str(code))


def symbol_for(code: Union[str, int]) -> str:
    """Return the icon for a weather code, or an empty string if it is unknown."""
    condition = condition_for_code(code)
    if condition is None:
        return ""
    return WEATHER_SYMBOLS.get(condition, "")


def ascii_art_for(code: Union[str, int]) -> tuple[str, ...]:
    """Return the picture lines for a weather code, or no lines if it is unknown."""
    condition = condition_for_code(code)
    if condition is None:
        return ()
    return WEATHER_ASCII_SYMBOLS.get(condition, ())