"""Weather reports: the JSON model, fetching a report and the list of cities."""

from __future__ import annotations

import json
import urllib.parse
import urllib.request
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Mapping, Union

WEATHER_ENDPOINT = "https://wttr.in/"


class WeatherError(Exception):
    """Raised when a weather report cannot be fetched or understood."""


def _text_field(key: str) -> Any:
    return field(default="", metadata={"json": key, "kind": "text"})


def _values_field(key: str) -> Any:
    return field(default=(), metadata={"json": key, "kind": "values"})


def _as_mapping(data: Any, what: str) -> Mapping[str, Any]:
    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise WeatherError(f"{what} should be an object, got {type(data).__name__}")
    return data


def _as_list(data: Any, key: str) -> list[Any]:
    if data is None:
        return []
    if not isinstance(data, list):
        raise WeatherError(f"field {key!r} should be a list, got {type(data).__name__}")
    return data


def _lookup(data: Mapping[str, Any], key: str) -> Any:
    if key in data:
        return data[key]
    folded = key.casefold()
    for name, value in data.items():
        if isinstance(name, str) and name.casefold() == folded:
            return value
    return None


def _text(value: Any, key: str) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise WeatherError(f"field {key!r} should be a string, got {type(value).__name__}")
    return value


def _values(value: Any, key: str) -> tuple[str, ...]:
    return tuple(
        _text(_lookup(_as_mapping(item, key), "value"), "value")
        for item in _as_list(value, key)
    )


def _decode(cls: type, data: Any, **extra: Any) -> Any:
    mapping = _as_mapping(data, cls.__name__)
    values: dict[str, Any] = {}
    for item in fields(cls):
        key = item.metadata.get("json")
        if key is None:
            continue
        raw = _lookup(mapping, key)
        if item.metadata["kind"] == "values":
            values[item.name] = _values(raw, key)
        else:
            values[item.name] = _text(raw, key)
    values.update(extra)
    return cls(**values)


@dataclass(frozen=True)
class CurrentCondition:
    """The conditions observed right now."""

    feels_like_c: str = _text_field("FeelsLikeC")
    feels_like_f: str = _text_field("FeelsLikeF")
    cloudcover: str = _text_field("cloudcover")
    humidity: str = _text_field("humidity")
    local_obs_date_time: str = _text_field("localObsDateTime")
    observation_time: str = _text_field("observation_time")
    precip_inches: str = _text_field("precipInches")
    precip_mm: str = _text_field("precipMM")
    pressure: str = _text_field("pressure")
    pressure_inches: str = _text_field("pressureInches")
    temp_c: str = _text_field("temp_C")
    temp_f: str = _text_field("temp_F")
    uv_index: str = _text_field("uvIndex")
    visibility: str = _text_field("visibility")
    visibility_miles: str = _text_field("visibilityMiles")
    weather_code: str = _text_field("weatherCode")
    weather_desc: tuple[str, ...] = _values_field("weatherDesc")
    weather_icon_url: tuple[str, ...] = _values_field("weatherIconUrl")
    winddir_16_point: str = _text_field("winddir16Point")
    winddir_degree: str = _text_field("winddirDegree")
    windspeed_kmph: str = _text_field("windspeedKmph")
    windspeed_miles: str = _text_field("windspeedMiles")

    @classmethod
    def from_dict(cls, data: Any) -> "CurrentCondition":
        """Build from a decoded JSON object."""
        return _decode(cls, data)


@dataclass(frozen=True)
class HourlyForecast:
    """The forecast for one part of a day."""

    time: str = _text_field("time")
    temp_c: str = _text_field("tempC")
    temp_f: str = _text_field("tempF")
    feels_like_c: str = _text_field("FeelsLikeC")
    feels_like_f: str = _text_field("FeelsLikeF")
    dew_point_c: str = _text_field("DewPointC")
    dew_point_f: str = _text_field("DewPointF")
    heat_index_c: str = _text_field("HeatIndexC")
    heat_index_f: str = _text_field("HeatIndexF")
    wind_chill_c: str = _text_field("WindChillC")
    wind_chill_f: str = _text_field("WindChillF")
    wind_gust_kmph: str = _text_field("WindGustKmph")
    wind_gust_miles: str = _text_field("WindGustMiles")
    cloudcover: str = _text_field("cloudcover")
    humidity: str = _text_field("humidity")
    precip_inches: str = _text_field("precipInches")
    precip_mm: str = _text_field("precipMM")
    pressure: str = _text_field("pressure")
    pressure_inches: str = _text_field("pressureInches")
    visibility: str = _text_field("visibility")
    visibility_miles: str = _text_field("visibilityMiles")
    weather_code: str = _text_field("weatherCode")
    weather_desc: tuple[str, ...] = _values_field("weatherDesc")
    weather_icon_url: tuple[str, ...] = _values_field("weatherIconUrl")
    winddir_16_point: str = _text_field("winddir16Point")
    winddir_degree: str = _text_field("winddirDegree")
    windspeed_kmph: str = _text_field("windspeedKmph")
    windspeed_miles: str = _text_field("windspeedMiles")
    diff_rad: str = _text_field("diffRad")
    short_rad: str = _text_field("shortRad")
    chance_of_fog: str = _text_field("chanceoffog")
    chance_of_frost: str = _text_field("chanceoffrost")
    chance_of_high_temp: str = _text_field("chanceofhightemp")
    chance_of_overcast: str = _text_field("chanceofovercast")
    chance_of_rain: str = _text_field("chanceofrain")
    chance_of_rem_dry: str = _text_field("chanceofremdry")
    chance_of_snow: str = _text_field("chanceofsnow")
    chance_of_sunshine: str = _text_field("chanceofsunshine")
    chance_of_thunder: str = _text_field("chanceofthunder")
    chance_of_windy: str = _text_field("chanceofwindy")

    @classmethod
    def from_dict(cls, data: Any) -> "HourlyForecast":
        """Build from a decoded JSON object."""
        return _decode(cls, data)


@dataclass(frozen=True)
class WeatherForecast:
    """The forecast for one day."""

    date: str = _text_field("date")
    maxtemp_c: str = _text_field("maxtempC")
    maxtemp_f: str = _text_field("maxtempF")
    mintemp_c: str = _text_field("mintempC")
    mintemp_f: str = _text_field("mintempF")
    sun_hour: str = _text_field("sunHour")
    total_snow_cm: str = _text_field("totalSnow_cm")
    uv_index: str = _text_field("uvIndex")
    hourly: tuple[HourlyForecast, ...] = ()

    @classmethod
    def from_dict(cls, data: Any) -> "WeatherForecast":
        """Build from a decoded JSON object."""
        mapping = _as_mapping(data, cls.__name__)
        hourly = tuple(
            HourlyForecast.from_dict(item)
            for item in _as_list(_lookup(mapping, "hourly"), "hourly")
        )
        return _decode(cls, mapping, hourly=hourly)


@dataclass(frozen=True)
class WeatherResponse:
    """A whole weather report: current conditions and daily forecasts."""

    current_condition: tuple[CurrentCondition, ...] = ()
    weather: tuple[WeatherForecast, ...] = ()

    @classmethod
    def from_dict(cls, data: Any) -> "WeatherResponse":
        """Build from a decoded JSON object."""
        mapping = _as_mapping(data, cls.__name__)
        current = tuple(
            CurrentCondition.from_dict(item)
            for item in _as_list(_lookup(mapping, "current_condition"), "current_condition")
        )
        forecasts = tuple(
            WeatherForecast.from_dict(item)
            for item in _as_list(_lookup(mapping, "weather"), "weather")
        )
        return cls(current_condition=current, weather=forecasts)

    @classmethod
    def from_json(cls, text: Union[str, bytes]) -> "WeatherResponse":
        """Parse a JSON report."""
        try:
            data = json.loads(text)
        except ValueError as exc:
            raise WeatherError(f"invalid weather report: {exc}") from exc
        return cls.from_dict(data)


def weather_url(city: str) -> str:
    """Return the address of the JSON report for city."""
    path = urllib.parse.quote(city.replace(" ", "+"), safe="/+")
    return f"{WEATHER_ENDPOINT}{path}?format=j1"


def fetch_weather(city: str, timeout: float = 10.0) -> WeatherResponse:
    """Download and parse the weather report for city."""
    try:
        with urllib.request.urlopen(weather_url(city), timeout=timeout) as response:
            body = response.read()
    except (OSError, ValueError) as exc:
        raise WeatherError(str(exc)) from exc
    return WeatherResponse.from_json(body)


def parse_cities(text: str) -> list[str]:
    """Split text into one city per line, trimming surrounding blanks."""
    return [line.strip() for line in text.split("\n")]


def load_cities(path: Union[str, Path]) -> list[str]:
    """Read the list of cities from a text file."""
    return parse_cities(Path(path).read_text(encoding="utf-8"))