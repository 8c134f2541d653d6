"""A terminal interface for picking a city and showing its weather."""

from __future__ import annotations

import argparse
import queue
import threading
from dataclasses import dataclass, field, replace
from typing import Callable, Iterable, Optional, Union

from practica.conditions import ascii_art_for, symbol_for
from practica.fuzzy import filter_words
from practica.weather import WeatherError, WeatherResponse, fetch_weather, load_cities

_HEADER = 5
_FILTER = 6
_CURSOR = 3
_SELECTED = 2
_HELP = 8
_TEMPERATURE = 202
_WIND = 81
_UV_INDEX = 129

_BANNER = """
\t\t\t\t\t  \\   /
\t\t\t\t\t   .-.
\tWeather TUI \t― (   ) ―
\t\t\t\t\t   '-'
\t\t\t\t\t  /   \\   
\t"""


def _paint(text: str, color: int, bold: bool = False) -> str:
    text = text.replace("\t", "    ")
    prefix = f"\033[{'1;' if bold else ''}38;5;{color}m"
    return "\n".join(f"{prefix}{line}\033[0m" if line else line for line in text.split("\n"))


def _pad(text: str) -> str:
    lines = ["  " + line + "  " for line in text.split("\n")]
    return "\n".join(["", *lines, ""])


@dataclass(frozen=True)
class KeyPress:
    """A key the user pressed, by name: "q", "enter", "up", "esc"..."""

    key: str


@dataclass(frozen=True)
class WeatherLoaded:
    """A weather report arrived."""

    weather: WeatherResponse


@dataclass(frozen=True)
class FilterResult:
    """The cities matching the current filter."""

    filtered: tuple[str, ...]


@dataclass(frozen=True)
class ErrorMessage:
    """Something went wrong in the background."""

    error: BaseException


Message = Union[KeyPress, WeatherLoaded, FilterResult, ErrorMessage]
Command = Callable[[], Message]


def filter_command(cities: Iterable[str], query: str) -> Command:
    """Return a command that filters the cities by query."""
    names = list(cities)

    def command() -> Message:
        return FilterResult(tuple(filter_words(names, query)))

    return command


def weather_command(city: str) -> Command:
    """Return a command that fetches the weather for city."""

    def command() -> Message:
        try:
            return WeatherLoaded(fetch_weather(city))
        except WeatherError as exc:
            return ErrorMessage(exc)

    return command


@dataclass(frozen=True)
class Model:
    """The state of the interface; update returns a new model."""

    cities: Optional[tuple[str, ...]] = None
    filtered: tuple[str, ...] = ()
    query: str = ""
    filtering: bool = False
    cursor: int = 0
    selected: str = ""
    weather: Optional[WeatherResponse] = None
    showing_weather: bool = False
    has_weather: bool = False
    error: Optional[BaseException] = None
    quitting: bool = field(default=False, compare=False)

    def __post_init__(self) -> None:
        if self.cities is not None:
            object.__setattr__(self, "cities", tuple(self.cities))
        object.__setattr__(self, "filtered", tuple(self.filtered))

    def update(self, message: Message) -> tuple["Model", Optional[Command]]:
        """Apply a message and return the new model and a command to run, if any."""
        if isinstance(message, KeyPress):
            return self._on_key(message.key)
        if isinstance(message, WeatherLoaded):
            return replace(self, weather=message.weather, has_weather=True), None
        if isinstance(message, FilterResult):
            return replace(self, filtered=message.filtered), None
        if isinstance(message, ErrorMessage):
            return replace(self, error=message.error), None
        return self, None

    def _on_key(self, key: str) -> tuple["Model", Optional[Command]]:
        cities = self.cities or ()
        if self.showing_weather:
            if key == "q":
                return replace(self, quitting=True), None
            if key in ("c", "s"):
                return replace(self, selected="", cursor=0, showing_weather=False), None
            return self, None

        if self.filtering:
            if key == "esc":
                return replace(self, filtering=False), None
            if key == "enter":
                if self.filtered:
                    selected = self.filtered[self.cursor]
                    chosen = replace(self, selected=selected, showing_weather=True)
                    return chosen, weather_command(selected)
                return self, None
            if key == "backspace":
                if self.query:
                    query = self.query[:-1]
                    return replace(self, query=query), filter_command(cities, query)
                return self, None
            query = self.query + key
            return replace(self, query=query, cursor=0), filter_command(cities, query)

        if key == "/":
            return replace(self, filtering=True, query="", filtered=()), None
        if key == "q":
            return replace(self, quitting=True), None
        if key in ("up", "k"):
            return replace(self, cursor=max(self.cursor - 1, 0)), None
        if key in ("down", "j"):
            if self.cursor < len(cities) - 1:
                return replace(self, cursor=self.cursor + 1), None
            return self, None
        if key in (" ", "enter"):
            source = self.filtered if self.filtered else cities
            selected = source[self.cursor]
            return replace(self, selected=selected, showing_weather=True), weather_command(selected)
        return self, None

    def view(self) -> str:
        """Render the screen as text."""
        screen = _paint(_BANNER, _HEADER) + "\n\n"
        if self.error is not None:
            return screen + f"Runtime error: {self.error}\n"

        if self.showing_weather:
            screen += _paint(self.selected, _SELECTED, bold=True) + "\n"
            if self.has_weather and self.weather is not None:
                screen += format_weather(self.weather)
            else:
                screen += "Asking Zeus for weather report...\n"
        else:
            if self.cities is None:
                return screen + "Loading..."
            filter_line = _paint("/ to filter: ", _FILTER) + _paint(self.query, _FILTER)
            if self.filtering:
                filter_line += _paint("|", _FILTER)
            screen += filter_line + "\n\n"
            screen += f"{len(self.filtered)}\n"

            cities = self.cities
            if self.filtered or (self.filtering and self.query):
                cities = self.filtered
            if not cities:
                screen += "No such location...\n"

            first = max(self.cursor - 5, 0)
            last = min(max(self.cursor + 5, first + 10), len(cities) - 1)
            for index in range(first, last + 1):
                line = f"{index + 1}. {cities[index]}"
                marker = _paint("-> ", _CURSOR) if index == self.cursor else "   "
                screen += marker + line + "\n"

        if self.showing_weather:
            help_text = "q: quit • s|c: select other city"
        elif self.filtering:
            help_text = "esc|enter • stop filtering"
        else:
            help_text = "q: quit • /: filter • ↑(k)/↓(j)|: navigate • enter|space: select"
        screen += "\n" + _paint(help_text, _HELP)
        return _pad(screen)


def format_weather(weather: WeatherResponse) -> str:
    """Render the current conditions of a report."""
    if not weather.current_condition:
        raise WeatherError("the report has no current conditions")
    current = weather.current_condition[0]
    if not current.weather_desc:
        raise WeatherError("the report has no weather description")

    description = current.weather_desc[0] + " " + symbol_for(current.weather_code) + "\n"
    art = "".join(line + "\n" for line in ascii_art_for(current.weather_code))
    temperature = (
        "Temp "
        + _paint(current.temp_c, _TEMPERATURE, bold=True)
        + "°C (Feels like "
        + _paint(current.feels_like_c, _TEMPERATURE, bold=True)
        + "°C)\n"
    )
    wind = "Wind " + _paint(current.windspeed_kmph, _WIND, bold=True) + "(km/h)\n"
    uv = "UV index " + _paint(current.uv_index, _UV_INDEX, bold=True) + "\n"
    return description + art + temperature + "\n" + wind + uv


_SEQUENCE_NAMES = {
    "KEY_UP": "up",
    "KEY_DOWN": "down",
    "KEY_LEFT": "left",
    "KEY_RIGHT": "right",
    "KEY_ENTER": "enter",
    "KEY_ESCAPE": "esc",
    "KEY_BACKSPACE": "backspace",
    "KEY_DELETE": "delete",
    "KEY_TAB": "tab",
}

_CHARACTER_NAMES = {
    "\r": "enter",
    "\n": "enter",
    "\x7f": "backspace",
    "\x08": "backspace",
    "\x1b": "esc",
    "\t": "tab",
}


def _key_name(keystroke) -> str:
    if keystroke.is_sequence and keystroke.name:
        return _SEQUENCE_NAMES.get(keystroke.name, keystroke.name.lower())
    text = str(keystroke)
    return _CHARACTER_NAMES.get(text, text)


def run(cities: Iterable[str]) -> Model:
    """Run the interface full-screen until the user quits; return the last model."""
    import blessed

    term = blessed.Terminal()
    messages: queue.Queue[Message] = queue.Queue()
    model = Model(cities=tuple(cities))

    def dispatch(command: Optional[Command]) -> None:
        if command is None:
            return

        def work() -> None:
            try:
                messages.put(command())
            except Exception as exc:  # report any failure on screen
                messages.put(ErrorMessage(exc))

        threading.Thread(target=work, daemon=True).start()

    def draw() -> None:
        print(term.home + term.clear + model.view(), end="", flush=True)

    with term.fullscreen(), term.cbreak(), term.hidden_cursor():
        draw()
        while not model.quitting:
            pending: list[Message] = []
            keystroke = term.inkey(timeout=0.1)
            if keystroke:
                pending.append(KeyPress(_key_name(keystroke)))
            while True:
                try:
                    pending.append(messages.get_nowait())
                except queue.Empty:
                    break
            if not pending:
                continue
            for message in pending:
                model, command = model.update(message)
                dispatch(command)
                if model.quitting:
                    break
            draw()
    return model


def main(argv: Optional[list[str]] = None) -> int:
    """Start the weather interface."""
    parser = argparse.ArgumentParser(description="Browse cities and show their weather.")
    parser.add_argument(
        "cities",
        nargs="?",
        default="cities.txt",
        help="file with one city per line (default: cities.txt)",
    )
    args = parser.parse_args(argv)
    try:
        run(load_cities(args.cities))
    except KeyboardInterrupt:
        return 0
    except (OSError, WeatherError) as exc:
        print(f"Can't run the program:\n{exc}")
        return 1
    return 0