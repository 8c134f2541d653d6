import json
import re
import urllib.error
from unittest import mock

import pytest

from practica.conditions import ascii_art_for, symbol_for
from practica.fuzzy import filter_words
from practica.tui import (
    ErrorMessage,
    FilterResult,
    KeyPress,
    Model,
    WeatherLoaded,
    filter_command,
    format_weather,
    main,
    weather_command,
)
from practica.weather import CurrentCondition, WeatherError, WeatherResponse

CITIES = ("Amsterdam", "Berlin", "Cairo")

_ANSI = re.compile(r"\033\[[0-9;]*m")


def plain(text):
    return _ANSI.sub("", text)


def report(code="113", desc="Sunny"):
    return WeatherResponse(
        current_condition=(
            CurrentCondition(
                temp_c="14",
                feels_like_c="12",
                weather_code=code,
                weather_desc=(desc,),
                windspeed_kmph="9",
                uv_index="3",
            ),
        )
    )


def press(model, *keys):
    command = None
    for key in keys:
        model, command = model.update(KeyPress(key))
    return model, command


@pytest.fixture
def model():
    return Model(cities=CITIES)


def test_down_and_up_move_cursor(model):
    moved, command = press(model, "down", "j")
    assert moved.cursor == 2
    assert command is None
    back, _ = press(moved, "up")
    assert back.cursor == 1


def test_cursor_stays_in_bounds(model):
    top, _ = press(model, "k", "up")
    assert top.cursor == 0
    bottom, _ = press(model, "down", "down", "down", "down")
    assert bottom.cursor == len(CITIES) - 1


def test_q_quits(model):
    quitting, command = press(model, "q")
    assert quitting.quitting is True
    assert command is None


def test_slash_starts_filtering(model):
    filtering, _ = press(model, "/")
    assert filtering.filtering is True
    assert filtering.query == ""
    assert filtering.filtered == ()


def test_typing_filters(model):
    filtering, command = press(model, "/", "b")
    assert filtering.query == "b"
    assert filtering.cursor == 0
    result = command()
    assert result == FilterResult(tuple(filter_words(list(CITIES), "b")))
    updated, _ = filtering.update(result)
    assert updated.filtered == result.filtered


def test_filter_command_matches_filter_words():
    assert filter_command(CITIES, "ro")().filtered == tuple(filter_words(list(CITIES), "ro"))


def test_backspace_shortens_query(model):
    typed, _ = press(model, "/", "b", "e")
    shorter, command = press(typed, "backspace")
    assert shorter.query == "b"
    assert command().filtered == tuple(filter_words(list(CITIES), "b"))


def test_backspace_on_empty_query_does_nothing(model):
    filtering, _ = press(model, "/")
    same, command = press(filtering, "backspace")
    assert same == filtering
    assert command is None


def test_esc_stops_filtering(model):
    typed, _ = press(model, "/", "b")
    stopped, _ = press(typed, "esc")
    assert stopped.filtering is False
    assert stopped.query == "b"


def test_enter_while_filtering_selects_filtered(model):
    typed, _ = press(model, "/")
    typed, _ = typed.update(FilterResult(("Cairo",)))
    chosen, command = press(typed, "enter")
    assert chosen.selected == "Cairo"
    assert chosen.showing_weather is True
    assert callable(command)


def test_enter_selects_city_under_cursor(model):
    chosen, command = press(model, "down", "enter")
    assert chosen.selected == CITIES[1]
    assert chosen.showing_weather is True
    assert callable(command)


def test_weather_loaded_is_shown(model):
    chosen, _ = press(model, "enter")
    loaded, _ = chosen.update(WeatherLoaded(report()))
    assert loaded.has_weather is True
    screen = plain(loaded.view())
    assert "Sunny" in screen
    assert CITIES[0] in screen


def test_waiting_for_weather(model):
    chosen, _ = press(model, " ")
    assert "Asking Zeus for weather report..." in plain(chosen.view())


def test_select_other_city(model):
    chosen, _ = press(model, "down", "enter")
    back, _ = press(chosen, "s")
    assert back.showing_weather is False
    assert back.cursor == 0
    assert back.selected == ""


def test_error_is_shown(model):
    failed, _ = model.update(ErrorMessage(RuntimeError("boom")))
    assert "Runtime error: boom" in plain(failed.view())


def test_view_lists_cities_with_cursor(model):
    moved, _ = press(model, "down")
    screen = plain(moved.view())
    assert "   1. Amsterdam" in screen
    assert "-> 2. Berlin" in screen
    assert "3. Cairo" in screen


def test_view_without_matches(model):
    typed, _ = press(model, "/", "x")
    typed, _ = typed.update(FilterResult(()))
    assert "No such location..." in plain(typed.view())


def test_view_while_loading():
    assert plain(Model().view()).endswith("Loading...")


def test_format_weather_includes_art_and_symbol():
    text = format_weather(report())
    for line in ascii_art_for("113"):
        assert line in text
    assert plain(text).startswith("Sunny " + symbol_for("113") + "\n")
    assert "14°C" in plain(text)


def test_format_weather_unknown_code_has_no_art():
    text = plain(format_weather(report(code="999", desc="Odd")))
    assert text.startswith("Odd \n")
    assert "Temp 14°C (Feels like 12°C)" in text


def test_format_weather_requires_current_condition():
    with pytest.raises(WeatherError):
        format_weather(WeatherResponse())


def test_weather_command_success():
    body = json.dumps(
        {"current_condition": [{"temp_C": "14", "weatherDesc": [{"value": "Sunny"}]}]}
    ).encode("utf-8")
    with mock.patch("urllib.request.urlopen") as urlopen:
        urlopen.return_value.__enter__.return_value.read.return_value = body
        message = weather_command("Berlin")()
    assert isinstance(message, WeatherLoaded)
    assert message.weather.current_condition[0].temp_c == "14"


def test_weather_command_failure(model):
    with mock.patch("urllib.request.urlopen", side_effect=urllib.error.URLError("down")):
        message = weather_command("Berlin")()
    assert isinstance(message, ErrorMessage)
    assert isinstance(message.error, WeatherError)
    chosen, _ = press(model, "down", "enter")
    failed, command = chosen.update(message)
    assert command is None
    screen = plain(failed.view())
    assert "Runtime error: " + str(message.error) in screen
    assert "Asking Zeus for weather report..." not in screen


def test_main_missing_cities_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.txt")]) == 1
    assert "Can't run the program:" in capsys.readouterr().out