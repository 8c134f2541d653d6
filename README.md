# practica

A small collection of exercises and tools:

- **Binary search problems** (`practica.bsearch`): `max_k`, `closest_number`,
  `closest_number_bin`, `subarray_sum_start`, `right_find`, `right_find_multiple`,
  `left_find` and `left_find_multiple`.
- **Hash map problems** (`practica.mapproblems`): `consists_of`, `count_letters`,
  `is_anagram`, `min_remove`, `numbers_close`, `count_arrays_for_number` and
  `repeating_numbers`.
- **Restaurant simulation** (`practica.restaurant`): `serve` hands every dish to
  whichever `Cook` is free, cooking dishes concurrently, and returns the cooks
  with their total cooking time and number of dishes.
- **Terminal weather viewer** (`practica.tui`): pick a city from a list, narrow it
  down with a fuzzy filter (`practica.fuzzy`) and view the current conditions
  fetched by `practica.weather`, drawn with symbols and coloured pictures from
  `practica.conditions`.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Library use

```python
from practica.bsearch import closest_number_bin, left_find_multiple
from practica.mapproblems import is_anagram, repeating_numbers
from practica.fuzzy import filter_words, levenshtein_distance

closest_number_bin([1, 5, 10, 15], 8)                 # 10
left_find_multiple([1, 2, 2, 3, 4, 5], [2, 4, 1, 6])  # [2, 5, 1, -1]
is_anagram("debitcard", "badcredit")                  # True
repeating_numbers([[10, 20, 30], [60, 20], [10, 50, 60, 70], [80]], 2)
# [30, 50, 70, 80]
levenshtein_distance("kitten", "sitting")             # 3
filter_words(["London", "Lyon", "Paris"], "lon")      # ["London"]
```

`filter_words` returns the words containing the query, ignoring case; when none
does, it returns the words that share a letter with the query and are closest to
it by edit distance.

Weather reports can be used without the terminal interface:

```python
from practica.weather import WeatherResponse, fetch_weather, weather_url

weather_url("New York")        # "https://wttr.in/New+York?format=j1"
report = fetch_weather("Oslo")  # raises WeatherError on network or parse failure
report.current_condition[0].temp_c
```

`WeatherResponse.from_json` parses a report that is already at hand.

## Commands

Run the restaurant simulation, which prints each dish as it is cooked and, when
the restaurant closes, each cook's cooking time and dish count and the total
working time:

```
practica-restaurant
```

Start the weather viewer in the terminal, giving it a text file with one city per
line (`cities.txt` in the current directory if no file is given):

```
practica-weather cities.txt
```

In the city list, `↑`/`k` and `↓`/`j` move the cursor, `/` starts filtering,
`enter` or `space` shows the weather for the highlighted city and `q` quits.
While filtering, type to narrow the list, `backspace` removes a character,
`enter` shows the weather for the highlighted match and `esc` stops filtering.
On the weather screen, `s` or `c` returns to the list and `q` quits. If a report
cannot be fetched, the error is shown on screen.

## Limitations

- No list of cities is included; `practica-weather` needs a file you supply.
- The weather screen shows only the current conditions (description, picture,
  temperature, wind and UV index). Daily and hourly forecasts are parsed into
  `WeatherForecast` and `HourlyForecast` but not displayed.