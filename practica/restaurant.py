"""A small kitchen simulation: a pool of cooks preparing dishes concurrently."""

from __future__ import annotations

import argparse
import queue
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Callable, Iterable, Mapping

DISHES: dict[str, float] = {
    "Spaghetti Carbonara": 1,
    "Grilled Salmon": 2,
    "Caesar Salad": 1.5,
    "Margherita Pizza": 3,
    "Beef Steak": 3.5,
}

COOK_NAMES: tuple[str, ...] = ("cook#1", "cook#2", "cook#3")


@dataclass
class Cook:
    """A cook and the work done so far."""

    name: str
    cooking_time: float = 0.0
    dishes_cooked: int = 0


def serve(
    dishes: Mapping[str, float] = DISHES,
    cook_names: Iterable[str] = COOK_NAMES,
    sleep: Callable[[float], object] | None = None,
    output: Callable[[str], object] = print,
) -> list[Cook]:
    """Cook every dish, each by whichever cook is free, and return the cooks.

    Each dish is started at once; a dish waits until a cook is free. The wait
    lasts the whole seconds of the dish's cooking time, while the cook's
    total records the exact time.
    """
    pause = time.sleep if sleep is None else sleep
    free_cooks: queue.Queue[Cook] = queue.Queue()
    for name in cook_names:
        free_cooks.put(Cook(name))
    if dishes and free_cooks.empty():
        raise ValueError("at least one cook is needed to serve dishes")

    def cook_dish(dish: str) -> None:
        cook = free_cooks.get()
        try:
            duration = dishes[dish]
            pause(int(duration))
            cook.cooking_time += duration
            cook.dishes_cooked += 1
            output(f"dish  {dish}  is cooked by  {cook.name}")
        finally:
            free_cooks.put(cook)

    if dishes:
        with ThreadPoolExecutor(max_workers=len(dishes)) as pool:
            for future in [pool.submit(cook_dish, dish) for dish in dishes]:
                future.result()

    cooks = []
    while not free_cooks.empty():
        cooks.append(free_cooks.get())
    return cooks


def main(argv: list[str] | None = None) -> int:
    """Open the restaurant, cook the menu and print a report."""
    parser = argparse.ArgumentParser(description="Simulate cooks preparing the menu.")
    parser.parse_args(argv)

    print("Restaurant is open!")
    start = time.monotonic()
    cooks = serve()
    print("Restaurant is closed!")
    print("Cook times:")
    for cook in cooks:
        print(
            f"{cook.name}: cooking time: {cook.cooking_time:.1f} "
            f"| dishes cooked: {cook.dishes_cooked}"
        )
    print(f"Total working time: {time.monotonic() - start:.3f}s")
    return 0