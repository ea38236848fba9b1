"""Design patterns: builder, factory, observer, singleton and strategy."""

from __future__ import annotations

import sys
import threading
from dataclasses import dataclass, field
from typing import Optional, Protocol, Sequence, TextIO

from practicekit.sorting import quick_sort


@dataclass
class Pizza:
    """A finished pizza."""

    size: str = ""
    cheese: bool = False
    pepperoni: bool = False
    veggies: list[str] = field(default_factory=list)


class PizzaBuilder:
    """Fluent builder for :class:`Pizza`."""

    def __init__(self) -> None:
        self._size = ""
        self._cheese = False
        self._pepperoni = False
        self._veggies: list[str] = []

    def set_size(self, size: str) -> "PizzaBuilder":
        self._size = size
        return self

    def add_cheese(self) -> "PizzaBuilder":
        self._cheese = True
        return self

    def add_pepperoni(self) -> "PizzaBuilder":
        self._pepperoni = True
        return self

    def add_veggie(self, veggie: str) -> "PizzaBuilder":
        self._veggies.append(veggie)
        return self

    def build(self) -> Pizza:
        """Produce the pizza described so far."""
        return Pizza(self._size, self._cheese, self._pepperoni, list(self._veggies))


class Animal(Protocol):
    def speak(self) -> str: ...


class Dog:
    def speak(self) -> str:
        return "Woof!"


class Cat:
    def speak(self) -> str:
        return "Meow!"


_ANIMALS = {"dog": Dog, "cat": Cat}


def animal_factory(animal_type: str) -> Animal:
    """Create the animal named by animal_type; raises ValueError for unknown kinds."""
    try:
        return _ANIMALS[animal_type]()
    except KeyError:
        raise ValueError(f"unknown animal type: {animal_type!r}") from None


class Observer(Protocol):
    def update(self, data: str) -> None: ...


class Subject:
    """Notifies attached observers in the order they were attached."""

    def __init__(self) -> None:
        self._observers: list[Observer] = []

    def attach(self, observer: Observer) -> None:
        self._observers.append(observer)

    def notify(self, data: str) -> None:
        for observer in self._observers:
            observer.update(data)


@dataclass
class EmailObserver:
    """Writes each event as an ``Email:`` line."""

    stream: Optional[TextIO] = None

    def update(self, data: str) -> None:
        print("Email:", data, file=self.stream or sys.stdout)


@dataclass
class LogObserver:
    """Writes each event as a ``Log:`` line."""

    stream: Optional[TextIO] = None

    def update(self, data: str) -> None:
        print("Log:", data, file=self.stream or sys.stdout)


@dataclass
class Singleton:
    value: str


_instance: Optional[Singleton] = None
_instance_lock = threading.Lock()


def get_instance() -> Singleton:
    """The one shared :class:`Singleton`, created on first use."""
    global _instance
    if _instance is None:
        with _instance_lock:
            if _instance is None:
                _instance = Singleton("initialized")
    return _instance


class SortStrategy(Protocol):
    def sort(self, arr: Sequence[int]) -> list[int]: ...


class BubbleSort:
    def sort(self, arr: Sequence[int]) -> list[int]:
        """Sorted copy of arr by bubble sort."""
        result = list(arr)
        n = len(result)
        for i in range(n):
            for j in range(n - i - 1):
                if result[j] > result[j + 1]:
                    result[j], result[j + 1] = result[j + 1], result[j]
        return result


class QuickSortStrategy:
    def sort(self, arr: Sequence[int]) -> list[int]:
        """Sorted copy of arr by quicksort."""
        return quick_sort(arr)


class SortContext:
    """Sorts with whichever strategy it was given."""

    def __init__(self, strategy: SortStrategy) -> None:
        self.strategy = strategy

    def execute(self, arr: Sequence[int]) -> list[int]:
        return self.strategy.sort(arr)