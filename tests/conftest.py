from dataclasses import dataclass

import pytest


@dataclass(frozen=True)
class Person:
    name: str
    age: int
    order_id: int = 0


@pytest.fixture
def person():
    return Person


@pytest.fixture
def by_age():
    def cmp(a: Person, b: Person) -> int:
        return a.age - b.age
    return cmp


@pytest.fixture
def by_name():
    def cmp(a: Person, b: Person) -> int:
        return (a.name > b.name) - (a.name < b.name)
    return cmp


@pytest.fixture
def people():
    return [
        Person("Alice", 25),
        Person("Bob", 30),
        Person("Charlie", 35),
    ]
