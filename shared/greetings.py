from typing import Iterable

# Cities greeted by HelloCitiesOrchestrator, in call order
CITIES = ("Tokyo", "London", "Seattle")


def format_greeting(city_name: str) -> str:
    return f"Hello, {city_name}!"


def join_greetings(greetings: Iterable[str]) -> str:
    """Concatenate greetings separated by single spaces."""
    return " ".join(greetings)
