"""Shared fixtures and helpers for Hello Cities tests."""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Callable, Dict, List, Optional, Tuple
from unittest.mock import MagicMock

from shared.config import AppSettings


def make_settings(**overrides: Any) -> AppSettings:
    data = {
        "swapi_url": "https://swapi.test/api/people/1/",
        "http_timeout_seconds": 5.0,
        "app_settings_file": "does-not-exist.json",
    }
    data.update(overrides)
    return AppSettings(_env_file=None, **data)


@lru_cache(maxsize=None)
def registered_functions() -> Dict[str, Any]:
    """Index the shared DFApp once; ``get_functions()`` raises if called twice."""
    import function_app

    return {fn.get_function_name(): fn for fn in function_app.app.get_functions()}


def make_orchestration_context() -> MagicMock:
    """Context whose scheduling calls return inspectable task tuples."""
    ctx = MagicMock()
    ctx.call_activity.side_effect = lambda name, input_=None: ("activity", name, input_)
    return ctx


def run_orchestration(
    generator: Any,
    resolve: Optional[Callable[[Tuple[Any, ...]], Any]] = None,
) -> Tuple[Any, List[Tuple[Any, ...]]]:
    """
    Drive an orchestrator generator the way the host replays it: every yielded
    task is answered before the next one is requested.

    Returns the orchestration output and the yielded tasks in order.
    """
    resolve = resolve or default_resolver
    tasks: List[Tuple[Any, ...]] = []
    try:
        task = next(generator)
        while True:
            tasks.append(task)
            task = generator.send(resolve(task))
    except StopIteration as stop:
        return stop.value, tasks


def default_resolver(task: Tuple[Any, ...]) -> Any:
    _, name, input_ = task
    if name == "SayHelloActivity":
        return f"Hello, {input_}!"
    return None


def make_response(status_code: int = 200, content: bytes = b"") -> MagicMock:
    response = MagicMock()
    response.status_code = status_code
    response.content = content
    return response


def make_factory(response: Any = None, error: Optional[Exception] = None) -> MagicMock:
    session = MagicMock()
    if error is not None:
        session.get.side_effect = error
    else:
        session.get.return_value = response if response is not None else make_response()
    factory = MagicMock()
    factory.create_client.return_value = session
    return factory
