from durable_functions_registry import app
import logging

from shared.greetings import format_greeting

logger = logging.getLogger(__name__)


def say_hello(city_name: str) -> str:
    logger.info(f"[SayHelloActivity] Saying hello to {city_name}")
    return format_greeting(city_name)


@app.activity_trigger(input_name="city_name")
@app.function_name("SayHelloActivity")
def say_hello_activity(city_name: str) -> str:
    """
    Durable Activity that returns the greeting "Hello, {city_name}!".
    """
    return say_hello(city_name)
