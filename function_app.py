import azure.functions as func
import logging
import os

from durable_functions_registry import app
from shared.config import get_settings
from shared.logging_config import configure_logging

configure_logging(get_settings())

# Registers the starter, orchestrator and activities on the shared DFApp
import starters.hello_cities_starter  # noqa: E402,F401
import orchestrators.hello_cities_orchestrator  # noqa: E402,F401
import activities.say_hello_activity  # noqa: E402,F401
import activities.invoke_swapi_activity  # noqa: E402,F401

HEARTBEAT_SCHEDULE_CRON = os.getenv("HEARTBEAT_SCHEDULE", "0 */1 * * * *")

logger = logging.getLogger(__name__)


def log_heartbeat() -> None:
    logger.info("[heartbeat] Bam!")


@app.function_name(name="heartbeat")
@app.timer_trigger(
    schedule=HEARTBEAT_SCHEDULE_CRON, arg_name="heartbeat_timer", run_on_startup=False
)
def heartbeat(heartbeat_timer: func.TimerRequest) -> None:
    """
    Recurring heartbeat. Takes nothing from the timer and writes one log entry.
    """
    log_heartbeat()
