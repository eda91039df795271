from durable_functions_registry import app
import logging

from shared.config import AppSettings, get_settings
from shared.http_client import HttpClientFactory, get_http_client_factory
from shared.swapi import invoke_swapi

logger = logging.getLogger(__name__)


def run_invoke_swapi(factory: HttpClientFactory, settings: AppSettings) -> None:
    logger.info("[InvokeSwapiActivity] Invoking Swapi")
    invoke_swapi(factory, settings.swapi_url)


@app.activity_trigger(input_name="payload")
@app.function_name("InvokeSwapiActivity")
def invoke_swapi_activity(payload) -> None:
    """
    Durable Activity that calls the public Swapi endpoint and logs the response size.
    Input is ignored; nothing from the response is returned to the orchestrator.
    """
    run_invoke_swapi(get_http_client_factory(), get_settings())
