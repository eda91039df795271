from durable_functions_registry import app
import azure.functions as func
import azure.durable_functions as df
import logging

from orchestrators.hello_cities_orchestrator import ORCHESTRATOR_NAME

logger = logging.getLogger(__name__)


async def start_hello_cities(req: func.HttpRequest, client: df.DurableOrchestrationClient) -> func.HttpResponse:
    instance_id = await client.start_new(ORCHESTRATOR_NAME)
    logger.info(f"[StartHelloCities] Created new orchestration with instance ID = {instance_id}")
    return client.create_check_status_response(req, instance_id)


@app.route(
    route="orchestrators/hello-cities",
    methods=[func.HttpMethod.GET, func.HttpMethod.POST],
    auth_level=func.AuthLevel.ANONYMOUS,
)
@app.function_name("StartHelloCities")
@app.durable_client_input(client_name="client")
async def start_hello_cities_http(req: func.HttpRequest, client: df.DurableOrchestrationClient) -> func.HttpResponse:
    """
    HTTP starter for HelloCitiesOrchestrator.
    Needs no body or query parameters; responds with the host's check-status payload.
    """
    return await start_hello_cities(req, client)
