from durable_functions_registry import app
import azure.durable_functions as df

from shared.greetings import CITIES, join_greetings

ORCHESTRATOR_NAME = "HelloCitiesOrchestrator"
SWAPI_ACTIVITY = "InvokeSwapiActivity"
SAY_HELLO_ACTIVITY = "SayHelloActivity"


def hello_cities(ctx: df.DurableOrchestrationContext):
    """
    Calls the Swapi activity once, then greets each city in order.
    Every step waits for the previous one; nothing runs in parallel.
    """
    yield ctx.call_activity(SWAPI_ACTIVITY, None)

    greetings = []
    for city in CITIES:
        greeting = yield ctx.call_activity(SAY_HELLO_ACTIVITY, city)
        greetings.append(greeting)

    return join_greetings(greetings)


# function_name must wrap the orchestration trigger: DFApp reads the raw generator's __name__
@app.function_name(ORCHESTRATOR_NAME)
@app.orchestration_trigger(context_name="ctx")
def hello_cities_orchestrator(ctx: df.DurableOrchestrationContext):
    result = yield from hello_cities(ctx)
    return result
