"""
Outbound call to the public Star Wars API demo endpoint.

The response body is only measured. It is never returned to the caller and
the HTTP status code is not checked: any response counts as a completed call.
Transport errors (DNS, connection, timeout) are left to propagate.
"""
import logging

from shared.http_client import HttpClientFactory

logger = logging.getLogger(__name__)

REQUEST_HEADERS = {"accept": "application/json"}


def invoke_swapi(factory: HttpClientFactory, url: str) -> int:
    """
    GET the given url and log how many bytes came back.
    The request timeout is the one configured on the factory.

    Returns:
        Size of the response body in bytes
    """
    client = factory.create_client()
    response = client.get(url, headers=REQUEST_HEADERS)
    try:
        size = len(response.content or b"")
    finally:
        response.close()

    logger.info(f"[InvokeSwapiActivity] Invoked Swapi. Retrieved {size} bytes.")
    return size
