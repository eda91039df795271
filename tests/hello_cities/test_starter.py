"""Unit tests for the HelloCities HTTP starter."""

import unittest
import uuid
from unittest.mock import AsyncMock, MagicMock

from orchestrators.hello_cities_orchestrator import ORCHESTRATOR_NAME
from starters.hello_cities_starter import start_hello_cities


def make_client():
    client = MagicMock()
    client.start_new = AsyncMock(side_effect=lambda name: uuid.uuid4().hex)
    client.create_check_status_response.side_effect = (
        lambda req, instance_id: {"id": instance_id}
    )
    return client


class TestStartHelloCities(unittest.IsolatedAsyncioTestCase):
    async def test_schedules_orchestrator_and_returns_status_response(self):
        client = make_client()
        req = MagicMock()

        with self.assertLogs("starters.hello_cities_starter", level="INFO") as logs:
            response = await start_hello_cities(req, client)

        client.start_new.assert_awaited_once_with(ORCHESTRATOR_NAME)
        instance_id = response["id"]
        client.create_check_status_response.assert_called_once_with(req, instance_id)
        self.assertIn(f"instance ID = {instance_id}", logs.output[0])

    async def test_two_calls_give_distinct_instance_ids(self):
        client = make_client()
        first = await start_hello_cities(MagicMock(), client)
        second = await start_hello_cities(MagicMock(), client)
        self.assertNotEqual(first["id"], second["id"])

    async def test_scheduling_error_propagates(self):
        client = MagicMock()
        client.start_new = AsyncMock(side_effect=Exception("task hub unavailable"))
        with self.assertRaises(Exception):
            await start_hello_cities(MagicMock(), client)
        client.create_check_status_response.assert_not_called()


if __name__ == "__main__":
    unittest.main()
