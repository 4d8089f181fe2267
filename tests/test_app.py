"""
Tests for the server factory.
"""

import unittest
from unittest.mock import MagicMock, patch

from say_hello.app import SERVER_NAME, create_prober, create_server
from say_hello.config import Config
from say_hello.health.probe import CommandProber, ProbeRequest


class TestCreateServer(unittest.TestCase):
    def test_registers_all_capabilities(self):
        server = create_server()

        self.assertEqual(server.info.name, SERVER_NAME)
        self.assertEqual(server.info.version, "1.0.0")
        self.assertEqual(server.tool_service.registry.list_tools(), ["hello", "health_check"])
        self.assertEqual([r["uri"] for r in server.resources.get_definitions()], ["history://hello-world"])
        self.assertEqual([p["name"] for p in server.prompts.get_definitions()], ["greet"])

    def test_prober_is_built_from_config(self):
        config = MagicMock(spec=Config)
        config.get_probe_request.return_value = ProbeRequest(timeout=2)

        with patch("say_hello.app.HealthCheckTool.create") as mock_create:
            mock_create.return_value.name = "health_check"
            create_server(config)

        prober = mock_create.call_args.args[0]
        self.assertIsInstance(prober, CommandProber)
        self.assertEqual(prober.request.timeout, 2)

    def test_create_prober_without_config_uses_defaults(self):
        self.assertEqual(create_prober().request, ProbeRequest())


if __name__ == "__main__":
    unittest.main()
