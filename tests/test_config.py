import unittest
from pathlib import Path
from tempfile import TemporaryDirectory

from obsidian_rest.config import load_remote_config
from obsidian_rest.constants import DEFAULT_HOST, DEFAULT_PORT, DEFAULT_TIMEOUT


class RemoteConfigLoadingTests(unittest.TestCase):
    def setUp(self) -> None:
        self.tmpdir = TemporaryDirectory()
        self.config_path = Path(self.tmpdir.name) / "obsidian.yaml"

    def tearDown(self) -> None:
        self.tmpdir.cleanup()

    def _write_config(self, content: str) -> None:
        self.config_path.write_text(content, encoding="utf-8")

    def test_defaults_without_file(self) -> None:
        config = load_remote_config(self.config_path, environ={"OBSIDIAN_API_KEY": "secret"})

        self.assertEqual(config.api_key, "secret")
        self.assertEqual(config.protocol, "https")
        self.assertEqual(config.host, DEFAULT_HOST)
        self.assertEqual(config.port, DEFAULT_PORT)
        self.assertEqual(config.timeout, DEFAULT_TIMEOUT)
        self.assertFalse(config.verify_ssl)

    def test_missing_api_key_raises(self) -> None:
        with self.assertRaises(ValueError) as ctx:
            load_remote_config(self.config_path, environ={})
        self.assertIn("OBSIDIAN_API_KEY", str(ctx.exception))

    def test_blank_api_key_raises(self) -> None:
        with self.assertRaises(ValueError):
            load_remote_config(self.config_path, environ={"OBSIDIAN_API_KEY": "   "})

    def test_file_values_are_used(self) -> None:
        self._write_config(
            "obsidian:\n"
            "  protocol: http\n"
            "  host: notes.local\n"
            "  port: 27123\n"
            "  verify_ssl: true\n"
            "  timeout: 2.5\n"
        )

        config = load_remote_config(self.config_path, environ={"OBSIDIAN_API_KEY": "secret"})

        self.assertEqual(config.base_url, "http://notes.local:27123")
        self.assertTrue(config.verify_ssl)
        self.assertEqual(config.timeout, 2.5)

    def test_environment_overrides_file(self) -> None:
        self._write_config("host: notes.local\nport: 27123\n")

        config = load_remote_config(
            self.config_path,
            environ={
                "OBSIDIAN_API_KEY": "secret",
                "OBSIDIAN_HOST": "10.0.0.5",
                "OBSIDIAN_VERIFY_SSL": "yes",
            },
        )

        self.assertEqual(config.host, "10.0.0.5")
        self.assertEqual(config.port, 27123)
        self.assertTrue(config.verify_ssl)

    def test_config_path_from_environment(self) -> None:
        self._write_config("port: 8443\n")

        config = load_remote_config(
            environ={"OBSIDIAN_API_KEY": "secret", "OBSIDIAN_CONFIG": str(self.config_path)}
        )

        self.assertEqual(config.port, 8443)

    def test_invalid_port_raises(self) -> None:
        with self.assertRaises(ValueError):
            load_remote_config(
                self.config_path,
                environ={"OBSIDIAN_API_KEY": "secret", "OBSIDIAN_PORT": "not-a-port"},
            )

    def test_invalid_protocol_raises(self) -> None:
        with self.assertRaises(ValueError):
            load_remote_config(
                self.config_path,
                environ={"OBSIDIAN_API_KEY": "secret", "OBSIDIAN_PROTOCOL": "ftp"},
            )

    def test_invalid_boolean_raises(self) -> None:
        with self.assertRaises(ValueError):
            load_remote_config(
                self.config_path,
                environ={"OBSIDIAN_API_KEY": "secret", "OBSIDIAN_VERIFY_SSL": "maybe"},
            )

    def test_non_mapping_file_raises(self) -> None:
        self._write_config("- just\n- a list\n")

        with self.assertRaises(ValueError):
            load_remote_config(self.config_path, environ={"OBSIDIAN_API_KEY": "secret"})


if __name__ == "__main__":
    unittest.main()
