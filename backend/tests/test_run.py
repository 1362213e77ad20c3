"""
Tests for the backend launcher script
"""
import importlib.util
from pathlib import Path

from places_proxy.core.config import Settings

RUN_SCRIPT = Path(__file__).resolve().parent.parent / "run.py"


def load_launcher():
    # frontend/ has its own run.py, so load this one by path
    spec = importlib.util.spec_from_file_location("proxy_launcher", RUN_SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_server_command_binds_configured_host_and_port():
    launcher = load_launcher()
    config = Settings(HOST="127.0.0.1", PORT=8123, _env_file=None)

    command = launcher.server_command(config)

    assert command[command.index("--host") + 1] == "127.0.0.1"
    assert command[command.index("--port") + 1] == "8123"
    assert "places_proxy.main:app" in command
