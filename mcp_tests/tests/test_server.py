import sys
import types
import uuid
import importlib.util
from pathlib import Path


def _find_server_py() -> Path:
    root = Path(__file__).resolve().parents[2]
    candidates = [
        root / "src" / "server" / "server.py",
        root / "server" / "server.py",
    ]
    for p in candidates:
        if p.exists():
            return p
    raise FileNotFoundError(f"Could not find server.py. Tried: {candidates}")


def _install_fake_modules(monkeypatch, captures: dict):
    # ---- Fake mcp.server.fastmcp.FastMCP ----
    mcp_mod = types.ModuleType("mcp")
    mcp_server_mod = types.ModuleType("mcp.server")
    fastmcp_mod = types.ModuleType("mcp.server.fastmcp")

    class DummyFastMCP:
        def __init__(self, name: str):
            captures["fastmcp_name"] = name
            captures["mcp_instance"] = self
            self.run_calls = []

        def run(self, *, transport: str):
            self.run_calls.append({"transport": transport})
            captures["run_calls"] = list(self.run_calls)

    fastmcp_mod.FastMCP = DummyFastMCP

    mcp_mod.__path__ = []
    mcp_server_mod.__path__ = []

    monkeypatch.setitem(sys.modules, "mcp", mcp_mod)
    monkeypatch.setitem(sys.modules, "mcp.server", mcp_server_mod)
    monkeypatch.setitem(sys.modules, "mcp.server.fastmcp", fastmcp_mod)

    # ---- Fake config ----
    config_mod = types.ModuleType("config")
    config_mod.AZ_CLI_PATH = "/opt/az"
    config_mod.LOG_LEVEL = 20
    monkeypatch.setitem(sys.modules, "config", config_mod)

    # ---- Fake client ----
    clients_pkg = types.ModuleType("clients")
    clients_pkg.__path__ = []
    monkeypatch.setitem(sys.modules, "clients", clients_pkg)

    az_client_mod = types.ModuleType("clients.az_cli_client")

    class FakeAzCliClient:
        def __init__(self, *, az_path: str = "az", runner=None):
            captures["az_client_ctor_calls"] = captures.get("az_client_ctor_calls", []) + [{"az_path": az_path}]
            captures["az_client_instance"] = self

    az_client_mod.AzCliClient = FakeAzCliClient
    monkeypatch.setitem(sys.modules, "clients.az_cli_client", az_client_mod)

    # ---- Fake tools ----
    tools_pkg = types.ModuleType("tools")
    tools_pkg.__path__ = []
    monkeypatch.setitem(sys.modules, "tools", tools_pkg)

    def _fake_register(key: str):
        def register(mcp, *, az_client=None):
            captures[key] = captures.get(key, []) + [{"mcp": mcp, "az_client": az_client}]
        return register

    for mod_name, key in (
        ("tools.batch_transfer", "register_batch_calls"),
        ("tools.blob_transfer", "register_blob_calls"),
        ("tools.list_blobs", "register_list_calls"),
    ):
        mod = types.ModuleType(mod_name)
        mod.register = _fake_register(key)
        monkeypatch.setitem(sys.modules, mod_name, mod)


def _load_server_module(monkeypatch, captures: dict):
    _install_fake_modules(monkeypatch, captures)

    server_path = _find_server_py()
    mod_name = f"server_under_test_{uuid.uuid4().hex}"
    spec = importlib.util.spec_from_file_location(mod_name, server_path)
    assert spec and spec.loader

    module = importlib.util.module_from_spec(spec)
    sys.modules[mod_name] = module
    spec.loader.exec_module(module)
    return module


def test_server_registers_tools_with_shared_client(monkeypatch):
    captures = {}
    module = _load_server_module(monkeypatch, captures)

    assert captures["fastmcp_name"] == "blob-utils-mcp"
    mcp = captures["mcp_instance"]

    # One client, built from config
    assert captures["az_client_ctor_calls"] == [{"az_path": "/opt/az"}]
    client = captures["az_client_instance"]

    for key in ("register_batch_calls", "register_blob_calls", "register_list_calls"):
        calls = captures.get(key, [])
        assert len(calls) == 1
        assert calls[0]["mcp"] is mcp
        assert calls[0]["az_client"] is client

    module.main()
    assert captures["run_calls"] == [{"transport": "stdio"}]
