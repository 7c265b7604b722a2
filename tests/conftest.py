import json
import sys
from typing import Any, Callable, Dict, List, Optional, Tuple

import pytest
from fastapi.testclient import TestClient
from loguru import logger as loguru_logger

from allocator.entrypoints.main import app
from allocator.interfaces.main import IDiagnosticsSink
from allocator.logger import logger
from allocator.service_layer.services import AllocationEngine

REFERENCE_INVENTORY = {"A": 2, "B": 3, "C": 1, "D": 0, "E": 0}


class FakeDiagnostics(IDiagnosticsSink):
    def __init__(self):
        self.errors: List[str] = []
        self.infos: List[str] = []

    def error(self, message: str, *args: Any, **kwargs: Any) -> None:
        self.errors.append(message)

    def info(self, message: str, *args: Any, **kwargs: Any) -> None:
        self.infos.append(message)

    def debug(self, message: str, *args: Any, **kwargs: Any) -> None:
        pass


@pytest.fixture(scope="function")
def reference_inventory() -> Dict[str, int]:
    return dict(REFERENCE_INVENTORY)


@pytest.fixture(scope="function")
def fake_diagnostics() -> FakeDiagnostics:
    return FakeDiagnostics()


@pytest.fixture(scope="function")
def make_engine(reference_inventory, fake_diagnostics) -> Callable[..., Tuple[AllocationEngine, FakeDiagnostics]]:
    def _make(inventory: Optional[Dict[str, int]] = None) -> Tuple[AllocationEngine, FakeDiagnostics]:
        engine = AllocationEngine(
            inventory=reference_inventory if inventory is None else inventory,
            diagnostics=fake_diagnostics,
        )
        return engine, fake_diagnostics

    return _make


@pytest.fixture(scope="function")
def make_order() -> Callable[..., str]:
    def _make(header: Any, *lines: Tuple[Any, Any]) -> str:
        return json.dumps(
            {
                "Header": header,
                "Lines": [{"Product": product, "Quantity": qty} for product, qty in lines],
            }
        )

    return _make


@pytest.fixture(scope="function")
def captured_logs():
    messages: List[str] = []
    handler_id = logger.add(lambda message: messages.append(message.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)


@pytest.fixture(scope="function")
def clean_env(monkeypatch):
    monkeypatch.delenv("ALLOCATOR_INVENTORY", raising=False)
    monkeypatch.delenv("ALLOCATOR_LOG_LEVEL", raising=False)
    monkeypatch.setattr("allocator.config.ENV_FILE", "/nonexistent/allocator.env")


@pytest.fixture(scope="function")
def fastapi_test_client(clean_env):
    client = TestClient(app)
    yield client


@pytest.fixture(scope="function")
def restore_logger():
    yield
    loguru_logger.remove()
    loguru_logger.add(sys.stderr)
