"""Shared pytest fixtures."""

import pytest

from ordering.application.use_cases import ConfirmOrderUseCase, CreateOrderUseCase
from ordering.dependencies import reset_dependencies
from ordering.infrastructure.event_bus import InMemoryEventBus
from ordering.infrastructure.persistence import InMemoryOrderRepository


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch):
    """Keep ORDERING_* variables and cached singletons from leaking between tests."""
    for name in ("ORDERING_LOG_LEVEL", "ORDERING_DEFAULT_CURRENCY", "ORDERING_PUBLISH_EVENTS"):
        monkeypatch.delenv(name, raising=False)
    reset_dependencies()
    yield
    reset_dependencies()


@pytest.fixture
def repository() -> InMemoryOrderRepository:
    return InMemoryOrderRepository()


@pytest.fixture
def event_bus() -> InMemoryEventBus:
    return InMemoryEventBus()


@pytest.fixture
def create_order(repository, event_bus) -> CreateOrderUseCase:
    return CreateOrderUseCase(order_repository=repository, event_bus=event_bus)


@pytest.fixture
def confirm_order(repository, event_bus) -> ConfirmOrderUseCase:
    return ConfirmOrderUseCase(order_repository=repository, event_bus=event_bus)
