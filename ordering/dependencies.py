"""
Dependency wiring.

Provides process-wide instances of the repository, event bus and use
cases. Callers that need isolated state build their own instances.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Load environment variables ONCE before any settings objects are created
_PROJECT_ROOT = Path(__file__).resolve().parents[1]
load_dotenv(dotenv_path=_PROJECT_ROOT / ".env")

from ordering.application.use_cases import ConfirmOrderUseCase, CreateOrderUseCase
from ordering.infrastructure.event_bus import InMemoryEventBus
from ordering.infrastructure.persistence import InMemoryOrderRepository
from ordering.settings import get_app_settings

logger = logging.getLogger(__name__)


# =============================================================================
# SINGLETON INSTANCES
# =============================================================================

_order_repository: Optional[InMemoryOrderRepository] = None
_event_bus: Optional[InMemoryEventBus] = None
_create_order_use_case: Optional[CreateOrderUseCase] = None
_confirm_order_use_case: Optional[ConfirmOrderUseCase] = None


# =============================================================================
# DEPENDENCIES
# =============================================================================

def get_order_repository() -> InMemoryOrderRepository:
    global _order_repository
    if _order_repository is None:
        _order_repository = InMemoryOrderRepository()
        logger.info("Created InMemoryOrderRepository instance")
    return _order_repository


def get_event_bus() -> InMemoryEventBus:
    global _event_bus
    if _event_bus is None:
        _event_bus = InMemoryEventBus()
        logger.info("Created InMemoryEventBus instance")
    return _event_bus


def _wired_event_bus() -> Optional[InMemoryEventBus]:
    if get_app_settings().publish_events:
        return get_event_bus()
    return None


def get_create_order_use_case() -> CreateOrderUseCase:
    global _create_order_use_case
    if _create_order_use_case is None:
        _create_order_use_case = CreateOrderUseCase(
            order_repository=get_order_repository(),
            event_bus=_wired_event_bus(),
        )
    return _create_order_use_case


def get_confirm_order_use_case() -> ConfirmOrderUseCase:
    global _confirm_order_use_case
    if _confirm_order_use_case is None:
        _confirm_order_use_case = ConfirmOrderUseCase(
            order_repository=get_order_repository(),
            event_bus=_wired_event_bus(),
        )
    return _confirm_order_use_case


def reset_dependencies() -> None:
    """Drop all singletons and cached settings (for tests)."""
    global _order_repository, _event_bus, _create_order_use_case, _confirm_order_use_case
    _order_repository = None
    _event_bus = None
    _create_order_use_case = None
    _confirm_order_use_case = None
    get_app_settings.cache_clear()
