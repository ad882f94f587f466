import logging
from logging.handlers import RotatingFileHandler

import pytest
import structlog
from unittest.mock import Mock

from shared_kernel.domain.base.ports import DomainEventDispatcher
from tests.domain.sample_domain import ItemAdded, Order, OrderCreated


@pytest.fixture
def order():
    """Fresh, persisted order with no events applied."""
    return Order(id=1)


@pytest.fixture
def order_history():
    """Events that take an order from nothing to three applied events."""
    return [
        OrderCreated(customer="alice", aggregate_id="1"),
        ItemAdded(sku="X", aggregate_id="1"),
        ItemAdded(sku="Y", aggregate_id="1"),
    ]


@pytest.fixture
def mock_dispatcher():
    return Mock(spec=DomainEventDispatcher)


@pytest.fixture
def restore_root_logger():
    """Put the root logger back the way it was after logging setup tests."""
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    yield root_logger
    for handler in root_logger.handlers[:]:
        # exact types only, pytest's capture handlers subclass StreamHandler
        if type(handler) in (logging.StreamHandler, RotatingFileHandler):
            root_logger.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in root_logger.handlers:
            root_logger.addHandler(handler)
    root_logger.setLevel(level)
    structlog.reset_defaults()
