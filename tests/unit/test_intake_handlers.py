"""Unit tests for the intake message bus: store, then publish, no compensation."""

import pytest

from conftest import FakeUnitOfWork
from product_intake.domain.commands import CreateProduct
from product_intake.domain.events import ProductCreated
from product_intake.domain.model import Product
from product_intake.service_layer import messagebus


def make_command(product_id="prod-001", **overrides):
    fields = dict(
        product_id=product_id,
        name="Desk Lamp",
        price=39.9,
        description="Oak",
        created_at="2024-01-15T10:30:00.000Z",
    )
    fields.update(overrides)
    return CreateProduct(**fields)


def test_create_product_stores_record_and_publishes_event():
    uow = FakeUnitOfWork()

    results = messagebus.handle(make_command(), uow)

    [product] = results
    assert isinstance(product, Product)
    assert uow.products.records["prod-001"]["name"] == "Desk Lamp"
    assert uow.products.writes == 1
    assert uow.committed is True
    assert uow.publisher.published == [ProductCreated(product_id="prod-001", name="Desk Lamp", price=39.9)]


def test_events_are_consumed_once():
    uow = FakeUnitOfWork()

    [product] = messagebus.handle(make_command(), uow)

    assert product.events == []
    assert list(uow.collect_new_events()) == []


def test_store_failure_propagates_and_nothing_is_published():
    uow = FakeUnitOfWork(store_error=ConnectionError("store unavailable"))

    with pytest.raises(ConnectionError):
        messagebus.handle(make_command(), uow)

    assert uow.products.writes == 1
    assert uow.publisher.attempts == 0


def test_publish_failure_propagates_and_record_stays_stored():
    uow = FakeUnitOfWork(publish_error=ConnectionError("channel unavailable"))

    with pytest.raises(ConnectionError):
        messagebus.handle(make_command(), uow)

    assert "prod-001" in uow.products.records
    assert uow.publisher.attempts == 1
    assert uow.publisher.published == []


def test_event_handlers_can_be_dispatched_directly():
    uow = FakeUnitOfWork()
    event = ProductCreated(product_id="prod-002", name="Chair", price=120)

    messagebus.handle(event, uow)

    assert uow.publisher.published == [event]


def test_rejects_unknown_message():
    with pytest.raises(Exception, match="was not an Event or Command"):
        messagebus.handle("not-a-message", FakeUnitOfWork())
