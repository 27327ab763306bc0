import logging

from product_intake.domain.commands import CreateProduct
from product_intake.domain.events import ProductCreated
from product_intake.domain.model import Product
from product_intake.service_layer.unit_of_work import AbstractProductUnitOfWork

logger = logging.getLogger(__name__)


def create_product(
    command: CreateProduct,
    uow: AbstractProductUnitOfWork
) -> Product:
    """
    Persist a new product record.

    The repository raises ProductCreated on the product once the write
    succeeds; the message bus picks it up afterwards. A failed write
    propagates and no event is raised.
    """
    logger.info(f"Processing CreateProduct command for product {command.product_id}")

    product = Product(
        product_id=command.product_id,
        name=command.name,
        price=command.price,
        description=command.description,
        created_at=command.created_at,
    )

    with uow:
        uow.products.add(product)
        uow.commit()

    return product


def publish_product_created_event(event: ProductCreated, uow: AbstractProductUnitOfWork):
    """
    Publish ProductCreated to the product events channel.

    Failures are not swallowed: the caller reports them, while the stored
    record is left in place.
    """
    logger.info(f"Publishing ProductCreated event for product {event.product_id}")
    uow.publisher.publish(event)
    logger.info(f"Event published for product {event.product_id}")
