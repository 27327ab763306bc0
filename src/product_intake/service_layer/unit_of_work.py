"""Unit of Work implementation for product intake."""

from minio import Minio

from config import get_minio_config
from shared.service_layer.unit_of_work import AbstractUnitOfWork
from product_intake.adapters import redis_adapter
from product_intake.adapters.repository import AbstractProductRepository, MinIOProductRepository


class AbstractProductUnitOfWork(AbstractUnitOfWork):
    products: AbstractProductRepository
    publisher: redis_adapter.AbstractEventPublisher

    def _seen_aggregates(self):
        return self.products.seen


# Constructed once per process; bucket and channel are chosen per request.
DEFAULT_MINIO_CLIENT = Minio(**get_minio_config())


class MinIOUnitOfWork(AbstractProductUnitOfWork):
    """Unit of Work over a MinIO bucket and a Redis event publisher."""

    def __init__(self, bucket_name: str, publisher: redis_adapter.AbstractEventPublisher,
                 client: Minio = DEFAULT_MINIO_CLIENT):
        self.products = MinIOProductRepository(client=client, bucket_name=bucket_name)
        self.publisher = publisher

    def _commit(self):
        """Commit changes - MinIO writes are committed immediately."""
        pass

    def rollback(self):
        """MinIO has no transactions; a stored record stays stored."""
        pass
