"""Repository pattern implementation for product records in object storage."""

import abc
import json
import logging
from io import BytesIO
from typing import Set

from minio import Minio
from minio.error import S3Error

from product_intake.domain.model import Product

logger = logging.getLogger(__name__)


class AbstractProductRepository(abc.ABC):
    """Abstract repository class"""

    def __init__(self):
        self.seen = set()  # type: Set[Product]

    def add(self, product: Product) -> str:
        object_key = self._add(product)
        self.seen.add(product)
        return object_key

    @abc.abstractmethod
    def _add(self, product: Product) -> str:
        """Store product record and return its object key."""
        raise NotImplementedError


def object_key_for(product_id: str) -> str:
    return f"products/{product_id}.json"


class MinIOProductRepository(AbstractProductRepository):
    """MinIO implementation keyed by productId, one JSON object per record."""

    def __init__(self, client: Minio, bucket_name: str):
        super().__init__()
        self.client = client
        self.bucket_name = bucket_name

    def _add(self, product: Product) -> str:
        """Write the record; the product raises its event only once this succeeds."""
        object_key = object_key_for(product.product_id)
        record_bytes = json.dumps(product.to_dict()).encode("utf-8")

        try:
            self.client.put_object(
                bucket_name=self.bucket_name,
                object_name=object_key,
                data=BytesIO(record_bytes),
                length=len(record_bytes),
                content_type="application/json"
            )
        except S3Error as e:
            logger.error(f"Failed to store product {product.product_id}: {e}")
            raise

        product.store(object_key)

        logger.info(f"Product {product.product_id} inserted successfully at {object_key}")
        return object_key

