# pylint: disable=redefined-outer-name
import pytest
import redis
import requests
from minio import Minio
from tenacity import retry, stop_after_delay

from config import get_api_url, get_redis_host_and_port, get_minio_config
from notifications.adapters.email_sender import AbstractEmailSender
from product_intake.adapters.redis_adapter import AbstractEventPublisher
from product_intake.adapters.repository import AbstractProductRepository, object_key_for
from product_intake.service_layer.unit_of_work import AbstractProductUnitOfWork

pytest.register_assert_rewrite("api_client")


@retry(stop=stop_after_delay(60))
def wait_for_webapp_to_come_up():
    return requests.get(f"{get_api_url()}/health", timeout=1)


@retry(stop=stop_after_delay(30))
def wait_for_redis_to_come_up():
    r = redis.Redis(**get_redis_host_and_port())
    return r.ping()


@retry(stop=stop_after_delay(30))
def wait_for_minio_to_come_up():
    return Minio(**get_minio_config()).list_buckets()


class FakeProductRepository(AbstractProductRepository):
    def __init__(self, error=None):
        super().__init__()
        self.records = {}
        self.writes = 0
        self.error = error

    def _add(self, product):
        self.writes += 1
        if self.error:
            raise self.error
        object_key = object_key_for(product.product_id)
        self.records[product.product_id] = product.to_dict()
        product.store(object_key)
        return object_key


class FakePublisher(AbstractEventPublisher):
    def __init__(self, error=None):
        self.attempts = 0
        self.published = []
        self.error = error

    def publish(self, event):
        self.attempts += 1
        if self.error:
            raise self.error
        self.published.append(event)
        return 1


class FakeUnitOfWork(AbstractProductUnitOfWork):
    def __init__(self, store_error=None, publish_error=None):
        self.products = FakeProductRepository(error=store_error)
        self.publisher = FakePublisher(error=publish_error)
        self.committed = False

    def _commit(self):
        self.committed = True

    def rollback(self):
        pass


class FakeEmailSender(AbstractEmailSender):
    def __init__(self, error=None):
        self.sent = []
        self.error = error

    def send(self, message):
        if self.error:
            raise self.error
        self.sent.append(message)
        return f"fake-{len(self.sent)}"


@pytest.fixture
def fake_uow():
    return FakeUnitOfWork()


@pytest.fixture
def fake_email_sender():
    return FakeEmailSender()


@pytest.fixture
def catalog_env(monkeypatch):
    monkeypatch.setenv("PRODUCTS_BUCKET", "products-test")
    monkeypatch.setenv("PRODUCT_EVENTS_CHANNEL", "catalog:product-events")


@pytest.fixture
def notification_env(monkeypatch):
    monkeypatch.setenv("SENDER_EMAIL_ADDRESS", "catalog@example.com")
    monkeypatch.setenv("RECIPIENT_EMAIL_ADDRESS", "team@example.com")


@pytest.fixture
def redis_client():
    wait_for_redis_to_come_up()
    return redis.Redis(**get_redis_host_and_port())


@pytest.fixture
def minio_client():
    wait_for_minio_to_come_up()
    return Minio(**get_minio_config())


@pytest.fixture
def restart_api():
    wait_for_webapp_to_come_up()
