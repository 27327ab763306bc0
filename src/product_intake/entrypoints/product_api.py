"""
Product API Entrypoint - Thin API with Command Dispatch
API validates submissions and dispatches commands through the message bus
"""
import uuid
from datetime import datetime, timezone
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field
from starlette.concurrency import run_in_threadpool
import logging

import config
from product_intake.adapters.redis_adapter import RedisEventPublisher
from product_intake.domain.commands import CreateProduct
from product_intake.service_layer import messagebus
from product_intake.service_layer.unit_of_work import MinIOUnitOfWork
from product_intake.service_layer.validation import ValidationFailure, parse_product_submission

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

CONFIGURATION_MISSING = "Internal server error: Configuration missing."
PROCESSING_FAILED = "Internal server error while processing the product."

app = FastAPI(
    title="Products Service",
    description="Handles product insertions.",
    version="1.0.0"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["Content-Type", "X-Amz-Date", "Authorization", "X-Api-Key", "X-Amz-Security-Token"],
)


class ProductInput(BaseModel):
    """Request body for POST /products"""
    name: str = Field(description="Product name")
    description: Optional[str] = Field(default=None, description="Optional product description")
    price: float = Field(description="Product price")


class ProductResponse(BaseModel):
    """Response model for a created product"""
    productId: str
    name: str
    description: Optional[str] = None
    price: float
    createdAt: datetime


class ErrorResponse(BaseModel):
    message: str


def build_unit_of_work(bucket_name: str, channel: str) -> MinIOUnitOfWork:
    return MinIOUnitOfWork(bucket_name=bucket_name, publisher=RedisEventPublisher(channel))


def _json_response(status_code: int, body: dict) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=body, media_type="application/json")


def _utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "service": "product-api",
        "timestamp": datetime.now(timezone.utc).isoformat()
    }


@app.post(
    "/products",
    status_code=201,
    response_model=ProductResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": ProductInput.model_json_schema()}},
        }
    },
)
async def create_product(request: Request):
    """
    Create a product - validate, store, publish ProductCreated.

    The body is read raw so that a missing or malformed body is answered
    with the same {"message": ...} shape as every other failure.
    """
    # Read per request so configuration changes apply without a restart
    bucket_name = config.get_products_bucket()
    channel = config.get_product_events_channel()

    if not bucket_name or not channel:
        logger.error("Configuration error: PRODUCTS_BUCKET or PRODUCT_EVENTS_CHANNEL is not set")
        return _json_response(500, {"message": CONFIGURATION_MISSING})

    submission = parse_product_submission(await request.body())
    if isinstance(submission, ValidationFailure):
        logger.info(f"Rejected product submission: {submission.name}")
        return _json_response(400, {"message": submission.message})

    product_id = str(uuid.uuid4())
    cmd = CreateProduct(
        product_id=product_id,
        name=submission.name,
        price=submission.price,
        description=submission.description,
        created_at=_utc_timestamp(),
    )

    try:
        uow = build_unit_of_work(bucket_name, channel)
        results = await run_in_threadpool(messagebus.handle, cmd, uow)
    except Exception as e:
        # No compensation: the record may already be stored without its event
        logger.error(f"Error inserting product {product_id} or publishing event: {e}")
        return _json_response(500, {"message": PROCESSING_FAILED})

    product = results[0]
    logger.info(f"Product {product.product_id} created")
    return _json_response(201, product.to_dict())
