from typing import Any, List, Mapping

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from shared.config.settings import get_settings
from shared.observability import (
    inventory_product_mutations_total,
    inventory_validation_failures_total,
)

from .errors import InvalidField, MissingField
from .models import Product
from .repository import ProductRepository
from .validation import parse_quantity, validate_for_create, validate_for_update

logger = structlog.get_logger(__name__)


def _validated(validator, value: Any):
    try:
        return validator(value)
    except (MissingField, InvalidField) as exc:
        inventory_validation_failures_total.labels(field=exc.field).inc()
        logger.info("product_payload_rejected", field=exc.field, error=str(exc))
        raise


class ProductService:

    @staticmethod
    async def initialize(db: AsyncSession) -> int:
        seed = get_settings().seed_sample_data
        return await ProductRepository.initialize(db, seed=seed)

    @staticmethod
    async def list_products(db: AsyncSession) -> List[Product]:
        return await ProductRepository.list_all(db)

    @staticmethod
    async def get_product(db: AsyncSession, product_id: int) -> Product:
        return await ProductRepository.get(db, product_id)

    @staticmethod
    async def create_product(db: AsyncSession, payload: Mapping[str, Any]) -> int:
        fields = _validated(validate_for_create, payload)
        product_id = await ProductRepository.insert(db, fields)

        inventory_product_mutations_total.labels(operation="create").inc()
        logger.info("product_created", product_id=product_id, name=fields.name)
        return product_id

    @staticmethod
    async def update_product(db: AsyncSession, product_id: int, payload: Mapping[str, Any]) -> None:
        fields = _validated(validate_for_update, payload)
        await ProductRepository.update(db, product_id, fields)

        inventory_product_mutations_total.labels(operation="update").inc()
        logger.info("product_updated", product_id=product_id)

    @staticmethod
    async def delete_product(db: AsyncSession, product_id: int) -> None:
        await ProductRepository.delete(db, product_id)

        inventory_product_mutations_total.labels(operation="delete").inc()
        logger.info("product_deleted", product_id=product_id)

    @staticmethod
    async def adjust_quantity(db: AsyncSession, product_id: int, new_quantity: Any) -> Product:
        """
        Set a product's stock level.

        There is no partial update: the current record is read back, only its
        quantity is replaced, and the complete record goes through the regular
        update path (and its validation).
        """
        quantity = _validated(parse_quantity, new_quantity)

        # 1. Read the full record
        product = await ProductRepository.get(db, product_id)

        # 2. Overwrite quantity only
        payload = {
            "name": product.name,
            "description": product.description,
            "price": product.price,
            "quantity": quantity,
            "category": product.category,
            "image_url": product.image_url,
        }

        # 3. Submit as a full update
        await ProductService.update_product(db, product_id, payload)
        inventory_product_mutations_total.labels(operation="adjust_quantity").inc()
        return await ProductRepository.get(db, product_id)
