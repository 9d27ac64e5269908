from typing import List

import structlog
from sqlalchemy import delete, func, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from shared.config.database import Base
from shared.observability import inventory_storage_errors_total

from .errors import NotFound, StorageError
from .models import Product
from .schemas import ProductFields
from .seed import SAMPLE_PRODUCTS

logger = structlog.get_logger(__name__)


async def _storage_failure(db: AsyncSession, operation: str, exc: SQLAlchemyError) -> StorageError:
    inventory_storage_errors_total.inc()
    logger.error("product_store_failure", operation=operation, error=str(exc))
    await db.rollback()
    return StorageError(exc)


class ProductRepository:

    @staticmethod
    async def initialize(db: AsyncSession, seed: bool = True) -> int:
        """Create the table if needed and seed it when empty. Returns rows inserted."""
        try:
            conn = await db.connection()
            await conn.run_sync(Base.metadata.create_all)

            inserted = 0
            if seed and await ProductRepository.count(db) == 0:
                db.add_all([Product(**sample) for sample in SAMPLE_PRODUCTS])
                inserted = len(SAMPLE_PRODUCTS)
            await db.commit()
        except SQLAlchemyError as exc:
            raise await _storage_failure(db, "initialize", exc)

        if inserted:
            logger.info("product_store_seeded", rows=inserted)
        return inserted

    @staticmethod
    async def count(db: AsyncSession) -> int:
        try:
            result = await db.execute(select(func.count()).select_from(Product))
        except SQLAlchemyError as exc:
            raise await _storage_failure(db, "count", exc)
        return result.scalar_one()

    @staticmethod
    async def insert(db: AsyncSession, fields: ProductFields) -> int:
        product = Product(**fields.model_dump())
        try:
            db.add(product)
            await db.commit()
            await db.refresh(product)
        except SQLAlchemyError as exc:
            raise await _storage_failure(db, "insert", exc)
        return product.id

    @staticmethod
    async def get(db: AsyncSession, product_id: int) -> Product:
        stmt = (
            select(Product)
            .where(Product.id == product_id)
            .execution_options(populate_existing=True)
        )
        try:
            result = await db.execute(stmt)
        except SQLAlchemyError as exc:
            raise await _storage_failure(db, "get", exc)

        product = result.scalars().first()
        if product is None:
            raise NotFound(product_id)
        return product

    @staticmethod
    async def list_all(db: AsyncSession) -> List[Product]:
        # Newest first: the UI surfaces recent additions at the top.
        try:
            result = await db.execute(select(Product).order_by(Product.id.desc()))
        except SQLAlchemyError as exc:
            raise await _storage_failure(db, "list_all", exc)
        return list(result.scalars().all())

    @staticmethod
    async def update(db: AsyncSession, product_id: int, fields: ProductFields) -> None:
        stmt = update(Product).where(Product.id == product_id).values(**fields.model_dump())
        try:
            result = await db.execute(stmt)
            await db.commit()
        except SQLAlchemyError as exc:
            raise await _storage_failure(db, "update", exc)

        if result.rowcount == 0:
            raise NotFound(product_id)

    @staticmethod
    async def delete(db: AsyncSession, product_id: int) -> None:
        try:
            result = await db.execute(delete(Product).where(Product.id == product_id))
            await db.commit()
        except SQLAlchemyError as exc:
            raise await _storage_failure(db, "delete", exc)

        if result.rowcount == 0:
            raise NotFound(product_id)
