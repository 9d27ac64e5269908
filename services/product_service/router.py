from typing import Any, Dict

from fastapi import APIRouter, Body, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from shared.config.database import get_db
from .schemas import (
    MessageResponse,
    ProductCreated,
    ProductEnvelope,
    ProductListResponse,
)
from .service import ProductService

router = APIRouter(prefix="/products", tags=["Products"])
public_router = APIRouter()  # For any public endpoints (e.g. health check)

@public_router.get("/health")
async def health_check():
    return {"service": "product", "status": "running"}


@router.get("", response_model=ProductListResponse)
async def list_products(db: AsyncSession = Depends(get_db)):
    products = await ProductService.list_products(db)
    return {"products": products}


@router.get("/{product_id}", response_model=ProductEnvelope)
async def get_product(product_id: int, db: AsyncSession = Depends(get_db)):
    product = await ProductService.get_product(db, product_id)
    return {"product": product}


# Bodies are taken as raw JSON objects: numeric fields typed into a form may
# arrive as strings, and converting them is the validation layer's job.
@router.post("", response_model=ProductCreated, status_code=status.HTTP_201_CREATED)
async def create_product(
    payload: Dict[str, Any] = Body(...),
    db: AsyncSession = Depends(get_db)
):
    product_id = await ProductService.create_product(db, payload)
    return ProductCreated(id=product_id)


@router.put("/{product_id}", response_model=MessageResponse)
async def update_product(
    product_id: int,
    payload: Dict[str, Any] = Body(...),
    db: AsyncSession = Depends(get_db)
):
    await ProductService.update_product(db, product_id, payload)
    return MessageResponse(message="Product updated successfully")


@router.delete("/{product_id}", response_model=MessageResponse)
async def delete_product(product_id: int, db: AsyncSession = Depends(get_db)):
    await ProductService.delete_product(db, product_id)
    return MessageResponse(message="Product deleted successfully")
