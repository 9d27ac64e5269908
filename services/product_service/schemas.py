from typing import List, Optional

from pydantic import BaseModel


class ProductFields(BaseModel):
    """A validated, fully populated product record (everything but the id)."""
    name: str
    description: str
    price: float
    quantity: int
    category: str
    image_url: str


class ProductResponse(BaseModel):
    id: int
    name: str
    description: Optional[str] = None
    price: float
    quantity: int
    category: Optional[str] = None
    image_url: Optional[str] = None

    class Config:
        from_attributes = True


class ProductListResponse(BaseModel):
    products: List[ProductResponse]


class ProductEnvelope(BaseModel):
    product: ProductResponse


class ProductCreated(BaseModel):
    id: int
    message: str = "Product created successfully"


class MessageResponse(BaseModel):
    message: str
