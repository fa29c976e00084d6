from typing import Any, Dict, Optional

from pydantic import BaseModel

from models.db import Category


class LoginData(BaseModel):
    username: Optional[str] = None
    password: Optional[str] = None


class Token(BaseModel):
    token: str


class CompanyUpdate(BaseModel):
    name: Optional[str] = None


class CategoryCreate(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None

    class Config:
        json_schema_extra = {
            "example": {
                "name": "Silk",
                "description": "Pure silk sarees"
            }
        }


class CategoryUpdate(BaseModel):
    """Partial update. Only fields present in the request body are applied."""
    name: Optional[str] = None
    description: Optional[str] = None


class CategoryWithAvailability(Category):
    availability: Dict[int, bool]


class ProductCreate(BaseModel):
    name: Optional[str] = None
    categoryId: Optional[str] = None
    description: Optional[str] = None
    # Non-numeric values are ignored rather than rejected
    price: Any = None

    class Config:
        json_schema_extra = {
            "example": {
                "name": "Kanjivaram Red",
                "categoryId": "cat-0b6f0c7e-7c1e-4f55-9d0e-3f5d3c2c8a11",
                "description": "Handwoven, zari border",
                "price": 120
            }
        }


class ProductUpdate(BaseModel):
    """Partial update. Only fields present in the request body are applied."""
    name: Optional[str] = None
    categoryId: Optional[str] = None
    description: Optional[str] = None
    price: Any = None


class AvailabilityUpdate(BaseModel):
    day: Any = None
    available: Any = None

    class Config:
        json_schema_extra = {
            "example": {
                "day": 5,
                "available": False
            }
        }


class MessageResponse(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    error: str
    message: str


ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    401: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
}
