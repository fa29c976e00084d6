from typing import Dict, List, Union

from pydantic import BaseModel, Field, field_validator

from configs.constant import DAYS_IN_MONTH, SCHEMA_VERSION


class Admin(BaseModel):
    username: str = ""
    passwordHash: str = ""


class Company(BaseModel):
    name: str
    logoPath: str = ""


class Category(BaseModel):
    id: str
    name: str
    description: str = ""


class Product(BaseModel):
    id: str
    name: str
    categoryId: str
    description: str = ""
    price: Union[int, float] = 0
    photos: List[str] = []


class Document(BaseModel):
    """Root of the JSON datastore. Loaded and saved as a whole."""

    schemaVersion: int = SCHEMA_VERSION
    admin: Admin
    company: Company
    categories: List[Category]
    products: List[Product]
    availability: Dict[str, Dict[int, bool]]

    @field_validator("schemaVersion")
    @classmethod
    def check_version(cls, value: int) -> int:
        if value < 1 or value > SCHEMA_VERSION:
            raise ValueError(f"unsupported schema version {value}")
        return value

    @field_validator("availability")
    @classmethod
    def check_days(cls, value: Dict[str, Dict[int, bool]]) -> Dict[str, Dict[int, bool]]:
        for category_id, days in value.items():
            for day in days:
                if not 1 <= day <= DAYS_IN_MONTH:
                    raise ValueError(f"day {day} out of range for {category_id}")
        return value

    @classmethod
    def initial(cls, admin_username: str, company_name: str) -> "Document":
        return cls(
            admin=Admin(username=admin_username, passwordHash=""),
            company=Company(name=company_name, logoPath=""),
            categories=[],
            products=[],
            availability={},
        )

    def find_category(self, category_id: str) -> Category | None:
        return next((c for c in self.categories if c.id == category_id), None)

    def find_product(self, product_id: str) -> Product | None:
        return next((p for p in self.products if p.id == product_id), None)


class Identity(BaseModel):
    username: str = Field(..., description="Subject the token was issued to")
