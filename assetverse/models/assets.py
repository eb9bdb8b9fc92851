from datetime import datetime
from typing import Optional

from pydantic import Field

from assetverse.models.common import CamelModel


class AssetCreate(CamelModel):
    name: str = Field(min_length=1, max_length=120)
    product_type: Optional[str] = Field(default=None, max_length=40)
    product_quantity: int = Field(ge=1)
    company_logo: Optional[str] = None


class AssetUpdate(CamelModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=120)
    product_type: Optional[str] = Field(default=None, max_length=40)
    company_logo: Optional[str] = None


class AssetRecord(CamelModel):
    id: str
    name: str
    product_type: Optional[str] = None
    product_quantity: int
    available_quantity: int
    hr_email: str
    company_name: Optional[str] = None
    company_logo: Optional[str] = None
    date_added: datetime


class AssetPage(CamelModel):
    total: int
    page: int
    limit: int
    total_pages: int
    assets: list[AssetRecord]
