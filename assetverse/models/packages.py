from datetime import datetime

from pydantic import Field

from assetverse.models.common import CamelModel


class PackageRecord(CamelModel):
    name: str
    employee_limit: int
    price: float
    features: list[str] = Field(default_factory=list)


class PackageUpgradeRequest(CamelModel):
    package_name: str = Field(min_length=1, max_length=40)
    employee_limit: int
    amount: float


class PaymentRecord(CamelModel):
    id: str
    hr_email: str
    package_name: str
    employee_limit: int
    amount: float
    transaction_id: str
    payment_date: datetime
    status: str
