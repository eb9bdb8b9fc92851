from __future__ import annotations

import time
from typing import Any

from assetverse.core.errors import NotFoundError, ValidationError
from assetverse.models.packages import PackageRecord, PackageUpgradeRequest, PaymentRecord
from assetverse.repositories.data_store import DataStore, new_id, utcnow
from assetverse.repositories.stores import PackageStore, PaymentStore, UserStore
from assetverse.services.event_log import EventLogger


class PackageService:
    def __init__(
        self,
        store: DataStore,
        packages: PackageStore,
        payments: PaymentStore,
        users: UserStore,
        event_logger: EventLogger,
    ) -> None:
        self.store = store
        self.packages = packages
        self.payments = payments
        self.users = users
        self.event_logger = event_logger
        self._seed_packages()

    def _seed_packages(self) -> None:
        seed = [
            {
                "name": "basic",
                "employee_limit": 5,
                "price": 5.0,
                "features": ["Asset tracking", "Employee management", "Basic support"],
            },
            {
                "name": "standard",
                "employee_limit": 10,
                "price": 8.0,
                "features": ["All Basic features", "Advanced analytics", "Priority support"],
            },
            {
                "name": "premium",
                "employee_limit": 20,
                "price": 15.0,
                "features": ["All Standard features", "Custom branding", "24/7 support"],
            },
        ]

        with self.store.lock:
            if self.store.packages:
                return
            for package in seed:
                self.packages.insert(package["name"], package)

    def list_packages(self) -> list[PackageRecord]:
        return [PackageRecord(**p) for p in self.packages.all()]

    def upgrade_package(self, user: dict[str, Any], payload: PackageUpgradeRequest) -> PaymentRecord:
        """Apply a completed payment reported by the payment gateway."""
        if payload.employee_limit < 1 or payload.amount <= 0:
            raise ValidationError("Missing package info")

        payment_id = new_id("pay")
        with self.store.transaction():
            hr = self.users.get(user["email"])
            if hr is None:
                raise NotFoundError("User not found")
            if payload.employee_limit < hr.get("current_employees", 0):
                raise ValidationError(
                    f"Package limit {payload.employee_limit} is below the "
                    f"{hr['current_employees']} employees already affiliated"
                )

            now = utcnow()
            self.users.update(
                user["email"],
                {
                    "subscription": payload.package_name,
                    "package_limit": payload.employee_limit,
                    "updated_at": now,
                },
            )
            row = {
                "id": payment_id,
                "hr_email": user["email"],
                "package_name": payload.package_name,
                "employee_limit": payload.employee_limit,
                "amount": payload.amount,
                "transaction_id": f"TXN-{int(time.time() * 1000)}",
                "payment_date": now,
                "status": "completed",
            }
            self.payments.insert(payment_id, row)

        self.event_logger.log_event(
            event_type="package_upgraded",
            actor_email=user["email"],
            actor_role=user["role"],
            details={"package_name": payload.package_name, "employee_limit": payload.employee_limit},
        )
        return PaymentRecord(**row)

    def list_payments(self, hr_email: str) -> list[PaymentRecord]:
        rows = sorted(self.payments.find(hr_email=hr_email), key=lambda r: r["payment_date"], reverse=True)
        return [PaymentRecord(**r) for r in rows]
