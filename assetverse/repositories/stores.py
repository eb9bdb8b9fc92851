from __future__ import annotations

from datetime import datetime
from typing import Any

from assetverse.repositories.data_store import DataStore


class _Collection:
    collection_name: str

    def __init__(self, store: DataStore) -> None:
        self.store = store

    @property
    def _rows(self) -> dict[str, dict[str, Any]]:
        return getattr(self.store, self.collection_name)

    def get(self, key: str) -> dict[str, Any] | None:
        with self.store.lock:
            row = self._rows.get(key)
            return dict(row) if row else None

    def insert(self, key: str, row: dict[str, Any]) -> dict[str, Any]:
        with self.store.lock:
            self.store.record_write(self.collection_name, key)
            self._rows[key] = dict(row)
        return row

    def _writable(self, key: str) -> dict[str, Any] | None:
        self.store.record_write(self.collection_name, key)
        return self._rows.get(key)

    def find(self, **criteria: Any) -> list[dict[str, Any]]:
        with self.store.lock:
            return [
                dict(row)
                for row in self._rows.values()
                if all(row.get(field) == value for field, value in criteria.items())
            ]


class UserStore(_Collection):
    collection_name = "users"

    def update(self, email: str, updates: dict[str, Any]) -> dict[str, Any] | None:
        with self.store.lock:
            row = self._writable(email)
            if row is None:
                return None
            row.update(updates)
            return dict(row)

    def increment_employees_if_below_limit(self, email: str) -> bool:
        with self.store.lock:
            row = self._writable(email)
            if row is None or row["current_employees"] >= row["package_limit"]:
                return False
            row["current_employees"] += 1
            return True

    def decrement_employees(self, email: str) -> bool:
        with self.store.lock:
            row = self._writable(email)
            if row is None:
                return False
            row["current_employees"] = max(0, row.get("current_employees", 0) - 1)
            return True


class AssetStore(_Collection):
    collection_name = "assets"

    def update(self, asset_id: str, updates: dict[str, Any]) -> dict[str, Any] | None:
        with self.store.lock:
            row = self._writable(asset_id)
            if row is None:
                return None
            row.update(updates)
            return dict(row)

    def delete(self, asset_id: str) -> bool:
        with self.store.lock:
            self.store.record_write(self.collection_name, asset_id)
            return self._rows.pop(asset_id, None) is not None

    def page(self, page: int, limit: int, hr_email: str | None = None) -> tuple[list[dict[str, Any]], int]:
        rows = self.find(hr_email=hr_email) if hr_email else self.find()
        rows.sort(key=lambda r: r["date_added"], reverse=True)
        skip = (page - 1) * limit
        return rows[skip:skip + limit], len(rows)

    def decrement_available(self, asset_id: str) -> bool:
        with self.store.lock:
            row = self._writable(asset_id)
            if row is None or row["available_quantity"] <= 0:
                return False
            row["available_quantity"] -= 1
            return True

    def increment_available(self, asset_id: str) -> bool:
        with self.store.lock:
            row = self._writable(asset_id)
            if row is None or row["available_quantity"] >= row["product_quantity"]:
                return False
            row["available_quantity"] += 1
            return True


class RequestLedger(_Collection):
    collection_name = "requests"

    def find_pending(self, asset_id: str, requester_email: str) -> dict[str, Any] | None:
        matches = self.find(asset_id=asset_id, requester_email=requester_email, request_status="pending")
        return matches[0] if matches else None

    def mark_processed(self, request_id: str, status: str, processed_by: str, at: datetime) -> bool:
        with self.store.lock:
            row = self._writable(request_id)
            if row is None or row["request_status"] != "pending":
                return False
            row["request_status"] = status
            row["processed_by"] = processed_by
            row["approval_date"] = at
            return True


class AssignmentLedger(_Collection):
    collection_name = "assigned_assets"

    def mark_returned(self, assignment_id: str, at: datetime) -> bool:
        with self.store.lock:
            row = self._writable(assignment_id)
            if row is None or row["status"] != "assigned":
                return False
            row["status"] = "returned"
            row["return_date"] = at
            return True


class AffiliationStore(_Collection):
    collection_name = "affiliations"

    def find_active(self, employee_email: str, hr_email: str) -> dict[str, Any] | None:
        matches = self.find(employee_email=employee_email, hr_email=hr_email, status="active")
        return matches[0] if matches else None

    def mark_removed(self, affiliation_id: str, at: datetime) -> bool:
        with self.store.lock:
            row = self._writable(affiliation_id)
            if row is None or row["status"] != "active":
                return False
            row["status"] = "removed"
            row["removed_date"] = at
            return True


class PackageStore(_Collection):
    collection_name = "packages"

    def all(self) -> list[dict[str, Any]]:
        return sorted(self.find(), key=lambda r: r["employee_limit"])


class PaymentStore(_Collection):
    collection_name = "payments"
