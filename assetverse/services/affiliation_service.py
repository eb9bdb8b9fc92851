from __future__ import annotations

from assetverse.models.auth import UserPublic
from assetverse.models.workflow import AffiliationRecord, AffiliationStatus
from assetverse.repositories.stores import AffiliationStore, UserStore
from assetverse.services.auth_service import AuthService


class AffiliationService:
    """Read views over employee <-> company affiliations."""

    def __init__(self, affiliations: AffiliationStore, users: UserStore, auth_service: AuthService) -> None:
        self.affiliations = affiliations
        self.users = users
        self.auth_service = auth_service

    def list_affiliations(self, employee_email: str) -> list[AffiliationRecord]:
        rows = self.affiliations.find(employee_email=employee_email, status=AffiliationStatus.ACTIVE.value)
        return [AffiliationRecord(**r) for r in rows]

    def list_company_employees(self, company_name: str) -> list[UserPublic]:
        rows = self.affiliations.find(company_name=company_name, status=AffiliationStatus.ACTIVE.value)
        emails = {r["employee_email"] for r in rows}
        employees = [self.users.get(email) for email in sorted(emails)]
        return [self.auth_service.as_public(u) for u in employees if u]
