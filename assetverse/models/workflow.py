from datetime import datetime
from enum import Enum
from typing import Optional

from assetverse.models.common import CamelModel


class RequestStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class AssignmentStatus(str, Enum):
    ASSIGNED = "assigned"
    RETURNED = "returned"


class AffiliationStatus(str, Enum):
    ACTIVE = "active"
    REMOVED = "removed"


class RequestCreate(CamelModel):
    asset_id: Optional[str] = None
    asset_name: Optional[str] = None
    requester_email: Optional[str] = None
    requester_name: Optional[str] = None
    hr_email: Optional[str] = None
    company_name: Optional[str] = None
    note: Optional[str] = None


class RequestCreated(CamelModel):
    success: bool = True
    inserted_id: str


class RequestDecision(CamelModel):
    request_status: Optional[str] = None


class RequestRecord(CamelModel):
    id: str
    asset_id: str
    asset_name: str
    requester_email: str
    requester_name: Optional[str] = None
    hr_email: str
    company_name: Optional[str] = None
    note: Optional[str] = None
    request_status: RequestStatus
    request_date: datetime
    approval_date: Optional[datetime] = None
    processed_by: Optional[str] = None


class AssignmentRecord(CamelModel):
    id: str
    request_id: str
    asset_id: str
    asset_name: str
    requester_email: str
    requester_name: Optional[str] = None
    hr_email: str
    company_name: Optional[str] = None
    assignment_date: datetime
    status: AssignmentStatus
    return_date: Optional[datetime] = None


class AffiliationRecord(CamelModel):
    id: str
    employee_email: str
    employee_name: Optional[str] = None
    hr_email: str
    company_name: str
    company_logo: Optional[str] = None
    status: AffiliationStatus
    affiliation_date: datetime
    removed_date: Optional[datetime] = None


class AffiliationRemoval(CamelModel):
    employee_email: Optional[str] = None
    company_name: Optional[str] = None
    hr_email: Optional[str] = None
