from __future__ import annotations

import logging
from datetime import datetime
from typing import Any

from assetverse.core.errors import (
    AuthorizationError,
    CapacityExceededError,
    ConflictError,
    InvalidStateError,
    InventoryExhaustedError,
    NotFoundError,
    ValidationError,
)
from assetverse.models.workflow import (
    AffiliationStatus,
    AssignmentRecord,
    AssignmentStatus,
    RequestCreate,
    RequestRecord,
    RequestStatus,
)
from assetverse.repositories.data_store import DataStore, new_id, utcnow
from assetverse.repositories.stores import (
    AffiliationStore,
    AssetStore,
    AssignmentLedger,
    RequestLedger,
    UserStore,
)
from assetverse.services.event_log import EventLogger

logger = logging.getLogger(__name__)

DECISIONS = {RequestStatus.APPROVED.value, RequestStatus.REJECTED.value}


class WorkflowService:
    """Moves asset requests through pending -> approved/rejected and assets back in.

    Holds no state of its own. Every operation that writes to more than one
    store runs inside a single ``DataStore.transaction()``, so a failure at
    any step leaves all stores as they were before the call.
    """

    def __init__(
        self,
        store: DataStore,
        users: UserStore,
        assets: AssetStore,
        requests: RequestLedger,
        assignments: AssignmentLedger,
        affiliations: AffiliationStore,
        event_logger: EventLogger,
    ) -> None:
        self.store = store
        self.users = users
        self.assets = assets
        self.requests = requests
        self.assignments = assignments
        self.affiliations = affiliations
        self.event_logger = event_logger

    def submit(self, payload: RequestCreate, actor: dict[str, Any]) -> RequestRecord:
        fields = (payload.asset_id, payload.asset_name, payload.requester_email, payload.hr_email)
        if not all(value and value.strip() for value in fields):
            raise ValidationError("Missing required fields")

        request_id = new_id("req")
        row = {
            "id": request_id,
            "asset_id": payload.asset_id,
            "asset_name": payload.asset_name,
            "requester_email": payload.requester_email,
            "requester_name": payload.requester_name,
            "hr_email": payload.hr_email,
            "company_name": payload.company_name,
            "note": payload.note,
            "request_status": RequestStatus.PENDING.value,
            "request_date": utcnow(),
            "approval_date": None,
            "processed_by": None,
        }

        with self.store.transaction():
            if self.requests.find_pending(payload.asset_id, payload.requester_email):
                raise ConflictError("You already have a pending request for this asset")
            self.requests.insert(request_id, row)

        self.event_logger.log_event(
            event_type="request_submitted",
            actor_email=actor["email"],
            actor_role=actor["role"],
            details={"request_id": request_id, "asset_id": payload.asset_id, "hr_email": payload.hr_email},
        )
        return RequestRecord(**row)

    def transition(self, request_id: str, decision: str | None, processed_by: str) -> RequestRecord:
        """Approve or reject a pending request on behalf of the HR account it is addressed to."""
        created_affiliation = False
        with self.store.transaction():
            request = self.requests.get(request_id)
            if request is None:
                raise NotFoundError("Request not found")
            if request["hr_email"] != processed_by:
                raise AuthorizationError("You can only process requests sent to your company")
            if decision not in DECISIONS:
                raise ValidationError("requestStatus must be 'approved' or 'rejected'")
            if request["request_status"] != RequestStatus.PENDING.value:
                raise InvalidStateError(f"Request is already {request['request_status']}")

            hr = self.users.get(request["hr_email"])
            if hr is None:
                raise NotFoundError("HR account not found")

            affiliation = self.affiliations.find_active(request["requester_email"], request["hr_email"])

            # Admission gate: only a new affiliation consumes capacity.
            if (
                decision == RequestStatus.APPROVED.value
                and affiliation is None
                and hr.get("current_employees", 0) >= hr.get("package_limit", 0)
            ):
                raise CapacityExceededError("Package limit reached")

            now = utcnow()
            if not self.requests.mark_processed(request_id, decision, processed_by, now):
                raise InvalidStateError("Request is no longer pending")

            if decision == RequestStatus.APPROVED.value:
                asset = self.assets.get(request["asset_id"])
                if asset is None:
                    raise NotFoundError("Asset not found")
                if asset["hr_email"] != request["hr_email"]:
                    raise ValidationError("Requested asset does not belong to this company")

                if affiliation is None:
                    if not self.users.increment_employees_if_below_limit(request["hr_email"]):
                        raise CapacityExceededError("Package limit reached")
                    self._create_affiliation(request, hr, asset, now)
                    created_affiliation = True

                assignment_id = new_id("asg")
                self.assignments.insert(
                    assignment_id,
                    {
                        "id": assignment_id,
                        "request_id": request_id,
                        "asset_id": request["asset_id"],
                        "asset_name": request["asset_name"],
                        "requester_email": request["requester_email"],
                        "requester_name": request.get("requester_name"),
                        "hr_email": request["hr_email"],
                        "company_name": request.get("company_name") or hr.get("company_name"),
                        "assignment_date": now,
                        "status": AssignmentStatus.ASSIGNED.value,
                        "return_date": None,
                    },
                )

                if not self.assets.decrement_available(request["asset_id"]):
                    raise InventoryExhaustedError(f"No units of '{asset['name']}' are available")

            processed = self.requests.get(request_id)

        logger.info("Request %s %s by %s", request_id, decision, processed_by)
        if created_affiliation:
            self.event_logger.log_event(
                event_type="affiliation_created",
                actor_email=processed_by,
                actor_role="hr",
                details={"employee_email": request["requester_email"], "hr_email": request["hr_email"]},
            )
        self.event_logger.log_event(
            event_type=f"request_{decision}",
            actor_email=processed_by,
            actor_role="hr",
            details={"request_id": request_id, "asset_id": request["asset_id"]},
        )
        return RequestRecord(**processed)

    def return_asset(self, assignment_id: str, actor: dict[str, Any]) -> AssignmentRecord:
        with self.store.transaction():
            assignment = self.assignments.get(assignment_id)
            if assignment is None:
                raise NotFoundError("Assigned asset not found")
            if actor["email"] not in (assignment["requester_email"], assignment["hr_email"]):
                raise AuthorizationError("You can only return your own assigned assets")
            if assignment["status"] != AssignmentStatus.ASSIGNED.value:
                raise InvalidStateError("Asset already returned")

            self.assignments.mark_returned(assignment_id, utcnow())

            asset = self.assets.get(assignment["asset_id"])
            if asset is None:
                logger.warning(
                    "Assignment %s returned for asset %s which is no longer catalogued",
                    assignment_id,
                    assignment["asset_id"],
                )
            elif not self.assets.increment_available(assignment["asset_id"]):
                raise InvalidStateError(
                    f"Asset '{asset['name']}' already has all {asset['product_quantity']} units available"
                )

            returned = self.assignments.get(assignment_id)

        self.event_logger.log_event(
            event_type="asset_returned",
            actor_email=actor["email"],
            actor_role=actor["role"],
            details={"assignment_id": assignment_id, "asset_id": assignment["asset_id"]},
        )
        return AssignmentRecord(**returned)

    def remove_affiliation(
        self,
        employee_email: str | None,
        company_name: str | None,
        hr_email: str | None,
        actor: dict[str, Any],
    ) -> None:
        if not employee_email or not company_name or not hr_email:
            raise ValidationError("Missing required fields")

        with self.store.transaction():
            matches = self.affiliations.find(
                employee_email=employee_email,
                company_name=company_name,
                hr_email=hr_email,
                status=AffiliationStatus.ACTIVE.value,
            )
            if not matches:
                raise NotFoundError("Affiliation not found")
            self.affiliations.mark_removed(matches[0]["id"], utcnow())
            self.users.decrement_employees(hr_email)

        self.event_logger.log_event(
            event_type="affiliation_removed",
            actor_email=actor["email"],
            actor_role=actor["role"],
            details={"employee_email": employee_email, "hr_email": hr_email},
        )

    def list_requests(self, hr_email: str | None = None, requester_email: str | None = None) -> list[RequestRecord]:
        criteria = {}
        if hr_email:
            criteria["hr_email"] = hr_email
        if requester_email:
            criteria["requester_email"] = requester_email
        rows = sorted(self.requests.find(**criteria), key=lambda r: r["request_date"], reverse=True)
        return [RequestRecord(**r) for r in rows]

    def list_assignments(self, requester_email: str) -> list[AssignmentRecord]:
        rows = sorted(
            self.assignments.find(requester_email=requester_email),
            key=lambda r: r["assignment_date"],
            reverse=True,
        )
        return [AssignmentRecord(**r) for r in rows]

    def _create_affiliation(
        self,
        request: dict[str, Any],
        hr: dict[str, Any],
        asset: dict[str, Any],
        now: datetime,
    ) -> None:
        affiliation_id = new_id("aff")
        self.affiliations.insert(
            affiliation_id,
            {
                "id": affiliation_id,
                "employee_email": request["requester_email"],
                "employee_name": request.get("requester_name"),
                "hr_email": request["hr_email"],
                "company_name": request.get("company_name") or hr.get("company_name") or asset.get("company_name"),
                "company_logo": asset.get("company_logo") or hr.get("company_logo"),
                "status": AffiliationStatus.ACTIVE.value,
                "affiliation_date": now,
                "removed_date": None,
            },
        )
