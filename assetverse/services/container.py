from __future__ import annotations

from pathlib import Path

from assetverse.repositories.data_store import DataStore
from assetverse.repositories.stores import (
    AffiliationStore,
    AssetStore,
    AssignmentLedger,
    PackageStore,
    PaymentStore,
    RequestLedger,
    UserStore,
)
from assetverse.services.affiliation_service import AffiliationService
from assetverse.services.asset_service import AssetService
from assetverse.services.auth_service import AuthService
from assetverse.services.event_log import EventLogger
from assetverse.services.package_service import PackageService
from assetverse.services.workflow_service import WorkflowService


class ServiceContainer:
    """Builds one store and the services wired to it."""

    def __init__(self, store: DataStore | None = None, event_path: Path | None = None) -> None:
        self.store = store or DataStore()
        self.event_logger = EventLogger(event_path)

        self.users = UserStore(self.store)
        self.assets = AssetStore(self.store)
        self.requests = RequestLedger(self.store)
        self.assignments = AssignmentLedger(self.store)
        self.affiliations = AffiliationStore(self.store)
        self.packages = PackageStore(self.store)
        self.payments = PaymentStore(self.store)

        self.auth_service = AuthService(users=self.users, event_logger=self.event_logger)
        self.asset_service = AssetService(assets=self.assets, event_logger=self.event_logger)
        self.affiliation_service = AffiliationService(
            affiliations=self.affiliations,
            users=self.users,
            auth_service=self.auth_service,
        )
        self.package_service = PackageService(
            store=self.store,
            packages=self.packages,
            payments=self.payments,
            users=self.users,
            event_logger=self.event_logger,
        )
        self.workflow_service = WorkflowService(
            store=self.store,
            users=self.users,
            assets=self.assets,
            requests=self.requests,
            assignments=self.assignments,
            affiliations=self.affiliations,
            event_logger=self.event_logger,
        )


container = ServiceContainer()
