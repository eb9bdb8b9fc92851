from assetverse.models.packages import PackageUpgradeRequest

from conftest import auth_headers, make_asset, make_hr, submit

HR = auth_headers("hr@acme.io", "hr")


def test_packages_are_seeded(client):
    response = client.get("/packages")

    assert response.status_code == 200
    assert [(p["name"], p["employeeLimit"]) for p in response.json()] == [
        ("basic", 5),
        ("standard", 10),
        ("premium", 20),
    ]


def test_upgrade_raises_capacity_and_records_payment(client, services):
    make_hr(services, package_limit=1, current_employees=1)

    response = client.patch(
        "/upgrade-package",
        json={"packageName": "standard", "employeeLimit": 10, "amount": 8},
        headers=HR,
    )

    assert response.status_code == 200
    assert response.json()["transactionId"].startswith("TXN-")
    user = services.users.get("hr@acme.io")
    assert user["package_limit"] == 10
    assert user["subscription"] == "standard"
    payments = client.get("/payments", headers=HR).json()
    assert [p["packageName"] for p in payments] == ["standard"]


def test_upgrade_unblocks_capacity_gate(services):
    hr = make_hr(services, package_limit=1, current_employees=1)
    asset = make_asset(services, hr)
    request = submit(services, asset)

    services.package_service.upgrade_package(
        hr, PackageUpgradeRequest(package_name="standard", employee_limit=10, amount=8)
    )
    services.workflow_service.transition(request.id, "approved", "hr@acme.io")

    assert services.users.get("hr@acme.io")["current_employees"] == 2


def test_limit_cannot_drop_below_current_employees(client, services):
    make_hr(services, package_limit=5, current_employees=3)

    response = client.patch(
        "/upgrade-package",
        json={"packageName": "tiny", "employeeLimit": 2, "amount": 1},
        headers=HR,
    )

    assert response.status_code == 400
    assert services.users.get("hr@acme.io")["package_limit"] == 5
    assert services.package_service.list_payments("hr@acme.io") == []
