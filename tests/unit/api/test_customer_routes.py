"""
API tests for /api/v1/customers.

Use cases are real; repositories are AsyncMocks injected through the container.
"""

from uuid import uuid4

import pytest

from voucher_order.domains.customer.domain import CustomerType

BASE = "/api/v1/customers"


@pytest.mark.unit
@pytest.mark.api
def test_create_customer(api_client, mock_customer_repository):
    # Act
    response = api_client.post(BASE, json={"name": "park", "email": "park@example.com"})

    # Assert
    assert response.status_code == 201
    body = response.json()
    assert body["name"] == "park"
    assert body["customer_type"] == "NORMAL"
    mock_customer_repository.save.assert_awaited_once()


@pytest.mark.unit
@pytest.mark.api
def test_create_customer_duplicate_email(api_client, mock_customer_repository, sample_customer):
    mock_customer_repository.find_by_email.return_value = sample_customer

    response = api_client.post(BASE, json={"name": "lee", "email": "park@example.com"})

    assert response.status_code == 409
    assert response.json()["code"] == "DUPLICATE_ENTITY"
    mock_customer_repository.save.assert_not_awaited()


@pytest.mark.unit
@pytest.mark.api
def test_create_customer_reports_each_invalid_field(api_client):
    response = api_client.post(BASE, json={"name": "   ", "email": ""})

    assert response.status_code == 422
    details = {detail["field"]: detail["message"] for detail in response.json()["details"]}
    assert "Name must not be blank" in details["body.name"]
    assert "Email is required" in details["body.email"]


@pytest.mark.unit
@pytest.mark.api
def test_list_customers_by_name(api_client, mock_customer_repository, sample_customer):
    mock_customer_repository.find_by_name.return_value = [sample_customer]

    response = api_client.get(BASE, params={"name": "park"})

    assert response.status_code == 200
    assert [c["email"] for c in response.json()] == ["park@example.com"]
    mock_customer_repository.find_by_name.assert_awaited_once_with("park")


@pytest.mark.unit
@pytest.mark.api
def test_blacklist_route_is_not_captured_by_id(
    api_client, mock_customer_repository, sample_customer, blacklisted_customer
):
    mock_customer_repository.find_all.return_value = [sample_customer, blacklisted_customer]

    response = api_client.get(f"{BASE}/blacklist")

    assert response.status_code == 200
    assert [c["name"] for c in response.json()] == ["kim"]


@pytest.mark.unit
@pytest.mark.api
def test_get_customer_not_found(api_client):
    response = api_client.get(f"{BASE}/{uuid4()}")

    assert response.status_code == 404
    assert response.json()["code"] == "ENTITY_NOT_FOUND"


@pytest.mark.unit
@pytest.mark.api
def test_get_customer_invalid_uuid(api_client):
    response = api_client.get(f"{BASE}/not-a-uuid")

    assert response.status_code == 422


@pytest.mark.unit
@pytest.mark.api
def test_update_customer(api_client, mock_customer_repository, sample_customer):
    # Arrange
    mock_customer_repository.find_by_id.return_value = sample_customer

    # Act
    response = api_client.put(
        f"{BASE}/{sample_customer.id}",
        json={"customer_type": "BLACKLIST", "name": "parker", "email": "parker@example.com"},
    )

    # Assert
    assert response.status_code == 200
    body = response.json()
    assert body["name"] == "parker"
    assert body["customer_type"] == CustomerType.BLACKLIST.value
    mock_customer_repository.update_by_id.assert_awaited_once()


@pytest.mark.unit
@pytest.mark.api
def test_update_customer_requires_type(api_client, sample_customer):
    response = api_client.put(f"{BASE}/{sample_customer.id}", json={"name": "park", "email": "park@example.com"})

    assert response.status_code == 422
    assert response.json()["details"][0]["field"] == "body.customer_type"


@pytest.mark.unit
@pytest.mark.api
def test_update_customer_name_too_long(api_client, sample_customer):
    response = api_client.put(
        f"{BASE}/{sample_customer.id}",
        json={"customer_type": "NORMAL", "name": "abcdefghijk", "email": "park@example.com"},
    )

    assert response.status_code == 422
    assert "at most 10 characters" in response.json()["details"][0]["message"]


@pytest.mark.unit
@pytest.mark.api
def test_delete_customer(api_client, mock_customer_repository):
    response = api_client.delete(f"{BASE}/{uuid4()}")

    assert response.status_code == 204


@pytest.mark.unit
@pytest.mark.api
def test_delete_missing_customer(api_client, mock_customer_repository):
    mock_customer_repository.delete_by_id.return_value = 0

    response = api_client.delete(f"{BASE}/{uuid4()}")

    assert response.status_code == 404


@pytest.mark.unit
@pytest.mark.api
def test_customer_vouchers(api_client, mock_voucher_repository, percent_voucher, sample_customer):
    percent_voucher.customer_id = sample_customer.id
    mock_voucher_repository.find_by_customer_id.return_value = [percent_voucher]

    response = api_client.get(f"{BASE}/{sample_customer.id}/vouchers")

    assert response.status_code == 200
    assert response.json()[0]["customer_id"] == str(sample_customer.id)


@pytest.mark.unit
@pytest.mark.api
def test_revoke_customer_vouchers(api_client, mock_voucher_repository):
    mock_voucher_repository.delete_by_customer_id.return_value = 3

    response = api_client.delete(f"{BASE}/{uuid4()}/vouchers")

    assert response.status_code == 200
    assert response.json() == {"deleted": 3}


@pytest.mark.unit
@pytest.mark.api
def test_record_login(api_client, mock_customer_repository):
    customer_id = uuid4()
    mock_customer_repository.update_last_login.return_value = 1

    response = api_client.post(f"{BASE}/{customer_id}/login")

    assert response.status_code == 204
    mock_customer_repository.update_last_login.assert_awaited_once_with(customer_id)


@pytest.mark.unit
@pytest.mark.api
def test_record_login_unknown_customer(api_client, mock_customer_repository):
    mock_customer_repository.update_last_login.return_value = 0

    response = api_client.post(f"{BASE}/{uuid4()}/login")

    assert response.status_code == 404


@pytest.mark.unit
@pytest.mark.api
def test_create_customer_with_non_ascii_email(api_client, mock_customer_repository):
    response = api_client.post(BASE, json={"name": "jose", "email": "josé@example.com"})

    assert response.status_code == 201
    assert response.json()["email"] == "josé@example.com"
    mock_customer_repository.save.assert_awaited_once()
