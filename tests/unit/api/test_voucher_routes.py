"""
API tests for /api/v1/vouchers.
"""

from uuid import uuid4

import pytest

from voucher_order.core.domain import NoRowsUpdatedException

BASE = "/api/v1/vouchers"


@pytest.mark.unit
@pytest.mark.api
def test_create_voucher(api_client, mock_voucher_repository):
    response = api_client.post(BASE, json={"voucher_type": "PERCENT", "discount_value": 15})

    assert response.status_code == 201
    body = response.json()
    assert body["voucher_type"] == "PERCENT"
    assert body["discount_value"] == 15
    assert body["customer_id"] is None
    mock_voucher_repository.save.assert_awaited_once()


@pytest.mark.unit
@pytest.mark.api
def test_create_percent_voucher_over_100(api_client, mock_voucher_repository):
    response = api_client.post(BASE, json={"voucher_type": "PERCENT", "discount_value": 101})

    assert response.status_code == 422
    assert response.json()["code"] == "VALIDATION_ERROR"
    mock_voucher_repository.save.assert_not_awaited()


@pytest.mark.unit
@pytest.mark.api
def test_create_voucher_for_unknown_customer(api_client, mock_voucher_repository, mock_customer_repository):
    customer_id = uuid4()

    response = api_client.post(
        BASE, json={"voucher_type": "FIXED_AMOUNT", "discount_value": 1000, "customer_id": str(customer_id)}
    )

    assert response.status_code == 404
    assert response.json()["code"] == "ENTITY_NOT_FOUND"
    mock_customer_repository.find_by_id.assert_awaited_once_with(customer_id)
    mock_voucher_repository.save.assert_not_awaited()


@pytest.mark.unit
@pytest.mark.api
def test_create_voucher_for_existing_customer(api_client, mock_customer_repository, sample_customer):
    mock_customer_repository.find_by_id.return_value = sample_customer

    response = api_client.post(
        BASE, json={"voucher_type": "PERCENT", "discount_value": 10, "customer_id": str(sample_customer.id)}
    )

    assert response.status_code == 201
    assert response.json()["customer_id"] == str(sample_customer.id)


@pytest.mark.unit
@pytest.mark.api
def test_create_voucher_unknown_type(api_client):
    response = api_client.post(BASE, json={"voucher_type": "BOGUS", "discount_value": 10})

    assert response.status_code == 422


@pytest.mark.unit
@pytest.mark.api
def test_list_vouchers_by_type_and_date(api_client, mock_voucher_repository, percent_voucher):
    mock_voucher_repository.find_by_voucher_type_and_date.return_value = [percent_voucher]

    response = api_client.get(BASE, params={"type": "PERCENT", "date": "2024-05-17"})

    assert response.status_code == 200
    assert len(response.json()) == 1
    voucher_type, created_on = mock_voucher_repository.find_by_voucher_type_and_date.call_args.args
    assert voucher_type.value == "PERCENT"
    assert created_on.isoformat() == "2024-05-17"


@pytest.mark.unit
@pytest.mark.api
def test_list_vouchers_type_without_date(api_client):
    response = api_client.get(BASE, params={"type": "PERCENT"})

    assert response.status_code == 422


@pytest.mark.unit
@pytest.mark.api
def test_list_all_vouchers(api_client, mock_voucher_repository, fixed_voucher, percent_voucher):
    mock_voucher_repository.find_all.return_value = [fixed_voucher, percent_voucher]

    response = api_client.get(BASE)

    assert response.status_code == 200
    assert [v["voucher_type"] for v in response.json()] == ["FIXED_AMOUNT", "PERCENT"]


@pytest.mark.unit
@pytest.mark.api
def test_get_voucher(api_client, mock_voucher_repository, fixed_voucher):
    mock_voucher_repository.find_by_id.return_value = fixed_voucher

    response = api_client.get(f"{BASE}/{fixed_voucher.id}")

    assert response.status_code == 200
    assert response.json()["id"] == str(fixed_voucher.id)


@pytest.mark.unit
@pytest.mark.api
def test_update_voucher_changes_variant(api_client, mock_voucher_repository, fixed_voucher):
    mock_voucher_repository.find_by_id.return_value = fixed_voucher

    response = api_client.put(f"{BASE}/{fixed_voucher.id}", json={"voucher_type": "PERCENT", "discount_value": 20})

    assert response.status_code == 200
    assert response.json()["voucher_type"] == "PERCENT"
    assert response.json()["id"] == str(fixed_voucher.id)


@pytest.mark.unit
@pytest.mark.api
def test_update_voucher_lost_between_read_and_write(api_client, mock_voucher_repository, fixed_voucher):
    mock_voucher_repository.find_by_id.return_value = fixed_voucher
    mock_voucher_repository.update_by_id.side_effect = NoRowsUpdatedException("vouchers", fixed_voucher.id)

    response = api_client.put(f"{BASE}/{fixed_voucher.id}", json={"voucher_type": "PERCENT", "discount_value": 20})

    assert response.status_code == 404
    assert response.json()["message"] == "No rows were updated."


@pytest.mark.unit
@pytest.mark.api
def test_assign_voucher(api_client, mock_voucher_repository, mock_customer_repository, fixed_voucher, sample_customer):
    mock_voucher_repository.find_by_id.return_value = fixed_voucher
    mock_customer_repository.find_by_id.return_value = sample_customer

    response = api_client.patch(f"{BASE}/{fixed_voucher.id}/customer", json={"customer_id": str(sample_customer.id)})

    assert response.status_code == 200
    assert response.json()["customer_id"] == str(sample_customer.id)
    mock_voucher_repository.update_customer_id.assert_awaited_once_with(fixed_voucher.id, sample_customer.id)


@pytest.mark.unit
@pytest.mark.api
def test_assign_voucher_to_unknown_customer(api_client, mock_voucher_repository, fixed_voucher):
    mock_voucher_repository.find_by_id.return_value = fixed_voucher

    response = api_client.patch(f"{BASE}/{fixed_voucher.id}/customer", json={"customer_id": str(uuid4())})

    assert response.status_code == 404
    mock_voucher_repository.update_customer_id.assert_not_awaited()


@pytest.mark.unit
@pytest.mark.api
def test_voucher_owner(api_client, mock_customer_repository, sample_customer):
    mock_customer_repository.find_by_voucher_id.return_value = sample_customer

    response = api_client.get(f"{BASE}/{uuid4()}/owner")

    assert response.status_code == 200
    assert response.json()["email"] == "park@example.com"


@pytest.mark.unit
@pytest.mark.api
def test_voucher_without_owner(api_client, mock_customer_repository):
    mock_customer_repository.find_by_voucher_id.return_value = None

    response = api_client.get(f"{BASE}/{uuid4()}/owner")

    assert response.status_code == 404


@pytest.mark.unit
@pytest.mark.api
def test_delete_voucher(api_client):
    response = api_client.delete(f"{BASE}/{uuid4()}")

    assert response.status_code == 204
