"""Tests for public and admin category routes."""

from uuid import uuid4

from chaseplus_backend.api.deps.dependencies import get_category_service
from chaseplus_backend.core.exceptions import CategoryInUseError, DuplicateCategoryError


def test_public_listing_is_active_only(client, mock_category_service, category_data):
    mock_category_service.list_categories.return_value = [category_data]
    client.app.dependency_overrides[get_category_service] = lambda: mock_category_service

    response = client.get("/api/v1/categories")

    assert response.status_code == 200
    assert response.json()[0]["name"] == "Development"
    mock_category_service.list_categories.assert_awaited_once_with(active_only=True)


def test_create_category(admin_client, mock_category_service, category_data):
    mock_category_service.create_category.return_value = category_data
    admin_client.app.dependency_overrides[get_category_service] = lambda: mock_category_service

    response = admin_client.post("/api/v1/admin/categories", json={"name": "Development"})

    assert response.status_code == 201
    mock_category_service.create_category.assert_awaited_once_with(
        name="Development", description=None
    )


def test_duplicate_category_is_409(admin_client, mock_category_service):
    mock_category_service.create_category.side_effect = DuplicateCategoryError("Development")
    admin_client.app.dependency_overrides[get_category_service] = lambda: mock_category_service

    response = admin_client.post("/api/v1/admin/categories", json={"name": "Development"})

    assert response.status_code == 409


def test_delete_category_in_use_is_409(admin_client, mock_category_service):
    mock_category_service.delete_category.side_effect = CategoryInUseError("Development", 2)
    admin_client.app.dependency_overrides[get_category_service] = lambda: mock_category_service

    response = admin_client.delete(f"/api/v1/admin/categories/{uuid4()}")

    assert response.status_code == 409
    assert "2 course(s)" in response.json()["detail"]


def test_unexpected_error_is_500(admin_client, mock_category_service):
    mock_category_service.list_categories.side_effect = RuntimeError("boom")
    admin_client.app.dependency_overrides[get_category_service] = lambda: mock_category_service

    response = admin_client.get("/api/v1/admin/categories")

    assert response.status_code == 500
    assert "boom" not in response.json()["detail"]
