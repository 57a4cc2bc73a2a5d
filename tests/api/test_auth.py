"""Tests for the admin session gate."""

from chaseplus_backend.api.deps.dependencies import (
    get_blog_service,
    get_category_service,
    get_course_service,
)


def test_login_with_wrong_password(client):
    response = client.post(
        "/api/v1/auth/login", json={"username": "admin", "password": "wrong"}
    )

    assert response.status_code == 401
    assert client.get("/api/v1/auth/me").status_code == 401


def test_login_then_me(admin_client):
    response = admin_client.get("/api/v1/auth/me")

    assert response.status_code == 200
    assert response.json()["authenticated"] is True


def test_logout_ends_session(admin_client):
    assert admin_client.post("/api/v1/auth/logout").status_code == 200

    assert admin_client.get("/api/v1/auth/me").status_code == 401


def test_admin_routes_reject_anonymous_before_services(
    client, mock_course_service, mock_blog_service, mock_category_service
):
    client.app.dependency_overrides[get_course_service] = lambda: mock_course_service
    client.app.dependency_overrides[get_blog_service] = lambda: mock_blog_service
    client.app.dependency_overrides[get_category_service] = lambda: mock_category_service

    responses = [
        client.get("/api/v1/admin/courses"),
        client.post("/api/v1/admin/courses", data={"title": "x"}),
        client.delete("/api/v1/admin/courses/00000000-0000-0000-0000-000000000001"),
        client.patch("/api/v1/admin/blogs/00000000-0000-0000-0000-000000000001/toggle-status"),
        client.post("/api/v1/admin/categories", json={"name": "Design"}),
    ]

    assert [r.status_code for r in responses] == [401] * len(responses)
    assert mock_course_service.mock_calls == []
    assert mock_blog_service.mock_calls == []
    assert mock_category_service.mock_calls == []
