"""
Router test fixtures.

Provides a TestClient over a fresh app plus a logged-in admin client.
Services are replaced through dependency_overrides in each test module.
"""

from datetime import datetime, date
from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from chaseplus_backend.configs import get_settings
from chaseplus_backend.main import create_app


@pytest.fixture
def client():
    app = create_app()
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def admin_client(client):
    auth = get_settings().auth
    response = client.post(
        "/api/v1/auth/login",
        json={"username": auth.username, "password": auth.password},
    )
    assert response.status_code == 200
    return client


@pytest.fixture
def course_data():
    now = datetime.now()
    return {
        "id": uuid4(),
        "title": "Full Stack Development",
        "description": "Build web apps",
        "category": "Development",
        "category_id": uuid4(),
        "image": "https://assets.test/course-images/abc.png",
        "duration": "12 weeks",
        "highlights": ["Live projects"],
        "what_youll_learn": ["React"],
        "career_opportunities": ["Web developer"],
        "why_choose_this_course": ["Mentors"],
        "price": 500.0,
        "offer_price": None,
        "is_active": True,
        "created_at": now,
        "updated_at": now,
    }


@pytest.fixture
def blog_data():
    now = datetime.now()
    return {
        "id": uuid4(),
        "title": "Why learn Python",
        "category": "Programming",
        "date": date(2024, 3, 1),
        "description": "Summary",
        "content": "Body",
        "image_url": "https://assets.test/blog-images/abc.jpg",
        "meta_title": "Why learn Python",
        "meta_description": "Summary",
        "author": "Team",
        "is_published": True,
        "views": 3,
        "created_at": now,
        "updated_at": now,
    }


@pytest.fixture
def category_data():
    now = datetime.now()
    return {
        "id": uuid4(),
        "name": "Development",
        "description": None,
        "is_active": True,
        "created_at": now,
        "updated_at": now,
    }
