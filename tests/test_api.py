from __future__ import annotations

import pytest
from django.db import DatabaseError

from portfolio import defaults
from portfolio.models import ContactMessage, Profile, Project
from portfolio.storage import storage

pytestmark = pytest.mark.django_db


def test_profile_is_empty_object_when_nothing_stored(api_client) -> None:
    response = api_client.get("/api/profile/")

    assert response.status_code == 200
    assert response.json() == {}


def test_profile_returns_stored_record_in_api_shape(api_client, seeded) -> None:
    data = api_client.get("/api/profile/").json()

    assert data["name"] == defaults.DEFAULT_PROFILE["name"]
    assert data["githubUrl"] == defaults.GITHUB_URL
    assert data["imageUrl"] is None
    assert "id" in data


@pytest.mark.parametrize("path", ["/api/experiences/", "/api/education/", "/api/projects/", "/api/skills/"])
def test_lists_are_empty_arrays_when_nothing_stored(api_client, path: str) -> None:
    response = api_client.get(path)

    assert response.status_code == 200
    assert response.json() == []


def test_lists_return_raw_records_in_insertion_order(api_client, seeded) -> None:
    projects = api_client.get("/api/projects/").json()
    skills = api_client.get("/api/skills/").json()
    experiences = api_client.get("/api/experiences/").json()
    education = api_client.get("/api/education/").json()

    assert [p["title"] for p in projects] == [p["title"] for p in defaults.DEFAULT_PROJECTS]
    # Raw collection only: no case-study enrichment on this route.
    assert "problem" not in projects[0]
    assert projects[0]["tags"] == ["React", "Prisma", "Balance Algorithm", "Clean Architecture"]
    assert skills[0] == {"id": skills[0]["id"], "name": "Java (Spring Boot)", "category": "core", "proficiency": 95}
    assert experiences[1]["company"] == "WeMeta"
    assert experiences[1]["startDate"] == "Jul 2021"
    assert education == [
        {
            "id": education[0]["id"],
            "school": "University of Toronto",
            "degree": "Bachelor of Computer Science",
            "field": "Computer Science",
            "startDate": "2019",
            "endDate": "2023",
        }
    ]


def test_read_routes_do_not_accept_writes(api_client) -> None:
    response = api_client.post("/api/projects/", {"title": "x"}, format="json")

    assert response.status_code == 405
    assert Project.objects.count() == 0


def test_contact_submit_stores_one_message(api_client) -> None:
    response = api_client.post(
        "/api/contact/",
        {"name": "A", "email": "a@b.com", "message": "hi"},
        format="json",
    )

    assert response.status_code == 200
    assert response.json() == {"success": True}
    assert ContactMessage.objects.count() == 1
    message = ContactMessage.objects.get()
    assert (message.name, message.email, message.message) == ("A", "a@b.com", "hi")


@pytest.mark.parametrize(
    "payload",
    [
        {"name": "", "email": "a@b.com", "message": "hi"},
        {"name": "A", "email": "not-an-email", "message": "hi"},
        {"name": "A", "email": "a@b.com", "message": ""},
        {"name": "A", "email": "a@b.com"},
        {},
    ],
)
def test_contact_submit_rejects_invalid_input_without_writing(api_client, payload: dict) -> None:
    response = api_client.post("/api/contact/", payload, format="json")

    assert response.status_code == 400
    assert response.json() == {"message": "Invalid input"}
    assert ContactMessage.objects.count() == 0


def test_contact_submit_accepts_long_name(api_client) -> None:
    response = api_client.post(
        "/api/contact/",
        {"name": "A" * 201, "email": "a@b.com", "message": "hi"},
        format="json",
    )

    assert response.status_code == 200
    assert response.json() == {"success": True}
    assert ContactMessage.objects.get().name == "A" * 201


def test_contact_submit_non_json_body_is_invalid_input(api_client) -> None:
    response = api_client.post(
        "/api/contact/",
        "name=&email=a%40b.com&message=hi",
        content_type="application/x-www-form-urlencoded",
    )

    assert response.status_code == 400
    assert response.json() == {"message": "Invalid input"}
    assert ContactMessage.objects.count() == 0


def test_contact_submit_rejects_malformed_json(api_client) -> None:
    response = api_client.post("/api/contact/", "{not json", content_type="application/json")

    assert response.status_code == 400
    assert response.json() == {"message": "Invalid input"}


def test_contact_submit_store_failure_is_internal_error(api_client, monkeypatch) -> None:
    def _fail(data):
        raise DatabaseError("database is locked")

    monkeypatch.setattr(storage, "create_contact_message", _fail)

    response = api_client.post(
        "/api/contact/",
        {"name": "A", "email": "a@b.com", "message": "hi"},
        format="json",
    )

    assert response.status_code == 500
    assert response.json() == {"message": "Internal server error"}
    assert ContactMessage.objects.count() == 0


def test_read_store_failure_is_internal_error(api_client, monkeypatch) -> None:
    def _fail():
        raise DatabaseError("no such table")

    monkeypatch.setattr(storage, "get_profile", _fail)

    response = api_client.get("/api/profile/")

    assert response.status_code == 500
    assert response.json() == {"message": "Internal server error"}


def test_portfolio_content_falls_back_when_nothing_stored(api_client) -> None:
    data = api_client.get("/api/portfolio/").json()

    assert data["profile"]["title"] == defaults.DEFAULT_PROFILE["title"]
    assert [p["title"] for p in data["caseStudies"]] == ["Pickleball Session Manager", "Market Data Pipeline"]
    assert [p["title"] for p in data["otherProjects"]] == ["Mind Map Website", "HomeServer Setup"]
    assert data["skillBands"] == [dict(band) for band in defaults.FALLBACK_SKILL_BANDS]
    assert [e["company"] for e in data["experiences"]] == [e["company"] for e in defaults.DEFAULT_EXPERIENCES]
    assert data["education"] == []


def test_portfolio_content_resolves_stored_records(api_client, seeded) -> None:
    Project.objects.create(title="Side Project", description="Small.", link="https://side.example.com")

    data = api_client.get("/api/portfolio/").json()

    assert [p["title"] for p in data["otherProjects"]] == ["Mind Map Website", "HomeServer Setup", "Side Project"]
    side = data["otherProjects"][-1]
    assert side["githubLink"] == defaults.GITHUB_URL
    assert side["demoUrl"] == "https://side.example.com"
    assert data["skillBands"] == [
        {"title": "Core", "level": "strong", "items": ["Java (Spring Boot)", "TypeScript / JavaScript", "React", "SQL"]},
        {
            "title": "Also",
            "level": "strong",
            "items": ["Node.js", "Python", "Docker", "Postgres", "Prisma", "REST APIs", "Testing (JUnit/Jest)", "CI/CD"],
        },
        {
            "title": "Practices",
            "level": "strong",
            "items": ["Clean architecture", "API design", "Schema migrations", "Observability basics"],
        },
    ]
    assert data["experiences"][0]["bullets"][0].startswith("Built and hardened Spring Boot services")
    assert data["education"][0]["period"] == "2019 - 2023"


def test_portfolio_content_forces_default_title_and_bio(api_client, seeded) -> None:
    Profile.objects.update(title="Changed", bio="Changed bio", name="Renamed")

    profile = api_client.get("/api/portfolio/").json()["profile"]

    assert profile["title"] == defaults.DEFAULT_PROFILE["title"]
    assert profile["bio"] == defaults.DEFAULT_PROFILE["bio"]
    assert profile["name"] == "Renamed"
