from __future__ import annotations

import pytest
from django.core.management import call_command
from django.core.management.base import CommandError
from django.db import DatabaseError

from portfolio import defaults
from portfolio.models import Education, Experience, Profile, Project, Skill
from portfolio.seed import SeedError, seed_defaults, seed_on_startup
from portfolio.storage import DatabaseStorage, storage


def _snapshot() -> dict[str, list]:
    return {
        "profile": [storage.get_profile()],
        "education": list(storage.get_education()),
        "experiences": list(storage.get_experiences()),
        "projects": list(storage.get_projects()),
        "skills": list(storage.get_skills()),
    }


@pytest.mark.django_db
def test_seed_populates_every_empty_collection() -> None:
    written = seed_defaults()

    assert written == {
        "profile": 1,
        "education": len(defaults.DEFAULT_EDUCATION),
        "experiences": len(defaults.DEFAULT_EXPERIENCES),
        "projects": len(defaults.DEFAULT_PROJECTS),
        "skills": len(defaults.DEFAULT_SKILLS),
    }
    assert Profile.objects.count() == 1
    assert Skill.objects.count() == 16
    assert [p.title for p in Project.objects.all()] == [p["title"] for p in defaults.DEFAULT_PROJECTS]
    assert [e.company for e in Experience.objects.all()] == [
        "SAP Fioneer",
        "WeMeta",
        "Web Dev / Full Stack (Whitby)",
    ]


@pytest.mark.django_db
def test_seed_twice_matches_seed_once() -> None:
    seed_defaults()
    first = _snapshot()

    written = seed_defaults()

    assert set(written.values()) == {0}
    assert _snapshot() == first


@pytest.mark.django_db
def test_existing_profile_is_left_alone() -> None:
    Profile.objects.create(
        name="Someone Else",
        title="Custom title",
        bio="Custom bio",
        email="someone@example.com",
    )

    written = seed_defaults()

    assert written["profile"] == 0
    assert Profile.objects.count() == 1
    profile = Profile.objects.get()
    assert profile.name == "Someone Else"
    assert profile.title == "Custom title"


@pytest.mark.django_db
def test_non_empty_collection_is_not_topped_up() -> None:
    Skill.objects.create(name="Rust", category="core", proficiency=60)
    Education.objects.create(school="Somewhere", degree="BSc", field="Math", start_date="2010")

    written = seed_defaults()

    assert written["skills"] == 0
    assert written["education"] == 0
    assert list(Skill.objects.values_list("name", flat=True)) == ["Rust"]
    assert Education.objects.count() == 1
    # Unrelated empty collections are still seeded.
    assert written["projects"] == len(defaults.DEFAULT_PROJECTS)


class _FailingProjectStorage(DatabaseStorage):
    def __init__(self, fail_after: int) -> None:
        self.fail_after = fail_after
        self.created = 0

    def create_project(self, data):
        if self.created >= self.fail_after:
            raise DatabaseError("disk full")
        self.created += 1
        return super().create_project(data)


@pytest.mark.django_db
def test_failed_write_is_fatal_and_leaves_collection_empty() -> None:
    with pytest.raises(SeedError) as excinfo:
        seed_defaults(_FailingProjectStorage(fail_after=2))

    assert isinstance(excinfo.value.__cause__, DatabaseError)
    assert Project.objects.count() == 0
    # Collections seeded before the failure keep their rows.
    assert Profile.objects.count() == 1
    assert Skill.objects.count() == 0


@pytest.mark.django_db
def test_seed_on_startup_can_be_disabled(settings) -> None:
    settings.PORTFOLIO_SEED_ON_STARTUP = False

    assert seed_on_startup() is None
    assert Profile.objects.count() == 0


@pytest.mark.django_db
def test_seed_on_startup_seeds_when_enabled(settings) -> None:
    settings.PORTFOLIO_SEED_ON_STARTUP = True

    written = seed_on_startup()

    assert written["profile"] == 1
    assert Project.objects.count() == len(defaults.DEFAULT_PROJECTS)


@pytest.mark.django_db
def test_seed_portfolio_command_reports_each_collection(capsys) -> None:
    call_command("seed_portfolio")
    first = capsys.readouterr().out
    assert "Seeded 4 projects" in first
    assert "Seeded 16 skills" in first

    call_command("seed_portfolio")
    second = capsys.readouterr().out
    assert "Skipped projects (already populated)" in second


@pytest.mark.django_db
def test_seed_portfolio_command_fails_on_seed_error(monkeypatch) -> None:
    def _broken(*args, **kwargs):
        raise SeedError("Failed to seed skills")

    monkeypatch.setattr("portfolio.management.commands.seed_portfolio.seed_defaults", _broken)

    with pytest.raises(CommandError, match="Failed to seed skills"):
        call_command("seed_portfolio")
