"""
One-time population of empty portfolio collections.

The profile is created only when none exists. Every other collection is
seeded all-or-nothing: the defaults go in only when the collection is
completely empty, and each collection is written in a single transaction.
"""

import logging

from django.conf import settings
from django.db import transaction

from . import defaults
from .storage import storage as default_storage

logger = logging.getLogger(__name__)


class SeedError(Exception):
    """A default record could not be written; the process should not start."""


def seed_profile(storage, profile=defaults.DEFAULT_PROFILE):
    if storage.get_profile() is not None:
        logger.debug("Profile already exists, not seeding")
        return 0
    try:
        with transaction.atomic():
            storage.create_profile(profile)
    except Exception as exc:
        raise SeedError("Failed to seed profile") from exc
    logger.info("Seeded default profile")
    return 1


def seed_collection(name, list_records, create_record, records):
    """Insert ``records`` in order if ``list_records()`` returns nothing."""
    if len(list_records()) != 0:
        logger.debug("Collection %s is not empty, not seeding", name)
        return 0
    try:
        with transaction.atomic():
            for record in records:
                create_record(record)
    except Exception as exc:
        raise SeedError(f"Failed to seed {name}") from exc
    logger.info("Seeded %d default %s records", len(records), name)
    return len(records)


def seed_defaults(storage=None):
    """
    Seed every empty collection with the canonical defaults.

    Returns a mapping of collection name to number of records written.
    Raises SeedError on the first failed write.
    """
    storage = storage or default_storage
    return {
        "profile": seed_profile(storage),
        "education": seed_collection(
            "education", storage.get_education, storage.create_education, defaults.DEFAULT_EDUCATION,
        ),
        "experiences": seed_collection(
            "experiences", storage.get_experiences, storage.create_experience, defaults.DEFAULT_EXPERIENCES,
        ),
        "projects": seed_collection(
            "projects", storage.get_projects, storage.create_project, defaults.DEFAULT_PROJECTS,
        ),
        "skills": seed_collection(
            "skills", storage.get_skills, storage.create_skill, defaults.DEFAULT_SKILLS,
        ),
    }


def seed_on_startup():
    if not settings.PORTFOLIO_SEED_ON_STARTUP:
        logger.info("Startup seeding disabled")
        return None
    return seed_defaults()
