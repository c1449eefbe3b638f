"""
Turns stored portfolio records into the content the site renders.

Everything here is a pure function of its inputs: the stored records (in
API shape, possibly empty) and a ContentTables value holding the static
defaults. Nothing is read from or written to the database.
"""

import copy
import enum
from dataclasses import dataclass, field
from types import MappingProxyType

from . import defaults
from .models import SkillCategory


@dataclass(frozen=True)
class ContentTables:
    default_profile: MappingProxyType
    project_details: MappingProxyType
    fallback_projects: tuple
    fallback_experiences: tuple
    fallback_skill_bands: tuple

    @classmethod
    def from_defaults(cls):
        return cls(
            default_profile=defaults.DEFAULT_PROFILE,
            project_details=defaults.PROJECT_DETAILS,
            fallback_projects=defaults.FALLBACK_PROJECTS,
            fallback_experiences=defaults.FALLBACK_EXPERIENCES,
            fallback_skill_bands=defaults.FALLBACK_SKILL_BANDS,
        )


@dataclass
class PortfolioContent:
    profile: dict
    case_studies: list = field(default_factory=list)
    other_projects: list = field(default_factory=list)
    skill_bands: list = field(default_factory=list)
    experiences: list = field(default_factory=list)
    education: list = field(default_factory=list)

    def to_dict(self):
        return {
            "profile": self.profile,
            "caseStudies": self.case_studies,
            "otherProjects": self.other_projects,
            "skillBands": self.skill_bands,
            "experiences": self.experiences,
            "education": self.education,
        }


class SkillLevel(enum.IntEnum):
    FAMILIAR = 1
    WORKING = 2
    STRONG = 3

    @property
    def label(self):
        return self.name.lower()


STRONG_THRESHOLD = 85
WORKING_THRESHOLD = 70

# Fields copied from the project details table onto a project that lacks them.
CASE_STUDY_FIELDS = ("problem", "buildSummary", "decisions", "results")


def _first_present(*values):
    for value in values:
        if value:
            return value
    return None


def _plain(value):
    """Deep-copy a static table value into plain dicts and lists."""
    if isinstance(value, (dict, MappingProxyType)):
        return {key: _plain(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(item) for item in value]
    return copy.copy(value)


def merge_profile(defaults_profile, persisted):
    """
    Build the displayed profile.

    Precedence, lowest to highest:
      1. the default profile
      2. the persisted profile (wins on every field it has)
      3. title and bio from the default profile, always
    """
    merged = _plain(defaults_profile)
    merged.update(_plain(persisted or {}))
    merged["title"] = defaults_profile["title"]
    merged["bio"] = defaults_profile["bio"]
    return merged


def enrich_project(project, details, github_url):
    """
    Attach case-study fields from ``details`` (may be None) to a project.

    Link fallbacks, leftmost non-empty wins:
      githubLink:   project, details, profile githubUrl
      demoUrl:      details, project, project link
      caseStudyUrl: details, project, project link
    """
    details = details or {}
    enriched = _plain(project)
    for name in CASE_STUDY_FIELDS:
        if not enriched.get(name) and details.get(name):
            enriched[name] = _plain(details[name])
    enriched["githubLink"] = _first_present(
        project.get("githubLink"), details.get("githubLink"), github_url,
    )
    enriched["demoUrl"] = _first_present(
        details.get("demoUrl"), project.get("demoUrl"), project.get("link"),
    )
    enriched["caseStudyUrl"] = _first_present(
        details.get("caseStudyUrl"), project.get("caseStudyUrl"), project.get("link"),
    )
    return enriched


def partition_projects(projects, project_details):
    """Split into (case studies, other projects), keeping relative order."""
    case_studies = []
    others = []
    for project in projects:
        if project.get("title") in project_details:
            case_studies.append(project)
        else:
            others.append(project)
    return case_studies, others


def level_from_proficiency(proficiency):
    if proficiency is None:
        return SkillLevel.WORKING
    if proficiency >= STRONG_THRESHOLD:
        return SkillLevel.STRONG
    if proficiency >= WORKING_THRESHOLD:
        return SkillLevel.WORKING
    return SkillLevel.FAMILIAR


def skill_category(raw):
    """Map a stored category to its band, or None when it has no band."""
    try:
        return SkillCategory(raw or SkillCategory.ALSO)
    except ValueError:
        return None


def build_skill_bands(skills):
    members = {category: [] for category in SkillCategory}
    levels = {}
    for skill in skills:
        category = skill_category(skill.get("category"))
        if category is None:
            continue
        level = level_from_proficiency(skill.get("proficiency"))
        levels[category] = max(levels.get(category, level), level)
        members[category].append(skill["name"])

    return [
        {"title": category.label, "level": levels[category].label, "items": items}
        for category, items in members.items()
        if items
    ]


def resolve_skill_bands(skills, fallback_bands):
    if not skills:
        return _plain(fallback_bands)
    return build_skill_bands(skills)


def description_bullets(description):
    return [line.strip() for line in (description or "").split("\n") if line.strip()]


def date_range(start_date, end_date):
    return f"{start_date} - {end_date or 'Present'}"


def resolve_experiences(experiences, fallback_experiences):
    source = experiences if experiences else fallback_experiences
    resolved = []
    for experience in source:
        item = _plain(experience)
        item["bullets"] = description_bullets(item.get("description"))
        item["period"] = date_range(item.get("startDate"), item.get("endDate"))
        resolved.append(item)
    return resolved


def resolve_education(education):
    resolved = []
    for entry in education or []:
        item = _plain(entry)
        item["period"] = date_range(item.get("startDate"), item.get("endDate"))
        resolved.append(item)
    return resolved


def resolve_projects(projects, tables, github_url):
    source = projects if projects else tables.fallback_projects
    enriched = [
        enrich_project(project, tables.project_details.get(project.get("title")), github_url)
        for project in source
    ]
    return partition_projects(enriched, tables.project_details)


def resolve_content(profile=None, projects=None, experiences=None, skills=None, education=None, tables=None):
    """Resolve stored records into the full PortfolioContent."""
    tables = tables or ContentTables.from_defaults()
    resolved_profile = merge_profile(tables.default_profile, profile)
    case_studies, other_projects = resolve_projects(projects, tables, resolved_profile.get("githubUrl"))
    return PortfolioContent(
        profile=resolved_profile,
        case_studies=case_studies,
        other_projects=other_projects,
        skill_bands=resolve_skill_bands(skills, tables.fallback_skill_bands),
        experiences=resolve_experiences(experiences, tables.fallback_experiences),
        education=resolve_education(education),
    )
