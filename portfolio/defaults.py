"""Canonical portfolio content.

Used twice: the seed writes these records into empty collections, and the
content resolver falls back to them when a collection has nothing stored.
Records use the API (camelCase) field names.
"""

from types import MappingProxyType

GITHUB_URL = "https://github.com/ZthEchelon"

DEFAULT_PROFILE = MappingProxyType({
    "name": "Zubair Muwwakil",
    "title": "Software Engineer (Full-Stack / Backend)",
    "bio": (
        "I build full-stack systems, data pipelines, and dashboards that stay correct under load. "
        "Clean architecture, schema-first APIs, and reliable releases are my defaults."
    ),
    "email": "zmuwwakil@gmail.com",
    "linkedinUrl": "https://www.linkedin.com/in/zubairmuwwakil/",
    "githubUrl": GITHUB_URL,
    "resumeUrl": "https://drive.google.com/file/d/1Z87uMI6RrrPa9KeIhZChkpzl-YYZYgTr/view?usp=sharing",
    "imageUrl": None,
})

DEFAULT_EDUCATION = (
    {
        "school": "University of Toronto",
        "degree": "Bachelor of Computer Science",
        "field": "Computer Science",
        "startDate": "2019",
        "endDate": "2023",
    },
)

DEFAULT_EXPERIENCES = (
    {
        "company": "SAP Fioneer",
        "role": "Software Engineer",
        "startDate": "Jan 2022",
        "endDate": "Aug 2022",
        "description": "\n".join([
            "Built and hardened Spring Boot services for banking workflows, pairing REST APIs with integration tests and strict validation to keep releases stable.",
            "Added SQL audit logging and data-quality checks so reconciliation events and ledger updates stayed consistent through migrations.",
            "Containerized services with Docker and tightened observability (structured logs + metrics) to speed up debugging and on-call response.",
        ]),
    },
    {
        "company": "WeMeta",
        "role": "Software Engineer",
        "startDate": "Jul 2021",
        "endDate": "Feb 2023",
        "description": "\n".join([
            "Delivered full-stack features for marketplace dashboards (React + TypeScript frontend, Node/SQL services) that served thousands of listings daily.",
            "Designed typed REST endpoints and caching around high-traffic search/analytics paths to keep p95 response times predictable.",
            "Shipped background jobs to ingest and normalize external data feeds, improving freshness and reducing manual data cleanup.",
        ]),
    },
    {
        "company": "Web Dev / Full Stack (Whitby)",
        "role": "Software Engineer",
        "startDate": "Dec 2019",
        "endDate": "Mar 2023",
        "description": "\n".join([
            "Built and deployed client portals and marketing sites with React/Node/Postgres, moving scheduling and intake off spreadsheets.",
            "Implemented forms, email notifications, and light analytics so teams could track leads and follow-ups without extra tooling.",
            "Set up CI/CD pipelines and Dockerized services to cut release friction and keep environments reproducible.",
        ]),
    },
)

DEFAULT_PROJECTS = (
    {
        "title": "Pickleball Session Manager",
        "description": "Full-stack app for managing sessions, balanced groups, matches, and transparent rating changes.",
        "link": "https://pickleball.zubairmuwwakil.com",
        "githubLink": GITHUB_URL,
        "tags": ["React", "Prisma", "Balance Algorithm", "Clean Architecture"],
    },
    {
        "title": "Market Data Pipeline",
        "description": "Spring Boot market data pipeline with cached analytics endpoints and a dashboard.",
        "link": "https://www.zubairmuwwakil.com/github-projects-certifications#h.7fnkak3j8h5",
        "githubLink": GITHUB_URL,
        "tags": ["Java", "Spring Boot", "Data Pipeline", "REST API"],
    },
    {
        "title": "Mind Map Website",
        "description": "Interactive mind map tool for plotting ideas, project steps, and timelines.",
        "link": "https://mindsky.zubairmuwwakil.com",
        "githubLink": GITHUB_URL,
        "tags": ["JavaScript", "Interactive", "Mind Mapping"],
    },
    {
        "title": "HomeServer Setup",
        "description": "Created a custom homeserver infrastructure to function similarly to Google Drive for personal data management.",
        "link": "https://www.zubairmuwwakil.com/homeserver-setup-guide",
        "githubLink": GITHUB_URL,
        "tags": ["Infrastructure", "Server Setup", "Data Management"],
    },
)

DEFAULT_SKILLS = (
    # Core
    {"name": "Java (Spring Boot)", "category": "core", "proficiency": 95},
    {"name": "TypeScript / JavaScript", "category": "core", "proficiency": 90},
    {"name": "React", "category": "core", "proficiency": 90},
    {"name": "SQL", "category": "core", "proficiency": 90},
    # Also
    {"name": "Node.js", "category": "also", "proficiency": 85},
    {"name": "Python", "category": "also", "proficiency": 80},
    {"name": "Docker", "category": "also", "proficiency": 80},
    {"name": "Postgres", "category": "also", "proficiency": 85},
    {"name": "Prisma", "category": "also", "proficiency": 80},
    {"name": "REST APIs", "category": "also", "proficiency": 88},
    {"name": "Testing (JUnit/Jest)", "category": "also", "proficiency": 82},
    {"name": "CI/CD", "category": "also", "proficiency": 80},
    # Practices
    {"name": "Clean architecture", "category": "practices", "proficiency": 90},
    {"name": "API design", "category": "practices", "proficiency": 88},
    {"name": "Schema migrations", "category": "practices", "proficiency": 85},
    {"name": "Observability basics", "category": "practices", "proficiency": 75},
)

# Case-study narrative, joined to projects by exact title. Never stored.
PROJECT_DETAILS = MappingProxyType({
    "Pickleball Session Manager": MappingProxyType({
        "problem": "Captains were juggling players, courts, and ratings in spreadsheets, leading to unbalanced matches and dropped data.",
        "buildSummary": "Built a full-stack session manager that balances courts, schedules matches, and updates ratings automatically.",
        "decisions": (
            "Prisma schema + migrations for players, sessions, matches, and rating events to keep data integrity front and center.",
            "Balancing algorithm that groups players by availability and skill to minimize idle time and repeat pairings.",
            "Guardrails on rating updates (idempotent writes, conflict checks) plus audits to explain every change.",
        ),
        "results": "Session setup moved from manual sorting to a predictable flow; captains trust rating changes because they're validated and auditable.",
        "demoUrl": "https://pickleball.zubairmuwwakil.com",
        "caseStudyUrl": "https://www.zubairmuwwakil.com/github-projects-certifications#h.x7x3lu4gcab7",
    }),
    "Market Data Pipeline": MappingProxyType({
        "problem": "Analysts needed reliable end-of-day data with calculated indicators without fighting stale caches or inconsistent formulas.",
        "buildSummary": "Developed a Spring Boot pipeline that ingests market data, caches time-series in memory, and serves analytics via REST + a lightweight dashboard.",
        "decisions": (
            "Idempotent ingest jobs with retries and checksum validation to prevent duplicate bars.",
            "Normalized database design for tickers and indicators so calculations could be recomputed or extended without schema churn.",
            "Layered caching (in-memory + tuned TTLs) to keep common indicator endpoints snappy while staying consistent with source data.",
        ),
        "results": "Indicator responses stay fast and repeatable; adding a new metric is a schema migration and a small service extension instead of a rewrite.",
        "caseStudyUrl": "https://www.zubairmuwwakil.com/github-projects-certifications#h.7fnkak3j8h5",
    }),
})

FALLBACK_PROJECTS = (
    {
        "id": 1,
        "title": "Pickleball Session Manager",
        "description": "Full-stack app for managing sessions, balanced groups, matches, and transparent rating changes.",
        "link": "https://www.zubairmuwwakil.com/github-projects-certifications#h.x7x3lu4gcab7",
        "githubLink": GITHUB_URL,
        "tags": ["React", "Prisma", "Balance Algorithm", "Clean Architecture"],
    },
    {
        "id": 2,
        "title": "Market Data Pipeline",
        "description": "Spring Boot market data pipeline with cached analytics endpoints and a dashboard.",
        "link": "https://www.zubairmuwwakil.com/github-projects-certifications#h.7fnkak3j8h5",
        "githubLink": GITHUB_URL,
        "tags": ["Java", "Spring Boot", "Data Pipeline", "REST API"],
    },
    {
        "id": 3,
        "title": "Mind Map Website",
        "description": "Interactive mind map tool for plotting ideas, project steps, and timelines.",
        "link": "https://mindsky.zubairmuwwakil.com",
        "githubLink": GITHUB_URL,
        "tags": ["JavaScript", "Interactive UI"],
    },
    {
        "id": 4,
        "title": "HomeServer Setup",
        "description": "Self-hosted storage and backup flow with clear documentation.",
        "link": "https://www.zubairmuwwakil.com/homeserver-setup-guide",
        "githubLink": GITHUB_URL,
        "tags": ["Infrastructure", "Docker", "Automation"],
    },
)

FALLBACK_EXPERIENCES = tuple(
    {"id": index, **experience}
    for index, experience in enumerate(DEFAULT_EXPERIENCES, start=1)
)

FALLBACK_SKILL_BANDS = (
    {
        "title": "Core",
        "level": "strong",
        "items": ["Java (Spring Boot)", "TypeScript / JavaScript", "React", "SQL"],
    },
    {
        "title": "Also",
        "level": "working",
        "items": ["Node.js", "Python", "Docker", "Postgres", "Prisma", "REST APIs", "Testing (JUnit/Jest)", "CI/CD"],
    },
    {
        "title": "Practices",
        "level": "familiar",
        "items": ["Clean architecture", "API design", "Schema migrations", "Observability basics"],
    },
)
