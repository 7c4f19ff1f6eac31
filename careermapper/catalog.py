from __future__ import annotations

import json
import math
from pathlib import Path
from typing import Any, Dict, Iterable, List

from careermapper.models import CareerPath, CatalogError, Prerequisite


def _career(career_id: str, title: str, icon: str, description: str, salary_range: str, avg_salary: float,
            prerequisites: List[tuple], trending_skills: List[str], market_trend: str) -> CareerPath:
    return CareerPath(
        career_id=career_id,
        title=title,
        icon=icon,
        description=description,
        salary_range=salary_range,
        avg_salary=avg_salary,
        prerequisites=[Prerequisite(subject_id=s, min_progress=m, weight=w) for s, m, w in prerequisites],
        trending_skills=trending_skills,
        market_trend=market_trend,
    )


# Static career paths; prerequisite tuples are (subject_id, min_progress, weight).
DEFAULT_CAREER_PATHS: List[CareerPath] = [
    _career(
        "fintech-architect", "FinTech Architect", "💰",
        "Design and build financial technology platforms and payment systems",
        "₹18-30 LPA", 24,
        [("learn-apt", 70, 0.3), ("learn-math", 30, 0.3), ("learn-developer", 50, 0.4)],
        ["Blockchain", "API Design", "Payment Gateways", "Security"],
        "High demand - Growing 25% annually",
    ),
    _career(
        "ai-ml-engineer", "AI/ML Engineer", "🤖",
        "Build and deploy machine learning models and AI systems",
        "₹15-28 LPA", 22,
        [("learn-ai", 50, 0.5), ("learn-developer", 40, 0.3), ("learn-math", 40, 0.2)],
        ["Deep Learning", "Python", "TensorFlow", "Data Analysis"],
        "Very High demand - 30% growth",
    ),
    _career(
        "full-stack-developer", "Full Stack Developer", "💻",
        "Create complete web applications from frontend to backend",
        "₹8-18 LPA", 13,
        [("learn-developer", 60, 0.7), ("learn-apt", 30, 0.3)],
        ["React", "Node.js", "Databases", "Cloud Deployment"],
        "High demand - Stable growth",
    ),
    _career(
        "data-scientist", "Data Scientist", "📊",
        "Extract insights from data using statistical analysis and ML",
        "₹12-25 LPA", 18,
        [("learn-ai", 40, 0.4), ("learn-math", 50, 0.3), ("learn-apt", 40, 0.3)],
        ["Statistics", "Python", "SQL", "Data Visualization"],
        "High demand - Growing steadily",
    ),
    _career(
        "product-manager-tech", "Product Manager (Tech)", "🎯",
        "Lead product development and strategy for tech products",
        "₹15-35 LPA", 25,
        [("learn-management", 50, 0.4), ("learn-developer", 30, 0.3), ("learn-apt", 50, 0.3)],
        ["Product Strategy", "Analytics", "Agile", "User Research"],
        "Very High demand - Premium salaries",
    ),
    _career(
        "govt-services-officer", "Government Services Officer", "🏛️",
        "Civil services and administrative positions in government",
        "₹8-15 LPA", 11,
        [("learn-govt-jobs", 50, 0.4), ("learn-geography", 40, 0.3), ("learn-apt", 60, 0.3)],
        ["Current Affairs", "Policy Analysis", "Administration", "Law"],
        "Stable - High job security",
    ),
    _career(
        "physics-researcher", "Physics Researcher/Educator", "⚛️",
        "Research, teaching, and innovation in physics domains",
        "₹6-20 LPA", 13,
        [("learn-physics", 60, 0.5), ("learn-math", 50, 0.3), ("learn-chemistry", 30, 0.2)],
        ["Research Methods", "Lab Techniques", "Data Analysis", "Teaching"],
        "Moderate demand - Academic growth",
    ),
    _career(
        "pr-communications-head", "PR & Communications Head", "📣",
        "Lead public relations and corporate communications",
        "₹10-22 LPA", 16,
        [("learn-pr", 60, 0.5), ("learn-management", 40, 0.3), ("learn-ai", 20, 0.2)],
        ["Media Relations", "Crisis Management", "Content Strategy", "Digital PR"],
        "Growing - AI tools integration",
    ),
    _career(
        "climate-analyst", "Climate & Geography Analyst", "🌍",
        "Analyze environmental data and geographical patterns",
        "₹7-18 LPA", 12,
        [("learn-geography", 60, 0.5), ("learn-physics", 30, 0.2), ("learn-ai", 30, 0.3)],
        ["GIS", "Climate Modeling", "Data Analysis", "Sustainability"],
        "Growing - Climate focus",
    ),
    _career(
        "operations-manager", "Operations Manager", "⚙️",
        "Optimize business operations and process efficiency",
        "₹12-24 LPA", 18,
        [("learn-management", 60, 0.5), ("learn-apt", 50, 0.3), ("learn-math", 30, 0.2)],
        ["Process Optimization", "Analytics", "Supply Chain", "Leadership"],
        "High demand - Cross-industry",
    ),
]


def _require(entry: Dict[str, Any], key: str, where: str) -> Any:
    if key not in entry or entry[key] is None:
        raise CatalogError(f"{where}: missing required field '{key}'")
    return entry[key]


def _to_number(value: Any, key: str, where: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise CatalogError(f"{where}: field '{key}' must be a number, got {value!r}")
    if not math.isfinite(value):
        raise CatalogError(f"{where}: field '{key}' must be finite, got {value!r}")
    return float(value)


def career_from_dict(entry: Dict[str, Any]) -> CareerPath:
    if not isinstance(entry, dict):
        raise CatalogError(f"career entry must be an object, got {type(entry).__name__}")
    career_id = str(_require(entry, "id", "career"))
    where = f"career '{career_id}'"

    prereqs: List[Prerequisite] = []
    for raw in entry.get("prerequisites") or []:
        if not isinstance(raw, dict):
            raise CatalogError(f"{where}: prerequisite must be an object")
        prereqs.append(
            Prerequisite(
                subject_id=str(_require(raw, "subject_id", where)),
                min_progress=_to_number(_require(raw, "min_progress", where), "min_progress", where),
                weight=_to_number(_require(raw, "weight", where), "weight", where),
            )
        )

    return CareerPath(
        career_id=career_id,
        title=str(_require(entry, "title", where)),
        salary_range=str(entry.get("salary_range") or ""),
        avg_salary=_to_number(_require(entry, "avg_salary", where), "avg_salary", where),
        prerequisites=prereqs,
        description=str(entry.get("description") or ""),
        icon=str(entry.get("icon") or ""),
        trending_skills=[str(s) for s in entry.get("trending_skills") or []],
        market_trend=str(entry.get("market_trend") or ""),
    )


def catalog_from_dicts(items: Iterable[Dict[str, Any]]) -> List[CareerPath]:
    careers: List[CareerPath] = []
    seen = set()
    for item in items:
        career = career_from_dict(item)
        if career.career_id in seen:
            raise CatalogError(f"duplicate career id '{career.career_id}'")
        seen.add(career.career_id)
        careers.append(career)
    return careers


def load_catalog(path: Path) -> List[CareerPath]:
    """
    Load a catalog JSON file: {"careers": [...]} or a bare list of careers.
    Raises FileNotFoundError if the file is absent and CatalogError if it is malformed.
    """
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise CatalogError(f"{path}: invalid JSON ({e})") from e
    items = data.get("careers") if isinstance(data, dict) else data
    if not isinstance(items, list):
        raise CatalogError(f"{path}: expected a list of careers")
    return catalog_from_dicts(items)
