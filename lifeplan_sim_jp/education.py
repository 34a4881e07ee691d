"""Education cost schedule by schooling band and public/private track."""

from lifeplan_sim_jp.params import growth_factor, round1
from lifeplan_sim_jp.profiles import (
    Child,
    EducationPlan,
    PlannedChild,
    SchoolTrack,
    UniversityTrack,
)

# 就学区分（子の年齢, 両端含む）
SCHOOL_BANDS: tuple[tuple[str, int, int], ...] = (
    ("nursery", 0, 2),       # 保育園
    ("preschool", 3, 5),     # 幼稚園
    ("elementary", 6, 11),   # 小学校
    ("junior_high", 12, 14),  # 中学校
    ("high_school", 15, 17),  # 高校
    ("university", 18, 21),  # 大学
)

# 年間費用（公立, 私立）万円/年
_SCHOOL_COSTS: dict[str, tuple[float, float]] = {
    "nursery": (23.3, 50),
    "preschool": (58.3, 100),
    "elementary": (41.7, 83.3),
    "junior_high": (66.7, 133.3),
    "high_school": (83.3, 250),
}

# 大学 年間費用 万円/年
UNIVERSITY_COSTS: dict[UniversityTrack, float] = {
    UniversityTrack.PUBLIC_HUMANITIES: 325,
    UniversityTrack.PUBLIC_SCIENCE: 375,
    UniversityTrack.PRIVATE_HUMANITIES: 550,
    UniversityTrack.PRIVATE_SCIENCE: 650,
    UniversityTrack.NONE: 0,
}


def school_band(child_age: int) -> str | None:
    """Return the schooling band for `child_age`, or None outside 0-21."""
    for band, lo, hi in SCHOOL_BANDS:
        if lo <= child_age <= hi:
            return band
    return None


def child_annual_cost(plan: EducationPlan, child_age: int) -> float:
    """Base annual cost (万円/年, before growth) for one child."""
    band = school_band(child_age)
    if band is None:
        return 0.0
    if band == "university":
        return UNIVERSITY_COSTS[plan.university]
    track: SchoolTrack = getattr(plan, band)
    if track is SchoolTrack.NONE:
        return 0.0
    public, private = _SCHOOL_COSTS[band]
    return private if track is SchoolTrack.PRIVATE else public


def calc_education_expense(
    children: tuple[Child, ...],
    planned_children: tuple[PlannedChild, ...],
    year: int,
    current_age: int,
    start_year: int,
    education_cost_increase_rate: float,
) -> float:
    """Total education expense (万円/年) across all children for `year`.

    current_age is the household head's age; child ages derive from the
    simulation start year only.
    """
    years_since_start = year - start_year
    multiplier = growth_factor(education_cost_increase_rate, years_since_start)

    total = 0.0
    for child in children:
        child_age = child.current_age + years_since_start
        total += child_annual_cost(child.education_plan, child_age) * multiplier
    for child in planned_children:
        if years_since_start < child.years_from_now:
            continue
        child_age = years_since_start - child.years_from_now
        total += child_annual_cost(child.education_plan, child_age) * multiplier
    return round1(total)
