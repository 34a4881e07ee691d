"""Life events: yearly net effect, marriage/birth timing and row labels."""

from lifeplan_sim_jp.params import round1
from lifeplan_sim_jp.profiles import EventType, Household, LifeEvent, MaritalStatus

EVENT_SEPARATOR = "、"


def calc_life_event_net(life_events: tuple[LifeEvent, ...], year: int) -> float:
    """Signed sum of events in `year` (income +, expense −)."""
    return round1(sum(e.signed_amount for e in life_events if e.year == year))


def marriage_year(household: Household) -> int | None:
    """Calendar year of a planned marriage, None unless status is "planning"."""
    if household.marital_status is not MaritalStatus.PLANNING:
        return None
    if household.spouse is None or household.spouse.marriage_age is None:
        return None
    return household.start_year + (household.spouse.marriage_age - household.current_age)


def child_birth_years(household: Household) -> list[int]:
    """Birth years of existing children followed by planned children."""
    years = [household.start_year - c.current_age for c in household.children]
    years += [household.start_year + c.years_from_now for c in household.planned_children]
    return years


def _fmt_amount(amount: float) -> str:
    amount = float(amount)
    return str(int(amount)) if amount.is_integer() else str(amount)


def describe_year_events(
    year: int, household: Household, life_events: tuple[LifeEvent, ...],
) -> str:
    """Labels for marriage, births and life events in `year`, or ""."""
    labels: list[str] = []
    if marriage_year(household) == year:
        labels.append("結婚")
    for i, birth_year in enumerate(child_birth_years(household)):
        if birth_year == year:
            labels.append(f"第{i + 1}子誕生")
    for event in life_events:
        if event.year != year:
            continue
        sign = "+" if event.type is EventType.INCOME else "-"
        labels.append(f"{event.description}（{sign}{_fmt_amount(event.amount)}万円）")
    return EVENT_SEPARATOR.join(labels)


def event_markers(
    household: Household, life_events: tuple[LifeEvent, ...],
) -> list[tuple[int, float, str]]:
    """Chart annotations [(year, signed_amount, label), ...] sorted by year."""
    markers: list[tuple[int, float, str]] = []
    my = marriage_year(household)
    if my is not None:
        markers.append((my, 0.0, "結婚"))
    for i, birth_year in enumerate(child_birth_years(household)):
        if birth_year >= household.start_year:
            markers.append((birth_year, 0.0, f"第{i + 1}子誕生"))
    for event in life_events:
        markers.append((event.year, event.signed_amount, event.description))
    return sorted(markers, key=lambda m: m[0])
