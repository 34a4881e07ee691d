"""Tests for life-event netting, marriage/birth timing and labels."""

from lifeplan_sim_jp import (
    Child,
    EventType,
    Household,
    LifeEvent,
    MaritalStatus,
    PlannedChild,
    SpouseProfile,
    calc_life_event_net,
    describe_year_events,
)
from lifeplan_sim_jp.events import child_birth_years, event_markers, marriage_year


def _planning_household(**kwargs) -> Household:
    defaults = dict(
        current_age=30, start_year=2025,
        marital_status=MaritalStatus.PLANNING,
        spouse=SpouseProfile(age_at_marriage=29, marriage_age=33),
    )
    defaults.update(kwargs)
    return Household(**defaults)


class TestLifeEventNet:
    def test_income_minus_expense(self):
        events = (
            LifeEvent(2030, "相続", EventType.INCOME, amount=100),
            LifeEvent(2030, "車購入", EventType.EXPENSE, amount=30),
            LifeEvent(2031, "旅行", EventType.EXPENSE, amount=50),
        )
        assert calc_life_event_net(events, 2030) == 70.0
        assert calc_life_event_net(events, 2031) == -50.0

    def test_no_events(self):
        assert calc_life_event_net((), 2030) == 0.0


class TestMarriageYear:
    def test_planning(self):
        assert marriage_year(_planning_household()) == 2028

    def test_married_has_no_marriage_event(self):
        hh = _planning_household(marital_status=MaritalStatus.MARRIED)
        assert marriage_year(hh) is None

    def test_missing_marriage_age(self):
        hh = _planning_household(spouse=SpouseProfile(age_at_marriage=29))
        assert marriage_year(hh) is None


class TestChildBirthYears:
    def test_existing_then_planned(self):
        hh = Household(
            start_year=2025,
            children=(Child(current_age=3),),
            planned_children=(PlannedChild(years_from_now=2),),
        )
        assert child_birth_years(hh) == [2022, 2027]


class TestDescribeYearEvents:
    def test_marriage_and_birth_same_year(self):
        hh = _planning_household(
            children=(Child(current_age=3),),
            planned_children=(PlannedChild(years_from_now=3),),
        )
        assert describe_year_events(2028, hh, ()) == "結婚、第2子誕生"

    def test_event_labels(self):
        events = (
            LifeEvent(2030, "車購入", EventType.EXPENSE, amount=300),
            LifeEvent(2030, "祝い金", EventType.INCOME, amount=12.5),
        )
        assert describe_year_events(2030, Household(), events) == "車購入（-300万円）、祝い金（+12.5万円）"

    def test_empty_year(self):
        assert describe_year_events(2030, Household(), ()) == ""

    def test_single_has_no_marriage_label(self):
        hh = _planning_household(marital_status=MaritalStatus.SINGLE)
        assert describe_year_events(2028, hh, ()) == ""


class TestEventMarkers:
    def test_sorted_and_skips_past_births(self):
        hh = _planning_household(
            children=(Child(current_age=3),),
            planned_children=(PlannedChild(years_from_now=1),),
        )
        events = (LifeEvent(2026, "留学", EventType.EXPENSE, amount=200),)
        markers = event_markers(hh, events)
        assert [m[0] for m in markers] == sorted(m[0] for m in markers)
        assert (2026, 0.0, "第2子誕生") in markers
        assert (2026, -200, "留学") in markers
        assert (2028, 0.0, "結婚") in markers
        assert all(label != "第1子誕生" for _, _, label in markers)
