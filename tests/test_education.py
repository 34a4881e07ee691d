"""Tests for the education cost schedule."""

import pytest
from lifeplan_sim_jp import (
    Child,
    EducationPlan,
    PlannedChild,
    SchoolTrack,
    UniversityTrack,
    calc_education_expense,
)
from lifeplan_sim_jp.education import child_annual_cost, school_band

UNIVERSITY_ONLY = EducationPlan(
    SchoolTrack.NONE, SchoolTrack.NONE, SchoolTrack.NONE,
    SchoolTrack.NONE, SchoolTrack.NONE, UniversityTrack.PUBLIC_HUMANITIES,
)


class TestSchoolBand:
    @pytest.mark.parametrize("age,band", [
        (0, "nursery"), (2, "nursery"),
        (3, "preschool"), (5, "preschool"),
        (6, "elementary"), (11, "elementary"),
        (12, "junior_high"), (14, "junior_high"),
        (15, "high_school"), (17, "high_school"),
        (18, "university"), (21, "university"),
    ])
    def test_boundaries(self, age, band):
        assert school_band(age) == band

    @pytest.mark.parametrize("age", [-1, 22, 40])
    def test_outside(self, age):
        assert school_band(age) is None


class TestChildAnnualCost:
    def test_public_nursery(self):
        assert child_annual_cost(EducationPlan(), 0) == 23.3

    def test_private_high_school(self):
        assert child_annual_cost(EducationPlan.all_private(), 16) == 250

    @pytest.mark.parametrize("track,expected", [
        (UniversityTrack.PUBLIC_HUMANITIES, 325),
        (UniversityTrack.PUBLIC_SCIENCE, 375),
        (UniversityTrack.PRIVATE_HUMANITIES, 550),
        (UniversityTrack.PRIVATE_SCIENCE, 650),
        (UniversityTrack.NONE, 0),
    ])
    def test_university(self, track, expected):
        plan = EducationPlan(university=track)
        assert child_annual_cost(plan, 19) == expected

    def test_none_plan_free_every_age(self):
        plan = EducationPlan.none()
        assert all(child_annual_cost(plan, age) == 0 for age in range(0, 25))

    def test_private_at_least_public(self):
        public, private = EducationPlan(), EducationPlan.all_private(UniversityTrack.PRIVATE_HUMANITIES)
        for age in range(0, 22):
            assert child_annual_cost(private, age) >= child_annual_cost(public, age)


class TestCalcEducationExpense:
    def test_planned_child_university_years(self):
        """5年後に生まれる子: 23〜26年目が大学（公立文系）"""
        planned = (PlannedChild(years_from_now=5, education_plan=UNIVERSITY_ONLY),)
        for offset in range(0, 40):
            year = 2025 + offset
            result = calc_education_expense((), planned, year, 30, 2025, 2.0)
            if 23 <= offset <= 26:
                assert result == pytest.approx(325 * 1.02 ** offset, abs=0.05)
            else:
                assert result == 0.0

    def test_not_born_yet(self):
        planned = (PlannedChild(years_from_now=5),)
        assert calc_education_expense((), planned, 2029, 30, 2025, 2.0) == 0.0
        # 誕生年は保育園（0歳）
        assert calc_education_expense((), planned, 2030, 30, 2025, 0.0) == 23.3

    def test_existing_child_start_year_no_growth(self):
        children = (Child(current_age=10),)
        assert calc_education_expense(children, (), 2025, 40, 2025, 2.0) == 41.7

    def test_existing_child_ages_with_years(self):
        children = (Child(current_age=10),)
        # 2年後 12歳 → 公立中学
        assert calc_education_expense(children, (), 2027, 40, 2025, 0.0) == 66.7

    def test_children_sum(self):
        children = (Child(current_age=0), Child(current_age=6))
        assert calc_education_expense(children, (), 2025, 35, 2025, 0.0) == pytest.approx(65.0)

    def test_no_children(self):
        assert calc_education_expense((), (), 2030, 30, 2025, 2.0) == 0.0

    def test_graduated_child(self):
        children = (Child(current_age=22),)
        assert calc_education_expense(children, (), 2025, 50, 2025, 2.0) == 0.0

    def test_private_plan_at_least_public(self):
        public = (Child(current_age=0),)
        private = (Child(current_age=0, education_plan=EducationPlan.all_private()),)
        for year in range(2025, 2050):
            assert (
                calc_education_expense(private, (), year, 30, 2025, 2.0)
                >= calc_education_expense(public, (), year, 30, 2025, 2.0)
            )
