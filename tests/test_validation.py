"""Tests for validate_plan."""

from lifeplan_sim_jp import (
    AssetsLiabilities,
    Household,
    IncomeProfile,
    LifePlan,
    MaritalStatus,
    OwnHousing,
    RecurringSideIncome,
    SpouseProfile,
    validate_plan,
)


class TestValidatePlan:
    def test_default_plan_valid(self):
        assert validate_plan(LifePlan()) == []

    def test_death_before_current_age(self):
        plan = LifePlan(household=Household(current_age=50, death_age=40))
        assert any("想定寿命" in e for e in validate_plan(plan))

    def test_age_out_of_range(self):
        plan = LifePlan(household=Household(current_age=130, death_age=130))
        assert validate_plan(plan)

    def test_negative_assets(self):
        plan = LifePlan(assets=AssetsLiabilities(savings=-1))
        assert validate_plan(plan) == ["預金は0以上で指定してください（-1）"]

    def test_own_housing_needs_term(self):
        hh = Household(housing=OwnHousing(
            purchase_year=2025, purchase_price=3000, loan_amount=2000,
            interest_rate=1.0, loan_term_years=0,
        ))
        assert any("返済期間" in e for e in validate_plan(LifePlan(household=hh)))

    def test_married_without_spouse(self):
        hh = Household(marital_status=MaritalStatus.MARRIED)
        assert "配偶者情報が未設定です" in validate_plan(LifePlan(household=hh))

    def test_planning_needs_ages(self):
        hh = Household(marital_status=MaritalStatus.PLANNING, spouse=SpouseProfile(age_at_marriage=30))
        assert any("結婚予定" in e for e in validate_plan(LifePlan(household=hh)))

    def test_work_range(self):
        plan = LifePlan(income=IncomeProfile(work_start_age=65, work_end_age=60))
        assert any("就労開始年齢" in e for e in validate_plan(plan))

    def test_side_income_range(self):
        income = IncomeProfile(side_incomes=(
            RecurringSideIncome(monthly_amount=5, start_age=50, end_age=40, description="副業"),
        ))
        assert validate_plan(LifePlan(income=income)) == ["副業の開始年齢が終了年齢より後です"]

    def test_collects_multiple(self):
        plan = LifePlan(
            household=Household(monthly_living_expense=-1),
            income=IncomeProfile(annual_income=-100),
        )
        assert len(validate_plan(plan)) == 2
