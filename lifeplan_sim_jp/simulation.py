"""Core projection engine: year-by-year cash flow and closing assets."""

import dataclasses
from dataclasses import dataclass

from lifeplan_sim_jp.education import calc_education_expense
from lifeplan_sim_jp.events import calc_life_event_net, marriage_year
from lifeplan_sim_jp.housing import calc_housing_expense
from lifeplan_sim_jp.income import calc_net_income_with_raise, calc_severance, calc_side_income
from lifeplan_sim_jp.params import Parameters, growth_factor, round1
from lifeplan_sim_jp.pension import calc_pension
from lifeplan_sim_jp.profiles import Household, LifePlan, MaritalStatus


@dataclass
class CashFlowRow:
    """One simulated year (万円). Mutable: the table view may override cells.

    other_expense is the net outflow of that year's life events
    (negative when income events outweigh expense events).
    """

    main_income: float = 0.0
    side_income: float = 0.0
    investment_income: float = 0.0
    spouse_income: float = 0.0
    living_expense: float = 0.0
    housing_expense: float = 0.0
    education_expense: float = 0.0
    other_expense: float = 0.0

    @property
    def total_income(self) -> float:
        return self.main_income + self.side_income + self.investment_income + self.spouse_income

    @property
    def total_expense(self) -> float:
        return self.living_expense + self.housing_expense + self.education_expense + self.other_expense

    @property
    def net_balance(self) -> float:
        return self.total_income - self.total_expense


CASH_FLOW_FIELDS: tuple[str, ...] = tuple(f.name for f in dataclasses.fields(CashFlowRow))


def _spouse_timeline(household: Household, year: int) -> tuple[int, int] | None:
    """Return (spouse_age, income_base_year) for `year`, or None if no spouse income applies.

    Married: spouse ages from the simulation start.
    Planning: spouse joins in the marriage year at age_at_marriage.
    """
    spouse = household.spouse
    if spouse is None:
        return None
    if household.marital_status is MaritalStatus.MARRIED:
        if spouse.current_age is None:
            return None
        return spouse.current_age + (year - household.start_year), household.start_year
    if household.marital_status is MaritalStatus.PLANNING:
        my = marriage_year(household)
        if my is None or spouse.age_at_marriage is None or year < my:
            return None
        return spouse.age_at_marriage + (year - my), my
    return None


def calc_main_income(plan: LifePlan, year: int) -> float:
    """Head's net salary within the work window plus pension from pension_start_age."""
    household, income = plan.household, plan.income
    age = household.age_in(year)
    main = 0.0
    if income.work_start_age <= age <= income.work_end_age:
        main = calc_net_income_with_raise(
            income.annual_income, household.occupation, income.raise_rate,
            year, household.start_year,
        )
    if age >= income.pension_start_age:
        main += calc_pension(
            income.annual_income, income.work_start_age, income.work_end_age,
            income.pension_start_age, household.occupation,
        )
    return round1(main)


def calc_spouse_income(plan: LifePlan, year: int) -> float:
    """Spouse's net salary and pension; 0 when single or the profile is incomplete."""
    spouse_income = plan.income.spouse
    timeline = _spouse_timeline(plan.household, year)
    if spouse_income is None or timeline is None:
        return 0.0
    spouse_age, base_year = timeline
    occupation = plan.household.spouse.occupation
    pension_start_age = spouse_income.pension_start_age
    if pension_start_age is None:
        pension_start_age = plan.income.pension_start_age

    total = 0.0
    if spouse_income.work_start_age <= spouse_age <= spouse_income.work_end_age:
        total = calc_net_income_with_raise(
            spouse_income.annual_income, occupation, 0, year, base_year,
        )
    if spouse_age >= pension_start_age:
        total += calc_pension(
            spouse_income.annual_income, spouse_income.work_start_age,
            spouse_income.work_end_age, pension_start_age, occupation,
        )
    return round1(total)


def calc_side_income_for_year(plan: LifePlan, year: int) -> float:
    """Side jobs plus severance lump sums (head and spouse)."""
    household, income = plan.household, plan.income
    age = household.age_in(year)
    total = calc_side_income(income.side_incomes, age)
    total += calc_severance(income.severance_pay, income.work_end_age, age)
    timeline = _spouse_timeline(household, year)
    if income.spouse is not None and timeline is not None:
        total += calc_severance(income.spouse.severance_pay, income.spouse.work_end_age, timeline[0])
    return round1(total)


def calc_living_expense(household: Household, parameters: Parameters, year: int) -> float:
    """Baseline living cost × 12, inflated from the start year."""
    inflation = growth_factor(parameters.inflation_rate, year - household.start_year)
    return round1(household.monthly_living_expense * 12 * inflation)


def calc_investment_income(previous_assets: float, investment_return: float) -> float:
    """Return on last year's closing assets. Negative balances earn nothing."""
    if previous_assets <= 0:
        return 0.0
    return round1(previous_assets * investment_return / 100)


def project_year(plan: LifePlan, year: int, previous_assets: float) -> CashFlowRow:
    """Compute the cash-flow row for `year` given last year's closing assets."""
    household, params = plan.household, plan.parameters
    return CashFlowRow(
        main_income=calc_main_income(plan, year),
        side_income=calc_side_income_for_year(plan, year),
        investment_income=calc_investment_income(previous_assets, params.investment_return),
        spouse_income=calc_spouse_income(plan, year),
        living_expense=calc_living_expense(household, params, year),
        housing_expense=calc_housing_expense(household.housing, year, household.start_year),
        education_expense=calc_education_expense(
            household.children, household.planned_children, year,
            household.current_age, household.start_year,
            params.education_cost_increase_rate,
        ),
        other_expense=round1(-calc_life_event_net(plan.life_events, year)),
    )


def simulate_lifeplan(plan: LifePlan) -> dict:
    """Run the recurrence from start_year to the death-age year (inclusive).

    Each year: investment income on last year's closing assets, then
    closing = round1(previous + net balance).

    Returns a dict with cash_flow (year → CashFlowRow, in year order),
    closing_assets, net_balance, initial_assets, final_assets and
    depletion_year (first year with negative closing assets, or None).
    """
    initial_assets = round1(plan.assets.net_assets)
    previous = initial_assets
    cash_flow: dict[int, CashFlowRow] = {}
    closing_assets: dict[int, float] = {}
    net_balance: dict[int, float] = {}
    depletion_year = None

    for year in plan.household.years:
        row = project_year(plan, year, previous)
        balance = round1(row.net_balance)
        previous = round1(previous + balance)
        cash_flow[year] = row
        net_balance[year] = balance
        closing_assets[year] = previous
        if depletion_year is None and previous < 0:
            depletion_year = year

    return {
        "cash_flow": cash_flow,
        "closing_assets": closing_assets,
        "net_balance": net_balance,
        "initial_assets": initial_assets,
        "final_assets": previous,
        "depletion_year": depletion_year,
    }


def project_cash_flow(plan: LifePlan) -> dict[int, CashFlowRow]:
    """Ordered mapping year → CashFlowRow covering the whole horizon."""
    return simulate_lifeplan(plan)["cash_flow"]


def accumulate_assets(
    rows: dict[int, CashFlowRow], initial_assets: float,
) -> tuple[dict[int, float], dict[int, float]]:
    """Recompute (net_balance, closing_assets) from an existing, possibly edited, table.

    Uses the same accumulation order as simulate_lifeplan but takes
    investment_income from the rows as they stand.
    """
    previous = round1(initial_assets)
    balances: dict[int, float] = {}
    closing: dict[int, float] = {}
    for year, row in rows.items():
        balance = round1(row.net_balance)
        previous = round1(previous + balance)
        balances[year] = balance
        closing[year] = previous
    return balances, closing
