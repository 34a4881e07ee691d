"""Net income projection (raise compounding, occupation deductions, side income)."""

from lifeplan_sim_jp.params import growth_factor, round1
from lifeplan_sim_jp.profiles import (
    OneTimeSideIncome,
    Occupation,
    RecurringSideIncome,
    SideIncome,
)

# 手取り率（額面→手取り、税・社会保険料の簡易控除）
NET_INCOME_RATIOS: dict[Occupation, float] = {
    Occupation.COMPANY_EMPLOYEE: 0.75,           # 所得税+住民税+厚生年金+健保
    Occupation.SELF_EMPLOYED: 0.70,              # 国民年金+国保+事業税
    Occupation.PART_TIME_WITH_PENSION: 0.80,
    Occupation.PART_TIME_WITHOUT_PENSION: 0.90,  # 扶養内パート想定
    Occupation.HOMEMAKER: 0.0,
}


def calc_net_income_with_raise(
    base_income: float,
    occupation: Occupation,
    raise_rate: float,
    year: int,
    start_year: int,
) -> float:
    """Net annual income (万円) for `year`.

    base × (1 + raise_rate/100)^(year − start_year) × net ratio.
    Years before `start_year` get no raise.
    """
    gross = base_income * growth_factor(raise_rate, year - start_year)
    return round1(max(0.0, gross * NET_INCOME_RATIOS[occupation]))


def calc_side_income(side_incomes: tuple[SideIncome, ...], age: int) -> float:
    """Side income (万円/年) received at `age`."""
    total = 0.0
    for item in side_incomes:
        if isinstance(item, OneTimeSideIncome):
            if item.age == age:
                total += item.amount
        elif isinstance(item, RecurringSideIncome):
            if item.start_age <= age <= item.end_age:
                total += item.monthly_amount * 12
    return round1(total)


def calc_severance(severance_pay: float, work_end_age: int, age: int) -> float:
    """Lump-sum severance, paid in the year the person reaches work_end_age."""
    return severance_pay if age == work_end_age else 0.0
