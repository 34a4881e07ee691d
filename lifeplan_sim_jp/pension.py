"""Simplified public pension estimate (基礎年金 + 報酬比例部分)."""

from lifeplan_sim_jp.params import round1
from lifeplan_sim_jp.profiles import Occupation

# 公的年金計算定数（日本年金機構 簡易版）
KISO_PENSION_ANNUAL = 78.0    # 老齢基礎年金 万円/年（2024年度満額）
KISO_FULL_YEARS = 40          # 満額に必要な加入年数
KOSEI_RATE = 5.481 / 1000     # 厚生年金 報酬比例乗率
STANDARD_MONTHLY_CAP = 65.0   # 標準報酬月額上限 万円

# 報酬比例部分の支給倍率（厚生年金加入の有無）
PENSION_GENEROSITY: dict[Occupation, float] = {
    Occupation.COMPANY_EMPLOYEE: 1.0,
    Occupation.PART_TIME_WITH_PENSION: 1.0,
    Occupation.SELF_EMPLOYED: 0.0,
    Occupation.PART_TIME_WITHOUT_PENSION: 0.0,
    Occupation.HOMEMAKER: 0.0,
}


def calc_pension(
    annual_income: float,
    work_start_age: int,
    work_end_age: int,
    pension_start_age: int,
    occupation: Occupation,
) -> float:
    """Estimate annual pension benefit (万円/年).

    pension_start_age is accepted for signature parity with the income form;
    the caller decides when the benefit is paid.
    """
    years = max(0, work_end_age - work_start_age)
    if years == 0:
        return 0.0
    kiso = KISO_PENSION_ANNUAL * min(years, KISO_FULL_YEARS) / KISO_FULL_YEARS
    avg_annual = min(annual_income, STANDARD_MONTHLY_CAP * 12)
    kosei = avg_annual * KOSEI_RATE * years * PENSION_GENEROSITY[occupation]
    return round1(kiso + kosei)


def estimate_pension_monthly(
    annual_income: float,
    work_start_age: int,
    work_end_age: int,
    pension_start_age: int,
    occupation: Occupation,
) -> float:
    """Monthly pension (万円/月) shown on the income form."""
    annual = calc_pension(
        annual_income, work_start_age, work_end_age, pension_start_age, occupation,
    )
    return round1(annual / 12)
