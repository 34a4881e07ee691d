"""Annual housing expense for rent or owned-home arrangements."""

from lifeplan_sim_jp.params import _calc_equal_payment, growth_factor, round1
from lifeplan_sim_jp.profiles import Housing, OwnHousing, RentHousing


def calc_annual_loan_payment(loan_amount: float, interest_rate: float, loan_term_years: int) -> float:
    """Annual repayment (万円/年) of a fixed-payment loan with monthly compounding."""
    if loan_amount <= 0 or loan_term_years <= 0:
        return 0.0
    monthly = _calc_equal_payment(loan_amount, interest_rate / 100 / 12, loan_term_years * 12)
    return monthly * 12


def calc_rent_expense(rent: RentHousing, year: int, start_year: int) -> float:
    """Monthly rent × 12, escalated yearly from the simulation start."""
    return round1(
        rent.monthly_rent * 12 * growth_factor(rent.annual_increase_rate, year - start_year)
    )


def calc_own_expense(own: OwnHousing, year: int) -> float:
    """Loan repayment during the loan term plus maintenance from purchase onward."""
    if year < own.purchase_year:
        return 0.0
    cost = own.purchase_price * own.maintenance_cost_rate / 100
    if year < own.purchase_year + own.loan_term_years:
        cost += calc_annual_loan_payment(own.loan_amount, own.interest_rate, own.loan_term_years)
    return round1(cost)


def calc_housing_expense(housing: Housing, year: int, start_year: int) -> float:
    """Housing expense (万円/年) for `year`. Only the active arrangement is evaluated."""
    if isinstance(housing, OwnHousing):
        return calc_own_expense(housing, year)
    return calc_rent_expense(housing, year, start_year)
