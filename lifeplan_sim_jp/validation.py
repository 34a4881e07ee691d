"""Input sanity checks. Returns human-readable problems instead of raising."""

from lifeplan_sim_jp.profiles import (
    LifePlan,
    MaritalStatus,
    OneTimeSideIncome,
    OwnHousing,
    RecurringSideIncome,
    RentHousing,
)

MAX_AGE = 120


def _check_non_negative(errors: list[str], label: str, value: float) -> None:
    if value < 0:
        errors.append(f"{label}は0以上で指定してください（{value}）")


def validate_plan(plan: LifePlan) -> list[str]:
    """Return a list of problems with `plan` (empty when usable).

    The projection itself accepts any input; these checks catch values
    that would make the table meaningless.
    """
    errors: list[str] = []
    hh, income = plan.household, plan.income

    if not 0 <= hh.current_age <= MAX_AGE:
        errors.append(f"現在の年齢は0〜{MAX_AGE}歳で指定してください（{hh.current_age}）")
    if hh.death_age < hh.current_age:
        errors.append(f"想定寿命（{hh.death_age}歳）が現在の年齢（{hh.current_age}歳）より前です")
    elif hh.death_age > MAX_AGE:
        errors.append(f"想定寿命は{MAX_AGE}歳以下で指定してください（{hh.death_age}）")
    _check_non_negative(errors, "基本生活費", hh.monthly_living_expense)

    housing = hh.housing
    if isinstance(housing, RentHousing):
        _check_non_negative(errors, "家賃", housing.monthly_rent)
    elif isinstance(housing, OwnHousing):
        _check_non_negative(errors, "物件価格", housing.purchase_price)
        _check_non_negative(errors, "借入額", housing.loan_amount)
        _check_non_negative(errors, "金利", housing.interest_rate)
        _check_non_negative(errors, "維持費率", housing.maintenance_cost_rate)
        if housing.loan_amount > 0 and housing.loan_term_years <= 0:
            errors.append("住宅ローンの返済期間を1年以上で指定してください")

    for i, child in enumerate(hh.children, 1):
        if not 0 <= child.current_age <= MAX_AGE:
            errors.append(f"第{i}子の年齢が不正です（{child.current_age}）")
    for i, child in enumerate(hh.planned_children, 1):
        if child.years_from_now < 0:
            errors.append(f"出産予定{i}人目の年数は0以上で指定してください（{child.years_from_now}）")

    if hh.marital_status is not MaritalStatus.SINGLE and hh.spouse is None:
        errors.append("配偶者情報が未設定です")
    if hh.spouse is not None:
        if hh.marital_status is MaritalStatus.MARRIED and hh.spouse.current_age is None:
            errors.append("配偶者の年齢が未設定です")
        if hh.marital_status is MaritalStatus.PLANNING:
            if hh.spouse.marriage_age is None or hh.spouse.age_at_marriage is None:
                errors.append("結婚予定の年齢（本人・配偶者）が未設定です")
            elif hh.spouse.marriage_age < hh.current_age:
                errors.append(f"結婚予定年齢（{hh.spouse.marriage_age}歳）が現在の年齢より前です")

    _check_non_negative(errors, "年収", income.annual_income)
    _check_non_negative(errors, "退職金", income.severance_pay)
    if income.work_start_age > income.work_end_age:
        errors.append(f"就労開始年齢（{income.work_start_age}歳）が退職年齢（{income.work_end_age}歳）より後です")
    for side in income.side_incomes:
        name = side.description or "副収入"
        if isinstance(side, OneTimeSideIncome):
            _check_non_negative(errors, name, side.amount)
        elif isinstance(side, RecurringSideIncome):
            _check_non_negative(errors, name, side.monthly_amount)
            if side.start_age > side.end_age:
                errors.append(f"{name}の開始年齢が終了年齢より後です")
    if income.spouse is not None:
        _check_non_negative(errors, "配偶者の年収", income.spouse.annual_income)
        _check_non_negative(errors, "配偶者の退職金", income.spouse.severance_pay)
        if income.spouse.work_start_age > income.spouse.work_end_age:
            errors.append("配偶者の就労開始年齢が退職年齢より後です")

    a = plan.assets
    for label, value in (
        ("現金", a.cash), ("預金", a.savings), ("株式", a.stocks),
        ("投資信託", a.investment_trust), ("不動産", a.real_estate),
        ("ローン", a.loans), ("クレジットカード", a.credit_cards),
    ):
        _check_non_negative(errors, label, value)

    for event in plan.life_events:
        _check_non_negative(errors, f"ライフイベント「{event.description}」の金額", event.amount)

    return errors
