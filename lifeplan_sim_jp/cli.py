"""CLI entry point for a single life-plan projection."""

import sys
from pathlib import Path

from lifeplan_sim_jp.config import parse_args
from lifeplan_sim_jp.events import describe_year_events
from lifeplan_sim_jp.export import default_csv_filename, write_cash_flow_csv
from lifeplan_sim_jp.profiles import LifePlan, MaritalStatus, OwnHousing
from lifeplan_sim_jp.simulation import simulate_lifeplan
from lifeplan_sim_jp.validation import validate_plan


def _print_header(plan: LifePlan):
    hh, income, params = plan.household, plan.income, plan.parameters
    end_year = hh.start_year + hh.horizon_years - 1
    print("=" * 80)
    print(f"ライフプラン・シミュレーション（{hh.start_year}年-{end_year}年、{hh.current_age}歳-{hh.death_age}歳）")
    print(f"  純資産: {plan.assets.net_assets:.0f}万円（資産{plan.assets.total_assets:.0f}万 - 負債{plan.assets.total_liabilities:.0f}万）")
    print(f"  年収: {income.annual_income:.0f}万円（昇給{income.raise_rate:.1f}%/年、{income.work_start_age}-{income.work_end_age}歳、年金{income.pension_start_age}歳〜）")
    if hh.marital_status is not MaritalStatus.SINGLE and income.spouse is not None:
        print(f"  配偶者年収: {income.spouse.annual_income:.0f}万円（{income.spouse.work_start_age}-{income.spouse.work_end_age}歳）")
    print(f"  基本生活費: {hh.monthly_living_expense:.1f}万円/月（物価上昇{params.inflation_rate:.1f}%/年）")
    if isinstance(hh.housing, OwnHousing):
        h = hh.housing
        print(f"  住宅: {h.purchase_year}年購入 {h.purchase_price:.0f}万円（借入{h.loan_amount:.0f}万・金利{h.interest_rate:.2f}%・{h.loan_term_years}年）")
    else:
        print(f"  住宅: 賃貸 {hh.housing.monthly_rent:.1f}万円/月（上昇{hh.housing.annual_increase_rate:.1f}%/年）")
    n_children = len(hh.children) + len(hh.planned_children)
    if n_children:
        print(f"  教育費: 子{n_children}人（教育費上昇{params.education_cost_increase_rate:.1f}%/年）")
    else:
        print("  教育費: なし")
    print(f"  運用利回り: {params.investment_return:.1f}%/年")
    print("=" * 80)
    print()


def _print_yearly_table(plan: LifePlan, result: dict, every: int):
    hh = plan.household
    print("【年次キャッシュフロー（万円）】")
    print("-" * 120)
    print(
        f"{'年度':<6} {'年齢':<4} {'主収入':>9} {'副収入':>9} {'配偶者':>9} {'運用益':>8} "
        f"{'生活費':>9} {'住居費':>8} {'教育費':>8} {'その他':>8} {'収支':>9} {'総資産':>11}  イベント"
    )
    print("-" * 120)
    years = list(result["cash_flow"])
    for i, year in enumerate(years):
        if i % every != 0 and i != len(years) - 1:
            continue
        row = result["cash_flow"][year]
        print(
            f"{year:<6} {hh.age_in(year):<4} "
            f"{row.main_income:>9.1f} {row.side_income:>9.1f} {row.spouse_income:>9.1f} "
            f"{row.investment_income:>8.1f} {row.living_expense:>9.1f} {row.housing_expense:>8.1f} "
            f"{row.education_expense:>8.1f} {row.other_expense:>8.1f} "
            f"{result['net_balance'][year]:>9.1f} {result['closing_assets'][year]:>11.1f}  "
            f"{describe_year_events(year, hh, plan.life_events)}"
        )
    print("-" * 120)


def _print_summary(plan: LifePlan, result: dict):
    print("\n" + "=" * 80)
    print("【サマリー】")
    print("=" * 80)
    final = result["final_assets"]
    print(f"  初期純資産: {result['initial_assets']:>10.1f}万円")
    print(f"  最終資産({plan.household.death_age}歳): {final:>10.1f}万円 ({final / 10000:.2f}億円)")
    depletion_year = result["depletion_year"]
    if depletion_year is not None:
        age = plan.household.age_in(depletion_year)
        print(f"  ⚠ {depletion_year}年（{age}歳）に資産がマイナスになります")


def _add_cli_args(parser):
    parser.add_argument(
        "--every", type=int, default=1,
        help="年次表の表示間隔・年 (default: 1)",
    )
    parser.add_argument(
        "--csv", type=Path, nargs="?", const=Path(default_csv_filename()), default=None,
        help="キャッシュフロー表をCSVに出力（パス省略時: キャッシュフロー_YYYY-MM-DD.csv）",
    )


def main():
    """Run one projection and print the yearly table."""
    plan, args = parse_args("ライフプラン・シミュレーション", _add_cli_args)

    errors = validate_plan(plan)
    if errors:
        for e in errors:
            print(f"入力エラー: {e}", file=sys.stderr)
        raise SystemExit(1)

    print("シミュレーション実行中...", file=sys.stderr)
    result = simulate_lifeplan(plan)

    _print_header(plan)
    _print_yearly_table(plan, result, max(args.every, 1))
    _print_summary(plan, result)

    if args.csv is not None:
        path = write_cash_flow_csv(plan, result["cash_flow"], args.csv)
        print(f"  → {path}", file=sys.stderr)


if __name__ == "__main__":
    main()
