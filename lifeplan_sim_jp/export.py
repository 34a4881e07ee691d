"""CSV export of the yearly cash-flow table."""

import csv
from datetime import date
from pathlib import Path

from lifeplan_sim_jp.events import describe_year_events
from lifeplan_sim_jp.params import round1
from lifeplan_sim_jp.profiles import LifePlan
from lifeplan_sim_jp.simulation import CashFlowRow, accumulate_assets

CSV_HEADER = (
    "年度",
    "年齢",
    "イベント",
    "主たる収入（万円）",
    "副業収入（万円）",
    "配偶者の収入（万円）",
    "運用資産（万円）",
    "運用収益（万円）",
    "生活費（万円）",
    "住居費（万円）",
    "教育費（万円）",
    "その他収支（万円）",
    "収支（万円）",
    "総資産（万円）",
)


def default_csv_filename(today: date | None = None) -> str:
    today = today or date.today()
    return f"キャッシュフロー_{today.isoformat()}.csv"


def build_export_rows(plan: LifePlan, rows: dict[int, CashFlowRow]) -> list[list]:
    """One list per year in CSV_HEADER order.

    運用資産 is the balance the year's return is earned on (last year's
    closing assets); 総資産 is the year's closing assets.
    """
    household = plan.household
    balances, closing = accumulate_assets(rows, plan.assets.net_assets)
    previous = round1(plan.assets.net_assets)
    out = []
    for year, row in rows.items():
        out.append([
            year,
            household.age_in(year),
            describe_year_events(year, household, plan.life_events),
            row.main_income,
            row.side_income,
            row.spouse_income,
            previous,
            row.investment_income,
            row.living_expense,
            row.housing_expense,
            row.education_expense,
            row.other_expense,
            balances[year],
            closing[year],
        ])
        previous = closing[year]
    return out


def write_cash_flow_csv(plan: LifePlan, rows: dict[int, CashFlowRow], path: Path) -> Path:
    """Write the table with a UTF-8 BOM (Excel-compatible) and every cell quoted."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8-sig", newline="") as f:
        writer = csv.writer(f, quoting=csv.QUOTE_ALL, lineterminator="\n")
        writer.writerow(CSV_HEADER)
        writer.writerows(build_export_rows(plan, rows))
    return path
