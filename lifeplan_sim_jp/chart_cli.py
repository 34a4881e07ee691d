"""CLI entry point for chart generation."""

import sys
from pathlib import Path

from lifeplan_sim_jp.charts import plot_cashflow_stack, plot_trajectory
from lifeplan_sim_jp.config import parse_args
from lifeplan_sim_jp.events import event_markers
from lifeplan_sim_jp.simulation import simulate_lifeplan
from lifeplan_sim_jp.validation import validate_plan


def _add_chart_args(parser):
    parser.add_argument(
        "--output", type=Path, default=Path("reports/charts"),
        help="出力ディレクトリ (default: reports/charts)",
    )
    parser.add_argument(
        "--name", type=str, default="",
        help="出力ファイル名のサフィックス（例: 30 → trajectory-30.png）",
    )


def main():
    plan, args = parse_args("ライフプラン チャート生成", _add_chart_args)

    errors = validate_plan(plan)
    if errors:
        for e in errors:
            print(f"入力エラー: {e}", file=sys.stderr)
        raise SystemExit(1)

    hh = plan.household
    print(f"シミュレーション（{hh.start_year}年→{hh.start_year + hh.horizon_years - 1}年）...", file=sys.stderr)
    result = simulate_lifeplan(plan)
    if not result["cash_flow"]:
        print("  有効な結果なし", file=sys.stderr)
        return

    markers = event_markers(hh, plan.life_events)
    path = plot_trajectory(result, args.output, name=args.name, event_markers=markers)
    print(f"  → {path}", file=sys.stderr)

    path = plot_cashflow_stack(result, args.output, name=args.name)
    print(f"  → {path}", file=sys.stderr)

    print("完了", file=sys.stderr)


if __name__ == "__main__":
    main()
