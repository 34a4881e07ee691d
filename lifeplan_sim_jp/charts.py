"""Chart generation for life-plan projection results."""

import platform
from pathlib import Path

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import matplotlib.ticker as ticker

COLOR_ASSETS = "#1f77b4"
COLOR_EXPENSE = "#c0392b"
COLOR_INCOME = "#27ae60"

EXPENSE_SERIES = (
    ("living_expense", "生活費", "#66c2a5"),
    ("housing_expense", "住居費", "#8da0cb"),
    ("education_expense", "教育費", "#fc8d62"),
    ("other_expense", "その他支出", "#e78ac3"),
)


def _setup_japanese_font():
    """Configure matplotlib to use a Japanese font."""
    system = platform.system()
    if system == "Darwin":
        font_family = "Hiragino Sans"
    elif system == "Linux":
        font_family = "Noto Sans CJK JP"
    else:
        font_family = "sans-serif"
    plt.rcParams["font.family"] = font_family
    plt.rcParams["axes.unicode_minus"] = False


def _format_oku_axis(ax: plt.Axes):
    """万円 on the left axis, 億円 on the right."""
    ax.yaxis.set_major_formatter(
        ticker.FuncFormatter(lambda x, _: f"{x:,.0f}")
    )
    ax_right = ax.secondary_yaxis("right")
    ax_right.yaxis.set_major_formatter(
        ticker.FuncFormatter(lambda x, _: f"{x / 10000:.1f}億" if x != 0 else "0")
    )
    ax_right.set_ylabel("")


def _output_file(output_path: Path, stem: str, name: str) -> Path:
    output_path.mkdir(parents=True, exist_ok=True)
    suffix = f"-{name}" if name else ""
    return output_path / f"{stem}{suffix}.png"


def plot_trajectory(
    result: dict, output_path: Path, name: str = "",
    event_markers: list[tuple[int, float, str]] | None = None,
) -> Path:
    """Line chart of closing assets by year.

    Args:
        result: simulate_lifeplan() return dict.
        output_path: directory to save the PNG.
        name: optional filename suffix ("30" → "trajectory-30.png").
        event_markers: [(year, signed_amount, label), ...] from events.event_markers().

    Returns:
        Path to the generated PNG file.
    """
    _setup_japanese_font()

    years = list(result["closing_assets"])
    assets = list(result["closing_assets"].values())

    fig, ax = plt.subplots(figsize=(14, 8))
    ax.plot(years, assets, color=COLOR_ASSETS, linewidth=2, label="総資産")
    ax.axhline(0, color="black", linewidth=1.5, zorder=5)
    ax.set_xlabel("年度")
    ax.set_ylabel("総資産（万円）")
    ax.set_title("資産推移とライフイベント")
    ax.legend(loc="upper left")
    ax.grid(True, alpha=0.3)
    _format_oku_axis(ax)

    depletion_year = result.get("depletion_year")
    if depletion_year is not None:
        ax.axvline(depletion_year, color=COLOR_EXPENSE, linewidth=2, linestyle=":")
        ax.annotate(
            f"{depletion_year}年 資産枯渇",
            xy=(depletion_year, ax.get_ylim()[1] * 0.85),
            fontsize=11, fontweight="bold", color=COLOR_EXPENSE,
            ha="right",
            bbox=dict(boxstyle="round,pad=0.3", fc="white", ec=COLOR_EXPENSE, alpha=0.9),
        )

    if event_markers and years:
        y_lo, y_hi = ax.get_ylim()
        visible = [m for m in event_markers if years[0] <= m[0] <= years[-1]]
        for i, (evt_year, evt_amount, evt_label) in enumerate(visible):
            color = COLOR_INCOME if evt_amount >= 0 else COLOR_EXPENSE
            ax.axvline(evt_year, color="#888888", linewidth=0.7, linestyle=":", alpha=0.4, zorder=3)
            if evt_amount > 0:
                label = f"+{evt_label} {evt_amount:,.0f}万"
            elif evt_amount < 0:
                label = f"▲{evt_label} {abs(evt_amount):,.0f}万"
            else:
                label = evt_label
            # 4段で交互に配置
            y_pos = y_lo + (y_hi - y_lo) * (0.05 + 0.07 * (i % 4))
            ax.annotate(
                label,
                xy=(evt_year, y_pos),
                fontsize=10, color=color,
                ha="center", va="bottom",
                bbox=dict(boxstyle="round,pad=0.5", fc="white", ec=color, alpha=0.9, linewidth=0.8),
                zorder=10,
            )

    filepath = _output_file(output_path, "trajectory", name)
    fig.tight_layout()
    fig.savefig(filepath, dpi=150)
    plt.close(fig)
    return filepath


def plot_cashflow_stack(result: dict, output_path: Path, name: str = "") -> Path:
    """Stacked yearly expenses against total income and the net balance."""
    _setup_japanese_font()

    cash_flow = result["cash_flow"]
    if not cash_flow:
        raise ValueError("No cash-flow rows for chart")

    years = list(cash_flow)
    rows = list(cash_flow.values())

    fig, ax = plt.subplots(figsize=(14, 8))
    # その他支出は収入イベントで負になり得るので積み上げは0で切る
    ax.stackplot(
        years,
        *[[max(getattr(row, key), 0.0) for row in rows] for key, _, _ in EXPENSE_SERIES],
        labels=[label for _, label, _ in EXPENSE_SERIES],
        colors=[color for _, _, color in EXPENSE_SERIES],
        alpha=0.75,
    )
    ax.plot(years, [row.total_income for row in rows], color=COLOR_ASSETS, linewidth=2, label="収入合計")
    ax.plot(
        years, list(result["net_balance"].values()),
        color=COLOR_EXPENSE, linewidth=1.8, linestyle="--", label="年間収支",
    )
    ax.axhline(0, color="black", linewidth=2.0, zorder=5)
    ax.set_xlabel("年度")
    ax.set_ylabel("年間キャッシュフロー（万円）")
    ax.set_title("キャッシュフロー積み上げ（年次）")
    ax.grid(True, alpha=0.3)
    ax.legend(loc="upper left", fontsize=9)

    filepath = _output_file(output_path, "cashflow", name)
    fig.tight_layout()
    fig.savefig(filepath, dpi=150, bbox_inches="tight")
    plt.close(fig)
    return filepath
