"""TOML config loader with CLI > config > default resolution."""

import argparse
import sys
import tomllib
from pathlib import Path
from typing import Callable

from lifeplan_sim_jp.params import Parameters
from lifeplan_sim_jp.profiles import (
    AssetsLiabilities,
    Child,
    EducationPlan,
    EventType,
    Gender,
    Household,
    IncomeProfile,
    LifeEvent,
    LifePlan,
    MaritalStatus,
    Occupation,
    OneTimeSideIncome,
    OwnHousing,
    PlannedChild,
    RecurringSideIncome,
    RentHousing,
    SchoolTrack,
    SpouseIncome,
    SpouseProfile,
    UniversityTrack,
)

DEFAULT_CONFIG_PATH = Path("config.toml")

# Scalar knobs overridable from the command line
DEFAULTS = {
    "current_age": 30,
    "start_year": 2025,
    "death_age": 80,
    "monthly_living_expense": 0.0,
    "inflation_rate": 1.0,
    "education_cost_increase_rate": 2.0,
    "investment_return": 3.0,
}

_HOUSEHOLD_KEYS = ("current_age", "start_year", "death_age", "monthly_living_expense")
_HOUSEHOLD_ENUM_KEYS = ("gender", "occupation", "marital_status")
_PARAMETER_KEYS = ("inflation_rate", "education_cost_increase_rate", "investment_return")

SECTIONS = (
    "household", "housing", "spouse", "children", "planned_children",
    "income", "assets", "liabilities", "parameters", "life_events",
)


def load_config(path: Path | None = None) -> dict:
    """Load TOML config file. Returns empty dict if file doesn't exist."""
    if path is None:
        path = DEFAULT_CONFIG_PATH
    if not path.exists():
        return {}
    try:
        with open(path, "rb") as f:
            raw = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        print(f"設定ファイルの読み込みに失敗: {path}: {e}", file=sys.stderr)
        raise SystemExit(1)
    # Flatten scalar knobs so resolve() can look them up like CLI flags
    for section, keys in (("household", _HOUSEHOLD_KEYS), ("parameters", _PARAMETER_KEYS)):
        for key in keys:
            if key in raw.get(section, {}):
                raw.setdefault(key, raw[section][key])
    return raw


def create_parser(description: str) -> argparse.ArgumentParser:
    """Create argparse parser with shared simulation flags."""
    d = DEFAULTS
    parser = argparse.ArgumentParser(description=description)
    parser.add_argument("--config", type=Path, default=None, help="設定ファイルパス (default: config.toml)")
    parser.add_argument("--current-age", type=int, default=None, help=f"現在の年齢 (default: {d['current_age']})")
    parser.add_argument("--start-year", type=int, default=None, help=f"シミュレーション開始年 (default: {d['start_year']})")
    parser.add_argument("--death-age", type=int, default=None, help=f"想定寿命 (default: {d['death_age']})")
    parser.add_argument("--monthly-living-expense", type=float, default=None, help=f"基本生活費・万円/月 (default: {d['monthly_living_expense']})")
    parser.add_argument("--inflation-rate", type=float, default=None, help=f"物価上昇率・%%/年 (default: {d['inflation_rate']})")
    parser.add_argument("--education-cost-increase-rate", type=float, default=None, help=f"教育費上昇率・%%/年 (default: {d['education_cost_increase_rate']})")
    parser.add_argument("--investment-return", type=float, default=None, help=f"運用利回り・%%/年 (default: {d['investment_return']})")
    return parser


def resolve(args: argparse.Namespace, config: dict) -> dict:
    """Resolve values with priority: CLI flag > config.toml > hardcoded default."""
    resolved = {}
    for key, default in DEFAULTS.items():
        cli_val = getattr(args, key, None)
        resolved[key] = cli_val if cli_val is not None else config.get(key, default)
    return resolved


def _enum(enum_cls, value, label: str):
    """Convert a config string to an enum member."""
    try:
        return enum_cls(value)
    except ValueError:
        choices = ", ".join(str(m.value) for m in enum_cls)
        raise ValueError(f"{label}の値が不正です: {value!r}（{choices}）") from None


def _build(cls, values: dict, label: str):
    try:
        return cls(**values)
    except TypeError as e:
        raise ValueError(f"[{label}] の項目が不正です: {e}") from None


def _check_keys(values: dict, allowed, label: str) -> None:
    unknown = [key for key in values if key not in allowed]
    if unknown:
        raise ValueError(f"[{label}] に不明な項目があります: {', '.join(unknown)}")


def parse_education_plan(raw: dict | None) -> EducationPlan:
    """{"nursery": "公立", ..., "university": "私立大学（理系）"} → EducationPlan."""
    raw = dict(raw or {})
    values = {}
    for key in ("nursery", "preschool", "elementary", "junior_high", "high_school"):
        if key in raw:
            values[key] = _enum(SchoolTrack, raw.pop(key), f"education_plan.{key}")
    if "university" in raw:
        values["university"] = _enum(UniversityTrack, raw.pop("university"), "education_plan.university")
    if raw:
        raise ValueError(f"[education_plan] に不明な項目があります: {', '.join(raw)}")
    return EducationPlan(**values)


def parse_housing(raw: dict | None) -> RentHousing | OwnHousing:
    """[housing] section: type = "rent" | "own" plus that arrangement's fields."""
    raw = dict(raw or {})
    kind = raw.pop("type", "rent")
    if kind == "rent":
        return _build(RentHousing, raw, "housing")
    if kind == "own":
        return _build(OwnHousing, raw, "housing")
    raise ValueError(f"housing.typeの値が不正です: {kind!r}（rent, own）")


def parse_spouse(raw: dict | None) -> SpouseProfile | None:
    if not raw:
        return None
    raw = dict(raw)
    if "occupation" in raw:
        raw["occupation"] = _enum(Occupation, raw["occupation"], "spouse.occupation")
    return _build(SpouseProfile, raw, "spouse")


def _parse_child_entries(cls, items: list[dict], label: str) -> tuple:
    result = []
    for item in items:
        item = dict(item)
        item["education_plan"] = parse_education_plan(item.get("education_plan"))
        result.append(_build(cls, item, label))
    return tuple(result)


def parse_children(items: list[dict]) -> tuple[Child, ...]:
    return _parse_child_entries(Child, items, "children")


def parse_planned_children(items: list[dict]) -> tuple[PlannedChild, ...]:
    return _parse_child_entries(PlannedChild, items, "planned_children")


def parse_side_incomes(items: list[dict]) -> tuple:
    """[[income.side_incomes]] with type = "one-time" | "recurring"."""
    result = []
    for item in items:
        item = dict(item)
        kind = item.pop("type", "one-time")
        if kind == "one-time":
            result.append(_build(OneTimeSideIncome, item, "income.side_incomes"))
        elif kind == "recurring":
            result.append(_build(RecurringSideIncome, item, "income.side_incomes"))
        else:
            raise ValueError(f"side_incomes.typeの値が不正です: {kind!r}（one-time, recurring）")
    return tuple(result)


def parse_income(raw: dict | None) -> IncomeProfile:
    raw = dict(raw or {})
    side_incomes = parse_side_incomes(raw.pop("side_incomes", []))
    spouse_raw = raw.pop("spouse", None)
    spouse = _build(SpouseIncome, spouse_raw, "income.spouse") if spouse_raw else None
    return _build(
        IncomeProfile, {**raw, "side_incomes": side_incomes, "spouse": spouse}, "income",
    )


def parse_life_events(items: list[dict]) -> tuple[LifeEvent, ...]:
    events = []
    for item in items:
        item = dict(item)
        item["type"] = _enum(EventType, item.get("type", "expense"), "life_events.type")
        events.append(_build(LifeEvent, item, "life_events"))
    return tuple(events)


def build_plan(config: dict, resolved: dict | None = None) -> LifePlan:
    """Build a LifePlan from a loaded config dict and resolved scalar knobs."""
    if resolved is None:
        resolved = {key: config.get(key, default) for key, default in DEFAULTS.items()}
    # トップレベルにはセクションと load_config が展開したスカラーのみ
    _check_keys(config, SECTIONS + tuple(DEFAULTS), "設定ファイル")
    hh = config.get("household", {})
    _check_keys(hh, _HOUSEHOLD_KEYS + _HOUSEHOLD_ENUM_KEYS, "household")
    _check_keys(config.get("parameters", {}), _PARAMETER_KEYS, "parameters")
    household = Household(
        current_age=int(resolved["current_age"]),
        start_year=int(resolved["start_year"]),
        death_age=int(resolved["death_age"]),
        gender=_enum(Gender, hh.get("gender", "male"), "household.gender"),
        monthly_living_expense=float(resolved["monthly_living_expense"]),
        occupation=_enum(Occupation, hh.get("occupation", "company_employee"), "household.occupation"),
        marital_status=_enum(MaritalStatus, hh.get("marital_status", "single"), "household.marital_status"),
        housing=parse_housing(config.get("housing")),
        spouse=parse_spouse(config.get("spouse")),
        children=parse_children(config.get("children", [])),
        planned_children=parse_planned_children(config.get("planned_children", [])),
    )
    assets = _build(
        AssetsLiabilities,
        {**config.get("assets", {}), **config.get("liabilities", {})},
        "assets/liabilities",
    )
    parameters = Parameters(
        inflation_rate=float(resolved["inflation_rate"]),
        education_cost_increase_rate=float(resolved["education_cost_increase_rate"]),
        investment_return=float(resolved["investment_return"]),
    )
    return LifePlan(
        household=household,
        income=parse_income(config.get("income")),
        assets=assets,
        parameters=parameters,
        life_events=parse_life_events(config.get("life_events", [])),
    )


def parse_args(
    description: str,
    add_args_fn: Callable[[argparse.ArgumentParser], None] | None = None,
) -> tuple[LifePlan, argparse.Namespace]:
    """Parse CLI args, load config, resolve values and build the plan.

    Returns (plan, namespace). Config errors exit with status 1.
    """
    parser = create_parser(description)
    if add_args_fn:
        add_args_fn(parser)
    args = parser.parse_args()
    config = load_config(args.config)
    r = resolve(args, config)
    try:
        plan = build_plan(config, r)
    except ValueError as e:
        print(f"設定エラー: {e}", file=sys.stderr)
        raise SystemExit(1)
    return plan, args
