"""Single source-of-truth state container around the pure projection."""

import dataclasses

from lifeplan_sim_jp.params import Parameters, round1
from lifeplan_sim_jp.profiles import (
    AssetsLiabilities,
    Household,
    IncomeProfile,
    LifeEvent,
    LifePlan,
)
from lifeplan_sim_jp.simulation import (
    CASH_FLOW_FIELDS,
    CashFlowRow,
    accumulate_assets,
    simulate_lifeplan,
)


class LifePlanStore:
    """Holds one LifePlan snapshot and its derived cash-flow table.

    Every committed edit replaces the snapshot and triggers a full recompute.
    Manual cell overrides are kept in a separate layer: they survive
    recompute() of the same snapshot and are discarded by profile edits.
    The computed table is built off to the side and swapped in with a single
    assignment, so readers never observe a partially built year sequence.
    """

    def __init__(self, plan: LifePlan | None = None):
        self._plan = plan if plan is not None else LifePlan()
        self._result: dict = {}
        self._overrides: dict[int, dict[str, float]] = {}
        self.initialize_cash_flow()

    @property
    def plan(self) -> LifePlan:
        return self._plan

    # -- committed edits ----------------------------------------------------

    def _commit(self, plan: LifePlan) -> None:
        self._plan = plan
        self.initialize_cash_flow()

    def set_household(self, **changes) -> None:
        self._commit(dataclasses.replace(
            self._plan, household=dataclasses.replace(self._plan.household, **changes),
        ))

    def set_income(self, **changes) -> None:
        self._commit(dataclasses.replace(
            self._plan, income=dataclasses.replace(self._plan.income, **changes),
        ))

    def set_assets_liabilities(self, **changes) -> None:
        self._commit(dataclasses.replace(
            self._plan, assets=dataclasses.replace(self._plan.assets, **changes),
        ))

    def set_parameters(self, **changes) -> None:
        self._commit(dataclasses.replace(
            self._plan, parameters=dataclasses.replace(self._plan.parameters, **changes),
        ))

    def add_life_event(self, event: LifeEvent) -> None:
        self._commit(dataclasses.replace(
            self._plan, life_events=self._plan.life_events + (event,),
        ))

    def remove_life_event(self, index: int) -> None:
        events = self._plan.life_events
        if not 0 <= index < len(events):
            raise IndexError(f"ライフイベント番号{index}は存在しません（{len(events)}件）")
        self._commit(dataclasses.replace(
            self._plan, life_events=events[:index] + events[index + 1:],
        ))

    def replace_plan(
        self,
        household: Household | None = None,
        income: IncomeProfile | None = None,
        assets: AssetsLiabilities | None = None,
        parameters: Parameters | None = None,
    ) -> None:
        """Swap whole records in one commit (one recompute)."""
        changes = {
            name: value for name, value in (
                ("household", household), ("income", income),
                ("assets", assets), ("parameters", parameters),
            ) if value is not None
        }
        self._commit(dataclasses.replace(self._plan, **changes))

    # -- derived table ------------------------------------------------------

    def initialize_cash_flow(self) -> None:
        """Full recompute from the current snapshot; drops manual overrides."""
        result = simulate_lifeplan(self._plan)
        self._result, self._overrides = result, {}

    def recompute(self) -> None:
        """Recompute the same snapshot, keeping manual overrides."""
        self._result = simulate_lifeplan(self._plan)

    def update_cash_flow_value(self, year: int, field: str, value: float) -> None:
        """Override one cell of the table (last write wins), rounded like computed cells."""
        if year not in self._result["cash_flow"]:
            raise KeyError(f"{year}年はシミュレーション期間外です")
        if field not in CASH_FLOW_FIELDS:
            raise KeyError(f"不明な項目です: {field}")
        self._overrides.setdefault(year, {})[field] = round1(value)

    def clear_override(self, year: int, field: str | None = None) -> None:
        if field is None:
            self._overrides.pop(year, None)
        elif year in self._overrides:
            self._overrides[year].pop(field, None)
            if not self._overrides[year]:
                del self._overrides[year]

    @property
    def overrides(self) -> dict[int, dict[str, float]]:
        return {year: dict(cells) for year, cells in self._overrides.items()}

    @property
    def computed_cash_flow(self) -> dict[int, CashFlowRow]:
        """Engine output without overrides (copies)."""
        return {year: dataclasses.replace(row) for year, row in self._result["cash_flow"].items()}

    @property
    def cash_flow(self) -> dict[int, CashFlowRow]:
        """Table as displayed: engine output with manual overrides applied."""
        table = self.computed_cash_flow
        for year, cells in self._overrides.items():
            table[year] = dataclasses.replace(table[year], **cells)
        return table

    @property
    def simulation(self) -> dict:
        """Engine result without overrides (copies; edit cells via update_cash_flow_value)."""
        return {
            **self._result,
            "cash_flow": self.computed_cash_flow,
            "closing_assets": dict(self._result["closing_assets"]),
            "net_balance": dict(self._result["net_balance"]),
        }

    def balances(self) -> tuple[dict[int, float], dict[int, float]]:
        """(net_balance, closing_assets) of the displayed table."""
        return accumulate_assets(self.cash_flow, self._result["initial_assets"])
