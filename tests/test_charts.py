"""Smoke tests for chart generation."""

import pytest
from lifeplan_sim_jp import (
    AssetsLiabilities,
    EventType,
    Household,
    IncomeProfile,
    LifeEvent,
    LifePlan,
    simulate_lifeplan,
)
from lifeplan_sim_jp.charts import plot_cashflow_stack, plot_trajectory
from lifeplan_sim_jp.events import event_markers


@pytest.fixture
def plan():
    return LifePlan(
        household=Household(current_age=30, death_age=60, monthly_living_expense=25),
        income=IncomeProfile(annual_income=400),
        assets=AssetsLiabilities(savings=300),
        life_events=(
            LifeEvent(2030, "車購入", EventType.EXPENSE, amount=300),
            LifeEvent(2040, "相続", EventType.INCOME, amount=500),
        ),
    )


class TestCharts:
    def test_trajectory(self, plan, tmp_path):
        result = simulate_lifeplan(plan)
        markers = event_markers(plan.household, plan.life_events)
        path = plot_trajectory(result, tmp_path, name="test", event_markers=markers)
        assert path == tmp_path / "trajectory-test.png"
        assert path.stat().st_size > 0

    def test_cashflow_stack(self, plan, tmp_path):
        path = plot_cashflow_stack(simulate_lifeplan(plan), tmp_path)
        assert path.name == "cashflow.png"
        assert path.exists()

    def test_cashflow_stack_empty(self, tmp_path):
        result = simulate_lifeplan(LifePlan(household=Household(current_age=50, death_age=40)))
        with pytest.raises(ValueError):
            plot_cashflow_stack(result, tmp_path)
