"""Personal Life-Plan Cash-Flow Projection Package."""

from lifeplan_sim_jp.params import Parameters, growth_factor, round1
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
from lifeplan_sim_jp.income import NET_INCOME_RATIOS, calc_net_income_with_raise
from lifeplan_sim_jp.pension import calc_pension
from lifeplan_sim_jp.housing import calc_housing_expense
from lifeplan_sim_jp.education import calc_education_expense
from lifeplan_sim_jp.events import calc_life_event_net, describe_year_events
from lifeplan_sim_jp.simulation import (
    CASH_FLOW_FIELDS,
    CashFlowRow,
    accumulate_assets,
    project_cash_flow,
    simulate_lifeplan,
)
from lifeplan_sim_jp.store import LifePlanStore
from lifeplan_sim_jp.validation import validate_plan

__all__ = [
    "Parameters",
    "growth_factor",
    "round1",
    "AssetsLiabilities",
    "Child",
    "EducationPlan",
    "EventType",
    "Gender",
    "Household",
    "IncomeProfile",
    "LifeEvent",
    "LifePlan",
    "MaritalStatus",
    "Occupation",
    "OneTimeSideIncome",
    "OwnHousing",
    "PlannedChild",
    "RecurringSideIncome",
    "RentHousing",
    "SchoolTrack",
    "SpouseIncome",
    "SpouseProfile",
    "UniversityTrack",
    "NET_INCOME_RATIOS",
    "calc_net_income_with_raise",
    "calc_pension",
    "calc_housing_expense",
    "calc_education_expense",
    "calc_life_event_net",
    "describe_year_events",
    "CASH_FLOW_FIELDS",
    "CashFlowRow",
    "accumulate_assets",
    "project_cash_flow",
    "simulate_lifeplan",
    "LifePlanStore",
    "validate_plan",
]
