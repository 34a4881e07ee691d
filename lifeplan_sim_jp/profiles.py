"""Household, income, asset and life-event input records.

All records are frozen: the projection receives immutable snapshots and the
store replaces a whole record on every committed edit.
"""

from dataclasses import dataclass, field
from enum import Enum

from lifeplan_sim_jp.params import Parameters


class Occupation(Enum):
    """職業区分"""
    COMPANY_EMPLOYEE = "company_employee"                    # 会社員・公務員
    SELF_EMPLOYED = "self_employed"                          # 自営業
    PART_TIME_WITH_PENSION = "part_time_with_pension"        # パート（厚生年金あり）
    PART_TIME_WITHOUT_PENSION = "part_time_without_pension"  # パート（厚生年金なし）
    HOMEMAKER = "homemaker"                                  # 専業主婦・主夫


class MaritalStatus(Enum):
    SINGLE = "single"
    MARRIED = "married"
    PLANNING = "planning"  # 結婚予定


class Gender(Enum):
    MALE = "male"
    FEMALE = "female"


class SchoolTrack(Enum):
    """保育園〜高校の進路"""
    PUBLIC = "公立"
    PRIVATE = "私立"
    NONE = "行かない"


class UniversityTrack(Enum):
    """大学の進路"""
    PUBLIC_HUMANITIES = "公立大学（文系）"
    PUBLIC_SCIENCE = "公立大学（理系）"
    PRIVATE_HUMANITIES = "私立大学（文系）"
    PRIVATE_SCIENCE = "私立大学（理系）"
    NONE = "行かない"


class EventType(Enum):
    INCOME = "income"
    EXPENSE = "expense"


@dataclass(frozen=True)
class EducationPlan:
    nursery: SchoolTrack = SchoolTrack.PUBLIC
    preschool: SchoolTrack = SchoolTrack.PUBLIC
    elementary: SchoolTrack = SchoolTrack.PUBLIC
    junior_high: SchoolTrack = SchoolTrack.PUBLIC
    high_school: SchoolTrack = SchoolTrack.PUBLIC
    university: UniversityTrack = UniversityTrack.PUBLIC_HUMANITIES

    @classmethod
    def all_private(cls, university: UniversityTrack = UniversityTrack.PRIVATE_SCIENCE) -> "EducationPlan":
        return cls(
            SchoolTrack.PRIVATE, SchoolTrack.PRIVATE, SchoolTrack.PRIVATE,
            SchoolTrack.PRIVATE, SchoolTrack.PRIVATE, university,
        )

    @classmethod
    def none(cls) -> "EducationPlan":
        return cls(
            SchoolTrack.NONE, SchoolTrack.NONE, SchoolTrack.NONE,
            SchoolTrack.NONE, SchoolTrack.NONE, UniversityTrack.NONE,
        )


@dataclass(frozen=True)
class Child:
    """Existing child."""
    current_age: int
    education_plan: EducationPlan = field(default_factory=EducationPlan)


@dataclass(frozen=True)
class PlannedChild:
    """Child to be born `years_from_now` years after the simulation start."""
    years_from_now: int
    education_plan: EducationPlan = field(default_factory=EducationPlan)


@dataclass(frozen=True)
class RentHousing:
    monthly_rent: float = 0.0          # 家賃（万円/月）
    annual_increase_rate: float = 0.0  # 家賃上昇率（%/年）


@dataclass(frozen=True)
class OwnHousing:
    purchase_year: int
    purchase_price: float              # 物件価格（万円）
    loan_amount: float                 # 借入額（万円）
    interest_rate: float               # 金利（%/年）
    loan_term_years: int               # 返済期間（年）
    maintenance_cost_rate: float = 0.0  # 維持費率（物件価格に対する%/年）


Housing = RentHousing | OwnHousing


@dataclass(frozen=True)
class SpouseProfile:
    """Spouse demographics.

    current_age: used when already married.
    age_at_marriage / marriage_age: spouse's age and head's age at the planned
    marriage (status "planning").
    """
    current_age: int | None = None
    age_at_marriage: int | None = None
    marriage_age: int | None = None
    occupation: Occupation = Occupation.COMPANY_EMPLOYEE


@dataclass(frozen=True)
class Household:
    current_age: int = 30
    start_year: int = 2025
    death_age: int = 80
    gender: Gender = Gender.MALE
    monthly_living_expense: float = 0.0  # 基本生活費（万円/月）
    occupation: Occupation = Occupation.COMPANY_EMPLOYEE
    marital_status: MaritalStatus = MaritalStatus.SINGLE
    housing: Housing = field(default_factory=RentHousing)
    spouse: SpouseProfile | None = None
    children: tuple[Child, ...] = ()
    planned_children: tuple[PlannedChild, ...] = ()

    @property
    def horizon_years(self) -> int:
        """Number of simulated years (both ends inclusive)."""
        return self.death_age - self.current_age + 1

    @property
    def years(self) -> list[int]:
        return [self.start_year + i for i in range(self.horizon_years)]

    def age_in(self, year: int) -> int:
        return self.current_age + (year - self.start_year)


@dataclass(frozen=True)
class OneTimeSideIncome:
    age: int
    amount: float
    description: str = ""


@dataclass(frozen=True)
class RecurringSideIncome:
    monthly_amount: float
    start_age: int
    end_age: int
    description: str = ""


SideIncome = OneTimeSideIncome | RecurringSideIncome


@dataclass(frozen=True)
class SpouseIncome:
    """Spouse income (no raise rate).

    pension_start_age=None falls back to the head's pension start age.
    """
    annual_income: float = 0.0
    severance_pay: float = 0.0
    work_start_age: int = 22
    work_end_age: int = 60
    pension_start_age: int | None = None


@dataclass(frozen=True)
class IncomeProfile:
    annual_income: float = 0.0   # 年収（万円）
    raise_rate: float = 0.0      # 昇給率（%/年）
    severance_pay: float = 0.0   # 退職金（万円）
    work_start_age: int = 22
    work_end_age: int = 60
    pension_start_age: int = 65
    side_incomes: tuple[SideIncome, ...] = ()
    spouse: SpouseIncome | None = None


@dataclass(frozen=True)
class AssetsLiabilities:
    cash: float = 0.0
    savings: float = 0.0
    stocks: float = 0.0
    investment_trust: float = 0.0
    real_estate: float = 0.0
    loans: float = 0.0
    credit_cards: float = 0.0

    @property
    def total_assets(self) -> float:
        return self.cash + self.savings + self.stocks + self.investment_trust + self.real_estate

    @property
    def total_liabilities(self) -> float:
        return self.loans + self.credit_cards

    @property
    def net_assets(self) -> float:
        return self.total_assets - self.total_liabilities


@dataclass(frozen=True)
class LifeEvent:
    year: int
    description: str
    type: EventType
    category: str = "その他"
    amount: float = 0.0

    @property
    def signed_amount(self) -> float:
        return self.amount if self.type is EventType.INCOME else -self.amount


@dataclass(frozen=True)
class LifePlan:
    """Complete input snapshot for one projection run."""
    household: Household = field(default_factory=Household)
    income: IncomeProfile = field(default_factory=IncomeProfile)
    assets: AssetsLiabilities = field(default_factory=AssetsLiabilities)
    parameters: Parameters = field(default_factory=Parameters)
    life_events: tuple[LifeEvent, ...] = ()
