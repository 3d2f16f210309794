from pydantic import Field, field_validator
from typing import List, Literal

from buildex.core.rate_tables import DEPOSIT_NORMS, STAMP_DUTY_RATES
from buildex.models.base_model import CamelModel

# --- EMI ---
class EMIRequest(CamelModel):
    principal: float = Field(..., gt=0)
    annual_rate_pct: float = Field(8.5, ge=0, le=50)
    tenure_years: int = Field(20, gt=0, le=40)
    include_schedule: bool = False

class AmortizationRow(CamelModel):
    month: int
    payment: float
    principal: float
    interest: float
    balance: float

class EMIResult(CamelModel):
    emi: int
    months: int
    total_payment: int
    total_interest: int
    schedule: List[AmortizationRow] = []

# --- Affordability ---
class AffordabilityRequest(CamelModel):
    monthly_income: float = Field(..., ge=0)
    existing_emis: float = Field(0, ge=0)
    annual_rate_pct: float = Field(8.5, ge=0, le=50)
    tenure_years: int = Field(20, gt=0, le=40)

class AffordabilityResult(CamelModel):
    max_emi: int
    loan_amount: int
    affordable_price: int

# --- Loan eligibility ---
class EligibilityRequest(CamelModel):
    annual_income: float = Field(..., ge=0)
    age: int = Field(..., ge=18, le=80)
    employment_type: Literal["salaried", "self_employed"] = "salaried"
    existing_liabilities: float = Field(0, ge=0, description="Existing monthly obligations")

class EligibilityResult(CamelModel):
    max_loan_eligibility: int
    max_tenure: int
    estimated_emi: int

# --- Stamp duty ---
class StampDutyRequest(CamelModel):
    price: float = Field(..., gt=0)
    state: str = "maharashtra"
    buyer_gender: Literal["male", "female"] = "male"

    @field_validator("state")
    @classmethod
    def known_state(cls, value: str) -> str:
        value = value.strip().lower()
        if value not in STAMP_DUTY_RATES:
            raise ValueError(f"Unsupported state '{value}'")
        return value

class StampDutyResult(CamelModel):
    stamp_duty_rate_pct: float
    registration_rate_pct: float
    stamp_duty: int
    registration: int
    total: int

# --- Rental deposit ---
class DepositRequest(CamelModel):
    monthly_rent: float = Field(..., gt=0)
    city: str = "mumbai"

    @field_validator("city")
    @classmethod
    def known_city(cls, value: str) -> str:
        value = value.strip().lower()
        if value not in DEPOSIT_NORMS:
            raise ValueError(f"Unsupported city '{value}'")
        return value

class DepositResult(CamelModel):
    min_months: int
    max_months: int
    typical_months: int
    min_deposit: int
    max_deposit: int
    typical_deposit: int
    broker_fee: int
    advance_rent: int
    total_move_in: int

# --- Rent vs buy ---
class RentVsBuyRequest(CamelModel):
    price: float = Field(..., gt=0)
    monthly_rent: float = Field(..., gt=0)
    years: int = Field(10, ge=1, le=30)
    appreciation_pct: float = Field(6, ge=-50, le=50)
    rent_increase_pct: float = Field(5, ge=0, le=50)
    down_payment_pct: float = Field(20, ge=0, le=100)
    annual_rate_pct: float = Field(8.5, ge=0, le=50)

class RentVsBuyResult(CamelModel):
    emi: int
    total_emi_paid: int
    future_value: int
    total_buy_cost: int
    net_buy_cost: int
    total_rent_paid: int
    investment_returns: int
    net_rent_cost: int
    buy_better: bool
    savings: int
