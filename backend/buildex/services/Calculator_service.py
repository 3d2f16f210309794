import logging
import math
from typing import List

from buildex.core.logger import logs
from buildex.core.rate_tables import DEPOSIT_NORMS, STAMP_DUTY_RATES
from buildex.models.calculator_model import (
    AffordabilityResult,
    AmortizationRow,
    DepositResult,
    EligibilityResult,
    EMIResult,
    RentVsBuyResult,
    StampDutyResult,
)

MAX_EMI_TO_INCOME = 0.4          # EMI should not exceed 40% of monthly income
LOAN_TO_VALUE = 0.8              # 20% down payment
ELIGIBILITY_RATE_PCT = 8.5
REGISTRATION_COST_RATIO = 0.07   # registration and other purchase costs, rent-vs-buy only
ALTERNATE_INVESTMENT_CAGR = 0.10  # equity funds, for the down payment when renting

RETIREMENT_AGE = {"salaried": 60, "self_employed": 65}
INCOME_MULTIPLIER = {"salaried": 6, "self_employed": 4}
MIN_TENURE_YEARS, MAX_TENURE_YEARS = 5, 30


def round_money(amount: float) -> int:
    """Round half up to whole rupees."""
    return int(math.floor(amount + 0.5))


def monthly_rate(annual_rate_pct: float) -> float:
    return annual_rate_pct / 12 / 100


def annuity_payment(principal: float, rate: float, months: int) -> float:
    """Monthly payment for loan 'principal' at monthly 'rate' over 'months'."""
    if rate == 0:
        return principal / months
    f = (1 + rate) ** months
    return principal * rate * f / (f - 1)


def principal_from_payment(payment: float, rate: float, months: int) -> float:
    """Solve principal P from a given monthly payment."""
    if rate == 0:
        return payment * months
    f = (1 + rate) ** months
    return payment * (f - 1) / (rate * f)


def amortization_schedule(principal: float, rate: float, months: int) -> List[AmortizationRow]:
    payment = annuity_payment(principal, rate, months)
    balance = principal
    rows: List[AmortizationRow] = []
    for month in range(1, months + 1):
        interest = balance * rate
        principal_part = payment - interest
        if month == months:
            # absorb floating point drift so the loan closes at exactly zero
            principal_part = balance
        balance -= principal_part
        rows.append(AmortizationRow(
            month=month,
            payment=round(principal_part + interest, 2),
            principal=round(principal_part, 2),
            interest=round(interest, 2),
            balance=round(max(balance, 0.0), 2),
        ))
    return rows


class CalculatorService:
    """Home loan and rental calculators for the property detail page."""

    def emi(self, principal: float, annual_rate_pct: float, tenure_years: int, include_schedule: bool = False) -> EMIResult:
        rate = monthly_rate(annual_rate_pct)
        months = tenure_years * 12
        payment = annuity_payment(principal, rate, months)
        total_payment = payment * months

        schedule = amortization_schedule(principal, rate, months) if include_schedule else []
        return EMIResult(
            emi=round_money(payment),
            months=months,
            total_payment=round_money(total_payment),
            total_interest=round_money(total_payment - principal),
            schedule=schedule,
        )

    def affordability(self, monthly_income: float, existing_emis: float, annual_rate_pct: float, tenure_years: int) -> AffordabilityResult:
        max_emi = monthly_income * MAX_EMI_TO_INCOME - existing_emis
        if max_emi <= 0:
            return AffordabilityResult(max_emi=0, loan_amount=0, affordable_price=0)

        loan_amount = principal_from_payment(max_emi, monthly_rate(annual_rate_pct), tenure_years * 12)
        return AffordabilityResult(
            max_emi=round_money(max_emi),
            loan_amount=round_money(loan_amount),
            affordable_price=round_money(loan_amount / LOAN_TO_VALUE),
        )

    def eligibility(self, annual_income: float, age: int, employment_type: str, existing_liabilities: float) -> EligibilityResult:
        if employment_type not in RETIREMENT_AGE:
            raise ValueError(f"Unknown employment type '{employment_type}'")

        tenure = min(MAX_TENURE_YEARS, max(MIN_TENURE_YEARS, RETIREMENT_AGE[employment_type] - age))

        base = annual_income * INCOME_MULTIPLIER[employment_type]
        base = max(0.0, base - existing_liabilities * 12 * tenure)
        # shorter tenures earn proportionally less
        eligibility = base * min(1.0, tenure / 20)

        estimated_emi = 0.0
        if eligibility > 0:
            estimated_emi = annuity_payment(eligibility, monthly_rate(ELIGIBILITY_RATE_PCT), tenure * 12)

        return EligibilityResult(
            max_loan_eligibility=round_money(eligibility),
            max_tenure=tenure,
            estimated_emi=round_money(estimated_emi),
        )

    def stamp_duty(self, price: float, state: str, buyer_gender: str = "male") -> StampDutyResult:
        rates = STAMP_DUTY_RATES.get(state)
        if rates is None:
            raise ValueError(f"No stamp duty rates for state '{state}'")

        duty_pct = rates.female_pct if buyer_gender == "female" else rates.male_pct
        stamp_duty = price * duty_pct / 100
        registration = price * rates.registration_pct / 100
        return StampDutyResult(
            stamp_duty_rate_pct=duty_pct,
            registration_rate_pct=rates.registration_pct,
            stamp_duty=round_money(stamp_duty),
            registration=round_money(registration),
            total=round_money(stamp_duty + registration),
        )

    def deposit(self, monthly_rent: float, city: str) -> DepositResult:
        norm = DEPOSIT_NORMS.get(city)
        if norm is None:
            raise ValueError(f"No deposit norms for city '{city}'")

        typical = monthly_rent * norm.typical_months
        broker_fee = monthly_rent   # one month
        advance_rent = monthly_rent  # one month
        return DepositResult(
            min_months=norm.min_months,
            max_months=norm.max_months,
            typical_months=norm.typical_months,
            min_deposit=round_money(monthly_rent * norm.min_months),
            max_deposit=round_money(monthly_rent * norm.max_months),
            typical_deposit=round_money(typical),
            broker_fee=round_money(broker_fee),
            advance_rent=round_money(advance_rent),
            total_move_in=round_money(typical + broker_fee + advance_rent),
        )

    def rent_vs_buy(
        self,
        price: float,
        monthly_rent: float,
        years: int,
        appreciation_pct: float = 6,
        rent_increase_pct: float = 5,
        down_payment_pct: float = 20,
        annual_rate_pct: float = 8.5,
    ) -> RentVsBuyResult:
        # Buying
        down_payment = price * down_payment_pct / 100
        loan_amount = price - down_payment
        months = years * 12
        emi = annuity_payment(loan_amount, monthly_rate(annual_rate_pct), months)
        total_emi_paid = emi * months
        future_value = price * (1 + appreciation_pct / 100) ** years
        total_buy_cost = down_payment + total_emi_paid + price * REGISTRATION_COST_RATIO
        net_buy_cost = total_buy_cost - future_value

        # Renting, with the down payment invested instead
        total_rent_paid = 0.0
        current_rent = monthly_rent
        for _ in range(years):
            total_rent_paid += current_rent * 12
            current_rent *= 1 + rent_increase_pct / 100
        investment_returns = down_payment * (1 + ALTERNATE_INVESTMENT_CAGR) ** years
        net_rent_cost = total_rent_paid - (investment_returns - down_payment)

        buy_better = net_buy_cost < net_rent_cost
        logs.log(logging.DEBUG, f"Rent vs buy over {years}y: buy={net_buy_cost:.0f} rent={net_rent_cost:.0f}")

        return RentVsBuyResult(
            emi=round_money(emi),
            total_emi_paid=round_money(total_emi_paid),
            future_value=round_money(future_value),
            total_buy_cost=round_money(total_buy_cost),
            net_buy_cost=round_money(net_buy_cost),
            total_rent_paid=round_money(total_rent_paid),
            investment_returns=round_money(investment_returns),
            net_rent_cost=round_money(net_rent_cost),
            buy_better=buy_better,
            savings=round_money(abs(net_buy_cost - net_rent_cost)),
        )
