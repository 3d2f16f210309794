from typing import Dict

from fastapi import APIRouter, Depends

from buildex.core.rate_tables import DEPOSIT_NORMS, STAMP_DUTY_RATES
from buildex.models.calculator_model import (
    AffordabilityRequest,
    AffordabilityResult,
    DepositRequest,
    DepositResult,
    EligibilityRequest,
    EligibilityResult,
    EMIRequest,
    EMIResult,
    RentVsBuyRequest,
    RentVsBuyResult,
    StampDutyRequest,
    StampDutyResult,
)
from buildex.services.Calculator_service import CalculatorService

router = APIRouter(prefix="/calculators", tags=["calculators"])

def get_calculator_service() -> CalculatorService:
    return CalculatorService()

@router.post("/emi", response_model=EMIResult)
async def emi_endpoint(request: EMIRequest, service: CalculatorService = Depends(get_calculator_service)):
    return service.emi(request.principal, request.annual_rate_pct, request.tenure_years, request.include_schedule)

@router.post("/affordability", response_model=AffordabilityResult)
async def affordability_endpoint(request: AffordabilityRequest, service: CalculatorService = Depends(get_calculator_service)):
    return service.affordability(request.monthly_income, request.existing_emis, request.annual_rate_pct, request.tenure_years)

@router.post("/eligibility", response_model=EligibilityResult)
async def eligibility_endpoint(request: EligibilityRequest, service: CalculatorService = Depends(get_calculator_service)):
    return service.eligibility(request.annual_income, request.age, request.employment_type, request.existing_liabilities)

@router.post("/stamp-duty", response_model=StampDutyResult)
async def stamp_duty_endpoint(request: StampDutyRequest, service: CalculatorService = Depends(get_calculator_service)):
    return service.stamp_duty(request.price, request.state, request.buyer_gender)

@router.get("/stamp-duty/states", response_model=Dict[str, str])
async def stamp_duty_states():
    return {key: rates.name for key, rates in STAMP_DUTY_RATES.items()}

@router.post("/deposit", response_model=DepositResult)
async def deposit_endpoint(request: DepositRequest, service: CalculatorService = Depends(get_calculator_service)):
    return service.deposit(request.monthly_rent, request.city)

@router.get("/deposit/cities", response_model=Dict[str, str])
async def deposit_cities():
    return {key: norm.name for key, norm in DEPOSIT_NORMS.items()}

@router.post("/rent-vs-buy", response_model=RentVsBuyResult)
async def rent_vs_buy_endpoint(request: RentVsBuyRequest, service: CalculatorService = Depends(get_calculator_service)):
    return service.rent_vs_buy(
        request.price,
        request.monthly_rent,
        request.years,
        appreciation_pct=request.appreciation_pct,
        rent_increase_pct=request.rent_increase_pct,
        down_payment_pct=request.down_payment_pct,
        annual_rate_pct=request.annual_rate_pct,
    )
