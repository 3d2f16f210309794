"""
Static rate tables for the Indian real estate calculators (approximate values).
"""
from types import MappingProxyType
from typing import Mapping, NamedTuple


class StampDutyRate(NamedTuple):
    name: str
    male_pct: float
    female_pct: float
    registration_pct: float


class DepositNorm(NamedTuple):
    name: str
    min_months: int
    max_months: int
    typical_months: int


STAMP_DUTY_RATES: Mapping[str, StampDutyRate] = MappingProxyType({
    "maharashtra": StampDutyRate("Maharashtra", 6, 5, 1),
    "karnataka": StampDutyRate("Karnataka", 5.6, 5.6, 1),
    "delhi": StampDutyRate("Delhi NCR", 6, 4, 1),
    "tamilnadu": StampDutyRate("Tamil Nadu", 7, 7, 1),
    "gujarat": StampDutyRate("Gujarat", 4.9, 4.9, 1),
    "rajasthan": StampDutyRate("Rajasthan", 6, 5, 1),
    "telangana": StampDutyRate("Telangana", 6, 6, 0.5),
    "westbengal": StampDutyRate("West Bengal", 7, 6, 1),
    "uttarpradesh": StampDutyRate("Uttar Pradesh", 7, 6, 1),
    "haryana": StampDutyRate("Haryana", 7, 5, 1),
    "kerala": StampDutyRate("Kerala", 8, 8, 2),
    "andhrapradesh": StampDutyRate("Andhra Pradesh", 7.5, 7.5, 1),
    "madhyapradesh": StampDutyRate("Madhya Pradesh", 7.5, 7.5, 1),
    "punjab": StampDutyRate("Punjab", 7, 7, 1),
    "bihar": StampDutyRate("Bihar", 6, 5.7, 2),
    "odisha": StampDutyRate("Odisha", 5, 4, 1),
    "goa": StampDutyRate("Goa", 4, 3.5, 1),
    "assam": StampDutyRate("Assam", 8, 8, 1),
    "chhattisgarh": StampDutyRate("Chhattisgarh", 5, 4, 1),
    "jharkhand": StampDutyRate("Jharkhand", 4, 4, 1),
    "uttarakhand": StampDutyRate("Uttarakhand", 5, 3.75, 2),
    "himachalpradesh": StampDutyRate("Himachal Pradesh", 6, 4, 1),
    "tripura": StampDutyRate("Tripura", 5, 5, 1),
    "meghalaya": StampDutyRate("Meghalaya", 9.9, 9.9, 1),
    "manipur": StampDutyRate("Manipur", 7, 7, 1),
    "nagaland": StampDutyRate("Nagaland", 8.25, 8.25, 1),
    "arunachalpradesh": StampDutyRate("Arunachal Pradesh", 6, 6, 1),
    "mizoram": StampDutyRate("Mizoram", 9, 9, 1),
    "sikkim": StampDutyRate("Sikkim", 5, 4, 1),
    "jammukashmir": StampDutyRate("Jammu & Kashmir", 7, 5, 1),
    "chandigarh": StampDutyRate("Chandigarh", 6, 6, 1),
})

# Security deposit, in months of rent
DEPOSIT_NORMS: Mapping[str, DepositNorm] = MappingProxyType({
    "mumbai": DepositNorm("Mumbai", 3, 6, 4),
    "bangalore": DepositNorm("Bangalore", 10, 11, 10),
    "delhi": DepositNorm("Delhi NCR", 2, 3, 2),
    "hyderabad": DepositNorm("Hyderabad", 2, 3, 2),
    "chennai": DepositNorm("Chennai", 3, 6, 3),
    "pune": DepositNorm("Pune", 2, 4, 3),
    "kolkata": DepositNorm("Kolkata", 2, 3, 2),
    "ahmedabad": DepositNorm("Ahmedabad", 2, 3, 2),
})
