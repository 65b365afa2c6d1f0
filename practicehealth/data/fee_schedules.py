"""
Funding-programme fee schedules and Australian physiotherapy financial
benchmarks used by the financial assessment.
"""

from datetime import date

from practicehealth.core.enums import Country, DisciplineType, FeeScheduleType, ServiceType
from practicehealth.core.models import FeeItem, FinancialBenchmark

FY2024 = date(2024, 7, 1)


def _workcover(state: str, label: str, initial: float, standard: float, complex_: float):
    code = state.lower()
    return (
        FeeItem(f"wc-{code}-initial", FeeScheduleType.WORKCOVER, ServiceType.INITIAL,
                f"Initial consultation - {label}", initial, state, FY2024, duration_minutes=60),
        FeeItem(f"wc-{code}-standard", FeeScheduleType.WORKCOVER, ServiceType.STANDARD,
                f"Standard consultation - {label}", standard, state, FY2024, duration_minutes=30),
        FeeItem(f"wc-{code}-complex", FeeScheduleType.WORKCOVER, ServiceType.COMPLEX,
                f"Complex consultation - {label}", complex_, state, FY2024,
                requires_approval=True, duration_minutes=45),
        # Report writing is paid at the complex rate in every state.
        FeeItem(f"wc-{code}-report", FeeScheduleType.WORKCOVER, ServiceType.REPORT,
                f"Report writing - {label}", complex_, state, FY2024),
    )


WORKCOVER_FEES = (
    _workcover("VIC", "WorkSafe Victoria", 159.85, 89.40, 134.10)
    + _workcover("NSW", "SIRA NSW", 169.00, 94.00, 141.00)
    + _workcover("QLD", "WorkCover QLD", 164.60, 91.90, 137.85)
)

DVA_FEES = (
    FeeItem("dva-initial", FeeScheduleType.DVA, ServiceType.INITIAL,
            "Initial consultation - DVA", 95.65, "NATIONAL", FY2024, item_number="PT01"),
    FeeItem("dva-standard", FeeScheduleType.DVA, ServiceType.STANDARD,
            "Standard consultation - DVA", 82.25, "NATIONAL", FY2024, item_number="PT02"),
    FeeItem("dva-complex", FeeScheduleType.DVA, ServiceType.COMPLEX,
            "Complex consultation - DVA", 115.15, "NATIONAL", FY2024,
            requires_approval=True, item_number="PT03"),
    FeeItem("dva-home", FeeScheduleType.DVA, ServiceType.HOME_VISIT,
            "Home visit - DVA", 115.15, "NATIONAL", FY2024,
            requires_approval=True, item_number="PT04"),
    FeeItem("dva-report", FeeScheduleType.DVA, ServiceType.REPORT,
            "Report writing - DVA", 82.25, "NATIONAL", FY2024, item_number="PT55"),
)

_NDIS_START = date(2023, 7, 1)
_NDIS_END = date(2024, 6, 30)
_NDIS_RATE = 193.99

NDIS_FEES = (
    FeeItem("ndis-assessment", FeeScheduleType.NDIS, ServiceType.ASSESSMENT,
            "Initial Assessment - NDIS", _NDIS_RATE, "NATIONAL", _NDIS_START,
            item_number="15_048_0128_1_3", allows_travel=True, expiry_date=_NDIS_END),
    FeeItem("ndis-therapy", FeeScheduleType.NDIS, ServiceType.THERAPY,
            "Therapy Session - NDIS", _NDIS_RATE, "NATIONAL", _NDIS_START,
            item_number="15_047_0128_1_3", allows_travel=True, expiry_date=_NDIS_END),
    FeeItem("ndis-report", FeeScheduleType.NDIS, ServiceType.REPORT,
            "Report Writing - NDIS", _NDIS_RATE, "NATIONAL", _NDIS_START,
            item_number="15_049_0128_1_3", expiry_date=_NDIS_END),
    FeeItem("ndis-travel", FeeScheduleType.NDIS, ServiceType.TRAVEL,
            "Provider Travel - NDIS", _NDIS_RATE, "NATIONAL", _NDIS_START,
            item_number="15_050_0128_1_3", expiry_date=_NDIS_END),
)


def average_fee(fees, service_type: ServiceType) -> float:
    """Mean fee for one service type; 0 when the schedule has none."""
    matching = [item.fee for item in fees if item.service_type == service_type]
    if not matching:
        return 0.0
    return sum(matching) / len(matching)


# -------------------------------------------------
# FINANCIAL BENCHMARKS
# -------------------------------------------------
_SOURCE = "Physiotherapy Benchmarks 2024"
_BENCHMARK_DATE = date(2024, 1, 1)


def _physio_au(id_, metric, description, value, unit):
    return FinancialBenchmark(
        id=id_,
        metric=metric,
        description=description,
        value=value,
        unit=unit,
        discipline=DisciplineType.PHYSIOTHERAPY,
        country=Country.AUSTRALIA,
        source=_SOURCE,
        effective_date=_BENCHMARK_DATE,
    )


FINANCIAL_BENCHMARKS = (
    # revenue
    _physio_au("benchmark-revenue-per-provider", "Revenue per Full-Time Provider",
               "Annual revenue generated per full-time equivalent provider", 250000, "AUD"),
    _physio_au("benchmark-revenue-per-hour", "Revenue per Clinical Hour",
               "Average revenue generated per clinical hour", 150, "AUD"),
    _physio_au("benchmark-utilization-rate", "Provider Utilization Rate",
               "Percentage of available clinical hours utilized", 85, "percent"),
    # expenses
    _physio_au("benchmark-labor-cost", "Labor Cost Percentage",
               "Labor costs as a percentage of total revenue", 55, "percent"),
    _physio_au("benchmark-rent-cost", "Rent Cost Percentage",
               "Rent costs as a percentage of total revenue", 8, "percent"),
    _physio_au("benchmark-operating-expenses", "Operating Expenses Percentage",
               "Operating expenses as a percentage of total revenue", 25, "percent"),
    # profitability
    _physio_au("benchmark-profit-margin", "Net Profit Margin",
               "Net profit as a percentage of total revenue", 15, "percent"),
    _physio_au("benchmark-owner-compensation", "Owner Compensation Percentage",
               "Owner compensation as a percentage of total revenue", 20, "percent"),
    # billing
    _physio_au("benchmark-collection-rate", "Collection Rate",
               "Percentage of billed charges collected", 95, "percent"),
    _physio_au("benchmark-days-in-ar", "Days in Accounts Receivable",
               "Average number of days to collect payment", 30, "days"),
    _physio_au("benchmark-no-show-rate", "No-Show Rate",
               "Percentage of appointments missed without notice", 5, "percent"),
)

# Used per metric when no benchmark row matches the practice.
DEFAULT_FINANCIAL_BENCHMARKS = {
    "benchmark-revenue-per-provider": 250000,
    "benchmark-revenue-per-hour": 150,
    "benchmark-utilization-rate": 85,
    "benchmark-labor-cost": 55,
    "benchmark-rent-cost": 8,
    "benchmark-operating-expenses": 25,
    "benchmark-profit-margin": 15,
    "benchmark-owner-compensation": 20,
    "benchmark-collection-rate": 95,
    "benchmark-days-in-ar": 30,
    "benchmark-no-show-rate": 5,
}
