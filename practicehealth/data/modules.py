"""Assessment module catalog used by the progress tracker."""

from practicehealth.core.enums import Category
from practicehealth.core.models import AssessmentModule

# Left out of the module list for solo practices.
SOLO_EXCLUDED_MODULES = ("ops-workflow", "tech-telehealth")

ASSESSMENT_MODULES = (
    # financial
    AssessmentModule(
        "fin-pricing", "Pricing Strategy",
        "Evaluate your pricing model, fee structure, and value-based pricing approach.",
        Category.FINANCIAL, estimated_time_minutes=15, question_count=10, order=1,
    ),
    AssessmentModule(
        "fin-cashflow", "Cash Flow Management",
        "Assess your cash flow tracking, forecasting, and management practices.",
        Category.FINANCIAL, estimated_time_minutes=20, question_count=12, order=2,
    ),
    AssessmentModule(
        "fin-revenue", "Revenue Diversification",
        "Evaluate your revenue streams and opportunities for diversification.",
        Category.FINANCIAL, estimated_time_minutes=15, question_count=8, order=3,
    ),
    AssessmentModule(
        "fin-billing", "Billing and Collections",
        "Assess your billing processes, insurance claims, and collection procedures.",
        Category.FINANCIAL, estimated_time_minutes=25, question_count=15, order=4,
    ),
    AssessmentModule(
        "fin-profitability", "Profitability Analysis",
        "Evaluate your profit margins, cost structure, and financial performance.",
        Category.FINANCIAL, estimated_time_minutes=20, question_count=12, order=5,
    ),
    # operations
    AssessmentModule(
        "ops-scheduling", "Appointment Scheduling",
        "Assess your scheduling system, policies, and efficiency.",
        Category.OPERATIONS, estimated_time_minutes=15, question_count=10, order=1,
    ),
    AssessmentModule(
        "ops-workflow", "Clinical Workflow",
        "Evaluate your clinical processes, patient flow, and operational efficiency.",
        Category.OPERATIONS, estimated_time_minutes=20, question_count=12, order=2,
    ),
    AssessmentModule(
        "ops-documentation", "Documentation Practices",
        "Assess your clinical documentation processes, templates, and efficiency.",
        Category.OPERATIONS, estimated_time_minutes=15, question_count=10, order=3,
    ),
    # patient care
    AssessmentModule(
        "pat-outcomes", "Outcomes Tracking",
        "Evaluate your patient outcome measurement and tracking systems.",
        Category.PATIENT_CARE, estimated_time_minutes=15, question_count=10, order=1,
    ),
    AssessmentModule(
        "pat-experience", "Patient Experience",
        "Assess your patient satisfaction, communication, and experience management.",
        Category.PATIENT_CARE, estimated_time_minutes=15, question_count=10, order=2,
    ),
    # technology
    AssessmentModule(
        "tech-systems", "Practice Management Systems",
        "Evaluate your practice management software, EHR, and technology infrastructure.",
        Category.TECHNOLOGY, estimated_time_minutes=20, question_count=12, order=1,
    ),
    AssessmentModule(
        "tech-telehealth", "Telehealth Capabilities",
        "Assess your telehealth implementation, processes, and technology.",
        Category.TECHNOLOGY, estimated_time_minutes=15, question_count=8, order=2,
        is_required=False,
    ),
    # compliance
    AssessmentModule(
        "comp-privacy", "Privacy Compliance",
        "Evaluate your Privacy Act compliance policies, procedures, and training.",
        Category.COMPLIANCE, estimated_time_minutes=20, question_count=15, order=1,
    ),
    AssessmentModule(
        "comp-documentation", "Documentation Compliance",
        "Assess your clinical documentation compliance with regulatory requirements.",
        Category.COMPLIANCE, estimated_time_minutes=15, question_count=10, order=2,
    ),
)

# Priority used when suggesting which module to do next.
SUGGESTION_CATEGORY_ORDER = (
    Category.FINANCIAL,
    Category.OPERATIONS,
    Category.PATIENT_CARE,
    Category.COMPLIANCE,
    Category.TECHNOLOGY,
    Category.STAFFING,
    Category.MARKETING,
    Category.FACILITIES,
    Category.GEOGRAPHY,
    Category.AUTOMATION,
)
