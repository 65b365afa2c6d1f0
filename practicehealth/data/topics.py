"""
Topic breakdown per category.

A response belongs to the first topic (in declaration order) whose tag
occurs in its lower-cased question id. Declaration order is also the
tie-break when two topics score the same.
"""

from types import MappingProxyType

from practicehealth.core.enums import Category

CATEGORY_TOPICS = MappingProxyType({
    Category.FINANCIAL: (
        ("Revenue & Pricing", ("pricing", "price", "fee")),
        ("Cash Flow Management", ("cashflow", "cash-flow", "cash_flow", "cash")),
        ("Billing & Collections", ("billing", "collection", "invoice", "receivable", "claim")),
        ("Financial Record Keeping", ("record", "bookkeeping", "accounting", "reporting")),
        ("Profit Margins", ("profit", "margin", "cost", "expense")),
        ("Revenue Diversification", ("revenue", "diversif", "stream")),
    ),
    Category.OPERATIONS: (
        ("Appointment Scheduling", ("schedul", "booking", "appointment", "noshow", "no-show", "cancel")),
        ("Patient Throughput", ("throughput", "volume", "capacity", "wait")),
        ("Documentation Efficiency", ("document", "notes", "admin")),
        ("Staff Utilization", ("utiliz", "utilis", "productiv", "staff")),
        ("Process Standardization", ("process", "workflow", "standard", "sop")),
        ("Quality Control Measures", ("quality", "audit", "review")),
    ),
    Category.PATIENT_CARE: (
        ("Outcome Measurement", ("outcome", "measure")),
        ("Treatment Protocols", ("treatment", "protocol", "plan")),
        ("Patient Satisfaction", ("satisf", "experience", "feedback", "nps")),
        ("Clinical Documentation", ("document", "record", "notes")),
        ("Evidence-Based Practice", ("evidence", "research", "guideline")),
    ),
    Category.TECHNOLOGY: (
        ("EMR Utilization", ("emr", "ehr", "pms", "software", "system")),
        ("Data Security", ("security", "backup", "password", "cyber", "mfa")),
        ("Online Booking", ("online", "booking", "portal")),
        ("Telehealth Capabilities", ("telehealth", "video", "remote")),
        ("System Integration", ("integrat", "api", "sync")),
    ),
    Category.COMPLIANCE: (
        ("AHPRA Registration", ("ahpra", "registration", "licen")),
        ("Professional Indemnity Insurance", ("insurance", "indemnity")),
        ("Clinical Record Keeping", ("record", "document")),
        ("Privacy Compliance", ("privacy", "hipaa", "consent", "data")),
        ("WorkCover Requirements", ("workcover", "ndis", "dva", "program")),
        ("Safety Standards", ("safety", "infection", "whs", "hazard")),
    ),
    Category.FACILITIES: (
        ("Space Utilization", ("space", "room", "layout")),
        ("Equipment Maintenance", ("equipment", "maintenance", "repair")),
        ("Accessibility", ("access", "parking", "disab")),
        ("Cleanliness & Infection Control", ("clean", "infection", "hygiene")),
        ("Lease & Occupancy Costs", ("lease", "rent", "occupancy")),
    ),
    Category.MARKETING: (
        ("Online Presence", ("online", "website", "seo", "social")),
        ("Referral Networks", ("referral", "gp", "network")),
        ("Patient Acquisition", ("new-patient", "acquisition", "lead", "campaign")),
        ("Brand & Reputation", ("brand", "review", "reputation")),
        ("Marketing ROI", ("roi", "budget", "spend", "track")),
    ),
    Category.GEOGRAPHY: (
        ("Market Reach", ("reach", "catchment", "demograph")),
        ("Competition", ("compet", "saturation")),
        ("Accessibility & Transport", ("transport", "access", "parking", "travel")),
        ("Community Integration", ("community", "partner", "local")),
        ("Multi-site Coverage", ("site", "location", "branch")),
    ),
    Category.STAFFING: (
        ("Recruitment", ("recruit", "hiring", "hire")),
        ("Retention & Turnover", ("retention", "turnover", "engagement")),
        ("Professional Development", ("training", "cpd", "development", "education")),
        ("Performance Management", ("performance", "kpi", "appraisal")),
        ("Workload & Rostering", ("roster", "workload", "overtime", "leave")),
    ),
    Category.AUTOMATION: (
        ("Appointment Reminders", ("reminder", "sms", "notification")),
        ("Billing Automation", ("billing", "invoice", "payment")),
        ("Intake Automation", ("intake", "form", "onboarding")),
        ("Reporting Automation", ("report", "dashboard", "analytics")),
        ("Workflow Automation", ("workflow", "task", "automat")),
    ),
})
