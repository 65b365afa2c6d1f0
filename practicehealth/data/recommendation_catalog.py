"""Static recommendation catalog. Read-only; filtered and ranked per run."""

from practicehealth.core.enums import (
    Category,
    DisciplineType as D,
    Effort,
    PracticeSize as S,
    Priority,
    RiskLevel,
    Timeframe,
)
from practicehealth.core.models import (
    ROIEstimate,
    Recommendation,
    RegulatoryRelevance,
    Resource,
)

ALL_SIZES = (S.SOLO, S.SMALL, S.MEDIUM, S.LARGE, S.ENTERPRISE)
ALLIED = (D.PHYSIOTHERAPY, D.OCCUPATIONAL_THERAPY, D.SPEECH_THERAPY)
ALLIED_PLUS = ALLIED + (D.CHIROPRACTIC, D.PODIATRY)


RECOMMENDATIONS = (
    # -------------------------------------------------
    # FINANCIAL
    # -------------------------------------------------
    Recommendation(
        id="fin-001",
        title="Implement value-based pricing strategy",
        description=(
            "Transition from hourly or session-based pricing to value-based pricing that "
            "reflects the outcomes and benefits patients receive. Based on physiotherapy "
            "benchmarks, practices with value-based pricing achieve 15-30% higher margins."
        ),
        category=Category.FINANCIAL,
        priority=Priority.HIGH,
        effort=Effort.MODERATE,
        timeframe=Timeframe.SHORT_TERM,
        estimated_roi=ROIEstimate(15, 30, 6),
        implementation_steps=(
            "Analyze current pricing structure and profit margins",
            "Research competitor pricing and market rates using the fee schedule benchmarks",
            "Identify high-value services that can command premium pricing",
            "Develop packages that combine services for better value perception",
            "Create marketing materials explaining the value proposition",
            "Train staff on communicating the value to patients",
            "Implement new pricing structure with existing patients gradually",
        ),
        resources=(
            Resource("Value-Based Pricing Guide for Healthcare Providers",
                     "Comprehensive guide on implementing value-based pricing in healthcare practices", "article"),
            Resource("Pricing Strategy Template",
                     "Excel template for analyzing and setting optimal service prices", "template"),
            Resource("Physiotherapy Fee Schedule Benchmarks",
                     "Current market rates for physiotherapy services by region and practice size", "article"),
        ),
        research_basis="Healthcare Financial Analytics, 2023; Practice Growth, 2023",
        practice_type_relevance=ALLIED,
        practice_size_relevance=ALL_SIZES,
    ),
    Recommendation(
        id="fin-002",
        title="Optimize accounts receivable process",
        description=(
            "Reduce outstanding payments and improve cash flow by implementing a more efficient "
            "accounts receivable process. Physiotherapy benchmarks indicate optimal Days in AR "
            "should be 30 days or less with a collection rate of 95% or more."
        ),
        category=Category.FINANCIAL,
        priority=Priority.HIGH,
        effort=Effort.MODERATE,
        timeframe=Timeframe.IMMEDIATE,
        estimated_roi=ROIEstimate(5, 15, 3),
        implementation_steps=(
            "Audit current accounts receivable and identify patterns in late payments",
            "Implement automated payment reminders at 30, 60, and 90 days",
            "Offer multiple payment options including online and automatic payments",
            "Consider early payment discounts for prompt payment",
            "Train front desk staff on collecting payments at time of service",
            "Develop a clear policy for handling delinquent accounts",
            "Implement regular AR aging reports review",
        ),
        resources=(
            Resource("Healthcare Accounts Receivable Best Practices",
                     "Guide to optimizing accounts receivable specifically for healthcare practices", "article"),
            Resource("Payment Reminder Templates",
                     "Email and letter templates for payment reminders at different stages", "template"),
            Resource("AR Management Dashboard Template",
                     "Excel template for tracking and managing accounts receivable metrics", "tool"),
        ),
        research_basis=(
            "AR management benchmarks [Healthcare Financial Analytics, 2023]; "
            "Cash flow patterns in PT practices [J Healthcare Finance, 2023]"
        ),
        practice_type_relevance=ALLIED_PLUS,
    ),
    Recommendation(
        id="fin-003",
        title="Implement program-specific fee optimization",
        description=(
            "Optimize billing rates for different funding programs (WorkCover, DVA, NDIS) based "
            "on current fee schedules and service delivery costs to maximize profitability while "
            "maintaining compliance."
        ),
        category=Category.FINANCIAL,
        priority=Priority.HIGH,
        effort=Effort.MODERATE,
        timeframe=Timeframe.SHORT_TERM,
        estimated_roi=ROIEstimate(10, 20, 3),
        implementation_steps=(
            "Analyze current fee structure against program-specific fee schedules",
            "Calculate service delivery costs for each program type",
            "Identify services with highest and lowest profit margins",
            "Optimize appointment scheduling to prioritize higher-margin services",
            "Ensure billing codes and documentation meet program requirements",
            "Train staff on program-specific requirements and documentation",
            "Implement regular fee schedule monitoring for updates",
        ),
        resources=(
            Resource("Program Fee Schedule Comparison Tool",
                     "Excel template for comparing fees across different funding programs", "tool"),
            Resource("Service Profitability Calculator",
                     "Tool for calculating true profitability of different service types", "tool"),
        ),
        regulatory_relevance=RegulatoryRelevance(
            authority="WorkSafe, SIRA, WorkCover QLD, DVA, NDIS",
            standard="Program-specific fee schedules and billing requirements",
            risk_level=RiskLevel.HIGH,
        ),
        research_basis="Fee Schedule Benchmarks, 2023; Financial Management Review, 2023",
        geographic_relevance=("Victoria", "New South Wales", "Queensland", "Australia"),
        practice_type_relevance=(D.PHYSIOTHERAPY,),
    ),
    Recommendation(
        id="fin-004",
        title="Introduce a rolling 13-week cash flow forecast",
        description=(
            "Forecast weekly receipts and payments for the next quarter so that funding gaps "
            "are visible before they occur. Benchmarks suggest holding 4-5 months of cash reserve."
        ),
        category=Category.FINANCIAL,
        priority=Priority.MEDIUM,
        effort=Effort.MINIMAL,
        timeframe=Timeframe.SHORT_TERM,
        estimated_roi=ROIEstimate(5, 10, 3),
        implementation_steps=(
            "Export the last six months of receipts and payments from the accounting system",
            "Build a weekly forecast template covering the next 13 weeks",
            "Review the forecast with the practice manager every Monday",
            "Set a minimum cash reserve target and track it monthly",
        ),
        resources=(
            Resource("13-Week Cash Flow Template",
                     "Spreadsheet template for rolling weekly cash flow forecasts", "template"),
        ),
        research_basis="Cash flow patterns in PT practices [J Healthcare Finance, 2023]",
    ),

    # -------------------------------------------------
    # OPERATIONS
    # -------------------------------------------------
    Recommendation(
        id="ops-001",
        title="Streamline patient intake process",
        description=(
            "Reduce administrative burden and improve patient experience by optimizing the "
            "intake process with digital forms and automation. Benchmarks show this can improve "
            "schedule utilization by up to 10%."
        ),
        category=Category.OPERATIONS,
        priority=Priority.HIGH,
        effort=Effort.MODERATE,
        timeframe=Timeframe.SHORT_TERM,
        estimated_roi=ROIEstimate(10, 20, 4),
        implementation_steps=(
            "Audit current intake process and identify bottlenecks",
            "Select a digital intake form solution compatible with your practice management system",
            "Create digital versions of all intake forms",
            "Set up automated email/text system to send forms before appointments",
            "Train staff on the new system and troubleshooting",
            "Implement a process for patients who cannot complete digital forms",
            "Monitor completion rates and adjust the process as needed",
        ),
        resources=(
            Resource("Digital Intake Form Solutions Comparison",
                     "Comparison of top digital intake solutions for healthcare practices", "article"),
            Resource("Patient Communication Templates",
                     "Email and text templates for introducing patients to digital intake process", "template"),
        ),
        research_basis=(
            "Workflow optimization in PT [Operations Management Health, 2023]; "
            "Scheduling efficiency study [Healthcare Operations Research, 2023]"
        ),
        practice_type_relevance=ALLIED,
    ),
    Recommendation(
        id="ops-002",
        title="Implement appointment optimization system",
        description=(
            "Optimize appointment scheduling to achieve the benchmark of 80% or higher schedule "
            "utilization and reduce no-show rates to 10% or lower through strategic scheduling "
            "policies and automated reminders."
        ),
        category=Category.OPERATIONS,
        priority=Priority.HIGH,
        effort=Effort.MODERATE,
        timeframe=Timeframe.IMMEDIATE,
        estimated_roi=ROIEstimate(15, 25, 3),
        implementation_steps=(
            "Analyze current appointment patterns and identify peak/slow periods",
            "Implement strategic scheduling templates based on historical demand",
            "Set up automated appointment reminders via SMS and email",
            "Develop a cancellation policy with appropriate notice requirements",
            "Create a waitlist system for filling cancelled appointments",
            "Train staff on managing the new scheduling system",
            "Monitor and adjust based on utilization metrics",
        ),
        resources=(
            Resource("Scheduling Template Generator",
                     "Tool for creating optimized scheduling templates based on practice patterns", "tool"),
            Resource("No-show Reduction Strategies",
                     "Evidence-based approaches to reducing appointment no-shows", "article"),
        ),
        research_basis=(
            "Scheduling efficiency study [Healthcare Operations Research, 2023]; "
            "Resource utilization in PT [J Healthcare Management, 2023]"
        ),
        practice_type_relevance=(D.PHYSIOTHERAPY,),
    ),
    Recommendation(
        id="ops-003",
        title="Run a daily team huddle with an end-of-day checklist",
        description=(
            "A ten-minute morning huddle and a shared close-down checklist catch schedule gaps, "
            "outstanding notes and unbilled sessions before they accumulate."
        ),
        category=Category.OPERATIONS,
        priority=Priority.MEDIUM,
        effort=Effort.MINIMAL,
        timeframe=Timeframe.IMMEDIATE,
        estimated_roi=ROIEstimate(3, 8, 3),
        implementation_steps=(
            "Agree a fixed ten-minute huddle time before the first appointment",
            "Review gaps in the day's schedule and the waitlist",
            "Use an end-of-day checklist for notes, billing and next-day preparation",
            "Rotate the huddle lead weekly",
        ),
        resources=(
            Resource("Daily Huddle Agenda", "One-page agenda for clinic huddles", "template"),
        ),
    ),

    # -------------------------------------------------
    # PATIENT CARE
    # -------------------------------------------------
    Recommendation(
        id="pat-001",
        title="Implement outcomes tracking system",
        description=(
            "Systematically track and analyze patient outcomes to demonstrate value, improve care "
            "protocols, and support value-based care initiatives. Benchmarks target 30% or more "
            "functional improvement, 40% or more pain reduction, and 25% or more ROM improvement."
        ),
        category=Category.PATIENT_CARE,
        priority=Priority.HIGH,
        effort=Effort.SIGNIFICANT,
        timeframe=Timeframe.SHORT_TERM,
        estimated_roi=ROIEstimate(20, 40, 12),
        implementation_steps=(
            "Select appropriate outcome measures for each condition/treatment",
            "Implement a system for collecting outcome data at defined intervals",
            "Train clinicians on consistent administration of outcome measures",
            "Develop protocols for analyzing and acting on outcomes data",
            "Create reporting templates for sharing outcomes with patients and referrers",
            "Use aggregate data to identify opportunities for protocol improvements",
        ),
        resources=(
            Resource("Physiotherapy Outcome Measures Guide",
                     "Comprehensive guide to validated outcome measures for physiotherapy", "article"),
            Resource("Outcomes Tracking Software Options",
                     "Comparison of software solutions for tracking patient outcomes", "article"),
        ),
        research_basis=(
            "Functional outcome measures [Physical Therapy Research, 2023]; "
            "Pain management efficacy [J Pain Research, 2023]; "
            "ROM improvement standards [Clinical Biomechanics, 2023]"
        ),
        practice_type_relevance=(D.PHYSIOTHERAPY,),
    ),
    Recommendation(
        id="pat-002",
        title="Introduce a post-visit patient feedback survey",
        description=(
            "Send a short satisfaction survey after the first and final visit to track patient "
            "experience against the 85% satisfaction benchmark."
        ),
        category=Category.PATIENT_CARE,
        priority=Priority.MEDIUM,
        effort=Effort.MINIMAL,
        timeframe=Timeframe.IMMEDIATE,
        estimated_roi=ROIEstimate(5, 10, 6),
        implementation_steps=(
            "Choose a three to five question survey including a Net Promoter question",
            "Send the survey automatically after initial and discharge appointments",
            "Review results monthly and respond to negative feedback within 48 hours",
        ),
        resources=(
            Resource("Patient Experience Survey Template",
                     "Short survey template for allied health practices", "template"),
        ),
    ),

    # -------------------------------------------------
    # TECHNOLOGY
    # -------------------------------------------------
    Recommendation(
        id="tech-001",
        title="Implement telehealth services",
        description=(
            "Expand practice reach and improve accessibility by offering secure telehealth "
            "services for appropriate patients and conditions. Ensure compliance with privacy "
            "and security requirements."
        ),
        category=Category.TECHNOLOGY,
        priority=Priority.HIGH,
        effort=Effort.MODERATE,
        timeframe=Timeframe.SHORT_TERM,
        estimated_roi=ROIEstimate(15, 25, 6),
        implementation_steps=(
            "Research telehealth platforms that meet security and compliance requirements",
            "Develop protocols for determining telehealth-appropriate patients and conditions",
            "Create documentation templates specific to telehealth encounters",
            "Train clinicians on effective telehealth delivery and troubleshooting",
            "Develop patient education materials about telehealth services",
            "Implement billing processes for telehealth services",
            "Create a feedback system to continuously improve telehealth delivery",
        ),
        resources=(
            Resource("Telehealth Implementation Guide for Physical Therapy",
                     "Step-by-step guide to implementing telehealth in a physical therapy practice", "article"),
            Resource("Telehealth Platform Comparison",
                     "Detailed comparison of privacy-compliant telehealth platforms", "article"),
        ),
        regulatory_relevance=RegulatoryRelevance(
            authority="AHPRA, Privacy Act 1988",
            standard="Telehealth Practice Standards, Australian Privacy Principles",
            risk_level=RiskLevel.MEDIUM,
        ),
        research_basis=(
            "Telehealth effectiveness [Telemedicine J, 2023]; "
            "Digital transformation in PT [J Healthcare Tech, 2023]"
        ),
        practice_type_relevance=ALLIED,
    ),
    Recommendation(
        id="tech-002",
        title="Implement comprehensive cybersecurity framework",
        description=(
            "Protect patient data and practice operations by implementing the Essential Eight "
            "cybersecurity controls and ensuring compliance with Privacy Act requirements and "
            "the Notifiable Data Breaches scheme."
        ),
        category=Category.TECHNOLOGY,
        priority=Priority.HIGH,
        effort=Effort.SIGNIFICANT,
        timeframe=Timeframe.IMMEDIATE,
        # ROI is risk reduction, not revenue
        estimated_roi=ROIEstimate(0, 0, 3),
        implementation_steps=(
            "Conduct security risk assessment of current systems",
            "Implement application control (whitelist approved applications)",
            "Ensure all applications and operating systems are patched and up-to-date",
            "Configure Microsoft Office macro settings for security",
            "Implement user application hardening (browser security, PDF viewer settings)",
            "Restrict administrative privileges to necessary staff only",
            "Set up multi-factor authentication for all remote access and privileged accounts",
            "Establish regular backup system with offline copies and test restoration",
            "Develop data breach response plan",
        ),
        resources=(
            Resource("Essential Eight Implementation Guide",
                     "Step-by-step guide to implementing the Essential Eight security controls", "article"),
            Resource("Healthcare Data Breach Response Plan Template",
                     "Template for creating a comprehensive data breach response plan", "template"),
            Resource("Security Training Materials for Healthcare Staff",
                     "Training resources for educating staff on cybersecurity best practices", "other"),
        ),
        regulatory_relevance=RegulatoryRelevance(
            authority="OAIC, Privacy Act 1988, Notifiable Data Breaches Scheme",
            standard="Australian Privacy Principles, Essential Eight Maturity Model",
            risk_level=RiskLevel.HIGH,
        ),
        research_basis="Cybersecurity Framework; ADHA security conformance; Essential Eight compliance",
        practice_type_relevance=ALLIED_PLUS,
    ),
    Recommendation(
        id="tech-003",
        title="Enable online self-booking",
        description=(
            "Let patients book, reschedule and cancel online. Practices reaching the 30% online "
            "booking benchmark see fewer phone interruptions and faster gap filling."
        ),
        category=Category.TECHNOLOGY,
        priority=Priority.MEDIUM,
        effort=Effort.MINIMAL,
        timeframe=Timeframe.SHORT_TERM,
        estimated_roi=ROIEstimate(10, 20, 6),
        implementation_steps=(
            "Switch on the booking module of the practice management system",
            "Decide which appointment types patients may self-book",
            "Add booking links to the website, email signature and reminders",
            "Track the share of online bookings monthly",
        ),
        resources=(
            Resource("Online Booking Setup Checklist",
                     "Checklist for configuring patient self-booking", "template"),
        ),
    ),

    # -------------------------------------------------
    # COMPLIANCE
    # -------------------------------------------------
    Recommendation(
        id="comp-001",
        title="Implement comprehensive compliance management system",
        description=(
            "Develop and implement a structured compliance management system covering AHPRA "
            "requirements, professional standards, and program-specific obligations to minimize "
            "regulatory risk."
        ),
        category=Category.COMPLIANCE,
        priority=Priority.HIGH,
        effort=Effort.SIGNIFICANT,
        timeframe=Timeframe.IMMEDIATE,
        estimated_roi=ROIEstimate(0, 0, 3),
        implementation_steps=(
            "Create a compliance register documenting all regulatory obligations",
            "Develop a compliance calendar with key dates and renewal requirements",
            "Implement regular clinical documentation audits",
            "Establish a system for tracking CPD points for all practitioners",
            "Create a process for regular review of insurance coverage adequacy",
            "Develop standardized templates for program-specific documentation",
            "Implement quarterly compliance self-assessments",
            "Create a system for monitoring regulatory changes",
        ),
        resources=(
            Resource("Physiotherapy Compliance Checklist",
                     "Comprehensive checklist of compliance requirements for physiotherapy practices", "template"),
            Resource("Clinical Documentation Audit Tool",
                     "Tool for conducting regular audits of clinical documentation", "tool"),
            Resource("CPD Tracking System",
                     "System for tracking continuing professional development activities", "tool"),
        ),
        regulatory_relevance=RegulatoryRelevance(
            authority="AHPRA, APA, WorkCover, DVA, NDIS",
            standard="AHPRA Registration Standards, APA Practice Standards, Program-specific requirements",
            risk_level=RiskLevel.HIGH,
        ),
        research_basis=(
            "Regulatory Framework; AHPRA Registration Standards [AHPRA, 2023]; "
            "APA Practice Standards [APA, 2023]"
        ),
        practice_type_relevance=(D.PHYSIOTHERAPY,),
    ),
    Recommendation(
        id="comp-002",
        title="Optimize professional indemnity and business insurance coverage",
        description=(
            "Review and optimize insurance coverage to ensure compliance with regulatory "
            "requirements while maximizing protection against practice-specific risks."
        ),
        category=Category.COMPLIANCE,
        priority=Priority.HIGH,
        effort=Effort.MODERATE,
        timeframe=Timeframe.IMMEDIATE,
        estimated_roi=ROIEstimate(0, 0, 3),
        implementation_steps=(
            "Review current professional indemnity insurance for minimum $20M coverage",
            "Assess need for additional coverage types (cyber, business interruption)",
            "Implement annual insurance review process",
            "Develop risk assessment protocol to identify coverage gaps",
            "Create incident documentation system for potential claims",
            "Train staff on incident reporting procedures",
            "Establish relationship with insurance broker specializing in healthcare",
        ),
        resources=(
            Resource("Physiotherapy Insurance Requirements Guide",
                     "Comprehensive guide to insurance requirements for physiotherapy practices", "article"),
            Resource("Risk Assessment Template",
                     "Template for conducting practice risk assessments", "template"),
            Resource("Incident Documentation Form",
                     "Standardized form for documenting incidents that may lead to claims", "template"),
        ),
        regulatory_relevance=RegulatoryRelevance(
            authority="AHPRA, PBA",
            standard="Professional Indemnity Insurance Requirements",
            risk_level=RiskLevel.HIGH,
        ),
        research_basis="Insurance Compliance Guide; Professional Indemnity Requirements [PBA, 2023]",
        practice_type_relevance=ALLIED,
    ),
    Recommendation(
        id="comp-003",
        title="Keep a compliance calendar for registrations and renewals",
        description=(
            "Record every registration, insurance and program renewal date in one shared "
            "calendar with reminders three months ahead."
        ),
        category=Category.COMPLIANCE,
        priority=Priority.MEDIUM,
        effort=Effort.MINIMAL,
        timeframe=Timeframe.IMMEDIATE,
        estimated_roi=ROIEstimate(0, 0, 3),
        implementation_steps=(
            "List AHPRA registration, PII, WorkCover, DVA and NDIS renewal dates for every practitioner",
            "Enter each date in a shared calendar with a three-month reminder",
            "Assign an owner for each renewal",
            "Review the calendar at the monthly team meeting",
        ),
        resources=(
            Resource("Compliance Calendar Template",
                     "Calendar template listing common allied health renewals", "template"),
        ),
        regulatory_relevance=RegulatoryRelevance(
            authority="AHPRA",
            standard="AHPRA Registration Standards",
            risk_level=RiskLevel.MEDIUM,
        ),
    ),

    # -------------------------------------------------
    # STAFFING
    # -------------------------------------------------
    Recommendation(
        id="staff-001",
        title="Build a structured professional development program",
        description=(
            "Link each clinician's CPD plan to practice priorities. Practices meeting the 20 "
            "hours per year benchmark report lower turnover and better outcomes."
        ),
        category=Category.STAFFING,
        priority=Priority.HIGH,
        effort=Effort.MODERATE,
        timeframe=Timeframe.SHORT_TERM,
        estimated_roi=ROIEstimate(15, 25, 9),
        implementation_steps=(
            "Agree an annual CPD plan with every clinician",
            "Set aside a CPD budget per full-time equivalent",
            "Run monthly in-service sessions led by senior clinicians",
            "Track CPD hours against the 20 hour benchmark",
        ),
        resources=(
            Resource("CPD Planning Template", "Annual professional development plan", "template"),
        ),
        research_basis="Professional Development J, 2023; CE impact on outcomes, 2023",
        practice_size_relevance=(S.SMALL, S.MEDIUM, S.LARGE, S.ENTERPRISE),
    ),
    Recommendation(
        id="staff-002",
        title="Hold quarterly stay interviews",
        description=(
            "Short one-to-one conversations about what keeps each team member engaged help keep "
            "staff turnover below the 15% benchmark."
        ),
        category=Category.STAFFING,
        priority=Priority.MEDIUM,
        effort=Effort.MINIMAL,
        timeframe=Timeframe.IMMEDIATE,
        estimated_roi=ROIEstimate(5, 10, 6),
        implementation_steps=(
            "Schedule a 20 minute stay interview with each team member every quarter",
            "Ask what they enjoy, what frustrates them and what would make them leave",
            "Act on at least one theme from each round",
        ),
        resources=(
            Resource("Stay Interview Questions", "Question bank for retention conversations", "template"),
        ),
        practice_size_relevance=(S.SMALL, S.MEDIUM, S.LARGE, S.ENTERPRISE),
    ),

    # -------------------------------------------------
    # MARKETING
    # -------------------------------------------------
    Recommendation(
        id="mkt-001",
        title="Develop a GP and specialist referral program",
        description=(
            "Build structured relationships with local GPs and specialists, supported by "
            "outcome reports, to lift the referral rate toward the 40% benchmark."
        ),
        category=Category.MARKETING,
        priority=Priority.HIGH,
        effort=Effort.MODERATE,
        timeframe=Timeframe.SHORT_TERM,
        estimated_roi=ROIEstimate(15, 30, 6),
        implementation_steps=(
            "List the top 20 referrers and referral opportunities in the catchment",
            "Send discharge summaries with outcome measures to every referrer",
            "Offer short in-practice education sessions for GP clinics",
            "Track referrals by source every month",
        ),
        resources=(
            Resource("Referrer Report Template", "Discharge summary template for referrers", "template"),
        ),
        research_basis="Healthcare Marketing, 2023; Practice Growth, 2023",
    ),
    Recommendation(
        id="mkt-002",
        title="Claim and optimise online business listings",
        description=(
            "Complete and verify the practice's search and map listings and ask satisfied "
            "patients for reviews."
        ),
        category=Category.MARKETING,
        priority=Priority.MEDIUM,
        effort=Effort.MINIMAL,
        timeframe=Timeframe.IMMEDIATE,
        estimated_roi=ROIEstimate(5, 15, 3),
        implementation_steps=(
            "Claim the practice's search engine and map listings",
            "Add opening hours, services, photos and booking links",
            "Request reviews in discharge communications",
        ),
        resources=(
            Resource("Local Listing Checklist", "Checklist for online listing optimisation", "template"),
        ),
    ),

    # -------------------------------------------------
    # FACILITIES
    # -------------------------------------------------
    Recommendation(
        id="fac-001",
        title="Introduce a preventive equipment maintenance schedule",
        description=(
            "Planned servicing of treatment tables, exercise equipment and electrotherapy devices "
            "keeps maintenance completion above the 90% benchmark and avoids downtime."
        ),
        category=Category.FACILITIES,
        priority=Priority.MEDIUM,
        effort=Effort.MINIMAL,
        timeframe=Timeframe.SHORT_TERM,
        estimated_roi=ROIEstimate(3, 8, 12),
        implementation_steps=(
            "Create an equipment register with service intervals",
            "Book annual electrical safety testing and tagging",
            "Assign an owner for monthly equipment checks",
        ),
        resources=(
            Resource("Equipment Register Template", "Register for equipment and service dates", "template"),
        ),
    ),
    Recommendation(
        id="fac-002",
        title="Optimise treatment room allocation",
        description=(
            "Match room bookings to appointment types so that treatment room utilization "
            "approaches the 75% benchmark."
        ),
        category=Category.FACILITIES,
        priority=Priority.LOW,
        effort=Effort.MODERATE,
        timeframe=Timeframe.SHORT_TERM,
        estimated_roi=ROIEstimate(5, 10, 6),
        implementation_steps=(
            "Measure room utilization by hour for four weeks",
            "Move low-intensity appointments into shared spaces",
            "Review whether unused rooms can be sub-let",
        ),
        practice_size_relevance=(S.MEDIUM, S.LARGE, S.ENTERPRISE),
    ),

    # -------------------------------------------------
    # GEOGRAPHY
    # -------------------------------------------------
    Recommendation(
        id="geo-001",
        title="Map the patient catchment",
        description=(
            "Plot patient postcodes against competitor and referrer locations to find "
            "under-served areas."
        ),
        category=Category.GEOGRAPHY,
        priority=Priority.LOW,
        effort=Effort.MINIMAL,
        timeframe=Timeframe.SHORT_TERM,
        estimated_roi=ROIEstimate(3, 8, 6),
        implementation_steps=(
            "Export patient postcodes for the last 12 months",
            "Map them alongside competitor and referrer locations",
            "Target marketing at areas with referrers but few patients",
        ),
    ),

    # -------------------------------------------------
    # AUTOMATION
    # -------------------------------------------------
    Recommendation(
        id="auto-001",
        title="Automate appointment reminders",
        description=(
            "Automatic SMS and email reminders 24-48 hours before each appointment are the "
            "fastest way to bring no-show rates under 10%."
        ),
        category=Category.AUTOMATION,
        priority=Priority.HIGH,
        effort=Effort.MINIMAL,
        timeframe=Timeframe.IMMEDIATE,
        estimated_roi=ROIEstimate(10, 20, 3),
        implementation_steps=(
            "Enable SMS and email reminders in the practice management system",
            "Send reminders 48 hours and 2 hours before each appointment",
            "Include a one-click reschedule link",
        ),
        resources=(
            Resource("Reminder Message Templates", "Reminder wording for SMS and email", "template"),
        ),
        research_basis="Scheduling efficiency study [Healthcare Operations Research, 2023]",
    ),
    Recommendation(
        id="auto-002",
        title="Automate invoicing and payment reconciliation",
        description=(
            "Connect the practice management system to the accounting package so that invoices, "
            "claims and payments reconcile without manual entry."
        ),
        category=Category.AUTOMATION,
        priority=Priority.MEDIUM,
        effort=Effort.MODERATE,
        timeframe=Timeframe.SHORT_TERM,
        estimated_roi=ROIEstimate(10, 15, 6),
        implementation_steps=(
            "Enable the accounting integration of the practice management system",
            "Map item numbers and funding programs to ledger accounts",
            "Reconcile automatically imported payments weekly",
        ),
    ),
)
