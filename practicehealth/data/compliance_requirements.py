"""Australian compliance requirements and the frameworks that group them."""

from datetime import date

from practicehealth.core.enums import FrameworkType, ReviewFrequency, RiskLevel
from practicehealth.core.models import ComplianceFramework, ComplianceRequirement

HIGH, MEDIUM = RiskLevel.HIGH, RiskLevel.MEDIUM
MONTHLY = ReviewFrequency.MONTHLY
QUARTERLY = ReviewFrequency.QUARTERLY
BIANNUALLY = ReviewFrequency.BIANNUALLY
ANNUALLY = ReviewFrequency.ANNUALLY

WORKCOVER_AUTHORITY = "State WorkCover Authorities"
WORKCOVER_ACTS = "State-specific Workers Compensation Acts"
NDIS_COMMISSION = "NDIS Quality and Safeguards Commission"
NDIS_ACT = "NDIS Act 2013"
DVA_AUTHORITY = "Department of Veterans' Affairs"
DVA_ACT = "Veterans' Entitlements Act 1986"
OAIC = "Office of the Australian Information Commissioner"
PRIVACY_ACT = "Privacy Act 1988"
APPS = "Australian Privacy Principles"

INSURANCE_CHECKS = (
    "Insurance certificate verification",
    "Coverage adequacy assessment",
    "Renewal documentation",
)


# -------------------------------------------------
# WORKCOVER
# -------------------------------------------------
WORKCOVER_REQUIREMENTS = (
    ComplianceRequirement(
        id="wc-001",
        title="Provider Registration",
        description="Registration with relevant state WorkCover authority as a healthcare provider",
        framework=FrameworkType.WORKCOVER,
        authority=WORKCOVER_AUTHORITY,
        legislation=WORKCOVER_ACTS,
        risk_level=HIGH,
        verification_methods=(
            "Registration certificate",
            "Provider number verification",
            "Annual renewal documentation",
        ),
        implementation_steps=(
            "Apply for provider registration with relevant state authority",
            "Maintain documentation of registration status",
            "Set up calendar reminders for renewal dates",
            "Verify registration status quarterly",
            "Ensure all practitioners are aware of registration requirements",
        ),
        review_frequency=ANNUALLY,
    ),
    ComplianceRequirement(
        id="wc-002",
        title="Documentation Standards",
        description=(
            "Specific documentation requirements for WorkCover patients including initial "
            "assessments, progress reports, and treatment plans"
        ),
        framework=FrameworkType.WORKCOVER,
        authority=WORKCOVER_AUTHORITY,
        legislation=WORKCOVER_ACTS,
        risk_level=HIGH,
        verification_methods=("Documentation audit", "Template verification", "Process review"),
        implementation_steps=(
            "Implement standardized templates for WorkCover documentation",
            "Train staff on documentation requirements",
            "Establish regular documentation audits",
            "Create process for timely submission of reports",
            "Develop system for tracking report due dates",
        ),
        review_frequency=QUARTERLY,
    ),
    ComplianceRequirement(
        id="wc-003",
        title="Billing Compliance",
        description="Adherence to WorkCover fee schedules and billing requirements",
        framework=FrameworkType.WORKCOVER,
        authority=WORKCOVER_AUTHORITY,
        legislation=WORKCOVER_ACTS,
        risk_level=HIGH,
        verification_methods=("Fee schedule verification", "Billing audit", "Claims review"),
        implementation_steps=(
            "Maintain current fee schedules for each state",
            "Configure practice management system with correct fees",
            "Train staff on billing procedures",
            "Implement pre-billing verification process",
            "Conduct regular billing audits",
        ),
        review_frequency=QUARTERLY,
    ),
    ComplianceRequirement(
        id="wc-004",
        title="Treatment Approval Process",
        description=(
            "Process for obtaining and documenting approval for treatment plans and extended treatment"
        ),
        framework=FrameworkType.WORKCOVER,
        authority=WORKCOVER_AUTHORITY,
        legislation=WORKCOVER_ACTS,
        risk_level=MEDIUM,
        verification_methods=("Approval documentation", "Process audit", "System verification"),
        implementation_steps=(
            "Develop process for treatment approval requests",
            "Create templates for treatment plans",
            "Implement system for tracking approval status",
            "Train staff on approval requirements",
            "Establish follow-up procedures for pending approvals",
        ),
        review_frequency=BIANNUALLY,
    ),
    ComplianceRequirement(
        id="wc-005",
        title="Outcome Measurement",
        description=(
            "Implementation of required outcome measures and reporting for WorkCover patients"
        ),
        framework=FrameworkType.WORKCOVER,
        authority=WORKCOVER_AUTHORITY,
        legislation=WORKCOVER_ACTS,
        risk_level=MEDIUM,
        verification_methods=(
            "Outcome measure documentation",
            "Reporting verification",
            "Process audit",
        ),
        implementation_steps=(
            "Identify required outcome measures for each state",
            "Implement standardized outcome measurement process",
            "Train staff on administration and documentation",
            "Develop reporting templates",
            "Establish schedule for outcome measurement",
        ),
        review_frequency=BIANNUALLY,
    ),
)


# -------------------------------------------------
# NDIS
# -------------------------------------------------
NDIS_REQUIREMENTS = (
    ComplianceRequirement(
        id="ndis-001",
        title="NDIS Provider Registration",
        description="Registration with the NDIS Commission as a provider of supports",
        framework=FrameworkType.NDIS,
        authority=NDIS_COMMISSION,
        legislation=NDIS_ACT,
        standard="NDIS Practice Standards",
        risk_level=HIGH,
        verification_methods=(
            "Registration certificate",
            "Audit completion evidence",
            "Renewal documentation",
        ),
        implementation_steps=(
            "Complete NDIS provider application",
            "Undergo required quality audit",
            "Implement NDIS Practice Standards",
            "Maintain documentation of registration status",
            "Set up calendar reminders for renewal",
        ),
        review_frequency=ANNUALLY,
    ),
    ComplianceRequirement(
        id="ndis-002",
        title="NDIS Practice Standards Compliance",
        description="Adherence to NDIS Practice Standards for service delivery",
        framework=FrameworkType.NDIS,
        authority=NDIS_COMMISSION,
        legislation=NDIS_ACT,
        standard="NDIS Practice Standards",
        risk_level=HIGH,
        verification_methods=("Self-assessment", "Quality audit", "Policy review"),
        implementation_steps=(
            "Conduct gap analysis against Practice Standards",
            "Develop policies and procedures to address gaps",
            "Train staff on Practice Standards requirements",
            "Implement quality management system",
            "Conduct regular internal audits",
        ),
        review_frequency=QUARTERLY,
    ),
    ComplianceRequirement(
        id="ndis-003",
        title="NDIS Price Guide Compliance",
        description="Adherence to NDIS Price Guide for service pricing and billing",
        framework=FrameworkType.NDIS,
        authority="National Disability Insurance Agency",
        legislation=NDIS_ACT,
        risk_level=HIGH,
        verification_methods=(
            "Price guide verification",
            "Billing audit",
            "System configuration check",
        ),
        implementation_steps=(
            "Maintain current NDIS Price Guide",
            "Configure practice management system with correct prices",
            "Train staff on NDIS billing procedures",
            "Implement pre-billing verification process",
            "Conduct regular billing audits",
        ),
        review_frequency=QUARTERLY,
    ),
    ComplianceRequirement(
        id="ndis-004",
        title="Worker Screening Requirements",
        description="Compliance with NDIS Worker Screening requirements for all staff",
        framework=FrameworkType.NDIS,
        authority=NDIS_COMMISSION,
        legislation=NDIS_ACT,
        standard="NDIS Worker Screening Rules",
        risk_level=HIGH,
        verification_methods=(
            "Worker screening clearance verification",
            "Staff records audit",
            "Process review",
        ),
        implementation_steps=(
            "Identify staff requiring worker screening",
            "Implement application process for clearances",
            "Maintain register of clearances and expiry dates",
            "Set up monitoring system for renewals",
            "Verify clearance status quarterly",
        ),
        review_frequency=QUARTERLY,
    ),
    ComplianceRequirement(
        id="ndis-005",
        title="Incident Management System",
        description="Implementation of incident management system for NDIS participants",
        framework=FrameworkType.NDIS,
        authority=NDIS_COMMISSION,
        legislation=NDIS_ACT,
        standard="NDIS Incident Management Rules",
        risk_level=HIGH,
        verification_methods=("Policy review", "Process audit", "Documentation check"),
        implementation_steps=(
            "Develop incident management policy",
            "Create incident reporting forms",
            "Train staff on incident identification and reporting",
            "Implement incident register",
            "Establish review process for incidents",
        ),
        review_frequency=QUARTERLY,
    ),
)


# -------------------------------------------------
# DVA
# -------------------------------------------------
DVA_REQUIREMENTS = (
    ComplianceRequirement(
        id="dva-001",
        title="DVA Provider Registration",
        description="Registration with the Department of Veterans' Affairs as a healthcare provider",
        framework=FrameworkType.DVA,
        authority=DVA_AUTHORITY,
        legislation=DVA_ACT,
        risk_level=HIGH,
        verification_methods=(
            "Provider number verification",
            "Registration documentation",
            "Renewal evidence",
        ),
        implementation_steps=(
            "Apply for DVA provider number",
            "Maintain documentation of registration status",
            "Set up calendar reminders for renewal",
            "Verify registration status quarterly",
            "Ensure all practitioners are aware of registration requirements",
        ),
        review_frequency=ANNUALLY,
    ),
    ComplianceRequirement(
        id="dva-002",
        title="Treatment Cycle Requirements",
        description="Adherence to DVA Treatment Cycle requirements for referrals and reporting",
        framework=FrameworkType.DVA,
        authority=DVA_AUTHORITY,
        legislation=DVA_ACT,
        standard="DVA Treatment Principles",
        risk_level=HIGH,
        verification_methods=(
            "Referral documentation audit",
            "Reporting verification",
            "Process review",
        ),
        implementation_steps=(
            "Implement treatment cycle tracking system",
            "Create templates for cycle reports",
            "Train staff on treatment cycle requirements",
            "Develop process for obtaining new referrals",
            "Establish reporting schedule",
        ),
        review_frequency=QUARTERLY,
    ),
    ComplianceRequirement(
        id="dva-003",
        title="DVA Fee Schedule Compliance",
        description="Adherence to DVA Fee Schedule for service pricing and billing",
        framework=FrameworkType.DVA,
        authority=DVA_AUTHORITY,
        legislation=DVA_ACT,
        risk_level=HIGH,
        verification_methods=(
            "Fee schedule verification",
            "Billing audit",
            "System configuration check",
        ),
        implementation_steps=(
            "Maintain current DVA Fee Schedule",
            "Configure practice management system with correct fees",
            "Train staff on DVA billing procedures",
            "Implement pre-billing verification process",
            "Conduct regular billing audits",
        ),
        review_frequency=QUARTERLY,
    ),
    ComplianceRequirement(
        id="dva-004",
        title="Prior Approval Requirements",
        description="Process for obtaining prior approval for specified DVA services",
        framework=FrameworkType.DVA,
        authority=DVA_AUTHORITY,
        legislation=DVA_ACT,
        standard="DVA Treatment Principles",
        risk_level=MEDIUM,
        verification_methods=("Approval documentation", "Process audit", "System verification"),
        implementation_steps=(
            "Identify services requiring prior approval",
            "Develop process for approval requests",
            "Create templates for approval documentation",
            "Implement system for tracking approval status",
            "Train staff on approval requirements",
        ),
        review_frequency=BIANNUALLY,
    ),
    ComplianceRequirement(
        id="dva-005",
        title="Card Type Verification",
        description="Process for verifying DVA card type and eligibility for services",
        framework=FrameworkType.DVA,
        authority=DVA_AUTHORITY,
        legislation=DVA_ACT,
        risk_level=MEDIUM,
        verification_methods=(
            "Verification process audit",
            "Documentation check",
            "Staff knowledge assessment",
        ),
        implementation_steps=(
            "Develop card verification process",
            "Create reference guide for card types and entitlements",
            "Train staff on verification procedures",
            "Implement documentation system for card details",
            "Establish regular verification checks",
        ),
        review_frequency=BIANNUALLY,
    ),
)


# -------------------------------------------------
# INSURANCE
# -------------------------------------------------
INSURANCE_REQUIREMENTS = (
    ComplianceRequirement(
        id="ins-001",
        title="Professional Indemnity Insurance",
        description="Maintenance of appropriate professional indemnity insurance coverage",
        framework=FrameworkType.INSURANCE,
        authority="AHPRA, Physiotherapy Board of Australia",
        legislation="Health Practitioner Regulation National Law",
        standard="PII Registration Standard",
        risk_level=HIGH,
        verification_methods=INSURANCE_CHECKS,
        implementation_steps=(
            "Obtain minimum $20 million PII coverage",
            "Maintain documentation of insurance policies",
            "Set up calendar reminders for renewal dates",
            "Conduct annual coverage adequacy review",
            "Verify all practitioners have appropriate coverage",
        ),
        review_frequency=ANNUALLY,
    ),
    ComplianceRequirement(
        id="ins-002",
        title="Public Liability Insurance",
        description="Maintenance of appropriate public liability insurance coverage",
        framework=FrameworkType.INSURANCE,
        authority="Business regulatory requirements",
        risk_level=HIGH,
        verification_methods=INSURANCE_CHECKS,
        implementation_steps=(
            "Obtain minimum $20 million public liability coverage",
            "Maintain documentation of insurance policies",
            "Set up calendar reminders for renewal dates",
            "Conduct annual coverage adequacy review",
            "Ensure coverage includes all practice locations",
        ),
        review_frequency=ANNUALLY,
    ),
    ComplianceRequirement(
        id="ins-003",
        title="Cyber Insurance",
        description="Implementation of cyber insurance coverage for data protection",
        framework=FrameworkType.INSURANCE,
        authority="Privacy Act requirements",
        legislation=PRIVACY_ACT,
        risk_level=MEDIUM,
        verification_methods=INSURANCE_CHECKS,
        implementation_steps=(
            "Assess cyber risk exposure",
            "Obtain appropriate cyber insurance coverage",
            "Maintain documentation of insurance policies",
            "Set up calendar reminders for renewal dates",
            "Conduct annual coverage adequacy review",
        ),
        review_frequency=ANNUALLY,
    ),
    ComplianceRequirement(
        id="ins-004",
        title="Business Continuity Insurance",
        description="Implementation of business continuity insurance coverage",
        framework=FrameworkType.INSURANCE,
        authority="Business regulatory requirements",
        risk_level=MEDIUM,
        verification_methods=INSURANCE_CHECKS,
        implementation_steps=(
            "Assess business interruption risks",
            "Obtain appropriate business continuity coverage",
            "Maintain documentation of insurance policies",
            "Set up calendar reminders for renewal dates",
            "Conduct annual coverage adequacy review",
        ),
        review_frequency=ANNUALLY,
    ),
    ComplianceRequirement(
        id="ins-005",
        title="Claims Management Process",
        description="Implementation of process for managing insurance claims and incidents",
        framework=FrameworkType.INSURANCE,
        authority="Insurance provider requirements",
        risk_level=MEDIUM,
        verification_methods=(
            "Process documentation review",
            "Incident log verification",
            "Staff knowledge assessment",
        ),
        implementation_steps=(
            "Develop claims management procedure",
            "Create incident documentation templates",
            "Train staff on incident reporting",
            "Implement incident register",
            "Establish insurer notification process",
        ),
        review_frequency=BIANNUALLY,
    ),
)


# -------------------------------------------------
# CYBERSECURITY
# -------------------------------------------------
CYBERSECURITY_REQUIREMENTS = (
    ComplianceRequirement(
        id="cyber-001",
        title="Essential Eight Implementation",
        description="Implementation of the Essential Eight security controls",
        framework=FrameworkType.CYBERSECURITY,
        authority="Australian Cyber Security Centre",
        standard="Essential Eight Maturity Model",
        risk_level=HIGH,
        verification_methods=(
            "Security assessment",
            "Control implementation verification",
            "Maturity level assessment",
        ),
        implementation_steps=(
            "Implement application control",
            "Patch applications",
            "Configure Microsoft Office macro settings",
            "Implement user application hardening",
            "Restrict administrative privileges",
            "Patch operating systems",
            "Implement multi-factor authentication",
            "Establish regular backup system",
        ),
        review_frequency=QUARTERLY,
    ),
    ComplianceRequirement(
        id="cyber-002",
        title="Data Breach Response Plan",
        description="Implementation of data breach response plan compliant with NDB scheme",
        framework=FrameworkType.CYBERSECURITY,
        authority=OAIC,
        legislation=PRIVACY_ACT,
        standard="Notifiable Data Breaches Scheme",
        risk_level=HIGH,
        verification_methods=(
            "Plan documentation review",
            "Process verification",
            "Staff knowledge assessment",
        ),
        implementation_steps=(
            "Develop data breach response plan",
            "Create breach assessment process",
            "Establish notification procedures",
            "Train staff on breach identification and response",
            "Conduct annual breach response simulation",
        ),
        review_frequency=ANNUALLY,
    ),
    ComplianceRequirement(
        id="cyber-003",
        title="Access Control System",
        description="Implementation of role-based access control for systems and data",
        framework=FrameworkType.CYBERSECURITY,
        authority="Privacy Act requirements",
        legislation=PRIVACY_ACT,
        standard=APPS,
        risk_level=HIGH,
        verification_methods=(
            "Access control matrix verification",
            "System configuration check",
            "User account audit",
        ),
        implementation_steps=(
            "Develop access control matrix",
            "Implement role-based access controls",
            "Establish user account management process",
            "Conduct quarterly access reviews",
            "Implement principle of least privilege",
        ),
        review_frequency=QUARTERLY,
    ),
    ComplianceRequirement(
        id="cyber-004",
        title="Security Awareness Training",
        description="Implementation of security awareness training program for all staff",
        framework=FrameworkType.CYBERSECURITY,
        authority="Privacy Act requirements",
        legislation=PRIVACY_ACT,
        risk_level=MEDIUM,
        verification_methods=(
            "Training program review",
            "Completion records verification",
            "Staff knowledge assessment",
        ),
        implementation_steps=(
            "Develop security awareness training program",
            "Create training materials",
            "Implement training schedule for all staff",
            "Conduct phishing simulations",
            "Track training completion and results",
        ),
        review_frequency=BIANNUALLY,
    ),
    ComplianceRequirement(
        id="cyber-005",
        title="Mobile Device Security",
        description="Implementation of mobile device security controls",
        framework=FrameworkType.CYBERSECURITY,
        authority="Privacy Act requirements",
        legislation=PRIVACY_ACT,
        risk_level=MEDIUM,
        verification_methods=("Policy review", "Device configuration check", "MDM system verification"),
        implementation_steps=(
            "Develop mobile device security policy",
            "Implement mobile device management solution",
            "Configure device encryption",
            "Establish device passcode requirements",
            "Implement remote wipe capability",
        ),
        review_frequency=BIANNUALLY,
    ),
)


# -------------------------------------------------
# PRIVACY
# -------------------------------------------------
PRIVACY_REQUIREMENTS = (
    ComplianceRequirement(
        id="priv-001",
        title="Privacy Policy Implementation",
        description="Development and implementation of privacy policy compliant with Privacy Act",
        framework=FrameworkType.PRIVACY,
        authority=OAIC,
        legislation=PRIVACY_ACT,
        standard=APPS,
        risk_level=HIGH,
        verification_methods=(
            "Policy review",
            "Implementation verification",
            "Staff knowledge assessment",
        ),
        implementation_steps=(
            "Develop comprehensive privacy policy",
            "Ensure policy addresses all APPs",
            "Make policy available to patients",
            "Train staff on privacy requirements",
            "Review and update policy annually",
        ),
        review_frequency=ANNUALLY,
    ),
    ComplianceRequirement(
        id="priv-002",
        title="Consent Management",
        description=(
            "Implementation of consent management system for collection and use of personal information"
        ),
        framework=FrameworkType.PRIVACY,
        authority=OAIC,
        legislation=PRIVACY_ACT,
        standard=APPS,
        risk_level=HIGH,
        verification_methods=("Consent form review", "Process verification", "Documentation audit"),
        implementation_steps=(
            "Develop consent forms and processes",
            "Implement system for recording consent",
            "Train staff on consent requirements",
            "Establish process for consent withdrawal",
            "Conduct regular consent documentation audits",
        ),
        review_frequency=BIANNUALLY,
    ),
    ComplianceRequirement(
        id="priv-003",
        title="Data Security Measures",
        description="Implementation of data security measures to protect personal information",
        framework=FrameworkType.PRIVACY,
        authority=OAIC,
        legislation=PRIVACY_ACT,
        standard=APPS,
        risk_level=HIGH,
        verification_methods=(
            "Security assessment",
            "Control implementation verification",
            "System configuration check",
        ),
        implementation_steps=(
            "Implement data encryption",
            "Establish access controls",
            "Configure secure data storage",
            "Implement secure data transmission",
            "Establish data retention and destruction procedures",
        ),
        review_frequency=QUARTERLY,
    ),
    ComplianceRequirement(
        id="priv-004",
        title="Third-Party Data Handling",
        description="Management of third-party providers with access to personal information",
        framework=FrameworkType.PRIVACY,
        authority=OAIC,
        legislation=PRIVACY_ACT,
        standard=APPS,
        risk_level=MEDIUM,
        verification_methods=("Contract review", "Provider assessment", "Data handling verification"),
        implementation_steps=(
            "Identify all third-party data handlers",
            "Implement data handling agreements",
            "Assess third-party security measures",
            "Establish monitoring process",
            "Conduct annual provider reviews",
        ),
        review_frequency=ANNUALLY,
    ),
    ComplianceRequirement(
        id="priv-005",
        title="Patient Access to Information",
        description="Process for patients to access and correct their personal information",
        framework=FrameworkType.PRIVACY,
        authority=OAIC,
        legislation=PRIVACY_ACT,
        standard=APPS,
        risk_level=MEDIUM,
        verification_methods=(
            "Process documentation review",
            "Request handling verification",
            "Staff knowledge assessment",
        ),
        implementation_steps=(
            "Develop information access procedure",
            "Create request forms and templates",
            "Establish verification process",
            "Train staff on handling access requests",
            "Implement tracking system for requests",
        ),
        review_frequency=BIANNUALLY,
    ),
)


COMPLIANCE_REQUIREMENTS = (
    WORKCOVER_REQUIREMENTS
    + NDIS_REQUIREMENTS
    + DVA_REQUIREMENTS
    + INSURANCE_REQUIREMENTS
    + CYBERSECURITY_REQUIREMENTS
    + PRIVACY_REQUIREMENTS
)


# -------------------------------------------------
# FRAMEWORKS
# -------------------------------------------------
FRAMEWORK_VERSION = "1.0"
FRAMEWORK_UPDATED = date(2025, 4, 1)


def _ids(requirements):
    return tuple(r.id for r in requirements)


COMPLIANCE_FRAMEWORKS = (
    ComplianceFramework(
        id="framework-workcover",
        name="WorkCover Compliance Framework",
        type=FrameworkType.WORKCOVER,
        description="Compliance requirements for providing services to WorkCover patients",
        authority=WORKCOVER_AUTHORITY,
        version=FRAMEWORK_VERSION,
        last_updated=FRAMEWORK_UPDATED,
        requirement_ids=_ids(WORKCOVER_REQUIREMENTS),
        applicable_jurisdictions=("VIC", "NSW", "QLD", "SA", "WA", "TAS", "NT", "ACT"),
    ),
    ComplianceFramework(
        id="framework-ndis",
        name="NDIS Compliance Framework",
        type=FrameworkType.NDIS,
        description="Compliance requirements for NDIS providers",
        authority=NDIS_COMMISSION,
        version=FRAMEWORK_VERSION,
        last_updated=FRAMEWORK_UPDATED,
        requirement_ids=_ids(NDIS_REQUIREMENTS),
        applicable_jurisdictions=("NATIONAL",),
    ),
    ComplianceFramework(
        id="framework-dva",
        name="DVA Compliance Framework",
        type=FrameworkType.DVA,
        description="Compliance requirements for DVA providers",
        authority=DVA_AUTHORITY,
        version=FRAMEWORK_VERSION,
        last_updated=FRAMEWORK_UPDATED,
        requirement_ids=_ids(DVA_REQUIREMENTS),
        applicable_jurisdictions=("NATIONAL",),
    ),
    ComplianceFramework(
        id="framework-insurance",
        name="Insurance Compliance Framework",
        type=FrameworkType.INSURANCE,
        description="Insurance requirements for allied health practices",
        authority="AHPRA",
        version=FRAMEWORK_VERSION,
        last_updated=FRAMEWORK_UPDATED,
        requirement_ids=_ids(INSURANCE_REQUIREMENTS),
        applicable_jurisdictions=("NATIONAL",),
    ),
    ComplianceFramework(
        id="framework-cybersecurity",
        name="Cybersecurity Framework",
        type=FrameworkType.CYBERSECURITY,
        description="Cybersecurity requirements for allied health practices",
        authority="Australian Cyber Security Centre",
        version=FRAMEWORK_VERSION,
        last_updated=FRAMEWORK_UPDATED,
        requirement_ids=_ids(CYBERSECURITY_REQUIREMENTS),
        applicable_jurisdictions=("NATIONAL",),
    ),
    ComplianceFramework(
        id="framework-privacy",
        name="Privacy Compliance Framework",
        type=FrameworkType.PRIVACY,
        description="Privacy requirements for allied health practices",
        authority=OAIC,
        version=FRAMEWORK_VERSION,
        last_updated=FRAMEWORK_UPDATED,
        requirement_ids=_ids(PRIVACY_REQUIREMENTS),
        applicable_jurisdictions=("NATIONAL",),
    ),
)
