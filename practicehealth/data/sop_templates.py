"""
SOP template library.

Section content uses ``{{variable}}`` placeholders; every placeholder in a
section is listed in that section's ``variables``.
"""

from practicehealth.core.enums import (
    Category,
    DisciplineType as D,
    PracticeSize as S,
    ReviewFrequency,
    SOPType,
)
from practicehealth.core.models import RegulatoryBasis, SOPSection, SOPTemplate

ALL_SIZES = (S.SOLO, S.SMALL, S.MEDIUM, S.LARGE, S.ENTERPRISE)
ALLIED = (D.PHYSIOTHERAPY, D.OCCUPATIONAL_THERAPY, D.SPEECH_THERAPY)


def _lines(*items: str) -> str:
    return "\n".join(items)


# -------------------------------------------------
# FINANCIAL
# -------------------------------------------------
BILLING_AND_COLLECTION = SOPTemplate(
    id="sop-fin-001",
    title="Patient Billing and Collection Procedure",
    type=SOPType.FINANCIAL,
    description="Standard procedure for billing patients and collecting payments",
    related_categories=(Category.FINANCIAL, Category.OPERATIONS),
    applicable_disciplines=ALLIED,
    applicable_sizes=ALL_SIZES,
    recommended_review_frequency=ReviewFrequency.QUARTERLY,
    regulatory_basis=RegulatoryBasis(
        authority="OAIC",
        standards=(
            "Privacy Act 1988",
            "Health Insurance Act",
            "State WorkCover Regulations",
            "DVA Requirements",
            "NDIS Rules",
        ),
    ),
    industry_standards=("APA Billing Best Practices", "Healthcare Billing Standards 2023"),
    sections=(
        SOPSection(
            "Purpose",
            "This Standard Operating Procedure (SOP) outlines the process for billing patients and "
            "collecting payments at {{practiceName}}. It ensures consistent, accurate, and timely "
            "billing practices that comply with relevant regulations and optimize cash flow.",
            variables=("practiceName",),
        ),
        SOPSection(
            "Scope",
            "This procedure applies to all patient billing activities, including insurance billing, "
            "patient statements, payment collection, and management of accounts receivable.",
        ),
        SOPSection(
            "Responsibilities",
            _lines(
                "The following roles are responsible for implementing this procedure:",
                "",
                "- **{{billingRoleName}}**: Responsible for processing insurance claims, generating "
                "patient statements, and tracking accounts receivable",
                "- **{{frontDeskRoleName}}**: Responsible for collecting payments at time of service "
                "and verifying insurance information",
                "- **{{managerRoleName}}**: Responsible for overseeing the billing process and "
                "resolving escalated issues",
            ),
            variables=("billingRoleName", "frontDeskRoleName", "managerRoleName"),
        ),
        SOPSection(
            "Insurance Verification Procedure",
            _lines(
                "1. Verify patient insurance coverage prior to initial appointment",
                "2. Document insurance information in practice management system",
                "3. Confirm coverage for specific services to be provided",
                "4. Determine patient responsibility (co-pays, deductibles)",
                "5. Communicate patient responsibility to patient before appointment",
                "6. For WorkCover, DVA, or NDIS patients, verify specific program requirements and authorization",
            ),
            regulatory_reference="Insurance Compliance Guide Section 2.3",
        ),
        SOPSection(
            "Time of Service Collection Procedure",
            _lines(
                "1. Collect co-pays and outstanding balances at check-in",
                "2. Provide patients with receipt for all payments",
                "3. Document all payments in practice management system",
                "4. Reconcile payments daily",
                "5. For patients unable to pay, follow the payment plan procedure",
                "6. Ensure fee schedule is current and displayed according to regulatory requirements",
            ),
            regulatory_reference="Fee Schedule Compliance Section 1.2",
        ),
        SOPSection(
            "Insurance Billing Procedure",
            _lines(
                "1. Submit claims within {{claimSubmissionTimeframe}} of service",
                "2. Include all required documentation and coding",
                "3. Track claim status and follow up on unpaid claims after {{claimFollowupDays}} days",
                "4. Document all communication with insurance companies",
                "5. Appeal denied claims when appropriate",
                "6. For WorkCover claims, include all required documentation per state guidelines",
                "7. For DVA claims, use appropriate DVA item numbers and follow DVA billing requirements",
                "8. For NDIS claims, ensure service agreements are in place and use correct NDIS codes",
            ),
            variables=("claimSubmissionTimeframe", "claimFollowupDays"),
            regulatory_reference="Insurance Compliance Guide Section 3.1-3.4",
        ),
        SOPSection(
            "Patient Statement Procedure",
            _lines(
                "1. Generate patient statements {{statementFrequency}}",
                "2. Clearly indicate services provided, insurance payments, and patient responsibility",
                "3. Include multiple payment options",
                "4. Provide clear contact information for billing questions",
                "5. Ensure statements comply with Privacy Act requirements",
            ),
            variables=("statementFrequency",),
            regulatory_reference="Privacy Act 1988 - Billing Communications",
        ),
        SOPSection(
            "Accounts Receivable Management",
            _lines(
                "1. Age accounts receivable weekly",
                "2. Follow up on accounts at 30, 60, and 90 days past due",
                "3. Implement {{collectionStrategy}} for accounts over 90 days",
                "4. Document all collection efforts",
                "5. Review accounts receivable reports monthly with management",
                "6. Target Days in AR: 30 days or less based on industry benchmarks",
                "7. Target Collection Rate: 95% or higher based on industry benchmarks",
            ),
            variables=("collectionStrategy",),
        ),
        SOPSection(
            "Payment Plans",
            _lines(
                "For patients unable to pay their balance in full:",
                "",
                "1. Offer payment plans based on balance amount:",
                "   - Balances under $500: Up to 3 months",
                "   - Balances $500-$1000: Up to 6 months",
                "   - Balances over $1000: Up to 12 months",
                "2. Document payment plan agreement with patient signature",
                "3. Set up automatic payments when possible",
                "4. Send monthly statements showing payment plan progress",
            ),
            is_required=False,
        ),
        SOPSection(
            "Refund Procedure",
            _lines(
                "1. Identify overpayments through regular account reviews",
                "2. Verify overpayment amount and source",
                "3. Process refunds within {{refundTimeframe}}",
                "4. Document all refunds in practice management system",
                "5. Include explanation of refund with payment",
            ),
            is_required=False,
            variables=("refundTimeframe",),
        ),
        SOPSection(
            "Fee Schedule Management",
            _lines(
                "1. Review and update fee schedule annually",
                "2. Ensure fees align with current market rates based on fee schedule benchmarks",
                "3. Maintain separate fee schedules for different funding sources (private, WorkCover, DVA, NDIS)",
                "4. Display fees in accordance with regulatory requirements",
                "5. Communicate fee changes to patients with appropriate notice",
                "6. Train staff on current fee schedule and billing rules for each funding source",
            ),
            regulatory_reference="Fee Schedule Compliance Section 2.1",
        ),
        SOPSection(
            "Performance Metrics",
            _lines(
                "The following metrics will be tracked to evaluate the effectiveness of this procedure:",
                "",
                "1. Days in Accounts Receivable (target: {{targetDaysAR}} days)",
                "2. Clean Claim Rate (target: {{targetCleanClaimRate}}%)",
                "3. Collection Rate (target: {{targetCollectionRate}}%)",
                "4. Time of Service Collection Rate (target: {{targetTOSRate}}%)",
            ),
            is_required=False,
            variables=("targetDaysAR", "targetCleanClaimRate", "targetCollectionRate", "targetTOSRate"),
        ),
        SOPSection(
            "References",
            _lines(
                "- Practice Management System User Guide",
                "- {{billingComplianceReference}}",
                "- Insurance Payer Manuals",
                "- WorkCover Billing Guidelines",
                "- DVA Fee Schedule",
                "- NDIS Price Guide",
                "- Privacy Act 1988 Requirements",
            ),
            is_required=False,
            variables=("billingComplianceReference",),
        ),
    ),
)


# -------------------------------------------------
# OPERATIONS
# -------------------------------------------------
SCHEDULING = SOPTemplate(
    id="sop-ops-001",
    title="Patient Scheduling and Appointment Management",
    type=SOPType.OPERATIONS,
    description="Standard procedure for scheduling and managing patient appointments",
    related_categories=(Category.OPERATIONS, Category.PATIENT_CARE),
    applicable_disciplines=ALLIED,
    applicable_sizes=ALL_SIZES,
    recommended_review_frequency=ReviewFrequency.BIANNUALLY,
    industry_standards=(
        "APA Practice Management Guidelines",
        "Healthcare Scheduling Efficiency Standards 2023",
    ),
    sections=(
        SOPSection(
            "Purpose",
            "This Standard Operating Procedure (SOP) establishes the process for scheduling and "
            "managing patient appointments at {{practiceName}}. It ensures efficient scheduling "
            "practices that maximize provider productivity while delivering excellent patient experience.",
            variables=("practiceName",),
        ),
        SOPSection(
            "Scope",
            "This procedure applies to all appointment scheduling activities, including new patient "
            "appointments, follow-up appointments, rescheduling, cancellations, and no-shows.",
        ),
        SOPSection(
            "Responsibilities",
            _lines(
                "The following roles are responsible for implementing this procedure:",
                "",
                "- **{{schedulingRoleName}}**: Responsible for scheduling appointments, managing the "
                "calendar, and communicating with patients",
                "- **{{providerRoleName}}**: Responsible for determining appointment types and "
                "durations needed for patients",
                "- **{{managerRoleName}}**: Responsible for overseeing scheduling efficiency and "
                "resolving conflicts",
            ),
            variables=("schedulingRoleName", "providerRoleName", "managerRoleName"),
        ),
        SOPSection(
            "Appointment Types and Duration",
            _lines(
                "The practice offers the following appointment types:",
                "",
                "1. **Initial Evaluation**: {{initialEvalDuration}} minutes",
                "2. **Standard Treatment**: {{standardTreatmentDuration}} minutes",
                "3. **Extended Treatment**: {{extendedTreatmentDuration}} minutes",
                "4. **Re-evaluation**: {{reEvalDuration}} minutes",
                "5. **Quick Check**: {{quickCheckDuration}} minutes",
            ),
            variables=(
                "initialEvalDuration",
                "standardTreatmentDuration",
                "extendedTreatmentDuration",
                "reEvalDuration",
                "quickCheckDuration",
            ),
        ),
        SOPSection(
            "New Patient Scheduling Procedure",
            _lines(
                "1. Collect patient contact information and reason for visit",
                "2. Verify insurance eligibility",
                "3. Schedule initial evaluation appointment",
                "4. Send new patient forms {{daysPriorToSendForms}} days before appointment",
                "5. Send appointment reminder {{reminderTimeframe}} before appointment",
                "6. Document all patient communication in practice management system",
            ),
            variables=("daysPriorToSendForms", "reminderTimeframe"),
        ),
        SOPSection(
            "Follow-up Appointment Scheduling",
            _lines(
                "1. Schedule follow-up appointments based on provider recommendation",
                "2. Book series of appointments when possible",
                "3. Provide patient with appointment card or digital confirmation",
                "4. Send appointment reminders {{reminderTimeframe}} before each appointment",
            ),
            variables=("reminderTimeframe",),
        ),
        SOPSection(
            "Cancellation and Rescheduling Policy",
            _lines(
                "1. Patients must provide {{cancellationNoticeHours}} hours notice for cancellations",
                "2. Document reason for cancellation in patient record",
                "3. Attempt to reschedule cancelled appointments within {{rescheduleTimeframe}}",
                "4. For late cancellations, follow the late cancellation fee procedure",
                "5. Maintain a cancellation list for filling unexpected openings",
            ),
            variables=("cancellationNoticeHours", "rescheduleTimeframe"),
        ),
        SOPSection(
            "No-Show Management",
            _lines(
                "1. Document no-shows in patient record",
                "2. Contact patient same day to reschedule",
                "3. Apply no-show fee according to policy",
                "4. After {{consecutiveNoShows}} consecutive no-shows, review case with provider "
                "before scheduling further appointments",
                "5. Send no-show letters for documentation",
            ),
            variables=("consecutiveNoShows",),
        ),
        SOPSection(
            "Wait List Management",
            _lines(
                "1. Maintain wait list for preferred appointment times",
                "2. Contact wait list patients when openings occur",
                "3. Document all wait list communication",
                "4. Review and update wait list {{waitListReviewFrequency}}",
            ),
            is_required=False,
            variables=("waitListReviewFrequency",),
        ),
        SOPSection(
            "Provider Schedule Management",
            _lines(
                "1. Block provider time for administrative tasks, meetings, and breaks",
                "2. Maintain {{bufferTime}} minutes between initial evaluations",
                "3. Limit initial evaluations to {{maxInitialEvalsPerDay}} per provider per day",
                "4. Coordinate provider time off at least {{providerTimeOffNotice}} in advance",
                "5. Distribute schedule to providers {{scheduleDistributionTimeframe}} in advance",
            ),
            is_required=False,
            variables=(
                "bufferTime",
                "maxInitialEvalsPerDay",
                "providerTimeOffNotice",
                "scheduleDistributionTimeframe",
            ),
        ),
        SOPSection(
            "Schedule Optimization",
            _lines(
                "1. Analyze appointment patterns to identify peak and slow periods",
                "2. Adjust provider schedules to match demand patterns",
                "3. Implement scheduling templates that optimize provider productivity",
                "4. Target schedule utilization rate of 80% or higher based on industry benchmarks",
                "5. Monitor and reduce no-show rate to 10% or lower based on industry benchmarks",
                "6. Review schedule efficiency metrics monthly and adjust as needed",
            ),
        ),
        SOPSection(
            "Performance Metrics",
            _lines(
                "The following metrics will be tracked to evaluate the effectiveness of this procedure:",
                "",
                "1. Schedule Utilization Rate (target: {{targetUtilizationRate}}%)",
                "2. No-show Rate (target: under {{targetNoShowRate}}%)",
                "3. Cancellation Rate (target: under {{targetCancellationRate}}%)",
                "4. Patient Wait Time (target: under {{targetWaitTime}} minutes)",
            ),
            is_required=False,
            variables=(
                "targetUtilizationRate",
                "targetNoShowRate",
                "targetCancellationRate",
                "targetWaitTime",
            ),
        ),
    ),
)


# -------------------------------------------------
# COMPLIANCE
# -------------------------------------------------
REGULATORY_COMPLIANCE = SOPTemplate(
    id="sop-comp-001",
    title="Regulatory Compliance Management",
    type=SOPType.COMPLIANCE,
    description=(
        "Standard procedure for ensuring compliance with regulatory requirements "
        "for physiotherapy practices"
    ),
    related_categories=(Category.COMPLIANCE, Category.OPERATIONS, Category.PATIENT_CARE),
    applicable_disciplines=(D.PHYSIOTHERAPY,),
    applicable_sizes=ALL_SIZES,
    recommended_review_frequency=ReviewFrequency.QUARTERLY,
    regulatory_basis=RegulatoryBasis(
        authority="AHPRA",
        standards=(
            "Health Practitioner Regulation National Law",
            "AHPRA Registration Standards",
            "Privacy Act 1988",
            "State/Territory Health Records Acts",
            "WorkCover Legislation",
        ),
    ),
    industry_standards=(
        "APA Code of Conduct",
        "APA Documentation Guidelines",
        "NHMRC Infection Control Guidelines",
    ),
    sections=(
        SOPSection(
            "Purpose",
            "This Standard Operating Procedure (SOP) establishes the process for ensuring "
            "{{practiceName}} maintains compliance with all regulatory requirements applicable to "
            "physiotherapy practices. It provides a structured approach to managing registration, "
            "insurance, documentation, and reporting obligations.",
            variables=("practiceName",),
            regulatory_reference="AHPRA Registration Standards",
        ),
        SOPSection(
            "Scope",
            "This procedure applies to all aspects of regulatory compliance, including practitioner "
            "registration, professional indemnity insurance, clinical documentation, privacy, "
            "infection control, workplace health and safety, and program-specific requirements.",
        ),
        SOPSection(
            "Responsibilities",
            _lines(
                "The following roles are responsible for implementing this procedure:",
                "",
                "- **{{complianceOfficerRole}}**: Responsible for overseeing compliance activities "
                "and maintaining the compliance register",
                "- **{{practitionerRole}}**: Responsible for maintaining individual registration and "
                "CPD requirements",
                "- **{{managerRole}}**: Responsible for ensuring practice-wide compliance and "
                "addressing identified issues",
            ),
            variables=("complianceOfficerRole", "practitionerRole", "managerRole"),
        ),
        SOPSection(
            "AHPRA Registration Management",
            _lines(
                "1. Maintain a register of all practitioners with their:",
                "   - AHPRA registration number",
                "   - Registration expiry date",
                "   - Registration conditions (if any)",
                "2. Set up calendar reminders {{registrationReminderMonths}} months before expiration",
                "3. Verify registration status quarterly via the AHPRA register",
                "4. Maintain copies of current registration certificates",
                "5. Ensure practitioners display registration information as required",
            ),
            variables=("registrationReminderMonths",),
            regulatory_reference=(
                "Health Practitioner Regulation National Law, AHPRA Registration Standards"
            ),
        ),
        SOPSection(
            "Professional Indemnity Insurance Management",
            _lines(
                "1. Ensure all practitioners maintain professional indemnity insurance with minimum "
                "coverage of $20 million",
                "2. Maintain a register of insurance policies with:",
                "   - Policy numbers",
                "   - Coverage amounts",
                "   - Expiry dates",
                "3. Set up calendar reminders {{insuranceReminderMonths}} months before expiration",
                "4. Verify insurance coverage meets AHPRA requirements",
                "5. Maintain copies of current insurance certificates",
            ),
            variables=("insuranceReminderMonths",),
            regulatory_reference="AHPRA Professional Indemnity Insurance Registration Standard",
        ),
        SOPSection(
            "Continuing Professional Development Tracking",
            _lines(
                "1. Establish a system for tracking CPD activities for all practitioners",
                "2. Ensure practitioners complete minimum 20 CPD hours annually",
                "3. Verify CPD activities meet the requirements for:",
                "   - Relevance to scope of practice",
                "   - Mix of activities (formal/informal)",
                "   - Evidence-based practice focus",
                "4. Maintain documentation of all CPD activities",
                "5. Conduct quarterly reviews of CPD progress",
                "6. Provide support for practitioners not meeting targets",
            ),
            regulatory_reference="AHPRA Continuing Professional Development Registration Standard",
        ),
        SOPSection(
            "Clinical Documentation Standards",
            _lines(
                "1. Implement standardized documentation templates that meet regulatory requirements",
                "2. Ensure all patient records include:",
                "   - Comprehensive initial assessment",
                "   - Clear treatment plans with measurable goals",
                "   - Detailed treatment notes for each session",
                "   - Regular progress evaluations",
                "   - Discharge summaries",
                "3. Conduct regular documentation audits using the {{auditFrequency}} schedule",
                "4. Provide feedback and training based on audit results",
                "5. Maintain records for minimum {{recordRetentionYears}} years",
            ),
            variables=("auditFrequency", "recordRetentionYears"),
            regulatory_reference="APA Documentation Guidelines, Health Records Acts",
        ),
        SOPSection(
            "Privacy Compliance",
            _lines(
                "1. Develop and maintain a privacy policy compliant with the Privacy Act 1988",
                "2. Ensure all staff complete privacy training annually",
                "3. Implement secure systems for handling patient information",
                "4. Obtain appropriate consent for collection and use of personal information",
                "5. Establish a process for handling privacy breaches",
                "6. Conduct privacy impact assessments for new systems or processes",
                "7. Display privacy notices in reception areas and on practice website",
            ),
            regulatory_reference="Privacy Act 1988, Australian Privacy Principles",
        ),
        SOPSection(
            "Infection Control",
            _lines(
                "1. Develop and maintain infection control procedures aligned with NHMRC guidelines",
                "2. Ensure all staff complete infection control training annually",
                "3. Implement cleaning schedules for treatment areas and equipment",
                "4. Maintain adequate supplies of PPE and hand hygiene products",
                "5. Conduct regular infection control audits",
                "6. Document all infection control activities",
                "7. Update procedures based on current public health guidance",
            ),
            regulatory_reference="NHMRC Infection Control Guidelines, Public Health Acts",
        ),
        SOPSection(
            "WorkCover/Insurance Provider Compliance",
            _lines(
                "1. Maintain current knowledge of WorkCover requirements for each relevant state/territory",
                "2. Ensure all practitioners are registered with relevant WorkCover authorities",
                "3. Implement standardized documentation templates for WorkCover patients",
                "4. Establish processes for obtaining and documenting appropriate referrals and approvals",
                "5. Conduct regular audits of WorkCover documentation",
                "6. Provide regular training on WorkCover requirements",
            ),
            regulatory_reference="State/Territory WorkCover Legislation and Provider Requirements",
        ),
        SOPSection(
            "Compliance Calendar and Monitoring",
            _lines(
                "1. Maintain a compliance calendar with all key dates and deadlines",
                "2. Conduct monthly reviews of upcoming compliance requirements",
                "3. Assign responsibility for each compliance activity",
                "4. Document completion of all compliance activities",
                "5. Report compliance status to practice leadership {{complianceReportFrequency}}",
                "6. Conduct annual comprehensive compliance review",
            ),
            variables=("complianceReportFrequency",),
        ),
        SOPSection(
            "Compliance Risk Assessment",
            _lines(
                "1. Conduct annual compliance risk assessment",
                "2. Identify high-risk areas based on:",
                "   - Regulatory changes",
                "   - Practice changes",
                "   - Previous compliance issues",
                "   - Industry trends",
                "3. Develop mitigation strategies for identified risks",
                "4. Implement controls to address high-priority risks",
                "5. Monitor effectiveness of risk mitigation strategies",
            ),
            is_required=False,
        ),
        SOPSection(
            "References",
            _lines(
                "- AHPRA Registration Standards",
                "- Physiotherapy Board of Australia Guidelines",
                "- APA Code of Conduct",
                "- Privacy Act 1988 and Australian Privacy Principles",
                "- State/Territory Health Records Acts",
                "- WorkCover/Insurance Provider Requirements",
                "- NHMRC Infection Control Guidelines",
                "- Work Health and Safety Legislation",
            ),
        ),
    ),
)


# -------------------------------------------------
# TECHNOLOGY
# -------------------------------------------------
DATA_SECURITY = SOPTemplate(
    id="sop-tech-001",
    title="Data Security and Privacy Protection",
    type=SOPType.TECHNOLOGY,
    description=(
        "Standard procedure for ensuring data security and privacy protection in healthcare practice"
    ),
    related_categories=(Category.TECHNOLOGY, Category.COMPLIANCE),
    applicable_disciplines=ALLIED + (D.CHIROPRACTIC, D.PODIATRY),
    applicable_sizes=ALL_SIZES,
    recommended_review_frequency=ReviewFrequency.QUARTERLY,
    regulatory_basis=RegulatoryBasis(
        authority="OAIC",
        standards=(
            "Privacy Act 1988",
            "Australian Privacy Principles",
            "Notifiable Data Breaches Scheme",
        ),
    ),
    industry_standards=(
        "ACSC Essential Eight",
        "RACGP Computer and Information Security Standards",
        "ISO 27001",
    ),
    sections=(
        SOPSection(
            "Purpose",
            "This Standard Operating Procedure (SOP) establishes the process for protecting patient "
            "data and practice information at {{practiceName}}. It ensures compliance with privacy "
            "legislation and cybersecurity best practices to safeguard sensitive information.",
            variables=("practiceName",),
            regulatory_reference="Privacy Act 1988, Notifiable Data Breaches Scheme",
        ),
        SOPSection(
            "Scope",
            "This procedure applies to all aspects of data security and privacy protection, including "
            "electronic health records, practice management systems, email communications, mobile "
            "devices, physical records, and third-party service providers.",
        ),
        SOPSection(
            "Responsibilities",
            _lines(
                "The following roles are responsible for implementing this procedure:",
                "",
                "- **{{securityOfficerRole}}**: Responsible for overseeing data security activities "
                "and incident response",
                "- **{{itSupportRole}}**: Responsible for implementing technical security controls",
                "- **{{staffRole}}**: Responsible for following security procedures and reporting incidents",
                "- **{{managerRole}}**: Responsible for ensuring practice-wide compliance with "
                "security requirements",
            ),
            variables=("securityOfficerRole", "itSupportRole", "staffRole", "managerRole"),
        ),
        SOPSection(
            "Essential Eight Security Controls",
            _lines(
                "1. **Application Control**",
                "   - Maintain a whitelist of approved applications",
                "   - Prevent execution of unapproved/malicious programs",
                "   - Review and update whitelist quarterly",
                "",
                "2. **Patch Applications**",
                "   - Apply security patches to applications within {{patchTimeframe}}",
                "   - Automatically update applications where possible",
                "   - Maintain a register of all applications and patch status",
                "",
                "3. **Configure Microsoft Office Macro Settings**",
                "   - Block macros from the internet",
                "   - Only allow vetted macros in trusted locations",
                "   - Control macro execution in trusted documents",
                "",
                "4. **User Application Hardening**",
                "   - Configure web browsers to block Flash, ads, and Java",
                "   - Prevent users from changing security settings",
                "   - Disable unnecessary features in Microsoft Office",
                "",
                "5. **Restrict Administrative Privileges**",
                "   - Limit admin privileges to only necessary staff",
                "   - Review admin privileges quarterly",
                "   - Use separate accounts for admin and standard activities",
                "",
                "6. **Patch Operating Systems**",
                "   - Apply security patches to operating systems within {{patchTimeframe}}",
                "   - Enable automatic updates",
                "   - Maintain a register of all systems and patch status",
                "",
                "7. **Multi-factor Authentication**",
                "   - Implement MFA for all remote access",
                "   - Require MFA for all privileged accounts",
                "   - Use MFA for accessing sensitive information",
                "",
                "8. **Regular Backups**",
                "   - Perform daily backups of important data",
                "   - Store backups securely offsite/offline",
                "   - Test restoration process {{backupTestFrequency}}",
            ),
            variables=("patchTimeframe", "backupTestFrequency"),
            regulatory_reference="Essential Eight Maturity Model, ACSC Guidelines",
        ),
        SOPSection(
            "Password Management",
            _lines(
                "1. Implement strong password requirements:",
                "   - Minimum {{passwordLength}} characters",
                "   - Complexity requirements (uppercase, lowercase, numbers, symbols)",
                "   - No common words or personal information",
                "2. Require password changes every {{passwordChangeDays}} days",
                "3. Implement account lockout after {{failedLoginAttempts}} failed attempts",
                "4. Use a secure password manager for storing credentials",
                "5. Prohibit password sharing and reuse across systems",
            ),
            variables=("passwordLength", "passwordChangeDays", "failedLoginAttempts"),
        ),
        SOPSection(
            "Email Security",
            _lines(
                "1. Implement email filtering to block malicious content",
                "2. Train staff to identify phishing attempts",
                "3. Encrypt emails containing sensitive information",
                "4. Verify recipient email addresses before sending sensitive information",
                "5. Implement secure email gateway with anti-malware scanning",
                "6. Establish policy for handling suspicious emails",
            ),
        ),
        SOPSection(
            "Mobile Device Security",
            _lines(
                "1. Require passcodes on all mobile devices accessing practice data",
                "2. Implement mobile device management (MDM) solution",
                "3. Enable remote wipe capability for lost/stolen devices",
                "4. Encrypt all mobile devices",
                "5. Restrict app installation to approved applications",
                "6. Require regular security updates",
            ),
        ),
        SOPSection(
            "Physical Security Controls",
            _lines(
                "1. Secure server rooms and network equipment",
                "2. Implement access controls for restricted areas",
                "3. Position screens to prevent unauthorized viewing",
                "4. Lock workstations when unattended (auto-lock after {{autoLockMinutes}} minutes)",
                "5. Secure physical records in locked cabinets",
                "6. Maintain visitor log and escort visitors in sensitive areas",
                "7. Implement clean desk policy",
            ),
            variables=("autoLockMinutes",),
        ),
        SOPSection(
            "Data Breach Response Plan",
            _lines(
                "1. Establish data breach response team with clear roles",
                "2. Document steps for containing and assessing breaches:",
                "   - Immediate containment actions",
                "   - Assessment of breach scope and risk",
                "   - Notification requirements determination",
                "3. Implement notification procedures compliant with the Notifiable Data Breaches scheme",
                "4. Document all breach incidents and response actions",
                "5. Conduct post-incident review and implement improvements",
                "6. Test breach response plan annually",
            ),
            regulatory_reference="Notifiable Data Breaches Scheme, OAIC Guidelines",
        ),
        SOPSection(
            "Staff Security Training",
            _lines(
                "1. Conduct security awareness training for all staff:",
                "   - Initial training for new staff",
                "   - Refresher training {{securityTrainingFrequency}}",
                "2. Include training on:",
                "   - Password security",
                "   - Phishing awareness",
                "   - Safe internet usage",
                "   - Mobile device security",
                "   - Physical security",
                "   - Data breach reporting",
                "3. Document all training completion",
                "4. Conduct simulated phishing tests to assess awareness",
            ),
            variables=("securityTrainingFrequency",),
        ),
        SOPSection(
            "Third-Party Security Management",
            _lines(
                "1. Assess security practices of all third-party service providers",
                "2. Include security and privacy requirements in contracts",
                "3. Verify compliance with security requirements annually",
                "4. Limit third-party access to minimum necessary data",
                "5. Review third-party access privileges quarterly",
                "6. Maintain register of all third-party service providers",
            ),
            is_required=False,
        ),
        SOPSection(
            "Security Monitoring and Auditing",
            _lines(
                "1. Implement logging for all systems and applications",
                "2. Review security logs {{logReviewFrequency}}",
                "3. Monitor for unauthorized access attempts",
                "4. Conduct security audits {{securityAuditFrequency}}",
                "5. Address identified security issues promptly",
                "6. Document all monitoring and audit activities",
            ),
            is_required=False,
            variables=("logReviewFrequency", "securityAuditFrequency"),
        ),
        SOPSection(
            "References",
            _lines(
                "- Privacy Act 1988 and Australian Privacy Principles",
                "- Notifiable Data Breaches Scheme",
                "- ACSC Essential Eight Maturity Model",
                "- OAIC Data Breach Preparation and Response Guide",
                "- RACGP Computer and Information Security Standards",
                "- {{practiceSecurityPolicyDocument}}",
            ),
            variables=("practiceSecurityPolicyDocument",),
        ),
    ),
)


# -------------------------------------------------
# PATIENT CARE
# -------------------------------------------------
CLINICAL_OUTCOMES = SOPTemplate(
    id="sop-pat-001",
    title="Clinical Outcomes Measurement and Reporting",
    type=SOPType.PATIENT_CARE,
    description="Standard procedure for measuring, tracking, and reporting clinical outcomes",
    related_categories=(Category.PATIENT_CARE, Category.OPERATIONS),
    applicable_disciplines=(D.PHYSIOTHERAPY,),
    applicable_sizes=ALL_SIZES,
    recommended_review_frequency=ReviewFrequency.BIANNUALLY,
    industry_standards=(
        "APA Outcome Measures Guidelines",
        "Evidence-Based Practice Standards",
        "ACSQHC Clinical Care Standards",
    ),
    sections=(
        SOPSection(
            "Purpose",
            "This Standard Operating Procedure (SOP) establishes the process for measuring, tracking, "
            "and reporting clinical outcomes at {{practiceName}}. It ensures consistent use of "
            "validated outcome measures to demonstrate treatment effectiveness, guide clinical "
            "decision-making, and support quality improvement.",
            variables=("practiceName",),
        ),
        SOPSection(
            "Scope",
            "This procedure applies to all patient care activities, including initial assessment, "
            "treatment planning, progress monitoring, and discharge planning.",
        ),
        SOPSection(
            "Responsibilities",
            _lines(
                "The following roles are responsible for implementing this procedure:",
                "",
                "- **{{clinicianRole}}**: Responsible for administering outcome measures and "
                "documenting results",
                "- **{{clinicalLeaderRole}}**: Responsible for selecting appropriate outcome measures "
                "and ensuring consistent application",
                "- **{{dataAnalystRole}}**: Responsible for aggregating and analyzing outcomes data",
                "- **{{managerRole}}**: Responsible for using outcomes data for quality improvement",
            ),
            variables=("clinicianRole", "clinicalLeaderRole", "dataAnalystRole", "managerRole"),
        ),
        SOPSection(
            "Standard Outcome Measures",
            _lines(
                "The practice will use the following validated outcome measures based on condition:",
                "",
                "1. **Pain Measures**:",
                "   - Numeric Pain Rating Scale (NPRS)",
                "   - Visual Analog Scale (VAS)",
                "   - Pain Self-Efficacy Questionnaire (PSEQ)",
                "",
                "2. **Function Measures**:",
                "   - Patient-Specific Functional Scale (PSFS)",
                "   - Lower Extremity Functional Scale (LEFS)",
                "   - Upper Extremity Functional Index (UEFI)",
                "   - Roland-Morris Disability Questionnaire (RMDQ)",
                "   - Oswestry Disability Index (ODI)",
                "",
                "3. **Quality of Life Measures**:",
                "   - SF-12 Health Survey",
                "   - EQ-5D-5L",
                "",
                "4. **Condition-Specific Measures**:",
                "   - Neck Disability Index (NDI)",
                "   - Shoulder Pain and Disability Index (SPADI)",
                "   - Western Ontario and McMaster Universities Osteoarthritis Index (WOMAC)",
                "",
                "5. **Global Rating of Change**:",
                "   - Global Rating of Change Scale (GROC)",
            ),
        ),
        SOPSection(
            "Outcome Measurement Schedule",
            _lines(
                "1. **Initial Assessment**:",
                "   - Administer baseline outcome measures appropriate to patient condition",
                "   - Document baseline scores in patient record",
                "   - Establish treatment goals based on outcome measures",
                "",
                "2. **Progress Monitoring**:",
                "   - Re-administer outcome measures every {{progressAssessmentInterval}} treatments",
                "   - Document progress scores in patient record",
                "   - Adjust treatment plan based on progress",
                "",
                "3. **Discharge Assessment**:",
                "   - Administer final outcome measures at discharge",
                "   - Document final scores in patient record",
                "   - Compare to baseline and calculate change scores",
            ),
            variables=("progressAssessmentInterval",),
        ),
        SOPSection(
            "Minimum Clinically Important Difference",
            _lines(
                "Use the following Minimum Clinically Important Difference (MCID) values to "
                "determine meaningful change:",
                "",
                "1. **Pain (NPRS/VAS)**: 2 points or 30% reduction",
                "2. **PSFS**: 2 points per activity",
                "3. **LEFS**: 9 points",
                "4. **UEFI**: 8 points",
                "5. **RMDQ**: 5 points",
                "6. **ODI**: 10 points",
                "7. **NDI**: 7 points",
                "8. **SPADI**: 8 points",
                "",
                "Treatment plans should be reviewed and potentially modified if patients are not "
                "achieving MCID within expected timeframes.",
            ),
        ),
        SOPSection(
            "Data Collection and Management",
            _lines(
                "1. Use standardized electronic forms for outcome measure collection",
                "2. Enter all outcome data into practice management system",
                "3. Ensure data fields are consistent and complete",
                "4. Back up outcomes data {{backupFrequency}}",
                "5. Maintain historical outcomes data for minimum {{dataRetentionPeriod}}",
            ),
            variables=("backupFrequency", "dataRetentionPeriod"),
        ),
        SOPSection(
            "Data Analysis and Reporting",
            _lines(
                "1. Generate individual patient progress reports for each episode of care",
                "2. Aggregate outcomes data by:",
                "   - Condition/diagnosis",
                "   - Clinician",
                "   - Treatment approach",
                "   - Patient demographics",
                "3. Calculate key metrics:",
                "   - Average change scores",
                "   - Percentage of patients achieving MCID",
                "   - Average number of visits to achieve MCID",
                "   - Cost per successful outcome",
                "4. Generate practice-wide outcomes reports {{reportingFrequency}}",
            ),
            variables=("reportingFrequency",),
        ),
        SOPSection(
            "Benchmarking and Quality Improvement",
            _lines(
                "1. Compare practice outcomes to industry benchmarks:",
                "   - Target ≥30% functional improvement",
                "   - Target ≥40% pain reduction",
                "   - Target ≥25% ROM improvement",
                "   - Target ≥85% patient satisfaction",
                "2. Identify areas for improvement based on outcomes data",
                "3. Develop and implement quality improvement initiatives",
                "4. Measure impact of quality improvement initiatives on outcomes",
                "5. Conduct outcomes review meetings {{reviewMeetingFrequency}}",
            ),
            variables=("reviewMeetingFrequency",),
        ),
        SOPSection(
            "Patient Communication",
            _lines(
                "1. Explain purpose of outcome measures to patients",
                "2. Share individual progress reports with patients",
                "3. Use outcome data in patient education",
                "4. Include outcome achievements in discharge summaries",
                "5. Use aggregate outcomes data in marketing materials (anonymized)",
            ),
        ),
        SOPSection(
            "Referrer Communication",
            _lines(
                "1. Include outcome measure results in referrer reports",
                "2. Highlight achievement of clinically meaningful improvements",
                "3. Share aggregate outcomes data with referral sources {{referrerReportFrequency}}",
                "4. Use outcomes data to demonstrate value to referral networks",
            ),
            is_required=False,
            variables=("referrerReportFrequency",),
        ),
        SOPSection(
            "Staff Training",
            _lines(
                "1. Train all clinical staff on:",
                "   - Proper administration of outcome measures",
                "   - Interpretation of results",
                "   - Using outcomes to guide clinical decision-making",
                "   - Communicating outcomes to patients",
                "2. Provide refresher training {{trainingFrequency}}",
                "3. Document all training completion",
            ),
            variables=("trainingFrequency",),
        ),
        SOPSection(
            "References",
            _lines(
                "- APA Outcome Measures Guidelines",
                "- Validated Outcome Measures Research",
                "- Clinical Practice Guidelines",
                "- {{practiceOutcomesMeasurementGuide}}",
            ),
            is_required=False,
            variables=("practiceOutcomesMeasurementGuide",),
        ),
    ),
)


SOP_TEMPLATES = (
    BILLING_AND_COLLECTION,
    SCHEDULING,
    REGULATORY_COMPLIANCE,
    DATA_SECURITY,
    CLINICAL_OUTCOMES,
)
