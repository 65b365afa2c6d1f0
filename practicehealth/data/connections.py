"""
Category influence decision table.

BASE_CONNECTIONS[source][target] is the base strength of the directed
edge source -> target. Every ordered pair of distinct categories must be
listed either there or in ABSENT_CONNECTIONS; the check runs at import
(see practicehealth.data.validate_reference_data).
"""

from types import MappingProxyType

from practicehealth.core.enums import Category, PracticeSize

FIN = Category.FINANCIAL
OPS = Category.OPERATIONS
PC = Category.PATIENT_CARE
TECH = Category.TECHNOLOGY
COMP = Category.COMPLIANCE
FAC = Category.FACILITIES
MKT = Category.MARKETING
GEO = Category.GEOGRAPHY
STAFF = Category.STAFFING
AUTO = Category.AUTOMATION


BASE_CONNECTIONS = MappingProxyType({
    FIN: MappingProxyType({OPS: 0.8, STAFF: 0.9, MKT: 0.7, FAC: 0.6, TECH: 0.7, COMP: 0.6, PC: 0.5}),
    OPS: MappingProxyType({PC: 0.9, STAFF: 0.9, TECH: 0.8, COMP: 0.8, FIN: 0.7, FAC: 0.7}),
    PC: MappingProxyType({COMP: 0.8, STAFF: 0.9, TECH: 0.7, OPS: 0.8, FIN: 0.6, MKT: 0.7}),
    TECH: MappingProxyType({OPS: 0.8, AUTO: 0.9, COMP: 0.7, PC: 0.7, FIN: 0.6}),
    COMP: MappingProxyType({OPS: 0.7, PC: 0.8, FIN: 0.7, TECH: 0.7, STAFF: 0.6}),
    FAC: MappingProxyType({OPS: 0.7, PC: 0.6, FIN: 0.7, COMP: 0.6}),
    MKT: MappingProxyType({FIN: 0.8, GEO: 0.7, PC: 0.6, OPS: 0.5}),
    GEO: MappingProxyType({MKT: 0.8, FIN: 0.6, OPS: 0.5, STAFF: 0.5}),
    STAFF: MappingProxyType({FIN: 0.9, OPS: 0.9, PC: 0.9, COMP: 0.7, TECH: 0.6}),
    AUTO: MappingProxyType({OPS: 0.9, TECH: 0.9, FIN: 0.7, STAFF: 0.8, COMP: 0.6}),
})

# Pairs with no direct influence.
ABSENT_CONNECTIONS = MappingProxyType({
    FIN: (GEO, AUTO),
    OPS: (MKT, GEO, AUTO),
    PC: (FAC, GEO, AUTO),
    TECH: (FAC, MKT, GEO, STAFF),
    COMP: (FAC, MKT, GEO, AUTO),
    FAC: (TECH, MKT, GEO, STAFF, AUTO),
    MKT: (TECH, COMP, FAC, STAFF, AUTO),
    GEO: (PC, TECH, COMP, FAC, AUTO),
    STAFF: (FAC, MKT, GEO, AUTO),
    AUTO: (PC, FAC, MKT, GEO),
})


CONNECTION_DESCRIPTIONS = MappingProxyType({
    FIN: MappingProxyType({
        OPS: "Financial health directly impacts operational capabilities and resource allocation",
        STAFF: "Financial resources determine staffing capacity, quality, and retention",
        MKT: "Marketing budget affects patient acquisition, revenue growth, and market positioning",
        FAC: "Facility investments depend on financial resources and impact operational efficiency",
        TECH: "Technology investments require financial planning and impact long-term efficiency",
        COMP: "Financial resources affect compliance capabilities and risk management",
        PC: "Financial stability enables investment in quality care and outcomes improvement",
    }),
    OPS: MappingProxyType({
        PC: "Operational efficiency directly impacts patient care quality and outcomes",
        STAFF: "Operations effectiveness depends on proper staffing and workflow design",
        TECH: "Operational processes rely on technology infrastructure and digital workflows",
        COMP: "Operations must align with compliance requirements to minimize risk",
        FIN: "Operational efficiency drives financial performance and resource utilization",
        FAC: "Operational design must optimize facility layout and resource access",
    }),
    PC: MappingProxyType({
        COMP: "Patient care protocols must adhere to clinical and regulatory standards",
        STAFF: "Quality patient care depends on skilled staff and appropriate ratios",
        TECH: "Patient care outcomes can be enhanced through appropriate technology",
        OPS: "Patient care quality is directly affected by operational workflows",
        FIN: "Superior patient outcomes drive financial performance through retention and referrals",
        MKT: "Patient outcomes and satisfaction are powerful marketing assets",
    }),
    TECH: MappingProxyType({
        OPS: "Technology systems directly impact operational efficiency and capacity",
        AUTO: "Technology infrastructure enables automation capabilities",
        COMP: "Technology systems must support compliance and security requirements",
        PC: "Technology tools can enhance clinical decision-making and outcomes",
        FIN: "Technology investments affect financial efficiency and revenue capture",
    }),
    COMP: MappingProxyType({
        OPS: "Compliance requirements shape operational protocols and documentation",
        PC: "Compliance standards ensure patient safety and care quality",
        FIN: "Compliance failures create significant financial risk and potential penalties",
        TECH: "Compliance requirements drive technology security and privacy features",
        STAFF: "Compliance depends on staff awareness, training, and adherence to protocols",
    }),
    FAC: MappingProxyType({
        OPS: "Facility design impacts operational flow and efficiency",
        PC: "Facility quality affects patient experience and treatment capabilities",
        FIN: "Facility costs represent a significant fixed expense category",
        COMP: "Facilities must meet accessibility, safety, and regulatory standards",
    }),
    MKT: MappingProxyType({
        FIN: "Marketing effectiveness directly impacts revenue and practice growth",
        GEO: "Marketing strategies must align with geographic market characteristics",
        PC: "Marketing messaging should reflect actual patient care quality and outcomes",
        OPS: "Marketing activities drive patient volume that operations must accommodate",
    }),
    GEO: MappingProxyType({
        MKT: "Geographic location determines target market and competition",
        FIN: "Geographic location impacts reimbursement rates and operating costs",
        OPS: "Geographic factors affect scheduling, transportation, and accessibility",
        STAFF: "Location affects staff recruitment, retention, and compensation requirements",
    }),
    STAFF: MappingProxyType({
        FIN: "Staffing costs represent the largest expense category for most practices",
        OPS: "Staff capabilities and allocation directly impact operational performance",
        PC: "Staff quality and engagement are primary determinants of care quality",
        COMP: "Staff training and compliance awareness affect regulatory risk",
        TECH: "Staff technology adoption affects return on technology investments",
    }),
    AUTO: MappingProxyType({
        OPS: "Automation directly enhances operational efficiency and consistency",
        TECH: "Automation capabilities depend on technology infrastructure",
        FIN: "Automation reduces costs and improves financial performance over time",
        STAFF: "Automation affects staffing requirements and role definitions",
        COMP: "Automated processes must maintain compliance with regulations",
    }),
})


CONNECTION_RESEARCH = MappingProxyType({
    FIN: MappingProxyType({
        OPS: "Financial Management Review, 2023; Healthcare Financial Analytics, 2023",
        STAFF: "Healthcare HR, 2023; Workforce Analytics, 2023",
        MKT: "Healthcare Marketing, 2023; Practice Growth, 2023",
        FAC: "Facility Management Review, 2023; Healthcare Maintenance, 2023",
        TECH: "Health Tech Review, 2023; Digital Health, 2023",
    }),
    OPS: MappingProxyType({
        PC: "Clinical Workflow, 2023; Healthcare Operations Research, 2023",
        STAFF: "Workforce Analytics, 2023; Operations Management Health, 2023",
        TECH: "Healthcare IT News, 2023; J Healthcare Tech, 2023",
        COMP: "AHPRA Guidelines, 2023; APA Practice Standards, 2023",
    }),
    PC: MappingProxyType({
        COMP: "Clinical Governance Framework, 2023; APA Guidelines, 2023",
        STAFF: "Professional Development J, 2023; CE impact on outcomes, 2023",
        TECH: "Telemedicine J, 2023; Digital Health, 2023",
    }),
})


# Additive offsets applied before clamping; missing pairs are 0.
SIZE_ADJUSTMENTS = MappingProxyType({
    PracticeSize.SOLO: MappingProxyType({
        (FIN, STAFF): -0.1,
        (FIN, FAC): -0.1,
        (OPS, STAFF): -0.2,
        (TECH, OPS): 0.1,
        (MKT, FIN): 0.1,
    }),
    PracticeSize.SMALL: MappingProxyType({
        (FIN, STAFF): 0.0,
        (OPS, STAFF): 0.0,
        (COMP, OPS): 0.1,
        (TECH, OPS): 0.05,
    }),
    PracticeSize.MEDIUM: MappingProxyType({
        (FIN, STAFF): 0.05,
        (OPS, STAFF): 0.05,
        (COMP, OPS): 0.1,
        (TECH, OPS): 0.1,
    }),
    PracticeSize.LARGE: MappingProxyType({
        (FIN, STAFF): 0.1,
        (OPS, STAFF): 0.1,
        (COMP, OPS): 0.15,
        (TECH, OPS): 0.15,
        (GEO, OPS): 0.2,
    }),
    PracticeSize.ENTERPRISE: MappingProxyType({
        (FIN, STAFF): 0.1,
        (OPS, STAFF): 0.1,
        (COMP, OPS): 0.2,
        (TECH, OPS): 0.2,
        (GEO, OPS): 0.3,
    }),
})


# -------------------------------------------------
# VISUALISATION GROUPS
# -------------------------------------------------
CATEGORY_GROUPS = MappingProxyType({
    FIN: 1,
    OPS: 2,
    PC: 2,
    COMP: 3,
    TECH: 4,
    AUTO: 4,
    STAFF: 5,
    MKT: 6,
    GEO: 6,
    FAC: 7,
})
