from datetime import datetime

import pytest

from practicehealth.core.enums import DisciplineType, SOPStatus
from practicehealth.core.errors import NotFoundError
from practicehealth.core.models import SOPSection
from practicehealth.documents import SOPGenerator, substitute


PRACTICE = {"practiceName": "Harbour Physio", "billingRoleName": "Billing Officer"}


@pytest.fixture
def generator(clock):
    return SOPGenerator(clock=clock)


# -------------------------------------------------
# SUBSTITUTION
# -------------------------------------------------
def test_substitution_fills_known_variables():
    section = SOPSection("Purpose", "Applies at {{practiceName}}.", variables=("practiceName",))
    assert substitute(section, PRACTICE).content == "Applies at Harbour Physio."


def test_missing_variable_leaves_visible_marker():
    section = SOPSection("Roles", "Owner: {{managerRoleName}}", variables=("managerRoleName",))
    assert substitute(section, {}).content == "Owner: [managerRoleName]"
    assert substitute(section, {"managerRoleName": ""}).content == "Owner: [managerRoleName]"


def test_substitution_is_idempotent():
    section = SOPSection(
        "Roles",
        "{{billingRoleName}} reports to {{managerRoleName}}",
        variables=("billingRoleName", "managerRoleName"),
    )
    once = substitute(section, PRACTICE)
    assert substitute(once, PRACTICE) == once


def test_undeclared_placeholders_are_left_alone():
    section = SOPSection("Notes", "See {{appendix}}", variables=())
    assert substitute(section, {"appendix": "A"}).content == "See {{appendix}}"


def test_supplied_values_are_not_expanded_again():
    section = SOPSection(
        "Roles",
        "{{billingRoleName}} reports to {{managerRoleName}}",
        variables=("billingRoleName", "managerRoleName"),
    )
    data = {"billingRoleName": "Clerk {{managerRoleName}}", "managerRoleName": "Owner"}

    assert substitute(section, data).content == "Clerk {{managerRoleName}} reports to Owner"


# -------------------------------------------------
# GENERATION
# -------------------------------------------------
def test_generate_billing_sop(generator, fixed_now):
    sop = generator.generate("sop-fin-001", PRACTICE)

    assert sop.id.startswith("gen-")
    assert sop.template_id == "sop-fin-001"
    assert sop.status == SOPStatus.DRAFT
    assert sop.created_at == fixed_now
    assert sop.last_modified == fixed_now
    # quarterly review, calendar aware
    assert sop.next_review_date == datetime(2025, 4, 30, 9, 30)

    purpose = sop.sections[0]
    assert "Harbour Physio" in purpose.content
    assert "{{" not in purpose.content


def test_generated_sop_carries_regulatory_compliance(generator, fixed_now):
    sop = generator.generate("sop-fin-001")

    assert sop.regulatory_compliance.authority == "OAIC"
    assert sop.regulatory_compliance.standard.startswith("Privacy Act 1988; Health Insurance Act")
    assert sop.regulatory_compliance.last_verified == fixed_now


def test_template_without_basis_has_no_compliance_block(generator):
    assert generator.generate("sop-ops-001").regulatory_compliance is None


def test_every_placeholder_is_resolved(generator):
    for template in generator.list_templates():
        sop = generator.generate(template.id)
        for section in sop.sections:
            assert "{{" not in section.content, (template.id, section.title)


def test_unknown_template_raises(generator):
    with pytest.raises(NotFoundError, match="SOP template with ID sop-nope not found"):
        generator.generate("sop-nope")


def test_generated_ids_are_unique(generator):
    assert generator.generate("sop-ops-001").id != generator.generate("sop-ops-001").id


# -------------------------------------------------
# RECOMMENDATION
# -------------------------------------------------
def test_recommend_sops_puts_regulatory_templates_first(generator, make_health_score):
    hs = make_health_score({"FINANCIAL": 50, "OPERATIONS": 60, "PATIENT_CARE": 90})
    ids = [t.id for t in generator.recommend_sops(hs, DisciplineType.PHYSIOTHERAPY, "SMALL")]

    assert ids == ["sop-fin-001", "sop-comp-001", "sop-tech-001", "sop-ops-001", "sop-pat-001"]


def test_recommend_sops_filters_by_discipline(generator, make_health_score):
    hs = make_health_score({"FINANCIAL": 50, "OPERATIONS": 60})
    ids = [t.id for t in generator.recommend_sops(hs, "SPEECH_THERAPY", "SMALL")]

    assert "sop-comp-001" not in ids
    assert "sop-pat-001" not in ids
    assert "sop-fin-001" in ids


def test_recommend_sops_without_regulatory_boost(generator, make_health_score):
    hs = make_health_score({"FINANCIAL": 90, "OPERATIONS": 90, "TECHNOLOGY": 40})
    ids = [t.id for t in generator.recommend_sops(hs, "PHYSIOTHERAPY", "SMALL", include_regulatory=False)]

    assert ids == ["sop-tech-001"]
