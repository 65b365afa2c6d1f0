"""
SOP generation from the template library.

Substitution is a single pass over each declared ``{{variable}}``;
a missing or empty value leaves a visible ``[variable]`` marker so an
unfinished document is obvious before it is published.
"""

import logging
import re
import uuid
from datetime import datetime
from typing import Callable, Dict, List, Mapping, Optional, Sequence

from practicehealth.core.enums import Category, SOPStatus
from practicehealth.core.errors import NotFoundError
from practicehealth.core.models import (
    BusinessHealthScore,
    GeneratedSOP,
    RegulatoryCompliance,
    SOPSection,
    SOPTemplate,
)
from practicehealth.core.scoring import parse_discipline, parse_size
from practicehealth.data.sop_templates import SOP_TEMPLATES
from practicehealth.utils.dates import next_review_date

logger = logging.getLogger(__name__)

LOW_SCORE_CUTOFF = 70
MAX_RECOMMENDED = 5

PLACEHOLDER = re.compile(r"\{\{(\w+)\}\}")


def substitute(section: SOPSection, practice_data: Mapping[str, str]) -> SOPSection:
    declared = set(section.variables)

    def fill(match):
        var = match.group(1)
        if var not in declared:
            return match.group(0)
        return str(practice_data.get(var) or f"[{var}]")

    # values are inserted once and never rescanned
    content = PLACEHOLDER.sub(fill, section.content)
    return SOPSection(
        title=section.title,
        content=content,
        is_required=section.is_required,
        variables=section.variables,
        regulatory_reference=section.regulatory_reference,
    )


class SOPGenerator:
    def __init__(
        self,
        templates: Optional[Sequence[SOPTemplate]] = None,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.templates = tuple(templates) if templates is not None else SOP_TEMPLATES
        self.clock = clock

    # -------------------------------------------------
    # TEMPLATE LOOKUP
    # -------------------------------------------------
    def list_templates(self) -> List[SOPTemplate]:
        return list(self.templates)

    def get_template(self, template_id: str) -> SOPTemplate:
        for template in self.templates:
            if template.id == template_id:
                return template
        raise NotFoundError("SOP template", template_id)

    # -------------------------------------------------
    # GENERATION
    # -------------------------------------------------
    def generate(self, template_id: str, practice_data: Optional[Mapping[str, str]] = None) -> GeneratedSOP:
        template = self.get_template(template_id)
        practice_data = practice_data or {}
        now = self.clock()

        sections = tuple(substitute(s, practice_data) for s in template.sections)

        compliance = None
        if template.regulatory_basis is not None:
            compliance = RegulatoryCompliance(
                authority=template.regulatory_basis.authority,
                standard=template.regulatory_basis.standard,
                last_verified=now,
            )

        unfilled = sorted(
            {v for s in template.sections for v in s.variables if not practice_data.get(v)}
        )
        if unfilled:
            logger.info("SOP %s generated with unfilled variables: %s", template_id, ", ".join(unfilled))

        return GeneratedSOP(
            id=f"gen-{uuid.uuid4().hex[:12]}",
            template_id=template.id,
            title=template.title,
            type=template.type,
            created_at=now,
            last_modified=now,
            sections=sections,
            status=SOPStatus.DRAFT,
            next_review_date=next_review_date(template.recommended_review_frequency, now),
            regulatory_compliance=compliance,
        )

    # -------------------------------------------------
    # RECOMMENDATION
    # -------------------------------------------------
    def recommend_sops(
        self,
        health_score: BusinessHealthScore,
        discipline,
        size,
        include_regulatory: bool = True,
    ) -> List[SOPTemplate]:
        """
        Templates addressing the practice's weak categories (score < 70).

        Compliance is always treated as weak when ``include_regulatory`` is
        set; regulatory templates then sort first, followed by how many weak
        categories each template covers.
        """
        discipline = parse_discipline(discipline)
        size = parse_size(size)

        weak: List[Category] = [
            c.category
            for c in sorted(health_score.categories, key=lambda c: c.score)
            if c.score < LOW_SCORE_CUTOFF
        ]
        if include_regulatory and Category.COMPLIANCE not in weak:
            weak.append(Category.COMPLIANCE)

        def overlap(template: SOPTemplate) -> int:
            return sum(1 for c in template.related_categories if c in weak)

        relevant = [
            t for t in self.templates
            if discipline in t.applicable_disciplines
            and size in t.applicable_sizes
            and overlap(t) > 0
        ]

        def sort_key(template: SOPTemplate):
            regulatory_rank = 0
            if include_regulatory and template.regulatory_basis is None:
                regulatory_rank = 1
            return (regulatory_rank, -overlap(template))

        relevant.sort(key=sort_key)
        return relevant[:MAX_RECOMMENDED]
