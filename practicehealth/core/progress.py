"""
Assessment progress tracking.

Tracker state is immutable: every update returns a new
``TrackedAssessment`` and leaves the input untouched.
"""

import logging
from dataclasses import replace
from datetime import datetime
from typing import Callable, Dict, List, Optional, Sequence

from practicehealth.core.enums import Category, ModuleStatus, PracticeSize, Priority
from practicehealth.core.errors import NotFoundError
from practicehealth.core.models import (
    AssessmentModule,
    AssessmentProgress,
    CategoryCompletion,
    ModuleProgress,
    ModuleState,
    ModuleSuggestion,
    TrackedAssessment,
    coerce_response,
)
from practicehealth.core.scoring import parse_discipline, parse_size, round_half_up
from practicehealth.data.modules import (
    ASSESSMENT_MODULES,
    SOLO_EXCLUDED_MODULES,
    SUGGESTION_CATEGORY_ORDER,
)

logger = logging.getLogger(__name__)

MAX_SUGGESTIONS = 5
MAX_REQUIRED_SUGGESTIONS = 3

_CATEGORY_INDEX = {c: i for i, c in enumerate(Category)}
_SUGGESTION_INDEX = {c: i for i, c in enumerate(SUGGESTION_CATEGORY_ORDER)}


def _module_key(module: AssessmentModule):
    return (_CATEGORY_INDEX[module.category], module.order)


def _suggestion_key(module: AssessmentModule):
    return (_SUGGESTION_INDEX[module.category], module.order)


class ProgressTrackingSystem:
    """Module catalog, next-module logic and completion statistics."""

    def __init__(
        self,
        modules: Optional[Sequence[AssessmentModule]] = None,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.modules = tuple(modules) if modules is not None else ASSESSMENT_MODULES
        self.clock = clock
        self._by_id: Dict[str, AssessmentModule] = {m.id: m for m in self.modules}

    # -------------------------------------------------
    # CATALOG
    # -------------------------------------------------
    def get_module(self, module_id: str) -> AssessmentModule:
        try:
            return self._by_id[module_id]
        except KeyError:
            raise NotFoundError("Module", module_id) from None

    def get_relevant_modules(self, discipline=None, size=PracticeSize.SMALL) -> List[AssessmentModule]:
        # Modules are shared across disciplines; size decides what is skipped.
        size = parse_size(size)
        modules = list(self.modules)
        if size == PracticeSize.SOLO:
            modules = [m for m in modules if m.id not in SOLO_EXCLUDED_MODULES]
        return sorted(modules, key=_module_key)

    # -------------------------------------------------
    # LIFECYCLE
    # -------------------------------------------------
    def initialize_assessment(
        self,
        user_id: str,
        practice_id: str,
        discipline=None,
        size=PracticeSize.SMALL,
    ) -> TrackedAssessment:
        discipline = parse_discipline(discipline)
        size = parse_size(size)
        modules = self.get_relevant_modules(discipline, size)

        first = next(
            (m for m in modules if m.category == Category.FINANCIAL and m.order == 1),
            None,
        )
        now = self.clock()

        return TrackedAssessment(
            user_id=user_id,
            practice_id=practice_id,
            discipline=discipline,
            size=size,
            modules=tuple(ModuleState(module_id=m.id) for m in modules),
            current_module_id=first.id if first else None,
            overall_progress=0,
            started_at=now,
            last_updated=now,
        )

    def update_module_progress(
        self,
        progress: TrackedAssessment,
        module_id: str,
        responses: Sequence,
        is_complete: bool = False,
    ) -> TrackedAssessment:
        module = self.get_module(module_id)
        responses = tuple(coerce_response(r) for r in (responses or ()))
        now = self.clock()

        previous = progress.module_state(module_id)
        percentage = min(100, round_half_up(len(responses) / module.question_count * 100))

        state = ModuleState(
            module_id=module_id,
            status=ModuleStatus.COMPLETED if is_complete else ModuleStatus.IN_PROGRESS,
            progress=100 if is_complete else percentage,
            responses=responses,
            started_at=(previous.started_at if previous and previous.started_at else now),
            completed_at=now if is_complete else None,
        )

        if previous is None:
            states = progress.modules + (state,)
        else:
            states = tuple(state if s.module_id == module_id else s for s in progress.modules)

        updated = replace(progress, modules=states, last_updated=now)

        was_complete = previous is not None and previous.status == ModuleStatus.COMPLETED
        if is_complete and not was_complete:
            updated = replace(updated, current_module_id=self.next_module_id(updated))

        logger.debug("Module %s -> %s (%d%%)", module_id, state.status.value, state.progress)
        return replace(updated, overall_progress=self.overall_progress(updated))

    # -------------------------------------------------
    # DERIVED VALUES
    # -------------------------------------------------
    def _tracked_modules(self, progress: TrackedAssessment) -> List[AssessmentModule]:
        return [self._by_id[s.module_id] for s in progress.modules if s.module_id in self._by_id]

    def _incomplete(self, progress: TrackedAssessment, required: bool) -> List[AssessmentModule]:
        return [
            m for m in self._tracked_modules(progress)
            if m.is_required == required
            and progress.module_state(m.id).status != ModuleStatus.COMPLETED
        ]

    def next_module_id(self, progress: TrackedAssessment) -> Optional[str]:
        for required in (True, False):
            pending = sorted(self._incomplete(progress, required), key=_module_key)
            if pending:
                return pending[0].id
        return None

    def overall_progress(self, progress: TrackedAssessment) -> int:
        required = [m for m in self._tracked_modules(progress) if m.is_required]
        if not required:
            return 0
        total = sum(progress.module_state(m.id).progress for m in required)
        return round_half_up(total / len(required))

    def get_recommended_modules(self, progress: TrackedAssessment) -> List[ModuleSuggestion]:
        suggestions: List[ModuleSuggestion] = []

        current = self._by_id.get(progress.current_module_id) if progress.current_module_id else None
        if current is not None:
            suggestions.append(ModuleSuggestion(current, Priority.HIGH, "Current module in progress"))

        required = sorted(
            (m for m in self._incomplete(progress, True) if m is not current),
            key=_suggestion_key,
        )
        for module in required[:MAX_REQUIRED_SUGGESTIONS]:
            suggestions.append(
                ModuleSuggestion(
                    module, Priority.MEDIUM, f"Required module for {module.category.label} assessment"
                )
            )

        optional = sorted(
            (m for m in self._incomplete(progress, False) if m is not current),
            key=_suggestion_key,
        )
        for module in optional[: max(0, MAX_SUGGESTIONS - len(suggestions))]:
            suggestions.append(
                ModuleSuggestion(
                    module, Priority.LOW, f"Optional module for {module.category.label} assessment"
                )
            )

        return suggestions

    def get_estimated_completion_time(self, progress: TrackedAssessment) -> int:
        """Minutes left across every tracked module that is not completed."""
        remaining = 0
        for state in progress.modules:
            module = self._by_id.get(state.module_id)
            if module is None or state.status == ModuleStatus.COMPLETED:
                continue
            if state.status == ModuleStatus.IN_PROGRESS:
                remaining += round_half_up(module.estimated_time_minutes * (1 - state.progress / 100))
            else:
                remaining += module.estimated_time_minutes
        return remaining

    def get_category_completion_stats(self, progress: TrackedAssessment) -> Dict[Category, CategoryCompletion]:
        counts = {c: [0, 0] for c in Category}
        for state in progress.modules:
            module = self._by_id.get(state.module_id)
            if module is None:
                continue
            counts[module.category][1] += 1
            if state.status == ModuleStatus.COMPLETED:
                counts[module.category][0] += 1

        return {
            category: CategoryCompletion(
                category=category,
                completed=done,
                total=total,
                percentage=round_half_up(done / total * 100) if total else 0,
            )
            for category, (done, total) in counts.items()
        }

    def to_assessment_progress(self, progress: TrackedAssessment) -> AssessmentProgress:
        """Adapt tracker state into the score calculator's input."""
        modules = []
        for state in progress.modules:
            module = self._by_id.get(state.module_id)
            if module is None or state.status == ModuleStatus.NOT_STARTED:
                continue
            modules.append(
                ModuleProgress(
                    module_id=module.id,
                    category=module.category,
                    responses=list(state.responses),
                    completed_questions=len(state.responses),
                    total_questions=module.question_count,
                )
            )
        return AssessmentProgress(
            user_id=progress.user_id,
            modules=modules,
            last_updated=progress.last_updated,
        )
