"""
Timetable generation pipeline: expand courses into sessions, assign slots,
detect conflicts.
"""

from typing import List, Optional
import logging

from config import settings
from models.schemas import Constraint, GenerationResult, Session, TimetableSummary, WeeklyGrid
from service.assigner import build_assigner
from service.catalog import CatalogAccess
from service.conflicts import detect_conflicts, has_high_severity
from service.expander import SessionExpander, order_courses

logger = logging.getLogger(__name__)

MISSING_CATALOG_MESSAGE = (
    "Please ensure you have added programs, courses, faculty, and rooms before generating timetable."
)
NO_COURSES_MESSAGE = "No courses found for selected programs."
GENERATION_ERROR_MESSAGE = "An error occurred during generation."


class TimetableGenerator:
    """
    Runs one full generation per call against an injected catalog.

    The generator keeps no state between calls; the catalog is reloaded each
    time so edits made between runs are picked up.
    """

    def __init__(self, catalog: CatalogAccess, grid: Optional[WeeklyGrid] = None, strategy: Optional[str] = None):
        """
        Initialize the generator.

        Args:
            catalog: Source of programs, courses, faculty and rooms
            grid: Weekly grid; defaults to the configured days and time slots
            strategy: "first_fit" or "cp_sat"; None uses the configured default
        """
        self.catalog = catalog
        self.grid = grid or WeeklyGrid()
        self.strategy = strategy or settings.assignment_strategy

    def generate_timetable(self, selected_programs: Optional[List[str]] = None) -> GenerationResult:
        """
        Generate a timetable for the selected programs.

        Args:
            selected_programs: Program ids to schedule; None schedules every program

        Returns:
            GenerationResult with sessions, conflicts, success flag and message
        """
        try:
            return self._generate(selected_programs)
        except Exception as e:
            logger.error(f"Timetable generation error: {str(e)}", exc_info=True)
            return self._failure(GENERATION_ERROR_MESSAGE)

    def _failure(self, message: str) -> GenerationResult:
        return GenerationResult(success=False, message=message, strategy=self.strategy, grid=self.grid)

    def _generate(self, selected_programs: Optional[List[str]]) -> GenerationResult:
        catalog = self.catalog.load()

        if not (catalog.programs and catalog.courses and catalog.faculty and catalog.rooms):
            logger.info("Catalog incomplete, nothing to generate")
            return self._failure(MISSING_CATALOG_MESSAGE)

        if selected_programs is None:
            selected_programs = [p.id for p in catalog.programs]

        relevant_courses = [c for c in catalog.courses if c.program in selected_programs]
        if not relevant_courses:
            return self._failure(NO_COURSES_MESSAGE)

        # Expand courses into sessions; order decides slot priority
        programs = {p.id: p for p in catalog.programs}
        expander = SessionExpander(catalog.faculty, catalog.rooms)
        sessions: List[Session] = []

        for course in order_courses(relevant_courses):
            program = programs.get(course.program)
            if program is None:
                logger.warning(f"Course {course.code} references unknown program {course.program}, skipped")
                continue

            sessions.extend(expander.expand(course, program, "theory", course.theory_hours))
            sessions.extend(expander.expand(course, program, "practical", course.practical_hours))

        logger.info(f"Expanded {len(relevant_courses)} courses into {len(sessions)} sessions")

        # Assign slots and check the result
        assigner = build_assigner(self.strategy, self.grid, catalog.faculty, catalog.rooms)
        timetable = assigner.assign(sessions)

        conflicts: List[Constraint] = detect_conflicts(timetable)
        conflicts.extend(expander.notices)

        success = not has_high_severity(conflicts)
        if not conflicts:
            message = "Timetable generated successfully without conflicts!"
        else:
            message = f"Timetable generated with {len(conflicts)} conflicts. Please review and resolve."

        summary = summarize(timetable)
        logger.info(
            f"Scheduled {summary.scheduled_sessions}/{summary.total_sessions} sessions, "
            f"{len(conflicts)} conflicts"
        )

        return GenerationResult(
            timetable=timetable,
            conflicts=conflicts,
            success=success,
            message=message,
            summary=summary,
            strategy=self.strategy,
            grid=self.grid
        )


def summarize(timetable: List[Session]) -> TimetableSummary:
    scheduled = [s for s in timetable if s.is_scheduled]
    return TimetableSummary(
        total_sessions=len(timetable),
        theory_sessions=sum(1 for s in timetable if s.type == "theory"),
        practical_sessions=sum(1 for s in timetable if s.type == "practical"),
        scheduled_sessions=len(scheduled),
        unscheduled_sessions=len(timetable) - len(scheduled),
        occupied_slots=len({(s.time_slot.day, s.time_slot.time) for s in scheduled})
    )
