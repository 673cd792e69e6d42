"""
Session expansion: turns a course's theory/practical hours into one-hour
sessions, each bound to a faculty member and a room.
"""

from typing import Dict, List, Optional
import logging

from config import settings
from models.schemas import Course, Program, Faculty, Room, Session, Constraint

logger = logging.getLogger(__name__)

THEORY_ROOM_TYPES = ("Classroom", "Seminar Hall")
PRACTICAL_ROOM_TYPES = ("Laboratory", "Computer Lab")


def order_courses(courses: List[Course]) -> List[Course]:
    """Required courses first, then electives; each group by ascending semester."""
    return sorted(courses, key=lambda c: (c.is_elective, c.semester))


class SessionExpander:
    """
    Builds unscheduled sessions for a course.

    Faculty and room choices are best-effort: when nothing matches the filters
    the first record of the whole catalog is used, and when the catalog is
    empty no session is created. Both cases are recorded in ``notices`` as
    low-severity constraints when ``report_fallbacks`` is on.
    """

    def __init__(
        self,
        faculty: List[Faculty],
        rooms: List[Room],
        student_counts: Optional[Dict[str, int]] = None,
        default_student_count: Optional[int] = None,
        report_fallbacks: Optional[bool] = None
    ):
        self.faculty = faculty
        self.rooms = rooms
        self.student_counts = student_counts if student_counts is not None else settings.student_counts
        self.default_student_count = (
            default_student_count if default_student_count is not None else settings.default_student_count
        )
        self.report_fallbacks = (
            report_fallbacks if report_fallbacks is not None else settings.report_resource_fallbacks
        )
        self.notices: List[Constraint] = []

    def expand(self, course: Course, program: Program, session_type: str, hours: int) -> List[Session]:
        """
        Create ``hours`` sessions of one type for a course.

        Args:
            course: Course being expanded
            program: Program owning the course
            session_type: "theory" or "practical"
            hours: Number of one-hour sessions to create

        Returns:
            List of sessions with no time slot
        """
        if hours <= 0:
            return []

        faculty = self._select_faculty(course, program)
        if faculty is None:
            self._notice(
                "faculty_availability",
                f"No faculty available for {course.code} ({course.name}); "
                f"{hours} {session_type} session(s) not created"
            )
            return []

        room = self._select_room(course, session_type)
        if room is None:
            self._notice(
                "room_availability",
                f"No room available for {course.code} ({course.name}); "
                f"{hours} {session_type} session(s) not created"
            )
            return []

        student_count = self.estimate_student_count(program)

        return [
            Session(
                id=f"{course.id}-{session_type}-{i}",
                course_id=course.id,
                course_code=course.code,
                course_name=course.name,
                faculty_id=faculty.id,
                faculty_name=faculty.name,
                room_id=room.id,
                room_name=room.name,
                program_id=program.id,
                program_name=program.name,
                time_slot=None,
                student_count=student_count,
                type=session_type
            )
            for i in range(hours)
        ]

    def estimate_student_count(self, program: Program) -> int:
        return self.student_counts.get(program.type, self.default_student_count)

    def _select_faculty(self, course: Course, program: Program) -> Optional[Faculty]:
        eligible = [f for f in self.faculty if program.id in f.can_teach_programs]

        name = course.name.lower()
        description = course.description.lower()
        experts = [
            f for f in eligible
            if any(exp.lower() in name or exp.lower() in description for exp in f.expertise)
        ]

        candidates = experts or eligible
        if candidates:
            return candidates[0]

        if not self.faculty:
            return None

        fallback = self.faculty[0]
        logger.warning(f"No faculty can teach program {program.id}; using {fallback.name} for {course.code}")
        self._notice(
            "faculty_availability",
            f"No faculty assigned to program {program.name} for {course.code} ({course.name}); "
            f"fallback faculty {fallback.name} used"
        )
        return fallback

    def _select_room(self, course: Course, session_type: str) -> Optional[Room]:
        allowed = PRACTICAL_ROOM_TYPES if session_type == "practical" else THEORY_ROOM_TYPES
        suitable = [r for r in self.rooms if r.type in allowed]
        if suitable:
            return suitable[0]

        if not self.rooms:
            return None

        fallback = self.rooms[0]
        logger.warning(f"No {session_type} room found; using {fallback.name} for {course.code}")
        self._notice(
            "room_availability",
            f"No {' or '.join(allowed)} available for {session_type} sessions of "
            f"{course.code} ({course.name}); fallback room {fallback.name} used"
        )
        return fallback

    def _notice(self, constraint_type: str, description: str):
        if self.report_fallbacks:
            self.notices.append(Constraint(type=constraint_type, description=description, severity="low"))
