"""
Conflict detection over a (possibly partially) scheduled timetable.
"""

from typing import Dict, List, Tuple
import logging

from models.schemas import Constraint, Session

logger = logging.getLogger(__name__)


def detect_conflicts(timetable: List[Session]) -> List[Constraint]:
    """
    Recompute the conflict list from scratch.

    1. Every unscheduled session is a high-severity conflict.
    2. Within each (day, time) cell, every session after the first that
       shares a faculty member or a room yields one high-severity conflict.

    Conflicts are not deduplicated.
    """
    conflicts: List[Constraint] = []
    slot_map: Dict[Tuple[str, str], List[Session]] = {}

    # Group sessions by time slot
    for session in timetable:
        if session.time_slot and session.time_slot.day and session.time_slot.time:
            key = (session.time_slot.day, session.time_slot.time)
            slot_map.setdefault(key, []).append(session)
        else:
            conflicts.append(Constraint(
                type="faculty_conflict",
                description=f"Course {session.course_code} ({session.course_name}) could not be scheduled",
                severity="high"
            ))

    # Check for double bookings in each time slot
    for (day, time_slot), sessions in slot_map.items():
        faculty_ids = set()
        room_ids = set()

        for session in sessions:
            if session.faculty_id in faculty_ids:
                conflicts.append(Constraint(
                    type="faculty_conflict",
                    description=f"Faculty {session.faculty_name} has multiple classes at {day}-{time_slot}",
                    severity="high"
                ))
            faculty_ids.add(session.faculty_id)

            if session.room_id in room_ids:
                conflicts.append(Constraint(
                    type="room_conflict",
                    description=f"Room {session.room_name} has multiple classes at {day}-{time_slot}",
                    severity="high"
                ))
            room_ids.add(session.room_id)

    logger.debug(f"Detected {len(conflicts)} conflicts in {len(timetable)} sessions")
    return conflicts


def has_high_severity(conflicts: List[Constraint]) -> bool:
    return any(c.severity == "high" for c in conflicts)
