"""
Slot assignment strategies.

Every strategy takes the ordered list of unscheduled sessions and returns the
same list with ``time_slot`` filled in wherever a slot could be found.
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Set
import logging

from config import settings
from models.schemas import Faculty, Room, Session, TimeSlot, WeeklyGrid

logger = logging.getLogger(__name__)


class SlotAssigner(ABC):
    """Base class for slot assignment strategies."""

    def __init__(self, grid: WeeklyGrid, faculty: List[Faculty], rooms: List[Room]):
        self.grid = grid
        # Unavailability is per time label, regardless of the day
        self.faculty_unavailable: Dict[str, Set[str]] = {f.id: set(f.unavailable_slots) for f in faculty}
        self.room_unavailable: Dict[str, Set[str]] = {r.id: set(r.unavailable_slots) for r in rooms}

    @abstractmethod
    def assign(self, sessions: List[Session]) -> List[Session]:
        """Assign time slots to sessions in place and return them."""

    def is_slot_available(self, faculty_id: str, room_id: str, time_slot: str) -> bool:
        """Check faculty and room availability for a time label."""
        if faculty_id not in self.faculty_unavailable or room_id not in self.room_unavailable:
            return False

        if time_slot in self.faculty_unavailable[faculty_id]:
            return False

        if time_slot in self.room_unavailable[room_id]:
            return False

        return True


class FirstFitAssigner(SlotAssigner):
    """
    Greedy first-fit sweep.

    Sessions are processed strictly in input order; each one takes the first
    grid cell (days in order, then time labels in order) where neither its
    faculty nor its room is already booked and both are available. There is
    no backtracking, so a session that finds no cell stays unscheduled.
    """

    def assign(self, sessions: List[Session]) -> List[Session]:
        occupied: Dict[str, Set[str]] = {}  # "day-time" -> resource tags

        for session in sessions:
            faculty_tag = f"faculty-{session.faculty_id}"
            room_tag = f"room-{session.room_id}"

            for day, time_slot in self.grid.cells():
                resources = occupied.setdefault(f"{day}-{time_slot}", set())

                if (faculty_tag not in resources
                        and room_tag not in resources
                        and self.is_slot_available(session.faculty_id, session.room_id, time_slot)):
                    session.time_slot = TimeSlot(day=day, time=time_slot, duration=1)
                    resources.add(faculty_tag)
                    resources.add(room_tag)
                    break
            else:
                logger.debug(f"No free slot for session {session.id}")

        return sessions


def build_assigner(
    strategy: Optional[str],
    grid: WeeklyGrid,
    faculty: List[Faculty],
    rooms: List[Room]
) -> SlotAssigner:
    """
    Create the assigner for a strategy name.

    Args:
        strategy: "first_fit" or "cp_sat"; None uses the configured default
        grid: Weekly grid to place sessions on
        faculty: Faculty records (for unavailability)
        rooms: Room records (for unavailability)
    """
    strategy = strategy or settings.assignment_strategy

    if strategy == "first_fit":
        return FirstFitAssigner(grid, faculty, rooms)

    if strategy == "cp_sat":
        from service.ortools_solver import CpSatAssigner
        return CpSatAssigner(
            grid, faculty, rooms,
            time_limit_seconds=settings.solver_timeout_seconds,
            random_seed=settings.solver_random_seed,
            num_workers=settings.solver_num_workers
        )

    raise ValueError(f"Unknown assignment strategy: {strategy}")
