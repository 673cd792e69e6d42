"""
OR-Tools CP-SAT based slot assignment.

Drop-in replacement for the first-fit sweep: the faculty and room of every
session are already fixed by the expander, so the model only decides which
grid cell (if any) each session occupies.
"""

from ortools.sat.python import cp_model
from typing import Dict, List, Tuple
from datetime import datetime
import logging

from models.schemas import Faculty, Room, Session, TimeSlot, WeeklyGrid
from service.assigner import SlotAssigner, FirstFitAssigner

logger = logging.getLogger(__name__)


class CpSatAssigner(SlotAssigner):
    """
    Exact slot assignment using the OR-Tools CP-SAT solver.

    Maximizes the number of scheduled sessions; among equally full timetables
    it prefers earlier grid cells.
    """

    def __init__(
        self,
        grid: WeeklyGrid,
        faculty: List[Faculty],
        rooms: List[Room],
        time_limit_seconds: int = 30,
        random_seed: int = 42,
        num_workers: int = 1
    ):
        """
        Initialize the assigner.

        Args:
            grid: Weekly grid to place sessions on
            faculty: Faculty records (for unavailability)
            rooms: Room records (for unavailability)
            time_limit_seconds: Maximum time allowed for solver
            random_seed: Solver seed, fixed for deterministic output
            num_workers: Number of search workers
        """
        super().__init__(grid, faculty, rooms)
        self.faculty = faculty
        self.rooms = rooms
        self.time_limit_seconds = time_limit_seconds
        self.random_seed = random_seed
        self.num_workers = num_workers

    def assign(self, sessions: List[Session]) -> List[Session]:
        if not sessions:
            return sessions

        model = cp_model.CpModel()
        cells = list(self.grid.cells())

        # Variables: x[(session_idx, cell_idx)] = 1 if session placed in cell
        variables: Dict[Tuple[int, int], cp_model.IntVar] = {}
        for session_idx, session in enumerate(sessions):
            for cell_idx, (day, time_slot) in enumerate(cells):
                if self.is_slot_available(session.faculty_id, session.room_id, time_slot):
                    variables[(session_idx, cell_idx)] = model.NewBoolVar(
                        f"session_{session_idx}_cell_{cell_idx}"
                    )

        if not variables:
            logger.info("No session has an available cell")
            return sessions

        # 1. Each session placed at most once
        for session_idx in range(len(sessions)):
            placements = [
                variables[(session_idx, cell_idx)]
                for cell_idx in range(len(cells))
                if (session_idx, cell_idx) in variables
            ]
            if placements:
                model.Add(sum(placements) <= 1)

        # 2. No faculty or room double-booking within a cell
        for resource_of in (lambda s: s.faculty_id, lambda s: s.room_id):
            by_resource: Dict[Tuple[str, int], List] = {}
            for (session_idx, cell_idx), var in variables.items():
                key = (resource_of(sessions[session_idx]), cell_idx)
                by_resource.setdefault(key, []).append(var)
            for group in by_resource.values():
                if len(group) > 1:
                    model.Add(sum(group) <= 1)

        # Objective: placement count dominates, then earlier cells
        weight = len(cells) * len(sessions) + 1
        model.Maximize(sum(var * (weight - cell_idx) for (_, cell_idx), var in variables.items()))

        solver = cp_model.CpSolver()
        solver.parameters.random_seed = self.random_seed
        solver.parameters.num_workers = self.num_workers
        solver.parameters.max_time_in_seconds = self.time_limit_seconds

        start_time = datetime.now()
        status = solver.Solve(model)
        solve_time = (datetime.now() - start_time).total_seconds()

        if status not in (cp_model.OPTIMAL, cp_model.FEASIBLE):
            logger.warning(
                f"CP-SAT returned {solver.StatusName(status)} after {solve_time:.2f}s, "
                f"falling back to first-fit"
            )
            return FirstFitAssigner(self.grid, self.faculty, self.rooms).assign(sessions)

        for (session_idx, cell_idx), var in variables.items():
            if solver.Value(var) == 1:
                day, time_slot = cells[cell_idx]
                sessions[session_idx].time_slot = TimeSlot(day=day, time=time_slot, duration=1)

        placed = sum(1 for s in sessions if s.is_scheduled)
        logger.info(
            f"CP-SAT {solver.StatusName(status)} in {solve_time:.2f}s: "
            f"{placed}/{len(sessions)} sessions placed"
        )
        return sessions
