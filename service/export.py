"""
Plain-text and CSV renderings of a timetable.
"""

from typing import List, Optional
import csv
import io

from models.schemas import Session, WeeklyGrid

CSV_HEADERS = ["Day", "Time", "Course Code", "Course Name", "Faculty", "Room", "Program", "Type"]


def format_timetable_text(timetable: List[Session], grid: Optional[WeeklyGrid] = None) -> str:
    """Render sessions grouped by weekday, then by time label."""
    grid = grid or WeeklyGrid()

    lines = ["NEP 2020 TIMETABLE", "==================", ""]

    for day in grid.days:
        lines.append(day.upper())
        lines.append("-" * len(day))

        for time_slot in grid.time_slots:
            sessions = [
                s for s in timetable
                if s.time_slot and s.time_slot.day == day and s.time_slot.time == time_slot
            ]
            if not sessions:
                continue

            lines.append(f"{time_slot}:")
            for session in sessions:
                lines.append(f"  {session.course_code} - {session.course_name}")
                lines.append(f"  Faculty: {session.faculty_name} | Room: {session.room_name}")
                lines.append(f"  Program: {session.program_name} | Type: {session.type}")
                lines.append("")

        lines.append("")

    return "\n".join(lines) + "\n"


def timetable_rows(timetable: List[Session]) -> List[List[str]]:
    """One row per session; unscheduled sessions have an empty day and time."""
    return [
        [
            session.time_slot.day if session.time_slot else "",
            session.time_slot.time if session.time_slot else "",
            session.course_code,
            session.course_name,
            session.faculty_name,
            session.room_name,
            session.program_name,
            session.type
        ]
        for session in timetable
    ]


def format_timetable_csv(timetable: List[Session]) -> str:
    """Render sessions as CSV with a header row and every cell quoted."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="\n")
    writer.writerow(CSV_HEADERS)
    writer.writerows(timetable_rows(timetable))
    return buffer.getvalue()
