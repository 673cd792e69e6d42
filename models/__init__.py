"""
Data models and Pydantic schemas for the timetable API.
"""
from .schemas import (
    Program,
    Course,
    Faculty,
    Room,
    Catalog,
    WeeklyGrid,
    TimeSlot,
    Session,
    Constraint,
    TimetableSummary,
    GenerationRequest,
    StoredGenerationRequest,
    ConflictCheckRequest,
    GenerationResult
)

__all__ = [
    "Program",
    "Course",
    "Faculty",
    "Room",
    "Catalog",
    "WeeklyGrid",
    "TimeSlot",
    "Session",
    "Constraint",
    "TimetableSummary",
    "GenerationRequest",
    "StoredGenerationRequest",
    "ConflictCheckRequest",
    "GenerationResult"
]
