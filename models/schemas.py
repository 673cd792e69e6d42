from pydantic import BaseModel, Field
from typing import Annotated, List, Optional, Literal
from datetime import datetime

from config import settings
from config.settings import Strategy


ProgramType = Literal["B.Ed", "M.Ed", "FYUP", "ITEP"]
CourseType = Literal["Major", "Minor", "Skill-Based", "Ability Enhancement", "Value-Added"]
RoomType = Literal["Classroom", "Laboratory", "Seminar Hall", "Auditorium", "Library", "Computer Lab"]
SessionType = Literal["theory", "practical"]
ConstraintType = Literal[
    "faculty_conflict",
    "room_conflict",
    "student_conflict",
    "faculty_availability",
    "room_availability"
]
Severity = Literal["high", "medium", "low"]
GridLabel = Annotated[str, Field(min_length=1)]


# ===========================
# Catalog Models
# ===========================

class Program(BaseModel):
    """Academic program (B.Ed, M.Ed, FYUP, ITEP) with its credit structure"""
    id: str
    name: str
    type: ProgramType
    duration: int = 0               # years
    total_credits: int = 0
    major_credits: int = 0
    minor_credits: int = 0
    skill_credits: int = 0
    ae_credits: int = 0             # Ability Enhancement
    value_added_credits: int = 0
    description: str = ""


class Course(BaseModel):
    """Course offered by a program, split into theory and practical hours"""
    id: str
    code: str
    name: str
    type: CourseType = "Major"
    credits: int = 0
    theory_hours: int = Field(default=0, ge=0)
    practical_hours: int = Field(default=0, ge=0)
    program: str                    # owning program id
    is_elective: bool = False
    semester: int = 1
    description: str = ""
    prerequisites: List[str] = []


class Faculty(BaseModel):
    id: str
    name: str
    can_teach_programs: List[str] = []
    expertise: List[str] = []
    max_hours_per_week: int = 20    # advisory only, never enforced
    unavailable_slots: List[str] = []  # time labels, e.g. "10:00-11:00"
    email: Optional[str] = ""
    department: Optional[str] = ""
    designation: Optional[str] = ""


class Room(BaseModel):
    id: str
    name: str
    type: RoomType
    capacity: int = 0
    unavailable_slots: List[str] = []  # time labels, e.g. "10:00-11:00"
    location: Optional[str] = ""


class Catalog(BaseModel):
    """The four record collections the generator reads"""
    programs: List[Program] = []
    courses: List[Course] = []
    faculty: List[Faculty] = []
    rooms: List[Room] = []


# ===========================
# Weekly Grid Configuration
# ===========================

class WeeklyGrid(BaseModel):
    """Ordered weekdays x ordered one-hour time labels"""
    days: List[GridLabel] = Field(default_factory=lambda: list(settings.weekdays), min_length=1)
    time_slots: List[GridLabel] = Field(default_factory=lambda: list(settings.time_slots), min_length=1)

    def cells(self):
        """Yield (day, time) pairs in scan order."""
        for day in self.days:
            for time_slot in self.time_slots:
                yield day, time_slot


# ===========================
# Timetable Models
# ===========================

class TimeSlot(BaseModel):
    day: str
    time: str           # "HH:MM-HH:MM"
    duration: int = 1   # hours


class Session(BaseModel):
    """One hour-long teaching occurrence of a course"""
    id: str
    course_id: str
    course_code: str
    course_name: str
    faculty_id: str
    faculty_name: str
    room_id: str
    room_name: str
    program_id: str
    program_name: str
    time_slot: Optional[TimeSlot] = None  # None until a slot is assigned
    student_count: int
    type: SessionType

    @property
    def is_scheduled(self) -> bool:
        return self.time_slot is not None


class Constraint(BaseModel):
    """Conflict or notice derived from a timetable"""
    type: ConstraintType
    description: str
    severity: Severity


class TimetableSummary(BaseModel):
    total_sessions: int = 0
    theory_sessions: int = 0
    practical_sessions: int = 0
    scheduled_sessions: int = 0
    unscheduled_sessions: int = 0
    occupied_slots: int = 0


# ===========================
# Request Schemas
# ===========================

class GenerationRequest(Catalog):
    """Generate a timetable from an inline catalog"""
    selected_programs: Optional[List[str]] = None  # None = every program
    strategy: Optional[Strategy] = None
    grid: Optional[WeeklyGrid] = None


class StoredGenerationRequest(BaseModel):
    """Generate a timetable from the configured catalog file"""
    selected_programs: Optional[List[str]] = None
    strategy: Optional[Strategy] = None
    grid: Optional[WeeklyGrid] = None


class ConflictCheckRequest(BaseModel):
    timetable: List[Session]


# ===========================
# Response Schemas
# ===========================

class GenerationResult(BaseModel):
    """Complete generation result"""
    timetable: List[Session] = []
    conflicts: List[Constraint] = []
    success: bool
    message: str
    summary: TimetableSummary = TimetableSummary()
    strategy: Optional[str] = None
    grid: Optional[WeeklyGrid] = None
    generated_at: datetime = Field(default_factory=datetime.now)
