"""
Tests for conflict detection.
"""
from models.schemas import Constraint, Session, TimeSlot
from service.conflicts import detect_conflicts, has_high_severity


def make_session(idx, faculty_id="f1", room_id="r1", day="Monday", time="09:00-10:00"):
    return Session(
        id=f"s{idx}",
        course_id=f"c{idx}",
        course_code=f"EDU{100 + idx}",
        course_name=f"Course {idx}",
        faculty_id=faculty_id,
        faculty_name=f"Faculty {faculty_id}",
        room_id=room_id,
        room_name=f"Room {room_id}",
        program_id="p1",
        program_name="B.Ed General",
        time_slot=TimeSlot(day=day, time=time) if day else None,
        student_count=40,
        type="theory"
    )


def test_clean_timetable_has_no_conflicts():
    timetable = [
        make_session(0, "f1", "r1", "Monday", "09:00-10:00"),
        make_session(1, "f1", "r1", "Monday", "10:00-11:00"),
        make_session(2, "f2", "r2", "Monday", "09:00-10:00"),
    ]

    assert detect_conflicts(timetable) == []


def test_unscheduled_session_is_high_severity():
    conflicts = detect_conflicts([make_session(7, day=None)])

    assert conflicts == [
        Constraint(
            type="faculty_conflict",
            description="Course EDU107 (Course 7) could not be scheduled",
            severity="high"
        )
    ]


def test_faculty_double_booking():
    timetable = [
        make_session(0, "f1", "r1"),
        make_session(1, "f1", "r2"),
    ]

    conflicts = detect_conflicts(timetable)

    assert len(conflicts) == 1
    assert conflicts[0].type == "faculty_conflict"
    assert conflicts[0].severity == "high"
    assert conflicts[0].description == "Faculty Faculty f1 has multiple classes at Monday-09:00-10:00"


def test_room_double_booking():
    timetable = [
        make_session(0, "f1", "r1"),
        make_session(1, "f2", "r1"),
    ]

    conflicts = detect_conflicts(timetable)

    assert len(conflicts) == 1
    assert conflicts[0].type == "room_conflict"
    assert conflicts[0].description == "Room Room r1 has multiple classes at Monday-09:00-10:00"


def test_three_way_collision_reports_every_repeat():
    timetable = [make_session(i, "f1", "r1") for i in range(3)]

    conflicts = detect_conflicts(timetable)

    assert [c.type for c in conflicts] == [
        "faculty_conflict", "room_conflict",
        "faculty_conflict", "room_conflict",
    ]


def test_same_resource_in_different_cells_is_fine():
    timetable = [
        make_session(0, "f1", "r1", "Monday", "09:00-10:00"),
        make_session(1, "f1", "r1", "Tuesday", "09:00-10:00"),
    ]

    assert detect_conflicts(timetable) == []


def test_unscheduled_conflicts_come_first():
    timetable = [
        make_session(0, "f1", "r1"),
        make_session(1, "f1", "r2"),
        make_session(2, day=None),
    ]

    conflicts = detect_conflicts(timetable)

    assert "could not be scheduled" in conflicts[0].description
    assert "multiple classes" in conflicts[1].description


def test_detection_is_recomputed_each_call():
    timetable = [make_session(0, "f1", "r1"), make_session(1, "f1", "r2")]

    assert detect_conflicts(timetable) == detect_conflicts(timetable)
    assert len(detect_conflicts(timetable)) == 1


def test_has_high_severity():
    low = Constraint(type="room_availability", description="fallback", severity="low")
    high = Constraint(type="room_conflict", description="clash", severity="high")

    assert not has_high_severity([])
    assert not has_high_severity([low])
    assert has_high_severity([low, high])
