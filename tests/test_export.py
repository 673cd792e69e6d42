"""
Tests for the plain-text and CSV timetable renderings.
"""
from models.schemas import Session, TimeSlot, WeeklyGrid
from service.export import CSV_HEADERS, format_timetable_csv, format_timetable_text, timetable_rows


def make_session(idx, day="Monday", time="09:00-10:00", session_type="theory"):
    return Session(
        id=f"s{idx}",
        course_id="c1",
        course_code="EDU101",
        course_name="Foundations of Education",
        faculty_id="f1",
        faculty_name="Asha Rao",
        room_id="r1",
        room_name="Room 101",
        program_id="p1",
        program_name="B.Ed General",
        time_slot=TimeSlot(day=day, time=time) if day else None,
        student_count=40,
        type=session_type
    )


def test_text_export_groups_by_day_and_time():
    grid = WeeklyGrid(days=["Monday", "Tuesday"], time_slots=["09:00-10:00", "10:00-11:00"])
    timetable = [
        make_session(0, "Tuesday", "09:00-10:00", "practical"),
        make_session(1, "Monday", "10:00-11:00"),
    ]

    text = format_timetable_text(timetable, grid)

    assert text == (
        "NEP 2020 TIMETABLE\n"
        "==================\n"
        "\n"
        "MONDAY\n"
        "------\n"
        "10:00-11:00:\n"
        "  EDU101 - Foundations of Education\n"
        "  Faculty: Asha Rao | Room: Room 101\n"
        "  Program: B.Ed General | Type: theory\n"
        "\n"
        "\n"
        "TUESDAY\n"
        "-------\n"
        "09:00-10:00:\n"
        "  EDU101 - Foundations of Education\n"
        "  Faculty: Asha Rao | Room: Room 101\n"
        "  Program: B.Ed General | Type: practical\n"
        "\n"
        "\n"
    )


def test_text_export_uses_default_grid_and_skips_unscheduled():
    text = format_timetable_text([make_session(0, day=None)])

    assert "SATURDAY" in text
    assert "EDU101" not in text


def test_csv_export_quotes_every_cell():
    csv_text = format_timetable_csv([make_session(0)])

    lines = csv_text.splitlines()
    assert lines[0] == ",".join(f'"{h}"' for h in CSV_HEADERS)
    assert lines[1] == (
        '"Monday","09:00-10:00","EDU101","Foundations of Education",'
        '"Asha Rao","Room 101","B.Ed General","theory"'
    )
    assert len(lines) == 2


def test_csv_export_escapes_quotes():
    session = make_session(0)
    session.course_name = 'The "Reflective" Teacher'

    csv_text = format_timetable_csv([session])

    assert '"The ""Reflective"" Teacher"' in csv_text


def test_unscheduled_rows_have_empty_day_and_time():
    rows = timetable_rows([make_session(0, day=None)])

    assert rows == [["", "", "EDU101", "Foundations of Education", "Asha Rao", "Room 101", "B.Ed General", "theory"]]


def test_csv_export_of_empty_timetable_has_header_only():
    assert format_timetable_csv([]).splitlines() == [",".join(f'"{h}"' for h in CSV_HEADERS)]
