import pytest
from fastapi.testclient import TestClient

from main import app
from models.schemas import Catalog, Course, Faculty, Program, Room
from routers.timetable import get_snapshot_store
from service.catalog import SnapshotStore


@pytest.fixture
def simple_catalog():
    """One B.Ed program, one 2-hour theory course, one teacher, one classroom."""
    return Catalog(
        programs=[Program(id="p1", name="B.Ed General", type="B.Ed", duration=2, total_credits=80)],
        courses=[
            Course(
                id="c1", code="EDU101", name="Foundations of Education",
                credits=2, theory_hours=2, practical_hours=0, program="p1", semester=1
            )
        ],
        faculty=[Faculty(id="f1", name="Asha Rao", can_teach_programs=["p1"], expertise=["education"])],
        rooms=[Room(id="r1", name="Room 101", type="Classroom", capacity=40)]
    )


@pytest.fixture
def snapshot_store(tmp_path):
    return SnapshotStore(str(tmp_path / "latest_timetable.json"))


@pytest.fixture
def client(snapshot_store):
    app.dependency_overrides[get_snapshot_store] = lambda: snapshot_store
    yield TestClient(app)
    app.dependency_overrides.clear()
