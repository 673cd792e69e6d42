from datetime import date
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import PlainTextResponse, Response

from config import settings
from models.schemas import (
    Catalog, ConflictCheckRequest, Constraint, GenerationRequest,
    GenerationResult, StoredGenerationRequest
)
from service.catalog import CatalogAccess, InMemoryCatalog, JsonFileCatalog, SnapshotStore
from service.conflicts import detect_conflicts
from service.export import format_timetable_csv, format_timetable_text
from service.generator import TimetableGenerator

# Create a router instance
router = APIRouter()


def get_catalog() -> CatalogAccess:
    return JsonFileCatalog(settings.catalog_path)


def get_snapshot_store() -> SnapshotStore:
    return SnapshotStore(settings.snapshot_path)


@router.post("/timetable/generate", response_model=GenerationResult)
async def generate_timetable(
    request: GenerationRequest,
    store: SnapshotStore = Depends(get_snapshot_store)
):
    """
    Generate a timetable from the catalog sent in the request body.

    The result is also kept as the latest timetable snapshot.
    """
    catalog = InMemoryCatalog(Catalog(
        programs=request.programs,
        courses=request.courses,
        faculty=request.faculty,
        rooms=request.rooms
    ))
    generator = TimetableGenerator(catalog, grid=request.grid, strategy=request.strategy)
    result = generator.generate_timetable(request.selected_programs)
    store.save(result)
    return result


@router.post("/timetable/generate/stored", response_model=GenerationResult)
async def generate_timetable_from_stored_catalog(
    request: StoredGenerationRequest,
    catalog: CatalogAccess = Depends(get_catalog),
    store: SnapshotStore = Depends(get_snapshot_store)
):
    """Generate a timetable from the configured catalog file."""
    generator = TimetableGenerator(catalog, grid=request.grid, strategy=request.strategy)
    result = generator.generate_timetable(request.selected_programs)
    store.save(result)
    return result


@router.post("/timetable/conflicts", response_model=List[Constraint])
async def check_conflicts(request: ConflictCheckRequest):
    """Detect unscheduled sessions and double bookings in a timetable."""
    return detect_conflicts(request.timetable)


@router.get("/timetable/latest", response_model=GenerationResult)
async def latest_timetable(store: SnapshotStore = Depends(get_snapshot_store)):
    """Return the most recently generated timetable."""
    return _load_latest(store)


@router.get("/timetable/latest/export/text", response_class=PlainTextResponse)
async def export_latest_text(store: SnapshotStore = Depends(get_snapshot_store)):
    """Export the latest timetable as plain text grouped by day and time."""
    result = _load_latest(store)
    return PlainTextResponse(
        format_timetable_text(result.timetable, result.grid),
        headers={"Content-Disposition": f'attachment; filename="timetable-{date.today().isoformat()}.txt"'}
    )


@router.get("/timetable/latest/export/csv")
async def export_latest_csv(store: SnapshotStore = Depends(get_snapshot_store)):
    """Export the latest timetable as CSV, one row per session."""
    result = _load_latest(store)
    return Response(
        content=format_timetable_csv(result.timetable),
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="timetable-{date.today().isoformat()}.csv"'}
    )


def _load_latest(store: SnapshotStore) -> GenerationResult:
    result = store.load()
    if result is None:
        raise HTTPException(status_code=404, detail="No timetable has been generated yet")
    return result
