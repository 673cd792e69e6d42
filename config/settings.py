"""
Configuration management for the timetable scheduling API.
"""
from pydantic_settings import BaseSettings
from typing import Dict, List, Literal

Strategy = Literal["first_fit", "cp_sat"]


class Settings(BaseSettings):
    """Application settings."""

    # Application
    app_name: str = "Academic Timetable Scheduling API"
    app_version: str = "1.0.0"
    debug: bool = False

    # Server
    host: str = "0.0.0.0"
    port: int = 8080
    reload: bool = False

    # Assignment strategy: "first_fit" or "cp_sat"
    assignment_strategy: Strategy = "first_fit"

    # CP-SAT solver (only used by the cp_sat strategy)
    solver_timeout_seconds: int = 30
    solver_random_seed: int = 42
    solver_num_workers: int = 1

    # Weekly grid
    weekdays: List[str] = [
        "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday"
    ]
    time_slots: List[str] = [
        "09:00-10:00", "10:00-11:00", "11:00-12:00", "12:00-13:00",
        "13:00-14:00", "14:00-15:00", "15:00-16:00", "16:00-17:00"
    ]

    # Estimated headcount per program type
    student_counts: Dict[str, int] = {
        "B.Ed": 40,
        "M.Ed": 30,
        "FYUP": 60,
        "ITEP": 35
    }
    default_student_count: int = 30

    # Emit low-severity notices when a fallback faculty/room is used
    report_resource_fallbacks: bool = True

    # Storage
    catalog_path: str = "data/catalog.json"
    snapshot_path: str = "data/latest_timetable.json"

    # Logging
    log_level: str = "INFO"
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    # CORS
    cors_origins: List[str] = ["http://localhost:3000"]

    class Config:
        env_file = ".env"
        case_sensitive = False


settings = Settings()
