from __future__ import annotations

import pytest

from cnc_datatable import ColumnDescriptor

ENV_KEYS = (
    "CNC_DATATABLE_PAGE_SIZE",
    "CNC_DATATABLE_EMPTY_MESSAGE",
    "CNC_DATATABLE_PAGE_WINDOW_SIBLINGS",
    "CNC_DATATABLE_LOG_LEVEL",
)


@pytest.fixture()
def operators() -> list[dict]:
    return [
        {"id": 1, "name": "John Smith", "role": "Operator", "status": "active", "shift": "Day", "experience": 5, "lastLogin": "2024-03-15 08:30"},
        {"id": 2, "name": "Sarah Johnson", "role": "Supervisor", "status": "active", "shift": "Day", "experience": 8, "lastLogin": "2024-03-15 07:45"},
        {"id": 3, "name": "Mike Davis", "role": "Operator", "status": "offline", "shift": "Night", "experience": 3, "lastLogin": "2024-03-14 23:15"},
        {"id": 4, "name": "Lisa Chen", "role": "Engineer", "status": "active", "shift": "Day", "experience": 12, "lastLogin": "2024-03-15 09:20"},
        {"id": 5, "name": "David Wilson", "role": "Operator", "status": "break", "shift": "Day", "experience": 2, "lastLogin": "2024-03-15 08:00"},
        {"id": 6, "name": "Emily Brown", "role": "Supervisor", "status": "active", "shift": "Evening", "experience": 6, "lastLogin": "2024-03-14 16:30"},
        {"id": 7, "name": "Tom Garcia", "role": "Operator", "status": "offline", "shift": "Night", "experience": 4, "lastLogin": "2024-03-14 22:45"},
        {"id": 8, "name": "Anna Martinez", "role": "Engineer", "status": "active", "shift": "Day", "experience": 10, "lastLogin": "2024-03-15 07:30"},
    ]


@pytest.fixture()
def operator_columns() -> list[ColumnDescriptor]:
    return [
        ColumnDescriptor(key="id", header="ID", width="80px"),
        ColumnDescriptor(key="name", header="Name"),
        ColumnDescriptor(key="role", header="Role", filterable=True),
        ColumnDescriptor(key="status", header="Status", render=lambda value, row: str(value).upper()),
        ColumnDescriptor(key="shift", header="Shift"),
        ColumnDescriptor(key="experience", header="Experience (years)", align="right"),
    ]


@pytest.fixture()
def machine_jobs() -> list[dict]:
    return [
        {"id": "JOB001", "name": "Aluminum Bracket v2.1", "machine": "Haas VF-3", "status": "running", "progress": 67, "operator": "John Smith"},
        {"id": "JOB002", "name": "Steel Plate Assembly", "machine": "Mazak i-400", "status": "queued", "progress": 0, "operator": "Sarah Johnson"},
        {"id": "JOB003", "name": "Titanium Component", "machine": "DMG Mori DMU 50", "status": "completed", "progress": 100, "operator": "Mike Davis"},
        {"id": "JOB004", "name": "Precision Gear", "machine": "Okuma LB3000", "status": "error", "progress": 34, "operator": "David Wilson"},
        {"id": "JOB005", "name": "Copper Heat Sink", "machine": "Haas VF-2", "status": "paused", "progress": 45, "operator": "Emily Brown"},
    ]


@pytest.fixture()
def job_columns() -> list[dict]:
    return [
        {"key": "id", "header": "Job ID", "width": "100px"},
        {"key": "name", "header": "Job Name"},
        {"key": "machine", "header": "Machine"},
        {"key": "status", "header": "Status"},
        {"key": "progress", "header": "Progress", "align": "right"},
        {"key": "operator", "header": "Operator", "sortable": False},
    ]


@pytest.fixture()
def clean_env(monkeypatch):
    for key in ENV_KEYS:
        monkeypatch.setenv(key, "placeholder")
        monkeypatch.delenv(key)
    return monkeypatch
