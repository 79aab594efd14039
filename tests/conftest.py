import uuid
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

import pytest

from carwash_ops.exceptions import DataServiceError
from carwash_ops.services.remote_data import RemoteDataService


class FakeDataService(RemoteDataService):
    """In-memory RemoteDataService with per-operation failure injection"""

    def __init__(self, tables: Optional[Dict[str, List[Dict[str, Any]]]] = None):
        self.tables = {name: [dict(r) for r in rows] for name, rows in (tables or {}).items()}
        self.failures: Dict[str, DataServiceError] = {}
        self.calls: List[tuple] = []

    def fail(self, operation: str, message: Optional[str] = None):
        self.failures[operation] = DataServiceError(message)

    def _check(self, operation: str):
        error = self.failures.pop(operation, None)
        if error is not None:
            raise error

    async def select(self, table, order_column, ascending=True):
        self.calls.append(("select", table, order_column, ascending))
        self._check("select")
        rows = [dict(r) for r in self.tables.get(table, [])]
        return sorted(rows, key=lambda r: r.get(order_column) or "", reverse=not ascending)

    async def insert(self, table, row):
        self.calls.append(("insert", table, row))
        self._check("insert")
        now = datetime.now(timezone.utc).isoformat()
        created = {**row, "id": str(uuid.uuid4()), "created_at": now, "updated_at": now}
        self.tables.setdefault(table, []).append(created)
        return dict(created)

    async def update_by_key(self, table, key, changes):
        self.calls.append(("update", table, key, changes))
        self._check("update")
        for row in self.tables.get(table, []):
            if row["id"] == key:
                row.update(changes)
                return dict(row)
        raise DataServiceError("Expected a single row from %s, got 0" % table, code="PGRST116")

    async def delete_by_key(self, table, key):
        self.calls.append(("delete", table, key))
        self._check("delete")
        self.tables[table] = [r for r in self.tables.get(table, []) if r["id"] != key]


@pytest.fixture
def service_rows():
    return [
        {
            "id": "svc-1",
            "name": "Basic Wash",
            "price": 10,
            "description": "Exterior only",
            "pricing": {"small": 8, "medium": 10, "large": 12, "extra_large": 15},
            "created_at": "2024-01-01T10:00:00+00:00",
            "updated_at": "2024-01-01T10:00:00+00:00",
        },
        {
            "id": "svc-2",
            "name": "Interior Detail",
            "price": 40,
            "description": None,
            "pricing": None,
            "created_at": "2024-01-02T10:00:00+00:00",
            "updated_at": "2024-01-02T10:00:00+00:00",
        },
    ]


@pytest.fixture
def crew_rows():
    return [
        {"id": "abc", "name": "Ana", "phone": "555-0101", "role": "worker", "is_active": True,
         "created_at": "2024-01-01T09:00:00+00:00", "updated_at": "2024-01-01T09:00:00+00:00"},
        {"id": "def", "name": "Ben", "phone": None, "role": "supervisor", "is_active": True,
         "created_at": "2024-01-01T09:30:00+00:00", "updated_at": "2024-01-01T09:30:00+00:00"},
    ]


@pytest.fixture
def car_rows():
    return [
        {"id": "xyz", "plate": "ABC-123", "model": "Corolla", "size": "medium", "service": "Basic Wash",
         "status": "pending", "crew": ["abc"], "services": ["svc-1"], "phone": "555-0199",
         "total_cost": 10, "created_at": "2024-03-01T08:00:00+00:00", "updated_at": "2024-03-01T08:00:00+00:00"},
        {"id": "uvw", "plate": "XYZ-987", "model": "F-150", "size": "large", "service": "Interior Detail",
         "status": "completed", "crew": None, "services": None, "phone": "555-0123",
         "total_cost": None, "created_at": "2024-03-02T08:00:00+00:00", "updated_at": "2024-03-02T08:00:00+00:00"},
    ]


@pytest.fixture
def package_rows():
    return [
        {"id": "pkg-1", "name": "Full Care", "description": "Inside and out",
         "service_ids": ["svc-1", "svc-2", "gone"], "pricing": {"discount": 0.1, "label": "10% off"},
         "is_active": True, "created_at": "2024-02-01T08:00:00+00:00", "updated_at": "2024-02-01T08:00:00+00:00"},
    ]


@pytest.fixture
def data_service(service_rows, crew_rows, car_rows, package_rows):
    return FakeDataService({
        "services": service_rows,
        "crew_members": crew_rows,
        "cars": car_rows,
        "service_packages": package_rows,
    })
