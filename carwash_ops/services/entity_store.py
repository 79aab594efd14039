"""
Entity stores

One store per table. A store keeps a local mirror of the table's rows and
exposes fetch/create/update/delete against a RemoteDataService, patching the
mirror after each successful write.

Read failures are kept in ``store.error``; write failures are raised as
EntityOperationError. Concurrent calls on one store are not sequenced: the
response that resolves last decides the final state.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, Generic, List, Mapping, Optional, Type, TypeVar, Union

from pydantic import BaseModel, TypeAdapter

from ..exceptions import EntityOperationError
from ..models import EntityRow
from .remote_data import RemoteDataService

logger = logging.getLogger(__name__)

RowT = TypeVar("RowT", bound=EntityRow)

FETCH_FALLBACK_ERROR = "An error occurred"

_changes_adapter = TypeAdapter(Dict[str, Any])


class EntityStore(Generic[RowT]):
    """Base class for per-table stores"""

    table: str
    entity_label: str
    row_model: Type[RowT]
    create_model: Type[BaseModel]
    order_column: str = "name"
    ascending: bool = True
    # New rows go to the front of the list instead of the end
    prepend_created: bool = False

    def __init__(self, data_service: RemoteDataService):
        """
        Initialize the store

        Args:
            data_service: Remote data service used for every table call
        """
        self.data_service = data_service
        self.rows: List[RowT] = []
        self.loading = True
        self.error: Optional[str] = None

    async def __aenter__(self):
        await self.fetch_all()
        return self

    async def __aexit__(self, exc_type, exc, tb):
        self.rows = []
        return False

    def get(self, row_id: str) -> Optional[RowT]:
        for row in self.rows:
            if row.id == row_id:
                return row
        return None

    async def fetch_all(self) -> None:
        """
        Replace the local rows with the table's current contents

        On failure the previous rows are kept and ``error`` is set.
        """
        self.loading = True
        try:
            data = await self.data_service.select(self.table, self.order_column, self.ascending)
            self.rows = [self.row_model.model_validate(item) for item in data or []]
            self.error = None
            logger.info(f"Fetched {len(self.rows)} rows from {self.table}", extra=self._log_extra())
        except Exception as e:
            self.error = getattr(e, "message", None) or str(e) or FETCH_FALLBACK_ERROR
            logger.warning(f"⚠️ Failed to fetch {self.table}: {self.error}", extra=self._log_extra())
        finally:
            self.loading = False

    refetch = fetch_all

    async def create(self, data: Union[BaseModel, Mapping[str, Any]]) -> RowT:
        """
        Insert a new row and add it to the local rows

        Args:
            data: Create model or mapping without id and timestamps

        Returns:
            The row as materialized by the store

        Raises:
            EntityOperationError: If the insert fails
        """
        try:
            candidate = self.create_model.model_validate(data)
            payload = candidate.model_dump(mode="json")
            created = self.row_model.model_validate(
                await self.data_service.insert(self.table, payload)
            )
        except Exception as e:
            raise self._write_error("add", e) from e

        if self.prepend_created:
            self.rows = [created] + self.rows
        else:
            self.rows = self.rows + [created]
        logger.info(f"Added {self.entity_label} {created.id}", extra=self._log_extra(created.id))
        return created

    async def update(self, row_id: str, changes: Mapping[str, Any]) -> RowT:
        """
        Apply partial changes to a row; updated_at is always refreshed

        Raises:
            EntityOperationError: If the update fails
        """
        try:
            payload = _changes_adapter.dump_python(dict(changes), mode="json")
            payload["updated_at"] = datetime.now(timezone.utc).isoformat()
            updated = self.row_model.model_validate(
                await self.data_service.update_by_key(self.table, row_id, payload)
            )
        except Exception as e:
            raise self._write_error("update", e) from e

        self.rows = [updated if row.id == row_id else row for row in self.rows]
        logger.info(f"Updated {self.entity_label} {row_id}", extra=self._log_extra(row_id))
        return updated

    async def delete(self, row_id: str) -> None:
        """
        Delete a row and drop it from the local rows

        Raises:
            EntityOperationError: If the delete fails
        """
        try:
            await self.data_service.delete_by_key(self.table, row_id)
        except Exception as e:
            raise self._write_error("delete", e) from e

        self.rows = [row for row in self.rows if row.id != row_id]
        logger.info(f"Deleted {self.entity_label} {row_id}", extra=self._log_extra(row_id))

    def _write_error(self, operation: str, cause: Exception) -> EntityOperationError:
        error = EntityOperationError.wrap(operation, self.entity_label, cause)
        logger.error(f"❌ {error.message}", extra=self._log_extra(operation=operation))
        return error

    def _log_extra(self, row_id: Optional[str] = None, operation: Optional[str] = None) -> Dict[str, Any]:
        # picked up as fields by logging_conf.JsonFormatter
        extra: Dict[str, Any] = {"table": self.table, "entity": self.entity_label}
        if row_id is not None:
            extra["row_id"] = row_id
        if operation is not None:
            extra["operation"] = operation
        return extra
