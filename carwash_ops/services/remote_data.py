"""
Remote data service for the car wash tables

A narrow table interface (select / insert / update by key / delete by key)
over the Supabase async client. Every failure surfaces as DataServiceError.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

import httpx
from postgrest.exceptions import APIError
from supabase import AsyncClient, acreate_client

from ..config import SupabaseSettings, get_supabase_settings
from ..exceptions import DataServiceError

logger = logging.getLogger(__name__)

KEY_COLUMN = "id"


class RemoteDataService(ABC):
    """Abstract base class for table-oriented data stores"""

    @abstractmethod
    async def select(self, table: str, order_column: str, ascending: bool = True) -> List[Dict[str, Any]]:
        """All rows of a table, ordered by one column"""
        pass

    @abstractmethod
    async def insert(self, table: str, row: Dict[str, Any]) -> Dict[str, Any]:
        """Insert one row and return it as materialized by the store"""
        pass

    @abstractmethod
    async def update_by_key(self, table: str, key: str, changes: Dict[str, Any]) -> Dict[str, Any]:
        """Update the row with the given key and return it"""
        pass

    @abstractmethod
    async def delete_by_key(self, table: str, key: str) -> None:
        """Delete the row with the given key"""
        pass


def _single_row(rows: Optional[List[Dict[str, Any]]], table: str) -> Dict[str, Any]:
    if not rows or len(rows) != 1:
        count = len(rows) if rows else 0
        raise DataServiceError(
            f"Expected a single row from {table}, got {count}",
            code="PGRST116",
        )
    return rows[0]


class SupabaseDataService(RemoteDataService):
    """RemoteDataService backed by a Supabase project"""

    def __init__(self, client: AsyncClient):
        self.supabase = client

    async def _execute(self, query, action: str, table: str):
        try:
            return await query.execute()
        except APIError as e:
            logger.error(f"❌ Supabase {action} on {table} failed: {e.message}")
            raise DataServiceError(e.message, code=e.code, details=e.details) from e
        except httpx.HTTPError as e:
            logger.error(f"❌ Supabase {action} on {table} failed: {e}")
            raise DataServiceError(str(e) or None) from e

    async def select(self, table: str, order_column: str, ascending: bool = True) -> List[Dict[str, Any]]:
        query = self.supabase.table(table).select("*").order(order_column, desc=not ascending)
        result = await self._execute(query, "select", table)
        return result.data or []

    async def insert(self, table: str, row: Dict[str, Any]) -> Dict[str, Any]:
        query = self.supabase.table(table).insert(row)
        result = await self._execute(query, "insert", table)
        return _single_row(result.data, table)

    async def update_by_key(self, table: str, key: str, changes: Dict[str, Any]) -> Dict[str, Any]:
        query = self.supabase.table(table).update(changes).eq(KEY_COLUMN, key)
        result = await self._execute(query, "update", table)
        return _single_row(result.data, table)

    async def delete_by_key(self, table: str, key: str) -> None:
        query = self.supabase.table(table).delete().eq(KEY_COLUMN, key)
        await self._execute(query, "delete", table)


async def create_data_service(settings: Optional[SupabaseSettings] = None) -> SupabaseDataService:
    """Connect to the configured Supabase project"""
    settings = settings or get_supabase_settings()
    client = await acreate_client(settings.SUPABASE_URL, settings.SUPABASE_ANON_KEY)
    logger.info(f"✅ Supabase data service initialized: {settings.SUPABASE_URL}")
    return SupabaseDataService(client)
