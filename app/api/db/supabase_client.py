"""
Supabase REST (PostgREST) client.

Thin async wrapper around ``httpx`` for the two table operations the signup
flow needs: inserting rows and fetching a single row by equality filters.
Every failure, HTTP or transport, is raised as ``SignupStoreError`` so callers
never look at PostgREST response bodies themselves.
"""

import logging
from typing import Any, Dict, List, Optional

import httpx

from app.api.db.errors import SignupStoreError

logger = logging.getLogger("app")


class SupabaseClient:
    """Minimal PostgREST client bound to one Supabase project."""

    def __init__(
        self,
        url: str,
        api_key: str,
        http_client: Optional[httpx.AsyncClient] = None,
        timeout: float = 10.0,
    ):
        self.base_rest_url = f"{url.rstrip('/')}/rest/v1"
        self.headers = {
            "apikey": api_key,
            "Authorization": f"Bearer {api_key}",
            "Content-Type": "application/json",
        }
        self._owns_client = http_client is None
        self.http_client = http_client or httpx.AsyncClient(timeout=timeout)

    def _table_url(self, table: str) -> str:
        return f"{self.base_rest_url}/{table}"

    async def insert(self, table: str, rows: List[Dict[str, Any]]) -> None:
        """
        Insert rows into a table without asking for them back.

        Args:
            table: Target table name.
            rows: JSON-serialisable row payloads.

        Raises:
            SignupStoreError: If PostgREST rejects the insert or the request fails.
        """
        headers = {**self.headers, "Prefer": "return=minimal"}
        response = await self._send("POST", self._table_url(table), headers=headers, json=rows)
        logger.debug(f"Inserted {len(rows)} row(s) into {table} ({response.status_code})")

    async def select_single(self, table: str, columns: str = "*", **filters: Any) -> Dict[str, Any]:
        """
        Fetch exactly one row matching all equality filters.

        Args:
            table: Table name.
            columns: PostgREST ``select`` expression.
            **filters: Column/value pairs combined with ``eq``.

        Returns:
            Dict[str, Any]: The matching row.

        Raises:
            SignupStoreError: With code ``PGRST116`` when no row matches, or any
                other PostgREST/transport failure.
        """
        params = {"select": columns}
        for column, value in filters.items():
            params[column] = f"eq.{value}"
        headers = {**self.headers, "Accept": "application/vnd.pgrst.object+json"}
        response = await self._send("GET", self._table_url(table), headers=headers, params=params)
        return response.json()

    async def _send(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        try:
            response = await self.http_client.request(method, url, **kwargs)
        except httpx.HTTPError as e:
            logger.error(f"Supabase request failed ({method} {url}): {e}")
            raise SignupStoreError(f"Supabase request failed: {e}") from e

        if response.is_error:
            raise self._error_from_response(response)
        return response

    @staticmethod
    def _error_from_response(response: httpx.Response) -> SignupStoreError:
        try:
            body = response.json()
        except ValueError:
            body = {}
        if not isinstance(body, dict):
            body = {}

        return SignupStoreError(
            message=body.get("message") or response.text or response.reason_phrase,
            code=body.get("code"),
            details=body.get("details") or body.get("hint"),
            status_code=response.status_code,
        )

    async def aclose(self) -> None:
        if self._owns_client:
            await self.http_client.aclose()
