from __future__ import annotations

import base64
import time
from itertools import count
from typing import Any

import httpx
from loguru import logger

from nemo_sdk.core.clients.LedgerClient import TransactionEncoder
from nemo_sdk.core.config import get_rpc_url
from nemo_sdk.core.constants.base import DEFAULT_HTTP_TIMEOUT, DEFAULT_RPC_MAX_RETRIES
from nemo_sdk.core.errors import NemoError
from nemo_sdk.core.utils.retry import is_transient_http_error, retry_async
from nemo_sdk.core.utils.simulation import SimulationOutcome
from nemo_sdk.core.utils.transaction import CallSequence


class RpcError(NemoError):
    def __init__(self, method: str, error: dict[str, Any]):
        self.method = method
        self.code = error.get("code")
        super().__init__(f"{method} failed ({self.code}): {error.get('message')}")


class SuiRpcClient:
    """JSON-RPC ledger client backed by ``sui_devInspectTransactionBlock``."""

    def __init__(
        self,
        encoder: TransactionEncoder | None = None,
        rpc_url: str | None = None,
        *,
        max_retries: int = DEFAULT_RPC_MAX_RETRIES,
        client: httpx.AsyncClient | None = None,
    ):
        self.encoder = encoder
        self.rpc_url = rpc_url or get_rpc_url()
        self.max_retries = max_retries
        self.client = client or httpx.AsyncClient(
            timeout=httpx.Timeout(DEFAULT_HTTP_TIMEOUT)
        )
        self._ids = count(1)

    async def _rpc(self, method: str, params: list[Any]) -> Any:
        body = {
            "jsonrpc": "2.0",
            "id": next(self._ids),
            "method": method,
            "params": params,
        }

        async def _post() -> httpx.Response:
            logger.debug(f"Making POST {method} request to {self.rpc_url}")
            start_time = time.time()
            resp = await self.client.post(self.rpc_url, json=body)
            elapsed = time.time() - start_time
            if resp.status_code >= 400:
                logger.warning(
                    f"HTTP {resp.status_code} response for {method} "
                    f"after {elapsed:.2f}s"
                )
            else:
                logger.debug(
                    f"HTTP {resp.status_code} response for {method} "
                    f"after {elapsed:.2f}s"
                )
            resp.raise_for_status()
            return resp

        def _on_retry(attempt: int, exc: Exception, delay_s: float) -> None:
            logger.warning(
                f"{method} attempt {attempt + 1} failed ({exc}); "
                f"retrying in {delay_s:.2f}s"
            )

        resp = await retry_async(
            _post,
            max_retries=self.max_retries,
            should_retry=is_transient_http_error,
            on_retry=_on_retry,
        )
        payload = resp.json()
        if payload.get("error"):
            raise RpcError(method, payload["error"])
        return payload.get("result")

    async def simulate(self, sequence: CallSequence, sender: str) -> SimulationOutcome:
        if self.encoder is None:
            raise NemoError("a transaction encoder is required to simulate")
        tx_bytes = base64.b64encode(self.encoder.encode(sequence)).decode("ascii")
        result = await self._rpc("sui_devInspectTransactionBlock", [sender, tx_bytes])
        return SimulationOutcome.from_rpc(result or {})

    async def get_object(self, object_id: str) -> dict[str, Any]:
        result = await self._rpc(
            "sui_getObject", [object_id, {"showType": True, "showContent": True}]
        )
        data = (result or {}).get("data")
        if not data:
            error = (result or {}).get("error") or {}
            raise RpcError(
                "sui_getObject",
                {"code": error.get("code"), "message": f"object {object_id} not found"},
            )
        return data

    async def get_total_supply(self, coin_type: str) -> int:
        result = await self._rpc("suix_getTotalSupply", [coin_type])
        return int((result or {}).get("value", 0))

    async def close(self) -> None:
        await self.client.aclose()
