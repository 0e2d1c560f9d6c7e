"""Credit China registry provider implementing IResolver.

Looks up a company's unified social credit code (统一社会信用代码) through
the public catalog search endpoint behind www.creditchina.gov.cn.  One GET
per key, best match only.  No API key required; the endpoint does expect a
browser User-Agent and the portal as Referer.

Response shape (abridged)::

    {"status": 1,
     "data": {"list": [{"jgmc": "<registered name>",
                        "tyshxydm": "<credit code>"}]}}
"""

from __future__ import annotations

from typing import Any

import httpx

from src.interfaces.resolver import IResolver
from src.models.outcome import Failure, Fresh, ResolveResult
from src.utils.errors import LookupFailedError
from src.utils.logging import get_logger
from src.utils.text_normalizer import name_similarity

_SEARCH_URL = "https://public.creditchina.gov.cn/private-api/catalogSearch"
_REFERER = "https://www.creditchina.gov.cn/"
_USER_AGENT = "Mozilla/5.0 (X11; Linux x86_64; rv:102.0) Gecko/20100101 Firefox/102.0"
_STATUS_OK = 1


class CreditChinaResolver(IResolver):
    """Resolves a company name to its unified social credit code.

    Parameters
    ----------
    http_client:
        Injected ``httpx.AsyncClient`` shared by every key in the batch.
    strict_name:
        When ``True``, the registry's best match must carry exactly the
        queried name; anything else is reported as a failure even if a
        credit code was found.
    """

    cache_filename = "tyxxm-cache.json"

    def __init__(self, http_client: httpx.AsyncClient, strict_name: bool = False) -> None:
        self._http = http_client
        self._strict_name = strict_name
        self._logger = get_logger(__name__)

    def get_provider_name(self) -> str:
        return "creditchina"

    async def _search(self, name: str) -> dict[str, Any]:
        params = {
            "keyword": name,
            "scenes": "defaultscenario",
            "tableName": "credit_xyzx_tyshxydm",
            "searchState": 2,
            "entityType": "1,2,4,5,6,7,8",
            "page": 1,
            "pageSize": 1,
        }
        headers = {"User-Agent": _USER_AGENT, "Referer": _REFERER}
        response = await self._http.get(_SEARCH_URL, params=params, headers=headers)
        response.raise_for_status()
        return response.json()

    async def _lookup(self, name: str) -> str:
        payload = await self._search(name)

        status = payload.get("status")
        if status != _STATUS_OK:
            raise LookupFailedError(f"query failed, unexpected status: {status}")

        matches = (payload.get("data") or {}).get("list") or []
        if not matches:
            raise LookupFailedError("no match")

        best = matches[0]
        registered_name = best.get("jgmc", "")
        if self._strict_name and registered_name != name:
            similarity = name_similarity(name, registered_name)
            raise LookupFailedError(
                f"name mismatch, found {registered_name} (similarity {similarity:.0%})"
            )

        code = best.get("tyshxydm")
        if not code:
            raise LookupFailedError(f"match {registered_name} has no credit code")
        return code

    # -- IResolver implementation -------------------------------------------

    async def resolve(self, key: str) -> ResolveResult:
        try:
            code = await self._lookup(key)
        except LookupFailedError as exc:
            self._logger.info("creditchina_lookup_failed", company=key, reason=exc.message)
            return Failure(reason=exc.message)
        except httpx.HTTPError as exc:
            self._logger.warning("creditchina_request_failed", company=key, error=str(exc))
            return Failure(reason=f"request failed: {exc}")
        except (ValueError, AttributeError, TypeError) as exc:
            self._logger.warning("creditchina_bad_response", company=key, error=str(exc))
            return Failure(reason=f"unexpected response: {exc}")

        self._logger.debug("creditchina_lookup_complete", company=key, code=code)
        return Fresh(value=code)
