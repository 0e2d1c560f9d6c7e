"""CNINFO (巨潮资讯) provider implementing IResolver.

Finds whether a company is listed and, if so, who its top shareholders are.
Two dependent requests per key:

1. ``topSearch/query`` (POST) -- fuzzy security search by name, returning
   ``[{"code": "000001", "category": "A股", ...}, ...]``.
2. ``getTopTenStockholders`` (GET) -- the shareholder roster for the top
   hit's code, ``{"data": {"records": [{"F001D": "<date>",
   "F002V": "<holder>"}, ...]}}``.  Records span several disclosure dates;
   only the most recent date's rows are kept.

A search with no (A-share) result is *not* an error: it means the company
is not listed, and is reported as ``Absent``.
"""

from __future__ import annotations

from typing import Any

import httpx

from src.interfaces.resolver import IResolver
from src.models.company import ListedCompany
from src.models.outcome import Absent, Failure, Fresh, ResolveResult
from src.utils.errors import LookupFailedError
from src.utils.logging import get_logger

_SEARCH_URL = "http://www.cninfo.com.cn/new/information/topSearch/query"
_SHAREHOLDERS_URL = "http://www.cninfo.com.cn/data20/stockholderCapital/getTopTenStockholders"
_REFERER = "http://www.cninfo.com.cn/"
_STOCK_PAGE = "http://www.cninfo.com.cn/new/disclosure/stock?stockCode={code}"
_USER_AGENT = "Mozilla/5.0 (X11; Linux x86_64; rv:102.0) Gecko/20100101 Firefox/102.0"
_A_SHARE = "A股"
_DEFAULT_RESULT_NUM = 3


class CninfoResolver(IResolver):
    """Resolves a company name to its stock code and latest top shareholders.

    Parameters
    ----------
    http_client:
        Injected ``httpx.AsyncClient`` shared by every key in the batch.
    result_num:
        How many search hits to request; only the best surviving one is used.
    a_share_only:
        Discard B-share, Hong Kong, bond and fund hits before choosing.
    """

    cache_filename = "cninfo-cache.json"

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        result_num: int = _DEFAULT_RESULT_NUM,
        a_share_only: bool = True,
    ) -> None:
        self._http = http_client
        self._result_num = max(1, result_num)
        self._a_share_only = a_share_only
        self._logger = get_logger(__name__)

    def get_provider_name(self) -> str:
        return "cninfo"

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    async def _search(self, name: str) -> list[dict[str, Any]]:
        params = {"keyWord": name, "maxNum": self._result_num}
        headers = {"User-Agent": _USER_AGENT, "Referer": _REFERER}
        response = await self._http.post(_SEARCH_URL, params=params, headers=headers)
        response.raise_for_status()
        results = response.json()
        if not isinstance(results, list):
            raise LookupFailedError(
                f"unexpected search response: {type(results).__name__}"
            )
        return results

    async def _fetch_shareholders(self, code: str) -> list[dict[str, Any]]:
        headers = {"User-Agent": _USER_AGENT, "Referer": _STOCK_PAGE.format(code=code)}
        response = await self._http.get(
            _SHAREHOLDERS_URL, params={"scode": code}, headers=headers
        )
        response.raise_for_status()
        payload = response.json()
        return (payload.get("data") or {}).get("records") or []

    @staticmethod
    def _latest_roster(records: list[dict[str, Any]]) -> tuple[str | None, list[str]]:
        """Return the most recent disclosure date and that date's holder names."""
        latest = max(str(r.get("F001D") or "") for r in records)
        holders = [
            r["F002V"]
            for r in records
            if str(r.get("F001D") or "") == latest and r.get("F002V")
        ]
        return (latest or None), holders

    async def _lookup(self, name: str) -> ListedCompany | None:
        results = await self._search(name)
        if self._a_share_only:
            results = [r for r in results if r.get("category") == _A_SHARE]
        if not results:
            return None

        code = str(results[0]["code"])
        records = await self._fetch_shareholders(code)
        if not records:
            raise LookupFailedError(f"no shareholder records for {code}")

        disclosure_date, holders = self._latest_roster(records)
        return ListedCompany(code=code, shareholders=holders, disclosure_date=disclosure_date)

    # ------------------------------------------------------------------
    # IResolver implementation
    # ------------------------------------------------------------------

    async def resolve(self, key: str) -> ResolveResult:
        try:
            company = await self._lookup(key)
        except LookupFailedError as exc:
            self._logger.info("cninfo_lookup_failed", company=key, reason=exc.message)
            return Failure(reason=exc.message)
        except httpx.HTTPError as exc:
            self._logger.warning("cninfo_request_failed", company=key, error=str(exc))
            return Failure(reason=f"request failed: {exc}")
        except (ValueError, KeyError, AttributeError, TypeError) as exc:
            self._logger.warning("cninfo_bad_response", company=key, error=str(exc))
            return Failure(reason=f"unexpected response: {exc}")

        if company is None:
            self._logger.debug("cninfo_not_listed", company=key)
            return Absent()
        return Fresh(value=company)

    def dump_value(self, value: Any) -> Any:
        return value.model_dump()

    def load_value(self, raw: Any) -> Any:
        return ListedCompany.model_validate(raw)

    def format_value(self, key: str, value: Any) -> str:
        lines = [f"{key}:", f"Stock code: {value.code}"]
        if value.disclosure_date:
            lines.append(f"Top shareholders ({value.disclosure_date}):")
        else:
            lines.append("Top shareholders:")
        lines.extend(f"  {holder}" for holder in value.shareholders)
        lines.append("")
        return "\n".join(lines)

    def format_absent(self, key: str) -> str:
        return f"{key}:\nNot a listed company\n"
