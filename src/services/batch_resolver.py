"""Batched concurrent resolution of company names.

Given an ordered list of names, a resolver and an optional persistent
cache, the engine:

1. loads the cache once (when reading or writing is enabled),
2. answers every cached name immediately as a ``Hit``,
3. fans the remaining names out to the resolver, at most
   ``max_concurrency`` at a time and each bounded by ``request_timeout``,
4. writes every ``Fresh`` value back to the cache the moment it arrives,
   so a crash part-way through keeps what was already resolved,
5. returns outcomes aligned with the input order, whatever order the
   lookups completed in.

A failing lookup only ever affects its own key.  A failing cache *write*
stops further write-back for the batch and is reported on the result; the
batch itself carries on.
"""

from __future__ import annotations

import asyncio
from typing import Any, Sequence

import structlog

from src.interfaces.cache_store import ICacheStore
from src.interfaces.progress_sink import IProgressSink, NullProgressSink
from src.interfaces.resolver import IResolver
from src.models.outcome import (
    BatchResult,
    CachePolicy,
    Failure,
    Fresh,
    Hit,
    Outcome,
    ResolveResult,
)
from src.utils.concurrency import DEFAULT_CONCURRENCY, throttled_gather
from src.utils.errors import CacheStoreError

logger = structlog.get_logger(logger_name=__name__)

_DEFAULT_TIMEOUT = 20.0


class BatchResolutionEngine:
    """Resolves a batch of names with cache short-circuiting and write-back.

    Parameters
    ----------
    resolver:
        The lookup workflow applied to every cache miss.
    cache_store:
        Persistent cache, or ``None`` to run without one.
    policy:
        Whether cached values may be read and fresh ones written back.
    max_concurrency:
        Upper bound on in-flight resolver calls.
    request_timeout:
        Seconds allowed for a single resolver call; ``None`` disables it.
    progress:
        Sink receiving one ``advance()`` per finished key.
    """

    def __init__(
        self,
        resolver: IResolver,
        cache_store: ICacheStore | None = None,
        policy: CachePolicy | None = None,
        max_concurrency: int = DEFAULT_CONCURRENCY,
        request_timeout: float | None = _DEFAULT_TIMEOUT,
        progress: IProgressSink | None = None,
    ) -> None:
        self._resolver = resolver
        self._cache_store = cache_store
        self._policy = policy or CachePolicy()
        self._max_concurrency = max(1, max_concurrency)
        self._request_timeout = request_timeout
        self._progress = progress or NullProgressSink()
        self._logger = logger.bind(provider=resolver.get_provider_name())

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    async def run(self, keys: Sequence[str]) -> BatchResult:
        """Resolve every key and return outcomes in input order.

        Raises
        ------
        CacheStoreError
            If the cache exists but cannot be read.
        """
        keys = list(keys)
        cache = self._load_cache()
        outcomes: list[Outcome | None] = [None] * len(keys)
        write_state: dict[str, str | None] = {"error": None}

        self._logger.info("batch_started", total=len(keys), cached_entries=len(cache))
        self._progress.start(len(keys))
        try:
            pending: list[int] = []
            for index, key in enumerate(keys):
                hit = self._cache_hit(cache, key)
                if hit is None:
                    pending.append(index)
                    continue
                outcomes[index] = hit
                self._progress.advance()

            semaphore = asyncio.Semaphore(self._max_concurrency)
            coros = [self._resolve_one(keys[i], cache, write_state) for i in pending]
            results = await throttled_gather(coros, semaphore=semaphore)

            for index, result in zip(pending, results):
                if isinstance(result, BaseException):
                    # _resolve_one handles its own errors; this is a last resort.
                    result = Failure(reason=f"unexpected error: {result}")
                outcomes[index] = result
        finally:
            self._progress.stop()

        batch = BatchResult(
            keys=keys,
            outcomes=outcomes,
            cache_write_error=write_state["error"],
        )
        self._logger.info(
            "batch_finished",
            total=len(keys),
            cache_hits=batch.cache_hits,
            failures=batch.failures,
            cache_write_error=batch.cache_write_error,
        )
        return batch

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    def _load_cache(self) -> dict[str, Any]:
        if self._cache_store is None or not self._policy.enabled:
            return {}
        return self._cache_store.load()

    def _cache_hit(self, cache: dict[str, Any], key: str) -> Hit | None:
        if self._cache_store is None or not self._policy.read:
            return None
        raw = self._cache_store.get(cache, key)
        if raw is None:
            return None
        try:
            value = self._resolver.load_value(raw)
        except (ValueError, TypeError) as exc:
            self._logger.warning("cache_entry_invalid", company=key, error=str(exc))
            return None
        self._logger.debug("cache_hit", company=key)
        return Hit(value=value)

    async def _call_resolver(self, key: str) -> ResolveResult:
        try:
            if self._request_timeout is None:
                return await self._resolver.resolve(key)
            return await asyncio.wait_for(self._resolver.resolve(key), self._request_timeout)
        except asyncio.TimeoutError:
            self._logger.warning("resolver_timeout", company=key, timeout=self._request_timeout)
            return Failure(reason=f"timed out after {self._request_timeout:g}s")
        except Exception as exc:
            self._logger.error("resolver_crashed", company=key, error=str(exc))
            return Failure(reason=f"unexpected error: {exc}")

    async def _resolve_one(
        self,
        key: str,
        cache: dict[str, Any],
        write_state: dict[str, str | None],
    ) -> ResolveResult:
        try:
            result = await self._call_resolver(key)
            if isinstance(result, Failure):
                self._logger.info("resolver_failed", company=key, reason=result.reason)
            elif isinstance(result, Fresh):
                self._write_back(cache, key, result, write_state)
            return result
        finally:
            self._progress.advance()

    def _write_back(
        self,
        cache: dict[str, Any],
        key: str,
        result: Fresh,
        write_state: dict[str, str | None],
    ) -> None:
        if self._cache_store is None or not self._policy.write:
            return
        if write_state["error"] is not None:
            return
        try:
            self._cache_store.put_and_persist(cache, key, self._resolver.dump_value(result.value))
        except CacheStoreError as exc:
            write_state["error"] = str(exc)
            self._logger.error("cache_write_failed", company=key, error=str(exc))
