"""cgd composition root.

Wires resolvers, the cache store, the batch engine and the reporter
together from an explicit :class:`~src.config.settings.Settings`.  Nothing
here reads ambient global state: the CLI resolves the data directory once
and passes it in, which keeps every factory trivially testable.
"""

from __future__ import annotations

from pathlib import Path
from typing import TextIO

import httpx
import structlog

from src.config.settings import Settings
from src.interfaces.progress_sink import IProgressSink
from src.interfaces.resolver import IResolver
from src.models.outcome import BatchResult, CachePolicy
from src.providers.cache.json_file_cache import JsonFileCacheStore
from src.providers.resolver.cninfo_provider import CninfoResolver
from src.providers.resolver.credit_china_provider import CreditChinaResolver
from src.services.batch_resolver import BatchResolutionEngine
from src.services.result_reporter import ReportSummary, ResultReporter
from src.utils.logging import get_logger

_logger: structlog.BoundLogger = get_logger(__name__)

RESOLVER_COMMANDS = ("uscc", "cninfo")


# ---------------------------------------------------------------------------
# Factories
# ---------------------------------------------------------------------------


def build_resolver(
    command: str,
    http_client: httpx.AsyncClient,
    *,
    strict_name: bool = False,
    result_num: int = 3,
    a_share_only: bool = True,
) -> IResolver:
    """Return the resolver behind a CLI subcommand."""
    if command == "uscc":
        return CreditChinaResolver(http_client=http_client, strict_name=strict_name)
    if command == "cninfo":
        return CninfoResolver(
            http_client=http_client,
            result_num=result_num,
            a_share_only=a_share_only,
        )
    raise ValueError(f"Unknown resolver command: {command!r}")


def build_cache_store(resolver: IResolver, data_dir: Path) -> JsonFileCacheStore:
    """Return the cache store for *resolver* inside *data_dir*."""
    return JsonFileCacheStore(Path(data_dir) / resolver.cache_filename)


def build_engine(
    resolver: IResolver,
    app_settings: Settings,
    data_dir: Path,
    policy: CachePolicy,
    progress: IProgressSink | None = None,
) -> BatchResolutionEngine:
    """Assemble a batch engine from settings and a cache policy."""
    cache_store = build_cache_store(resolver, data_dir) if policy.enabled else None
    return BatchResolutionEngine(
        resolver=resolver,
        cache_store=cache_store,
        policy=policy,
        max_concurrency=app_settings.cgd_max_concurrency,
        request_timeout=app_settings.cgd_request_timeout,
        progress=progress,
    )


# ---------------------------------------------------------------------------
# One-shot batch run (used by the CLI)
# ---------------------------------------------------------------------------


async def run_batch(
    keys: list[str],
    command: str,
    app_settings: Settings,
    data_dir: Path,
    policy: CachePolicy,
    *,
    strict_name: bool = False,
    result_num: int = 3,
    a_share_only: bool = True,
    progress: IProgressSink | None = None,
    out: TextIO | None = None,
) -> tuple[BatchResult, ReportSummary]:
    """Resolve *keys* with the resolver for *command* and print the report.

    The shared ``httpx.AsyncClient`` lives exactly as long as the batch.
    """
    async with httpx.AsyncClient(timeout=app_settings.cgd_request_timeout) as http_client:
        resolver = build_resolver(
            command,
            http_client,
            strict_name=strict_name,
            result_num=result_num,
            a_share_only=a_share_only,
        )
        engine = build_engine(resolver, app_settings, data_dir, policy, progress)
        _logger.info("run_batch", command=command, keys=len(keys), read=policy.read, write=policy.write)
        batch = await engine.run(keys)

    summary = ResultReporter(resolver, out=out).report(batch.keys, batch.outcomes)
    return batch, summary
