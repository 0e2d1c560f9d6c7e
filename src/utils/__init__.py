"""Utility modules for cgd.

Available utility modules (all re-exported here for convenience):

- **errors** -- Exception hierarchy rooted at CgdError.  Only fatal
  conditions (configuration, cache I/O) escape to the CLI; per-company
  lookup problems are turned into Failure outcomes by the resolvers.
- **concurrency** -- asyncio semaphore throttling that keeps the batch
  fan-out under the configured in-flight limit.
- **logging** -- structlog setup with a dual-renderer pattern: coloured
  console output in development, structured JSON in production.  Always
  written to stderr so stdout carries only results.
- **text_normalizer** -- splitting raw input into company names and
  fuzzy name similarity for strict-name diagnostics.
"""

# -- Exception hierarchy ----------------------------------------------------
from src.utils.errors import (
    CacheStoreError,
    CgdError,
    ConfigurationError,
    LookupFailedError,
)

# -- Async concurrency helpers ---------------------------------------------
from src.utils.concurrency import DEFAULT_CONCURRENCY, throttled_gather

# -- Structured logging setup ----------------------------------------------
from src.utils.logging import configure_logging, get_logger

# -- Input splitting and name comparison -----------------------------------
from src.utils.text_normalizer import name_similarity, split_query_keys

__all__ = [
    "DEFAULT_CONCURRENCY",
    "CacheStoreError",
    "CgdError",
    "ConfigurationError",
    "LookupFailedError",
    "configure_logging",
    "get_logger",
    "name_similarity",
    "split_query_keys",
    "throttled_gather",
]
