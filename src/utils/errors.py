"""Custom exception hierarchy for cgd.

All application exceptions inherit from :class:`CgdError`, which carries an
optional ``provider_name`` so log lines and diagnostics can say which lookup
service (e.g. "creditchina", "cninfo") or local store caused the failure.

    CgdError  (base -- catch-all for any cgd error)
    +-- ConfigurationError   (startup / data directory; fatal)
    +-- CacheStoreError      (cache file I/O; fatal)
    +-- LookupFailedError    (one key could not be resolved; per-item)

Only the first two ever reach the CLI.  ``LookupFailedError`` is raised inside
resolvers and converted to a ``Failure`` outcome at the resolver boundary, so
a bad key never affects its siblings in a batch.
"""


class CgdError(Exception):
    """Base exception for all cgd errors.

    The ``__str__`` method prefixes the provider name in brackets for log
    output, e.g. ``[cninfo] Request failed``.
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        provider_name: str | None = None,
    ) -> None:
        self._message = message
        self._provider_name = provider_name
        super().__init__(self._message)

    @property
    def message(self) -> str:
        return self._message

    @property
    def provider_name(self) -> str | None:
        return self._provider_name

    def __str__(self) -> str:
        if self._provider_name:
            return f"[{self._provider_name}] {self._message}"
        return self._message


class ConfigurationError(CgdError):
    """Raised when configuration is invalid or missing at startup."""

    def __init__(
        self,
        message: str = "Invalid or missing configuration",
        provider_name: str | None = None,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)


class CacheStoreError(CgdError):
    """Raised when the cache file exists but cannot be read or written."""

    def __init__(
        self,
        message: str = "Cache store I/O failed",
        provider_name: str | None = None,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)


class LookupFailedError(CgdError):
    """Raised by a resolver when a single key cannot be resolved.

    The message is user-facing: it becomes the ``reason`` of the ``Failure``
    outcome printed next to the company name.
    """

    def __init__(
        self,
        message: str = "Lookup failed",
        provider_name: str | None = None,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)
