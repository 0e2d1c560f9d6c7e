"""Per-key outcome models for batch resolution.

Every key submitted to the batch engine ends in exactly one of four states:

    Hit      -- served from the persistent cache, no network call made
    Fresh    -- resolved just now by a resolver
    Absent   -- the resolver ran and legitimately found no record
                (e.g. "not a listed company"); not an error
    Failure  -- the resolver could not produce an answer; ``reason`` says why

All four are frozen Pydantic v2 models carrying a ``kind`` literal, so the
union can be discriminated both by ``isinstance`` and by pydantic when an
outcome is serialized.  Resolvers only ever return ``ResolveResult``
(Fresh | Absent | Failure); ``Hit`` is produced solely by the engine.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class Hit(BaseModel):
    """A value taken from the persistent cache."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    kind: Literal["hit"] = "hit"
    value: Any


class Fresh(BaseModel):
    """A value produced by a resolver during this batch."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    kind: Literal["fresh"] = "fresh"
    value: Any


class Absent(BaseModel):
    """The lookup succeeded but no record exists for the key."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["absent"] = "absent"


class Failure(BaseModel):
    """The lookup failed; ``reason`` is shown to the user verbatim."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["failure"] = "failure"
    reason: str


ResolveResult = Union[Fresh, Absent, Failure]

Outcome = Annotated[Union[Hit, Fresh, Absent, Failure], Field(discriminator="kind")]


class CachePolicy(BaseModel):
    """Whether a batch may read from and/or write back to the cache."""

    model_config = ConfigDict(frozen=True)

    read: bool = True
    write: bool = True

    @property
    def enabled(self) -> bool:
        return self.read or self.write


class BatchResult(BaseModel):
    """The result of one batch: outcomes aligned with the submitted keys.

    ``outcomes[i]`` always belongs to ``keys[i]``.  ``cache_write_error`` is
    set when write-back had to be abandoned part-way through the batch; the
    outcomes themselves are still complete.
    """

    model_config = ConfigDict(frozen=True)

    keys: list[str] = Field(default_factory=list)
    outcomes: list[Outcome] = Field(default_factory=list)
    cache_write_error: str | None = None

    @property
    def cache_hits(self) -> int:
        return sum(1 for o in self.outcomes if isinstance(o, Hit))

    @property
    def failures(self) -> int:
        return sum(1 for o in self.outcomes if isinstance(o, Failure))
