"""Company record models returned by the lookup services."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ListedCompany(BaseModel):
    """A listed company's stock code and its latest top-shareholder roster.

    ``shareholders`` holds the holder names disclosed on the most recent
    reporting date (``disclosure_date``), in the order the exchange lists
    them -- normally largest holding first.
    """

    model_config = ConfigDict(frozen=True)

    code: str
    shareholders: list[str] = Field(default_factory=list)
    disclosure_date: str | None = None
