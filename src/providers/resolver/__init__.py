"""Company lookup resolvers.

Two concrete implementations of IResolver, selected by CLI subcommand:

    1. CreditChinaResolver  -- unified social credit code from the Credit China
       registry search.  Optional strict-name matching.
    2. CninfoResolver       -- listed-company search on CNINFO plus the latest
       top-ten shareholder roster.  Unlisted companies resolve to Absent.

Both take an injected ``httpx.AsyncClient`` and convert every transport or
parsing problem into a Failure outcome.
"""

from src.providers.resolver.cninfo_provider import CninfoResolver
from src.providers.resolver.credit_china_provider import CreditChinaResolver

__all__ = ["CninfoResolver", "CreditChinaResolver"]
