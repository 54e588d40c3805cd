"""Authority registry: immutable catalog of statute and case-law records."""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Iterable, Iterator, List, Mapping

from .errors import UnknownAuthorityError
from .models import Authority

logger = logging.getLogger(__name__)


class AuthorityRegistry:
    """Construct-once, read-many mapping of authority id to `Authority`.

    The backing mapping is a read-only proxy and `Authority` records are
    frozen, so one registry can be shared by concurrent computations.
    """

    def __init__(self, authorities: Iterable[Authority]):
        records: dict[str, Authority] = {}
        for authority in authorities:
            if authority.id in records:
                raise ValueError(f"Duplicate authority id registered: {authority.id}")
            records[authority.id] = authority
        self._records: Mapping[str, Authority] = MappingProxyType(records)

    def __contains__(self, authority_id: object) -> bool:
        return authority_id in self._records

    def __iter__(self) -> Iterator[Authority]:
        return iter(self._records.values())

    def __len__(self) -> int:
        return len(self._records)

    def get(self, authority_id: str) -> Authority:
        try:
            return self._records[authority_id]
        except KeyError:
            logger.error("Authority id %s is not in the registry", authority_id)
            raise UnknownAuthorityError(authority_id) from None

    def ids(self) -> List[str]:
        return list(self._records.keys())

    def resolve(self, authority_ids: Iterable[str]) -> List[Authority]:
        """Resolve ids to registry records in request order, duplicates kept."""
        return [self.get(authority_id) for authority_id in authority_ids]
