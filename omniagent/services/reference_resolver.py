"""
Reference Resolver - display name → provider id.

Users say "read my Budget doc", providers want an id. An explicit id
always wins; otherwise the first listing match is used.

    resolver = ReferenceResolver(drive.list_by_name)
    ref = await resolver.resolve(token, display_name="Budget", type_hint=GOOGLE_DOC_MIME)
    if ref.id is None:
        ...  # "Could not find doc "Budget"."
"""

import logging
from dataclasses import dataclass
from typing import Awaitable, Callable, List, Optional

from omniagent.environments.base import NamedItem


logger = logging.getLogger("omniagent.services.reference_resolver")


ListByName = Callable[[str, str, Optional[str]], Awaitable[List[NamedItem]]]


@dataclass
class ResolvedReference:
    id: Optional[str]
    name: str


class ReferenceResolver:
    """
    Read-only, idempotent id lookup.

    Args:
        list_by_name: async (auth, name, type_hint) → [NamedItem]
        placeholder: name reported when an explicit id skips the lookup
    """

    def __init__(self, list_by_name: ListByName, placeholder: str = "File"):
        self._list_by_name = list_by_name
        self.placeholder = placeholder

    async def resolve(
        self,
        auth: str,
        display_name: Optional[str] = None,
        explicit_id: Optional[str] = None,
        type_hint: Optional[str] = None,
    ) -> ResolvedReference:
        if explicit_id:
            return ResolvedReference(id=explicit_id, name=self.placeholder)
        if not display_name:
            return ResolvedReference(id=None, name="")

        matches = await self._list_by_name(auth, display_name, type_hint)
        if matches:
            first = matches[0]
            logger.debug(f"Resolved {display_name!r} → {first.id}")
            return ResolvedReference(id=first.id, name=first.name)

        logger.info(f"No match for {display_name!r}")
        return ResolvedReference(id=None, name=display_name)
