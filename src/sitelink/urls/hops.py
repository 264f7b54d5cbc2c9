"""Per-call bookkeeping that bounds indirection chains."""

from __future__ import annotations

from dataclasses import dataclass, field

from sitelink.config.settings import DEFAULT_MAX_HOPS

# (kind, scope, entity_id): scope is the site id for channels, the table name for contents
HopKey = tuple[str, int | str, int]


@dataclass(frozen=True, slots=True)
class HopBudget:
    """Indirections followed so far in one top-level resolution.

    Immutable: each hop returns a new budget, so the budget travels with the
    recursive call and resolvers stay free of per-request state.
    """

    limit: int = DEFAULT_MAX_HOPS
    used: int = 0
    visited: frozenset[HopKey] = field(default_factory=frozenset)

    def step(self, kind: str, scope: int | str, entity_id: int) -> HopBudget | None:
        """Return the budget after following ``(kind, scope, entity_id)``.

        ``None`` means the chain must stop: either the hop limit is reached or
        the same entity was already followed (a cycle).
        """
        key = (kind, scope, entity_id)
        if key in self.visited or self.used >= self.limit:
            return None
        return HopBudget(limit=self.limit, used=self.used + 1, visited=self.visited | {key})
