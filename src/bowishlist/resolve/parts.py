"""Part code -> BOID resolution against catalog/id_lookup."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Protocol, Sequence

from bowishlist.errors import BOWishlistError, PartNotFoundError

logger = logging.getLogger(__name__)


class IdLookupSource(Protocol):
    def id_lookup(
        self,
        code: str,
        *,
        id_type: Optional[str] = None,
        item_type: str = "Part",
    ) -> list[str]: ...


@dataclass(frozen=True)
class LookupStrategy:
    """One id_lookup call shape. id_type None means an unscoped lookup."""

    name: str
    id_type: Optional[str]


# LDraw ids track BrickLink numbering most closely, so they are tried first.
DEFAULT_STRATEGIES: tuple[LookupStrategy, ...] = (
    LookupStrategy("ldraw", "ldraw"),
    LookupStrategy("design_id", "design_id"),
    LookupStrategy("any", None),
)


def pick_shortest(candidates: Sequence[str]) -> str:
    """
    Return the shortest candidate; ties keep the first seen.

    This is a heuristic: lookups such as 901078 return variants like
    "901078-98" alongside the bare parent "901078", and the bare id is usually
    the one wanted. Nothing guarantees that for every catalog entry.
    """
    if not candidates:
        raise ValueError("candidates must not be empty")
    best = candidates[0]
    for boid in candidates[1:]:
        if len(boid) < len(best):
            best = boid
    return best


class PartIdentityResolver:
    """
    Resolve a part code to a BOID. Stateless per call; caching is the caller's job.

    Strategies run in order and stop at the first one returning any candidate.
    """

    def __init__(
        self,
        source: IdLookupSource,
        *,
        strategies: Sequence[LookupStrategy] = DEFAULT_STRATEGIES,
    ) -> None:
        self._source = source
        self._strategies = tuple(strategies)

    def resolve(self, part_code: str) -> str:
        """
        Raises:
            PartNotFoundError: if no strategy yields a candidate, or a lookup call fails.
        """
        for strategy in self._strategies:
            try:
                candidates = self._source.id_lookup(part_code, id_type=strategy.id_type)
            except BOWishlistError as exc:
                raise PartNotFoundError(
                    f"Lookup failed for part '{part_code}'",
                    details={"part_code": part_code, "strategy": strategy.name},
                    cause=exc,
                ) from exc

            candidates = [c for c in candidates if c]
            if candidates:
                boid = pick_shortest(candidates)
                logger.debug(
                    "Part %s -> %s via %s (%d candidates)",
                    part_code,
                    boid,
                    strategy.name,
                    len(candidates),
                )
                return boid

        raise PartNotFoundError(
            f"Failed to lookup any boids for part '{part_code}'",
            details={"part_code": part_code},
        )
