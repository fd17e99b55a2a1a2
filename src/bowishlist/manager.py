"""WishlistManager: plans list changes and applies them to Brick Owl."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional, Sequence

from bowishlist.cache import CacheStore, PartIdentityCache, open_part_cache
from bowishlist.config import BOIDS_CACHE_NAME, COLORS_CACHE_NAME, ClientConfig
from bowishlist.controller import BrickOwlController
from bowishlist.errors import (
    BOWishlistError,
    InvalidArgumentError,
    PartNotFoundError,
    is_fatal,
)
from bowishlist.models import DesiredItem, DesiredList, ItemResult, ReconcileResult
from bowishlist.plan import Action, PlanOperation, ReconcilePlan, build_reconcile_plan
from bowishlist.resolve import ColorResolver, PartIdentityResolver, lookup_color_id

logger = logging.getLogger(__name__)


@dataclass
class _ApplyContext:
    part_cache: PartIdentityCache
    colors: dict[str, str]
    # Part codes that already failed this run; never persisted.
    unresolved: dict[str, PartNotFoundError] = field(default_factory=dict)


class WishlistManager:
    """High-level manager: Plan -> Apply, one sequential pass."""

    def __init__(
        self,
        client_config: ClientConfig,
        cache_store: CacheStore,
        *,
        boids_cache_name: str = BOIDS_CACHE_NAME,
        colors_cache_name: str = COLORS_CACHE_NAME,
    ) -> None:
        self._controller = BrickOwlController(client_config)
        self._init_common(cache_store, boids_cache_name, colors_cache_name)

    @classmethod
    def from_controller(
        cls,
        controller: BrickOwlController,
        cache_store: CacheStore,
        *,
        boids_cache_name: str = BOIDS_CACHE_NAME,
        colors_cache_name: str = COLORS_CACHE_NAME,
    ) -> "WishlistManager":
        """Create manager with an injected controller (useful for tests)."""
        obj = cls.__new__(cls)
        obj._controller = controller
        obj._init_common(cache_store, boids_cache_name, colors_cache_name)
        return obj

    def _init_common(
        self,
        cache_store: CacheStore,
        boids_cache_name: str,
        colors_cache_name: str,
    ) -> None:
        self._store = cache_store
        self._boids_cache_name = boids_cache_name
        self._colors = ColorResolver(self._controller, cache_store, colors_cache_name)
        self._parts = PartIdentityResolver(self._controller)

    def close(self) -> None:
        self._controller.close()

    def reconcile(
        self,
        desired_lists: Sequence[DesiredList],
        *,
        purge: bool = False,
        dry_run: bool = False,
    ) -> ReconcilePlan | ReconcileResult:
        """
        Converge Brick Owl wish lists to desired_lists.

        - dry_run=True: build and return the ReconcilePlan without mutating anything
        - dry_run=False: build, apply, and return ReconcileResult

        The part cache is loaded before any remote call and saved on every exit
        path, including when a remote failure aborts the run.
        """
        with open_part_cache(self._store, self._boids_cache_name) as part_cache:
            colors = self._colors.resolve_all()
            plan = self.build_plan(desired_lists, purge=purge)
            if dry_run:
                return plan
            return self.apply_plan(plan, part_cache, colors)

    def build_plan(
        self,
        desired_lists: Sequence[DesiredList],
        *,
        purge: bool = False,
    ) -> ReconcilePlan:
        """Fetch the remote lists once and plan against that snapshot."""
        remote_lists = self._controller.list_wishlists()
        logger.info("Found %d lists on Brick Owl", len(remote_lists))
        return build_reconcile_plan(remote_lists, desired_lists, purge=purge)

    def apply_plan(
        self,
        plan: ReconcilePlan,
        part_cache: PartIdentityCache,
        colors: dict[str, str],
    ) -> ReconcileResult:
        """
        Apply a ReconcilePlan.

        Policy:
            - Operations run in seq order; the snapshot is never re-fetched.
            - Any remote failure raises and aborts the run.
            - A piece whose part or color cannot be resolved is skipped.
        """
        ctx = _ApplyContext(part_cache=part_cache, colors=colors)
        result = ReconcileResult(plan_id=plan.plan_id, dummy_created=False)

        for op in sorted(plan.operations, key=lambda o: o.seq):
            try:
                op.validate_required_fields()
            except ValueError as exc:
                raise InvalidArgumentError(
                    "Invalid operation: missing required fields",
                    details={"seq": op.seq, "action": op.action.value},
                    cause=exc,
                ) from exc
            self._apply_one(op, ctx, result)

        result.summary = _summarize(result)
        logger.info(
            "Done: %d lists deleted, %d created, %d pieces added, %d skipped",
            result.summary["lists_deleted"],
            result.summary["lists_created"],
            result.summary["created"],
            result.summary["skipped"],
        )
        return result

    # ----------------------------
    # Internals
    # ----------------------------
    def _apply_one(self, op: PlanOperation, ctx: _ApplyContext, result: ReconcileResult) -> None:
        if op.action is Action.CREATE_DUMMY_LIST:
            logger.info("Creating placeholder list '%s'", op.name)
            self._controller.create_list(op.name)  # type: ignore[arg-type]
            result.dummy_created = True
            return

        if op.action is Action.DELETE_LIST:
            logger.info("Deleting list '%s' (id %s)", op.name, op.list_id)
            self._controller.delete_list(op.list_id)  # type: ignore[arg-type]
            result.deleted_list_ids.append(op.list_id)  # type: ignore[arg-type]
            return

        if op.action is Action.CREATE_LIST:
            desired: DesiredList = op.desired  # type: ignore[assignment]
            list_id = self._controller.create_list(desired.name, desired.description)
            logger.info("Created list '%s' (id %s)", desired.name, list_id)
            result.created_lists[desired.name] = list_id
            for item in desired.items:
                result.items.append(self._add_item(desired.name, list_id, item, ctx))
            return

        raise InvalidArgumentError("Unsupported action", details={"action": op.action})

    def _add_item(
        self,
        list_name: str,
        list_id: str,
        item: DesiredItem,
        ctx: _ApplyContext,
    ) -> ItemResult:
        try:
            boid = self._resolve_boid(item, ctx)
            color_id = lookup_color_id(ctx.colors, item.color_name)
        except BOWishlistError as exc:
            if is_fatal(exc):
                raise
            logger.warning(
                "Could not resolve piece '%s' (%s) on wish list '%s' - skipping: %s",
                item.part_code,
                item.color_name,
                list_name,
                exc,
            )
            return ItemResult(
                list_name=list_name,
                part_code=item.part_code,
                color_name=item.color_name,
                status="skipped",
                reason=str(exc),
            )

        lot_id = self._controller.create_lot(boid, color_id, list_id)

        # The API ignores quantity on create, so anything but 1 needs an update.
        quantity_updated = False
        if item.quantity != 1:
            self._controller.update_lot(list_id, lot_id, item.quantity)
            quantity_updated = True

        return ItemResult(
            list_name=list_name,
            part_code=item.part_code,
            color_name=item.color_name,
            status="created",
            boid=boid,
            color_id=color_id,
            lot_id=lot_id,
            quantity_updated=quantity_updated,
        )

    def _resolve_boid(self, item: DesiredItem, ctx: _ApplyContext) -> str:
        if item.boid:
            return item.boid

        cached: Optional[str] = ctx.part_cache.get(item.part_code)
        if cached is not None:
            return cached

        failed = ctx.unresolved.get(item.part_code)
        if failed is not None:
            raise failed

        try:
            boid = self._parts.resolve(item.part_code)
        except PartNotFoundError as exc:
            ctx.unresolved[item.part_code] = exc
            raise
        return ctx.part_cache.add(item.part_code, boid)


def _summarize(result: ReconcileResult) -> dict[str, int]:
    summary: dict[str, int] = {
        "lists_deleted": len(result.deleted_list_ids),
        "lists_created": len(result.created_lists),
        "created": 0,
        "skipped": 0,
    }
    for r in result.items:
        summary[r.status] = summary.get(r.status, 0) + 1
    return summary
