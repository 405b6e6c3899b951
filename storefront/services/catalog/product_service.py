# storefront/services/catalog/product_service.py
from __future__ import annotations

from typing import List, Optional, Sequence

from sqlalchemy.orm import sessionmaker

from storefront.common.concurrency.join import join_all
from storefront.common.logging import get_logger
from storefront.database.core.transaction import unit_of_work
from storefront.database.repos.product_repo import ProductRepo, ProductTagRepo
from storefront.domain.dataclasses.tag_sync import TagSyncPlan
from storefront.domain.policies.tag_sync import plan_tag_sync
from storefront.services.schemas.products import (
    ProductCreate,
    ProductDetail,
    ProductRead,
    ProductUpdate,
    ProductWithTags,
)

logger = get_logger()

DETAIL_INCLUDES = ("category", "tags")


class ProductService:
    """
    Orchestrates product reads/writes over the repos.

    Every repo call runs in its own short unit of work and commits on its own,
    so multi-step writes (create + tag links, update + tag sync) are NOT atomic:
    a failure in a later step leaves earlier steps committed.
    """

    def __init__(self, session_factory: sessionmaker) -> None:
        self.session_factory = session_factory

    # ---------- reads ----------

    def list_products(self) -> List[ProductDetail]:
        with unit_of_work(self.session_factory) as db:
            rows = ProductRepo(db).find_all(include=DETAIL_INCLUDES)
            return [ProductDetail.model_validate(r) for r in rows]

    def get_product(self, product_id: int) -> Optional[ProductDetail]:
        with unit_of_work(self.session_factory) as db:
            row = ProductRepo(db).find_by_pk(product_id, include=DETAIL_INCLUDES)
            return ProductDetail.model_validate(row) if row else None

    # ---------- writes ----------

    def create_product(self, payload: ProductCreate) -> ProductRead:
        with unit_of_work(self.session_factory) as db:
            obj = ProductRepo(db).create(
                product_name=payload.product_name,
                price=payload.price,
                stock=payload.stock,
                category_id=payload.category_id,
            )
            created = ProductRead.model_validate(obj)
        logger.info("Created product id=%s", created.id)

        if payload.tag_ids:
            tag_ids = list(dict.fromkeys(payload.tag_ids))
            with unit_of_work(self.session_factory) as db:
                ProductTagRepo(db).bulk_create(created.id, tag_ids)
            logger.info("Linked product id=%s to tags %s", created.id, tag_ids)

        return created

    def update_product(self, product_id: int, payload: ProductUpdate) -> Optional[ProductWithTags]:
        """
        Apply column changes, then reconcile tags if a non-empty tagIds was sent.
        Returns None when no product matches `product_id` (no tag work is done).
        """
        with unit_of_work(self.session_factory) as db:
            matched = ProductRepo(db).update_by_id(product_id, payload.column_values())
        if not matched:
            return None

        if payload.tag_ids:
            self.sync_tags(product_id, payload.tag_ids)

        with unit_of_work(self.session_factory) as db:
            row = ProductRepo(db).find_by_pk(product_id, include=("tags",))
            return ProductWithTags.model_validate(row) if row else None

    def sync_tags(self, product_id: int, tag_ids: Sequence[int]) -> TagSyncPlan:
        with unit_of_work(self.session_factory) as db:
            current = [(r.id, r.tag_id) for r in ProductTagRepo(db).find_by_product(product_id)]

        plan = plan_tag_sync(current, tag_ids)
        if plan.is_noop:
            return plan

        def _remove() -> int:
            with unit_of_work(self.session_factory) as db:
                return ProductTagRepo(db).destroy_ids(plan.to_remove)

        def _add() -> int:
            with unit_of_work(self.session_factory) as db:
                return len(ProductTagRepo(db).bulk_create(product_id, plan.to_add))

        # add and remove touch disjoint rows; run both and wait for both
        removed, added = join_all(_remove, _add, name=f"tag-sync-{product_id}")
        logger.info(
            "Synced tags for product id=%s: +%d -%d (kept %d)",
            product_id, added, removed, len(plan.keep),
        )
        return plan

    def delete_product(self, product_id: int) -> int:
        with unit_of_work(self.session_factory) as db:
            deleted = ProductRepo(db).destroy_by_id(product_id)
        if deleted:
            logger.info("Deleted product id=%s", product_id)
        return deleted
