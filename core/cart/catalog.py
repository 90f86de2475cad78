"""Product lookup used by the cart when adding items."""
from typing import Dict, Iterable, Optional, Protocol

from supabase import Client

from core.logging import get_logger
from core.services.models import Product

logger = get_logger(__name__)


class ProductCatalog(Protocol):
    """Resolves a product id to a catalog resource."""

    def resolve(
        self,
        product_id: int,
        include_deleted: bool = False,
        include_unpublished: bool = False,
    ) -> Optional[Product]:
        ...


class InMemoryCatalog:
    """Dict-backed catalog for tests and fixtures."""

    def __init__(self, products: Iterable[Product] = ()):
        self._products: Dict[int, Product] = {p.id: p for p in products}

    def put(self, product: Product) -> None:
        self._products[product.id] = product

    def resolve(
        self,
        product_id: int,
        include_deleted: bool = False,
        include_unpublished: bool = False,
    ) -> Optional[Product]:
        product = self._products.get(product_id)
        if product is None:
            return None
        if product.deleted and not include_deleted:
            return None
        if not product.published and not include_unpublished:
            return None
        return product


class SupabaseCatalog:
    """Catalog backed by the `products` table."""

    TABLE = "products"

    def __init__(self, client: Client) -> None:
        self.client = client

    def resolve(
        self,
        product_id: int,
        include_deleted: bool = False,
        include_unpublished: bool = False,
    ) -> Optional[Product]:
        query = self.client.table(self.TABLE).select("*").eq("id", product_id)
        if not include_deleted:
            query = query.eq("deleted", False)
        if not include_unpublished:
            query = query.eq("published", True)

        result = query.limit(1).execute()
        if not result.data:
            logger.debug(f"Product {product_id} not found in catalog")
            return None
        return Product(**result.data[0])
