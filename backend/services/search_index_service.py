import logging
from typing import Any, Dict, List, Optional

from repositories.search_index_repository import delete_entry, upsert_entry

logger = logging.getLogger("storefront")

TEXT_FIELDS = ("name", "category", "description")


def _lower(value: Any) -> Optional[str]:
    if not value:
        return None
    return str(value).lower()


def build_search_terms(product: Dict[str, Any]) -> List[str]:
    values = [product.get(field) for field in TEXT_FIELDS]
    values.extend(product.get("tags") or [])
    terms = [_lower(value) for value in values]
    return [term for term in terms if term]


def build_entry(product_id: str, product: Dict[str, Any]) -> Dict[str, Any]:
    images = product.get("images") or []
    return {
        "productId": product_id,
        "name": product.get("name"),
        "category": product.get("category"),
        "price": product.get("price"),
        "image": images[0] if images else None,
        "searchTerms": build_search_terms(product),
    }


def sync_product(db, product_id: str, product: Optional[Dict[str, Any]]) -> None:
    """Mirror a product write into ``search_index``; ``None`` means deleted."""
    if product is None:
        delete_entry(db, product_id)
        logger.info("search_index removed product=%s", product_id)
        return
    upsert_entry(db, product_id, build_entry(product_id, product))
    logger.info("search_index updated product=%s", product_id)
