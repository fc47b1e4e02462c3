"""GraphQL document sent to the upstream catalogue."""
from __future__ import annotations

from typing import Any, Dict

# The SKU only ever travels in ``variables``; it is never formatted into the
# document text.
PRODUCT_BY_SKU_QUERY = """
query GetProductBySku($sku: String!) {
  products(filter: { sku: { eq: $sku } }) {
    items {
      name
      sku
      price_range {
        minimum_price {
          regular_price {
            value
            currency
          }
        }
      }
    }
  }
}
""".strip()


def build_payload(sku: str) -> Dict[str, Any]:
    return {"query": PRODUCT_BY_SKU_QUERY, "variables": {"sku": sku}}
