"""Terminal client that reuses the in-process lookup logic."""
from __future__ import annotations

import argparse
import asyncio
import json
from pathlib import Path
from typing import Iterable, List

import httpx

from product_relay.lookup import lookup
from product_relay.models import LookupResponse, ProductRecord

GREEN = "\033[92m"
RED = "\033[91m"
RESET = "\033[0m"


async def perform_lookups(skus: List[str]) -> List[LookupResponse]:
    async with httpx.AsyncClient(follow_redirects=True) as client:
        return [await lookup(sku, client) for sku in skus]


def format_price(product: ProductRecord) -> str:
    price = product.regular_price
    if price is None or price.value is None:
        return "-"
    return f"{price.value:.2f} {price.currency or ''}".strip()


def pretty_print_response(sku: str, result: LookupResponse) -> None:
    color = GREEN if result.ok else RED
    status_label = f"{color}{result.status_code}{RESET}"
    if not result.ok:
        print(f"SKU: {sku} | status: {status_label} | error: {result.body.error}")
        return
    if not isinstance(result.body.product, dict):
        print(f"SKU: {sku} | status: {status_label} | {result.body.product!r}")
        return
    product = ProductRecord.model_validate(result.body.product)
    print(f"SKU: {sku} | status: {status_label} | {product.name} | {product.sku} | {format_price(product)}")


def print_results(skus: List[str], results: List[LookupResponse], as_json: bool) -> int:
    for sku, result in zip(skus, results):
        if as_json:
            print(json.dumps(result.to_dict(), ensure_ascii=False))
        else:
            pretty_print_response(sku, result)
    return 0 if all(result.ok for result in results) else 1


def read_batch(file_path: Path) -> List[str]:
    with file_path.open("r", encoding="utf-8") as fh:
        return [line.strip() for line in fh if line.strip()]


def main(argv: Iterable[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="CLI client for the product lookup relay")
    parser.add_argument("skus", nargs="*", help="SKUs to look up")
    parser.add_argument("--batch", type=Path, help="File with one SKU per line")
    parser.add_argument("--json", action="store_true", help="Print raw response envelopes")
    args = parser.parse_args(list(argv) if argv is not None else None)

    skus = list(args.skus)
    if args.batch:
        skus.extend(read_batch(args.batch))
    if not skus:
        parser.error("at least one SKU or --batch file is required")

    results = asyncio.run(perform_lookups(skus))
    return print_results(skus, results, args.json)


if __name__ == "__main__":
    raise SystemExit(main())
