#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import logging
from dataclasses import replace

from valantis.catalog import (
    CatalogConfig,
    CatalogView,
    FilterForm,
    ProductCatalog,
    ValidationError,
    build_filter_params,
    render_text,
)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Browse the Valantis product catalog")
    p.add_argument("--pages", type=int, default=1, help="number of pages to show")
    p.add_argument("--page-size", type=int, default=None)
    p.add_argument("--product", help="filter by product name")
    p.add_argument("--brand", help="filter by brand")
    p.add_argument("--price", help="filter by exact price")
    p.add_argument("-v", "--verbose", action="store_true")
    return p


async def main() -> None:
    parser = build_parser()
    args = parser.parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    config = CatalogConfig.from_env()
    if args.page_size:
        config = replace(config, page_size=args.page_size)

    form = FilterForm(product=args.product, brand=args.brand, price=args.price)
    try:
        build_filter_params(form)
    except ValidationError as e:
        parser.error(str(e))

    async with ProductCatalog(config) as catalog:
        view = CatalogView(catalog)
        if form.filled():
            print(render_text(await view.show(form)))
            return
        print(render_text(await view.show()))
        for _ in range(args.pages - 1):
            print()
            print(render_text(await view.show_next()))


if __name__ == "__main__":
    asyncio.run(main())
