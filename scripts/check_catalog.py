"""Check that the configured aesthetic catalog covers the style quiz."""

from __future__ import annotations

import asyncio
from typing import Iterable

from aesthetic_engine.db.catalog import SqlAlchemyAestheticCatalog
from aesthetic_engine.db.session import create_engine, create_session_factory, init_db
from aesthetic_engine.integrations import IntegrationCheckResult, run_all_checks
from aesthetic_engine.monitoring.logging import configure_logging


def _format_result(result: IntegrationCheckResult) -> str:
    status = "✅" if result.success else "❌"
    return f"{status} {result.name}: {result.message}"


def print_results(results: Iterable[IntegrationCheckResult]) -> None:
    for result in results:
        print(_format_result(result))


async def _run() -> list[IntegrationCheckResult]:
    engine = create_engine()
    try:
        await init_db(engine)
        catalog = SqlAlchemyAestheticCatalog(create_session_factory(engine))
        return await run_all_checks(catalog)
    finally:
        await engine.dispose()


def main() -> None:
    configure_logging()
    results = asyncio.run(_run())
    print_results(results)


if __name__ == "__main__":
    main()
