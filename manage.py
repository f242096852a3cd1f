#!/usr/bin/env python3
"""
Restock management CLI.

Usage:
    python manage.py migrate [--status | --verify]   Apply or inspect database migrations
    python manage.py serve [--host H] [--port P]     Run the API server in the foreground
    python manage.py check-reorder ORG_ID            Open alerts for items below reorder level
    python manage.py report ORG_ID                   Print the reorder report as JSON
"""

import argparse
import asyncio
import json
import sys


def _run_async(coro):
    """Run a coroutine with logging configured and the pool closed afterwards."""
    from src.config import configure_logging
    from src.infrastructure.storage.sqlite import close_pool

    configure_logging()

    async def runner():
        try:
            return await coro
        finally:
            await close_pool()

    return asyncio.run(runner())


def cmd_migrate(args: argparse.Namespace) -> None:
    """Apply pending migrations, or report on the schema."""
    from src.infrastructure.storage.sqlite.migrations import (
        get_migration_status,
        initialize_database,
        verify_schema_integrity,
    )

    if args.status:
        status = _run_async(get_migration_status())
        print(f"Database exists:    {status['exists']}")
        print(f"Current version:    {status['current_version'] or 'none'}")
        print(f"Pending migrations: {', '.join(status['pending_migrations']) or 'none'}")
        return

    if args.verify:
        checks = _run_async(verify_schema_integrity())
        for check in checks:
            print(f"[{check['status']}] {check['check']}")
            if check["status"] != "PASS":
                for key, value in check.items():
                    if key not in ("check", "status"):
                        print(f"       {key}: {value}")
        if any(c["status"] != "PASS" for c in checks):
            sys.exit(1)
        return

    results = _run_async(initialize_database(create_backup_before=not args.no_backup))
    if not results:
        print("Database is up to date.")
    for result in results:
        status = "SUCCESS" if result.success else "FAILED"
        print(f"[{status}] v{result.version}: {result.name} ({result.execution_time_ms}ms)")
        if result.error:
            print(f"         Error: {result.error}")
    if any(not r.success for r in results):
        sys.exit(1)


def cmd_serve(args: argparse.Namespace) -> None:
    """Run the API in the foreground; the app migrates on startup."""
    import uvicorn

    from src.config import get_settings

    api = get_settings().api
    uvicorn.run(
        "src.api.main:app",
        host=args.host or api.host,
        port=args.port or api.port,
        reload=args.reload,
    )


def cmd_check_reorder(args: argparse.Namespace) -> None:
    """Run a reorder point check for one organization."""
    from src.application.use_cases import CheckReorderPointsUseCase

    use_case = CheckReorderPointsUseCase()
    result = _run_async(use_case.execute(args.organization_id))
    print(f"Checked {result.checked} item(s), opened {result.new_alerts} new alert(s).")
    for alert in result.alerts:
        print(f"  {alert.id}  item={alert.item_id}  qty={alert.suggested_qty:g}")


def cmd_report(args: argparse.Namespace) -> None:
    """Print the reorder report."""
    from src.application.use_cases import GetReorderReportUseCase

    use_case = GetReorderReportUseCase()
    report = _run_async(use_case.execute(args.organization_id))
    print(json.dumps(use_case.to_response(report).model_dump(mode="json"), indent=2))


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Restock management CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p_migrate = sub.add_parser("migrate", help="Apply pending database migrations")
    p_migrate.add_argument("--no-backup", action="store_true", help="Skip backup before migrating")
    p_migrate.add_argument("--status", action="store_true", help="Show applied and pending migrations")
    p_migrate.add_argument("--verify", action="store_true", help="Check schema integrity")
    p_migrate.set_defaults(func=cmd_migrate)

    p_serve = sub.add_parser("serve", help="Run the API server")
    p_serve.add_argument("--host", help="Bind address (default from API_HOST)")
    p_serve.add_argument("--port", type=int, help="Port (default from API_PORT)")
    p_serve.add_argument("--reload", action="store_true", help="Reload on code changes")
    p_serve.set_defaults(func=cmd_serve)

    p_check = sub.add_parser("check-reorder", help="Open alerts for items below reorder level")
    p_check.add_argument("organization_id")
    p_check.set_defaults(func=cmd_check_reorder)

    p_report = sub.add_parser("report", help="Print the reorder report")
    p_report.add_argument("organization_id")
    p_report.set_defaults(func=cmd_report)

    args = parser.parse_args()
    args.func(args)


if __name__ == "__main__":
    main()
