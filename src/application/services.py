"""
Service factory functions for dependency injection.

This module provides factory functions that wire infrastructure
implementations to core services. Use cases should import from here.

Clean Architecture: Application layer orchestrates DI, not core layer.
"""

from typing import TYPE_CHECKING

from src.config import get_settings
from src.core.services import (
    AlertLifecycleManager,
    AutoPOGenerator,
    DemandForecaster,
    ReorderReportService,
    SettingsResolver,
    StockAggregator,
    SuggestionCalculator,
)

if TYPE_CHECKING:
    from src.core.interfaces import (
        IContactStore,
        IInventoryStore,
        IPurchaseOrderStore,
        IReorderAlertStore,
        IReorderSettingsStore,
        ISalesHistoryStore,
    )


# Singleton service instances
_stock_aggregator: StockAggregator | None = None
_settings_resolver: SettingsResolver | None = None
_suggestion_calculator: SuggestionCalculator | None = None
_alert_lifecycle_manager: AlertLifecycleManager | None = None
_demand_forecaster: DemandForecaster | None = None
_auto_po_generator: AutoPOGenerator | None = None
_reorder_report_service: ReorderReportService | None = None


async def get_stock_aggregator(
    inventory_store: "IInventoryStore | None" = None,
) -> StockAggregator:
    """Get or create StockAggregator instance."""
    global _stock_aggregator

    if _stock_aggregator is not None and inventory_store is None:
        return _stock_aggregator

    # Lazy import infrastructure to avoid circular imports
    from src.infrastructure.storage.sqlite import get_inventory_store

    service = StockAggregator(inventory_store or await get_inventory_store())
    if inventory_store is None:
        _stock_aggregator = service
    return service


async def get_settings_resolver(
    settings_store: "IReorderSettingsStore | None" = None,
    inventory_store: "IInventoryStore | None" = None,
) -> SettingsResolver:
    """
    Get or create SettingsResolver instance.

    Creates infrastructure dependencies if not provided.

    Args:
        settings_store: Optional reorder settings store override
        inventory_store: Optional inventory store override

    Returns:
        Configured SettingsResolver
    """
    global _settings_resolver

    overridden = settings_store is not None or inventory_store is not None
    if _settings_resolver is not None and not overridden:
        return _settings_resolver

    from src.infrastructure.storage.sqlite import (
        get_inventory_store,
        get_reorder_settings_store,
    )

    service = SettingsResolver(
        settings_store=settings_store or await get_reorder_settings_store(),
        inventory_store=inventory_store or await get_inventory_store(),
    )
    if not overridden:
        _settings_resolver = service
    return service


async def get_suggestion_calculator(
    inventory_store: "IInventoryStore | None" = None,
    settings_store: "IReorderSettingsStore | None" = None,
    contact_store: "IContactStore | None" = None,
) -> SuggestionCalculator:
    """Get or create SuggestionCalculator instance."""
    global _suggestion_calculator

    overridden = any(s is not None for s in (inventory_store, settings_store, contact_store))
    if _suggestion_calculator is not None and not overridden:
        return _suggestion_calculator

    from src.infrastructure.storage.sqlite import (
        get_contact_store,
        get_inventory_store,
        get_reorder_settings_store,
    )

    service = SuggestionCalculator(
        inventory_store=inventory_store or await get_inventory_store(),
        settings_store=settings_store or await get_reorder_settings_store(),
        contact_store=contact_store or await get_contact_store(),
    )
    if not overridden:
        _suggestion_calculator = service
    return service


async def get_alert_lifecycle_manager(
    alert_store: "IReorderAlertStore | None" = None,
    suggestion_calculator: SuggestionCalculator | None = None,
) -> AlertLifecycleManager:
    """Get or create AlertLifecycleManager instance."""
    global _alert_lifecycle_manager

    overridden = alert_store is not None or suggestion_calculator is not None
    if _alert_lifecycle_manager is not None and not overridden:
        return _alert_lifecycle_manager

    from src.infrastructure.storage.sqlite import get_reorder_alert_store

    service = AlertLifecycleManager(
        alert_store=alert_store or await get_reorder_alert_store(),
        suggestion_calculator=suggestion_calculator or await get_suggestion_calculator(),
        config=get_settings().reorder,
    )
    if not overridden:
        _alert_lifecycle_manager = service
    return service


async def get_demand_forecaster(
    sales_store: "ISalesHistoryStore | None" = None,
) -> DemandForecaster:
    """Get or create DemandForecaster instance."""
    global _demand_forecaster

    if _demand_forecaster is not None and sales_store is None:
        return _demand_forecaster

    from src.infrastructure.storage.sqlite import get_sales_store

    service = DemandForecaster(
        sales_store=sales_store or await get_sales_store(),
        config=get_settings().reorder,
    )
    if sales_store is None:
        _demand_forecaster = service
    return service


async def get_auto_po_generator(
    alert_store: "IReorderAlertStore | None" = None,
    inventory_store: "IInventoryStore | None" = None,
    contact_store: "IContactStore | None" = None,
    purchase_order_store: "IPurchaseOrderStore | None" = None,
    settings_resolver: SettingsResolver | None = None,
) -> AutoPOGenerator:
    """Get or create AutoPOGenerator instance."""
    global _auto_po_generator

    overridden = any(
        s is not None
        for s in (
            alert_store,
            inventory_store,
            contact_store,
            purchase_order_store,
            settings_resolver,
        )
    )
    if _auto_po_generator is not None and not overridden:
        return _auto_po_generator

    from src.infrastructure.storage.sqlite import (
        get_contact_store,
        get_inventory_store,
        get_purchase_order_store,
        get_reorder_alert_store,
    )

    service = AutoPOGenerator(
        alert_store=alert_store or await get_reorder_alert_store(),
        inventory_store=inventory_store or await get_inventory_store(),
        contact_store=contact_store or await get_contact_store(),
        purchase_order_store=purchase_order_store or await get_purchase_order_store(),
        settings_resolver=settings_resolver or await get_settings_resolver(),
    )
    if not overridden:
        _auto_po_generator = service
    return service


async def get_reorder_report_service() -> ReorderReportService:
    """Get or create ReorderReportService instance."""
    global _reorder_report_service

    if _reorder_report_service is not None:
        return _reorder_report_service

    from src.infrastructure.storage.sqlite import (
        get_reorder_alert_store,
        get_reorder_settings_store,
    )

    _reorder_report_service = ReorderReportService(
        suggestion_calculator=await get_suggestion_calculator(),
        alert_store=await get_reorder_alert_store(),
        settings_store=await get_reorder_settings_store(),
        forecaster=await get_demand_forecaster(),
        config=get_settings().reorder,
    )
    return _reorder_report_service


def reset_services() -> None:
    """
    Reset all singleton service instances.

    Useful for testing or reconfiguration.
    """
    global _stock_aggregator
    global _settings_resolver
    global _suggestion_calculator
    global _alert_lifecycle_manager
    global _demand_forecaster
    global _auto_po_generator
    global _reorder_report_service

    _stock_aggregator = None
    _settings_resolver = None
    _suggestion_calculator = None
    _alert_lifecycle_manager = None
    _demand_forecaster = None
    _auto_po_generator = None
    _reorder_report_service = None


__all__ = [
    "get_stock_aggregator",
    "get_settings_resolver",
    "get_suggestion_calculator",
    "get_alert_lifecycle_manager",
    "get_demand_forecaster",
    "get_auto_po_generator",
    "get_reorder_report_service",
    "reset_services",
]
