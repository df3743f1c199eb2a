"""
Core business logic services.

Layer-pure services that depend only on:
- flipcam/core/entities/*
- flipcam/core/exceptions.py

NO infrastructure imports.
"""

from flipcam.core.services.inventory_rules import (
    apply_inventory_patch,
    is_sale_transition,
    purchase_movement_for,
    sale_movement_for,
    stamp_sale_date,
)
from flipcam.core.services.kpi_projection import project_kpis, return_on_capital

__all__ = [
    # Inventory
    "apply_inventory_patch",
    "is_sale_transition",
    "purchase_movement_for",
    "sale_movement_for",
    "stamp_sale_date",
    # KPIs
    "project_kpis",
    "return_on_capital",
]
