"""Composition root - wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Configuration comes from ``STOREFRONT_*`` environment variables with
defaults suitable for running from a checkout of the repository.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from storefront.domain.model.cart import DEFAULT_CART_CAPACITY, Cart
from storefront.domain.model.catalog import Catalog
from storefront.infrastructure.persistence.file_audit_log import FileAuditLog
from storefront.infrastructure.persistence.in_memory_order_ledger import (
    DEFAULT_LEDGER_CAPACITY,
    InMemoryOrderLedger,
)
from storefront.infrastructure.persistence.json_catalog_source import (
    JsonCatalogSource,
)

# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


class Settings(BaseSettings):
    """Storefront configuration.

    Every field can be overridden with a ``STOREFRONT_``-prefixed
    environment variable, e.g. ``STOREFRONT_CART_CAPACITY=5``.
    """

    data_dir: Path = Field(default=_DEFAULT_DATA_DIR)
    # Defaults to <data_dir>/orders.log
    audit_log: Path | None = Field(default=None)
    cart_capacity: int = Field(default=DEFAULT_CART_CAPACITY, ge=1)
    ledger_capacity: int = Field(default=DEFAULT_LEDGER_CAPACITY, ge=1)

    model_config = SettingsConfigDict(
        env_prefix="STOREFRONT_",
        extra="ignore",
        frozen=True,
    )

    @property
    def catalog_path(self) -> Path:
        return self.data_dir / "products.json"

    @property
    def audit_log_path(self) -> Path:
        return self.audit_log or self.data_dir / "orders.log"


def catalog(settings: Settings) -> Catalog:
    return JsonCatalogSource(settings.catalog_path).load()


def cart(settings: Settings) -> Cart:
    return Cart(capacity=settings.cart_capacity)


def order_ledger(settings: Settings) -> InMemoryOrderLedger:
    return InMemoryOrderLedger(capacity=settings.ledger_capacity)


def audit_log(settings: Settings) -> FileAuditLog:
    return FileAuditLog(settings.audit_log_path)
