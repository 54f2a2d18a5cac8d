"""Tests for configuration and wiring in the composition root."""

import pydantic
import pytest

from storefront.infrastructure import bootstrap
from storefront.infrastructure.bootstrap import Settings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in (
        "STOREFRONT_DATA_DIR",
        "STOREFRONT_AUDIT_LOG",
        "STOREFRONT_CART_CAPACITY",
        "STOREFRONT_LEDGER_CAPACITY",
    ):
        monkeypatch.delenv(name, raising=False)


class TestSettings:

    def test_defaults(self, tmp_path, monkeypatch):
        monkeypatch.setenv("STOREFRONT_DATA_DIR", str(tmp_path))
        settings = Settings()
        assert settings.catalog_path == tmp_path / "products.json"
        assert settings.audit_log_path == tmp_path / "orders.log"
        assert settings.cart_capacity == 10
        assert settings.ledger_capacity == 10

    def test_environment_overrides(self, tmp_path, monkeypatch):
        monkeypatch.setenv("STOREFRONT_DATA_DIR", str(tmp_path))
        monkeypatch.setenv("STOREFRONT_AUDIT_LOG", str(tmp_path / "audit.txt"))
        monkeypatch.setenv("STOREFRONT_CART_CAPACITY", "3")
        monkeypatch.setenv("STOREFRONT_LEDGER_CAPACITY", "5")

        settings = Settings()

        assert settings.audit_log_path == tmp_path / "audit.txt"
        assert (settings.cart_capacity, settings.ledger_capacity) == (3, 5)

    def test_non_integer_capacity_rejected(self, monkeypatch):
        monkeypatch.setenv("STOREFRONT_CART_CAPACITY", "lots")
        with pytest.raises(pydantic.ValidationError, match="cart_capacity"):
            Settings()

    def test_zero_capacity_rejected(self, monkeypatch):
        monkeypatch.setenv("STOREFRONT_LEDGER_CAPACITY", "0")
        with pytest.raises(pydantic.ValidationError, match="greater than or equal to 1"):
            Settings()

    def test_settings_are_frozen(self, tmp_path):
        settings = Settings(data_dir=tmp_path)
        with pytest.raises(pydantic.ValidationError):
            settings.cart_capacity = 99


class TestWiring:

    def test_factories_use_settings(self, tmp_path):
        settings = Settings(data_dir=tmp_path, cart_capacity=2, ledger_capacity=4)
        assert len(bootstrap.catalog(settings)) == 5
        assert bootstrap.cart(settings).capacity == 2
        assert bootstrap.order_ledger(settings).capacity == 4
        assert bootstrap.audit_log(settings).file_path == tmp_path / "orders.log"

    def test_each_call_builds_a_fresh_ledger(self, tmp_path):
        settings = Settings(data_dir=tmp_path)
        assert bootstrap.order_ledger(settings) is not bootstrap.order_ledger(settings)
