"""Tests for host page registration."""

import pytest
from datetime import datetime
from types import SimpleNamespace
from garten.host import OshineyeConfig, expose
from garten.resolver import resolve_config, resolve_season_accent


class TestExpose:
    """Tests for the host adapter."""

    def test_no_host_skips_registration(self):
        """Should still return a usable namespace without a host."""
        namespace = expose()
        assert isinstance(namespace, OshineyeConfig)
        assert namespace.getGartenConfig is resolve_config
        assert namespace.getSeasonAccent is resolve_season_accent

    def test_registers_on_object(self):
        window = SimpleNamespace()
        namespace = expose(window)
        assert window.OshineyeConfig is namespace

    def test_registers_on_mapping(self):
        host_globals = {}
        namespace = expose(host_globals)
        assert host_globals["OshineyeConfig"] is namespace

    def test_custom_name(self):
        window = SimpleNamespace()
        expose(window, name="GartenConfig")
        assert hasattr(window, "GartenConfig")
        assert not hasattr(window, "OshineyeConfig")

    def test_registered_functions_resolve(self):
        window = SimpleNamespace()
        expose(window)
        config = window.OshineyeConfig.getGartenConfig("widget-1", now=datetime(2024, 12, 25, 10))
        assert config.container == "widget-1"
        assert config.colors.accent == "#c62828"
        assert window.OshineyeConfig.getSeasonAccent(datetime(2024, 12, 25)) == "#94a3b8"

    def test_namespace_is_frozen(self):
        namespace = expose()
        with pytest.raises(AttributeError):
            namespace.getGartenConfig = None
