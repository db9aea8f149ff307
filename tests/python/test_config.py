"""
Tests for the sparsela configuration system.
"""

import logging
import threading

import pytest

import sparsela
from sparsela import (
    ColumnSortStrategy,
    ComputeConfig,
    DisplayConfig,
    InvalidArgumentError,
    SparseConfig,
    config,
    get_config,
    set_column_sort,
)
from sparsela.sparse import CSRMatrix


class TestDefaults:
    """Test default configuration values."""

    def test_global_instance(self):
        """Test get_config returns the package-level instance."""
        assert get_config() is config
        assert sparsela.config is config

    def test_defaults(self):
        """Test defaults."""
        cfg = SparseConfig()
        assert cfg.compute.column_sort == ColumnSortStrategy.DOUBLE_TRANSPOSE
        assert cfg.display.value_format == "{}"

    def test_to_dict(self):
        """Test serialization."""
        assert SparseConfig().to_dict() == {
            "compute": {"column_sort": "DOUBLE_TRANSPOSE"},
            "display": {"value_format": "{}"},
        }

    def test_repr(self):
        """Test repr includes the sections."""
        assert "DOUBLE_TRANSPOSE" in repr(SparseConfig())


class TestGlobalConfig:
    """Test global setters and reset."""

    def test_set_column_sort(self):
        """Test the convenience setter."""
        set_column_sort(ColumnSortStrategy.ROW_SORT)
        assert config.column_sort == ColumnSortStrategy.ROW_SORT

    def test_column_sort_property(self):
        """Test the column_sort property accepts plain ints."""
        config.column_sort = 1
        assert config.compute.column_sort is ColumnSortStrategy.ROW_SORT

    def test_reset(self):
        """Test reset restores defaults."""
        config.display = DisplayConfig(value_format="{:.2f}")
        config.reset()
        assert config.display.value_format == "{}"

    def test_display_format_used_by_str(self):
        """Test str() renders values with the configured format."""
        config.display = DisplayConfig(value_format="{:.2f}")
        mat = CSRMatrix(1, 1, [1], [1], [1.0 / 3.0])
        assert str(mat) == "1x1 nnz = 1\n(1, 1): 0.33"


class TestLocalConfig:
    """Test thread-local overrides."""

    def test_local_override(self):
        """Test a local context overrides and then restores."""
        with config.local(compute=ComputeConfig(column_sort=ColumnSortStrategy.ROW_SORT)):
            assert config.column_sort == ColumnSortStrategy.ROW_SORT
        assert config.column_sort == ColumnSortStrategy.DOUBLE_TRANSPOSE

    def test_local_restores_on_error(self):
        """Test the override is cleared when the body raises."""
        with pytest.raises(RuntimeError):
            with config.local(display=DisplayConfig(value_format="{:e}")):
                raise RuntimeError("boom")
        assert config.display.value_format == "{}"

    def test_local_unknown_section(self):
        """Test unknown sections are rejected."""
        with pytest.raises(InvalidArgumentError, match="threading"):
            config.local(threading=None)

    def test_local_is_thread_local(self):
        """Test another thread does not see a local override."""
        seen = []

        def worker():
            seen.append(config.column_sort)

        with config.local(compute=ComputeConfig(column_sort=ColumnSortStrategy.ROW_SORT)):
            thread = threading.Thread(target=worker)
            thread.start()
            thread.join()

        assert seen == [ColumnSortStrategy.DOUBLE_TRANSPOSE]


class TestCallbacks:
    """Test change callbacks."""

    def test_on_change(self):
        """Test callbacks receive the new value."""
        cfg = SparseConfig()
        received = []
        cfg.on_change("display", received.append)
        new = DisplayConfig(value_format="{:g}")
        cfg.display = new
        assert received == [new]

    def test_failing_callback_logged(self, caplog):
        """Test a failing callback is logged and does not break the setter."""
        cfg = SparseConfig()

        def bad(_):
            raise RuntimeError("callback failed")

        cfg.on_change("compute", bad)
        with caplog.at_level(logging.ERROR, logger="sparsela.config"):
            cfg.compute = ComputeConfig(column_sort=ColumnSortStrategy.ROW_SORT)

        assert cfg.column_sort == ColumnSortStrategy.ROW_SORT
        assert "Config callback for 'compute' failed" in caplog.text
