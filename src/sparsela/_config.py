"""
sparsela Config - Strategy Configuration System

Provides property-based strategy configuration for sparse matrix operations.
Allows fine-grained control over computation behavior without modifying
function signatures.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Any, List
from enum import IntEnum
import logging
import threading

from ._errors import InvalidArgumentError

logger = logging.getLogger("sparsela.config")


# =============================================================================
# Strategy Enumerations
# =============================================================================

class ColumnSortStrategy(IntEnum):
    """
    Strategy for restoring column order inside CSR rows after accumulation.
    """
    DOUBLE_TRANSPOSE = 0   # Transpose twice; each transpose is a counting sort
    ROW_SORT = 1           # Sort every row segment directly


# =============================================================================
# Configuration Classes
# =============================================================================

@dataclass
class ComputeConfig:
    """Configuration for compute operations."""
    column_sort: ColumnSortStrategy = ColumnSortStrategy.DOUBLE_TRANSPOSE


@dataclass
class DisplayConfig:
    """Configuration for string rendering."""
    value_format: str = "{}"       # str.format pattern for stored values


# =============================================================================
# Global Configuration Manager
# =============================================================================

class SparseConfig:
    """
    Global configuration manager for sparsela.

    Provides thread-local configuration with context manager support.
    Configuration can be set globally or locally within a context.

    Example:
        # Global configuration
        sparsela.config.compute = ComputeConfig(column_sort=ColumnSortStrategy.ROW_SORT)

        # Local configuration (context manager)
        with sparsela.config.local(display=DisplayConfig(value_format="{:.2f}")):
            print(matrix)
        # Back to global config
    """

    def __init__(self):
        self._global_compute = ComputeConfig()
        self._global_display = DisplayConfig()

        # Thread-local storage for context overrides
        self._local = threading.local()

        # Callbacks for config changes
        self._callbacks: Dict[str, List[Callable]] = {
            "compute": [],
            "display": [],
        }

    # -------------------------------------------------------------------------
    # Property Accessors (with thread-local override support)
    # -------------------------------------------------------------------------

    @property
    def compute(self) -> ComputeConfig:
        """Get compute configuration."""
        if getattr(self._local, "compute", None) is not None:
            return self._local.compute
        return self._global_compute

    @compute.setter
    def compute(self, value: ComputeConfig):
        """Set global compute configuration."""
        self._global_compute = value
        self._notify("compute", value)

    @property
    def display(self) -> DisplayConfig:
        """Get display configuration."""
        if getattr(self._local, "display", None) is not None:
            return self._local.display
        return self._global_display

    @display.setter
    def display(self, value: DisplayConfig):
        """Set global display configuration."""
        self._global_display = value
        self._notify("display", value)

    # -------------------------------------------------------------------------
    # Convenience Properties
    # -------------------------------------------------------------------------

    @property
    def column_sort(self) -> ColumnSortStrategy:
        """Column sort strategy used by CSR arithmetic."""
        return self.compute.column_sort

    @column_sort.setter
    def column_sort(self, value: ColumnSortStrategy):
        self._global_compute.column_sort = ColumnSortStrategy(value)

    # -------------------------------------------------------------------------
    # Context Manager Support
    # -------------------------------------------------------------------------

    def local(self, **kwargs) -> "_LocalConfigContext":
        """
        Create a local configuration context.

        Args:
            **kwargs: Configuration overrides (compute, display)

        Returns:
            Context manager

        Raises:
            InvalidArgumentError: For an unknown section name
        """
        unknown = set(kwargs) - set(self._callbacks)
        if unknown:
            raise InvalidArgumentError(f"Unknown configuration sections: {sorted(unknown)}")
        return _LocalConfigContext(self, **kwargs)

    def _set_local(self, **kwargs):
        """Set thread-local configuration."""
        for key, value in kwargs.items():
            if value is not None:
                setattr(self._local, key, value)

    def _clear_local(self, keys: List[str]):
        """Clear thread-local configuration."""
        for key in keys:
            if hasattr(self._local, key):
                setattr(self._local, key, None)

    # -------------------------------------------------------------------------
    # Callback Registration
    # -------------------------------------------------------------------------

    def on_change(self, config_name: str, callback: Callable):
        """
        Register callback for configuration changes.

        Args:
            config_name: Name of config ("compute" or "display")
            callback: Function to call when config changes
        """
        if config_name in self._callbacks:
            self._callbacks[config_name].append(callback)

    def _notify(self, config_name: str, value: Any):
        """Notify callbacks of configuration change."""
        for callback in self._callbacks.get(config_name, []):
            try:
                callback(value)
            except Exception:
                logger.exception(f"Config callback for '{config_name}' failed")

    # -------------------------------------------------------------------------
    # Reset
    # -------------------------------------------------------------------------

    def reset(self):
        """Reset all configurations to defaults."""
        self._global_compute = ComputeConfig()
        self._global_display = DisplayConfig()

    # -------------------------------------------------------------------------
    # Serialization
    # -------------------------------------------------------------------------

    def to_dict(self) -> Dict[str, Any]:
        """Export configuration as dictionary."""
        return {
            "compute": {
                "column_sort": self.compute.column_sort.name,
            },
            "display": {
                "value_format": self.display.value_format,
            },
        }

    def __repr__(self) -> str:
        return f"SparseConfig({self.to_dict()})"


class _LocalConfigContext:
    """Context manager for local configuration override."""

    def __init__(self, config: SparseConfig, **kwargs):
        self._config = config
        self._kwargs = kwargs
        self._keys = list(kwargs.keys())

    def __enter__(self):
        self._config._set_local(**self._kwargs)
        return self._config

    def __exit__(self, exc_type, exc_val, exc_tb):
        self._config._clear_local(self._keys)
        return False


# =============================================================================
# Global Instance
# =============================================================================

config = SparseConfig()


# =============================================================================
# Convenience Functions
# =============================================================================

def get_config() -> SparseConfig:
    """Get the global configuration instance."""
    return config


def set_column_sort(strategy: ColumnSortStrategy = ColumnSortStrategy.DOUBLE_TRANSPOSE):
    """
    Configure how CSR arithmetic restores column order.

    Args:
        strategy: Column sort strategy
    """
    config.compute = ComputeConfig(column_sort=ColumnSortStrategy(strategy))


# =============================================================================
# Exports
# =============================================================================

__all__ = [
    # Strategy enums
    "ColumnSortStrategy",
    # Config classes
    "ComputeConfig",
    "DisplayConfig",
    # Main config class
    "SparseConfig",
    # Global instance
    "config",
    # Convenience functions
    "get_config",
    "set_column_sort",
]
