"""Configuration module for Transmute.

Provides the configuration model and its YAML loader for conversion jobs.
"""

from transmute.config.models import ConversionConfig

__all__ = ["ConversionConfig"]
