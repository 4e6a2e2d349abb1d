"""Configuration module for cronfmt."""

from cronfmt.config.schema import Settings

__all__ = ["Settings"]
