"""Readers for the local Lutris game catalog."""

from lutris_sgdb.catalog.lutris import LutrisCatalog

__all__ = ["LutrisCatalog"]
