"""Readers for external catalog data."""

from timesheet_builder.readers.catalog_reader import CatalogError, CatalogReader

__all__ = ["CatalogError", "CatalogReader"]
