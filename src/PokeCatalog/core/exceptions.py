"""Exception hierarchy for catalog loading and access."""

from __future__ import annotations


class PokeCatalogError(Exception):
    """Base error for PokeCatalog."""


class CatalogLoadError(PokeCatalogError):
    """Raised when the bulk record fetch fails as a whole."""


class CatalogNotLoadedError(PokeCatalogError):
    """Raised when searching a catalog that has never been loaded."""


class CatalogBusyError(PokeCatalogError):
    """Raised when the catalog is asked to load or search during a load."""
