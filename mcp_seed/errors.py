"""Errors raised at the boundaries: fetching the catalog and writing the seed."""


class SeedError(Exception):
    """Base class for every error the seed generator raises."""


class CatalogSourceError(SeedError):
    """The catalog could not be obtained (docker CLI, file or URL)."""


class CatalogDecodeError(SeedError):
    """The catalog was obtained but could not be decoded."""


class SeedWriteError(SeedError):
    """The seed file could not be encoded or written."""
