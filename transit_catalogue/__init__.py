"""Catalogue of bus stops and routes with route statistics and stop queries."""

__version__ = "0.1.0"
__all__ = ["__version__"]