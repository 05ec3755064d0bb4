"""
Classification of records into catalog views.
"""

from .classifier import CatalogPartition, Classifier

__all__ = ["CatalogPartition", "Classifier"]
