"""
Data Infrastructure Module

Concrete data provider implementations.
"""

from .json_data_provider import JsonDataProvider

__all__ = ["JsonDataProvider"]
