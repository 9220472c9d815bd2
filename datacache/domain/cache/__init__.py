"""
Cache Domain Module

Entities, value objects, options and interfaces for cache management.
"""
