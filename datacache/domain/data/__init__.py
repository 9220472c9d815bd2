"""
Data Domain Module

Envelope, query models and the provider contract for data sources.
"""
