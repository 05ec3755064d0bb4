"""
Core infrastructure for the Asset Browser: configuration, errors, logging
and persistence helpers.
"""
