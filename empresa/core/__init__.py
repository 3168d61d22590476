"""
Core utilities shared across the Empresa package.

This package hosts configuration helpers (store and export paths, feature
flags) and the logging setup used by the app and the scripts.
"""
