"""
High-level use cases for Empresa.

Routers and scripts call these services instead of manipulating the JSON
store directly.
"""
