"""
Persistence adapters.

These modules encapsulate how employee records are stored and retrieved.
Services depend on RecordStore rather than touching the JSON file.
"""
