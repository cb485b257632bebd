"""
High-level use cases for the printlog API.

Routers call these services instead of reading or writing the record document
directly. The RecordStore is the only writer of that document.
"""
