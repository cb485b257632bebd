"""
Core utilities shared across the printlog service.

Configuration, logging and the error taxonomy live here so that
repositories/services never read os.environ or FastAPI primitives directly.
"""
