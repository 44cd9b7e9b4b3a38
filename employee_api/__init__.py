"""
Employee API.
FastAPI service exposing employee records stored in MongoDB.
"""

__version__ = "1.0.0"
