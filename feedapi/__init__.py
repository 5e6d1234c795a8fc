"""
Feed API - CRUD service for feed posts.
"""
__version__ = "1.0.0"
