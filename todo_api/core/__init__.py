"""
Core utilities shared across the todo API.

This package hosts configuration helpers (env vars, paths) and cross-cutting
concerns such as logging. Routers, services and repositories depend on these
primitives instead of reading the environment themselves.
"""
