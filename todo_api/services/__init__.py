"""
High-level use cases for the todo API.

Service modules orchestrate repositories to implement the business rules
(title required, partial updates, not-found handling). Routers call these
services instead of manipulating the JSON file directly.
"""
