"""
Infrastructure Layer

This layer contains implementations of technical concerns and external
integrations. It provides concrete implementations of interfaces defined
in the domain and application layers.

Components:
- database/: SQLModel tables, mappers and repository implementations
- security/: Password hashing
- external/: HTTP client for the notification service
"""
