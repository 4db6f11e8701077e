"""
Domain Layer

This layer contains the business rules of the care platform: aggregates,
value objects, domain events and repository interfaces. It has no knowledge
of persistence, transport or external services.

Components:
- shared/: Result type, error hierarchy and base classes
- review/: Institution reviews written by guardians
- counsel_request/: Counsel requests and their routing to institutions
- counsel_report/: Per-session counsel reports and their review lifecycle
- child/: Children and their parentage
- user/: User accounts, credentials and roles
- institution/: Care facilities
"""
