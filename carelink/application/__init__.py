"""
Application Layer

This layer contains the use cases that orchestrate domain operations and
coordinate between repositories and external services.

The application layer is responsible for:
- Use case implementations
- Ownership checks before mutation
- Mapping aggregates to response DTOs
- Best-effort side effects (notifications)

Components:
- use_cases/: One class per operation, each returning a Result
- dtos/: Command and response models
- dispatch.py: Background dispatcher for side effects
- ports.py: Interfaces for external services
"""
