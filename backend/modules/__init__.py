"""
Feature modules for the Captains backend.

Each module is self-contained with its own:
- interfaces.py: Protocol definitions for the module's public API
- models.py: Pydantic models for data transfer
- service.py: Business logic implementation
- repository.py: Data access (where the module owns a collection)
- routes.py: FastAPI route handlers (where the module exposes endpoints)
- exceptions.py: Module-specific exceptions

Modules communicate through interfaces, not concrete implementations.
"""
