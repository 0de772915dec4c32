"""
Feature modules for Identity Bridge backend.

Each module is self-contained with its own:
- interfaces.py: Protocol definitions for the module's public API
- models.py: Pydantic models for data transfer
- service.py: Implementation over the external platform (or store)
- exceptions.py: Module-specific exceptions, where the module has any

Modules communicate through interfaces, not concrete implementations.
"""
