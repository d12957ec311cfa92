"""
Feature modules for the catalog accounts core.

Each module is self-contained with its own:
- interfaces.py: Protocol definitions for the module's public API
- models.py: Pydantic models for stored and derived records
- repository.py: MongoDB-backed implementation
- exceptions.py: Module-specific exceptions

Modules do not call each other; both sit on the shared database handle.
"""
