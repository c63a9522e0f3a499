"""
Feature modules for the PrismWorlds session layer.

Each module is self-contained with its own:
- interfaces.py: Protocol definitions for the module's public API
- models.py: Pydantic models for data transfer
- store.py / client.py: Implementations of those interfaces
- exceptions.py: Module-specific exceptions

Modules communicate through interfaces, not concrete implementations.
"""
