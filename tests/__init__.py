"""
Test suite for the OOP domain model.

Architecture: Hexagonal (Ports & Adapters)
Testing Strategy:
- Unit tests: Domain entities, one module per family
- Use case tests: Portfolio summary over mixed variants
- Adapter tests: Overdraft notifiers
- Lifecycle tests: xunit hooks, fixtures and the lifecycle plugin
"""
