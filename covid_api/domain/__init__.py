"""Domain layer - core business logic and interfaces.

This layer contains:
- Domain entities (Country, Province, District)
- Repository interfaces
- The domain error taxonomy
"""
