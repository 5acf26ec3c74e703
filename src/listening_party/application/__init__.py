"""
Application Layer

Use cases orchestrating domain objects and infrastructure ports.

Structure:
- commands/: write operations (StartPartyCommand)
- queries/: read operations (GetPartyStatusQuery)
- services/: announcement detection and album fetching
- interfaces/: port interfaces for infrastructure adapters
"""
