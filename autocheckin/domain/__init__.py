"""Domain layer - core business logic and interfaces.

This layer contains:
- Domain entities (the reservation aggregate)
- The ingestion failure taxonomy
- Collaborator interfaces (retrieval, storage, job scheduling, notification)
"""
