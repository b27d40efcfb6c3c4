"""
UserHub: user record management service.

Application package root. This is a small service using
hexagonal architecture (ports & adapters).

Bounded contexts:
    - users: Creation, retrieval, update, and deletion of user records.

Layers:
    - domain: Pure business logic, entities, ports (ABCs), errors.
    - infrastructure: Adapters (SQL storage) implementing domain ports.
    - interfaces: FastAPI routers, Pydantic schemas, DTO mapping.
    - shared: Cross-cutting concerns (errors, security, logging).
"""
