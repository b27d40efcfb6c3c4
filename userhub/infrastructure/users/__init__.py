"""
Infrastructure adapters for the users bounded context.

Each adapter implements a domain port (ABC) and connects
to an external system, here a relational database.
"""
