"""
Users bounded context, domain layer.

This module contains all domain logic for user records:
- The User entity
- The storage port (UserRepository)
- The user domain service (create/update disambiguation, existence checks)
"""
