"""
HTTP boundary for the users bounded context.

Translates wire requests into UserService calls and domain
outcomes into JSON responses.
"""
