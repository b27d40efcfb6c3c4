"""
Security middleware package: secure response headers and rate limiting.
"""
