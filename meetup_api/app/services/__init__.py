"""
Service layer.

Each service encapsulates business logic for a domain and receives its
persistence handle from the caller, so API handlers never touch the
database directly.
"""
