"""
Service layer abstraction.

Each service encapsulates business logic for a domain and receives
the store it works against at construction time, so handlers never
touch persistence directly.
"""
