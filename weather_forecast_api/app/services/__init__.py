"""
Service layer.

Services hold the business rules and talk to storage only through
repositories, so route handlers never touch SQL.
"""
