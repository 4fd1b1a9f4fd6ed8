"""
Domain layer package.

Contains pure business logic: entities, domain services,
port interfaces and errors. No framework imports, no IO.
"""
