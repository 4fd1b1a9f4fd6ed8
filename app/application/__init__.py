"""
Application layer package.

Contains use cases that orchestrate domain logic.
Each use case is a class with one public entry point and
receives every port through its constructor.
"""
