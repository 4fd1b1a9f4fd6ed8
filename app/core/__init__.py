"""
Core package: application-wide configuration.
"""
