"""
HTTP interface for the ordering bounded context.
"""
