"""
HTTP API for the COB runner scheduler.
"""
