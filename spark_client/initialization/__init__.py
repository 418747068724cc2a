"""
Client initialization.
"""
