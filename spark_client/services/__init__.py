"""
Services.

Network adapters, wallet management and notifications.
"""
