"""
Userboard - user accounts, login analytics and dashboard aggregates.
"""
__version__ = "0.1.0"
