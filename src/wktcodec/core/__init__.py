"""
Core codec functionality.
"""
