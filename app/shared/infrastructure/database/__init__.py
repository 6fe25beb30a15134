"""
Database session infrastructure shared by all module repositories.
"""
