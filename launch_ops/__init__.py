"""
Launch operations dashboard backend.
"""
