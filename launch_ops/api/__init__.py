"""
launch_ops/api package marker.
"""
