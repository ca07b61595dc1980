"""
launch_ops/pipelines package marker.
"""
