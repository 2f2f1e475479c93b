"""
Command-line presentation layer.
"""
