"""
Console entry points.
"""
