"""
Application Package

Services orchestrating the domain analytics for external consumers.
"""
