"""
Domain Package

Models, canonical enumerations and analytics services.
"""
