"""
Data access models for customers and reservations.
"""
