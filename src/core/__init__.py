"""
Core domain models.

This module contains immutable value holders that are independent
of any external systems.
"""
