"""
Couche infrastructure (adapters).

Implementations concretes des ports definis dans core/ports.
"""
