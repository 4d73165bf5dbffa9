"""Checkout and profile resolvers for the storefront schema."""

__version__ = "0.1.0"
