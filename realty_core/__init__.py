"""Realty Core: REST API for real-estate transaction records."""
