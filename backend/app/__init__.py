"""Application package for the groups backend.

This package exposes the store, service and model modules used by the
FastAPI application. It is intentionally lightweight; individual
modules contain the concrete implementations and documentation.
"""
