"""
Device Inventory Application — root package.

This package contains the FastAPI app entry point (main.py), API routes,
domain models, MongoDB infrastructure, and the device seeding script.
"""
