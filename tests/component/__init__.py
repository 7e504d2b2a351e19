"""
Component tests for the storefront API

Requests go through the FastAPI routes, the service layer and an in-memory
database without mocking internal dependencies.
"""
