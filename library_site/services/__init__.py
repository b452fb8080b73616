"""
Services Package

Business rules between the API endpoints and the stores.
"""
