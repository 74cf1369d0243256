"""
pilothub REST API.

Usage::

    uvicorn pilothub.api:create_app --factory --port 5000
"""

from pilothub.api.app import create_app

__all__ = ["create_app"]
