"""
Controllers package.

Framework-agnostic request handlers invoked by the API routes.
"""

from src.api.controllers.signup import SignUpController, SignUpRequest

__all__ = ["SignUpController", "SignUpRequest"]
