"""Provedor de identidade concreto (Firebase Auth via Identity Toolkit)."""

from .google_identity_client import GoogleIdentityClient

__all__ = ["GoogleIdentityClient"]
