"""Pulumi component for federating Cognito user pools with Google."""

from .attributes import AttributeMapping, ProviderAttribute, configure_attribute_mapping
from .base import ProviderSupport, StandardProviderSupport
from .config import ConfigError, GoogleProviderSettings, load_settings
from .google import (
    ProviderDescriptor,
    UserPoolIdentityProviderGoogle,
    UserPoolIdentityProviderGoogleArgs,
    build_google_descriptor,
)
from .secrets import SecretValue
from .user_pool import UserPoolReference

__all__ = [
    "AttributeMapping",
    "ConfigError",
    "GoogleProviderSettings",
    "ProviderAttribute",
    "ProviderDescriptor",
    "ProviderSupport",
    "SecretValue",
    "StandardProviderSupport",
    "UserPoolIdentityProviderGoogle",
    "UserPoolIdentityProviderGoogleArgs",
    "UserPoolReference",
    "build_google_descriptor",
    "configure_attribute_mapping",
    "load_settings",
]
