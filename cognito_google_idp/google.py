"""
Google identity provider for Cognito user pools.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Mapping, Optional, Sequence

import pulumi
import pulumi_aws as aws

from .attributes import AttributeMapping
from .base import ProviderSupport, StandardProviderSupport
from .config import ConfigError
from .secrets import SecretValue
from .user_pool import UserPoolReference

LOGGER = logging.getLogger(__name__)

GOOGLE_PROVIDER = "Google"
DEFAULT_SCOPES = ("profile",)


@dataclass
class UserPoolIdentityProviderGoogleArgs:
    user_pool: UserPoolReference
    client_id: str
    client_secret: Optional[str] = None
    client_secret_value: Optional[SecretValue] = None
    scopes: Optional[Sequence[str]] = None
    attribute_mapping: Optional[AttributeMapping] = None


@dataclass(frozen=True)
class ProviderDescriptor:
    """Inputs for a single ``aws.cognito.IdentityProvider`` resource."""

    user_pool_id: pulumi.Input[str]
    provider_name: str
    provider_type: str
    provider_details: Mapping[str, Any]
    attribute_mapping: Optional[Mapping[str, str]] = None


def build_google_descriptor(
    args: UserPoolIdentityProviderGoogleArgs,
    support: Optional[ProviderSupport] = None,
) -> ProviderDescriptor:
    """Validate ``args`` and translate them into a :class:`ProviderDescriptor`.

    Raises :class:`ConfigError` when the client id is blank or neither a
    non-blank ``client_secret`` nor a ``client_secret_value`` is supplied.
    ``client_secret_value`` takes precedence when both are set.
    """
    if not args.client_id or not args.client_id.strip():
        raise ConfigError("Client Id must be configured.")

    if (not args.client_secret or not args.client_secret.strip()) and args.client_secret_value is None:
        raise ConfigError("Client Secret or Client Secret Value must be configured.")

    if support is None:
        support = StandardProviderSupport(args.attribute_mapping)

    scopes = list(args.scopes) if args.scopes is not None else list(DEFAULT_SCOPES)
    if args.client_secret_value is not None:
        client_secret = args.client_secret_value.reveal()
    else:
        client_secret = args.client_secret

    details = {
        "client_id": args.client_id,
        "client_secret": client_secret,
        "authorize_scopes": " ".join(scopes),
    }
    attribute_mapping = support.map_attributes()

    return ProviderDescriptor(
        user_pool_id=args.user_pool.user_pool_id,
        # Cognito requires the name to be "Google" when the type is "Google".
        provider_name=GOOGLE_PROVIDER,
        provider_type=GOOGLE_PROVIDER,
        provider_details=MappingProxyType(details),
        attribute_mapping=MappingProxyType(dict(attribute_mapping)) if attribute_mapping else None,
    )


class UserPoolIdentityProviderGoogle(pulumi.ComponentResource):
    """Registers Google as a federated identity provider on a Cognito user pool."""

    provider_name: pulumi.Output[str]

    def __init__(
        self,
        name: str,
        args: UserPoolIdentityProviderGoogleArgs,
        support: Optional[ProviderSupport] = None,
        opts: Optional[pulumi.ResourceOptions] = None,
    ) -> None:
        if support is None:
            support = StandardProviderSupport(args.attribute_mapping)
        descriptor = build_google_descriptor(args, support)

        super().__init__("cognito:idp:UserPoolIdentityProviderGoogle", name, None, opts)

        LOGGER.info(
            "Configuring %s identity provider %s with scopes '%s'",
            descriptor.provider_type,
            name,
            descriptor.provider_details["authorize_scopes"],
        )

        self.resource = aws.cognito.IdentityProvider(
            f"{name}-resource",
            user_pool_id=descriptor.user_pool_id,
            provider_name=descriptor.provider_name,
            provider_type=descriptor.provider_type,
            provider_details=dict(descriptor.provider_details),
            attribute_mapping=dict(descriptor.attribute_mapping) if descriptor.attribute_mapping else None,
            opts=pulumi.ResourceOptions(
                parent=self,
                additional_secret_outputs=["providerDetails"],
            ),
        )

        self.provider_name = support.resource_name_from(self.resource.id)
        args.user_pool.register_identity_provider(self)

        self.register_outputs({"provider_name": self.provider_name})
