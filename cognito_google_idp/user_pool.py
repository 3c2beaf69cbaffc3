from __future__ import annotations

import logging
from typing import List, Tuple

import pulumi
import pulumi_aws as aws

LOGGER = logging.getLogger(__name__)


class UserPoolReference:
    """The Cognito user pool that identity provider components attach to."""

    def __init__(self, user_pool_id: pulumi.Input[str]) -> None:
        self.user_pool_id = user_pool_id
        self._identity_providers: List[object] = []

    @classmethod
    def from_user_pool(cls, user_pool: aws.cognito.UserPool) -> "UserPoolReference":
        return cls(user_pool.id)

    @property
    def identity_providers(self) -> Tuple[object, ...]:
        return tuple(self._identity_providers)

    @property
    def provider_names(self) -> List[pulumi.Output[str]]:
        """Names to feed into a user pool client's ``supported_identity_providers``."""
        return [provider.provider_name for provider in self._identity_providers]

    def register_identity_provider(self, provider) -> None:
        if provider in self._identity_providers:
            return
        self._identity_providers.append(provider)
        LOGGER.debug("Registered identity provider %s", getattr(provider, "_name", provider))
