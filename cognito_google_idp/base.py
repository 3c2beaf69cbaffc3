from __future__ import annotations

from typing import Mapping, Optional, Protocol

import pulumi

from .attributes import AttributeMapping, configure_attribute_mapping


class ProviderSupport(Protocol):
    """Shared behaviour every user pool identity provider component relies on."""

    def map_attributes(self) -> Optional[Mapping[str, str]]:
        ...

    def resource_name_from(self, ref: pulumi.Input[str]) -> pulumi.Output[str]:
        ...


class StandardProviderSupport:
    """Default :class:`ProviderSupport` backed by an optional attribute mapping."""

    def __init__(self, attribute_mapping: Optional[AttributeMapping] = None) -> None:
        self._attribute_mapping = attribute_mapping

    def map_attributes(self) -> Optional[Mapping[str, str]]:
        return configure_attribute_mapping(self._attribute_mapping)

    def resource_name_from(self, ref: pulumi.Input[str]) -> pulumi.Output[str]:
        # Identity provider ids have the form "<user_pool_id>:<provider_name>".
        return pulumi.Output.from_input(ref).apply(provider_name_from_id)


def provider_name_from_id(resource_id: str) -> str:
    _, sep, name = resource_id.partition(":")
    return name if sep else resource_id
