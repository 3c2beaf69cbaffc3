from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Dict, Mapping, Optional


@dataclass(frozen=True)
class ProviderAttribute:
    """An attribute name as exposed by the external identity provider."""

    attribute_name: str

    @classmethod
    def other(cls, attribute_name: str) -> "ProviderAttribute":
        return cls(attribute_name)


# Attribute names published by Google's People API.
ProviderAttribute.GOOGLE_BIRTHDAYS = ProviderAttribute("birthdays")
ProviderAttribute.GOOGLE_EMAIL = ProviderAttribute("email")
ProviderAttribute.GOOGLE_EMAIL_VERIFIED = ProviderAttribute("email_verified")
ProviderAttribute.GOOGLE_FAMILY_NAME = ProviderAttribute("family_name")
ProviderAttribute.GOOGLE_GENDER = ProviderAttribute("gender")
ProviderAttribute.GOOGLE_GIVEN_NAME = ProviderAttribute("given_name")
ProviderAttribute.GOOGLE_NAMES = ProviderAttribute("names")
ProviderAttribute.GOOGLE_PHONE_NUMBERS = ProviderAttribute("phoneNumbers")
ProviderAttribute.GOOGLE_PICTURE = ProviderAttribute("picture")


STANDARD_ATTRIBUTE_NAMES: Dict[str, str] = {
    "address": "address",
    "birthdate": "birthdate",
    "email": "email",
    "email_verified": "email_verified",
    "family_name": "family_name",
    "gender": "gender",
    "given_name": "given_name",
    "locale": "locale",
    "middle_name": "middle_name",
    "fullname": "name",
    "nickname": "nickname",
    "phone_number": "phone_number",
    "profile_picture": "picture",
    "preferred_username": "preferred_username",
    "profile_page": "profile",
    "timezone": "zoneinfo",
    "last_update_time": "updated_at",
    "website": "website",
}
"""Field name on :class:`AttributeMapping` -> user pool attribute name."""


@dataclass(frozen=True)
class AttributeMapping:
    """Maps user pool attributes to attributes of the external provider."""

    address: Optional[ProviderAttribute] = None
    birthdate: Optional[ProviderAttribute] = None
    email: Optional[ProviderAttribute] = None
    email_verified: Optional[ProviderAttribute] = None
    family_name: Optional[ProviderAttribute] = None
    gender: Optional[ProviderAttribute] = None
    given_name: Optional[ProviderAttribute] = None
    locale: Optional[ProviderAttribute] = None
    middle_name: Optional[ProviderAttribute] = None
    fullname: Optional[ProviderAttribute] = None
    nickname: Optional[ProviderAttribute] = None
    phone_number: Optional[ProviderAttribute] = None
    profile_picture: Optional[ProviderAttribute] = None
    preferred_username: Optional[ProviderAttribute] = None
    profile_page: Optional[ProviderAttribute] = None
    timezone: Optional[ProviderAttribute] = None
    last_update_time: Optional[ProviderAttribute] = None
    website: Optional[ProviderAttribute] = None
    custom: Mapping[str, ProviderAttribute] = field(default_factory=dict)


def configure_attribute_mapping(mapping: Optional[AttributeMapping]) -> Optional[Dict[str, str]]:
    """Translate an :class:`AttributeMapping` into the resource's ``attributeMapping`` input.

    Returns ``None`` when nothing is mapped so the input is left unset.
    """
    if mapping is None:
        return None

    result: Dict[str, str] = {}
    for item in fields(mapping):
        if item.name == "custom":
            continue
        attribute = getattr(mapping, item.name)
        if attribute is not None:
            result[STANDARD_ATTRIBUTE_NAMES[item.name]] = attribute.attribute_name

    for key, attribute in (mapping.custom or {}).items():
        result[key] = attribute.attribute_name

    return result or None
