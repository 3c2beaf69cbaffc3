from __future__ import annotations

import os
from typing import Optional

import pulumi


class SecretValue:
    """Opaque holder for sensitive strings such as OAuth client secrets.

    The wrapped value is only handed out through :meth:`reveal`, which the
    provider component calls once while building its resource inputs. Values
    coming from Pulumi secrets stay wrapped in their ``Output`` so they remain
    encrypted in the stack state.
    """

    __slots__ = ("_value", "_source")

    def __init__(self, value: pulumi.Input[str], source: str = "value") -> None:
        if value is None:
            raise ValueError("SecretValue requires a value")
        self._value = value
        self._source = source

    @classmethod
    def unsafe_plain_text(cls, value: str) -> "SecretValue":
        """Wrap a literal string. The value ends up in the program source."""
        return cls(value, source="plaintext")

    @classmethod
    def from_output(cls, output: pulumi.Output) -> "SecretValue":
        return cls(output, source="output")

    @classmethod
    def from_config(cls, config: pulumi.Config, key: str) -> "SecretValue":
        return cls(config.require_secret(key), source=f"config:{key}")

    @classmethod
    def from_env(cls, name: str, default: Optional[str] = None) -> "SecretValue":
        value = os.environ.get(name, default)
        if value is None:
            raise KeyError(f"Environment variable {name} is not set")
        return cls(value, source=f"env:{name}")

    @property
    def source(self) -> str:
        return self._source

    def reveal(self) -> pulumi.Input[str]:
        return self._value

    def __repr__(self) -> str:
        return f"SecretValue(source={self._source!r}, value='****')"

    __str__ = __repr__
