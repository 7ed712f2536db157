"""Capability check applied before a connection may claim an address."""

from __future__ import annotations

from typing import Protocol


class AddressVerifier(Protocol):
    """Decide whether ``credential`` entitles a connection to ``claimed_address``."""

    def verify(self, claimed_address: str, credential: str | None) -> bool:
        ...


class AllowAnyAddress:
    """Accept every claim; connections are trusted to declare their own address."""

    def verify(self, claimed_address: str, credential: str | None) -> bool:
        return True


__all__ = ["AddressVerifier", "AllowAnyAddress"]
