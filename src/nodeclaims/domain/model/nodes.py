"""Node records and the claim events that reset their reward clock."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TypeAlias

NodeKey: TypeAlias = tuple[str, int]


@dataclass(frozen=True, slots=True, kw_only=True)
class NodeRecord:
    """A node as created on-chain, with its effective last claim time.

    ``created_at`` doubles as the node's identity within its owner; two nodes
    created by one owner in the same second share a key.
    """

    owner: str
    name: str
    created_at: int
    last_claim: int
    had_claim: bool = False

    @classmethod
    def created(cls, *, owner: str, name: str, created_at: int) -> NodeRecord:
        return cls(owner=owner, name=name, created_at=created_at, last_claim=created_at)

    @property
    def key(self) -> NodeKey:
        return (self.owner, self.created_at)

    def claimed(self, at: int) -> NodeRecord:
        """Return a copy whose reward clock was last reset at ``at``."""

        return replace(self, last_claim=at, had_claim=True)


@dataclass(frozen=True, slots=True, kw_only=True)
class ClaimSingleEvent:
    owner: str
    target_created_at: int
    claimed_at: int

    @property
    def key(self) -> NodeKey:
        return (self.owner, self.target_created_at)


@dataclass(frozen=True, slots=True, kw_only=True)
class ClaimAllEvent:
    owner: str
    claimed_at: int
