"""Trie-based keymap resolution."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Literal, Optional, Sequence

from .models import ActionRef, Binding
from .registry import KeymapRegistry


@dataclass(slots=True)
class TrieNode:
    binding_id: Optional[str] = None
    children: Dict[str, "TrieNode"] = field(default_factory=dict)

    def child(self, token: str) -> "TrieNode":
        return self.children.setdefault(token, TrieNode())


@dataclass(frozen=True, slots=True)
class ResolutionMatch:
    """Resolved binding paired with its action."""

    binding: Binding
    action: ActionRef


@dataclass(frozen=True, slots=True)
class ResolutionResult:
    """``match`` when a binding fired, ``pending`` when the tokens are a
    strict prefix of some binding, ``miss`` otherwise."""

    status: Literal["match", "pending", "miss"]
    match: Optional[ResolutionMatch] = None
    next_expected: tuple[str, ...] = ()


class KeymapResolver:
    """Builds one trie per mode, rebuilt whenever the registry changes."""

    def __init__(self, registry: KeymapRegistry) -> None:
        self._registry = registry
        self._cache: Dict[str, tuple[int, TrieNode]] = {}

    @property
    def registry(self) -> KeymapRegistry:
        return self._registry

    def resolve(self, mode: str, tokens: Sequence[str]) -> ResolutionResult:
        node = self._ensure_trie(mode)
        for token in tokens:
            child = node.children.get(token)
            if child is None:
                return ResolutionResult(status="miss")
            node = child

        if node.binding_id is not None:
            binding = self._registry.get_binding(node.binding_id)
            action = self._registry.get_action(binding.action_id)
            return ResolutionResult(
                status="match", match=ResolutionMatch(binding=binding, action=action)
            )
        if node.children:
            return ResolutionResult(
                status="pending", next_expected=tuple(sorted(node.children))
            )
        return ResolutionResult(status="miss")

    def _ensure_trie(self, mode: str) -> TrieNode:
        revision = self._registry.revision()
        cached = self._cache.get(mode)
        if cached and cached[0] == revision:
            return cached[1]

        root = TrieNode()
        for binding in self._registry.iter_bindings(mode):
            node = root
            for token in binding.sequence.tokens:
                node = node.child(token)
            node.binding_id = binding.id
        self._cache[mode] = (revision, root)
        return root


__all__ = ["KeymapResolver", "ResolutionMatch", "ResolutionResult"]
