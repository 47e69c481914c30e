"""Registry mapping event tokens to edit actions."""

from __future__ import annotations

from typing import Dict, Iterator, Optional

from indent_engine.runtime.telemetry import record_event

from .models import ActionRef, Binding, ResolutionMatch


class KeymapConflictError(RuntimeError):
    """Raised when a token is already bound by a different binding."""

    def __init__(self, binding: Binding, existing: Binding):
        super().__init__(
            f"Binding '{binding.id}' conflicts with '{existing.id}' on token '{binding.token}'"
        )
        self.binding = binding
        self.existing = existing


class KeymapRegistry:
    """Holds the actions and at most one binding per token."""

    def __init__(self, *, logger_name: str = "indent_engine.keymaps") -> None:
        self._actions: Dict[str, ActionRef] = {}
        self._bindings: Dict[str, Binding] = {}
        self._by_token: Dict[str, str] = {}
        self._logger_name = logger_name

    def get_action(self, action_id: str) -> ActionRef:
        try:
            return self._actions[action_id]
        except KeyError as exc:
            raise KeyError(f"Action '{action_id}' is not registered") from exc

    def get_binding(self, binding_id: str) -> Binding:
        try:
            return self._bindings[binding_id]
        except KeyError as exc:
            raise KeyError(f"Binding '{binding_id}' is not registered") from exc

    def register_action(self, action: ActionRef, *, replace: bool = False) -> ActionRef:
        if not replace and action.id in self._actions:
            raise ValueError(f"Action '{action.id}' already registered")
        self._actions[action.id] = action
        return action

    def register_binding(self, binding: Binding, *, replace: bool = False) -> Binding:
        """Bind ``binding.token``; ``replace`` drops whatever held the token or id."""

        if binding.action_id not in self._actions:
            raise KeyError(
                f"Binding '{binding.id}' references unknown action '{binding.action_id}'"
            )
        holder_id = self._by_token.get(binding.token)
        if not replace:
            if holder_id is not None and holder_id != binding.id:
                raise KeymapConflictError(binding, self._bindings[holder_id])
            if binding.id in self._bindings:
                raise ValueError(f"Binding id '{binding.id}' already registered")
        else:
            if holder_id is not None:
                self._bindings.pop(holder_id, None)
            previous = self._bindings.pop(binding.id, None)
            if previous is not None:
                self._by_token.pop(previous.token, None)

        self._bindings[binding.id] = binding
        self._by_token[binding.token] = binding.id
        record_event(
            "keymaps.bound",
            level="debug",
            data={"binding": binding.id, "token": binding.token, "action": binding.action_id},
            logger_name=self._logger_name,
        )
        return binding

    def iter_bindings(self) -> Iterator[Binding]:
        yield from self._bindings.values()

    def tokens(self) -> tuple[str, ...]:
        return tuple(sorted(self._by_token))

    def resolve(self, token: str) -> Optional[ResolutionMatch]:
        binding_id = self._by_token.get(token.strip().lower())
        if binding_id is None:
            return None
        binding = self._bindings[binding_id]
        return ResolutionMatch(binding=binding, action=self.get_action(binding.action_id))


__all__ = ["KeymapRegistry", "KeymapConflictError"]
