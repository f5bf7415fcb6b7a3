"""Name -> Builtin registry installed into a root environment at startup."""

from __future__ import annotations

import logging
from typing import Callable

from tulip import LispValue, NativeFn
from tulip.types.builtin_fn import Builtin
from tulip.types.environment import Environment

logger = logging.getLogger(__name__)


class BuiltinRegistry:
    def __init__(self):
        self._builtins: dict[str, Builtin] = {}
        self._constants: dict[str, LispValue] = {}

    def add(self, name: str, fn: NativeFn) -> Builtin:
        builtin = Builtin(name, fn)
        self._builtins[name] = builtin
        return builtin

    def register(self, name: str) -> Callable[[NativeFn], NativeFn]:
        """Decorator form of `add`."""
        def decorator(fn: NativeFn) -> NativeFn:
            self.add(name, fn)
            return fn
        return decorator

    def constant(self, name: str, value: LispValue) -> None:
        self._constants[name] = value

    def install(self, env: Environment) -> Environment:
        """Bind every constant and builtin into `env` (normally the root scope)."""
        for name, value in self._constants.items():
            env.set(name, value)
        for name, builtin in self._builtins.items():
            env.set(name, builtin)
        logger.debug(
            "Installed %d builtins and %d constants", len(self._builtins), len(self._constants)
        )
        return env

