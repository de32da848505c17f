"""Application – per-invocation Context."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from bolt_errors.kernel.errors import ContextMissingPropertyError, InvalidCustomPropertyError

#: Keys the framework populates itself; custom properties may not shadow them.
RESERVED_KEYS: frozenset[str] = frozenset({
    "bot_token",
    "user_token",
    "bot_id",
    "bot_user_id",
    "team_id",
    "enterprise_id",
    "is_enterprise_install",
    "retry_num",
    "retry_reason",
    "function_bot_access_token",
    "function_execution_id",
    "function_inputs",
})


class Context(dict[str, Any]):
    """Mutable mapping shared by the middleware and listeners of one event."""

    def require(self, key: str, message: str | None = None) -> Any:
        """Return ``self[key]`` or raise :class:`ContextMissingPropertyError`.

        A key bound to ``None`` counts as missing.
        """
        value = self.get(key)
        if value is None:
            raise ContextMissingPropertyError(
                key, message or f"The context is missing the required property '{key}'"
            )
        return value

    def merge_custom_properties(self, custom: Mapping[str, Any]) -> None:
        """Copy *custom* into the context.

        Raises :class:`InvalidCustomPropertyError` without merging anything
        when a key is reserved or already present.
        """
        overlap = sorted(k for k in custom if k in RESERVED_KEYS or k in self)
        if overlap:
            raise InvalidCustomPropertyError(
                f"custom properties cannot override the following reserved keys: {', '.join(overlap)}"
            )
        self.update(custom)


__all__ = ["RESERVED_KEYS", "Context"]
