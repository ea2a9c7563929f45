"""Lightweight string templating utilities."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, MutableMapping

__all__ = [
    "TemplateRenderer",
    "TemplateRenderingError",
]


_PLACEHOLDER_PATTERN = re.compile(r"{{\s*(?P<expression>[^{}]+?)\s*}}")
_MISSING_POLICIES = frozenset({"keep", "empty", "error"})


class TemplateRenderingError(RuntimeError):
    """Raised when the renderer cannot evaluate a placeholder."""


def _lookup(context: Mapping[str, Any], dotted_path: str) -> Any:
    value: Any = context
    for segment in dotted_path.split("."):
        if isinstance(value, Mapping) and segment in value:
            value = value[segment]
        elif not isinstance(value, Mapping) and hasattr(value, segment):
            value = getattr(value, segment)
        else:
            raise KeyError(segment)
    return value


def _default_filters() -> dict[str, Callable[[Any], Any]]:
    return {
        "json": lambda value: json.dumps(value, ensure_ascii=False),
    }


@dataclass(slots=True)
class TemplateRenderer:
    """Render templates with ``{{ placeholder|filters }}`` expressions."""

    filters: MutableMapping[str, Callable[[Any], Any]] = field(default_factory=_default_filters)

    def render_string(
        self,
        template: str,
        context: Mapping[str, Any],
        *,
        missing: str = "keep",
    ) -> str:
        """Render ``template`` using ``context``.

        Parameters
        ----------
        template:
            The template string to evaluate.
        context:
            Mapping providing values for placeholders. Dotted keys walk nested
            mappings and attributes.
        missing:
            ``"keep"`` leaves an unresolved placeholder untouched, ``"empty"``
            replaces it with an empty string and ``"error"`` raises
            :class:`TemplateRenderingError`.
        """

        if missing not in _MISSING_POLICIES:
            raise ValueError("missing must be 'keep', 'empty', or 'error'")

        def substitute(match: re.Match[str]) -> str:
            key, *filter_names = (part.strip() for part in match.group("expression").split("|"))
            try:
                value = _lookup(context, key)
            except KeyError:
                if missing == "keep":
                    return match.group(0)
                if missing == "empty":
                    return ""
                raise TemplateRenderingError(f"missing value for '{key}'") from None

            for filter_name in filter_names:
                try:
                    filter_func = self.filters[filter_name]
                except KeyError as exc:
                    raise TemplateRenderingError(f"unknown filter '{filter_name}'") from exc
                value = filter_func(value)

            return str(value)

        return _PLACEHOLDER_PATTERN.sub(substitute, template)
