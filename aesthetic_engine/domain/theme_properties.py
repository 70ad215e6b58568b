"""Immutable visual vocabulary attached to an aesthetic."""

from __future__ import annotations

import re
from typing import Any, Iterable, Mapping

from aesthetic_engine.domain.exceptions import InvalidThemePropertiesError

_HEX_COLOR = re.compile(r"#(?:[0-9a-f]{3}|[0-9a-f]{6})", re.IGNORECASE)
_NAMED_COLOR = re.compile(r"[a-z-]+", re.IGNORECASE)


def _is_valid_color(color: Any) -> bool:
    if not isinstance(color, str):
        return False
    return bool(_HEX_COLOR.fullmatch(color) or _NAMED_COLOR.fullmatch(color))


def _as_tuple(field: str, values: Iterable[str] | None) -> tuple[str, ...]:
    if values is None:
        return ()
    if isinstance(values, str):
        raise InvalidThemePropertiesError(
            f"Theme {field} must be a list of strings, not a single string",
            field=field,
            value=values,
        )
    items = tuple(values)
    for item in items:
        if not isinstance(item, str):
            raise InvalidThemePropertiesError(
                f"Theme {field} must contain only strings, got {item!r}",
                field=field,
                value=item,
            )
    return items


class ThemeProperties:
    """
    Validated colors, style, mood, patterns, textures and keywords of an aesthetic.

    Instances never change after construction. List accessors hand out fresh
    copies, so callers may mutate what they receive.
    """

    __slots__ = ("_colors", "_style", "_mood", "_patterns", "_textures", "_keywords")

    def __init__(
        self,
        colors: Iterable[str],
        style: str,
        mood: str | None = None,
        patterns: Iterable[str] | None = None,
        textures: Iterable[str] | None = None,
        keywords: Iterable[str] | None = None,
    ) -> None:
        colors_tuple = _as_tuple("colors", colors)
        if not colors_tuple:
            raise InvalidThemePropertiesError(
                "Theme must have at least one color",
                field="colors",
                value=list(colors_tuple),
            )
        for color in colors_tuple:
            if not _is_valid_color(color):
                raise InvalidThemePropertiesError(
                    f"Invalid color format: {color!r}. "
                    "Must be hex (#fff or #ffffff) or named color (red, neon-blue)",
                    field="colors",
                    value=color,
                )

        if not isinstance(style, str) or not style.strip():
            raise InvalidThemePropertiesError("Theme must have a style", field="style", value=style)

        self._colors = colors_tuple
        self._style = style
        self._mood = mood
        self._patterns = _as_tuple("patterns", patterns)
        self._textures = _as_tuple("textures", textures)
        self._keywords = _as_tuple("keywords", keywords)

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "ThemeProperties":
        """Build theme properties from a serialised mapping such as ``to_dict`` output."""

        return cls(
            colors=payload.get("colors") or (),
            style=payload.get("style", ""),
            mood=payload.get("mood"),
            patterns=payload.get("patterns"),
            textures=payload.get("textures"),
            keywords=payload.get("keywords"),
        )

    @property
    def colors(self) -> list[str]:
        return list(self._colors)

    @property
    def style(self) -> str:
        return self._style

    @property
    def mood(self) -> str | None:
        return self._mood

    @property
    def patterns(self) -> list[str]:
        return list(self._patterns)

    @property
    def textures(self) -> list[str]:
        return list(self._textures)

    @property
    def keywords(self) -> list[str]:
        return list(self._keywords)

    def has_color(self, color: str) -> bool:
        """Case-insensitive exact match against the declared colors."""

        candidate = color.lower()
        return any(stored.lower() == candidate for stored in self._colors)

    def has_keyword(self, keyword: str) -> bool:
        """Case-insensitive exact match against the declared keywords."""

        candidate = keyword.lower()
        return any(stored.lower() == candidate for stored in self._keywords)

    def to_dict(self) -> dict[str, Any]:
        """Serialise every field, including empty defaults for omitted lists."""

        return {
            "colors": self.colors,
            "style": self.style,
            "mood": self.mood,
            "patterns": self.patterns,
            "textures": self.textures,
            "keywords": self.keywords,
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ThemeProperties):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __hash__(self) -> int:
        return hash(
            (self._colors, self._style, self._mood, self._patterns, self._textures, self._keywords)
        )

    def __repr__(self) -> str:
        return f"ThemeProperties(style={self._style!r}, colors={list(self._colors)!r})"
