"""Document — the session being assembled by the parser."""

from __future__ import annotations

from dataclasses import dataclass, field

from .grammar import DEFAULT_GRAMMAR, Grammar
from .values import Section


@dataclass
class Document:
    """Holds the session scope, its media sections and the current scope."""

    grammar: Grammar = DEFAULT_GRAMMAR
    session: Section = field(default_factory=dict)
    media: list[Section] = field(default_factory=list)

    def __post_init__(self) -> None:
        # Not a dataclass field: index into media, None at session level
        self._current: int | None = None

    # -- Scope ----------------------------------------------------------

    @property
    def scope(self) -> Section:
        """The dict the next line is written into."""
        if self._current is None:
            return self.session
        return self.media[self._current]

    @property
    def in_media(self) -> bool:
        return self._current is not None

    def open_media(self) -> Section:
        """Start a new media section and make it the current scope."""
        section: Section = {key: [] for key in self.grammar.media_placeholders}
        self.media.append(section)
        self._current = len(self.media) - 1
        return section

    # -- Output ---------------------------------------------------------

    def finish(self) -> Section:
        """Link the media list into the session and hand the session over."""
        self.session[self.grammar.media_key] = self.media
        return self.session
