from __future__ import annotations

import codecs
import logging
import sys
from dataclasses import dataclass
from typing import Dict, Optional

from reversi_console.types import Side

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GlyphSet:
    key: str
    label: str
    dark: str
    light: str
    empty: str
    legal_move: str
    edition: str | None = None  # extra line shown in the intro and credits

    def disk(self, side: Side) -> str:
        return self.dark if side is Side.DARK else self.light


RENDERING_PROFILES: Dict[str, GlyphSet] = {
    "ascii": GlyphSet(
        key="ascii",
        label="Plain ASCII",
        dark="X",
        light="O",
        empty="-",
        legal_move=" ",
        edition="ASCII Edition",
    ),
    "symbols": GlyphSet(
        key="symbols",
        label="Unicode symbols",
        dark="●",
        light="○",
        empty="∙",
        legal_move="*",
    ),
}

DEFAULT_PROFILE = "symbols"
FALLBACK_PROFILE = "ascii"

_active: Optional[GlyphSet] = None


def get_profile(key: str) -> GlyphSet:
    try:
        return RENDERING_PROFILES[key]
    except KeyError as exc:
        raise ValueError(f"Unknown rendering profile '{key}'") from exc


def resolve_profile_key(encoding: str | None) -> str:
    """Pick the richest profile the output encoding can represent."""
    if not encoding:
        return FALLBACK_PROFILE
    try:
        codecs.lookup(encoding)
    except LookupError:
        return FALLBACK_PROFILE
    glyphs = RENDERING_PROFILES[DEFAULT_PROFILE]
    sample = glyphs.dark + glyphs.light + glyphs.empty + glyphs.legal_move
    try:
        sample.encode(encoding)
    except UnicodeEncodeError:
        return FALLBACK_PROFILE
    return DEFAULT_PROFILE


def configure(key: str | None = None) -> GlyphSet:
    """Set the process-wide rendering profile.

    With no key the profile is chosen from the encoding of standard output.
    """
    global _active
    if key is None:
        key = resolve_profile_key(getattr(sys.stdout, "encoding", None))
    _active = get_profile(key)
    logger.debug("Rendering profile set to %s", _active.key)
    return _active


def get_glyphs() -> GlyphSet:
    if _active is None:
        return configure()
    return _active
