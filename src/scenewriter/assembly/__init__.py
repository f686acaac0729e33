"""Screenplay assembly: scene ordering, slug lines, cover page, bundles."""

from __future__ import annotations

from .assembler import (
    AssembledScript,
    CoverPage,
    DocumentAssembler,
    episode_label,
    order_scenes,
    season_label,
)
from .bundle import BundleSelector, load_bundle, parse_bundle

__all__ = [
    "AssembledScript",
    "BundleSelector",
    "CoverPage",
    "DocumentAssembler",
    "episode_label",
    "load_bundle",
    "order_scenes",
    "parse_bundle",
    "season_label",
]
