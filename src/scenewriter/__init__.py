"""SceneWriter: typeset screenplays from marked-up scene drafts.

Scenes are written as free text with a small dialogue markup::

    He enters.

    @:JOE
    Hi.
    (smiles)
    :@

and exported, in timeline order, as a formatted screenplay document with
slug lines, character cues, a cover page and running page numbers.
"""

from .assembly import BundleSelector, DocumentAssembler, load_bundle
from .config import SceneWriterSettings, get_logger, get_settings
from .export import ExportResult, ScriptExporter, build_filename, create_script_docx
from .layout import HouseStyle, LayoutEngine
from .models import EpisodeLike, ExportRequest, SceneLike, SeasonLike
from .parser import SceneContentParser

__version__ = "0.1.0"

__all__ = [
    "BundleSelector",
    "DocumentAssembler",
    "EpisodeLike",
    "ExportRequest",
    "ExportResult",
    "HouseStyle",
    "LayoutEngine",
    "SceneContentParser",
    "SceneLike",
    "SceneWriterSettings",
    "ScriptExporter",
    "SeasonLike",
    "__version__",
    "build_filename",
    "create_script_docx",
    "get_logger",
    "get_settings",
    "load_bundle",
]
