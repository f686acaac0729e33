"""SceneWriter utilities module."""

from scenewriter.utils.screenplay import ScreenplayUtils

__all__ = ["ScreenplayUtils"]
