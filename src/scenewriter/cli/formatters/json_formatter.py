"""JSON output for the CLI."""

from __future__ import annotations

import json
from dataclasses import asdict, is_dataclass
from typing import Any


class JsonFormatter:
    """Render command results and errors as indented JSON."""

    indent = 2

    def _dump(self, payload: Any) -> str:
        return json.dumps(payload, default=str, indent=self.indent)

    def format(self, data: Any) -> str:
        """Render models, dataclasses, and plain containers.

        Args:
            data: Value to render; scalars are wrapped as ``{"value": ...}``

        Returns:
            JSON text
        """
        if hasattr(data, "model_dump"):
            data = data.model_dump(mode="json")
        elif is_dataclass(data) and not isinstance(data, type):
            data = asdict(data)
        elif not isinstance(data, dict | list | tuple):
            data = {"value": data}
        return self._dump(data)

    def format_success(self, message: str, data: Any = None) -> str:
        """Render ``{"success": true, "message": ..., "data": ...}``."""
        payload: dict[str, Any] = {"success": True, "message": message}
        if data is not None:
            payload["data"] = data
        return self._dump(payload)

    def format_error_response(self, error: str | Exception, code: int = 1) -> str:
        """Render ``{"success": false, "error": ..., "code": ...}``."""
        return self._dump({"success": False, "error": str(error), "code": code})
