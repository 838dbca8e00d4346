"""Table descriptor loader for YAML and JSON input."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any

from pydantic import ValidationError
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from dbfschema.models.table import Table

# ---------------------------------------------------------------------------
# Safety limits
# ---------------------------------------------------------------------------

_MAX_DOCUMENT_SIZE = 1_000_000  # 1M characters
_MAX_DEPTH = 10

# Regex to detect YAML anchor definitions (&name).
# Matches & at line start or after whitespace/sequence indicators, followed by
# an anchor name, but NOT inside quoted strings (good-enough heuristic).
_ANCHOR_RE = re.compile(r"(?:^|[\s\-:])&(\w+)", re.MULTILINE)


class DescriptorError(Exception):
    """Raised when a table descriptor cannot be parsed or validated."""


class DescriptorSafetyError(DescriptorError):
    """Raised when descriptor input violates size, depth or anchor limits."""


class DescriptorLoader:
    """Load table descriptors (``name`` plus ``columns`` list) into :class:`Table`.

    JSON is accepted too since it parses as YAML.
    """

    def __init__(self) -> None:
        self._yaml = YAML(typ="safe", pure=True)

    # -- safety checks -------------------------------------------------------

    @staticmethod
    def _check_safety(content: str) -> None:
        if len(content) > _MAX_DOCUMENT_SIZE:
            raise DescriptorSafetyError(
                f"Descriptor exceeds maximum size "
                f"({len(content):,} chars > {_MAX_DOCUMENT_SIZE:,} limit)"
            )
        if _ANCHOR_RE.search(content):
            raise DescriptorSafetyError("YAML anchors/aliases are not supported in descriptors")

    @staticmethod
    def _check_depth(data: Any, limit: int = _MAX_DEPTH) -> None:
        stack: list[tuple[Any, int]] = [(data, 1)]
        while stack:
            node, depth = stack.pop()
            if depth > limit:
                raise DescriptorSafetyError(f"Descriptor nesting exceeds maximum depth ({limit})")
            if isinstance(node, dict):
                stack.extend((v, depth + 1) for v in node.values())
            elif isinstance(node, list):
                stack.extend((v, depth + 1) for v in node)

    # -- public loading API --------------------------------------------------

    def load(self, path: Path) -> Table:
        """Load a descriptor file."""
        try:
            with path.open("r", encoding="utf-8") as handle:
                content = handle.read()
        except OSError as exc:
            raise DescriptorError(f"Cannot read descriptor {path}: {exc}") from exc
        return self.load_string(content, filename=str(path))

    def load_string(self, content: str, filename: str = "<string>") -> Table:
        """Load a descriptor from YAML or JSON text."""
        self._check_safety(content)
        try:
            data = self._yaml.load(content)
        except YAMLError as exc:
            raise DescriptorError(f"{filename}: invalid YAML/JSON: {exc}") from exc
        if not isinstance(data, dict):
            raise DescriptorError(
                f"{filename}: descriptor must be a mapping with 'name' and 'columns'"
            )
        self._check_depth(data)
        try:
            return Table.model_validate(data)
        except ValidationError as exc:
            raise DescriptorError(f"{filename}: invalid table descriptor: {exc}") from exc
