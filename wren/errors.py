# wren/errors.py
from __future__ import annotations


class WrenError(Exception):
    """Base class for every error the viewer raises on purpose."""


class StartupError(WrenError):
    """Window, GL context or extension loading failed."""


class MeshParseError(WrenError, ValueError):
    """The mesh description could not be turned into a MeshData."""


class MalformedRecordError(MeshParseError):
    def __init__(self, line_number: int, line: str, reason: str = "") -> None:
        self.line_number = line_number
        self.line = line
        self.reason = reason

        message = f"Malformed record on line {line_number}: {line!r}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class FaceIndexError(MeshParseError):
    """A face references a position that was never declared."""

    def __init__(
        self, index: int, pool_size: int, line_number: int | None = None
    ) -> None:
        self.index = index
        self.pool_size = pool_size
        self.line_number = line_number

        # index is 0-based here, files are 1-based
        message = (
            f"Position index {index + 1} out of range "
            f"({pool_size} positions declared)"
        )
        if line_number is not None:
            message += f" on line {line_number}"
        super().__init__(message)


class EmptyMeshError(MeshParseError):
    """Parsing finished without producing a single triangle."""


class ShaderCompileError(WrenError):
    """
    Compiling or linking the shader program failed.
    The message is the driver's log, untouched.
    """

    def __init__(self, log: str) -> None:
        self.log = log
        super().__init__(log)


class TextureLoadError(WrenError):
    """The texture image is missing, corrupt or has an unsupported layout."""
