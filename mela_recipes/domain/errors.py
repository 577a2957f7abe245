from __future__ import annotations


class MelaError(Exception):
    pass


class UnsupportedFormatError(MelaError):
    def __init__(self, path: str, suffix: str = ""):
        super().__init__(
            f"File must be format '.melarecipes' or '.melarecipe': {path}"
        )
        self.path = path
        self.suffix = suffix


class ParseError(MelaError):
    def __init__(self, source: str, reason: str = "Invalid recipe file"):
        super().__init__(f"Failed to parse {source}: {reason}")
        self.source = source
        self.reason = reason


class DecompressionError(MelaError):
    def __init__(self, archive: str, reason: str = "Unable to decompress"):
        super().__init__(f"Unable to decompress Mela file {archive}: {reason}")
        self.archive = archive
        self.reason = reason


class ScratchDirectoryError(MelaError, OSError):
    def __init__(self, path: str, reason: str):
        super().__init__(f"Scratch directory error at {path}: {reason}")
        self.path = path
        self.reason = reason


class InvalidFileNameError(MelaError, OSError):
    def __init__(self, file_name: str, reason: str = "Invalid file name"):
        super().__init__(f"{reason}: {file_name!r}")
        self.file_name = file_name
        self.reason = reason
