# mergeview/core/exceptions.py
# Exception hierarchy for host layers (pure - no I/O operations)
# * The diff & conflict engine never raises these; they cover config, descriptor & file I/O

from pathlib import Path
from typing import Any


# * Format error message for display (pure string formatting, no I/O)
def format_error_message(error_type: str, message: str) -> str:
    return f"[red]{error_type}:[/] {message}"


# * Base exception for mergeview
class MergeviewError(Exception):
    pass


# * Configuration errors
class ConfigurationError(MergeviewError):
    pass


# * Settings value validation failed
class SettingsValidationError(ConfigurationError):
    def __init__(self, message: str, setting_name: str, value: Any):
        super().__init__(message)
        self.setting_name = setting_name
        self.value = value

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}({self.args[0]!r}, "
            f"setting_name={self.setting_name!r}, value={self.value!r})"
        )


# * JSON parsing errors
class JSONParsingError(MergeviewError):
    pass


# * Conflict descriptor JSON has the wrong shape
class DescriptorError(MergeviewError):
    def __init__(self, message: str, source: str):
        super().__init__(message)
        self.source = source

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.args[0]!r}, source={self.source!r})"


# * Base error for file I/O operations
class FileOperationError(MergeviewError):
    def __init__(self, message: str, path: Path | str):
        super().__init__(message)
        self.path = Path(path) if isinstance(path, str) else path

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.args[0]!r}, path={self.path!r})"


# * Failed to read file
class FileReadError(FileOperationError):
    pass


# * Failed to write file
class FileWriteError(FileOperationError):
    pass
