# mergeview/cli/decorators.py
# CLI decorator mapping mergeview errors to Rich messages & exit codes

import functools
from typing import Callable, TypeVar, Any

from ..core.exceptions import (
    MergeviewError,
    ConfigurationError,
    JSONParsingError,
    DescriptorError,
    FileOperationError,
    format_error_message,
)

F = TypeVar("F", bound=Callable[..., Any])


# * Decorator for handling mergeview errors in CLI commands w/ Rich output
def handle_mergeview_error(func: F) -> F:
    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        # ! Lazy import to avoid circular dependencies
        from ..mergeview_io.console import console

        try:
            return func(*args, **kwargs)
        except JSONParsingError as e:
            console.print(format_error_message("JSON Parsing Error", str(e)))
            raise SystemExit(1)
        except DescriptorError as e:
            console.print(format_error_message("Descriptor Error", str(e)))
            raise SystemExit(1)
        except ConfigurationError as e:
            console.print(format_error_message("Configuration Error", str(e)))
            raise SystemExit(1)
        except FileOperationError as e:
            console.print(format_error_message("File Error", str(e)))
            raise SystemExit(1)
        except MergeviewError as e:
            console.print(format_error_message("Error", str(e)))
            raise SystemExit(1)

    return wrapper  # type: ignore[return-value]
