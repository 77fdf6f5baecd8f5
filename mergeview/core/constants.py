# mergeview/core/constants.py
# Constants & enums for diff line kinds, conflict resolutions & file categories

from enum import Enum


# * Kind of a renderable diff row
class DiffLineKind(Enum):
    CONTEXT = "context"
    ADDITION = "addition"
    DELETION = "deletion"
    HEADER = "header"


# * Terminal resolution choices for a conflict section (unset is None)
class Resolution(Enum):
    USE_CURRENT = "current"
    USE_INCOMING = "incoming"
    USE_BOTH = "both"
    MANUAL = "manual"


# * Display category of a file, used to pick a view affordance
class FileCategory(Enum):
    CODE = "code"
    DOCUMENT = "document"
    GENERIC = "generic"


# * Diff algorithm names accepted by settings & CLI
DIFF_POSITIONAL = "positional"
DIFF_MATCHED = "matched"
DIFF_ALGORITHMS = (DIFF_POSITIONAL, DIFF_MATCHED)


# conflict marker characters (repeated marker_size times)
MARKER_START = "<"
MARKER_BASE = "|"
MARKER_SEPARATOR = "="
MARKER_END = ">"
DEFAULT_MARKER_SIZE = 7


# extension tables (lowercase, no leading dot)
CODE_EXTENSIONS = frozenset(
    {
        "js", "jsx", "ts", "tsx", "mjs", "cjs", "vue", "svelte",
        "py", "pyi", "rb", "php", "pl", "lua", "r",
        "java", "kt", "kts", "scala", "groovy", "go", "rs", "swift", "dart",
        "c", "h", "cc", "cpp", "cxx", "hpp", "hh", "cs", "m", "mm",
        "sh", "bash", "zsh", "fish", "ps1", "bat",
        "html", "htm", "xml", "svg", "css", "scss", "sass", "less",
        "json", "yaml", "yml", "toml", "ini", "cfg", "sql", "graphql",
    }
)
DOCUMENT_EXTENSIONS = frozenset(
    {
        "md", "markdown", "mdx", "txt", "rst", "adoc", "org", "tex",
        "pdf", "doc", "docx", "odt", "rtf",
    }
)


# accent colors accepted by settings (paired w/ a secondary accent in the theme)
ACCENTS = ("blue", "cyan", "magenta", "green", "yellow", "red")
