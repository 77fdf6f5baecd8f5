# mergeview/cli/app.py
# Root Typer application & command registration
#
# ! Command imports at bottom of file are deferred to avoid circular dependencies.

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv

# load environment variables once at startup (MERGEVIEW_CONFIG may live in .env)
load_dotenv()

from ..config.settings import settings_manager
from ..mergeview_io.console import console


app = typer.Typer(
    rich_markup_mode="rich",
    add_completion=False,
    no_args_is_help=False,
    context_settings={"help_option_names": ["--help", "-h"]},
)


# * Load settings, configure output & theme; show help when no subcommand is used
@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable verbose logging for debugging"
    ),
    quiet: bool = typer.Option(
        False, "--quiet", "-q", help="Suppress verbose & debug logging (overrides --verbose)"
    ),
    log_file: Optional[Path] = typer.Option(
        None, "--log-file", help="Write verbose logs to file (enables verbose mode)"
    ),
) -> None:
    # respect injected ctx.obj from tests/embedding; only load if absent
    if getattr(ctx, "obj", None) is None:
        ctx.obj = settings_manager.load()

    # must be after settings load to check dev_mode & accent
    from ..core.output import get_output_manager
    from ..core.verbose import init_verbose, vlog_config
    from ..ui.theme import initialize_theme

    initialize_theme(getattr(ctx.obj, "accent", "blue"))

    # log_file implies verbose mode
    verbose_enabled = verbose or log_file is not None
    dev_mode = ctx.obj.dev_mode if hasattr(ctx.obj, "dev_mode") else False
    init_verbose(
        enabled=verbose_enabled, log_file=log_file, dev_mode=dev_mode, quiet=quiet
    )
    output = get_output_manager()
    output.start_session()
    # close the log file once the command finishes
    ctx.call_on_close(output.end_session)
    vlog_config("config_path", str(settings_manager.config_path))

    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())
        ctx.exit()


# ! import command modules here to avoid circular import w/ app object
from .commands import diff as _diff  # noqa: F401, E402
from .commands import resolve as _resolve  # noqa: F401, E402
from .commands import config as _config  # noqa: F401, E402
