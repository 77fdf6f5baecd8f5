# tests/conftest.py
# Pytest configuration w/ isolation fixtures for deterministic test runs

import json
from pathlib import Path

import pytest

from mergeview.core.constants import Resolution
from mergeview.core.types import ConflictFile, ConflictSection


@pytest.fixture(autouse=True)
def isolate_config(tmp_path, monkeypatch):
    # Patch Path.home() to isolated temp directory
    fake_home = tmp_path / "fake_home"
    fake_home.mkdir()

    mergeview_dir = fake_home / ".mergeview"
    mergeview_dir.mkdir()

    # Create minimal config.json w/ test defaults
    config_data = {
        "diff_algorithm": "positional",
        "line_numbers": True,
        "accent": "blue",
        "interactive": True,
        "marker_size": 7,
        "dev_mode": False,
    }

    config_file = mergeview_dir / "config.json"
    with open(config_file, "w") as f:
        json.dump(config_data, f, indent=2)

    monkeypatch.setattr(Path, "home", lambda: fake_home)
    monkeypatch.delenv("MERGEVIEW_CONFIG", raising=False)

    # ! reset global settings_manager state & patch its config_path to use isolated location
    from mergeview.config.settings import settings_manager

    settings_manager._settings = None
    settings_manager.config_path = config_file

    # ! reset output manager to NullOutputManager for test isolation
    from mergeview.core.output import reset_output_manager

    reset_output_manager()

    # ! fresh console so themes pushed by earlier CLI runs do not leak
    from mergeview.mergeview_io.console import reset_console

    reset_console()

    return fake_home


@pytest.fixture
def isolate_output():
    from mergeview.core.output import reset_output_manager

    reset_output_manager()
    yield
    reset_output_manager()


@pytest.fixture
def dev_mode_enabled(isolate_config):
    # Enable dev_mode for tests that require it
    config_file = isolate_config / ".mergeview" / "config.json"

    with open(config_file, "r") as f:
        config_data = json.load(f)

    config_data["dev_mode"] = True

    with open(config_file, "w") as f:
        json.dump(config_data, f)

    from mergeview.config.settings import settings_manager

    settings_manager._settings = None

    return isolate_config


# * Build a section w/ "A"/"B" style content for resolution tests
def make_section(
    section_id: str,
    current: str = "A",
    incoming: str = "B",
    resolution: Resolution | None = None,
) -> ConflictSection:
    return ConflictSection(
        id=section_id,
        start_line=1,
        end_line=5,
        current_content=current,
        incoming_content=incoming,
        resolution=resolution,
    )


@pytest.fixture
def two_file_changeset():
    # file1 w/ two sections, file2 w/ one
    return [
        ConflictFile(
            path="src/app.py",
            conflicts=[make_section("s1"), make_section("s2")],
        ),
        ConflictFile(path="README.md", conflicts=[make_section("s3")]),
    ]


@pytest.fixture
def conflicted_text():
    return "\n".join(
        [
            "header",
            "<<<<<<< HEAD",
            "ours one",
            "=======",
            "theirs one",
            ">>>>>>> feature",
            "middle",
            "<<<<<<< HEAD",
            "ours two",
            "||||||| base",
            "base two",
            "=======",
            "theirs two",
            ">>>>>>> feature",
            "footer",
        ]
    )


# * Header rows carry no numbers; context both; additions new only; deletions old only
def assert_line_numbering(lines):
    from mergeview.core.constants import DiffLineKind

    for line in lines:
        if line.kind == DiffLineKind.HEADER:
            assert line.old_line_number is None and line.new_line_number is None
        elif line.kind == DiffLineKind.CONTEXT:
            assert line.old_line_number is not None
            assert line.new_line_number is not None
        elif line.kind == DiffLineKind.ADDITION:
            assert line.old_line_number is None and line.new_line_number is not None
        elif line.kind == DiffLineKind.DELETION:
            assert line.old_line_number is not None and line.new_line_number is None
