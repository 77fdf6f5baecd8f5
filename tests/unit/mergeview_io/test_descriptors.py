# tests/unit/mergeview_io/test_descriptors.py
# Unit tests for conflict descriptor loading & resolution reports

import json

import pytest

from mergeview.core.constants import Resolution
from mergeview.core.exceptions import DescriptorError, JSONParsingError, FileReadError
from mergeview.mergeview_io.descriptors import (
    files_from_records,
    load_descriptor,
    records_from_files,
    write_resolution_report,
)


def _record(**overrides):
    section = {
        "id": "c1",
        "startLine": 3,
        "endLine": 7,
        "currentContent": "ours",
        "incomingContent": "theirs",
    }
    section.update(overrides)
    return {"path": "src/app.py", "resolved": True, "conflicts": [section]}


class TestFilesFromRecords:

    # * Verify a list of file records becomes ConflictFiles
    def test_list_of_records(self):

        files = files_from_records([_record(baseContent="base")])

        assert files[0].path == "src/app.py"
        section = files[0].conflicts[0]
        assert (section.start_line, section.end_line) == (3, 7)
        assert section.current_content == "ours"
        assert section.base_content == "base"
        assert section.resolution is None

    # * Verify a {"files": [...]} wrapper is accepted
    def test_wrapped(self):

        assert len(files_from_records({"files": [_record()]})) == 1

    # * Verify an incoming resolved flag is ignored in favour of sections
    def test_resolved_flag_ignored(self):

        assert files_from_records([_record()])[0].resolved is False

    # * Verify shape errors raise DescriptorError w/ source
    @pytest.mark.parametrize(
        "data",
        [
            {"nope": 1},
            [{"conflicts": []}],
            [{"path": "a", "conflicts": {}}],
            [{"path": "a", "conflicts": ["x"]}],
        ],
    )
    def test_bad_shape(self, data):

        with pytest.raises(DescriptorError) as exc_info:
            files_from_records(data, "d.json")
        assert exc_info.value.source == "d.json"

    # * Verify missing section keys are reported
    def test_missing_keys(self):

        record = _record()
        del record["conflicts"][0]["incomingContent"]

        with pytest.raises(DescriptorError, match="incomingContent"):
            files_from_records([record])

    # * Verify non-numeric lines are reported
    def test_non_numeric_lines(self):

        with pytest.raises(DescriptorError, match="non-numeric"):
            files_from_records([_record(startLine="three")])


class TestLoadDescriptor:

    # * Verify loading from disk
    def test_load(self, tmp_path):

        path = tmp_path / "conflicts.json"
        path.write_text(json.dumps([_record()]))

        assert load_descriptor(path)[0].conflicts[0].id == "c1"

    # * Verify invalid JSON raises w/ a snippet
    def test_invalid_json(self, tmp_path):

        path = tmp_path / "conflicts.json"
        path.write_text('[\n  {"path": "a",\n  oops\n]')

        with pytest.raises(JSONParsingError, match=">>>"):
            load_descriptor(path)

    # * Verify missing file raises FileReadError
    def test_missing_file(self, tmp_path):

        with pytest.raises(FileReadError):
            load_descriptor(tmp_path / "missing.json")


class TestResolutionReport:

    # * Verify records carry resolution & rendered content
    def test_records(self):

        files = files_from_records([_record()])
        files[0].conflicts[0].resolution = Resolution.USE_BOTH

        record = records_from_files(files)[0]

        assert record["resolved"] is True
        assert record["conflicts"][0]["resolution"] == "both"
        assert record["conflicts"][0]["content"] == "ours\ntheirs"

    # * Verify unresolved sections serialise as null
    def test_unresolved(self):

        record = records_from_files(files_from_records([_record()]))[0]

        assert record["resolved"] is False
        assert record["conflicts"][0]["resolution"] is None

    # * Verify report file is written as JSON
    def test_write_report(self, tmp_path):

        files = files_from_records([_record()])
        path = tmp_path / "out" / "report.json"
        write_resolution_report(files, path)

        data = json.loads(path.read_text())
        assert data["files"][0]["path"] == "src/app.py"

