import logging

from validation.validate_input import validate_replace_inputs
from validation.validation_helpers import ValidationIssue, has_issues, log_issues


def test_valid_inputs_have_no_issues(source_image, target_root):
    assert validate_replace_inputs(source_image, target_root) == []


def test_missing_source_and_root(tmp_path):
    issues = validate_replace_inputs(tmp_path / "nope.png", tmp_path / "nowhere")
    assert [i.code for i in issues] == ["MISSING_SOURCE_IMAGE", "MISSING_TARGET_ROOT"]
    assert all(i.severity == "error" for i in issues)


def test_empty_paths_are_errors():
    issues = validate_replace_inputs("", None)
    assert {i.code for i in issues} == {"MISSING_SOURCE_IMAGE", "MISSING_TARGET_ROOT"}


def test_directory_as_source_is_an_error(tmp_path, target_root):
    issues = validate_replace_inputs(tmp_path, target_root)
    assert [i.code for i in issues] == ["MISSING_SOURCE_IMAGE"]


def test_file_as_root_is_an_error(source_image):
    issues = validate_replace_inputs(source_image, source_image)
    assert [i.code for i in issues] == ["MISSING_TARGET_ROOT"]


def test_unsupported_source_extension_is_only_a_warning(tmp_path, target_root):
    src = tmp_path / "background.gif"
    src.write_bytes(b"GIF89a")
    issues = validate_replace_inputs(src, target_root)
    assert [(i.code, i.severity) for i in issues] == [("UNSUPPORTED_SOURCE_EXTENSION", "warning")]
    assert not has_issues(issues, "error")


def test_log_issues_reports_severity(caplog):
    issues = [
        ValidationIssue("a", "MISSING_SOURCE_IMAGE", "error", "missing"),
        ValidationIssue("b", "UNSUPPORTED_SOURCE_EXTENSION", "warning", "odd"),
    ]
    with caplog.at_level(logging.WARNING):
        assert log_issues(issues, "error") is True
    levels = sorted(r.levelname for r in caplog.records)
    assert levels == ["ERROR", "WARNING"]
