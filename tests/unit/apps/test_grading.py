# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
"""Tests for the student grading app."""

from recordkeep.apps import GradingApp
from recordkeep.domain.entities import Student


def make_app(scripted, output, settings, *answers) -> GradingApp:
    return GradingApp(console=scripted(*answers), out=output.append, settings=settings)


def test_collect_retries_duplicates_and_bad_scores(scripted, output, settings):
    app = make_app(
        scripted, output, settings,
        "2",
        "1", "Ada", "85",
        "1", "Bob", "70",
        "2", "Bob", "abc",
        "2", "Bob", "70",
    )
    app.collect_students()

    assert [s.full_name for s in app.students.get_all()] == ["Ada", "Bob"]
    assert "Error: Student with ID 1 already exists." in output
    assert "Error: Score must be a number." in output
    assert output.count("\n--- Student 2 ---") == 1


def test_blank_name_is_retried(scripted, output, settings):
    app = make_app(scripted, output, settings, "1", "3", "  ", "3", "Cy", "55")
    app.collect_students()
    assert "Error: Full Name is missing." in output
    assert app.students.get_by_id(3).unwrap().grade == "D"


def test_run_writes_and_prints_report(scripted, output, settings, tmp_path):
    report = tmp_path / "report.txt"
    app = make_app(scripted, output, settings, "1", "7", "Ada Lovelace", "72")
    app.run(report_path=report)

    assert report.read_text() == "Ada Lovelace (ID: 7): Score = 72, Grade = B\n"
    assert f"Report saved successfully to {report}" in output
    assert output[-2:] == [
        "\n--- Student Report ---",
        "Ada Lovelace (ID: 7): Score = 72, Grade = B",
    ]


def test_run_prompts_for_path_and_defaults(scripted, output, settings, tmp_path):
    app = make_app(scripted, output, settings, "0", "")
    app.run()
    assert (tmp_path / "report.txt").exists()


def test_save_report_failure_is_reported(scripted, output, settings, tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("x")
    app = make_app(scripted, output, settings)
    app.students.add(Student(id=1, full_name="Ada", score=90))
    result = app.save_report(blocker / "report.txt")
    assert result.is_failure
    assert output[-1].startswith("Error: Error saving file:")


def test_relative_report_path_resolves_against_data_dir(scripted, output, settings, tmp_path):
    app = make_app(scripted, output, settings, "1", "2", "Bo", "45")
    app.run(report_path="grades.txt")
    assert (tmp_path / "grades.txt").read_text() == "Bo (ID: 2): Score = 45, Grade = F\n"
    assert f"Report saved successfully to {tmp_path / 'grades.txt'}" in output
