"""Tests for the command line interface."""

from __future__ import annotations

import json

import pytest

from resume_matcher.cli import main
from resume_matcher.core import Profile, ResumeParser, Skill


JOBS = [
    {"id": "j2", "title": "Java Developer", "company": "Beta", "description": "Java services"},
    {"id": "j1", "title": "Python Developer", "company": "Alpha", "description": "Python and Django"},
]


@pytest.fixture
def config_file(config) -> str:
    config.save()
    return str(config.config_path)


def test_no_command_exits_with_error(capsys) -> None:
    with pytest.raises(SystemExit) as exc_info:
        main([])
    assert exc_info.value.code == 1


def test_parse_writes_fragment(tmp_path, sample_resume) -> None:
    resume = tmp_path / "resume.txt"
    resume.write_text(sample_resume, encoding="utf-8")
    output = tmp_path / "fragment.json"

    main(["parse", str(resume), "--output", str(output)])

    data = json.loads(output.read_text(encoding="utf-8"))
    assert data["skills"][:3] == ["JavaScript", "Python", "React"]
    assert data["experience"][0]["startDate"] == "Jan 2020"
    assert data["education"][0]["institution"] == "Massachusetts Institute of Technology"


def test_parse_unsupported_format(tmp_path, capsys) -> None:
    resume = tmp_path / "resume.docx"
    resume.write_bytes(b"data")

    with pytest.raises(SystemExit):
        main(["parse", str(resume)])
    assert "Unsupported file format: .docx" in capsys.readouterr().out


def test_match_ranks_jobs_file(tmp_path) -> None:
    profile = Profile(user_id="alice", skills=[Skill(name="Python")])
    profile_path = tmp_path / "profile.json"
    profile_path.write_text(json.dumps(profile.to_dict()), encoding="utf-8")
    jobs_path = tmp_path / "jobs.json"
    jobs_path.write_text(json.dumps(JOBS), encoding="utf-8")
    output = tmp_path / "matches.json"

    main(["match", "--profile", str(profile_path), "--jobs", str(jobs_path), "--output", str(output)])

    data = json.loads(output.read_text(encoding="utf-8"))
    assert data["count"] == 2
    assert [job["id"] for job in data["jobs"]] == ["j1", "j2"]
    assert data["jobs"][0]["matchReasons"]["skillsMatch"] == ["Python"]
    assert data["jobs"][0]["matchReasons"]["missingSkills"] == ["Django"]


def test_match_accepts_resume_and_wrapped_jobs(tmp_path, sample_resume) -> None:
    resume = tmp_path / "resume.txt"
    resume.write_text(sample_resume, encoding="utf-8")
    jobs_path = tmp_path / "jobs.json"
    jobs_path.write_text(json.dumps({"jobs": JOBS}), encoding="utf-8")
    output = tmp_path / "matches.json"

    main(["match", "--profile", str(resume), "--jobs", str(jobs_path), "--output", str(output)])

    data = json.loads(output.read_text(encoding="utf-8"))
    assert {job["id"] for job in data["jobs"]} == {"j1", "j2"}
    assert data["jobs"][0]["matchReasons"]["educationMatch"] == "Bachelor of Science in Computer Science"


def test_unknown_profile_exits_with_error(config_file, capsys) -> None:
    with pytest.raises(SystemExit) as exc_info:
        main(["--config", config_file, "profile", "--user", "ghost"])

    assert exc_info.value.code == 1
    assert "Profile not found for user: ghost" in capsys.readouterr().out


def test_upload_then_show_profile(monkeypatch, config_file, tmp_path, sample_resume, capsys) -> None:
    monkeypatch.setattr(ResumeParser, "extract_pdf_text", lambda self, path: sample_resume)
    pdf = tmp_path / "resume.pdf"
    pdf.write_bytes(b"%PDF-1.4")

    main(["--config", config_file, "upload", "--user", "alice", "--file", str(pdf), "--json"])
    out = capsys.readouterr().out
    upload = json.loads(out[out.index("{"):])
    assert upload["profileId"] == "alice"
    assert upload["data"]["projectsCount"] == 2

    main(["--config", config_file, "profile", "--user", "alice", "--json"])
    profile = json.loads(capsys.readouterr().out)
    assert profile["userId"] == "alice"
    assert profile["skills"][0] == {"name": "JavaScript", "category": "Technical"}


def test_upload_rejection_prints_suggestion(config_file, tmp_path, capsys) -> None:
    path = tmp_path / "resume.txt"
    path.write_text("text", encoding="utf-8")

    with pytest.raises(SystemExit):
        main(["--config", config_file, "upload", "--user", "alice", "--file", str(path)])
    assert "Only PDF files are allowed" in capsys.readouterr().out


def test_config_set_persists(config_file) -> None:
    main(["--config", config_file, "config", "--set", "search.limit", "20"])

    with open(config_file, encoding="utf-8") as f:
        assert json.load(f)["search"]["limit"] == 20
