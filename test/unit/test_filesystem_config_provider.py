from __future__ import annotations

import json
from pathlib import Path

import pytest

from domain.models import Credentials, FormDefaults
from infra.config import FileSystemConfigProvider


def _write_config(base: Path, data: dict) -> None:
    (base / "config.json").write_text(json.dumps(data))


def _valid_config() -> dict:
    return {
        "locale": "en",
        "baseURL": "https://www.linkedin.com/",
        "keyword": ["python developer", "django"],
        "location": "Berlin",
        "workPlaceTypes": {"remote": "#remote-filter"},
        "avoidCompanies": ["Recruiting"],
        "avoidJobTitles": ["Java", "C++"],
        "numberOfJobsPerPage": 10,
        "startPage": 2,
        "browserPath": "/usr/bin/chromium",
        "resolution": "--window-size=1600,900",
        "averageExperience": 8,
        "expectedSalary": 70000,
    }


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    # setenv first so values loaded from a .env file are removed afterwards
    for name in ("EMAIL", "PASSWORD"):
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)


def test_valid_config_passes_validation(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    _write_config(tmp_path, _valid_config())
    monkeypatch.setenv("EMAIL", "ada@example.com")
    monkeypatch.setenv("PASSWORD", "secret")
    assert FileSystemConfigProvider(str(tmp_path)).validate() == []


def test_missing_file_is_reported(tmp_path: Path) -> None:
    errors = FileSystemConfigProvider(str(tmp_path)).validate(require_credentials=False)
    assert len(errors) == 1
    assert "Missing file" in errors[0]


def test_missing_keys_are_reported(tmp_path: Path) -> None:
    _write_config(tmp_path, {"locale": "en"})
    errors = FileSystemConfigProvider(str(tmp_path)).validate(require_credentials=False)
    assert errors == ["config.json missing keys: baseURL, keyword"]


def test_format_errors_are_reported(tmp_path: Path) -> None:
    data = _valid_config()
    data.update(
        {
            "baseURL": "http://www.linkedin.com/",
            "keyword": "python",
            "locale": "xx",
            "numberOfJobsPerPage": 0,
            "startPage": "2",
            "headless": "yes",
            "resolution": "big",
        }
    )
    _write_config(tmp_path, data)
    errors = FileSystemConfigProvider(str(tmp_path)).validate(require_credentials=False)
    joined = "\n".join(errors)
    assert "baseURL must start with 'https://'" in joined
    assert "keyword must be a non-empty list" in joined
    assert "locale 'xx'" in joined
    assert "numberOfJobsPerPage must be a positive integer" in joined
    assert "startPage must be a positive integer" in joined
    assert "headless must be a boolean" in joined
    assert "resolution must look like" in joined


def test_missing_credentials_are_reported(tmp_path: Path) -> None:
    _write_config(tmp_path, _valid_config())
    errors = FileSystemConfigProvider(str(tmp_path)).validate()
    assert len(errors) == 1
    assert "EMAIL and PASSWORD" in errors[0]


def test_get_run_config_maps_every_key(tmp_path: Path) -> None:
    _write_config(tmp_path, _valid_config())
    config = FileSystemConfigProvider(str(tmp_path)).get_run_config()

    assert config.base_url == "https://www.linkedin.com/"
    assert config.search.keywords == ("python developer", "django")
    assert config.search.keyword_query == "python developer OR django"
    assert config.search.location == "Berlin"
    assert dict(config.search.workplace_types) == {"remote": "#remote-filter"}
    assert config.excluded_companies == ("Recruiting",)
    assert config.excluded_titles == ("Java", "C++")
    assert config.jobs_per_page == 10
    assert config.start_page == 2
    assert config.browser_path == "/usr/bin/chromium"
    assert config.window_size == (1600, 900)
    assert config.form_defaults == FormDefaults(experience_years=8, expected_salary=70000)
    assert config.record_already_applied is False


def test_defaults_apply_for_optional_keys(tmp_path: Path) -> None:
    _write_config(
        tmp_path,
        {"locale": "fr", "baseURL": "https://www.linkedin.com/", "keyword": ["data"]},
    )
    config = FileSystemConfigProvider(str(tmp_path)).get_run_config()
    assert config.locale == "fr"
    assert config.start_page == 1
    assert config.jobs_per_page == 25
    assert config.window_size is None
    assert config.browser_path is None
    assert config.excluded_titles == ()
    assert config.form_defaults == FormDefaults()


def test_config_is_re_read_on_every_call(tmp_path: Path) -> None:
    _write_config(tmp_path, _valid_config())
    provider = FileSystemConfigProvider(str(tmp_path))
    assert provider.get_run_config().start_page == 2

    data = _valid_config()
    data["startPage"] = 4
    _write_config(tmp_path, data)
    assert provider.get_run_config().start_page == 4


def test_credentials_come_from_env_file(tmp_path: Path) -> None:
    (tmp_path / ".env").write_text("EMAIL=ada@example.com\nPASSWORD=s3cret\n")
    provider = FileSystemConfigProvider(str(tmp_path))
    assert provider.get_credentials() == Credentials(email="ada@example.com", password="s3cret")


def test_environment_wins_over_env_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    (tmp_path / ".env").write_text("EMAIL=file@example.com\nPASSWORD=file\n")
    monkeypatch.setenv("EMAIL", "env@example.com")
    monkeypatch.setenv("PASSWORD", "env")
    creds = FileSystemConfigProvider(str(tmp_path)).get_credentials()
    assert creds == Credentials(email="env@example.com", password="env")


def test_no_credentials_anywhere(tmp_path: Path) -> None:
    assert FileSystemConfigProvider(str(tmp_path)).get_credentials() is None
