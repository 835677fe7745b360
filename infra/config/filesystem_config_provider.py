from __future__ import annotations

import json
import os
import re
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

from domain.models import Credentials, FormDefaults, RunConfig, SearchConfig

_REQUIRED_CONFIG_KEYS = {"locale", "baseURL", "keyword"}
_POSITIVE_INT_KEYS = ("numberOfJobsPerPage", "startPage", "averageExperience", "expectedSalary")
_WINDOW_SIZE_PATTERN = re.compile(r"(\d+)\s*[,x]\s*(\d+)")
_LOCALES_DIR = Path(__file__).resolve().parent.parent / "i18n" / "locales"


class FileSystemConfigProvider:
    """Reads config.json from a config directory and credentials from the environment.

    Every public method re-reads from disk so that edits
    to the JSON file take effect without restarting the app.
    ``EMAIL`` and ``PASSWORD`` are taken from the process environment,
    after loading ``.env`` from the config directory when present.
    """

    def __init__(self, config_dir: str, *, env_file: str | None = None) -> None:
        self._config_dir = Path(config_dir)
        self._env_file = Path(env_file) if env_file else self._config_dir / ".env"

    def validate(self, *, require_credentials: bool = True) -> list[str]:
        errors: list[str] = []
        config_path = self._config_dir / "config.json"
        data = self._validate_json_file(config_path, _REQUIRED_CONFIG_KEYS, errors)
        if data is not None:
            errors.extend(self._validate_config_formats(data))
        if require_credentials and self.get_credentials() is None:
            errors.append(
                "EMAIL and PASSWORD are not set. Add them to the environment or to "
                f"{self._env_file}. They are only needed when the browser profile is not signed in."
            )
        return errors

    @staticmethod
    def _validate_config_formats(data: dict) -> list[str]:
        errors: list[str] = []
        base_url = str(data.get("baseURL", ""))
        if not base_url.startswith("https://"):
            errors.append("baseURL must start with 'https://'.")

        keyword = data.get("keyword")
        if not isinstance(keyword, list) or not keyword:
            errors.append("keyword must be a non-empty list of search terms.")
        elif not all(isinstance(item, str) and item.strip() for item in keyword):
            errors.append("keyword entries must be non-empty strings.")

        locale = str(data.get("locale", ""))
        if not (_LOCALES_DIR / f"{locale}.json").is_file():
            errors.append(f"locale '{locale}' has no message file in {_LOCALES_DIR}.")

        for key in _POSITIVE_INT_KEYS:
            value = data.get(key)
            if value is None:
                continue
            if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                errors.append(f"{key} must be a positive integer.")

        for key in ("avoidCompanies", "avoidJobTitles"):
            value = data.get(key)
            if value is not None and not isinstance(value, list):
                errors.append(f"{key} must be a list.")

        workplace = data.get("workPlaceTypes")
        if workplace is not None and not isinstance(workplace, dict):
            errors.append("workPlaceTypes must map a workplace name to a selector.")

        for key in ("headless", "recordAlreadyApplied"):
            value = data.get(key)
            if value is not None and not isinstance(value, bool):
                errors.append(f"{key} must be a boolean (true/false), not a string.")

        resolution = data.get("resolution")
        if resolution and _parse_window_size(str(resolution)) is None:
            errors.append("resolution must look like '--window-size=1920,1080'.")

        return errors

    def get_run_config(self) -> RunConfig:
        data = self._read_json("config.json")
        search = SearchConfig(
            keywords=tuple(str(item) for item in data["keyword"]),
            location=str(data.get("location", "")),
            workplace_types={str(k): str(v) for k, v in (data.get("workPlaceTypes") or {}).items()},
        )
        defaults = FormDefaults()
        experience = data.get("averageExperience", data.get("AvgExperience"))
        salary = data.get("expectedSalary")
        form_defaults = FormDefaults(
            experience_years=int(experience) if experience is not None else defaults.experience_years,
            expected_salary=int(salary) if salary is not None else defaults.expected_salary,
        )
        resolution = data.get("resolution")
        return RunConfig(
            base_url=str(data["baseURL"]),
            search=search,
            locale=str(data.get("locale", "en")),
            excluded_companies=tuple(str(item) for item in data.get("avoidCompanies") or ()),
            excluded_titles=tuple(str(item) for item in data.get("avoidJobTitles") or ()),
            jobs_per_page=int(data.get("numberOfJobsPerPage", 25)),
            start_page=int(data.get("startPage", 1)),
            record_already_applied=bool(data.get("recordAlreadyApplied", False)),
            headless=bool(data.get("headless", False)),
            browser_path=data.get("browserPath") or None,
            window_size=_parse_window_size(str(resolution)) if resolution else None,
            user_data_dir=str(data.get("userDataDir", "./userData")),
            form_defaults=form_defaults,
        )

    def get_credentials(self) -> Credentials | None:
        if self._env_file.is_file():
            load_dotenv(self._env_file, override=False)
        email = os.environ.get("EMAIL", "").strip()
        password = os.environ.get("PASSWORD", "").strip()
        if not email or not password:
            return None
        return Credentials(email=email, password=password)

    # -- internal helpers ---------------------------------------------------

    def _read_json(self, filename: str) -> dict[str, Any]:
        path = self._config_dir / filename
        return json.loads(path.read_text(encoding="utf-8"))

    @staticmethod
    def _validate_json_file(
        path: Path,
        required_keys: set[str],
        errors: list[str],
    ) -> dict | None:
        """Validate a JSON file exists and has required keys.

        Returns the parsed dict on success, or None if the file
        is missing or unparseable.
        """
        if not path.is_file():
            errors.append(f"Missing file: {path}")
            return None
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, OSError) as exc:
            errors.append(f"Cannot read {path}: {exc}")
            return None
        if not isinstance(data, dict):
            errors.append(f"{path.name} must contain a JSON object.")
            return None
        missing = required_keys - set(data.keys())
        if missing:
            errors.append(f"{path.name} missing keys: {', '.join(sorted(missing))}")
            return None
        return data


def _parse_window_size(value: str) -> tuple[int, int] | None:
    match = _WINDOW_SIZE_PATTERN.search(value)
    if match is None:
        return None
    return int(match.group(1)), int(match.group(2))
