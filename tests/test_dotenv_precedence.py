import os

from mpgblog.config import settings


def test_project_dotenv_overrides_environment(tmp_path, monkeypatch) -> None:
    project_dir = tmp_path / "project"
    project_env = project_dir / ".env"

    project_dir.mkdir()
    project_env.write_text("SITE_URL=https://project.example\n", encoding="utf-8")

    monkeypatch.chdir(project_dir)
    monkeypatch.setenv("SITE_URL", "https://env.example")

    settings._load_dotenv()

    assert os.getenv("SITE_URL") == "https://project.example"
    assert settings.get_settings().site_origin == "https://project.example"
