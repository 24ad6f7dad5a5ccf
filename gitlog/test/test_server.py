import shutil

from colorama import Fore
from fastapi.testclient import TestClient
import pytest

from gitlog.cmd.gitlog_config import GitLogConfig
from gitlog.cmd.repo_log import RepoLog
from gitlog.server import create_app
from gitlog.test.utils.setup_repo import SetupRepo


@pytest.fixture
def repo_root(tmp_path):
    with SetupRepo(tmp_path, "project") as setup:
        setup.commit("Initial commit\n")
        setup.commit("Add feature\n\nDetails\n")
        yield tmp_path, setup


@pytest.fixture
def client(repo_root):
    root, _ = repo_root
    return TestClient(create_app(GitLogConfig.from_path(root)))


def test_index_usage_text(client):
    response = client.get("/", headers={"accept": "*/*"})

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/plain")
    assert response.text == "Usage: http://testserver/:repo"


def test_index_html_banner(client):
    response = client.get("/", headers={"accept": "text/html"})

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    assert "Welcome to Git Log Viewer" in response.text
    assert "const currentRepo = \"\";" in response.text


def test_repo_page(client):
    response = client.get("/project")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    assert "<title>Git Log - project</title>" in response.text
    assert "const currentRepo = \"project\";" in response.text
    assert "xterm.js" in response.text


def test_repo_page_escapes_name(client):
    response = client.get("/%3Cb%3E")

    assert response.status_code == 200
    assert "<title>Git Log - &lt;b&gt;</title>" in response.text
    assert "const currentRepo = \"<b>\";" in response.text


def test_api_verbose_log(client, repo_root):
    _, setup = repo_root
    head = str(setup.repo.head.target)

    response = client.get("/api/project")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/plain")
    assert response.text.startswith(f"commit {head}\nAuthor: Test User <test@example.com>\nDate:   ")
    assert len([line for line in response.text.split("\n") if line.startswith("commit ")]) == 2
    assert "\x1b" not in response.text


def test_api_oneline_log(client, repo_root):
    _, setup = repo_root
    head = str(setup.repo.head.target)

    response = client.get("/api/project?oneline")

    assert response.status_code == 200
    lines = response.text.split("\n")
    assert lines[0] == f"{head[:7]} Add feature"
    assert lines[1].endswith(" Initial commit")


def test_api_color_log(client):
    response = client.get("/api/project?oneline&color")

    assert response.status_code == 200
    assert Fore.YELLOW in response.text
    assert Fore.WHITE in response.text


def test_api_missing_repository(client):
    response = client.get("/api/missing")

    assert response.status_code == 404
    assert "Error" in response.text
    assert "missing" in response.text


def test_api_missing_repository_colored(client):
    response = client.get("/api/missing?color")

    assert response.status_code == 404
    assert response.text.startswith(f"{Fore.RED}Error: ")


def test_api_null_byte_in_name(client):
    response = client.get("/api/a%00b")

    assert response.status_code == 404
    assert response.text.startswith("Error: ")


def test_api_unreadable_history(client, repo_root):
    _, setup = repo_root
    shutil.rmtree(setup.repo_path / ".git" / "objects")

    response = client.get("/api/project")

    assert response.status_code == 404
    assert response.text.startswith("Error: Could not read the history")


def test_unhandled_error_is_json(repo_root, caplog):
    root, _ = repo_root

    def broken_source(path):
        raise RuntimeError("walk failed")

    app = create_app(GitLogConfig.from_path(root),
                     RepoLog(GitLogConfig.from_path(root), broken_source))
    client = TestClient(app)

    response = client.get("/api/project")

    assert response.status_code == 500
    assert response.json() == {"success": False, "message": "walk failed", "status": 500}
    errors = [r for r in caplog.records if r.name == "gitlog.server"]
    assert len(errors) == 1
    assert errors[0].getMessage() == "Error occurred while serving /api/project"
