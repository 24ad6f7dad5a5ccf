from gitlog.server.terminal import terminal_html


def test_terminal_without_repo_shows_banner():
    page = terminal_html()

    assert "<title>Git Log</title>" in page
    assert 'const currentRepo = "";' in page
    assert "Visit /<repo-name> to view a repository's git log" in page
    assert "@" + "REPO" + "@" not in page


def test_terminal_requests_colored_api():
    page = terminal_html("project")

    assert "'/api/' + encodeURIComponent(repo) + query" in page
    assert "'?color&oneline' : '?color'" in page
    assert "\\x1b[36mLoading git log...\\x1b[0m" in page


def test_terminal_escapes_script_close():
    page = terminal_html("</script><script>alert(1)")

    assert "</script><script>alert(1)" not in page
    assert 'const currentRepo = "<\\/script><script>alert(1)";' in page
