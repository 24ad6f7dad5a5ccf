import html
import json
import re
from typing import Optional

XTERM_CSS = "https://cdn.jsdelivr.net/npm/xterm@5.3.0/css/xterm.css"
XTERM_JS = "https://cdn.jsdelivr.net/npm/xterm@5.3.0/lib/xterm.js"
XTERM_FIT_JS = "https://cdn.jsdelivr.net/npm/xterm-addon-fit@0.8.0/lib/xterm-addon-fit.js"

FONT_STACK = ('"SF Mono", "Monaco", "Inconsolata", "Fira Code", "Fira Mono", '
              '"Roboto Mono", "DejaVu Sans Mono", "Lucida Console", monospace')

# @NAME@ placeholders, the page is full of JS braces.
PLACEHOLDER = re.compile(r"@([A-Z_]+)@")

TERMINAL_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>@TITLE@</title>
    <link rel="stylesheet" href="@XTERM_CSS@" />
    <style>
        body {
            margin: 0;
            padding: 0;
            background-color: #000;
            font-family: @FONT_STACK@;
            height: 100vh;
            overflow: hidden;
        }
        #terminal {
            height: 100vh;
            width: 100vw;
            background: #000;
        }
    </style>
</head>
<body>
    <div id="terminal"></div>

    <script src="@XTERM_JS@"></script>
    <script src="@XTERM_FIT_JS@"></script>

    <script>
        const currentRepo = @REPO@;
        let terminal;
        let fitAddon;

        function initTerminal() {
            terminal = new Terminal({
                theme: {
                    background: '#000000',
                    foreground: '#ffffff',
                    cursor: '#ffffff',
                    selection: '#444444'
                },
                fontSize: 13,
                fontFamily: '@FONT_STACK@',
                cursorBlink: true,
                allowTransparency: false,
                convertEol: true,
                disableStdin: true,
                cursorStyle: 'block'
            });

            fitAddon = new FitAddon.FitAddon();
            terminal.loadAddon(fitAddon);
            terminal.open(document.getElementById('terminal'));
            fitAddon.fit();
            window.addEventListener('resize', () => fitAddon.fit());
        }

        async function loadRepo(repo) {
            terminal.clear();
            terminal.writeln('\\x1b[36mLoading git log...\\x1b[0m');

            try {
                const urlParams = new URLSearchParams(window.location.search);
                const query = urlParams.has('oneline') ? '?color&oneline' : '?color';
                const response = await fetch('/api/' + encodeURIComponent(repo) + query);
                const text = await response.text();

                terminal.clear();
                for (const line of text.split('\\n')) {
                    terminal.writeln(line);
                }
            } catch (error) {
                terminal.clear();
                terminal.writeln('\\x1b[31mError: ' + error.message + '\\x1b[0m');
            }
        }

        initTerminal();

        if (currentRepo) {
            loadRepo(currentRepo);
        } else {
            terminal.writeln('\\x1b[33mWelcome to Git Log Viewer\\x1b[0m');
            terminal.writeln("\\x1b[37mVisit /<repo-name> to view a repository's git log\\x1b[0m");
            terminal.writeln('\\x1b[37mAdd ?oneline for compact format: /<repo-name>?oneline\\x1b[0m');
        }
    </script>
</body>
</html>
"""


def _script_literal(value: str) -> str:
    return json.dumps(value).replace("</", "<\\/")


def terminal_html(repo: Optional[str] = None) -> str:
    title = f"Git Log - {repo}" if repo else "Git Log"
    values = {
        "TITLE": html.escape(title),
        "XTERM_CSS": XTERM_CSS,
        "XTERM_JS": XTERM_JS,
        "XTERM_FIT_JS": XTERM_FIT_JS,
        "FONT_STACK": FONT_STACK,
        "REPO": _script_literal(repo or ""),
    }
    return PLACEHOLDER.sub(lambda m: values[m.group(1)], TERMINAL_TEMPLATE)
