"""
gitlog web server - FastAPI app serving repository logs as text and as a
browser terminal.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse, JSONResponse, PlainTextResponse

from gitlog.cmd.gitlog_config import GitLogConfig
from gitlog.cmd.log_format import color_scheme
from gitlog.cmd.log_record import LogQuery
from gitlog.cmd.repo_log import RepoLog
from gitlog.errors import GitLogException, format_error
from gitlog.server.terminal import terminal_html

logger = logging.getLogger("gitlog.server")


def wants_html(request: Request) -> bool:
    return "text/html" in request.headers.get("accept", "")


def create_app(config: GitLogConfig, repo_log: Optional[RepoLog] = None) -> FastAPI:
    """Create the FastAPI app serving repositories found under config.root."""
    repo_log = repo_log if repo_log else RepoLog(config)

    app = FastAPI(title="gitlog", description="Git commit log viewer")

    @app.get("/")
    def index(request: Request):
        if wants_html(request):
            return HTMLResponse(terminal_html())
        return PlainTextResponse(f"Usage: {request.base_url}:repo")

    @app.get("/api/{repo}")
    def api_log(repo: str, request: Request):
        query = LogQuery(
            repository_name=repo,
            oneline="oneline" in request.query_params,
            color="color" in request.query_params)
        try:
            formatted = repo_log.render(query)
        except GitLogException as e:
            error = color_scheme(query.color).error(format_error(e))
            return PlainTextResponse(error, status_code=404)
        return PlainTextResponse(formatted)

    @app.get("/{repo}")
    def repo_page(repo: str):
        return HTMLResponse(terminal_html(repo))

    @app.middleware("http")
    async def unhandled_exception_middleware(request: Request, call_next):
        try:
            return await call_next(request)
        except Exception as exc:
            logger.exception("Error occurred while serving %s", request.url.path)
            return JSONResponse(
                {
                    "success": False,
                    "message": str(exc) or "Internal Server Error",
                    "status": 500,
                },
                status_code=500)

    return app
