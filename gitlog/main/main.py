#!/usr/bin/env python

import argparse
import logging
import sys

import colorama
import uvicorn

from gitlog.cmd.constants import GitLogConstants
from gitlog.cmd.gitlog_config import GitLogConfig
from gitlog.cmd.log import log
from gitlog.cmd.log_format import AnsiColors, PlainColors
from gitlog.errors import format_error
from gitlog.server import create_app


def main():
    colorama.just_fix_windows_console()
    try:
        log(sys.argv)
    except Exception as e:
        colors = AnsiColors() if sys.stderr.isatty() else PlainColors()
        print(colors.error(format_error(e)), file=sys.stderr)
        sys.exit(1)


def serve():
    parser = argparse.ArgumentParser(
        prog='gitlog-server', description='Serve repository logs over HTTP')
    parser.add_argument(
        '--host',
        default=GitLogConstants.DEFAULT_HOST,
        help=f'Host to bind (default: {GitLogConstants.DEFAULT_HOST})')
    parser.add_argument(
        '--port', '-p',
        type=int,
        default=GitLogConstants.DEFAULT_PORT,
        help=f'Port to bind (default: {GitLogConstants.DEFAULT_PORT})')
    parser.add_argument(
        '--root',
        default='',
        help=f'Repository root, overrides ${GitLogConstants.ROOT_ENV}')
    parser.add_argument(
        '--log-level',
        default='info',
        choices=['debug', 'info', 'warning', 'error'])
    args = parser.parse_args(sys.argv[1:])

    logging.basicConfig(level=args.log_level.upper())
    config = GitLogConfig.from_path(args.root) if args.root else GitLogConfig.from_env()
    app = create_app(config)
    print(f"gitlog serving {config.root} on http://{args.host}:{args.port}")
    uvicorn.run(app, host=args.host, port=args.port, log_level=args.log_level)
