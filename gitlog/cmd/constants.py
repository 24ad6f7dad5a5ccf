class GitLogConstants:
    ROOT_ENV: str = 'GITLOG_ROOT'
    SHORT_ID_LENGTH: int = 7
    MESSAGE_INDENT: str = '    '
    DATE_FORMAT: str = '%a %b %d %H:%M:%S %Y %Z'
    DEFAULT_HOST: str = '127.0.0.1'
    DEFAULT_PORT: int = 8000
    USAGE: str = 'Usage: gitlog <repo-name> [--oneline]'
