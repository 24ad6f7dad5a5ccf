from .pygitutils import get_repo_log, open_repository, read_log, resolve_repo_path
