from .errors import GitLogException, RepositoryNotFoundError, UsageError, format_error
