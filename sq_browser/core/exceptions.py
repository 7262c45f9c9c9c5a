class SqBrowserError(Exception):
    """Base exception for all sq_browser errors"""
    pass

class ConfigError(SqBrowserError):
    """Invalid or inconsistent global.json"""
    pass

class DataSourceError(SqBrowserError):
    """
    The upstream record source could not be read or parsed
    (missing file, malformed JSON/CSV, non-tabular payload)
    """
    pass

class SavedQueryNotFoundError(SqBrowserError, KeyError):
    """No saved query with the requested id exists in the repository"""
    pass
