from .key_value_file_source import KeyValueFileError, KeyValueFileSource

__all__ = ["KeyValueFileError", "KeyValueFileSource"]
