from .base import DictionaryRequestError, HttpTransport, is_json_string

__all__ = [
    "DictionaryRequestError",
    "HttpTransport",
    "is_json_string",
]
