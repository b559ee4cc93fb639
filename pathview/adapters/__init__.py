from .parse import ParseResult, coerce_path, coerce_paths, parse_paths

__all__ = ["ParseResult", "coerce_path", "coerce_paths", "parse_paths"]
