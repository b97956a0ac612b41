from typing import Any, Iterable


def exclude_keys(data: Any, keys: Iterable[str]) -> Any:
    """Drop keys from a response body, or from every item of a list body"""
    keys = set(keys)
    if isinstance(data, list):
        return [exclude_keys(item, keys) for item in data]
    return {k: v for k, v in data.items() if k not in keys}
