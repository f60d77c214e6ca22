"""
Commonly used functions.
"""
import inspect
import functools
from typing import Any, Callable
from urllib.parse import urlparse, unquote
from pyspark.sql import SparkSession


def fill_in_spark_session(func: Callable[..., Any]) -> Callable[..., Any]:
    """Pass the active SparkSession as `spark` when it is not given.

    `spark` may be given positionally or as a keyword.
    """
    signature = inspect.signature(func)

    @functools.wraps(func)
    def _wrapper(*args, **kwargs) -> Any:
        bound = signature.bind_partial(*args, **kwargs)
        if bound.arguments.get('spark') is None:
            spark = SparkSession.getActiveSession()
            _m = f'Provide SparkSession to {func.__name__}'
            assert spark is not None, _m
            bound.arguments['spark'] = spark
        else:
            _m = 'Argument `spark` must be a SparkSession!'
            assert isinstance(bound.arguments['spark'], SparkSession), _m

        return func(*bound.args, **bound.kwargs)

    return _wrapper


def path_name(path: str) -> str:
    """Last component of a path or URI, e.g. `c` for `s3a://b/a/c/`.

    Hadoop paths are not percent-encoded, `#` and `?` are part of the name.
    """
    return path.rstrip('/').rsplit('/', 1)[-1]


def to_local_path(location: str) -> str:
    """`file:` URIs to plain paths, anything else is returned as is."""
    if location.startswith('file:'):
        return unquote(urlparse(location).path)

    return location
