from typing import Any
from py4j.protocol import Py4JJavaError
from pyspark.sql import SparkSession

from tablesize.errors import FileSystemError, PathNotFound, AccessDenied
from tablesize.filesystem.filesystem import FileSystem, FileStatus

NOT_FOUND_EXCEPTIONS = {'java.io.FileNotFoundException'}
ACCESS_DENIED_EXCEPTIONS = {
    'org.apache.hadoop.security.AccessControlException',
    'java.nio.file.AccessDeniedException',
}


def _translate_java_error(path: str, error: Py4JJavaError) -> FileSystemError:
    exception_class = error.java_exception.getClass().getName()
    _m = f'{exception_class}: {error.java_exception.getMessage()}'
    if exception_class in NOT_FOUND_EXCEPTIONS:
        return PathNotFound(path, _m)
    if exception_class in ACCESS_DENIED_EXCEPTIONS:
        return AccessDenied(path, _m)
    return FileSystemError(path, _m)


class HadoopFileSystem(FileSystem):
    """Hadoop `FileSystem` reached through the JVM of a SparkSession.

    Works for any scheme configured in the session's Hadoop configuration
    (`hdfs://`, `s3a://`, `file:/` ...). The concrete Hadoop FileSystem is
    resolved per path, so one instance serves locations on different
    filesystems.
    """

    def __init__(self, spark: SparkSession) -> None:
        self.spark = spark

    def _jvm_path(self, path: str) -> tuple[Any, Any]:
        jvm = self.spark._jvm  # type: ignore
        hadoop_conf = self.spark._jsc.hadoopConfiguration()  # type: ignore
        j_path = jvm.org.apache.hadoop.fs.Path(path)
        return j_path, j_path.getFileSystem(hadoop_conf)

    def stat(self, path: str) -> FileStatus:
        try:
            j_path, j_fs = self._jvm_path(path)
            j_status = j_fs.getFileStatus(j_path)
            return FileStatus(
                path=path,
                is_directory=bool(j_status.isDirectory()),
                length=int(j_status.getLen()),
            )
        except Py4JJavaError as e:
            raise _translate_java_error(path, e) from e

    def list_paths(self, path: str) -> list[str]:
        try:
            j_path, j_fs = self._jvm_path(path)
            return [
                j_status.getPath().toString()
                for j_status in j_fs.listStatus(j_path)
            ]
        except Py4JJavaError as e:
            raise _translate_java_error(path, e) from e
