from tablesize.filesystem.filesystem import FileSystem, FileStatus
from tablesize.filesystem.local_filesystem import LocalFileSystem
from tablesize.filesystem.hadoop_filesystem import HadoopFileSystem
