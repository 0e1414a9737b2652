"""
Storage 子系统：定长行编解码、页缓存与单表行存储。

模块清单：
- constants: 行/页几何常量
- errors: 存储异常
- row: 行记录与定长编解码
- page: 页缓冲区
- pager: 数据文件与页缓存（懒加载、显式刷写）
- table: 行寻址与 open/insert/read/close
"""

from .errors import PageOutOfRangeError, RowNotFoundError, StorageException, TableFullError
from .row import Row, RowSerializer
from .table import Table, open_table
