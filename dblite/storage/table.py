"""
单表行存储。

负责：
- 维护行数 row_count（唯一的增长计数器，只在成功插入时加一）
- 把逻辑行号映射到 (页号, 页内偏移)
- 通过 Pager 懒加载页、在关闭时刷写页
"""

from typing import Iterator, Tuple

from loguru import logger

from .constants import PAGE_SIZE, ROW_SIZE, ROWS_PER_PAGE, TABLE_MAX_ROWS
from .errors import RowNotFoundError, TableFullError
from .pager import Pager
from .row import Row, RowSerializer


def row_location(row_num: int) -> Tuple[int, int]:
    """行 row_num 所在的页号以及页内字节偏移。"""
    page_id = row_num // ROWS_PER_PAGE
    offset = (row_num % ROWS_PER_PAGE) * ROW_SIZE
    return page_id, offset


def rows_in_file(file_length: int) -> int:
    """
    由文件长度推算已持久化的行数。
    整页按 ROWS_PER_PAGE 行计（页尾的填充字节不构成行），
    尾页按完整行数计，残缺的尾行不计入。
    """
    full_pages, tail = divmod(file_length, PAGE_SIZE)
    return full_pages * ROWS_PER_PAGE + min(tail // ROW_SIZE, ROWS_PER_PAGE)


class Table:
    """
    单表：行只追加，不删除、不更新。
    """

    def __init__(self, pager: Pager, row_count: int = 0):
        self.pager = pager
        self.serializer = RowSerializer()
        self._row_count = row_count

    @classmethod
    def open(cls, path: str) -> 'Table':
        """打开（不存在则创建）数据文件，并由文件长度推算行数。"""
        pager = Pager(path)
        row_count = rows_in_file(pager.file_length)

        tail = pager.file_length % PAGE_SIZE
        if tail % ROW_SIZE and tail < ROWS_PER_PAGE * ROW_SIZE:
            logger.warning(f"数据文件 '{path}' 末尾存在 {tail % ROW_SIZE} 字节的残缺行，已忽略")
        if row_count > TABLE_MAX_ROWS:
            logger.warning(f"数据文件 '{path}' 超出表容量，只读取前 {TABLE_MAX_ROWS} 行")
            row_count = TABLE_MAX_ROWS

        logger.info(f"表已打开: '{path}'，共 {row_count} 行")
        return cls(pager, row_count)

    @property
    def row_count(self) -> int:
        return self._row_count

    @property
    def num_pages(self) -> int:
        return -(-self._row_count // ROWS_PER_PAGE)

    @property
    def closed(self) -> bool:
        return self.pager.closed

    def insert(self, row: Row) -> None:
        """
        在 row_count 处追加一行。表满时抛出 TableFullError，行数不变。
        row.id 按原样写入，不检查唯一性。
        """
        if self._row_count >= TABLE_MAX_ROWS:
            raise TableFullError(self._row_count, TABLE_MAX_ROWS)

        page_id, offset = row_location(self._row_count)
        page = self.pager.get_page(page_id)
        self.serializer.serialize_into(row, page.data, offset)
        page.mark_dirty()
        self._row_count += 1

    def read(self, row_num: int) -> Row:
        if row_num < 0 or row_num >= self._row_count:
            raise RowNotFoundError(row_num, self._row_count)
        page_id, offset = row_location(row_num)
        page = self.pager.get_page(page_id)
        return self.serializer.deserialize_from(page.data, offset)

    def rows(self) -> Iterator[Row]:
        """按行号顺序遍历全部行。"""
        for row_num in range(self._row_count):
            yield self.read(row_num)

    def close(self) -> None:
        """
        刷写所有被修改过的整页，以及未填满的尾页（只写已使用的行），然后关闭文件。
        从未加载或只被读取过的页跳过，文件中的内容已是其最新状态。
        某页刷写失败时仍继续刷写其余页，最后抛出第一个 I/O 错误。
        重复调用无副作用。
        """
        if self.pager.closed:
            return
        first_error = None
        try:
            full_pages, tail_rows = divmod(self._row_count, ROWS_PER_PAGE)
            pending = [(page_id, PAGE_SIZE) for page_id in range(full_pages)]
            if tail_rows > 0:
                pending.append((full_pages, tail_rows * ROW_SIZE))
            for page_id, size in pending:
                if not self.pager.is_dirty(page_id):
                    continue
                try:
                    self.pager.flush(page_id, size)
                except OSError as e:
                    logger.error(f"刷写页 {page_id} 失败: {e}")
                    if first_error is None:
                        first_error = e
        finally:
            self.pager.close()
        if first_error is not None:
            raise first_error
        logger.info(f"表已关闭: '{self.pager.path}'，共 {self._row_count} 行")


def open_table(path: str) -> Table:
    return Table.open(path)
