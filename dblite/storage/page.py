"""
页面抽象。

页是磁盘 I/O 与缓存的基本单位：一块 PAGE_SIZE 字节的缓冲区，
内部按 ROW_SIZE 存放整数条行记录，不含页头。
"""

from typing import Optional

from .constants import PAGE_SIZE


class Page:
    """
    定长页缓冲区，记录页号与脏标记。
    """
    def __init__(self, page_id: int, data: Optional[bytes] = None, page_size: int = PAGE_SIZE):
        self.page_id = page_id
        self.page_size = page_size
        self.data = bytearray(page_size)
        if data:
            # 短读：文件末尾之后的字节保持为零
            self.data[:len(data)] = data[:page_size]
        self.is_dirty = False

    def to_bytes(self, size: Optional[int] = None) -> bytes:
        """
        返回页内容；给出 size 时只返回前 size 字节（用于刷写未填满的尾页）。
        """
        if size is None:
            return bytes(self.data)
        return bytes(self.data[:size])

    def mark_dirty(self) -> None:
        self.is_dirty = True

    def __repr__(self) -> str:
        return f"<Page id={self.page_id} size={len(self.data)} bytes dirty={self.is_dirty}>"
