import os
from typing import Dict

from loguru import logger

from .constants import PAGE_SIZE, TABLE_MAX_PAGES
from .errors import PageOutOfRangeError
from .page import Page


class Pager:
    """
    管理单个数据文件及其页缓存。
    页在第一次访问时从文件懒加载，之后一直驻留缓存（不淘汰）；
    只有显式调用 flush 才会写回磁盘。
    """

    def __init__(self, path: str, page_size: int = PAGE_SIZE, max_pages: int = TABLE_MAX_PAGES):
        self.path = path
        self.page_size = page_size
        self.max_pages = max_pages
        self.cache: Dict[int, Page] = {}  # page_id -> Page
        self._file = None

        # 以 'r+b' 模式打开文件，如果不存在会报错。所以新文件先用 'w+b' 创建
        if not os.path.exists(path):
            self._file = open(self.path, 'w+b')
        else:
            self._file = open(self.path, 'r+b')
        self.file_length = os.path.getsize(self.path)
        logger.debug(f"打开数据文件 '{self.path}'，长度 {self.file_length} 字节")

    def _get_page_offset(self, page_id: int) -> int:
        """根据页ID计算文件内的偏移量 (页ID从0开始)"""
        return page_id * self.page_size

    def get_page(self, page_id: int) -> Page:
        """
        获取指定页，优先从缓存，否则从磁盘加载。
        文件长度不足一整页时，剩余部分按零填充。
        """
        if page_id < 0 or page_id >= self.max_pages:
            raise PageOutOfRangeError(page_id, self.max_pages)

        page = self.cache.get(page_id)
        if page is not None:
            return page

        self._file.seek(self._get_page_offset(page_id))
        data = self._file.read(self.page_size)
        page = Page(page_id, data=data, page_size=self.page_size)
        self.cache[page_id] = page
        logger.debug(f"加载页 {page_id}：从文件读取 {len(data)} 字节")
        return page

    def is_cached(self, page_id: int) -> bool:
        return page_id in self.cache

    def is_dirty(self, page_id: int) -> bool:
        """页已加载且自上次刷写后被修改过"""
        page = self.cache.get(page_id)
        return page is not None and page.is_dirty

    def flush(self, page_id: int, size: int = PAGE_SIZE) -> None:
        """
        将缓存中的页的前 size 字节写回文件。
        页不在缓存中属于内部一致性错误。
        """
        page = self.cache.get(page_id)
        if page is None:
            raise RuntimeError(f"Tried to flush null page {page_id}")
        offset = self._get_page_offset(page_id)
        self._file.seek(offset)
        self._file.write(page.to_bytes(size))
        self._file.flush()
        page.is_dirty = False
        self.file_length = max(self.file_length, offset + size)
        logger.debug(f"刷写页 {page_id}：{size} 字节，偏移 {offset}")

    @property
    def closed(self) -> bool:
        return self._file is None or self._file.closed

    def close(self) -> None:
        if self._file and not self._file.closed:
            self._file.close()
            self._file = None

    def __del__(self):
        # 确保对象被垃圾回收时，文件句柄也能被关闭
        self.close()
