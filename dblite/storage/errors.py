# -*- coding: utf-8 -*-
"""
存储异常定义 - 表容量、页寻址与行寻址相关的错误

文件 I/O 错误（OSError）不在此包装，直接原样抛给调用方。
"""
from typing import Dict, Optional
from enum import Enum


class StorageErrorType(Enum):
    """存储错误类型"""
    TABLE_FULL = "TABLE_FULL"
    PAGE_OUT_OF_RANGE = "PAGE_OUT_OF_RANGE"
    ROW_NOT_FOUND = "ROW_NOT_FOUND"


class StorageException(Exception):
    """存储异常基类"""

    def __init__(self, message: str, error_type: StorageErrorType, details: Optional[Dict] = None):
        super().__init__(message)
        self.message = message
        self.error_type = error_type
        self.details = details or {}

    def __str__(self):
        return f"存储异常 [{self.error_type.value}]: {self.message}"


class TableFullError(StorageException):
    """表已满，无法继续插入"""

    def __init__(self, row_count: int, max_rows: int):
        super().__init__(
            f"Table full: {row_count} of {max_rows} rows used",
            StorageErrorType.TABLE_FULL,
            {"row_count": row_count, "max_rows": max_rows},
        )


class PageOutOfRangeError(StorageException):
    """页号超出表的最大页数"""

    def __init__(self, page_id: int, max_pages: int):
        super().__init__(
            f"Tried to fetch page number out of bounds. {page_id} >= {max_pages}",
            StorageErrorType.PAGE_OUT_OF_RANGE,
            {"page_id": page_id, "max_pages": max_pages},
        )


class RowNotFoundError(StorageException):
    """行号不在 [0, row_count) 范围内"""

    def __init__(self, row_num: int, row_count: int):
        super().__init__(
            f"Row {row_num} not found ({row_count} rows stored)",
            StorageErrorType.ROW_NOT_FOUND,
            {"row_num": row_num, "row_count": row_count},
        )
