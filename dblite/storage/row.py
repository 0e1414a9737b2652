"""
行记录与定长行编解码。

磁盘上的行布局（共 ROW_SIZE = 291 字节）：
- id: 4 字节大端无符号整数
- email: EMAIL_SIZE 字节，右侧补零
- username: USERNAME_SIZE 字节，右侧补零

注意字段顺序为 id、email、username，与 Row 的声明顺序不同；
为兼容已有的数据文件，保持该顺序不变。
"""

import struct
from dataclasses import dataclass
from typing import Union

from .constants import EMAIL_SIZE, USERNAME_SIZE

MAX_ROW_ID = 0xFFFFFFFF


@dataclass
class Row:
    """一条逻辑记录"""
    id: int
    username: str
    email: str

    def __str__(self) -> str:
        return f" {self.id} | {self.username} | {self.email}"


class RowSerializer:
    """
    定长行序列化器。超长文本在此被截断，不做拒绝；
    长度校验由上层（CLI 语句解析）负责。
    """
    ROW_STRUCT = struct.Struct(f'>I{EMAIL_SIZE}s{USERNAME_SIZE}s')

    def __init__(self, encoding: str = 'utf-8'):
        self.encoding = encoding

    def serialize(self, row: Row) -> bytes:
        return self.ROW_STRUCT.pack(*self._pack_args(row))

    def serialize_into(self, row: Row, buffer: bytearray, offset: int) -> None:
        """直接写入页缓冲区的 [offset, offset + ROW_SIZE) 区间。"""
        self.ROW_STRUCT.pack_into(buffer, offset, *self._pack_args(row))

    def deserialize(self, row_data: bytes) -> Row:
        return self._build_row(self.ROW_STRUCT.unpack(row_data))

    def deserialize_from(self, buffer: Union[bytes, bytearray], offset: int) -> Row:
        return self._build_row(self.ROW_STRUCT.unpack_from(buffer, offset))

    def _pack_args(self, row: Row):
        if not 0 <= row.id <= MAX_ROW_ID:
            raise ValueError(f"Row id {row.id} does not fit in an unsigned 32-bit field")
        email_bytes = self._to_fixed(row.email, EMAIL_SIZE)
        username_bytes = self._to_fixed(row.username, USERNAME_SIZE)
        return row.id, email_bytes, username_bytes

    def _to_fixed(self, value: str, length: int) -> bytes:
        val_bytes = value.encode(self.encoding)
        if len(val_bytes) > length:
            val_bytes = val_bytes[:length]
        else:
            val_bytes = val_bytes.ljust(length, b'\x00')
        return val_bytes

    def _from_fixed(self, field: bytes) -> str:
        # 字段在第一个零字节处结束；截断可能切开多字节字符，丢弃残缺部分
        return field.split(b'\x00', 1)[0].decode(self.encoding, errors='ignore')

    def _build_row(self, unpacked) -> Row:
        row_id, email_bytes, username_bytes = unpacked
        return Row(
            id=row_id,
            username=self._from_fixed(username_bytes),
            email=self._from_fixed(email_bytes),
        )
