# -*- coding: utf-8 -*-
"""
语句解析模块
把一行输入解析为 INSERT / SELECT 语句，并在进入存储层之前完成输入校验
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from dblite.storage.constants import EMAIL_SIZE, USERNAME_SIZE
from dblite.storage.row import MAX_ROW_ID, Row


class StatementType(Enum):
    """语句类型枚举"""
    INSERT = "INSERT"
    SELECT = "SELECT"


class PrepareErrorType(Enum):
    """语句解析错误类型"""
    SYNTAX_ERROR = "SYNTAX_ERROR"
    NEGATIVE_ID = "NEGATIVE_ID"
    ID_TOO_LARGE = "ID_TOO_LARGE"
    STRING_TOO_LONG = "STRING_TOO_LONG"
    UNRECOGNIZED_STATEMENT = "UNRECOGNIZED_STATEMENT"


class PrepareError(Exception):
    """语句解析错误，message 即展示给用户的提示"""

    def __init__(self, message: str, error_type: PrepareErrorType):
        super().__init__(message)
        self.message = message
        self.error_type = error_type


@dataclass
class Statement:
    """已解析的语句"""
    type: StatementType
    row_to_insert: Optional[Row] = None


def prepare_statement(user_input: str) -> Statement:
    """解析一行输入，失败时抛出 PrepareError"""
    if user_input.startswith("insert"):
        return _prepare_insert(user_input)
    if user_input.startswith("select"):
        return Statement(StatementType.SELECT)
    raise PrepareError(
        f"Unrecognized keyword at start of '{user_input}'.",
        PrepareErrorType.UNRECOGNIZED_STATEMENT,
    )


def _prepare_insert(user_input: str) -> Statement:
    parts = user_input.split()
    if len(parts) != 4 or parts[0] != "insert":
        raise PrepareError("Syntax error. Could not parse statement.", PrepareErrorType.SYNTAX_ERROR)
    _, id_str, username, email = parts

    try:
        row_id = int(id_str)
    except ValueError:
        raise PrepareError("Syntax error. Could not parse statement.", PrepareErrorType.SYNTAX_ERROR)
    if row_id < 0:
        raise PrepareError("ID must be positive.", PrepareErrorType.NEGATIVE_ID)
    if row_id > MAX_ROW_ID:
        raise PrepareError("ID is too large.", PrepareErrorType.ID_TOO_LARGE)

    # 字段宽度按编码后的字节数计算
    if len(username.encode('utf-8')) > USERNAME_SIZE:
        raise PrepareError("username is too long", PrepareErrorType.STRING_TOO_LONG)
    if len(email.encode('utf-8')) > EMAIL_SIZE:
        raise PrepareError("email is too long", PrepareErrorType.STRING_TOO_LONG)

    return Statement(StatementType.INSERT, Row(row_id, username, email))
