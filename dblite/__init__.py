"""
dblite: 单表、定长行、分页存储的极简记录库。
"""

from .storage import Row, Table, TableFullError, open_table

__version__ = "0.1.0"
