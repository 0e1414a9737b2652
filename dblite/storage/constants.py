"""
存储模块常量定义

行与页的几何参数在构建时固定，不可配置；派生常量均由基础尺寸计算得出。
"""

# --- 行结构常量 ---
ID_SIZE = 4            # id: 4字节无符号整数（大端序）
USERNAME_SIZE = 32     # username 定长字段
EMAIL_SIZE = 255       # email 定长字段
ROW_SIZE = ID_SIZE + USERNAME_SIZE + EMAIL_SIZE  # 291 字节

# --- 页与表容量常量 ---
PAGE_SIZE = 4096  # 4KB 页大小
ROWS_PER_PAGE = PAGE_SIZE // ROW_SIZE  # 14
TABLE_MAX_PAGES = 100
TABLE_MAX_ROWS = ROWS_PER_PAGE * TABLE_MAX_PAGES  # 1400


def as_dict():
    """按声明顺序返回全部常量，供 CLI 的 .constants 命令展示。"""
    return {
        "ID_SIZE": ID_SIZE,
        "USERNAME_SIZE": USERNAME_SIZE,
        "EMAIL_SIZE": EMAIL_SIZE,
        "ROW_SIZE": ROW_SIZE,
        "PAGE_SIZE": PAGE_SIZE,
        "ROWS_PER_PAGE": ROWS_PER_PAGE,
        "TABLE_MAX_PAGES": TABLE_MAX_PAGES,
        "TABLE_MAX_ROWS": TABLE_MAX_ROWS,
    }
