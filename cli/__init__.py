"""
dblite 命令行：语句解析、元命令与交互式主循环。
"""
