# main.py

import argparse
import sys

from loguru import logger

from cli.cli_interface import CLIInterface
from dblite.storage.table import Table


def setup_logging(level: str = "WARNING", log_file: str = None):
    """日志输出到 stderr，避免与 REPL 的 stdout 输出混在一起"""
    logger.remove()
    logger.add(sys.stderr, level=level)
    if log_file:
        logger.add(log_file, level="DEBUG")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(prog="dblite", description="单表定长行分页存储的交互式命令行")
    parser.add_argument('filename', type=str, help='数据库文件路径（不存在则创建）')
    parser.add_argument('--log-level', type=str, default='WARNING',
                        choices=['TRACE', 'DEBUG', 'INFO', 'WARNING', 'ERROR'], help='日志级别')
    parser.add_argument('--log-file', type=str, default=None, help='额外写入的日志文件')
    return parser.parse_args(argv)


def main(argv=None) -> int:
    """主函数，启动数据库的交互式命令行。"""
    args = parse_args(argv)
    setup_logging(args.log_level, args.log_file)

    table = None
    try:
        table = Table.open(args.filename)
        cli = CLIInterface(table)
        cli.run()
    except OSError as e:
        logger.error(f"数据文件 I/O 错误: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1
    finally:
        # 确保系统在退出时能正确关闭
        if table is not None:
            table.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
