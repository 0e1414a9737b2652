# -*- coding: utf-8 -*-
"""
CLI接口模块
封装命令行交互逻辑和用户界面
"""

import sys
from typing import Optional, TextIO

from loguru import logger
from rich.console import Console
from rich.table import Table as RichTable

from cli.statement import PrepareError, Statement, StatementType, prepare_statement
from dblite.storage import constants
from dblite.storage.errors import StorageException, TableFullError
from dblite.storage.table import Table


class CLIInterface:
    """命令行接口类"""

    PROMPT = "dblite > "

    def __init__(self, table: Table, input_stream: Optional[TextIO] = None,
                 output_stream: Optional[TextIO] = None):
        self.table = table
        self.input = input_stream or sys.stdin
        self.output = output_stream or sys.stdout
        self.console = Console(file=self.output, highlight=False)

    def _print(self, text: str = "", end: str = "\n"):
        print(text, end=end, file=self.output, flush=True)

    def print_help(self):
        """打印帮助信息"""
        self._print("Statements:")
        self._print("  insert <id> <username> <email>")
        self._print("  select")
        self._print("Meta commands:")
        self._print("  .constants - show row and page geometry")
        self._print("  .help      - show this message")
        self._print("  .exit      - flush the table to disk and quit")

    def print_constants(self):
        """用 Rich 表格打印行/页几何常量"""
        table = RichTable(show_header=True, header_style="bold cyan")
        table.add_column("Constant")
        table.add_column("Value", justify="right")
        for name, value in constants.as_dict().items():
            table.add_row(name, str(value))
        self.console.print(table)

    def do_meta_command(self, command: str) -> bool:
        """
        处理以 '.' 开头的元命令
        返回True表示继续运行，False表示退出
        """
        if command == ".exit":
            self.table.close()
            self._print("Exiting.")
            return False
        if command == ".constants":
            self.print_constants()
            return True
        if command == ".help":
            self.print_help()
            return True
        self._print(f"Unrecognized command '{command}'")
        return True

    def execute_statement(self, statement: Statement):
        """执行已解析的语句并输出结果"""
        self._print("Executing")
        if statement.type == StatementType.INSERT:
            try:
                self.table.insert(statement.row_to_insert)
            except TableFullError as e:
                logger.warning(f"插入失败: {e}")
                self._print("Error: Table full.")
        elif statement.type == StatementType.SELECT:
            for row in self.table.rows():
                self._print(str(row))

    def process_input(self, user_input: str) -> bool:
        """
        处理一行输入
        返回True表示继续运行，False表示退出
        """
        if not user_input:
            return True
        if user_input.startswith("."):
            return self.do_meta_command(user_input)

        try:
            statement = prepare_statement(user_input)
        except PrepareError as e:
            self._print(e.message)
            return True

        try:
            self.execute_statement(statement)
        except StorageException as e:
            logger.error(f"语句执行失败: {e}")
            self._print(f"Error: {e.message}")
        return True

    def run(self):
        """运行CLI主循环，遇到 .exit 或输入结束时关闭表并返回"""
        while True:
            self._print(self.PROMPT, end="")
            line = self.input.readline()
            if not line:
                # 输入结束，按 .exit 处理
                self.do_meta_command(".exit")
                break
            if not self.process_input(line.strip()):
                break
