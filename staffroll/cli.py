"""Interactive menu for keeping the staff roll."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator
from typing import TextIO

from staffroll.roster import DEFAULT_FILENAME, LoadState, WorkerManager
from staffroll.workers import create_worker

_MENU_LINES = (
    "********************************************",
    "*********  欢迎使用职工管理系统！ **********",
    "*************  0.退出管理程序  *************",
    "*************  1.增加职工信息  *************",
    "*************  2.显示职工信息  *************",
    "*************  3.删除离职职工  *************",
    "*************  4.修改职工信息  *************",
    "*************  5.查找职工信息  *************",
    "*************  6.按照编号排序  *************",
    "*************  7.清空所有文档  *************",
    "********************************************",
    "",
)

_ROLE_CHOICES = ("1、普通职工", "2、经理", "3、老板")
_NO_RECORDS = "文件不存在或记录为空"
_NOT_FOUND = "查无此人"
_BAD_INPUT = "输入有误"


def menu_text() -> str:
    """The main menu as printed before every choice."""
    return "\n".join(_MENU_LINES) + "\n"


class _BadInput(ValueError):
    """A number was expected and something else was typed."""


class _Reader:
    """Whitespace-separated tokens read from a text stream."""

    def __init__(self, stream: TextIO) -> None:
        self._tokens = self._split(stream)

    @staticmethod
    def _split(stream: TextIO) -> Iterator[str]:
        for line in stream:
            yield from line.split()

    def word(self) -> str:
        try:
            return next(self._tokens)
        except StopIteration:
            raise EOFError from None

    def number(self) -> int:
        token = self.word()
        try:
            return int(token)
        except ValueError:
            raise _BadInput(token) from None


class _Session:
    def __init__(self, manager: WorkerManager, reader: _Reader, out: TextIO) -> None:
        self.manager = manager
        self.reader = reader
        self.out = out
        self.actions = {
            1: self.add,
            2: self.show,
            3: self.delete,
            4: self.modify,
            5: self.find,
            6: self.sort,
            7: lambda: None,
        }

    def say(self, *parts: object) -> None:
        print(*parts, sep="", file=self.out)

    def ask_role(self, prompt: str) -> int:
        self.say(prompt)
        for line in _ROLE_CHOICES:
            self.say(line)
        return self.reader.number()

    def loop(self) -> None:
        while True:
            self.out.write(menu_text())
            self.say("请输入您的选择 :")
            try:
                choice = self.reader.number()
                if choice == 0:
                    self.say("欢迎下次使用")
                    return
                action = self.actions.get(choice)
                if action is not None:
                    action()
            except _BadInput:
                self.say(_BAD_INPUT)
            except EOFError:
                return

    def add(self) -> None:
        self.say("请输入增加的职工数量")
        count = self.reader.number()
        if count <= 0:
            self.say(_BAD_INPUT)
            return
        new = []
        for n in range(1, count + 1):
            self.say(f"请输入第 {n} 个新职工编号 ：")
            worker_id = self.reader.number()
            self.say(f"请输入第 {n} 个新职工姓名 : ")
            name = self.reader.word()
            dept_id = self.ask_role("请选择该职工的岗位 : ")
            try:
                new.append(create_worker(worker_id, name, dept_id))
            except ValueError:
                self.say(_BAD_INPUT)
        added = self.manager.add(new)
        self.say(f"成功添加{added}名新职工！")

    def show(self) -> None:
        if self.manager.is_empty:
            self.say(_NO_RECORDS)
            return
        for worker in self.manager:
            self.say(worker.info_line())

    def delete(self) -> None:
        if self.manager.is_empty:
            self.say("文件不存在或记录为空 ! ")
            return
        self.say("请输入想要删除的职工号")
        worker_id = self.reader.number()
        try:
            self.manager.remove(worker_id)
        except KeyError:
            self.say("删除失败！")
        else:
            self.say("删除成功!")

    def modify(self) -> None:
        if self.manager.is_empty:
            self.say("文件不存在或记录为空!")
            return
        self.say("请输入修改职工的编号")
        worker_id = self.reader.number()
        if self.manager.find_by_id(worker_id) is None:
            self.say(_NOT_FOUND)
            return
        self.say(f"查到: {worker_id}号员工，请输入新职工号")
        new_id = self.reader.number()
        self.say("请输入新姓名 ：")
        new_name = self.reader.word()
        dept_id = self.ask_role("请输入岗位 ： ")
        try:
            worker = create_worker(new_id, new_name, dept_id)
        except ValueError:
            self.say(_BAD_INPUT)
            return
        self.manager.replace(worker_id, worker)
        self.say("修改成功!")

    def find(self) -> None:
        if self.manager.is_empty:
            self.say(_NO_RECORDS)
            return
        self.say("请输入查找方法")
        self.say("1.按职工编号查找")
        self.say("2.按姓名查找")
        select = self.reader.number()
        if select == 1:
            self.say("请输入查找的职工编号")
            worker = self.manager.find_by_id(self.reader.number())
            if worker is None:
                self.say(_NOT_FOUND)
            else:
                self.say("查找成功！该职工信息如下 : ")
                self.say(worker.info_line())
        elif select == 2:
            self.say("请输入查找的姓名")
            matches = self.manager.find_by_name(self.reader.word())
            for worker in matches:
                self.say(f"查找成功，职工编号为：{worker.worker_id} 号的信息如下 ： ")
                self.say(worker.info_line())
            if not matches:
                self.say(_NOT_FOUND)

    def sort(self) -> None:
        if self.manager.is_empty:
            self.say(_NO_RECORDS)
            return
        self.say("请选择排序方法 ： ")
        self.say("1、按职工号进行升序")
        self.say("2、按职工号进行降序")
        select = self.reader.number()
        self.manager.sort(ascending=select == 1)
        self.say("排序成功,排序后结果为：")
        self.show()


def run(manager: WorkerManager, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
    """Drive the menu until the user quits or input runs out."""
    reader = _Reader(sys.stdin if stdin is None else stdin)
    _Session(manager, reader, sys.stdout if stdout is None else stdout).loop()


def main(argv: list[str] | None = None) -> int:
    """Load the roll file and start the menu."""
    parser = argparse.ArgumentParser(prog="staffroll", description="Keep a staff roll.")
    parser.add_argument("-f", "--file", default=DEFAULT_FILENAME, help="roll file to use")
    args = parser.parse_args(argv)

    manager = WorkerManager(args.file)
    state = manager.load()
    if state is LoadState.MISSING:
        print("文件不存在")
    elif state is LoadState.EMPTY:
        print("文件为空!")
    else:
        print(f"职工个数为 : {len(manager)}")
    run(manager, sys.stdin, sys.stdout)
    return 0