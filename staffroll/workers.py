"""Worker roles kept on the staff roll."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass
class Worker(ABC):
    """A member of staff: identifier, name and department number."""

    worker_id: int
    name: str
    dept_id: int

    @property
    @abstractmethod
    def dept_name(self) -> str:
        """Name of the post this worker holds."""

    @property
    @abstractmethod
    def duty(self) -> str:
        """What the post is responsible for."""

    def info_line(self) -> str:
        """One line describing the worker, as shown in listings."""
        return (
            f"职工编号： {self.worker_id}"
            f" \t职工姓名： {self.name}"
            f" \t岗位：{self.dept_name}"
            f" \t岗位职责：{self.duty}"
        )


class Employee(Worker):
    """An ordinary member of staff."""

    @property
    def dept_name(self) -> str:
        return "员工"

    @property
    def duty(self) -> str:
        return "完成经理交给的任务"


class Manager(Worker):
    """A manager, passing work on to employees."""

    @property
    def dept_name(self) -> str:
        return "经理"

    @property
    def duty(self) -> str:
        return "完成老板交给的任务,并下发任务给员工"


class Boss(Worker):
    """The head of the company."""

    @property
    def dept_name(self) -> str:
        return "总裁"

    @property
    def duty(self) -> str:
        return "管理公司所有事务"


_ROLES: dict[int, type[Worker]] = {1: Employee, 2: Manager, 3: Boss}


def create_worker(worker_id: int, name: str, dept_id: int) -> Worker:
    """Build the worker whose role matches the department number (1, 2 or 3)."""
    try:
        role = _ROLES[dept_id]
    except KeyError:
        raise ValueError(f"unknown department: {dept_id}") from None
    return role(worker_id, name, dept_id)