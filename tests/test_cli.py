import io

import pytest

from staffroll.cli import main, menu_text, run
from staffroll.roster import WorkerManager, read_workers, write_workers
from staffroll.workers import Boss, Employee, Manager


@pytest.fixture
def roll_path(tmp_path):
    return tmp_path / "emp.txt"


def _session(path, text):
    manager = WorkerManager(path)
    manager.load()
    out = io.StringIO()
    run(manager, io.StringIO(text), out)
    return manager, out.getvalue()


def test_menu_text_lists_options():
    text = menu_text()
    assert "欢迎使用职工管理系统！" in text
    assert "0.退出管理程序" in text
    assert "7.清空所有文档" in text


def test_add_and_show(roll_path):
    manager, out = _session(roll_path, "1\n1\n7 Bob 2\n2\n0\n")
    assert "成功添加1名新职工！" in out
    assert Manager(7, "Bob", 2).info_line() in out
    assert read_workers(roll_path) == [Manager(7, "Bob", 2)]
    assert out.rstrip().endswith("欢迎下次使用")


def test_add_with_bad_department(roll_path):
    manager, out = _session(roll_path, "1 1 7 Bob 9 0\n")
    assert "输入有误" in out
    assert manager.workers == []


def test_add_rejects_non_positive_count(roll_path):
    manager, out = _session(roll_path, "1 0 0\n")
    assert "输入有误" in out
    assert manager.is_empty


def test_show_empty(roll_path):
    _, out = _session(roll_path, "2\n")
    assert "文件不存在或记录为空" in out


def test_delete(roll_path):
    write_workers(roll_path, [Employee(1, "A", 1), Boss(2, "B", 3)])
    _, out = _session(roll_path, "3 1 3 1 0\n")
    assert "删除成功!" in out
    assert "删除失败！" in out
    assert read_workers(roll_path) == [Boss(2, "B", 3)]


def test_modify(roll_path):
    write_workers(roll_path, [Employee(1, "A", 1)])
    _, out = _session(roll_path, "4 1 5 Zed 3 4 99 0\n")
    assert "修改成功!" in out
    assert "查无此人" in out
    assert read_workers(roll_path) == [Boss(5, "Zed", 3)]


def test_find_by_id_and_name(roll_path):
    write_workers(roll_path, [Employee(1, "A", 1), Manager(2, "A", 2)])
    _, out = _session(roll_path, "5 1 2 5 2 A 5 2 Q 0\n")
    assert "查找成功！该职工信息如下 : " in out
    assert out.count(Manager(2, "A", 2).info_line()) == 2
    assert Employee(1, "A", 1).info_line() in out
    assert "查无此人" in out


def test_sort_descending(roll_path):
    write_workers(roll_path, [Employee(1, "A", 1), Boss(3, "C", 3), Manager(2, "B", 2)])
    _, out = _session(roll_path, "6 2 0\n")
    assert "排序成功,排序后结果为：" in out
    ids = [worker.worker_id for worker in read_workers(roll_path)]
    assert ids == sorted(ids, reverse=True)


def test_bad_menu_token(roll_path):
    _, out = _session(roll_path, "abc\n0\n")
    assert "输入有误" in out
    assert "欢迎下次使用" in out


def test_main_with_missing_file(roll_path, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("0\n"))
    assert main(["--file", str(roll_path)]) == 0
    out = capsys.readouterr().out
    assert out.startswith("文件不存在")
    assert "欢迎下次使用" in out


def test_main_reports_count(roll_path, monkeypatch, capsys):
    write_workers(roll_path, [Employee(1, "A", 1), Boss(2, "B", 3)])
    monkeypatch.setattr("sys.stdin", io.StringIO("0\n"))
    assert main(["-f", str(roll_path)]) == 0
    assert "职工个数为 : 2" in capsys.readouterr().out