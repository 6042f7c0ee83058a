# staffroll

An interactive console roster of a company's staff. Every worker has a
numeric id, a name and a post. The post is one of these:

| post id | post            | duty                                                          |
|---------|-----------------|---------------------------------------------------------------|
| 1       | 员工 (employee) | carries out the tasks a manager hands over                    |
| 2       | 经理 (manager)  | carries out the boss's tasks and passes work on to employees  |
| 3       | 总裁 (boss)     | runs everything in the company                                |

The roster is kept in a text file, `empFile.txt` in the current directory
unless another file is named. Each line of that file holds one worker as
`id name post-id`, separated by spaces. Every change is written back to the
file straight away.

## Installing

```
pip install .
```

## Running

```
staffroll
staffroll --file other.txt
```

On start the program reads the roster file and reports that it does not
exist, that it is empty, or how many workers it holds. It then shows a menu
and reads the number of a choice:

- `0` exits.
- `1` adds one or more workers. A worker given a post other than 1, 2 or 3
  is reported as bad input and left out.
- `2` lists every worker.
- `3` removes a worker by id.
- `4` changes a worker's id, name and post.
- `5` finds a worker by id, or every worker with a given name.
- `6` sorts the roster by id, ascending for choice `1` and descending for
  anything else, and then lists it.
- `7` does nothing.

Names are read as single words, with no spaces. Where a number is expected
and something else is typed, the program prints `输入有误` and shows the menu
again. The program also ends when its input runs out.

## Using it from Python

```python
from staffroll.roster import WorkerManager
from staffroll.workers import create_worker

manager = WorkerManager("empFile.txt")
manager.load()
manager.add([create_worker(1, "Zhang", 1), create_worker(2, "Li", 3)])
manager.sort(ascending=False)
print(manager.find_by_id(2).info_line())
```

- `staffroll.workers.create_worker(worker_id, name, dept_id)` builds an
  `Employee`, `Manager` or `Boss` for post 1, 2 or 3 and raises `ValueError`
  for any other post. Each worker has `worker_id`, `name`, `dept_id`,
  `dept_name`, `duty` and `info_line()`.
- `staffroll.roster.WorkerManager` holds the roster. `load()` returns a
  `LoadState` (`MISSING`, `EMPTY` or `LOADED`); `add`, `remove`, `replace`
  and `sort` save the file after changing the roster; `remove` and `replace`
  raise `KeyError` for an unknown id. `index_of`, `find_by_id` and
  `find_by_name` look workers up.
- `staffroll.roster.read_workers` and `staffroll.roster.write_workers` read
  and write a roster file directly.
- `staffroll.cli.run(manager, stdin, stdout)` runs the menu loop on any pair
  of text streams, and `staffroll.cli.menu_text()` returns the menu.

## What it does not do

Menu choice `7` does not clear the roster file; to empty the roster, delete
or empty the file by hand. The program does not pause between screens or
clear the terminal.

## Running the tests

```
pip install .[test]
pytest
```