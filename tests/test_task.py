from orionflow.object_store import ObjectRef
from orionflow.task import Task


def test_work_receives_dependency_values():
    task = Task("sum", [ObjectRef("a"), ObjectRef("b")], lambda args: sum(args))
    assert task.run([3, 4]) == 7


def test_zero_argument_work_ignores_args():
    task = Task("const", [], lambda: "done")
    assert task.run([]) == "done"
    assert task.run([1, 2]) == "done"


def test_string_deps_become_refs():
    task = Task("t", ["x", ObjectRef("y")], lambda args: args)
    assert task.deps == (ObjectRef("x"), ObjectRef("y"))


def test_run_passes_a_list():
    task = Task("t", ["a"], lambda args: args)
    assert task.run(iter([5])) == [5]


def test_varargs_work_gets_list():
    task = Task("t", [], lambda *args: args)
    assert task.run([9]) == ([9],)