"""Units of work with dependencies on stored objects."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, List, Sequence, Tuple, Union

from .object_store import ObjectRef

_CO_VARARGS = 0x04


def _takes_arguments(fn: Callable[..., Any]) -> bool:
    """Tell whether ``fn`` accepts a positional argument.

    Callables whose code cannot be examined are assumed to take one.
    """
    bound_self = getattr(fn, "__self__", None)
    func = getattr(fn, "__func__", fn)
    code = getattr(func, "__code__", None)
    if code is None:
        return True
    if code.co_flags & _CO_VARARGS:
        return True
    count = code.co_argcount
    if bound_self is not None and func is not fn:
        count -= 1
    return count > 0


@dataclass
class Task:
    """A named callable whose inputs are the values of its dependencies.

    ``work`` either takes one argument, the list of dependency values in
    ``deps`` order, or takes no arguments at all.
    """

    id: str
    deps: Sequence[Union[ObjectRef, str]]
    work: Callable[..., Any]
    _call: Callable[[List[Any]], Any] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        self.deps: Tuple[ObjectRef, ...] = tuple(
            dep if isinstance(dep, ObjectRef) else ObjectRef(dep) for dep in self.deps
        )
        work = self.work
        if _takes_arguments(work):
            self._call = work
        else:
            self._call = lambda _args: work()

    def run(self, args: Iterable[Any]) -> Any:
        """Run the work with the given dependency values."""
        return self._call(list(args))