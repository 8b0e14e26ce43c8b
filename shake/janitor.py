"""Scoped cleanup list for releasing bindings when a shake stops."""

import logging
from typing import Any, Callable, List, Optional, Tuple

logger = logging.getLogger(__name__)


class Janitor:
    """Ordered collection of release actions, each run exactly once.

    Actions run in reverse registration order (last added, first released).
    A cleanup started from inside one of its own actions is ignored, so an
    action that indirectly stops the owner cannot run anything twice.
    """

    def __init__(self) -> None:
        self._tasks: List[Tuple[Any, Optional[str]]] = []
        self._cleaning = False
        self._destroyed = False

    def add(self, task: Any, method_name: Optional[str] = None) -> Any:
        """Register a release action.

        Args:
            task: A callable, or an object whose ``method_name`` is called
            method_name: Name of the method to call on ``task`` at cleanup

        Returns:
            The task, so connections can be added inline
        """
        if self._destroyed:
            # Nothing will ever clean this up, release it now
            self._run(task, method_name)
            return task
        self._tasks.append((task, method_name))
        return task

    def cleanup(self) -> None:
        """Run and forget every registered action."""
        if self._cleaning:
            return

        self._cleaning = True
        first_error: Optional[BaseException] = None
        try:
            while self._tasks:
                task, method_name = self._tasks.pop()
                try:
                    self._run(task, method_name)
                except Exception as e:
                    logger.exception("Cleanup action %r failed", task)
                    if first_error is None:
                        first_error = e
        finally:
            self._cleaning = False

        if first_error is not None:
            raise first_error

    def destroy(self) -> None:
        """Clean up and release any later additions immediately."""
        self._destroyed = True
        self.cleanup()

    @property
    def is_destroyed(self) -> bool:
        return self._destroyed

    def __len__(self) -> int:
        return len(self._tasks)

    @staticmethod
    def _run(task: Any, method_name: Optional[str]) -> None:
        if method_name is None:
            callback: Callable[[], Any] = task
        else:
            callback = getattr(task, method_name)
        callback()
