import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Callable

from django.conf import settings
from django.db import connections, transaction

from .singleton import Singleton

logger = logging.getLogger(__name__)


class BackgroundTaskRunner( Singleton ):
    """
    Fire-and-forget execution of side-effect work (notifications, etc.).

    Work handed to the runner is detached from the caller:
    1. Scheduling via run_after_commit() defers it until the surrounding
       transaction commits, and drops it if that transaction rolls back.
    2. It runs on a small worker thread pool so the request never waits.
    3. Any exception raised by the task is logged here and never reaches
       the code that scheduled it.

    With settings.UNIT_TESTING the task runs inline (still isolated from
    exceptions) so tests observe its effects deterministically.
    """

    def __init_singleton__(self):
        self._executor = ThreadPoolExecutor(
            max_workers = settings.NOTIFY_BACKGROUND_WORKERS,
            thread_name_prefix = 'Background-Task',
        )
        return

    def run_after_commit( self, name : str, task_func : Callable, *args, **kwargs ) -> None:
        logger.debug( f'Queuing background task {name} for after commit.' )
        transaction.on_commit(
            lambda: self.run( name, task_func, *args, **kwargs ),
            robust = True,
        )
        return

    def run( self, name : str, task_func : Callable, *args, **kwargs ) -> None:
        if settings.UNIT_TESTING:
            self._execute( name, task_func, args, kwargs )
            return
        self._executor.submit( self._execute_in_thread, name, task_func, args, kwargs )
        return

    def _execute_in_thread( self, name, task_func, args, kwargs ):
        try:
            self._execute( name, task_func, args, kwargs )
        finally:
            # Worker threads own their DB connections
            connections.close_all()
        return

    def _execute( self, name, task_func, args, kwargs ):
        try:
            logger.debug( f'Executing background task {name}.' )
            task_func( *args, **kwargs )
        except Exception:
            logger.exception( f'Error during background task {name}.' )
        return
