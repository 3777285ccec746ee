class TaskRunner:

    def __init__(self, executor, logger):
        self.executor = executor
        self.logger = logger

    def log_failure(self, future):
        e = future.exception()
        if e is not None:
            self.logger.error(
                'detached task failed, error={!r}'.format(e),
                exc_info=(type(e), e, e.__traceback__))

    def submit(self, func, *args):
        future = self.executor.submit(func, *args)
        future.add_done_callback(self.log_failure)
        return future

    def fan_out(self, func, items):
        return list(self.executor.map(func, items or []))
