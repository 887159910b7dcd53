import asyncio
import logging

from app.core.logging import ContextFilter, LogContext, get_logger


class ListHandler(logging.Handler):
    def __init__(self):
        super().__init__()
        self.records = []

    def emit(self, record):
        self.records.append(record)


def capture(name):
    logger = get_logger(name)
    handler = ListHandler()
    handler.addFilter(ContextFilter())
    logger.addHandler(handler)
    logger.setLevel(logging.INFO)
    logger.propagate = False
    return logger, handler


def test_context_is_kept_per_task_across_awaits():
    logger, handler = capture("tests.log_context_tasks")

    async def review(seller_id, delay):
        with LogContext(seller_id=seller_id):
            await asyncio.sleep(delay)
            logger.info(f"reviewed {seller_id}")

    async def main():
        await asyncio.gather(review("A", 0.02), review("B", 0.01))
        logger.info("after")

    asyncio.run(main())

    tagged = {r.getMessage(): getattr(r, "seller_id", None) for r in handler.records}
    assert tagged == {"reviewed A": "A", "reviewed B": "B", "after": None}


def test_nested_context_is_restored_and_extra_wins():
    logger, handler = capture("tests.log_context_nested")

    with LogContext(user_id=7):
        with LogContext(seller_id=3):
            logger.info("inner")
        logger.info("outer", extra={"user_id": 99})
    logger.info("none")

    inner, outer, none = handler.records
    assert (inner.user_id, inner.seller_id) == (7, 3)
    assert outer.user_id == 99 and not hasattr(outer, "seller_id")
    assert not hasattr(none, "user_id")
