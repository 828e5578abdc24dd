"""
Lifecycle logging plugin.

Logs when a test class starts and finishes, when each test starts and
finishes with its duration, and the exception of any failing test. The
failure is only reported; the outcome is left to pytest.

Opt in per class or module:

    @pytest.mark.usefixtures("lifecycle_logger")
    class TestSomething: ...
"""
import logging
import time
from datetime import datetime

import pytest

logger = logging.getLogger("lifecycle")

TIME_FORMAT = "%Y-%m-%d %H:%M:%S"
BANNER = "=" * 60


def _now() -> str:
    return datetime.now().strftime(TIME_FORMAT)


@pytest.fixture(scope="class")
def lifecycle_class_logger(request):
    """Banner before the first and after the last test of a class."""
    name = request.cls.__name__ if request.cls else request.node.name
    logger.info(BANNER)
    logger.info(f"Starting test class: {name}")
    logger.info(f"Time: {_now()}")
    logger.info(BANNER)
    yield name
    logger.info(BANNER)
    logger.info(f"Completed test class: {name}")
    logger.info(f"Time: {_now()}")
    logger.info(BANNER)


@pytest.fixture
def lifecycle_logger(request, lifecycle_class_logger):
    """Start/end lines and duration around every test."""
    test_name = request.node.name
    logger.info(f"[lifecycle] Starting test: {test_name} in {lifecycle_class_logger}")
    logger.info(f"[lifecycle] Start time: {_now()}")
    started = time.perf_counter()
    yield
    duration_ms = (time.perf_counter() - started) * 1000
    logger.info(f"[lifecycle] Completed test: {test_name}")
    logger.info(f"[lifecycle] Duration: {duration_ms:.0f} ms")
    logger.info(f"[lifecycle] End time: {_now()}")


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    outcome = yield
    report = outcome.get_result()
    if report.when != "call" or not report.failed or call.excinfo is None:
        return
    if "lifecycle_logger" not in getattr(item, "fixturenames", ()):
        return
    logger.info(f"[lifecycle] Test failed: {item.name}")
    logger.info(f"[lifecycle] Exception: {call.excinfo.typename}")
    logger.info(f"[lifecycle] Message: {call.excinfo.value}")
