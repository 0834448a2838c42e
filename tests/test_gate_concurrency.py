"""Concurrency tests: the re-entrancy flag is per thread, not per gate."""

import asyncio
import threading

import pytest

from conftest import FakeAppender, make_event
from sinkgate.appenders.inmemory import ListAppender
from sinkgate.core.gate import DeliveryOutcome, DispatchGate
from sinkgate.core.level import Level


class BlockingAppender(FakeAppender):
    """Appender that holds every caller inside append until released."""

    def __init__(self, parties: int):
        super().__init__(name="blocking")
        self._barrier = threading.Barrier(parties, timeout=5)
        self._lock = threading.Lock()

    def append(self, event):
        with self._lock:
            self.appended.append(event)
        # Every thread is inside append at the same time past this point
        self._barrier.wait()


class TestThreadIsolation:
    @pytest.mark.timeout(10)
    def test_concurrent_threads_inside_append_not_recursive(self):
        """Threads simultaneously inside append SHALL NOT see each other's flag."""
        threads_count = 4
        appender = BlockingAppender(parties=threads_count)
        gate = DispatchGate(appender)
        outcomes: list[DeliveryOutcome] = []
        outcomes_lock = threading.Lock()

        def worker(i: int) -> None:
            outcome = gate.deliver(make_event(Level.ERROR, f"thread-{i}"))
            with outcomes_lock:
                outcomes.append(outcome)

        threads = [threading.Thread(target=worker, args=(i,)) for i in range(threads_count)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert outcomes == [DeliveryOutcome.DELIVERED] * threads_count
        assert len(appender.appended) == threads_count
        assert appender.error_reporter.reports == []

    @pytest.mark.timeout(10)
    def test_many_threads_share_one_gate(self):
        appender = ListAppender()
        appender.start()
        gate = DispatchGate(appender, level=Level.INFO)
        per_thread = 200

        def worker() -> None:
            for i in range(per_thread):
                level = Level.INFO if i % 2 == 0 else Level.DEBUG
                gate.deliver(make_event(level))

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(appender) == 8 * per_thread // 2

    @pytest.mark.timeout(10)
    def test_recursion_on_one_thread_does_not_block_others(self):
        started = threading.Event()
        release = threading.Event()
        appender = FakeAppender(name="slow")
        gate = DispatchGate(appender)

        def slow_append(event):
            appender.appended.append(event)
            if event.message == "slow":
                started.set()
                release.wait(5)

        appender.append = slow_append

        slow = threading.Thread(target=lambda: gate.deliver(make_event(message="slow")))
        slow.start()
        assert started.wait(5)

        # The slow thread is still inside append; this thread is not
        assert gate.deliver(make_event(message="fast")) is DeliveryOutcome.DELIVERED

        release.set()
        slow.join()
        assert [e.message for e in appender.appended] == ["slow", "fast"]
        assert appender.error_reporter.reports == []


class TestAsyncCallers:
    @pytest.mark.timeout(10)
    async def test_tasks_on_event_loop_deliver_independently(self):
        """Tasks on one loop never interleave inside deliver."""
        appender = ListAppender()
        appender.start()
        gate = DispatchGate(appender)

        async def produce(i: int) -> DeliveryOutcome:
            await asyncio.sleep(0)
            return gate.deliver(make_event(message=f"task-{i}"))

        outcomes = await asyncio.gather(*(produce(i) for i in range(50)))

        assert set(outcomes) == {DeliveryOutcome.DELIVERED}
        assert len(appender) == 50

    @pytest.mark.timeout(10)
    async def test_worker_threads_via_to_thread(self):
        appender = ListAppender()
        appender.start()
        gate = DispatchGate(appender)

        outcomes = await asyncio.gather(
            *(asyncio.to_thread(gate.deliver, make_event(message=f"t-{i}")) for i in range(20))
        )

        assert set(outcomes) == {DeliveryOutcome.DELIVERED}
        assert len(appender) == 20
