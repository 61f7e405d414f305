from __future__ import annotations

import threading
import time
from concurrent.futures import ThreadPoolExecutor

import pytest

from flight_planner import deps


@pytest.fixture(autouse=True)
def clean_instances():
    deps._instances.pop("slow", None)
    yield
    deps._instances.pop("slow", None)


def test_concurrent_first_use_builds_once():
    built = []
    lock = threading.Lock()

    def factory():
        time.sleep(0.05)
        with lock:
            built.append(object())
        return built[-1]

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(lambda _: deps._once("slow", factory), range(8)))

    assert len(built) == 1
    assert all(r is results[0] for r in results)
