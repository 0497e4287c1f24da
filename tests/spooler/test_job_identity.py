import threading

from spooler.job_identity import JobIdentityGenerator


def test_identity_is_nanosecond_timestamp():
    generator = JobIdentityGenerator(clock=lambda: 1700000000123456789)
    assert generator.new_identity() == "1700000000123456789"


def test_same_tick_identities_are_distinct():
    # coarse clock: every call returns the same tick
    generator = JobIdentityGenerator(clock=lambda: 1000)

    ids = [generator.new_identity() for _ in range(3)]

    assert ids == ["1000", "1001", "1002"]


def test_clock_stepping_backwards_keeps_identities_increasing():
    ticks = iter([5000, 4000, 6000])
    generator = JobIdentityGenerator(clock=lambda: next(ticks))

    assert [generator.new_identity() for _ in range(3)] == ["5000", "5001", "6000"]


def test_concurrent_identities_are_unique():
    generator = JobIdentityGenerator(clock=lambda: 1)
    results = []
    lock = threading.Lock()

    def worker():
        for _ in range(200):
            identity = generator.new_identity()
            with lock:
                results.append(identity)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(results) == 1600
    assert len(set(results)) == 1600
