from prime_sum import benchmark


def test_time_strategy_sums():
    for name in ("sieve", "fast-non-linear", "naive"):
        row = benchmark.time_strategy(name, limit=1000, timeout=60)
        assert row["method"] == name
        assert row["sum"] == 76127
        assert row["tested"] == 999
        assert "timeout" not in row


def test_time_strategy_timeout():
    row = benchmark.time_strategy("naive", limit=1000, timeout=-1)
    assert row["timeout"] is True
    assert row["sum"] is None


def test_time_strategy_pending():
    row = benchmark.time_strategy("pending", limit=100, timeout=60)
    assert row["note"] == "not implemented"
    assert row["sum"] is None
    assert row["tested"] == 0


def test_main_prints_table(capsys):
    assert benchmark.main(["--limit", "500", "--strategy", "sieve", "--strategy", "pending"]) == 0
    lines = capsys.readouterr().out.splitlines()
    rows = [line for line in lines if line.startswith("| sieve") or line.startswith("| pending")]
    assert len(rows) == 2
    assert "21536" in rows[0]
    assert rows[1].rstrip().endswith("not implemented")
