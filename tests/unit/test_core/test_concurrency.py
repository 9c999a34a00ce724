"""Tests for serialized access through the store handle."""

from __future__ import annotations

import threading
from concurrent.futures import ThreadPoolExecutor

from playlog.core.database import Database, Game


class TestStoreLock:
    """Tests for the handle's mutual exclusion."""

    def test_parallel_writers_are_serialized(self, database: Database, make_log) -> None:
        """Concurrent add_log calls all land, each game catalogued once."""
        games = [Game(id=game_id, title=f"Game {game_id}", cover_id="") for game_id in range(1, 6)]

        def worker(index: int) -> int:
            return database.add_log(make_log(games[index % len(games)], minutes_played=index))

        with ThreadPoolExecutor(max_workers=8) as pool:
            log_ids = list(pool.map(worker, range(40)))

        assert len(set(log_ids)) == 40
        assert database.get_log_count() == 40
        assert database.get_logged_game_count() == 5

    def test_operations_wait_for_lock(self, database: Database) -> None:
        """A call blocks while another holder owns the lock."""
        finished = threading.Event()

        def read() -> None:
            database.get_recent_logs(1)
            finished.set()

        with database._lock:
            reader = threading.Thread(target=read)
            reader.start()
            assert not finished.wait(0.2)

        reader.join(timeout=5)
        assert finished.is_set()
