"""Tests for the single instance lock."""

from arenta import configuration
from arenta.lock import acquire_lock, release_lock


class TestLock:
    """Tests for acquire_lock and release_lock."""

    def test_acquire_and_release(self, isolated_storage):
        assert acquire_lock()
        assert configuration.DATA_LOCK_PATH.is_file()
        release_lock()
        assert not configuration.DATA_LOCK_PATH.exists()

    def test_second_acquire_fails(self, isolated_storage):
        assert acquire_lock()
        assert not acquire_lock()
        release_lock()

    def test_foreign_lock_is_left_alone(self, isolated_storage):
        configuration.DATA_LOCK_PATH.write_text("12345")
        assert not acquire_lock()
        release_lock()
        assert configuration.DATA_LOCK_PATH.is_file()
