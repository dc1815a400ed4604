"""Tests for row partitioning and threaded row computation."""

import threading

import pytest

from term_ascii_art import ConversionError, dispatch_rows, partition_rows


class TestPartitionRows:

    @pytest.mark.parametrize("height, threads", [(1, 1), (9, 4), (10, 3), (100, 8), (3, 8), (230, 7)])
    def test_chunks_cover_all_rows_once(self, height, threads):
        chunks = partition_rows(height, threads)
        rows = [row for chunk in chunks for row in chunk]
        assert rows == list(range(height))
        assert len(chunks) <= threads
        assert all(len(chunk) > 0 for chunk in chunks)

    def test_even_chunks_with_smaller_tail(self):
        chunks = partition_rows(10, 4)
        assert [len(chunk) for chunk in chunks] == [3, 3, 3, 1]

    def test_exact_division(self):
        assert [len(chunk) for chunk in partition_rows(12, 4)] == [3, 3, 3, 3]

    def test_more_threads_than_rows(self):
        assert partition_rows(3, 8) == [range(0, 1), range(1, 2), range(2, 3)]

    def test_single_thread(self):
        assert partition_rows(9, 1) == [range(0, 9)]


class TestDispatchRows:

    @pytest.mark.parametrize("threads", [1, 2, 4, 8])
    def test_rows_in_index_order(self, threads):
        assert dispatch_rows(25, threads, lambda row: row * 2) == [row * 2 for row in range(25)]

    def test_single_thread_runs_in_caller(self):
        caller = threading.get_ident()
        idents = dispatch_rows(5, 1, lambda row: threading.get_ident())
        assert set(idents) == {caller}

    def test_multiple_threads_use_workers(self):
        caller = threading.get_ident()
        barrier = threading.Barrier(2, timeout=5)

        def compute(row):
            if row in (0, 5):
                barrier.wait()
            return threading.get_ident()

        idents = dispatch_rows(10, 2, compute)
        assert caller not in idents
        assert len(set(idents)) == 2

    @pytest.mark.parametrize("threads", [1, 4])
    def test_worker_failure_is_fatal(self, threads):
        def compute(row):
            if row == 7:
                raise ZeroDivisionError("bad row")
            return row

        with pytest.raises(ConversionError) as excinfo:
            dispatch_rows(12, threads, compute)
        assert isinstance(excinfo.value.__cause__, ZeroDivisionError)
        assert len(excinfo.value.errors) == 1

    def test_all_failures_are_collected(self):
        def compute(row):
            raise KeyError(row)

        with pytest.raises(ConversionError) as excinfo:
            dispatch_rows(8, 4, compute)
        assert len(excinfo.value.errors) == 4
        assert all(isinstance(error, KeyError) for error in excinfo.value.errors)

    def test_empty_grid(self):
        assert dispatch_rows(0, 4, lambda row: row) == []
