#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
test_championship.py
--------------------

End‑to‑end tests for the knight tournament driver: the in‑memory `solve`
helper, the stream based `championship` entry point, input validation and
the command line wrapper.
"""

import io
import os
import tempfile
import unittest

from championship import championship, main, read_fights, solve


class TestChampionship(unittest.TestCase):
    # ------------------------------------------------------------------
    #  Helpers
    # ------------------------------------------------------------------
    @staticmethod
    def _run(text: str) -> str:
        out = io.StringIO()
        championship(io.StringIO(text), out)
        return out.getvalue()

    # ------------------------------------------------------------------
    #  Results
    # ------------------------------------------------------------------
    def test_small_tournament(self):
        self.assertEqual(self._run("4 3\n1 2 1\n1 3 3\n1 4 4\n"), "3 1 4 0")

    def test_overlapping_ranges(self):
        text = "8 4\n3 5 4\n3 7 6\n2 8 8\n1 8 1\n"
        self.assertEqual(self._run(text), "0 8 4 6 4 8 6 1")

    def test_solve_first_claim_wins(self):
        self.assertEqual(solve(7, [(1, 4, 5), (4, 6, 7)]), [5, 5, 5, 5, 7, 7, 0])

    def test_no_fights(self):
        self.assertEqual(self._run("3 0\n"), "0 0 0")

    # ------------------------------------------------------------------
    #  Input validation
    # ------------------------------------------------------------------
    def test_read_fights(self):
        n, fights = read_fights(io.StringIO("5 2\n1 2 2\n 3 5 4 \n"))
        self.assertEqual(n, 5)
        self.assertEqual(fights, [(1, 2, 2), (3, 5, 4)])

    def test_missing_header(self):
        with self.assertRaises(ValueError):
            self._run("")

    def test_bad_header(self):
        with self.assertRaises(ValueError):
            self._run("4\n")
        with self.assertRaises(ValueError):
            self._run("four 1\n1 2 1\n")

    def test_truncated_fights(self):
        with self.assertRaises(ValueError):
            self._run("4 2\n1 2 1\n")

    def test_bad_fight_record(self):
        with self.assertRaises(ValueError):
            self._run("4 1\n1 2\n")

    # ------------------------------------------------------------------
    #  Command line wrapper
    # ------------------------------------------------------------------
    def test_main_with_files(self):
        with tempfile.TemporaryDirectory() as tmp:
            src = os.path.join(tmp, "in.txt")
            dst = os.path.join(tmp, "out.txt")
            with open(src, "w", encoding="utf-8") as fh:
                fh.write("4 3\n1 2 1\n1 3 3\n1 4 4\n")

            self.assertEqual(main(["--input", src, "--output", dst]), 0)
            with open(dst, encoding="utf-8") as fh:
                self.assertEqual(fh.read(), "3 1 4 0")

    def test_main_reports_malformed_input(self):
        with tempfile.TemporaryDirectory() as tmp:
            src = os.path.join(tmp, "in.txt")
            dst = os.path.join(tmp, "out.txt")
            with open(src, "w", encoding="utf-8") as fh:
                fh.write("4 2\n1 2 1\n")

            with self.assertLogs("championship", level="ERROR"):
                self.assertEqual(main(["--input", src, "--output", dst]), 1)


if __name__ == "__main__":
    unittest.main(verbosity=2)
