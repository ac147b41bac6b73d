import unittest
import io
import json
import os
import sys
from contextlib import redirect_stderr, redirect_stdout
from unittest import mock

# Add the parent directory to the Python path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from word_clock_fr import led_time, print_time
from word_clock_fr.panel import frame_for_lights, lights_by_token
from word_clock_fr.tokens import Token

def run(main, argv):
    """Run an entry point, returning (status, stdout, stderr)"""
    out, err = io.StringIO(), io.StringIO()
    with redirect_stdout(out), redirect_stderr(err):
        status = main(argv)
    return status, out.getvalue(), err.getvalue()

class TestPanel(unittest.TestCase):
    def test_frame_for_lights(self):
        frame = frame_for_lights([0, 1, 12, 12, 13], 16)
        self.assertEqual(len(frame), 16)
        self.assertEqual([i for i, lit in enumerate(frame) if lit], [0, 1, 12, 13])

    def test_frame_out_of_bounds(self):
        for light in (27, -1):
            with self.subTest(light=light):
                with self.assertRaises(ValueError):
                    frame_for_lights([0, light], 27)

    def test_lights_by_token(self):
        self.assertEqual(
            lights_by_token([Token.OPENING, Token.MIDNIGHT]),
            [(Token.OPENING, (0, 1)), (Token.MIDNIGHT, (14,))],
        )

class TestPrintTime(unittest.TestCase):
    def test_time_from_arguments(self):
        """Test rendering a time given on the command line"""
        test_cases = [
            (["3:15pm"], "IL EST TROIS HEURES ET QUART"),
            (["8:40", "pm"], "IL EST NEUF HEURES MOINS VINGT"),
            (["23:55"], "IL EST MINUIT MOINS CINQ"),
            (["12:30am"], "IL EST MINUIT ET DEMI"),
        ]

        for argv, expected_text in test_cases:
            with self.subTest(argv=argv):
                status, out, err = run(print_time.main, argv)
                self.assertEqual(status, 0)
                self.assertEqual(out, expected_text + "\n")
                self.assertEqual(err, "")

    def test_now(self):
        with mock.patch.object(print_time, 'now_hm12', return_value=(True, 1, 7)) as now:
            with mock.patch.object(print_time, 'get_timezone', return_value='Europe/Paris'):
                status, out, _ = run(print_time.main, [])
        now.assert_called_once_with('Europe/Paris')
        self.assertEqual(status, 0)
        self.assertEqual(out, "IL EST UNE HEURE CINQ\n")

    def test_invalid_time(self):
        for argv in (["13pm"], ["teatime"], ["Monday"], ["7"]):
            with self.subTest(argv=argv):
                status, out, err = run(print_time.main, argv)
                self.assertEqual(status, 1)
                self.assertEqual(out, "")
                self.assertTrue(err.startswith("Error: "))

class TestLedTime(unittest.TestCase):
    def test_payload(self):
        with mock.patch.object(led_time, 'get_num_pixels', return_value=72):
            status, out, _ = run(led_time.main, ["6:30pm"])
        self.assertEqual(status, 0)

        payload = json.loads(out)
        self.assertEqual(payload["text"], "IL EST SIX HEURES ET DEMIE")
        self.assertEqual(payload["lights"], [0, 1, 9, 16, 17, 21, 25, 26])
        self.assertEqual(len(payload["frame"]), 72)
        self.assertEqual([i for i, lit in enumerate(payload["frame"]) if lit],
                         [0, 1, 9, 16, 17, 21, 25, 26])
        self.assertEqual(payload["words"], [
            ["OPENING", [0, 1]],
            ["HOUR_SIX", [9]],
            ["SEPARATOR_PLURAL", [16, 17]],
            ["AND", [21]],
            ["HALF_FEMININE", [25, 26]],
        ])

    def test_empty_strip(self):
        with mock.patch.object(led_time, 'get_num_pixels', return_value=0):
            status, out, err = run(led_time.main, ["6:30pm"])
        self.assertEqual(status, 1)
        self.assertEqual(out, "")
        self.assertIn("out of bounds for 0 lights", err)

    def test_strip_too_short(self):
        with mock.patch.object(led_time, 'get_num_pixels', return_value=20):
            status, out, err = run(led_time.main, ["6:30pm"])
        self.assertEqual(status, 1)
        self.assertEqual(out, "")
        self.assertIn("out of bounds", err)

if __name__ == '__main__':
    unittest.main()
