import io
import os
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout

import main


class MainCliTests(unittest.TestCase):
    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmpdir.cleanup)
        self.output_dir = os.path.join(self.tmpdir.name, "output")
        self.config_path = os.path.join(self.tmpdir.name, "config.yaml")
        with open(self.config_path, "w", encoding="utf-8") as f:
            f.write(f"output:\n  folder: {self.output_dir!r}\nlogging:\n  level: ERROR\n")

    def _run(self, argv):
        stdout, stderr = io.StringIO(), io.StringIO()
        with redirect_stdout(stdout), redirect_stderr(stderr):
            code = main.main(["--config", self.config_path] + argv)
        return code, stdout.getvalue(), stderr.getvalue()

    def _write_previous(self, text):
        path = os.path.join(self.tmpdir.name, "previous.txt")
        with open(path, "w", encoding="utf-8") as f:
            f.write(text)
        return path

    def test_list_styles(self):
        code, out, _ = self._run(["--list-styles"])
        self.assertEqual(code, 0)
        self.assertEqual(out.splitlines(), ["Strength only", "Hybrid", "HYROX", "Strength + running"])

    def test_progresses_previous_block_file(self):
        previous = self._write_previous("Day 1 – Lower\nBack Squat 4x6 @ RPE7 100kg\n")
        code, out, _ = self._run(["--mode", "progress", "--previous", previous, "--difficulty", "hard"])
        self.assertEqual(code, 0)
        self.assertIn("• Back Squat 4x6 @ RPE6.5 95kg", out)
        self.assertIn("hold volume or reduce load", out)

    def test_template_mode_uses_style(self):
        code, out, _ = self._run(["--style", "Hybrid"])
        self.assertEqual(code, 0)
        self.assertIn("Style: Hybrid", out)
        self.assertIn("Day 5 – Long Run", out)

    def test_save_writes_named_file(self):
        previous = self._write_previous("Row 3x10\n")
        code, out, _ = self._run(["--client", "Sarah K.", "--previous", previous, "--save"])
        self.assertEqual(code, 0)
        saved = os.path.join(self.output_dir, "Sarah_K._next_block.txt")
        self.assertTrue(os.path.exists(saved))
        with open(saved, "r", encoding="utf-8") as f:
            self.assertEqual(f.read(), out.rstrip("\n"))

    def test_missing_previous_file_fails(self):
        code, _, err = self._run(["--previous", os.path.join(self.tmpdir.name, "missing.txt")])
        self.assertEqual(code, 1)
        self.assertIn("could not read previous block", err)

    def test_missing_config_fails(self):
        stderr = io.StringIO()
        with redirect_stderr(stderr):
            code = main.main(["--config", os.path.join(self.tmpdir.name, "nope.yaml")])
        self.assertEqual(code, 1)
        self.assertIn("Config file not found", stderr.getvalue())


if __name__ == "__main__":
    unittest.main()
