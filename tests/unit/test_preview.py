import io
import re
import unittest
from pathlib import Path
from unittest.mock import patch

from rich.console import Console

from refolder.planning import PlannedMove
from refolder.preview import build_preview_tree, group_moves, print_dry_run_preview, render_preview


def _render(renderable) -> str:
    buf = io.StringIO()
    Console(file=buf, width=100, color_system=None).print(renderable)
    return buf.getvalue()


class TestPreview(unittest.TestCase):
    def setUp(self):
        base = Path("/data")
        # Deliberately out of order
        self.moves = [
            PlannedMove(base / "c.txt", base / "pack-2" / "c.txt"),
            PlannedMove(base / "b.txt", base / "pack-1" / "b.txt"),
            PlannedMove(base / "a.txt", base / "pack-1" / "a.txt"),
        ]

    def test_group_moves_sorted(self):
        grouped = group_moves(self.moves)
        self.assertEqual(list(grouped), [Path("/data/pack-1"), Path("/data/pack-2")])
        self.assertEqual(grouped[Path("/data/pack-1")], ["a.txt", "b.txt"])

    def test_tree_layout(self):
        lines = [line.rstrip() for line in _render(build_preview_tree(self.moves)).splitlines()]
        self.assertEqual(
            lines,
            [
                ".",
                "├── pack-1",
                "│   ├── a.txt",
                "│   └── b.txt",
                "└── pack-2",
                "    └── c.txt",
            ],
        )

    def test_summary(self):
        out = _render(render_preview(self.moves))
        self.assertRegex(out, r"Total folders\W+2")
        self.assertRegex(out, r"Total files\W+3")
        self.assertIn("dry-run (no changes made)", out)

    def test_empty_plan(self):
        out = _render(render_preview([]))
        self.assertRegex(out, r"Total folders\W+0")
        self.assertRegex(out, r"Total files\W+0")

    def test_no_filesystem_access(self):
        with patch.object(Path, "exists", side_effect=AssertionError("touched disk")), \
             patch.object(Path, "is_dir", side_effect=AssertionError("touched disk")):
            _render(render_preview(self.moves))

    def test_print_to_given_console(self):
        buf = io.StringIO()
        print_dry_run_preview(self.moves, console=Console(file=buf, width=100, color_system=None))
        self.assertTrue(re.search(r"^\.$", buf.getvalue(), re.MULTILINE))


if __name__ == "__main__":
    unittest.main()
