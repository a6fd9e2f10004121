import os
import shutil
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from refolder.__main__ import create_parser, main
from refolder.config import ENV_MATCHING, ENV_PREFIX, ENV_SUFFIX, Defaults, load_defaults


def _clear_refolder_env():
    for key in (ENV_MATCHING, ENV_PREFIX, ENV_SUFFIX):
        os.environ.pop(key, None)


class TestCli(unittest.TestCase):
    def setUp(self):
        # Isolate from the caller's REFOLDER_* variables and any .env on disk
        env_patch = patch.dict(os.environ)
        env_patch.start()
        self.addCleanup(env_patch.stop)
        _clear_refolder_env()
        dotenv_patch = patch("refolder.config.find_dotenv", return_value="")
        dotenv_patch.start()
        self.addCleanup(dotenv_patch.stop)

        self.test_dir = Path(tempfile.mkdtemp()).resolve()
        for i in range(4):
            (self.test_dir / f"img{i}.jpg").touch()
        (self.test_dir / "readme.md").touch()

    def tearDown(self):
        shutil.rmtree(self.test_dir)

    def test_success_exit_code(self):
        with patch.dict(os.environ):
            _clear_refolder_env()
            code = main([str(self.test_dir), "-m", "*.jpg", "-s", "2", "-p", "batch"])

        self.assertEqual(code, 0)
        self.assertEqual(len(list((self.test_dir / "batch-1").iterdir())), 2)
        self.assertEqual(len(list((self.test_dir / "batch-2").iterdir())), 2)
        self.assertTrue((self.test_dir / "readme.md").exists())

    def test_dry_run_flag(self):
        code = main([str(self.test_dir), "-m", "*.jpg", "-s", "3", "--dry-run"])
        self.assertEqual(code, 0)
        self.assertFalse(any(p.is_dir() for p in self.test_dir.iterdir()))

    def test_error_exit_code(self):
        with patch("refolder.__main__.print_error") as mock_error:
            code = main([str(self.test_dir / "missing"), "-s", "2"])
        self.assertEqual(code, 1)
        self.assertIn("does not exist", mock_error.call_args[0][0])

    def test_conflict_exit_code(self):
        (self.test_dir / "group-1").write_text("in the way")
        with patch.dict(os.environ):
            _clear_refolder_env()
            code = main([str(self.test_dir), "-m", "*.jpg", "-s", "1"])
        self.assertEqual(code, 1)

    def test_zero_subfolders_rejected(self):
        with self.assertRaises(SystemExit) as ctx:
            main([str(self.test_dir), "-s", "0"])
        self.assertEqual(ctx.exception.code, 2)

    def test_unknown_suffix_rejected(self):
        with self.assertRaises(SystemExit) as ctx:
            main([str(self.test_dir), "-s", "2", "--suffix", "roman"])
        self.assertEqual(ctx.exception.code, 2)

    def test_keyboard_interrupt(self):
        with patch("refolder.__main__.run", side_effect=KeyboardInterrupt):
            code = main([str(self.test_dir), "-s", "2"])
        self.assertEqual(code, 130)

    def test_parser_defaults(self):
        with patch.dict(os.environ):
            _clear_refolder_env()
            args = create_parser().parse_args(["somewhere", "-s", "3"])
        self.assertEqual(args.matching, "*")
        self.assertEqual(args.prefix, "group")
        self.assertEqual(args.suffix, "numbers")
        self.assertFalse(args.recursive)
        self.assertFalse(args.dry_run)
        self.assertFalse(args.force)

    def test_environment_defaults(self):
        with patch.dict(os.environ, {ENV_PREFIX: "batch", ENV_SUFFIX: "letters"}):
            code = main([str(self.test_dir), "-m", "*.jpg", "-s", "2"])
        self.assertEqual(code, 0)
        self.assertTrue((self.test_dir / "batch-a").is_dir())
        self.assertTrue((self.test_dir / "batch-b").is_dir())


class TestConfig(unittest.TestCase):
    def setUp(self):
        self.test_dir = Path(tempfile.mkdtemp())
        self.env_file = self.test_dir / ".env"
        self.env_file.write_text(f"{ENV_PREFIX}=fromfile\n{ENV_MATCHING}=*.png\n")

    def tearDown(self):
        shutil.rmtree(self.test_dir)

    def test_builtin_defaults(self):
        with patch.dict(os.environ):
            _clear_refolder_env()
            self.assertEqual(load_defaults(str(self.test_dir / "absent.env")), Defaults())

    def test_dotenv_file(self):
        with patch.dict(os.environ):
            _clear_refolder_env()
            defaults = load_defaults(str(self.env_file))
        self.assertEqual(defaults.prefix, "fromfile")
        self.assertEqual(defaults.matching, "*.png")
        self.assertEqual(defaults.suffix, "numbers")

    def test_process_environment_wins(self):
        with patch.dict(os.environ):
            _clear_refolder_env()
            os.environ[ENV_PREFIX] = "fromenv"
            defaults = load_defaults(str(self.env_file))
        self.assertEqual(defaults.prefix, "fromenv")


if __name__ == "__main__":
    unittest.main()
