import io
import json
import os
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout
from unittest.mock import patch

from bowishlist import cli
from bowishlist.config import ClientConfig, RunConfig
from bowishlist.errors import InputValidationError, NetworkError
from bowishlist.plan import Action, PlanOperation, ReconcilePlan


class TestCli(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        self.data_file = os.path.join(self._tmp.name, "lists.json")
        with open(self.data_file, "w", encoding="utf-8") as f:
            json.dump([{"name": "Set A", "pieces": [{"id": "3001", "qty": "2", "color": "red"}]}], f)

    def test_missing_mandatory_flags_prints_usage(self) -> None:
        stderr = io.StringIO()
        with patch.dict(os.environ, {}, clear=True), redirect_stderr(stderr):
            code = cli.main(["--datafile", self.data_file])

        self.assertEqual(code, 1)
        self.assertIn("--apikey", stderr.getvalue())

    def test_api_key_from_environment(self) -> None:
        with patch.dict(os.environ, {cli.API_KEY_ENV: "ENVKEY"}), \
                patch.object(cli, "run", return_value=None) as run:
            code = cli.main(["--datafile", self.data_file])

        self.assertEqual(code, 0)
        client_config, run_config = run.call_args.args
        self.assertEqual(client_config.api_key, "ENVKEY")
        self.assertEqual(run_config.data_file, self.data_file)

    def test_flags_reach_configs(self) -> None:
        with patch.object(cli, "run", return_value=None) as run:
            cli.main(
                [
                    "--apikey", "KEY",
                    "--datafile", self.data_file,
                    "--purgelists",
                    "--verbose",
                    "--cache-dir", self._tmp.name,
                ]
            )

        client_config, run_config = run.call_args.args
        self.assertEqual(client_config, ClientConfig(api_key="KEY", verbose=True))
        self.assertEqual(
            run_config,
            RunConfig(data_file=self.data_file, purge_lists=True, cache_dir=self._tmp.name),
        )

    def test_fatal_error_exits_nonzero(self) -> None:
        with patch.object(cli, "run", side_effect=NetworkError("timeout")):
            with self.assertLogs("bowishlist.cli", level="ERROR"):
                code = cli.main(["--apikey", "KEY", "--datafile", self.data_file])
        self.assertEqual(code, 1)

    def test_dry_run_prints_plan(self) -> None:
        plan = ReconcilePlan(
            plan_id="P",
            created_at=None,  # type: ignore[arg-type]
            purge=False,
            operations=[PlanOperation(seq=0, action=Action.DELETE_LIST, name="Foo", list_id="1")],
        )
        stdout = io.StringIO()
        with patch.object(cli, "run", return_value=plan), redirect_stdout(stdout):
            code = cli.main(["--apikey", "KEY", "--datafile", self.data_file, "--dry-run"])

        self.assertEqual(code, 0)
        self.assertIn("DELETE_LIST 'Foo' (id 1)", stdout.getvalue())

    def test_run_validates_data_file_before_remote_calls(self) -> None:
        with open(self.data_file, "w", encoding="utf-8") as f:
            f.write("not json")

        with patch("bowishlist.cli.WishlistManager") as manager_cls:
            with self.assertRaises(InputValidationError):
                cli.run(ClientConfig(api_key="KEY"), RunConfig(data_file=self.data_file))

        manager_cls.assert_not_called()

    def test_run_closes_manager_on_failure(self) -> None:
        with patch("bowishlist.cli.WishlistManager") as manager_cls:
            manager = manager_cls.return_value
            manager.reconcile.side_effect = NetworkError("timeout")
            with self.assertRaises(NetworkError):
                cli.run(ClientConfig(api_key="KEY"), RunConfig(data_file=self.data_file))

        manager.close.assert_called_once_with()


if __name__ == "__main__":
    unittest.main()
