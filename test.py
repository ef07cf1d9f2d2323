import os
import site
import subprocess
import sys
import unittest
from pathlib import Path
from tempfile import TemporaryDirectory

from simpleenc.main import simpleenc

KNOWN_HEX = (
    "0a2a0794611400aca0fa45e21e35c1131e600316802365b363db7008366e5bf2"
    "195929980d6136be8478686b7515792f"
)


class SimpleEncCliSmokeTests(unittest.TestCase):
    def setUp(self) -> None:
        self.tmpdir = TemporaryDirectory()
        self.tmp_path = Path(self.tmpdir.name)
        self.user_site = site.getusersitepackages()
        self.repo_root = Path(__file__).resolve().parent

    def tearDown(self) -> None:
        self.tmpdir.cleanup()

    def _run_cli(self, *args: str) -> subprocess.CompletedProcess:
        env = os.environ.copy()
        env["PYTHONPATH"] = os.pathsep.join(
            filter(None, [str(self.repo_root), self.user_site, env.get("PYTHONPATH")])
        )
        return subprocess.run(
            [sys.executable, "-m", "simpleenc", *args],
            cwd=self.repo_root,
            capture_output=True,
            text=True,
            env=env,
        )

    def test_cli_encrypt_decrypt(self):
        result = self._run_cli("encrypt", "cli-power", "-p", "pw")
        self.assertEqual(result.returncode, 0, msg=result.stderr + result.stdout)
        hex_text = result.stdout.strip()
        self.assertEqual(simpleenc.decrypt_hex(hex_text, b"pw"), b"cli-power")

        result = self._run_cli("decrypt", hex_text, "-p", "pw")
        self.assertEqual(result.returncode, 0, msg=result.stderr + result.stdout)
        self.assertEqual(result.stdout.strip(), "cli-power")

    def test_cli_decrypt_file(self):
        src = self.tmp_path / "secret.hex"
        src.write_text(KNOWN_HEX, encoding="utf-8")
        result = self._run_cli("decrypt", str(src), "--file", "-p", "weak_password")
        self.assertEqual(result.returncode, 0, msg=result.stderr + result.stdout)
        self.assertEqual(result.stdout.strip(), "This is a secret message!")

    def test_cli_corrupted_envelope(self):
        result = self._run_cli("decrypt", "00" * 17, "-p", "pw")
        self.assertEqual(result.returncode, 1)
        self.assertIn("Decryption failed", result.stderr)

    def test_cli_version(self):
        result = self._run_cli("--version")
        self.assertEqual(result.returncode, 0, msg=result.stderr)
        self.assertIn("simpleenc", result.stdout)


if __name__ == "__main__":
    unittest.main()
