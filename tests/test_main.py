"""
Tests for the command line entry point.
"""

import json

import pytest

from src.uvf_encoder.main import main


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Remove UVF environment overrides."""
    for name in ("UVF_CONFIG_FILE", "UVF_LINE_ENDING", "UVF_TIME_ZONE",
                 "UVF_CHARSET", "UVF_LOG_LEVEL", "UVF_LOG_FILE"):
        monkeypatch.delenv(name, raising=False)


class TestMain:
    """Test cases for the uvf-encode command."""

    def test_encode_to_file(self, fixtures_dir, tmp_path):
        """Test encoding the sample document into a file."""
        output = tmp_path / "out" / "gauge.uvf"

        main([str(fixtures_dir / "observations.json"), "-o", str(output), "--log-level", "WARNING"])

        lines = output.read_bytes().decode("utf-8").split("\n")
        assert lines[5] == "$sb Mess-Stellenname: Pegel Muenster"
        assert lines[7] == "prop-identifier test-unit     1969 1970"
        assert lines[9] == "69123112007001031200Zeit    "
        assert lines[10:14] == [
            "691231120052.1234567",
            "7001011200-777      ",
            "700102120042.5      ",
            "7001031200-777.0    ",
        ]

    def test_encode_to_stdout(self, fixtures_dir, capsysbinary):
        """Test encoding to stdout."""
        main([str(fixtures_dir / "observations.json"), "--log-level", "ERROR"])

        out = capsysbinary.readouterr().out
        assert out.startswith(b"$ib Funktion-Interpretation: Linie\n")

    def test_encode_with_config(self, fixtures_dir, tmp_path):
        """Test the configured line ending and timezone."""
        output = tmp_path / "gauge.uvf"

        main([
            str(fixtures_dir / "observations.json"),
            "-o", str(output),
            "--config", str(fixtures_dir / "config.json"),
            "--log-level", "WARNING",
        ])

        lines = output.read_bytes().decode("iso-8859-1").split("\r\n")
        assert lines[10] == "691231130052.1234567"

    def test_empty_document_writes_nothing(self, tmp_path):
        """Test an empty collection produces no file."""
        document = tmp_path / "empty.json"
        document.write_text(json.dumps({"observations": []}))
        output = tmp_path / "empty.uvf"

        main([str(document), "-o", str(output), "--log-level", "ERROR"])

        assert not output.exists()

    def test_unsupported_observation_exits(self, tmp_path, capsys):
        """Test encoding failures exit with status 1."""
        document = tmp_path / "truth.json"
        document.write_text(json.dumps({"observations": [{
            "observationType": "http://www.opengis.net/def/observationType/OGC-OM/2.0/OM_TruthObservation",
            "observableProperty": {"identifier": "op"},
            "featureOfInterest": {"identifier": "foi"},
            "result": {"type": "single", "phenomenonTime": "1970-01-01T12:00:00Z", "value": 1.0},
        }]}))

        with pytest.raises(SystemExit) as exc_info:
            main([str(document), "--log-level", "ERROR"])

        assert exc_info.value.code == 1
        assert "OM_TruthObservation" in capsys.readouterr().err

    def test_log_file(self, fixtures_dir, tmp_path):
        """Test the --log-file option writes detailed log records."""
        log_file = tmp_path / "logs" / "uvf.log"

        main([
            str(fixtures_dir / "observations.json"),
            "-o", str(tmp_path / "gauge.uvf"),
            "--log-file", str(log_file),
            "--log-level", "INFO",
        ])

        assert "Wrote" in log_file.read_text(encoding="utf-8")
