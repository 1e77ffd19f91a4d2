"""
Integration tests for the command line workflow
Loads documents from disk, validates and reports

Run with: pytest tests/test_integration.py -v
"""

import json

import pandas as pd
import pytest

from main import EInvoiceValidatorApp, main
from models.validation import Profile
from utils.data_loaders import DocumentLoader


@pytest.fixture
def no_config(tmp_path):
    return str(tmp_path / "missing.yaml")


@pytest.fixture
def documents_dir(tmp_path, document_factory, item_factory):
    directory = tmp_path / "documents"
    directory.mkdir()

    valid = document_factory()
    invalid = document_factory(invoice_number="INV-2024-0002", items=[item_factory(unit_price=150.0)])

    (directory / "valid.json").write_text(valid.model_dump_json(by_alias=True))
    (directory / "invalid.json").write_text(invalid.model_dump_json(by_alias=True))
    (directory / "notes.txt").write_text("not a document")
    return directory


class TestDocumentLoader:

    def test_load_all(self, documents_dir):
        documents = DocumentLoader(documents_dir).load_all()

        assert sorted(documents) == ['invalid.json', 'valid.json']
        assert documents['valid.json'].invoice_number == 'INV-2024-0001'

    def test_missing_directory(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            DocumentLoader(tmp_path / "nope").document_files()


class TestApp:

    def test_defaults_without_config_file(self, no_config):
        app = EInvoiceValidatorApp(no_config)

        assert app.profile == Profile.NATIONAL
        assert app.engine_config.enabled is False

    def test_profile_argument_wins(self, no_config):
        assert EInvoiceValidatorApp(no_config, 'peppol').profile == Profile.NETWORK

    def test_config_file_profile(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("validation:\n  profile: NETWORK\n")

        assert EInvoiceValidatorApp(str(path)).profile == Profile.NETWORK


class TestCommandLine:

    def test_no_arguments_prints_usage(self, capsys):
        assert main([]) == 0
        assert "Usage" in capsys.readouterr().out

    def test_valid_document(self, documents_dir, no_config, capsys):
        code = main([str(documents_dir / "valid.json"), "--config", no_config])

        assert code == 0
        assert "Overall Status: VALID" in capsys.readouterr().out

    def test_invalid_document(self, documents_dir, no_config, capsys):
        code = main([str(documents_dir / "invalid.json"), "--config", no_config])

        assert code == 1
        assert "ITM_010" in capsys.readouterr().out

    def test_network_profile(self, documents_dir, no_config, capsys):
        code = main([str(documents_dir / "valid.json"), "--config", no_config, "--profile", "NETWORK"])

        assert code == 1
        assert "SUP_P01" in capsys.readouterr().out

    def test_json_output(self, documents_dir, no_config, capsys):
        code = main([str(documents_dir / "invalid.json"), "--config", no_config, "--json"])
        report = json.loads(capsys.readouterr().out)

        assert code == 1
        assert report['validation']['summary']['total_errors'] == 1
        assert report['document']['number'] == 'INV-2024-0002'

    def test_missing_document(self, tmp_path, no_config):
        assert main([str(tmp_path / "nope.json"), "--config", no_config]) == 2

    def test_broken_json(self, tmp_path, no_config):
        path = tmp_path / "broken.json"
        path.write_text("{not json")

        assert main([str(path), "--config", no_config]) == 2

    @pytest.mark.parametrize("option", ["--profile", "--config", "--csv", "--batch"])
    def test_option_without_value(self, documents_dir, option, capsys):
        code = main([str(documents_dir / "valid.json"), option])

        assert code == 2
        assert "Usage" in capsys.readouterr().out

    def test_non_utf8_document(self, tmp_path, no_config):
        path = tmp_path / "latin1.json"
        path.write_bytes('{"invoiceNumber": "FAKTUR-é"}'.encode('latin-1'))

        assert main([str(path), "--config", no_config]) == 2

    def test_unknown_profile(self, documents_dir, no_config):
        assert main([str(documents_dir / "valid.json"), "--config", no_config, "--profile", "MARS"]) == 2

    def test_batch_with_csv(self, documents_dir, no_config, tmp_path, capsys):
        csv_path = tmp_path / "issues.csv"
        code = main(["--batch", str(documents_dir), "--config", no_config, "--csv", str(csv_path)])
        output = capsys.readouterr().out

        assert code == 1
        assert "Total Documents: 2" in output
        assert "Pass Rate: 50.0%" in output

        frame = pd.read_csv(csv_path)
        errors = frame[frame['severity'] == 'error']
        assert errors['document'].tolist() == ['invalid.json']
        assert errors['code'].tolist() == ['ITM_010']

    def test_batch_reports_unloadable_files(self, documents_dir, no_config, capsys):
        (documents_dir / "broken.json").write_text("[1, 2")
        (documents_dir / "latin1.json").write_bytes('{"invoiceNumber": "FAKTUR-é"}'.encode('latin-1'))

        code = main(["--batch", str(documents_dir), "--config", no_config])
        output = capsys.readouterr().out

        assert code == 1
        assert "broken.json" in output
        assert "latin1.json" in output
        assert output.count("could not be loaded") == 2

    def test_batch_missing_directory(self, tmp_path, no_config):
        assert main(["--batch", str(tmp_path / "nope"), "--config", no_config]) == 2
