"""
Tests for the CLI (cloud_deployer.main).

Pipeline runs are patched out; render and providers use the packaged
templates and the built-in strategies.
"""

import json

import pytest
from unittest.mock import patch

from cloud_deployer import main as cli
from cloud_deployer.pipeline import PipelineResult, Stage


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({
        "label": "ci-agent",
        "defaultContainer": "cloud-cli",
        "repoUrl": "https://github.com/example/shop.git",
        "language": "node",
        "cloudProvider": "GCP",
        "nodeVersion": 18,
    }), encoding="utf-8")
    return path


class TestRenderCommand:

    def test_render_prints_manifest(self, config_file, capsys):
        exit_code = cli.main(["render", str(config_file)])

        out = capsys.readouterr().out
        assert exit_code == cli.EXIT_OK
        assert "cloud: gcp" in out
        assert "node:18-alpine" in out

    def test_render_writes_output_file(self, config_file, tmp_path, capsys):
        output = tmp_path / "pod.yaml"

        exit_code = cli.main(["render", str(config_file), "-o", str(output)])

        assert exit_code == cli.EXIT_OK
        assert "kind: Pod" in output.read_text(encoding="utf-8")
        assert "kind: Pod" not in capsys.readouterr().out

    def test_missing_config_file_exits_with_config_error(self, tmp_path):
        assert cli.main(["render", str(tmp_path / "missing.json")]) == cli.EXIT_CONFIG_ERROR

    def test_unknown_provider_exits_with_config_error(self, config_file):
        data = json.loads(config_file.read_text(encoding="utf-8"))
        data["cloudProvider"] = "oracle"
        config_file.write_text(json.dumps(data), encoding="utf-8")

        assert cli.main(["render", str(config_file)]) == cli.EXIT_CONFIG_ERROR


class TestProvidersCommand:

    def test_lists_providers(self, capsys):
        exit_code = cli.main(["providers"])

        listing = json.loads(capsys.readouterr().out)
        assert exit_code == cli.EXIT_OK
        assert listing == {"strategies": ["aws", "azure", "gcp"], "templates": ["aws", "azure", "gcp"]}


class TestRunCommand:

    @patch("cloud_deployer.main.run_pipeline")
    def test_succeeded_run_exits_zero(self, mock_run, config_file, tmp_path, capsys):
        mock_run.return_value = PipelineResult(
            status=Stage.SUCCEEDED,
            manifest="kind: Pod\n",
            history=(Stage.PENDING, Stage.CHECKOUT, Stage.BUILD, Stage.DEPLOY, Stage.SUCCEEDED),
        )
        manifest_out = tmp_path / "rendered.yaml"

        exit_code = cli.main([
            "run", str(config_file),
            "--credentials", str(tmp_path / "none.json"),
            "--manifest-out", str(manifest_out),
        ])

        summary = json.loads(capsys.readouterr().out)
        assert exit_code == cli.EXIT_OK
        assert summary["status"] == "Succeeded"
        assert "manifest" not in summary
        assert manifest_out.read_text(encoding="utf-8") == "kind: Pod\n"
        config = mock_run.call_args.args[0]
        assert config.cloud_provider == "gcp"
        assert mock_run.call_args.kwargs["credentials"] == {}

    @patch("cloud_deployer.main.run_pipeline")
    def test_failed_run_exits_one(self, mock_run, config_file, tmp_path, capsys):
        mock_run.return_value = PipelineResult(
            status=Stage.FAILED,
            stage=Stage.BUILD,
            error_kind="BuildError",
            detail="npm ERR!",
            history=(Stage.PENDING, Stage.CHECKOUT, Stage.BUILD, Stage.FAILED),
        )

        exit_code = cli.main(["run", str(config_file), "--credentials", str(tmp_path / "none.json")])

        summary = json.loads(capsys.readouterr().out)
        assert exit_code == cli.EXIT_FAILED
        assert summary["stage"] == "Build"
        assert summary["error_kind"] == "BuildError"

    @patch("cloud_deployer.main.run_pipeline")
    def test_credentials_file_is_passed_to_run(self, mock_run, config_file, tmp_path):
        mock_run.return_value = PipelineResult(status=Stage.SUCCEEDED)
        credentials = tmp_path / "config_credentials.json"
        credentials.write_text(json.dumps({"GCP": {"gcp_project_id": "shop-prod"}}), encoding="utf-8")

        cli.main(["run", str(config_file), "--credentials", str(credentials)])

        assert mock_run.call_args.kwargs["credentials"] == {"gcp": {"gcp_project_id": "shop-prod"}}

    @patch("cloud_deployer.main.run_pipeline")
    def test_invalid_credentials_exit_with_config_error(self, mock_run, config_file, tmp_path):
        credentials = tmp_path / "config_credentials.json"
        credentials.write_text("[1, 2]", encoding="utf-8")

        exit_code = cli.main(["run", str(config_file), "--credentials", str(credentials)])

        assert exit_code == cli.EXIT_CONFIG_ERROR
        mock_run.assert_not_called()
