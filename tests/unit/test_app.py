"""Tests for the CDK app entry point."""

import json
from pathlib import Path

import aws_cdk as cdk
import pytest

from conftest import ACCOUNT, REGION, hosted_zone_context
from static_site_infra.app import STACK_NAME, main
from static_site_infra.config import ConfigError


def _app(asset_dir: Path, outdir: Path) -> cdk.App:
  return cdk.App(
    context={
      "subDomain": "www",
      "domainName": "example.com",
      "assetPath": str(asset_dir),
      **hosted_zone_context(),
    },
    outdir=str(outdir),
  )


class TestMain:
  """Test the app entry point."""

  def test_synthesizes_site_stack(
    self, asset_dir: Path, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
  ) -> None:
    monkeypatch.setenv("AWS_ACCOUNT", ACCOUNT)
    monkeypatch.setenv("AWS_REGION", REGION)
    outdir = tmp_path / "cdk.out"

    stack = main(_app(asset_dir, outdir))

    assert stack.stack_name == STACK_NAME
    assert stack.account == ACCOUNT
    assert stack.region == REGION
    template = json.loads((outdir / f"{STACK_NAME}.template.json").read_text())
    assert set(template["Outputs"]) == {
      "HostedZoneId",
      "MyBucketName",
      "Certificate",
      "CloudFrontWebDistributionId",
      "Mys3BucketDeployment",
    }
    assert template["Outputs"]["Mys3BucketDeployment"]["Value"] == (
      f"{STACK_NAME}-deployment"
    )

  def test_missing_environment_aborts(
    self, asset_dir: Path, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
  ) -> None:
    monkeypatch.delenv("AWS_ACCOUNT", raising=False)
    monkeypatch.setenv("AWS_REGION", REGION)

    with pytest.raises(ConfigError, match="AWS_ACCOUNT"):
      main(_app(asset_dir, tmp_path / "cdk.out"))

  def test_missing_context_aborts_before_synth(self, tmp_path: Path) -> None:
    """Without subDomain/domainName nothing is built."""
    with pytest.raises(ConfigError, match="Missing required value"):
      main(cdk.App(outdir=str(tmp_path / "cdk.out")))
