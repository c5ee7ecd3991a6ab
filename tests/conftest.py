"""Pytest fixtures for CDK construct tests."""

from pathlib import Path

import aws_cdk as cdk
import pytest

ACCOUNT = "123456789012"
REGION = "eu-west-1"
HOSTED_ZONE_ID = "Z23ABC4XYZL05B"


def hosted_zone_context(
  domain_name: str = "example.com",
  account: str = ACCOUNT,
  region: str = REGION,
) -> dict[str, object]:
  """Context that satisfies HostedZone.from_lookup without AWS calls."""
  key = f"hosted-zone:account={account}:domainName={domain_name}:region={region}"
  return {key: {"Id": f"/hostedzone/{HOSTED_ZONE_ID}", "Name": f"{domain_name}."}}


@pytest.fixture
def asset_dir(tmp_path: Path) -> Path:
  """Pre-built site bundle for BucketDeployment."""
  dist = tmp_path / "dist"
  dist.mkdir()
  (dist / "index.html").write_text("<html><body>home</body></html>")
  (dist / "error.html").write_text("<html><body>error</body></html>")
  return dist


@pytest.fixture
def app() -> cdk.App:
  """Create a CDK App with the hosted zone lookup pre-resolved."""
  return cdk.App(context=hosted_zone_context())


@pytest.fixture
def stack(app: cdk.App) -> cdk.Stack:
  """Create a CDK Stack for testing."""
  return cdk.Stack(
    app, "TestStack", env=cdk.Environment(account=ACCOUNT, region=REGION)
  )
