"""Configuration loader for the static site stack."""

import os
import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import aws_cdk as cdk
import yaml
from aws_cdk import RemovalPolicy
from constructs import Node

DEFAULT_ASSET_PATH = "simple-angular-app/dist"

_LABEL_RE = re.compile(r"^[a-z0-9](?:[a-z0-9-]{0,61}[a-z0-9])?$")

_REMOVAL_POLICIES = {
  "retain": RemovalPolicy.RETAIN,
  "destroy": RemovalPolicy.DESTROY,
  "snapshot": RemovalPolicy.SNAPSHOT,
}


class ConfigError(ValueError):
  """Raised when stack inputs are missing or malformed."""


def _check_domain(name: str, value: object) -> str:
  if value is None or value == "":
    raise ConfigError(f"Missing required value: {name}")
  if not isinstance(value, str):
    raise ConfigError(f"Invalid {name} {value!r}: expected a string")
  # Bucket names are lower case only
  labels = value.split(".")
  for label in labels:
    if not _LABEL_RE.match(label):
      raise ConfigError(f"Invalid {name} {value!r}: bad label {label!r}")
  return value


def parse_removal_policy(value: str | RemovalPolicy) -> RemovalPolicy:
  """Convert a removal policy name (retain/destroy/snapshot) to the enum."""
  if isinstance(value, RemovalPolicy):
    return value
  if not isinstance(value, str):
    raise ConfigError(f"Unknown removal_policy: {value!r}")
  try:
    return _REMOVAL_POLICIES[value.lower()]
  except KeyError:
    raise ConfigError(f"Unknown removal_policy: {value!r}") from None


def load_yaml_defaults(path: Path | str) -> dict[str, Any]:
  """Load optional stack defaults from a YAML file."""
  path = Path(path)
  if not path.is_file():
    raise ConfigError(f"Config file not found: {path}")
  with open(path) as f:
    data = yaml.safe_load(f) or {}
  if not isinstance(data, dict):
    raise ConfigError(f"Config file {path} must contain a mapping")
  return data


@dataclass(frozen=True)
class StackConfig:
  """Inputs for a single static site stack."""

  sub_domain: str
  domain_name: str
  account: str = ""
  region: str = ""
  asset_path: str = DEFAULT_ASSET_PATH
  removal_policy: RemovalPolicy = RemovalPolicy.RETAIN
  tags: dict[str, str] = field(default_factory=dict)

  def __post_init__(self) -> None:
    self.validate()

  @property
  def site_domain(self) -> str:
    """Fully qualified domain served by the distribution."""
    return f"{self.sub_domain}.{self.domain_name}"

  def validate(self) -> None:
    """Fail fast on inputs that would produce a broken stack."""
    _check_domain("subDomain", self.sub_domain)
    _check_domain("domainName", self.domain_name)
    if not Path(self.asset_path).is_dir():
      raise ConfigError(f"Asset directory not found: {self.asset_path}")

  def require_environment(self) -> None:
    """Reject an empty deployment target before any construct is built."""
    missing = [
      name
      for name, value in (("AWS_ACCOUNT", self.account), ("AWS_REGION", self.region))
      if not value
    ]
    if missing:
      raise ConfigError(
        f"Missing deployment target: set {', '.join(missing)} in the environment"
      )

  @classmethod
  def from_context(
    cls,
    node: Node,
    environ: Mapping[str, str] | None = None,
  ) -> "StackConfig":
    """Build the config from CDK context and the process environment.

    Context keys ``subDomain``, ``domainName`` and ``assetPath`` win over
    values from the optional YAML file named by the ``config`` context key.
    The target account and region come from ``AWS_ACCOUNT`` and
    ``AWS_REGION``; missing variables leave the fields empty.
    """
    if environ is None:
      environ = os.environ

    config_path = node.try_get_context("config")
    defaults = load_yaml_defaults(config_path) if config_path else {}

    sub_domain = node.try_get_context("subDomain") or defaults.get("sub_domain")
    domain_name = node.try_get_context("domainName") or defaults.get("domain_name")
    asset_path = (
      node.try_get_context("assetPath")
      or defaults.get("asset_path")
      or DEFAULT_ASSET_PATH
    )

    tags = defaults.get("tags") or {}
    if not isinstance(tags, dict):
      raise ConfigError(f"tags must be a mapping, got {tags!r}")

    return cls(
      sub_domain=sub_domain,
      domain_name=domain_name,
      account=environ.get("AWS_ACCOUNT", ""),
      region=environ.get("AWS_REGION", ""),
      asset_path=str(asset_path),
      removal_policy=parse_removal_policy(defaults.get("removal_policy", "retain")),
      tags={str(k): str(v) for k, v in tags.items()},
    )


def target_environment(config: StackConfig) -> cdk.Environment:
  """Deployment target for the stack; empty values are passed through as-is."""
  return cdk.Environment(account=config.account, region=config.region)
