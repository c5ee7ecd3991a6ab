#!/usr/bin/env python3
"""CDK application entry point for static website infrastructure."""

import sys
from pathlib import Path

# Add the project root to the Python path
sys.path.insert(0, str(Path(__file__).parent.parent))

import aws_cdk as cdk

from static_site_infra.config import StackConfig, target_environment
from static_site_infra.stacks.site_stack import StaticSiteStack

STACK_NAME = "S3AngularStack"


def main(app: cdk.App | None = None) -> StaticSiteStack:
  """Create CDK app with the static site stack."""
  if app is None:
    app = cdk.App()

  # Missing or malformed context aborts before any resource is built
  config = StackConfig.from_context(app.node)

  stack = StaticSiteStack(
    app,
    STACK_NAME,
    stack_config=config,
    env=target_environment(config),
    description=f"Static website infrastructure for {config.site_domain}",
  )

  app.synth()
  return stack


if __name__ == "__main__":
  main()
