#!/usr/bin/env python3
"""Print the outputs of a deployed static site stack."""

import argparse
import json
import sys

import boto3
from botocore.exceptions import ClientError

DEFAULT_STACK_NAME = "S3AngularStack"


def get_stack_outputs(stack_name: str, region: str | None = None) -> dict[str, str]:
  """Retrieve CloudFormation outputs for a stack.

  Args:
    stack_name: The deployed stack name (e.g., 'S3AngularStack')
    region: AWS region, or None for the default from the environment

  Returns:
    Dictionary mapping output keys (HostedZoneId, MyBucketName, ...) to values
  """
  cloudformation = boto3.client("cloudformation", region_name=region)

  response = cloudformation.describe_stacks(StackName=stack_name)
  stacks = response.get("Stacks", [])
  if not stacks:
    raise LookupError(f"Stack not found: {stack_name}")

  return {
    output["OutputKey"]: output["OutputValue"]
    for output in stacks[0].get("Outputs", [])
  }


def format_outputs(outputs: dict[str, str], output_format: str) -> str:
  """Render outputs as env lines, shell exports or JSON."""
  if output_format == "json":
    return json.dumps(outputs, indent=2)
  if output_format == "export":
    return "\n".join(f"export {key}={value}" for key, value in outputs.items())
  return "\n".join(f"{key}={value}" for key, value in outputs.items())


def main(argv: list[str] | None = None) -> None:
  """Main entry point."""
  parser = argparse.ArgumentParser(
    description="Print the outputs of a deployed static site stack"
  )
  parser.add_argument(
    "stack_name",
    nargs="?",
    default=DEFAULT_STACK_NAME,
    help=f"CloudFormation stack name (default: {DEFAULT_STACK_NAME})",
  )
  parser.add_argument(
    "--region",
    default=None,
    help="AWS region (default: from AWS_REGION / profile)",
  )
  parser.add_argument(
    "--format",
    choices=["env", "json", "export"],
    default="env",
    help="Output format (default: env)",
  )

  args = parser.parse_args(argv)

  try:
    outputs = get_stack_outputs(args.stack_name, args.region)
  except (ClientError, LookupError) as e:
    print(f"Error retrieving stack outputs: {e}", file=sys.stderr)
    sys.exit(1)

  print(format_outputs(outputs, args.format))


if __name__ == "__main__":
  main()
