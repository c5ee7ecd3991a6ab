"""Deployment of the pre-built site bundle to the S3 bucket."""

from aws_cdk import aws_cloudfront as cloudfront
from aws_cdk import aws_s3 as s3
from aws_cdk import aws_s3_deployment as s3_deploy
from constructs import Construct


class SiteContent(Construct):
  """Uploads a local asset directory and invalidates the whole distribution."""

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    bucket: s3.IBucket,
    distribution: cloudfront.IDistribution,
    asset_path: str,
    resource_prefix: str,
  ) -> None:
    super().__init__(scope, id)

    self.deployment = s3_deploy.BucketDeployment(
      self,
      f"{resource_prefix}-deployment",
      sources=[s3_deploy.Source.asset(asset_path)],
      destination_bucket=bucket,
      distribution=distribution,
      distribution_paths=["/*"],
    )
