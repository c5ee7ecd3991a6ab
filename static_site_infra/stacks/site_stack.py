"""CDK stack for a single static website."""

from typing import Any

import aws_cdk as cdk
from constructs import Construct

from static_site_infra.cdk_constructs import StaticSiteConstruct
from static_site_infra.config import StackConfig


class StaticSiteStack(cdk.Stack):
  """Stack for a single static website."""

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    stack_config: StackConfig,
    **kwargs: Any,
  ) -> None:
    # An empty account or region makes the environment unparseable
    stack_config.require_environment()

    super().__init__(scope, id, **kwargs)

    self.site = StaticSiteConstruct(
      self,
      "Site",
      sub_domain=stack_config.sub_domain,
      domain_name=stack_config.domain_name,
      asset_path=stack_config.asset_path,
      removal_policy=stack_config.removal_policy,
    )

    # Outputs
    cdk.CfnOutput(
      self,
      "HostedZoneId",
      value=self.site.dns.hosted_zone.hosted_zone_id,
      description="Route 53 hosted zone ID",
    )
    cdk.CfnOutput(
      self,
      "MyBucketName",
      value=self.site.bucket.bucket.bucket_domain_name,
      description="S3 bucket domain name",
    )
    cdk.CfnOutput(
      self,
      "Certificate",
      value=self.site.certificate.certificate.certificate_arn,
      description="ACM certificate ARN",
    )
    cdk.CfnOutput(
      self,
      "CloudFrontWebDistributionId",
      value=self.site.distribution.distribution.distribution_id,
      description="CloudFront distribution ID",
    )
    cdk.CfnOutput(
      self,
      "Mys3BucketDeployment",
      value=self.site.content.deployment.node.id,
      description="Bucket deployment construct ID",
    )

    cdk.Tags.of(self).add("Project", "static-site")
    cdk.Tags.of(self).add("Domain", self.site.site_domain)
    for key, value in stack_config.tags.items():
      cdk.Tags.of(self).add(key, value)
