"""Route 53 DNS constructs."""

from aws_cdk import aws_cloudfront as cloudfront
from aws_cdk import aws_route53 as route53
from aws_cdk import aws_route53_targets as targets
from constructs import Construct


class DnsRecords(Construct):
  """Existing Route 53 hosted zone and the site's alias record."""

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    domain_name: str,
    resource_prefix: str = "",
  ) -> None:
    super().__init__(scope, id)

    self.domain_name = domain_name
    self._resource_prefix = resource_prefix

    # Lookup errors are not caught: a missing zone aborts synthesis.
    self.hosted_zone = route53.HostedZone.from_lookup(
      self,
      f"{resource_prefix}-hosted-zone" if resource_prefix else "HostedZone",
      domain_name=domain_name,
    )

  def create_cloudfront_record(
    self,
    distribution: cloudfront.IDistribution,
    record_name: str,
    resource_prefix: str = "",
  ) -> route53.ARecord:
    """Create an A record aliasing ``record_name`` to the distribution."""
    prefix = resource_prefix or self._resource_prefix
    self.alias_record = route53.ARecord(
      self,
      f"{prefix}-alias-record" if prefix else "AliasRecord",
      zone=self.hosted_zone,
      record_name=record_name,
      target=route53.RecordTarget.from_alias(targets.CloudFrontTarget(distribution)),
    )
    return self.alias_record
