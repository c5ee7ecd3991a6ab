"""Main composite construct for complete static website infrastructure."""

from aws_cdk import RemovalPolicy, Stack
from constructs import Construct

from .access_identity import SiteAccessIdentity
from .certificate import DnsValidatedCertificate
from .distribution import CloudFrontDistribution
from .dns import DnsRecords
from .site_content import SiteContent
from .storage import StorageBucket


class StaticSiteConstruct(Construct):
  """Complete static website infrastructure for ``<sub_domain>.<domain_name>``.

  Creates, in dependency order:
  - CloudFront Origin Access Identity
  - Route 53 hosted zone lookup for the parent domain
  - S3 bucket named after the parent domain, readable by the identity
  - ACM certificate (DNS validated, us-east-1)
  - CloudFront web distribution with HTTPS
  - A record aliasing the site domain to the distribution
  - Deployment of the site bundle with a full invalidation
  """

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    sub_domain: str,
    domain_name: str,
    asset_path: str,
    removal_policy: RemovalPolicy = RemovalPolicy.RETAIN,
  ) -> None:
    super().__init__(scope, id)

    # Get the stack name for resource prefixing
    stack_name = Stack.of(self).stack_name
    self.site_domain = f"{sub_domain}.{domain_name}"

    self.access_identity = SiteAccessIdentity(
      self,
      f"{stack_name}-oai",
      comment=f"OAI for {stack_name}",
    )

    self.dns = DnsRecords(
      self,
      f"{stack_name}-dns",
      domain_name=domain_name,
      resource_prefix=stack_name,
    )

    # Storage - bucket name is the parent domain
    self.bucket = StorageBucket(
      self,
      f"{stack_name}-bucket",
      bucket_name=domain_name,
      removal_policy=removal_policy,
    )
    self.bucket.grant_origin_access(self.access_identity)

    self.certificate = DnsValidatedCertificate(
      self,
      f"{stack_name}-certificate",
      domain_name=self.site_domain,
      hosted_zone=self.dns.hosted_zone,
    )

    self.distribution = CloudFrontDistribution(
      self,
      f"{stack_name}-distribution",
      bucket=self.bucket.bucket,
      access_identity=self.access_identity,
      certificate=self.certificate.certificate,
      domain_name=self.site_domain,
    )

    self.dns.create_cloudfront_record(
      distribution=self.distribution.distribution,
      record_name=self.site_domain,
      resource_prefix=stack_name,
    )

    self.content = SiteContent(
      self,
      f"{stack_name}-content",
      bucket=self.bucket.bucket,
      distribution=self.distribution.distribution,
      asset_path=asset_path,
      resource_prefix=stack_name,
    )
