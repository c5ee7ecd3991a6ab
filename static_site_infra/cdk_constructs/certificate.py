"""ACM certificate with DNS validation."""

from aws_cdk import aws_certificatemanager as acm
from aws_cdk import aws_route53 as route53
from constructs import Construct

# CloudFront only reads viewer certificates from this region.
CERTIFICATE_REGION = "us-east-1"


class DnsValidatedCertificate(Construct):
  """ACM certificate with DNS validation, always issued in us-east-1."""

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    domain_name: str,
    hosted_zone: route53.IHostedZone,
  ) -> None:
    super().__init__(scope, id)

    self.certificate = acm.DnsValidatedCertificate(
      self,
      "Certificate",
      domain_name=domain_name,
      hosted_zone=hosted_zone,
      region=CERTIFICATE_REGION,
    )
