"""CDK constructs for static website infrastructure."""

from .access_identity import SiteAccessIdentity
from .certificate import CERTIFICATE_REGION, DnsValidatedCertificate
from .distribution import CloudFrontDistribution
from .dns import DnsRecords
from .site_content import SiteContent
from .static_site import StaticSiteConstruct
from .storage import StorageBucket

__all__ = [
  "CERTIFICATE_REGION",
  "CloudFrontDistribution",
  "DnsRecords",
  "DnsValidatedCertificate",
  "SiteAccessIdentity",
  "SiteContent",
  "StaticSiteConstruct",
  "StorageBucket",
]
