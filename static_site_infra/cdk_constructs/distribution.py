"""CloudFront web distribution for the static website."""

from aws_cdk import aws_certificatemanager as acm
from aws_cdk import aws_cloudfront as cloudfront
from aws_cdk import aws_s3 as s3
from constructs import Construct

from .access_identity import SiteAccessIdentity

MINIMUM_PROTOCOL_VERSION = cloudfront.SecurityPolicyProtocol.TLS_V1_1_2016


class CloudFrontDistribution(Construct):
  """CloudFront distribution reading the bucket through an origin access identity."""

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    bucket: s3.IBucket,
    access_identity: SiteAccessIdentity,
    certificate: acm.ICertificate,
    domain_name: str,
  ) -> None:
    super().__init__(scope, id)

    viewer_certificate = cloudfront.ViewerCertificate.from_acm_certificate(
      certificate,
      ssl_method=cloudfront.SSLMethod.SNI,
      security_policy=MINIMUM_PROTOCOL_VERSION,
      aliases=[domain_name],
    )

    self.distribution = cloudfront.CloudFrontWebDistribution(
      self,
      "Distribution",
      viewer_certificate=viewer_certificate,
      origin_configs=[
        cloudfront.SourceConfiguration(
          s3_origin_source=cloudfront.S3OriginConfig(
            s3_bucket_source=bucket,
            origin_access_identity=access_identity.identity,
          ),
          behaviors=[
            cloudfront.Behavior(
              is_default_behavior=True,
              compress=True,
              allowed_methods=cloudfront.CloudFrontAllowedMethods.GET_HEAD_OPTIONS,
            )
          ],
        )
      ],
    )
