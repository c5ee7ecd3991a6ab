"""CloudFront Origin Access Identity for private bucket reads."""

from aws_cdk import aws_cloudfront as cloudfront
from constructs import Construct


class SiteAccessIdentity(Construct):
  """Origin Access Identity the distribution uses to read from the bucket."""

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    comment: str,
  ) -> None:
    super().__init__(scope, id)

    self.identity = cloudfront.OriginAccessIdentity(
      self,
      "Identity",
      comment=comment,
    )

  @property
  def canonical_user_id(self) -> str:
    """S3 canonical user id of the identity, used as a policy principal."""
    return self.identity.cloud_front_origin_access_identity_s3_canonical_user_id
