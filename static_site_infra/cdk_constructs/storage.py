"""S3 bucket for static website hosting."""

from aws_cdk import Annotations, RemovalPolicy
from aws_cdk import aws_iam as iam
from aws_cdk import aws_s3 as s3
from constructs import Construct

from .access_identity import SiteAccessIdentity


class StorageBucket(Construct):
  """S3 bucket configured for static website hosting."""

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    bucket_name: str,
    removal_policy: RemovalPolicy = RemovalPolicy.RETAIN,
  ) -> None:
    super().__init__(scope, id)

    self.bucket = s3.Bucket(
      self,
      "Bucket",
      bucket_name=bucket_name,
      website_index_document="index.html",
      website_error_document="error.html",
      public_read_access=True,
      block_public_access=s3.BlockPublicAccess(
        block_public_acls=False,
        ignore_public_acls=False,
        block_public_policy=False,
        restrict_public_buckets=False,
      ),
      removal_policy=removal_policy,
      auto_delete_objects=removal_policy == RemovalPolicy.DESTROY,
    )

  def grant_origin_access(self, access_identity: SiteAccessIdentity) -> None:
    """Allow the given Origin Access Identity to read every object."""
    self.bucket.add_to_resource_policy(
      iam.PolicyStatement(
        actions=["s3:GetObject"],
        resources=[self.bucket.arn_for_objects("*")],
        principals=[iam.CanonicalUserPrincipal(access_identity.canonical_user_id)],
      )
    )

    # Both grants stay in place; the overlap is surfaced rather than resolved.
    Annotations.of(self).add_warning(
      "Bucket is public-read and also restricted to the CloudFront origin "
      "access identity; direct S3 reads bypass the distribution."
    )
