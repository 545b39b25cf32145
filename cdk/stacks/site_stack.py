from aws_cdk import (
    Stack,
    CfnOutput,
    Duration,
    RemovalPolicy,
    aws_s3 as s3,
    aws_cloudfront as cf,
    aws_cloudfront_origins as origins,
    aws_certificatemanager as acm,
    aws_route53 as route53,
    aws_route53_targets as targets,
    aws_s3_deployment as s3deploy,
    aws_iam as iam,
)
from constructs import Construct

from stacks.config import SiteConfig
from stacks.mock_api import MockApi
from stacks.naming import unique_id


class SpaSiteStack(Stack):
    def __init__(self, scope: Construct, construct_id: str,
                 config: SiteConfig,
                 **kwargs) -> None:
        super().__init__(scope, construct_id, **kwargs)

        self.unique_id = unique_id()
        site_domain = config.site_domain

        zone = route53.HostedZone.from_lookup(self, "rd-hostedzone",
                                              domain_name=config.domain_name)

        oai = cf.OriginAccessIdentity(self, "cf-sample-oai",
                                      comment=f"OAI for {self.stack_name}")

        # REST API with a mocked /hello endpoint
        self.api = MockApi(self, "MockApi", stage_name=config.api_stage_name)

        # Site bucket, only readable through the OAI
        self.bucket = s3.Bucket(self, "site-bucket",
                                bucket_name=site_domain,
                                public_read_access=False,
                                block_public_access=s3.BlockPublicAccess.BLOCK_ALL,
                                removal_policy=RemovalPolicy.DESTROY,
                                auto_delete_objects=True)

        self.bucket.add_to_resource_policy(
            iam.PolicyStatement(
                actions=["s3:GetObject"],
                resources=[self.bucket.arn_for_objects("*")],
                principals=[iam.CanonicalUserPrincipal(
                    oai.cloud_front_origin_access_identity_s3_canonical_user_id)]
            )
        )

        # Pre-issued ACM certificate (must live in us-east-1 for CloudFront)
        certificate = acm.Certificate.from_certificate_arn(self, "my-cert", config.certificate_arn)

        s3_origin = origins.S3BucketOrigin.with_origin_access_identity(
            self.bucket, origin_access_identity=oai)

        self.distribution = cf.Distribution(
            self, "SiteDistribution",
            certificate=certificate,
            default_root_object="index.html",
            domain_names=[site_domain],
            minimum_protocol_version=cf.SecurityPolicyProtocol.TLS_V1_2_2021,
            error_responses=[
                cf.ErrorResponse(http_status=403,
                                 response_http_status=403,
                                 response_page_path="/error.html",
                                 ttl=Duration.minutes(30))
            ],
            default_behavior=cf.BehaviorOptions(
                origin=s3_origin,
                compress=True,
                allowed_methods=cf.AllowedMethods.ALLOW_GET_HEAD_OPTIONS,
                viewer_protocol_policy=cf.ViewerProtocolPolicy.REDIRECT_TO_HTTPS,
            ))

        self.record = route53.ARecord(self, "site-alias-record",
                                      record_name=site_domain,
                                      target=route53.RecordTarget.from_alias(
                                          targets.CloudFrontTarget(self.distribution)),
                                      zone=zone)

        # Upload site contents and invalidate everything on each deploy
        self.deployment = s3deploy.BucketDeployment(self, "deploy-site",
                                                    sources=[s3deploy.Source.asset(config.site_contents_path)],
                                                    destination_bucket=self.bucket,
                                                    distribution=self.distribution,
                                                    distribution_paths=["/*"])

        CfnOutput(self, "api-stage-endpoint",
                  description="API Stage Endpoint",
                  value=self.api.endpoint_url)
        CfnOutput(self, "cf-dist-name",
                  description="CloudFront Distribution Name",
                  value=self.distribution.distribution_domain_name)
