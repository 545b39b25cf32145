import json

from aws_cdk import (
    aws_apigateway as apigw,
)
from constructs import Construct

CORS_ORIGIN_HEADER = "method.response.header.Access-Control-Allow-Origin"


class MockApi(Construct):
    """REST API with a single GET resource answered by a mock integration.

    The response body is fixed at synth time, so no Lambda is involved.
    The API is deployed through an explicit deployment and named stage.
    """

    def __init__(self, scope: Construct, construct_id: str,
                 stage_name: str = "v1",
                 resource_path: str = "hello",
                 message: str = "Hello World!") -> None:
        super().__init__(scope, construct_id)

        self.api = apigw.RestApi(self, "simple-api",
                                 cloud_watch_role=True,
                                 description="A simple CORS compliant API",
                                 endpoint_types=[apigw.EndpointType.REGIONAL],
                                 deploy=False)

        self.resource = self.api.root.add_resource(resource_path)

        integration = apigw.MockIntegration(
            integration_responses=[
                apigw.IntegrationResponse(
                    status_code="200",
                    selection_pattern="200",
                    response_parameters={CORS_ORIGIN_HEADER: "'*'"},
                    response_templates={"application/json": json.dumps({"message": message})},
                )
            ],
            request_templates={"application/json": json.dumps({"statusCode": 200})},
            passthrough_behavior=apigw.PassthroughBehavior.WHEN_NO_MATCH)

        self.method = self.resource.add_method(
            "GET", integration,
            authorization_type=apigw.AuthorizationType.NONE,
            api_key_required=False,
            method_responses=[
                apigw.MethodResponse(
                    status_code="200",
                    response_parameters={CORS_ORIGIN_HEADER: True},
                    response_models={"application/json": apigw.Model.EMPTY_MODEL},
                )
            ])

        # Explicit deployment must not be created before the method exists
        self.deployment = apigw.Deployment(self, "simple-api-deploy", api=self.api)
        self.deployment.node.add_dependency(self.method)

        self.stage = apigw.Stage(self, f"simple-api-stage-{stage_name}",
                                 deployment=self.deployment,
                                 stage_name=stage_name)

    @property
    def endpoint_url(self) -> str:
        return self.stage.url_for_path(self.resource.path)
