"""
API Stack

API Gateway (REST) for the movies Lambda function.
"""
from aws_cdk import (
    NestedStack,
    aws_apigateway as apigw,
    aws_lambda as lambda_,
)
from constructs import Construct


class ApiStack(NestedStack):
    """API Gateway スタック。"""

    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        movies_fn: lambda_.IFunction,
        **kwargs
    ) -> None:
        super().__init__(scope, construct_id, **kwargs)

        # =================================================================
        # REST API
        # =================================================================

        self.api = apigw.RestApi(
            self, 'MoviesApi',
            rest_api_name='movies-api',
            description='Movies REST API (Serverless)',
            deploy_options=apigw.StageOptions(
                stage_name='v1',
                logging_level=apigw.MethodLoggingLevel.INFO,
                metrics_enabled=True,
                throttling_rate_limit=100,
                throttling_burst_limit=50,
            ),
            default_cors_preflight_options=apigw.CorsOptions(
                allow_origins=apigw.Cors.ALL_ORIGINS,
                allow_methods=apigw.Cors.ALL_METHODS,
                allow_headers=['Content-Type'],
            ),
        )

        integration = apigw.LambdaIntegration(movies_fn)

        # =================================================================
        # Movies Endpoints
        # =================================================================

        movies_resource = self.api.root.add_resource('movies')

        # GET /movies?page=n - List (3 件/ページ)
        movies_resource.add_method('GET', integration)

        # POST /movies - Create, PUT /movies - Update, DELETE /movies - Delete
        for method in ('POST', 'PUT', 'DELETE'):
            movies_resource.add_method(method, integration)

        # GET /movies/{id} - Find one
        movie_resource = movies_resource.add_resource('{id}')
        movie_resource.add_method('GET', integration)

        # =================================================================
        # Outputs
        # =================================================================

        self.api_url = self.api.url
