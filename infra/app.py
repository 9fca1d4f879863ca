#!/usr/bin/env python3
"""
CDK Application Entry Point

Movies API - Lambda + API Gateway + DynamoDB をデプロイ。
"""
import os
import aws_cdk as cdk

from infra.stacks.movies_api_stack import MoviesApiStack

app = cdk.App()

# 環境設定
env = cdk.Environment(
    account=os.environ.get('CDK_DEFAULT_ACCOUNT'),
    region=os.environ.get('CDK_DEFAULT_REGION', 'ap-northeast-1'),
)

MoviesApiStack(
    app,
    'MoviesApiStack',
    env=env,
    description='Movies API - Serverless CRUD on DynamoDB',
)

app.synth()
