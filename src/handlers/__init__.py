"""
Lambda Handlers for Movies API

サーバレス構成のエントリポイント:
- Movies (API Gateway → DynamoDB)
"""
