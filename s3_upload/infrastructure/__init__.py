"""
Infrastructure layer - external service integrations.

- storage: S3 object storage (boto3) and its in-memory mock
"""
